def build_colors(palette):
    """Build the workbench color map for a VS Code theme from a palette.

    Args:
        palette: dict from generate_theme_palette

    Returns:
        dict of color role -> hex string, in a fixed key order
    """
    p = palette
    background = p["background"]
    foreground = p["foreground"]

    return {
        # Editor
        "editor.background": background,
        "editor.foreground": foreground,
        "editorLineNumber.foreground": p["fore4"],
        "editorLineNumber.activeForeground": p["palette1"],
        "editorCursor.foreground": p["palette1"],
        # Activity bar
        "activityBar.background": p["back2"],
        "activityBar.foreground": foreground,
        "activityBar.inactiveForeground": p["fore4"],
        # Sidebar
        "sideBar.background": p["back2"],
        "sideBar.foreground": foreground,
        "sideBarTitle.foreground": foreground,
        # Status bar
        "statusBar.background": p["back3"],
        "statusBar.foreground": foreground,
        "statusBar.noFolderBackground": p["back3"],
        # Title bar
        "titleBar.activeBackground": p["back2"],
        "titleBar.activeForeground": foreground,
        "titleBar.inactiveBackground": p["back2"],
        "titleBar.inactiveForeground": p["fore4"],
        # Tabs
        "tab.activeBackground": background,
        "tab.activeForeground": foreground,
        "tab.inactiveBackground": p["back3"],
        "tab.inactiveForeground": p["fore4"],
        "tab.border": p["back5"],
        "editorGroupHeader.tabsBackground": p["back3"],
        # Selection
        "editor.selectionBackground": p["back3"],
        "editor.selectionHighlightBackground": p["back3"],
        "editor.lineHighlightBackground": p["back2"],
        # Search
        "editor.findMatchBackground": p["warn_bg"],
        "editor.findMatchHighlightBackground": p["neutral_bg"],
        "searchEditor.findMatchBackground": p["warn_bg"],
        # Diff
        "diffEditor.insertedTextBackground": f"{p['good_bg']}40",
        "diffEditor.removedTextBackground": f"{p['bad_bg']}40",
        # Git
        "gitDecoration.modifiedResourceForeground": p["neutral"],
        "gitDecoration.deletedResourceForeground": p["bad"],
        "gitDecoration.untrackedResourceForeground": p["good"],
        "gitDecoration.ignoredResourceForeground": p["fore4"],
        "gitDecoration.conflictingResourceForeground": p["warn"],
        # Lists and trees
        "list.activeSelectionBackground": p["back4"],
        "list.activeSelectionForeground": foreground,
        "list.inactiveSelectionBackground": p["back3"],
        "list.hoverBackground": p["back3"],
        "list.focusBackground": p["back3"],
        # Inputs
        "input.background": p["back2"],
        "input.foreground": foreground,
        "input.border": p["back5"],
        "inputOption.activeBorder": p["palette1"],
        # Dropdown
        "dropdown.background": p["back3"],
        "dropdown.foreground": foreground,
        "dropdown.border": p["back5"],
        # Buttons
        "button.background": p["palette1"],
        "button.foreground": background,
        "button.hoverBackground": p["palette2"],
        # Panels
        "panel.background": background,
        "panel.border": p["back5"],
        "panelTitle.activeForeground": foreground,
        "panelTitle.inactiveForeground": p["fore4"],
        # Terminal
        "terminal.background": background,
        "terminal.foreground": foreground,
        "terminal.ansiBlack": background,
        "terminal.ansiWhite": foreground,
        "terminal.ansiRed": p["bad"],
        "terminal.ansiGreen": p["good"],
        "terminal.ansiYellow": p["warn"],
        "terminal.ansiBlue": p["palette5"],
        "terminal.ansiMagenta": p["palette2"],
        "terminal.ansiCyan": p["palette3"],
        # Notifications
        "notificationCenter.border": p["back5"],
        "notificationCenterHeader.background": p["back3"],
        "notifications.background": p["back3"],
        "notifications.foreground": foreground,
        "notifications.border": p["back5"],
        # Borders
        "contrastBorder": p["back5"],
        "focusBorder": p["palette1"],
        # Scrollbar
        "scrollbarSlider.background": f"{p['back4']}80",
        "scrollbarSlider.hoverBackground": f"{p['back5']}A0",
        "scrollbarSlider.activeBackground": f"{p['back5']}C0",
    }


def _rule(scopes, foreground=None, font_style=None):
    settings = {}
    if foreground is not None:
        settings["foreground"] = foreground
    if font_style is not None:
        settings["fontStyle"] = font_style
    return {"scope": list(scopes), "settings": settings}


def build_token_colors(palette):
    """Build the ordered tokenColors rules (syntax scopes) from a palette."""
    p = palette
    return [
        _rule(["comment", "punctuation.definition.comment"], p["fore4"], "italic"),
        _rule(["string", "string.quoted"], p["palette3"]),
        _rule(
            ["constant.numeric", "constant.language", "constant.character"],
            p["palette5"],
        ),
        _rule(["keyword", "storage.type", "storage.modifier"], p["palette6"]),
        _rule(["keyword.control", "keyword.operator"], p["palette2"]),
        _rule(["entity.name.function", "support.function"], p["palette1"]),
        _rule(
            [
                "entity.name.type",
                "entity.name.class",
                "support.type",
                "support.class",
            ],
            p["palette1"],
        ),
        _rule(["variable", "variable.other", "variable.parameter"], p["fore2"]),
        _rule(["entity.other.attribute-name"], p["palette4"]),
        _rule(["support.type.property-name"], p["fore2"]),
        _rule(["punctuation.definition.tag", "punctuation.separator"], p["fore2"]),
        _rule(["entity.name.tag"], p["palette2"]),
        _rule(["markup.heading"], p["palette1"], "bold"),
        _rule(["markup.italic"], font_style="italic"),
        _rule(["markup.bold"], font_style="bold"),
        _rule(["markup.underline"], font_style="underline"),
        _rule(["markup.inline.raw"], p["palette3"]),
        _rule(["invalid", "invalid.illegal"], p["bad"]),
    ]
