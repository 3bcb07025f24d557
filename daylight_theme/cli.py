import argparse
import os

from . import switcher
from .config import ThemeConfig
from .export import create_html_preview, export_themes, generate_readability_report
from .palette import ContrastError, generate_theme_palette, load_config_from_json
from .palette.loader import validate_hour
from .vscode import generate_vscode_theme

DEFAULT_SETTINGS_PATH = os.path.join("~", ".config", "daylight-theme", "settings.json")
DEFAULT_EDITOR_SETTINGS_PATH = os.path.join(
    "~", ".config", "Code", "User", "settings.json"
)


def _hour(value):
    try:
        return validate_hour(int(value))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid hour: {value!r} (expected 0-23)"
        ) from None


def build_parser():
    parser = argparse.ArgumentParser(
        prog="daylight-theme",
        description="Generate editor color themes that follow the time of day",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Write all 24 hourly themes")
    generate.add_argument(
        "--output", "-o",
        metavar="DIR",
        default="themes",
        help="Output directory (default: ./themes)",
    )  # fmt: skip
    generate.add_argument(
        "--config",
        metavar="JSON",
        help="JSON file with base/tint/contrast overrides",
    )
    generate.add_argument(
        "--preview",
        action="store_true",
        help="Also write an HTML preview of every hour",
    )
    generate.add_argument(
        "--report",
        action="store_true",
        help="Also write a readability report per hour",
    )

    show = subparsers.add_parser("show", help="Print the theme JSON for one hour")
    show.add_argument("hour", type=_hour, help="Hour of day (0-23)")
    show.add_argument("--config", metavar="JSON", help="Overrides JSON file")

    subparsers.add_parser("hours", help="List hours and whether each is dark or light")

    for name, help_text in [
        ("status", "Show the current switching state"),
        ("lock", "Lock the theme to one hour"),
        ("unlock", "Follow the clock again"),
        ("auto", "Turn automatic switching on or off"),
        ("switch", "Apply the current hour's theme once"),
        ("watch", "Keep the theme in step with the clock"),
    ]:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--settings",
            metavar="PATH",
            default=DEFAULT_SETTINGS_PATH,
            help="Switcher settings file",
        )
        if name == "lock":
            sub.add_argument("hour", type=_hour, help="Hour of day (0-23)")
        elif name == "auto":
            sub.add_argument("state", choices=["on", "off"])
        if name != "status":
            sub.add_argument(
                "--editor-settings",
                metavar="PATH",
                default=DEFAULT_EDITOR_SETTINGS_PATH,
                help="Editor settings.json to update",
            )
        if name == "watch":
            sub.add_argument(
                "--interval",
                type=float,
                default=switcher.CHECK_INTERVAL,
                help="Seconds between checks (default: 60)",
            )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        COMMANDS[args.command](args)
    except (OSError, ValueError, ContrastError) as e:
        parser.error(str(e))


def _load_config(args, hour=0):
    if args.config:
        return load_config_from_json(args.config, hour=hour)
    return ThemeConfig(hour=hour)


def _run_generate(args):
    output_dir = args.output
    config = _load_config(args)

    print(f"Generating themes into: {output_dir}")
    paths = export_themes(output_dir, config)

    extra_paths = []
    if args.preview:
        preview_path = os.path.join(output_dir, "preview.html")
        create_html_preview(preview_path, config)
        extra_paths.append(preview_path)

    issue_count = 0
    if args.report:
        for hour in range(24):
            hour_config = config._replace(hour=hour)
            report, issues = generate_readability_report(
                generate_theme_palette(hour_config), hour_config
            )
            issue_count += len(issues)
            report_path = os.path.join(
                output_dir, f"readability_report-{hour:02d}.txt"
            )
            with open(report_path, "w") as f:
                f.write(report)
            extra_paths.append(report_path)

    print("\n" + "=" * 60)
    print(f"Exported {len(paths)} themes")
    for path in extra_paths:
        print(f"  - {path}")
    if args.report:
        print(f"Readability issues: {issue_count}")
    print("=" * 60)


def _run_show(args):
    config = _load_config(args, hour=args.hour)._replace(hour=args.hour)
    print(generate_vscode_theme(config))


def _run_hours(args):
    for _, label, _ in switcher.hour_choices():
        print(label)


def _settings_path(args):
    return os.path.expanduser(args.settings)


def _run_status(args):
    settings = switcher.load_settings(_settings_path(args))
    print(switcher.status_text(settings))


def _apply(args):
    """Bring the editor in line with the settings just saved."""
    return switcher.check_and_switch(
        _settings_path(args), os.path.expanduser(args.editor_settings)
    )


def _run_lock(args):
    switcher.lock_hour(_settings_path(args), args.hour)
    print(f"Locked to {args.hour:02d}:00")
    _apply(args)


def _run_unlock(args):
    switcher.unlock(_settings_path(args))
    print("Reset to automatic based on current time")
    _apply(args)


def _run_auto(args):
    enabled = args.state == "on"
    switcher.set_auto_switch(_settings_path(args), enabled)
    print(f"Automatic switching {'enabled' if enabled else 'disabled'}")
    _apply(args)


def _run_switch(args):
    hour = _apply(args)
    if hour is None:
        print("Automatic switching is disabled")
    else:
        print(switcher.status_text(switcher.load_settings(_settings_path(args))))


def _run_watch(args):
    editor_settings = os.path.expanduser(args.editor_settings)
    print(f"Watching (every {args.interval:g}s), Ctrl+C to stop")
    try:
        switcher.watch(_settings_path(args), editor_settings, interval=args.interval)
    except KeyboardInterrupt:
        print("\nStopped")


COMMANDS = {
    "generate": _run_generate,
    "show": _run_show,
    "hours": _run_hours,
    "status": _run_status,
    "lock": _run_lock,
    "unlock": _run_unlock,
    "auto": _run_auto,
    "switch": _run_switch,
    "watch": _run_watch,
}


if __name__ == "__main__":
    main()
