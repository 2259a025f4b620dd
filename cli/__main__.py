#!/usr/bin/env python3
"""
Framefit CLI - Size the frame's character grid to fill the display.

Usage:
    framefit maximize [--dry-run] [--json] [--max-width=<px>] [--padding-width=<px>] [--padding-height=<px>]
    framefit restore [--dry-run] [--json]
    framefit compute --width=<px> --height=<px> --char-width=<px> --char-height=<px> [options]
    framefit detect [--json]
    framefit config [show|init|path|set]
    framefit --version
    framefit --help
"""

import argparse
import dataclasses
import json
import logging
import sys

from framefit import (
    WINDOW_SYSTEMS,
    DisplayGeometry,
    FrameSizer,
    FramefitConfig,
    FramefitError,
    WindowSystem,
    __version__,
    detect_window_system,
    get_config_path,
    load_config,
    save_config,
    select_host,
    setup_logging,
)

WINDOW_SYSTEM_CHOICES = [ws.value for ws in WindowSystem]


def get_window_system(args) -> WindowSystem | None:
    """Window system forced on the command line, if any."""
    if getattr(args, "window_system", None):
        return WindowSystem(args.window_system)
    return None


def print_result(result, args) -> None:
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    status = "applied" if result.applied else "not applied"
    print(f"Host: {result.host}")
    print(f"Action: {result.action.value} ({status})")
    if result.size:
        print(f"Size: {result.size.columns} columns x {result.size.rows} rows")
    if result.geometry:
        g = result.geometry
        print(f"Display: {g.width_pixels}x{g.height_pixels} px, "
              f"cell {g.char_cell_width_pixels}x{g.char_cell_height_pixels} px")


def print_error(message: str, args) -> None:
    if getattr(args, "json", False):
        print(json.dumps({"status": "error", "message": message}))
    else:
        print(f"Error: {message}", file=sys.stderr)


def cmd_maximize(args, config: FramefitConfig):
    """Maximize the frame."""
    display = config.display
    overrides = {}
    if args.max_width is not None:
        overrides["max_width"] = args.max_width
    if args.padding_width is not None:
        overrides["padding_width"] = args.padding_width
    if args.padding_height is not None:
        overrides["padding_height"] = args.padding_height
    if overrides:
        display = dataclasses.replace(display, **overrides)

    try:
        host = select_host(config, get_window_system(args))
        result = FrameSizer(display).maximize(host, dry_run=args.dry_run)
    except FramefitError as e:
        print_error(str(e), args)
        return 1

    print_result(result, args)
    return 0


def cmd_restore(args, config: FramefitConfig):
    """Restore the frame."""
    try:
        host = select_host(config, get_window_system(args))
        result = FrameSizer(config.display).restore(host, dry_run=args.dry_run)
    except FramefitError as e:
        print_error(str(e), args)
        return 1

    print_result(result, args)
    return 0


def cmd_compute(args, config: FramefitConfig):
    """Compute a frame size from explicit measurements, no host involved."""
    if args.char_width <= 0 or args.char_height <= 0:
        print_error("character cell size must be positive", args)
        return 1

    display = config.display
    geometry = DisplayGeometry(
        width_pixels=args.width,
        height_pixels=args.height,
        char_cell_width_pixels=args.char_width,
        char_cell_height_pixels=args.char_height,
        padding_width_pixels=(
            args.padding_width if args.padding_width is not None else display.padding_width
        ),
        padding_height_pixels=(
            args.padding_height if args.padding_height is not None else display.padding_height
        ),
        scroll_bar_width_pixels=args.scroll_bar,
        left_fringe_width_pixels=args.left_fringe,
        right_fringe_width_pixels=args.right_fringe,
    )
    size = FrameSizer(display).compute(geometry)

    if args.json:
        print(json.dumps({
            "columns": size.columns,
            "rows": size.rows,
            "geometry": geometry.to_dict(),
        }, indent=2))
    else:
        print(f"{size.columns} columns x {size.rows} rows")
    return 0


def cmd_detect(args, config: FramefitConfig):
    """Report the detected window system and the host that would be used."""
    detected = detect_window_system()
    host = select_host(config, get_window_system(args))
    output = {
        "detected": detected.value,
        "configured": config.host.window_system,
        "host": host.name,
        "window_system": host.window_system.value,
    }

    if args.json:
        print(json.dumps(output, indent=2))
    else:
        print(f"Detected: {output['detected']} (configured: {output['configured']})")
        print(f"Host: {output['host']} ({output['window_system']})")
    return 0


def parse_value(value: str):
    """Parse a config value given on the command line."""
    if value.lower() == "true":
        return True
    if value.lower() == "false":
        return False
    if value.lower() in ("null", "none"):
        return None
    if value.lstrip("-").isdigit():
        return int(value)
    try:
        return float(value)
    except ValueError:
        return value  # Keep as string


def cmd_config(args, config: FramefitConfig):
    """Configuration management."""
    config_path = get_config_path()

    if args.config_action == "path":
        print(config_path)

    elif args.config_action == "show":
        print(json.dumps(config.to_dict(), indent=2))

    elif args.config_action == "init":
        if config_path.exists() and not args.force:
            print(f"Config already exists: {config_path}")
            print("Use --force to overwrite")
        else:
            save_config(FramefitConfig(), config_path)
            print(f"Created: {config_path}")

    elif args.config_action == "set":
        if not args.key or args.value is None:
            print("Usage: framefit config set --key <key> --value <value>")
            print("Examples:")
            print("  framefit config set --key display.padding_height --value 50")
            print("  framefit config set --key display.max_width --value 1920")
            return 1

        # Parse key path (e.g., "display.max_width")
        parts = args.key.split(".")
        if len(parts) != 2:
            print("Key must be in format: section.field (e.g., display.max_width)")
            return 1

        section, field = parts
        data = config.to_dict()

        if section not in data:
            print(f"Unknown section: {section}")
            return 1
        if field not in data[section]:
            print(f"Unknown field: {field} in section {section}")
            return 1

        if args.key == "host.window_system":
            value = args.value
            if value not in WINDOW_SYSTEMS:
                print(f"Unknown window system: {value} (expected one of {', '.join(WINDOW_SYSTEMS)})")
                return 1
        else:
            value = parse_value(args.value)
        data[section][field] = value
        new_config = FramefitConfig.from_dict(data)
        save_config(new_config, config_path)
        print(f"Set {args.key} = {value}")

    else:
        print("Usage: framefit config [show|init|path|set]")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="framefit",
        description="Size the frame's character grid to fill the display"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command")

    # maximize
    p_max = subparsers.add_parser("maximize", help="Fill the display with the frame")
    p_max.add_argument("-n", "--dry-run", action="store_true", help="Don't touch the frame")
    p_max.add_argument("-j", "--json", action="store_true", help="JSON output")
    p_max.add_argument("--max-width", type=int, help="Display width override in pixels")
    p_max.add_argument("--padding-width", type=int, help="Horizontal chrome in pixels")
    p_max.add_argument("--padding-height", type=int, help="Vertical chrome in pixels")
    p_max.add_argument("--window-system", choices=WINDOW_SYSTEM_CHOICES,
                       help="Force a window system (overrides config)")

    # restore
    p_restore = subparsers.add_parser("restore", help="Restore the frame (Windows)")
    p_restore.add_argument("-n", "--dry-run", action="store_true", help="Don't touch the frame")
    p_restore.add_argument("-j", "--json", action="store_true", help="JSON output")
    p_restore.add_argument("--window-system", choices=WINDOW_SYSTEM_CHOICES,
                           help="Force a window system (overrides config)")

    # compute
    p_compute = subparsers.add_parser("compute", help="Compute a frame size from measurements")
    p_compute.add_argument("--width", type=int, required=True, help="Display width in pixels")
    p_compute.add_argument("--height", type=int, required=True, help="Display height in pixels")
    p_compute.add_argument("--char-width", type=int, required=True, help="Cell width in pixels")
    p_compute.add_argument("--char-height", type=int, required=True, help="Cell height in pixels")
    p_compute.add_argument("--padding-width", type=int, help="Horizontal chrome (default: config)")
    p_compute.add_argument("--padding-height", type=int, help="Vertical chrome (default: config)")
    p_compute.add_argument("--scroll-bar", type=int, default=0, help="Scroll bar width")
    p_compute.add_argument("--left-fringe", type=int, default=0, help="Left fringe width")
    p_compute.add_argument("--right-fringe", type=int, default=0, help="Right fringe width")
    p_compute.add_argument("-j", "--json", action="store_true", help="JSON output")

    # detect
    p_detect = subparsers.add_parser("detect", help="Show window system and host")
    p_detect.add_argument("-j", "--json", action="store_true", help="JSON output")
    p_detect.add_argument("--window-system", choices=WINDOW_SYSTEM_CHOICES,
                          help="Force a window system (overrides config)")

    # config
    p_config = subparsers.add_parser("config", help="Configuration management")
    p_config.add_argument("config_action", nargs="?", default="show",
                          choices=["show", "init", "path", "set"])
    p_config.add_argument("--key", help="Config key (e.g., display.padding_height)")
    p_config.add_argument("--value", help="Config value")
    p_config.add_argument("--force", action="store_true", help="Force overwrite")

    return parser


def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    config = load_config()

    if args.command == "maximize":
        return cmd_maximize(args, config)
    elif args.command == "restore":
        return cmd_restore(args, config)
    elif args.command == "compute":
        return cmd_compute(args, config)
    elif args.command == "detect":
        return cmd_detect(args, config)
    elif args.command == "config":
        return cmd_config(args, config)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
