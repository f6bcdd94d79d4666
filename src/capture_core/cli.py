"""
capture-core command line interface.

Usage:
    capture-core --help
    capture-core info
    capture-core check-ua "Mozilla/5.0 (compatible; Googlebot/2.1)"
    capture-core check-ua "$UA" --block testington
    capture-core sanitize --max-length 200 event.json
    cat event.json | capture-core sanitize --max-length none
"""

from __future__ import annotations

import argparse
import json
import sys


def _parse_max_length(raw: str) -> int | None:
    if raw.strip().lower() in {"none", "off", "unlimited"}:
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer or 'none', got {raw!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError("max length must be >= 0")
    return value


def cmd_info(args) -> int:
    """Show package information."""
    from . import __version__
    from .sanitization import DEFAULT_BLOCKED_UA_STRS
    from .settings import load_capture_settings

    settings = load_capture_settings()

    print(f"capture-core v{__version__}")
    print(f"\nBuilt-in blocked user-agent patterns: {len(DEFAULT_BLOCKED_UA_STRS)}")
    print("\nSettings:")
    for name, value in settings.as_dict().items():
        print(f"  {name}: {value}")
    return 0


def cmd_check_ua(args) -> int:
    """Classify a user agent against the deny list."""
    from .sanitization import is_blocked_ua
    from .settings import load_capture_settings

    settings = load_capture_settings()
    patterns = list(settings.custom_blocked_user_agents) + list(args.block or [])
    blocked = is_blocked_ua(args.user_agent, patterns)
    print("blocked" if blocked else "allowed")
    return 1 if blocked else 0


def cmd_sanitize(args) -> int:
    """Read a JSON payload and print its sanitized copy."""
    from .errors import CaptureCoreError
    from .sanitization import copy_and_truncate_strings
    from .settings import load_capture_settings

    if hasattr(args, "max_length"):
        max_length = args.max_length
    else:
        max_length = load_capture_settings().max_string_length

    try:
        if args.file and args.file != "-":
            with open(args.file, encoding="utf-8") as fh:
                payload = json.load(fh)
        else:
            payload = json.load(sys.stdin)
    except (OSError, json.JSONDecodeError) as exc:
        print(f"[ERROR] Could not read JSON payload: {exc}", file=sys.stderr)
        return 2

    try:
        sanitized = copy_and_truncate_strings(payload, max_length)
    except CaptureCoreError as exc:
        print(f"[ERROR] {exc.user_message}", file=sys.stderr)
        return 2

    json.dump(sanitized, sys.stdout, ensure_ascii=False, indent=args.indent)
    sys.stdout.write("\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="capture-core",
        description="capture-core - event payload sanitizing and bot filtering",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    info_parser = subparsers.add_parser("info", help="Show package information and settings")
    info_parser.set_defaults(func=cmd_info)

    check_parser = subparsers.add_parser("check-ua", help="Check whether a user agent is blocked")
    check_parser.add_argument("user_agent", help="Raw user-agent string")
    check_parser.add_argument(
        "--block",
        action="append",
        metavar="PATTERN",
        help="Extra blocked pattern (repeatable)",
    )
    check_parser.set_defaults(func=cmd_check_ua)

    sanitize_parser = subparsers.add_parser("sanitize", help="Sanitize a JSON payload")
    sanitize_parser.add_argument("file", nargs="?", default="-", help="JSON file (default: stdin)")
    sanitize_parser.add_argument(
        "--max-length",
        type=_parse_max_length,
        default=argparse.SUPPRESS,
        help="Maximum string length, or 'none' to disable truncation (default: from settings)",
    )
    sanitize_parser.add_argument("--indent", type=int, default=None, help="Indent output JSON")
    sanitize_parser.set_defaults(func=cmd_sanitize)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from .observability import configure_logging
    from .settings import load_capture_settings

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = load_capture_settings()
    configure_logging(settings.log_level, json_format=settings.log_json, log_file=settings.log_file)

    return int(args.func(args) or 0)


if __name__ == "__main__":
    sys.exit(main())
