"""CLI entrypoint for sitecache."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from sitecache import __version__
from sitecache.cli.handlers import handle_show, handle_update, handle_validate
from sitecache.constants.cli import CLI_DESCRIPTION, VALID_OUTPUT_FORMATS


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="sitecache",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Print the cache of a site")
    show.add_argument("-r", "--root", type=Path, required=True, help="Site root path")
    show.add_argument("-c", "--config", type=Path, help="Explicit config file")
    show.add_argument(
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default="text",
        help="Output format: text (default) or json",
    )

    validate = subparsers.add_parser("validate", help="Check that the cache file can be decoded")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Site root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    update = subparsers.add_parser("update", help="Hash files and record them in the cache")
    update.add_argument("-r", "--root", type=Path, required=True, help="Site root path")
    update.add_argument("-c", "--config", type=Path, help="Explicit config file")
    update.add_argument(
        "-d",
        "--dep",
        action="append",
        default=[],
        help="Dynamic dependency resource path, e.g. /templates/post.html (repeat for multiple)",
    )
    update.add_argument("--now", type=int, default=None, help="Build timestamp (defaults to current time)")
    update.add_argument("files", type=Path, nargs="+", help="Files under the site root to record")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "show":
        return handle_show(args)
    if args.command == "validate":
        return handle_validate(args)
    if args.command == "update":
        return handle_update(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
