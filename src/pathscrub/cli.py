"""Command line front end for pathscrub.

Usage:
    pathscrub name "report:final*.txt" --options reserved
    pathscrub --platform windows path "C:\\Users\\me\\Desktop\\web.config"
"""

import argparse
import sys
from pathlib import Path

from pathscrub import __version__
from pathscrub.config import ScrubConfig
from pathscrub.exceptions import PathScrubError
from pathscrub.log import setup_logging
from pathscrub.sanitizer import PathSanitizer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Replace illegal characters in file names and paths",
        prog="pathscrub",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML or JSON config file",
    )
    parser.add_argument(
        "--platform",
        choices=["host", "posix", "windows"],
        default=None,
        help="Invalid path character table and path flavor (default: host)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each scrub step")

    commands = parser.add_subparsers(dest="command", required=True)

    name_cmd = commands.add_parser("name", help="Scrub a single file name")
    name_cmd.add_argument("name")
    name_cmd.add_argument(
        "--options",
        default=None,
        help="Comma-separated passes: reserved, filesystem, uri, all (default: all)",
    )

    path_cmd = commands.add_parser("path", help="Scrub a full path and reject traversal")
    path_cmd.add_argument("path")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = ScrubConfig.load(
            config_path=args.config,
            platform=args.platform,
            options=args.options.split(",") if getattr(args, "options", None) else None,
            log_level="DEBUG" if args.verbose else None,
        )
        setup_logging(config.log_level)
        sanitizer = PathSanitizer(config.policy)

        if args.command == "name":
            result = sanitizer.create_safe_file_name(args.name, config.scrub_options)
        else:
            result = sanitizer.create_safe_path(args.path)
    except (PathScrubError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result)
    return 0
