#!/usr/bin/env python3
"""pumlink verify command.

Checks that project.puml lists every relation of a Maven project.

Exit codes:
    0: diagram in sync, or no diagram to check
    1: diagram not in sync with the project's dependencies
    2: descriptor, diagram or config could not be read
"""

import argparse
import sys
from pathlib import Path

from arch.verify import format_report, verify_project, verify_tree
from core.errors import PumlinkError, SyncValidationError
from lib.config import get
from lib.logger import get_logger, set_log_level

EXIT_OK = 0
EXIT_OUT_OF_SYNC = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Configure the command line parser."""
    parser = argparse.ArgumentParser(
        prog="pumlink",
        description="Verify that project.puml diagrams match the Maven module dependencies",
    )
    parser.add_argument(
        "descriptor",
        nargs="?",
        default=".",
        type=Path,
        help="pom.xml or the directory holding it (default: .)",
    )
    parser.add_argument(
        "--group-id",
        "-g",
        dest="group_id",
        default=None,
        help="Only dependencies in this group count (default: the project's group id)",
    )
    parser.add_argument(
        "--diagram",
        default=None,
        metavar="NAME",
        help="Diagram file name inside each module (default: project.puml)",
    )
    parser.add_argument(
        "--recursive",
        "-r",
        action="store_true",
        help="Also verify every module below the descriptor",
    )
    parser.add_argument(
        "--relaxed-naming",
        dest="relaxed_naming",
        action="store_true",
        default=None,
        help="Reserved: accepted but does not change matching yet",
    )
    parser.add_argument(
        "--strict-naming",
        dest="relaxed_naming",
        action="store_false",
        help="Reserved: disable relaxed naming",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default: PUMLINK_LOG_LEVEL or INFO)",
    )
    return parser


def _resolve_descriptor(path: Path) -> Path:
    if path.is_dir():
        return path / get("verify.descriptor_file")
    return path


def main(argv: list[str] | None = None) -> int:
    """Run the verify command.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    if args.log_level:
        set_log_level(args.log_level)
    logger = get_logger("cli")

    try:
        descriptor = _resolve_descriptor(args.descriptor)
        run = verify_tree if args.recursive else verify_project
        outcome = run(
            descriptor,
            group_filter=args.group_id,
            relaxed_naming=args.relaxed_naming,
            diagram_name=args.diagram,
        )
    except PumlinkError as e:
        logger.error(str(e))
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_ERROR

    results = outcome if isinstance(outcome, list) else [outcome]
    print(format_report(results))

    code = EXIT_OK
    for result in results:
        try:
            result.raise_for_status()
        except SyncValidationError as e:
            logger.error(str(e))
            code = EXIT_OUT_OF_SYNC
    return code


if __name__ == "__main__":
    sys.exit(main())
