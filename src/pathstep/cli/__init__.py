"""pathstep CLI — inspect templates and try them against segments.

Entry point registered as ``pathstep`` in ``pyproject.toml``::

    [project.scripts]
    pathstep = "pathstep.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pathstep`` command."""
    parser = argparse.ArgumentParser(
        prog="pathstep",
        description="pathstep — compile {name} path-segment templates into matchers.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pathstep check ---------------------------------------------------
    check_parser = subparsers.add_parser(
        "check",
        help="Validate a template and match segments against it",
    )
    check_parser.add_argument("template", help="Template string (e.g. 'v{major}.{minor}')")
    check_parser.add_argument("segments", nargs="*", help="Segments to match")
    check_parser.add_argument(
        "--no-escape",
        action="store_true",
        help="Treat literal text as pattern syntax instead of matching it literally",
    )
    check_parser.add_argument(
        "--capture",
        default=None,
        help="Sub-pattern used for every placeholder (default: .+)",
    )
    check_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        from pathstep.cli._check import run_check

        run_check(args)
