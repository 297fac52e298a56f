"""repocompat CLI: check a tool version against a repository descriptor."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path


def main():
    """Main CLI entry point for repocompat commands."""
    try:
        repocompat_version = get_version("repocompat")
    except PackageNotFoundError:
        repocompat_version = "dev"

    parser = argparse.ArgumentParser(
        prog="repocompat",
        description="repocompat: check tool/repository version compatibility"
    )
    parser.add_argument("--version", action="version", version=f"repocompat {repocompat_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--descriptor",
        type=Path,
        required=True,
        help="Path to repository descriptor (YAML or .json)"
    )
    parent_parser.add_argument(
        "--json",
        action="store_true",
        help="Print canonical JSON instead of text."
    )
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Check a tool version against one repository version",
        parents=[parent_parser]
    )
    check_parser.add_argument(
        "--repo-version",
        required=True,
        help="Repository version, e.g. 1.4.0"
    )
    check_parser.add_argument(
        "--tool-version",
        required=True,
        help="Version of the running tool, e.g. 1.9.0"
    )
    check_parser.add_argument(
        "--repo-name",
        default="unnamed",
        help="Repository name used in messages"
    )
    check_parser.add_argument(
        "--tool-name",
        default="newt",
        help="Tool name used in messages"
    )
    check_parser.add_argument(
        "--upgrade-command",
        default="newt upgrade",
        help="Command suggested when the repos need upgrading"
    )
    check_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero on warnings as well as errors."
    )

    # show command
    subparsers.add_parser(
        "show",
        help="List the compatibility tables declared by a descriptor",
        parents=[parent_parser]
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Lazy import: keep --help/--version free of the kernel
    from .api import check_compatibility, describe_compat_map, load_compat_map
    from .errors import CompatError
    from ._internal.canonical_json import canonical_dumps

    if args.command == "check":
        try:
            compat_map = load_compat_map(
                args.descriptor,
                tool_name=args.tool_name,
                upgrade_command=args.upgrade_command,
            )
            result = check_compatibility(
                compat_map,
                repo_version=args.repo_version,
                tool_version=args.tool_version,
                repo_name=args.repo_name,
            )
        except (FileNotFoundError, CompatError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        if args.json:
            print(canonical_dumps(result.model_dump()))
        elif not args.quiet:
            line = f"[{result.verdict.upper()}] {args.repo_name} {result.repo_version} / {args.tool_name} {result.tool_version}"
            print(line)
            if result.message:
                print(f"  {result.message}")

        if not result.ok or (args.strict and result.verdict != "good"):
            sys.exit(1)
        sys.exit(0)
    elif args.command == "show":
        try:
            views = describe_compat_map(load_compat_map(args.descriptor))
        except (FileNotFoundError, CompatError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        if args.json:
            print(canonical_dumps([v.model_dump() for v in views]))
        elif not args.quiet:
            if not views:
                print("No compatibility tables declared")
            for view in views:
                print(f"repo {view.repo_version}:")
                for entry in view.entries:
                    print(f"  {entry.min_tool_version}: {entry.verdict}")
        sys.exit(0)
