"""apidiff CLI: compare and format PhET-iO API files."""

import argparse
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

from .codes import ExitCode


def main():
    """Main CLI entry point for apidiff commands."""
    try:
        apidiff_version = get_version("apidiff")
    except PackageNotFoundError:
        apidiff_version = "dev"

    parser = argparse.ArgumentParser(
        prog="apidiff",
        description="apidiff: detect breaking changes between PhET-iO API files"
    )
    parser.add_argument("--version", action="version", version=f"apidiff {apidiff_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # compare command
    compare_parser = subparsers.add_parser(
        "compare",
        help="Report breaking changes from one API file to another",
        parents=[parent_parser]
    )
    compare_parser.add_argument("old_api", type=Path, help="Path to the earlier API file")
    compare_parser.add_argument("new_api", type=Path, help="Path to the later API file")
    compare_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a machine-readable JSON report instead of text"
    )

    # compare-macro command
    macro_parser = subparsers.add_parser(
        "compare-macro",
        help="Report breaking changes between two macro API files (sim name -> API)",
        parents=[parent_parser]
    )
    macro_parser.add_argument("macro_a", type=Path, help="Path to the earlier macro API file")
    macro_parser.add_argument("macro_b", type=Path, help="Path to the later macro API file")
    macro_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a machine-readable JSON report instead of text"
    )

    # format command
    format_parser = subparsers.add_parser(
        "format",
        help="Format an API file with recursively sorted keys",
        parents=[parent_parser]
    )
    format_parser.add_argument("api_path", type=Path, help="Path to the API file")
    format_parser.add_argument(
        "--write",
        action="store_true",
        help="Rewrite the file in place instead of printing"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(ExitCode.INPUT_ERROR)

    if args.command == "compare":
        try:
            from .api import compare
            from ._internal.canonical_json import canonical_dumps

            result = compare(args.old_api.resolve(), args.new_api.resolve())

            if args.json:
                print(canonical_dumps(result.model_dump()))
            elif not args.quiet:
                if result.ok:
                    print("[OK] No breaking changes")
                else:
                    print("[FAILED] Breaking changes detected")
                    print(result.formatted)
            sys.exit(ExitCode.OK if result.ok else ExitCode.PROBLEMS_FOUND)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(ExitCode.INPUT_ERROR)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(ExitCode.INPUT_ERROR)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(ExitCode.INPUT_ERROR)
    elif args.command == "compare-macro":
        try:
            from .api import compare_macro
            from ._internal.canonical_json import canonical_dumps

            result = compare_macro(args.macro_a.resolve(), args.macro_b.resolve())

            if args.json:
                print(canonical_dumps(result.model_dump()))
            elif not args.quiet:
                if result.ok:
                    print("[OK] No breaking changes")
                else:
                    print(result.formatted)
            sys.exit(ExitCode.OK if result.ok else ExitCode.PROBLEMS_FOUND)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(ExitCode.INPUT_ERROR)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(ExitCode.INPUT_ERROR)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(ExitCode.INPUT_ERROR)
    elif args.command == "format":
        try:
            from .api import format_api_file

            api_path = args.api_path.resolve()
            formatted = format_api_file(api_path)
            if args.write:
                api_path.write_text(formatted + "\n", encoding="utf-8")
                if not args.quiet:
                    print("[OK] Formatted")
                    print(f"  File: {api_path}")
            else:
                print(formatted)
            sys.exit(ExitCode.OK)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(ExitCode.INPUT_ERROR)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(ExitCode.INPUT_ERROR)
    else:
        parser.print_help()
        sys.exit(ExitCode.INPUT_ERROR)


if __name__ == "__main__":
    main()
