"""pkgtemplate CLI: parse, find and check template files."""

import argparse
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import List, Optional

from loguru import logger


def _configure_logging(verbose: bool) -> Optional[int]:
    """Enable library logging to stderr for --verbose; return the handler id."""
    if not verbose:
        return None
    logger.remove()
    logger.enable("pkgtemplate")
    return logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level="DEBUG",
    )


def _restore_logging(handler_id: Optional[int]) -> None:
    # Library logging is silent again once the command has run.
    logger.disable("pkgtemplate")
    if handler_id is not None:
        logger.remove(handler_id)


def _print_summary(template) -> None:
    contents = template.contents
    core = contents.core
    optional = contents.optional
    print(f"[OK] {template.path}")
    print(f"  Type: {contents.kind}")
    print(f"  Id: {core.id if core.id is not None else '(inherited)'}")
    print(f"  Version: {core.version if core.version is not None else '(inherited)'}")
    if core.authors is not None:
        print(f"  Authors: {', '.join(core.authors)}")
    print(f"  Dependencies: {len(optional.dependencies or ())}")
    print(f"  Files: {len(optional.files or ())}")


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point for pkgtemplate commands."""
    try:
        pkgtemplate_version = get_version("pkgtemplate")
    except PackageNotFoundError:
        pkgtemplate_version = "dev"

    parser = argparse.ArgumentParser(
        prog="pkgtemplate",
        description="pkgtemplate: parse and check package template files"
    )
    parser.add_argument("--version", action="version", version=f"pkgtemplate {pkgtemplate_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parser activity to stderr."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a single template file",
        parents=[parent_parser]
    )
    parse_parser.add_argument(
        "path",
        type=Path,
        help="Path to template file"
    )
    parse_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed template as canonical JSON"
    )
    parse_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject malformed lines in dependencies/files blocks"
    )

    # find command
    find_parser = subparsers.add_parser(
        "find",
        help="List template files under a directory",
        parents=[parent_parser]
    )
    find_parser.add_argument(
        "root",
        type=Path,
        help="Directory to search recursively"
    )
    find_parser.add_argument(
        "--suffix",
        default=None,
        help="Template file name suffix (defaults to 'paket.template')"
    )

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Parse every template file under a directory",
        parents=[parent_parser]
    )
    check_parser.add_argument(
        "root",
        type=Path,
        help="Directory to search recursively"
    )
    check_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject malformed lines in dependencies/files blocks"
    )
    check_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory for check_report.json"
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    handler_id = _configure_logging(args.verbose)
    try:
        _run_command(parser, args)
    finally:
        _restore_logging(handler_id)


def _run_command(parser: argparse.ArgumentParser, args: argparse.Namespace):
    """Run the selected subcommand; always ends in sys.exit()."""
    from .config import ParserOptions

    try:
        options = ParserOptions.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if getattr(args, "strict", None):
        options = options.model_copy(update={"strict_blocks": True})

    if args.command == "parse":
        from .api import load
        from .errors import TemplateLoadError
        from ._internal.canonical_json import canonical_dumps

        try:
            template = load(Path(args.path).resolve(), options)
        except (OSError, TemplateLoadError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        if args.json:
            print(canonical_dumps(template))
        elif not args.quiet:
            _print_summary(template)
        sys.exit(0)
    elif args.command == "find":
        from .api import find_template_files

        try:
            suffix = args.suffix or options.template_suffix
            paths = find_template_files(args.root, suffix)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        for path in paths:
            print(path)
        sys.exit(0)
    elif args.command == "check":
        from .api import find_template_files, load
        from .errors import TemplateLoadError
        from ._internal.canonical_json import canonical_dumps

        try:
            paths = find_template_files(args.root, options.template_suffix)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        results = []
        for path in paths:
            try:
                template = load(path, options)
            except TemplateLoadError as e:
                results.append({"path": str(path), "ok": False, "code": e.code.value, "message": e.error.message})
                if not args.quiet:
                    print(f"[FAILED] {path}: {e.error.message}")
                continue
            except OSError as e:
                results.append({"path": str(path), "ok": False, "code": "IO_ERROR", "message": str(e)})
                if not args.quiet:
                    print(f"[FAILED] {path}: {e}")
                continue
            results.append({"path": str(path), "ok": True, "kind": template.contents.kind})
            if not args.quiet:
                print(f"[OK] {path}")

        failed = [r for r in results if not r["ok"]]
        if args.output_dir:
            output_dir = Path(args.output_dir).resolve()
            output_dir.mkdir(parents=True, exist_ok=True)
            report_out = output_dir / "check_report.json"
            report = {"ok": not failed, "checked": len(results), "failed": len(failed), "templates": results}
            report_out.write_text(canonical_dumps(report) + "\n", encoding="utf-8")
            if not args.quiet:
                print(f"  Report: {report_out}")
        if not args.quiet:
            print(f"  Status: {'OK' if not failed else 'FAILED'}")
            print(f"  Checked: {len(results)}")
            print(f"  Failed: {len(failed)}")
        if failed:
            sys.exit(1)
        sys.exit(0)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
