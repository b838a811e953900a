"""Command-line interface for htmlbuild."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from .page_loader import (
    PageConfigError,
    builder_from_page,
    default_output_path,
    load_page_spec,
)
from .util_fs import HtmlSaveError, save_html

VERSION = "0.1.0"


def _handle_build(args: argparse.Namespace) -> None:
    page_path = Path(args.page)
    try:
        page = load_page_spec(page_path)
    except (FileNotFoundError, PageConfigError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    html_text = builder_from_page(page).build()
    if args.stdout:
        print(html_text)
        return

    try:
        output_path = Path(args.output) if args.output else default_output_path(page_path, page)
        written = save_html(output_path, html_text)
    except (PageConfigError, HtmlSaveError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(f"Built: {written}")


def _handle_validate(args: argparse.Namespace) -> None:
    errors: list[str] = []
    for raw_path in args.pages:
        page_path = Path(raw_path)
        try:
            load_page_spec(page_path)
        except (FileNotFoundError, PageConfigError) as exc:
            errors.append(str(exc))
            continue
        print(f"OK: {page_path}")

    if errors:
        for message in errors:
            print(message, file=sys.stderr)
        raise SystemExit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlbuild",
        description="Build escaped HTML documents from declarative page files.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )
    subparsers = parser.add_subparsers(dest="command")

    build = subparsers.add_parser(
        "build",
        help="Render a page file to HTML.",
        description="Validate a YAML page file and write the rendered document.",
    )
    build.add_argument("page", help="Path to the page YAML (or JSON) file.")
    build.add_argument(
        "-o",
        "--output",
        help="Output HTML path. Defaults to the page's output key or <page>.html.",
    )
    build.add_argument(
        "--stdout",
        action="store_true",
        help="Print the document instead of writing a file.",
    )
    build.set_defaults(func=_handle_build)

    validate = subparsers.add_parser(
        "validate",
        help="Validate page files without rendering.",
        description="Check that page files parse and match the page schema.",
    )
    validate.add_argument("pages", nargs="+", help="Page files to validate.")
    validate.set_defaults(func=_handle_validate)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
