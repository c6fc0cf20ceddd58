"""Command-line interface: rewrite ```tree blocks in Markdown files."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib import metadata
from pathlib import Path

from TreeMD.errors import TreeParseError
from TreeMD.fetcher import FetchError, fetch_document
from TreeMD.markdown_processor import MarkdownProcessError, replace_tree_blocks
from TreeMD.models import ParseMode, ParseOptions
from TreeMD.parser import parse_tree_block
from TreeMD.renderers.html import render_html
from TreeMD.renderers.mermaid import render_mermaid
from TreeMD.renderers.text import render_text
from TreeMD.url_parser import URLParseError, parse_document_url

logger = logging.getLogger(__name__)

RAW_RENDERERS = {
    "html": render_html,
    "mermaid": render_mermaid,
    "text": render_text,
}

EPILOG = """\
examples:
  treemd README.md output.md
  treemd --input README.md --output README.out.md
  treemd --text < input.md > output.md
  treemd --raw --format mermaid tree.txt
  treemd --url https://github.com/owner/repo/blob/main/README.md
  treemd preview
"""


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="treemd",
        description="Render fenced ```tree blocks in Markdown as HTML or text.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("positional", nargs="*", metavar="FILE", help="input [output]")
    p.add_argument("-i", "--input", help="input Markdown file (defaults to stdin)")
    p.add_argument("-o", "--output", help="output file (defaults to stdout)")
    p.add_argument("--url", help="fetch the input document from a URL")
    p.add_argument(
        "--token",
        help="GitHub token for private repositories (used with --url)",
    )

    # --- Output ---
    p.add_argument(
        "--text",
        action="store_true",
        help="render tree blocks as plain text fenced blocks",
    )
    p.add_argument(
        "--html-only",
        action="store_true",
        help="render HTML without injecting CSS (useful for GitHub)",
    )
    p.add_argument(
        "--raw",
        action="store_true",
        help="treat the whole input as one tree block instead of Markdown",
    )
    p.add_argument(
        "--format",
        choices=sorted(RAW_RENDERERS),
        default="text",
        help="output format with --raw (default: text)",
    )

    # --- Parsing ---
    p.add_argument(
        "--strict",
        action="store_true",
        help="fail on malformed trees instead of repairing them",
    )
    p.add_argument("--tab-width", type=_positive_int, default=2, metavar="N")
    p.add_argument("--indent-width", type=_positive_int, default=2, metavar="N")

    p.add_argument("-v", "--verbose", action="store_true", help="log tolerant repairs")
    p.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    return p


def _version() -> str:
    try:
        return metadata.version("TreeMD")
    except metadata.PackageNotFoundError:
        return "unknown"


def options_from_args(args: argparse.Namespace) -> ParseOptions:
    return ParseOptions(
        mode=ParseMode.STRICT if args.strict else ParseMode.TOLERANT,
        tab_width=args.tab_width,
        indent_width=args.indent_width,
    )


def _apply_positional(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    positional = list(args.positional)
    if len(positional) > 2:
        parser.error("at most two positional arguments (input, output) are allowed")
    if positional and not args.input:
        args.input = positional.pop(0)
    if positional and not args.output:
        args.output = positional.pop(0)
    if positional:
        parser.error("input/output given both as flags and positionally")


def _default_output(input_path: str) -> Path:
    path = Path(input_path)
    return path.with_name(f"{path.stem}_rendered{path.suffix or '.md'}")


def _read_input(args: argparse.Namespace) -> str:
    if args.url:
        source = parse_document_url(args.url)
        return fetch_document(source, token=args.token)
    if args.input:
        return Path(args.input).read_text(encoding="utf-8")
    return sys.stdin.read()


def _process(source: str, args: argparse.Namespace) -> str:
    options = options_from_args(args)
    if args.raw:
        tree = parse_tree_block(source, options)
        return RAW_RENDERERS[args.format](tree)
    return replace_tree_blocks(
        source,
        text=args.text,
        html_only=args.html_only,
        options=options,
    )


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] == "preview":
        from TreeMD.launcher import launch_preview

        launch_preview(argv[1:])
        return 0

    parser = build_parser()
    args = parser.parse_args(argv)
    _apply_positional(args, parser)

    if args.raw and (args.text or args.html_only):
        parser.error("--raw cannot be combined with --text or --html-only")
    if args.url and args.input:
        parser.error("--url cannot be combined with an input file")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        output = _process(_read_input(args), args)
    except (
        TreeParseError,
        MarkdownProcessError,
        URLParseError,
        FetchError,
        OSError,
    ) as exc:
        logger.debug("Processing failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    output_path = args.output
    if not output_path and args.input and not args.raw:
        output_path = str(_default_output(args.input))

    if output_path:
        Path(output_path).write_text(output, encoding="utf-8")
        logger.info("Wrote %s", output_path)
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
