"""Command-line interface: convert an HTML file into rich text JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from html2richtext.config import (
    HTML2RICHTEXT_ENSURE_ASCII,
    HTML2RICHTEXT_JSON_INDENT,
    HTML2RICHTEXT_LOG_LEVEL,
    HTML2RICHTEXT_OUTPUT_SUFFIX,
)
from html2richtext.conversion import ConversionOptions, convert
from html2richtext.exceptions import Html2RichTextError

logger = logging.getLogger(__name__)

_STDOUT = "-"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html2richtext",
        description="Convert an HTML file into rich text JSON.",
    )
    parser.add_argument("input", help="Path to the HTML file to convert")
    parser.add_argument(
        "-o",
        "--output",
        help=(
            f"Output path (default: input path with a {HTML2RICHTEXT_OUTPUT_SUFFIX} "
            f"suffix; use '{_STDOUT}' for stdout)"
        ),
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=HTML2RICHTEXT_JSON_INDENT,
        help="Pretty-print the JSON with this indentation",
    )
    parser.add_argument(
        "--no-ensure-ascii",
        dest="ensure_ascii",
        action="store_false",
        default=HTML2RICHTEXT_ENSURE_ASCII,
        help="Write non-ASCII characters as-is instead of \\u escapes",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else HTML2RICHTEXT_LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: File {input_path} does not exist")
        return 1

    output = args.output or str(input_path.with_suffix(HTML2RICHTEXT_OUTPUT_SUFFIX))
    options = ConversionOptions(ensure_ascii=args.ensure_ascii, indent=args.indent)

    try:
        html = input_path.read_text(encoding="utf-8")
        payload = convert(html, options=options)
    except (Html2RichTextError, OSError, UnicodeDecodeError) as exc:
        logger.debug("Conversion of %s failed", input_path, exc_info=True)
        print(f"Error: {exc}")
        return 1

    if output == _STDOUT:
        print(payload)
        return 0

    try:
        Path(output).write_text(payload, encoding="utf-8")
    except OSError as exc:
        print(f"Error: Could not write {output}: {exc}")
        return 1

    print(f"Successfully converted {input_path} to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
