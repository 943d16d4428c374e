#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for html_to_text.

Reads HTML from a file or standard input and writes the plain text
rendering to standard output or a file.

Environment Variable Support
----------------------------
Options support environment variable defaults using the pattern
HTML_TO_TEXT_<OPTION_NAME>, where option names are upper-cased with hyphens
replaced by underscores. CLI arguments always override environment
variables.

Examples
--------
Convert a file::

    $ html-to-text page.html

Narrow output starting at the article element::

    $ html-to-text page.html --width 60 --base-element "div.article"

Read from standard input::

    $ curl -s https://example.com | html-to-text --max-depth 10

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Callable, Optional

from html_to_text.constants import DEFAULT_ELLIPSIS, DEFAULT_HTML_PARSER, DEFAULT_WORDWRAP_WIDTH, ENV_PREFIX
from html_to_text.converter import html_to_text
from html_to_text.exceptions import DependencyError, HtmlToTextError, ParsingError, ValidationError
from html_to_text.logging_utils import configure_logging

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _env_default(name: str, fallback: Any, cast: Callable[[str], Any] = str) -> Any:
    raw = os.environ.get(ENV_PREFIX + name.upper().replace("-", "_"))
    if raw is None:
        return fallback
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring invalid value %r for environment option %s", raw, name)
        return fallback


def _env_flag(name: str) -> bool:
    return _env_default(name, False, lambda raw: raw.strip().lower() in _TRUE_VALUES)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command line."""
    parser = argparse.ArgumentParser(
        prog="html-to-text",
        description="Convert HTML to word-wrapped plain text.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", help="HTML file to convert (default: read standard input)")
    parser.add_argument("--out", "-o", help="Write output to this file instead of standard output")
    parser.add_argument("--encoding", default=_env_default("encoding", "utf-8"), help="Input and output encoding")

    wrap_group = parser.add_argument_group("wrapping")
    wrap_group.add_argument(
        "--width",
        type=int,
        default=_env_default("width", DEFAULT_WORDWRAP_WIDTH, int),
        help="Target line width; 0 disables wrapping (default: %(default)s)",
    )
    wrap_group.add_argument(
        "--preserve-newlines",
        action="store_true",
        default=_env_flag("preserve-newlines"),
        help="Keep line breaks found in the HTML text",
    )
    wrap_group.add_argument(
        "--force-wrap-on-limit",
        action="store_true",
        default=_env_flag("force-wrap-on-limit"),
        help="Split words longer than the width",
    )
    wrap_group.add_argument(
        "--wrap-character",
        action="append",
        dest="wrap_characters",
        default=None,
        metavar="CHAR",
        help="Preferred character to split long words after with --force-wrap-on-limit (repeatable)",
    )

    traversal_group = parser.add_argument_group("traversal")
    traversal_group.add_argument(
        "--base-element",
        action="append",
        dest="base_elements",
        default=None,
        metavar="SELECTOR",
        help="Selector (tag.class#id) where conversion starts (repeatable, default: body)",
    )
    traversal_group.add_argument(
        "--no-whole-document-fallback",
        action="store_true",
        default=_env_flag("no-whole-document-fallback"),
        help="Produce no text for base elements that are not found",
    )
    traversal_group.add_argument("--max-depth", type=int, default=_env_default("max-depth", None, int))
    traversal_group.add_argument("--max-child-nodes", type=int, default=_env_default("max-child-nodes", None, int))
    traversal_group.add_argument("--ellipsis", default=_env_default("ellipsis", DEFAULT_ELLIPSIS))

    format_group = parser.add_argument_group("formatting")
    format_group.add_argument(
        "--no-uppercase-headings",
        action="store_true",
        default=_env_flag("no-uppercase-headings"),
        help="Keep heading text as written",
    )
    format_group.add_argument("--ignore-href", action="store_true", default=_env_flag("ignore-href"))
    format_group.add_argument("--ignore-image", action="store_true", default=_env_flag("ignore-image"))
    format_group.add_argument(
        "--tables",
        action="append",
        default=None,
        metavar="SELECTOR",
        help="Selector of tables to lay out as data tables (repeatable)",
    )
    format_group.add_argument(
        "--all-tables", action="store_true", default=_env_flag("all-tables"), help="Lay out every table as a grid"
    )
    format_group.add_argument(
        "--parser",
        default=_env_default("parser", DEFAULT_HTML_PARSER),
        choices=["html.parser", "lxml", "html5lib"],
        help="BeautifulSoup parser backend (default: %(default)s)",
    )

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-level",
        default=_env_default("log-level", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    log_group.add_argument("--log-file", default=_env_default("log-file", None))
    log_group.add_argument("--trace", action="store_true", default=_env_flag("trace"))
    return parser


def build_overrides(parsed_args: argparse.Namespace) -> dict[str, Any]:
    """Translate parsed arguments into option overrides."""
    long_word_split: dict[str, Any] = {"force_wrap_on_limit": parsed_args.force_wrap_on_limit}
    if parsed_args.wrap_characters:
        long_word_split["wrap_characters"] = tuple(parsed_args.wrap_characters)

    overrides: dict[str, Any] = {
        "wrap": {
            "width": parsed_args.width or None,
            "preserve_newlines": parsed_args.preserve_newlines,
            "long_word_split": long_word_split,
        },
        "limits": {
            "max_depth": parsed_args.max_depth,
            "max_child_nodes": parsed_args.max_child_nodes,
            "ellipsis": parsed_args.ellipsis,
        },
        "return_dom_by_default": not parsed_args.no_whole_document_fallback,
        "uppercase_headings": not parsed_args.no_uppercase_headings,
        "ignore_href": parsed_args.ignore_href,
        "ignore_image": parsed_args.ignore_image,
    }
    if parsed_args.base_elements:
        overrides["base_elements"] = tuple(parsed_args.base_elements)
    if parsed_args.all_tables:
        overrides["tables"] = True
    elif parsed_args.tables:
        overrides["tables"] = tuple(parsed_args.tables)
    return overrides


def _read_input(parsed_args: argparse.Namespace) -> str:
    if parsed_args.input and parsed_args.input != "-":
        return Path(parsed_args.input).read_text(encoding=parsed_args.encoding)
    return sys.stdin.read()


def main(args: Optional[list[str]] = None) -> int:
    """Execute the command line and return an exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    configure_logging(parsed_args.log_level, parsed_args.log_file, parsed_args.trace)

    try:
        html = _read_input(parsed_args)
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        text = html_to_text(html, html_parser=parsed_args.parser, **build_overrides(parsed_args))
    except ValidationError as e:
        print(f"Invalid options: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except DependencyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_DEPENDENCY_ERROR
    except ParsingError as e:
        print(f"Error parsing HTML: {e}", file=sys.stderr)
        return EXIT_PARSING_ERROR
    except HtmlToTextError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if parsed_args.out:
        try:
            Path(parsed_args.out).write_text(text + "\n", encoding=parsed_args.encoding)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return EXIT_FILE_ERROR
        logger.info("Wrote %d characters to %s", len(text), parsed_args.out)
    else:
        print(text)
    return EXIT_SUCCESS
