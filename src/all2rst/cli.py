#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/cli.py
"""Command line interface for all2rst.

Reads a document AST serialized as JSON (see ``all2rst.ast.serialization``)
and writes it as reStructuredText.

Examples
--------
Render a document to stdout:
    $ all2rst document.json

Render with list tables into a file, then check the result with docutils:
    $ all2rst document.json --list-tables --out document.rst --validate

"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional

from rich.console import Console
from rich.syntax import Syntax

from all2rst import __version__
from all2rst.ast import Document
from all2rst.ast.serialization import json_to_ast
from all2rst.exceptions import (
    All2RstError,
    FileError,
    MalformedFileError,
    RenderingError,
    ValidationError,
)
from all2rst.logging_utils import configure_logging
from all2rst.options.rst import RstRendererOptions
from all2rst.renderers.rst import RestructuredTextRenderer
from all2rst.utils.io_utils import read_text_input, write_text
from all2rst.utils.validation import validate_rst

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_FILE_ERROR = 3


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, (ValidationError, ValueError, TypeError)):
        return EXIT_VALIDATION_ERROR
    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="all2rst",
        description="Render a document AST (JSON) as reStructuredText.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  all2rst document.json
  all2rst document.json --columns 60 --wrap preserve
  cat document.json | all2rst - --standalone --toc --out document.rst
        """,
    )
    parser.add_argument("input", help="AST JSON file to render (use '-' for stdin)")
    parser.add_argument("--out", "-o", help="Output file path (default: print to stdout)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    rendering = parser.add_argument_group("rendering options")
    rendering.add_argument("--columns", type=int, metavar="N", help="Target line width (default: 72)")
    rendering.add_argument(
        "--wrap",
        choices=["auto", "preserve", "none"],
        help="Line wrapping: fill to columns, keep soft breaks, or never wrap (default: auto)",
    )
    rendering.add_argument("--list-tables", action="store_true", help="Write every table as a list-table directive")
    rendering.add_argument(
        "--reference-links", action="store_true", help="Use named references with targets after the body"
    )
    rendering.add_argument(
        "--smart", action="store_true", help="Escape quotes and dashes for readers that apply smart punctuation"
    )
    rendering.add_argument(
        "--code-directive",
        choices=["code", "code-block", "sourcecode"],
        help="Directive used for code blocks with a language (default: code)",
    )

    standalone = parser.add_argument_group("standalone documents")
    standalone.add_argument("--standalone", "-s", action="store_true", help="Wrap output in the default template")
    standalone.add_argument("--template", metavar="PATH", help="Jinja2 template for standalone output")
    standalone.add_argument("--toc", action="store_true", help="Include a table of contents")
    standalone.add_argument("--toc-depth", type=int, metavar="N", help="Depth of the table of contents (default: 3)")
    standalone.add_argument("--number-sections", action="store_true", help="Number the sections")

    output = parser.add_argument_group("output and diagnostics")
    output.add_argument("--rich", action="store_true", help="Syntax-highlight output printed to the terminal")
    output.add_argument(
        "--validate", action="store_true", help="Parse the output with docutils and report any problems"
    )
    output.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    output.add_argument("--log-file", metavar="PATH", help="Also write log records to this file")
    output.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging from the parsed arguments; ``--trace`` wins over ``--log-level``."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_options(parsed_args: argparse.Namespace) -> RstRendererOptions:
    """Build renderer options from the parsed arguments.

    Only flags given on the command line override the defaults.

    Raises
    ------
    ValueError
        If an option value is invalid

    """
    overrides: dict[str, Any] = {}
    if parsed_args.columns is not None:
        overrides["columns"] = parsed_args.columns
    if parsed_args.wrap is not None:
        overrides["wrap_mode"] = parsed_args.wrap
    if parsed_args.code_directive is not None:
        overrides["code_directive"] = parsed_args.code_directive
    if parsed_args.toc_depth is not None:
        overrides["toc_depth"] = parsed_args.toc_depth
    if parsed_args.template is not None:
        overrides["template_file"] = parsed_args.template

    for flag, option in (
        ("list_tables", "list_tables"),
        ("reference_links", "reference_links"),
        ("smart", "smart"),
        ("standalone", "standalone"),
        ("toc", "table_of_contents"),
        ("number_sections", "number_sections"),
    ):
        if getattr(parsed_args, flag):
            overrides[option] = True

    return RstRendererOptions(**overrides)


def load_document(source: str) -> Document:
    """Read and decode an AST JSON document.

    Raises
    ------
    FileError
        If the input cannot be read
    MalformedFileError
        If the input is not a valid document tree

    """
    text = read_text_input(source)
    try:
        node = json_to_ast(text)
    except json.JSONDecodeError as e:
        raise MalformedFileError(f"Input is not valid JSON: {e}", file_path=source, original_error=e) from e
    except (ValueError, RecursionError) as e:
        raise MalformedFileError(f"Input is not a valid document tree: {e}", file_path=source, original_error=e) from e

    if not isinstance(node, Document):
        raise MalformedFileError(
            f"Expected a Document at the root, got {type(node).__name__}", file_path=source
        )
    return node


def _print_output(text: str, rich_output: bool) -> None:
    if rich_output:
        console = Console()
        with console.capture() as capture:
            console.print(Syntax(text, "rst", word_wrap=False))
        print(capture.get(), end="")
    else:
        print(text)


def _report_problems(text: str) -> int:
    problems = validate_rst(text)
    for problem in problems:
        print(f"all2rst: {problem}", file=sys.stderr)
    if problems:
        logger.info(f"docutils reported {len(problems)} problem(s)")
        return EXIT_VALIDATION_ERROR
    return EXIT_SUCCESS


def main(args: Optional[list[str]] = None) -> int:
    """Run the command line interface and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    try:
        options = build_options(parsed_args)
        document = load_document(parsed_args.input)
        renderer = RestructuredTextRenderer(options)
        text = renderer.render_to_string(document)
        for message in renderer.messages:
            logger.debug(f"Dropped content: {message}")

        if parsed_args.out:
            write_text(text + "\n", parsed_args.out)
            logger.info(f"Wrote {parsed_args.out}")
        else:
            _print_output(text, parsed_args.rich)
    except (All2RstError, ValueError, TypeError) as e:
        label = "Rendering error" if isinstance(e, RenderingError) else "Error"
        print(f"{label}: {e}", file=sys.stderr)
        if parsed_args.trace:
            logger.exception("Traceback")
        return get_exit_code_for_exception(e)

    if parsed_args.validate:
        return _report_problems(text)
    return EXIT_SUCCESS
