#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for the lexdoc library.

A developer tool for inspecting stored editor values: it reads a JSON (or
plain text) editor value from a file or stdin and prints its HTML, plain
text, heading outline or normalized tree.

Examples
--------
Render a stored value to HTML::

    $ lexdoc post.json

Print the heading outline::

    $ lexdoc post.json --format headings

Read from stdin and write a standalone page::

    $ cat post.json | lexdoc - --standalone --title "Newsletter" --out page.html

"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from lexdoc import __version__
from lexdoc.api import extract_headings, extract_text, render_html
from lexdoc.ast.normalize import normalize
from lexdoc.ast.payload import convert_payload_data
from lexdoc.ast.serialization import ast_to_json
from lexdoc.constants import (
    DEFAULT_MAX_DEPTH,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    LOG_LEVEL_CHOICES,
)
from lexdoc.exceptions import LexdocError, RenderingError, ValidationError
from lexdoc.logging_utils import configure_logging
from lexdoc.options.base import NormalizeOptions
from lexdoc.options.html import HtmlRendererOptions
from lexdoc.options.plaintext import PlainTextOptions

logger = logging.getLogger(__name__)

__all__ = ["create_parser", "main"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``lexdoc`` command."""
    parser = argparse.ArgumentParser(
        prog="lexdoc",
        description="Render rich-text editor documents to HTML, plain text or a heading outline.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Input file with the editor value ('-' for stdin)")
    parser.add_argument(
        "--format",
        "-f",
        dest="output_format",
        choices=["html", "text", "headings", "ast"],
        default="html",
        help="Output format (default: html)",
    )
    parser.add_argument("--out", "-o", help="Output file (default: stdout)")
    parser.add_argument(
        "--payload",
        action="store_true",
        help="Treat the input as a CMS payload value (blocks, markdown or html fields)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum document nesting depth (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        default="WARNING",
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    _add_options_arguments(parser.add_argument_group("HTML options"), HtmlRendererOptions)
    _add_options_arguments(parser.add_argument_group("Plain text options"), PlainTextOptions)
    return parser


def _cli_fields(options_class: type) -> list[dataclasses.Field]:
    return [f for f in dataclasses.fields(options_class) if not f.metadata.get("exclude_from_cli", False)]


def _add_options_arguments(group: argparse._ArgumentGroup, options_class: type) -> None:
    """Add one argument per options field, driven by the field metadata.

    The flag is ``--<cli_name>`` when the metadata names one, otherwise the
    field name in kebab case. Booleans become switches that flip the
    default; other fields take a value converted by ``metadata["type"]``.

    Parameters
    ----------
    group : argparse._ArgumentGroup
        Group the arguments are added to
    options_class : type
        Frozen options dataclass to read the fields from

    """
    for f in _cli_fields(options_class):
        metadata = f.metadata
        flag = "--" + metadata.get("cli_name", f.name.replace("_", "-"))
        kwargs: dict[str, Any] = {"dest": f.name, "default": f.default, "help": metadata.get("help")}
        if isinstance(f.default, bool):
            kwargs["action"] = "store_false" if f.default else "store_true"
        else:
            kwargs["type"] = metadata.get("type", str)
        group.add_argument(flag, **kwargs)


def _options_kwargs(parsed_args: argparse.Namespace, options_class: type) -> dict[str, Any]:
    return {f.name: getattr(parsed_args, f.name) for f in _cli_fields(options_class)}


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _render(raw: str, parsed_args: argparse.Namespace) -> str:
    """Produce the requested output for ``raw``.

    Raises
    ------
    LexdocError
        For invalid options or template failures

    """
    normalize_options = NormalizeOptions(max_depth=parsed_args.max_depth)
    value: Any = raw
    if parsed_args.payload:
        try:
            value = json.loads(raw)
        except ValueError:
            logger.debug("Payload input is not JSON, using it as a string")
        value = convert_payload_data(value, normalize_options)

    output_format = parsed_args.output_format
    if output_format == "html":
        options = HtmlRendererOptions(
            max_depth=parsed_args.max_depth, **_options_kwargs(parsed_args, HtmlRendererOptions)
        )
        return render_html(value, renderer_options=options, normalize_options=normalize_options)

    if output_format == "text":
        text_options = PlainTextOptions(max_depth=parsed_args.max_depth, **_options_kwargs(parsed_args, PlainTextOptions))
        return extract_text(value, renderer_options=text_options, normalize_options=normalize_options)

    if output_format == "headings":
        headings = extract_headings(value, normalize_options=normalize_options)
        return json.dumps([entry.to_dict() for entry in headings], indent=2, ensure_ascii=False)

    return ast_to_json(normalize(value, normalize_options), indent=2)


def _write_output(text: str, destination: Optional[str]) -> None:
    if destination:
        Path(destination).write_text(text, encoding="utf-8")
        return
    sys.stdout.write(text)
    if not text.endswith("\n"):
        sys.stdout.write("\n")


def main(args: list[str] | None = None) -> int:
    """Execute the ``lexdoc`` command.

    Parameters
    ----------
    args : list of str or None, default None
        Command-line arguments; ``sys.argv[1:]`` when None

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        raw = _read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        output = _render(raw, parsed_args)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except RenderingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RENDERING_ERROR
    except LexdocError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        _write_output(output, parsed_args.out)
    except OSError as e:
        print(f"Error: cannot write {parsed_args.out}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    return EXIT_SUCCESS
