"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from fixed_length_reader.configuration import (
    DEFAULT_LAYOUT_FILENAME,
    ConfigurationError,
    LayoutConfiguration,
    load_layout,
    write_placeholder_layout,
)
from fixed_length_reader.decoding_engine import FixedLengthEngine, create_engine
from fixed_length_reader.errors import ArgumentError, FixedLengthError
from fixed_length_reader.results_writing import to_plain_data, write_structure_workbook


class CliError(Exception):
    """Custom CLI error."""


_LAYOUT_OPTION = click.option(
    "--layout",
    "layout_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON layout file",
)
_INPUT_OPTION = click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the fixed-length data file",
)
_ENCODING_OPTION = click.option(
    "--encoding",
    "encoding",
    required=False,
    default=None,
    help="Override the encoding declared in the layout",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="fixed-length-reader")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Fixed-length record decoder."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-layout")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_LAYOUT_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML layout template to write",
)
def generate_layout(output_path: str) -> None:
    """Generate an example YAML layout with guidance comments."""
    try:
        resolved_output = write_placeholder_layout(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="decode-records")
@_LAYOUT_OPTION
@_INPUT_OPTION
@_ENCODING_OPTION
def decode_records(layout_path: str, input_path: str, encoding: str | None) -> None:
    """Decode every line of a file with the layout's record shape, one JSON object per line."""
    try:
        layout, engine = _prepare(layout_path, encoding)
        if layout.record is None:
            raise CliError(f"Layout {layout.path} has no 'record' section.")
        lines = _read_lines(input_path, engine.encoding)
        for line_number, line in enumerate(lines, start=1):
            if not line:
                continue
            record = engine.process(line, layout.record, line_number)
            click.echo(json.dumps(to_plain_data(record), ensure_ascii=False))
    except (ConfigurationError, FixedLengthError, ArgumentError, OSError) as exc:
        raise CliError(_describe(exc)) from exc


@cli.command(name="decode-structure")
@_LAYOUT_OPTION
@_INPUT_OPTION
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional workbook (.xlsx) to write instead of printing JSON",
)
@_ENCODING_OPTION
def decode_structure(
    layout_path: str, input_path: str, output_path: str | None, encoding: str | None
) -> None:
    """Decode a header/data/trailer/end file with the layout's structure."""
    try:
        layout, engine = _prepare(layout_path, encoding)
        if layout.structure is None:
            raise CliError(f"Layout {layout.path} has no 'structure' section.")
        lines = _read_lines(input_path, engine.encoding)
        structure = engine.process_structure(lines, layout.structure)
        if output_path:
            click.echo(str(write_structure_workbook(structure, output_path)))
        else:
            click.echo(json.dumps(to_plain_data(structure), ensure_ascii=False, indent=2))
    except (ConfigurationError, FixedLengthError, ArgumentError, OSError, ValueError) as exc:
        raise CliError(_describe(exc)) from exc


def _prepare(
    layout_path: str, encoding: str | None
) -> tuple[LayoutConfiguration, FixedLengthEngine]:
    layout = load_layout(layout_path)
    return layout, create_engine(encoding or layout.encoding)


def _read_lines(input_path: str, encoding: str) -> list[str]:
    path = Path(input_path)
    if not path.exists():
        raise CliError(f"Input file not found: {path}")
    with path.open(encoding=encoding, errors="replace", newline="") as handle:
        lines = [line.rstrip("\r\n") for line in handle]
    while lines and not lines[-1]:
        lines.pop()
    return lines


def _describe(exc: Exception) -> str:
    if isinstance(exc, FixedLengthError) and exc.__cause__ is not None:
        return f"{exc}: {exc.__cause__}"
    return str(exc)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
