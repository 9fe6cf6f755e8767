#!/usr/bin/env python3
"""
sjis_converter.cli.cli

Typer-based CLI that rewrites Shift-JIS ``.csv``/``.txt`` files as UTF-8.

Files whose leading bytes are already valid UTF-8 are skipped. Conversion
overwrites each file in place; there is no backup.

Examples
--------
Convert files directly inside a folder:

    sjis2utf8 ./exports

Also descend two directory levels:

    sjis2utf8 ./exports -r 2
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path
from typing import TYPE_CHECKING

import typer

from sjis_converter.errors import ConversionError
from sjis_converter.types import DEFAULT_CODEC, DEFAULT_EXTENSIONS, DEFAULT_SAMPLE_SIZE

if TYPE_CHECKING:
    from sjis_converter.application.results import FileOutcome

app = typer.Typer(
    name="sjis2utf8",
    help="Convert Shift-JIS encoded CSV/TXT files in a directory to UTF-8 in place.",
    add_completion=False,
    rich_markup_mode=None,
)

SEPARATOR = "-" * 33
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(level_name: str) -> None:
    """Send package logs to stderr at the requested level.

    Parameters
    ----------
    level_name : str
        Standard logging level name such as ``INFO`` or ``WARNING``.
    """
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown log level '{level_name}'.", param_hint="--log-level"
        )
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("sjis_converter").setLevel(level)


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly fatal error.

    Parameters
    ----------
    exc : Exception
        Exception that aborted the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _help_callback(ctx: typer.Context, value: bool) -> None:
    """Print help text to stderr and stop."""
    if not value or ctx.resilient_parsing:
        return
    typer.echo(ctx.get_help(), err=True)
    raise typer.Exit(code=0)


def _echo_outcome(outcome: FileOutcome) -> None:
    """Print one console line for a per-file outcome."""
    if outcome.status == "converted":
        typer.echo(f"✓ Converted: {outcome.path}")
    elif outcome.status == "already_utf8":
        typer.echo(f"- Already UTF-8: {outcome.path}")
    else:
        typer.echo(f"✗ Failed: {outcome.path} - {outcome.reason}")


@app.command(
    help="Convert Shift-JIS encoded CSV/TXT files in DIRECTORY to UTF-8 in place.",
    context_settings={"help_option_names": []},
)
def convert_cmd(
    ctx: typer.Context,
    directory: Path | None = typer.Argument(
        None,
        help="Directory holding the files to convert.",
        show_default=False,
    ),
    recursive_depth: int = typer.Option(
        0,
        "-r",
        "--recursive-depth",
        min=0,
        help="Directory levels to descend below DIRECTORY (0 = top level only).",
    ),
    ext: list[str] | None = typer.Option(
        None,
        "-e",
        "--ext",
        help="File extension to convert, e.g. .csv (repeatable). Default: .csv and .txt.",
    ),
    codec: str = typer.Option(
        DEFAULT_CODEC,
        "--codec",
        help="Shift-JIS variant: shift_jis, cp932 or shift_jis_2004.",
    ),
    sample_size: int = typer.Option(
        DEFAULT_SAMPLE_SIZE,
        "--sample-size",
        min=1,
        help="Bytes sampled when checking whether a file is already UTF-8.",
    ),
    full_check: bool = typer.Option(
        False,
        "--full-check",
        help="Check the whole file for UTF-8 validity instead of a prefix.",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="SJIS2UTF8_LOG_LEVEL",
        help="Logging level for diagnostics written to stderr.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    show_help: bool = typer.Option(
        False,
        "-h",
        "--help",
        is_eager=True,
        callback=_help_callback,
        help="Show this message and exit.",
    ),
) -> None:
    """Convert Shift-JIS files under DIRECTORY to UTF-8.

    Parameters
    ----------
    ctx : typer.Context
        Typer context, used for the usage line.
    directory : Path | None
        Target directory; a usage hint is printed when omitted.
    recursive_depth : int, default=0
        Maximum directory depth to descend into.

    Notes
    -----
    - Only the root directory failing to list is fatal. Per-file failures are
      reported and the run continues.
    """
    del show_help
    if directory is None:
        typer.echo("Error: no target directory given.", err=True)
        typer.echo(ctx.get_usage(), err=True)
        raise typer.Exit(code=0)

    _configure_logging(log_level)

    typer.echo(f"Target directory: {directory}")
    typer.echo(SEPARATOR)

    try:
        from sjis_converter.api import convert_directory_to_utf8

        summary = convert_directory_to_utf8(
            root=directory,
            max_depth=recursive_depth,
            extensions=tuple(ext) if ext else DEFAULT_EXTENSIONS,
            sample_size=None if full_check else sample_size,
            codec=codec,  # validated by ConversionConfig
            on_outcome=_echo_outcome,
        )
    except ConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    typer.echo(SEPARATOR)
    typer.echo(f"Done. Converted {summary.converted_count} file(s) to UTF-8.")


if __name__ == "__main__":
    app()
