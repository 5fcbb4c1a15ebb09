"""gotest2rdjsonl CLI - `go test -json` to reviewdog rdjsonl."""

from __future__ import annotations

import io
import logging
import sys
from pathlib import Path
from typing import IO, Annotated, Sequence

import typer
from dotenv import find_dotenv, load_dotenv

from . import __version__
from .config import (
    DEFAULT_LOG_LEVEL,
    ENV_PREFIX,
    Settings,
    load_settings,
    validate_log_level,
)
from .converter import convert_stream
from .errors import ConfigError, EventDecodeError
from .log import setup_logging

logger = logging.getLogger("gotest2rdjsonl")

# Load environment variables from a .env file in the working directory
load_dotenv(find_dotenv(usecwd=True))

app = typer.Typer(
    help="Convert `go test -json` output to Reviewdog Diagnostic Format (rdjsonl).",
    add_completion=False,
)


def version_callback(v: bool) -> None:
    if v:
        typer.echo(f"v{__version__}")
        raise typer.Exit()


def log_level_callback(value: str | None) -> str | None:
    if value is None:
        return None
    errors = validate_log_level(value)
    if errors:
        raise typer.BadParameter(errors[0])
    return value.lower()


def _convert(source: IO[str], buf_lines: int) -> int:
    try:
        convert_stream(source, sys.stdout, buf_lines=buf_lines)
    except EventDecodeError as e:
        logger.error(f"failed to parse JSON line: {e}")
        return 1
    return 0


@app.command()
def convert(
    input_file: Annotated[
        Path | None,
        typer.Option("--input", "-i", help="Input file (default: stdin)", dir_okay=False),
    ] = None,
    buf_lines: Annotated[
        int | None,
        typer.Option(
            "--buf-lines",
            "-n",
            min=0,
            envvar=f"{ENV_PREFIX}BUF_LINES",
            help="The number of output lines kept before a failure or skip [default: 3]",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            envvar=f"{ENV_PREFIX}LOG_LEVEL",
            callback=log_level_callback,
            help="debug, info, warning or error [default: info]",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", help="YAML settings file", dir_okay=False),
    ] = None,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", is_eager=True, callback=version_callback),
    ] = False,
) -> None:
    """Read test events and write one diagnostic per located failure or skip."""
    settings = Settings()
    if config is not None:
        try:
            settings = load_settings(config)
        except ConfigError as e:
            setup_logging(log_level or DEFAULT_LOG_LEVEL)
            logger.error(f"failed to load settings: {e}")
            raise typer.Exit(1)

    setup_logging(log_level or settings.log_level)
    if buf_lines is None:
        buf_lines = settings.buf_lines

    if input_file is None:
        # Invalid UTF-8 becomes U+FFFD, the way Go's encoding/json reads it
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors="replace")
        raise typer.Exit(_convert(sys.stdin, buf_lines))

    try:
        f = open(input_file, encoding="utf-8", errors="replace")
    except OSError as e:
        logger.error(f"failed to open input stream: {e}")
        raise typer.Exit(1)
    with f:
        rc = _convert(f, buf_lines)
    raise typer.Exit(rc)


def main(argv: Sequence[str] | None = None) -> int:
    return app(
        args=list(argv) if argv is not None else None,
        standalone_mode=False,
    )
