"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing, input loading and session setup shared by the
commands.
"""

import sys
from pathlib import Path
from typing import IO, Optional

import click

from ..config import MAX_INPUT_BYTES, load_settings
from ..core.sample import sample_text
from ..core.session import TreeSession
from .renderers import JsonRenderer


class InputTooLargeError(click.ClickException):
    """Raised when input exceeds MAX_INPUT_BYTES."""

    def __init__(self, size: int):
        super().__init__(f"Input is {size} bytes, limit is {MAX_INPUT_BYTES} bytes")


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Print a warning message with a yellow alert symbol."""
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """Print an informational message, dimmed."""
    click.echo(click.style(f"   {message}", dim=True))


def read_input(source: Optional[IO[str]], use_sample: bool = False) -> str:
    """
    Read JSON text from an open file/stdin, or return the sample document.

    Raises:
        click.UsageError: If neither a source nor --sample is given.
        InputTooLargeError: If the text exceeds MAX_INPUT_BYTES.
    """
    if use_sample:
        return sample_text()
    if source is None:
        raise click.UsageError("Provide a JSON file (or '-' for stdin), or use --sample")

    text = source.read()
    size = len(text.encode("utf-8"))
    if size > MAX_INPUT_BYTES:
        raise InputTooLargeError(size)
    return text


def load_input(
    source: Optional[IO[str]],
    use_sample: bool,
    renderer: Optional[JsonRenderer] = None,
) -> str:
    """
    Like read_input, but with a renderer given, input errors are printed as
    a JSON error envelope before exiting.
    """
    try:
        return read_input(source, use_sample=use_sample)
    except click.ClickException as e:
        if renderer is None:
            raise
        renderer.render_error(e)
        sys.exit(e.exit_code)


def open_session(config_path: Optional[str] = None) -> TreeSession:
    """Create a session with settings from the config file and environment."""
    settings = load_settings(Path(config_path) if config_path else None)
    return TreeSession(settings)
