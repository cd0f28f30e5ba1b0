"""Provider factory functions for CLI.

Centralizes creation of the transport and logging setup from environment
variables. Hides configuration details from command implementations.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from ..config import DEFAULT_LOG_LEVEL, DEFAULT_MODEL, DEFAULT_PROVIDER, LOG_LEVEL_ENV
from ..transport import Transport, create_transport

# Default console for output
_console = Console()


def get_transport(console: Console | None = None, model: str | None = None) -> Transport:
    """Create the inference transport from environment variables.

    Args:
        console: Optional Rich console for output
        model: Model override (takes precedence over GEMINI_MODEL)

    Returns:
        Gemini transport instance

    Raises:
        SystemExit: If GEMINI_API_KEY is not set

    Environment variables:
        GEMINI_API_KEY: Gemini API key (required)
        GEMINI_MODEL: Gemini model (default: gemini-2.5-flash)
    """
    import typer

    con = console or _console
    api_key = os.getenv("GEMINI_API_KEY")
    if not api_key:
        con.print("[red]Error: GEMINI_API_KEY not set in environment[/red]")
        raise typer.Exit(code=1)

    model_name = model or os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
    return create_transport(DEFAULT_PROVIDER, api_key=api_key, model=model_name)


def configure_logging(level: str | None = None, console: Console | None = None) -> int:
    """Route log records to the console through Rich.

    Args:
        level: Level name (falls back to RXLENS_LOG_LEVEL, then WARNING)
        console: Optional Rich console to log to

    Returns:
        The numeric level that was applied
    """
    name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )
    return numeric
