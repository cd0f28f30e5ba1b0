"""Main CLI application using Typer."""
import asyncio
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..conversation import load_asset
from ..display import (
    CompositeDisplay,
    ConsoleDisplay,
    ConsoleStatusIndicator,
    ConversationLog,
    render_chat_html,
)
from ..formatter import render as render_markup
from ..orchestrator import RequestOrchestrator
from .providers import configure_logging, get_transport

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="rxlens",
    help="Read handwritten prescriptions with a multimodal model",
    no_args_is_help=True,
    add_completion=False,
)

# Console for rich output
console = Console()


@app.command()
def convert(
    image: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Prescription image to analyze"
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Gemini model (overrides GEMINI_MODEL)"
    ),
    html_out: Path | None = typer.Option(
        None,
        "--html",
        "-o",
        help="Also write the conversation as an HTML page"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-L",
        help="Diagnostic log level (overrides RXLENS_LOG_LEVEL)"
    )
):
    """Send a prescription image to the model and show the formatted reply."""
    configure_logging(log_level)

    async def _convert() -> bool:
        try:
            asset = load_asset(image)
        except OSError as e:
            console.print(f"[red]Error: could not read {image}: {e}[/red]")
            raise typer.Exit(code=1)

        log = ConversationLog()
        async with get_transport(console, model) as transport:
            orchestrator = RequestOrchestrator(
                transport=transport,
                display=CompositeDisplay(ConsoleDisplay(console), log),
                indicator=ConsoleStatusIndicator(console),
            )
            orchestrator.select(asset)
            await orchestrator.submit_pending()

        if html_out is not None:
            html_out.write_text(render_chat_html(log), encoding="utf-8")
            console.print(f"[dim]Conversation written to {html_out}[/dim]")

        return bool(log) and not log[-1].is_error

    if not asyncio.run(_convert()):
        raise typer.Exit(code=1)


@app.command()
def render(
    source: Path | None = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Markdown reply to render (reads stdin when omitted)"
    )
):
    """Render a saved model reply to markup without calling the API."""
    text = source.read_text(encoding="utf-8") if source is not None else sys.stdin.read()
    typer.echo(render_markup(text))


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
