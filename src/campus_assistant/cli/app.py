"""Main CLI application using Typer."""
import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..conversation import Conversation
from ..knowledge import GENERAL_CATEGORY, CampusDataError, KeywordMatcher
from ..ui.formatting import to_rich_markup
from .providers import get_campus_data, get_log_level, get_reply_delay

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="campus-assistant",
    help="Campus AI Assistant: canned answers about schedules, faculty, dining, library and admin",
    invoke_without_command=True,
    add_completion=True,
)

# Console for rich output
console = Console()

DATA_HELP = "YAML knowledge base (default: $CAMPUS_ASSISTANT_DATA or built-in data)"


def _load(data: Path | None):
    try:
        return get_campus_data(data)
    except CampusDataError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


def _delay(min_delay: float | None, max_delay: float | None, no_delay: bool = False):
    try:
        return get_reply_delay(min_delay, max_delay, no_delay)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


def _print_reply(content: str, category: str | None) -> None:
    title = "[bold green]Assistant[/bold green]"
    if category and category != GENERAL_CATEGORY:
        title += f" [dim]({category})[/dim]"
    console.print(Panel(to_rich_markup(content), title=title, title_align="left", border_style="green"))


@app.callback()
def main_callback(ctx: typer.Context):
    """Start the TUI when no command is given."""
    if ctx.invoked_subcommand is None:
        tui_command(data=None, log_level=None, min_delay=None, max_delay=None, no_delay=False)


@app.command(name="tui")
def tui_command(
    data: Path | None = typer.Option(None, "--data", "-d", help=DATA_HELP),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show the log panel at this level (debug/info/warning/error)"
    ),
    min_delay: float | None = typer.Option(None, "--min-delay", help="Minimum reply delay in seconds"),
    max_delay: float | None = typer.Option(None, "--max-delay", help="Maximum reply delay in seconds"),
    no_delay: bool = typer.Option(False, "--no-delay", help="Reply immediately"),
):
    """Launch the interactive terminal chat widget."""
    from ..ui import run_textual_tui

    campus_data, source = _load(data)
    delay = _delay(min_delay, max_delay, no_delay)
    try:
        level = get_log_level(log_level)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    asyncio.run(run_textual_tui(campus_data, delay=delay, log_level=level, data_source=source))


@app.command()
def chat(
    data: Path | None = typer.Option(None, "--data", "-d", help=DATA_HELP),
    min_delay: float | None = typer.Option(None, "--min-delay", help="Minimum reply delay in seconds"),
    max_delay: float | None = typer.Option(None, "--max-delay", help="Maximum reply delay in seconds"),
    no_delay: bool = typer.Option(False, "--no-delay", help="Reply immediately"),
):
    """Plain console chat with the assistant."""
    campus_data, _ = _load(data)
    delay = _delay(min_delay, max_delay, no_delay)

    conversation = Conversation(KeywordMatcher(campus_data), delay=delay)

    console.print("[bold cyan]Campus AI Assistant[/bold cyan]")
    console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")
    _print_reply(conversation.messages[0].content, None)

    while True:
        try:
            user_input = console.input("[bold yellow]You:[/bold yellow] ")

            if not user_input.strip():
                continue

            if user_input.strip().lower() in ('exit', 'quit', 'q'):
                console.print("[dim]Goodbye![/dim]")
                break

            # One event loop per turn; input is read outside of it
            with console.status("[dim]Assistant is typing...[/dim]"):
                reply = asyncio.run(conversation.send(user_input))

            if reply is not None:
                _print_reply(reply.content, reply.category)

        except KeyboardInterrupt:
            console.print("\n[dim]Goodbye![/dim]")
            break
        except EOFError:
            console.print("\n[dim]Goodbye![/dim]")
            break


@app.command()
def ask(
    query: str = typer.Argument(..., help="Question to ask"),
    data: Path | None = typer.Option(None, "--data", "-d", help=DATA_HELP),
):
    """Answer a single question and exit."""
    if not query.strip():
        console.print("[yellow]Nothing to ask.[/yellow]")
        raise typer.Exit(code=1)

    campus_data, _ = _load(data)
    result = KeywordMatcher(campus_data).match(query)

    console.print(f"[dim]Category:[/dim] [bold]{result.category}[/bold]")
    _print_reply(result.content, result.category)


@app.command()
def actions(
    data: Path | None = typer.Option(None, "--data", "-d", help=DATA_HELP),
):
    """List the quick actions."""
    campus_data, _ = _load(data)

    table = Table(title="Quick Actions")
    table.add_column("Label", style="cyan")
    table.add_column("Query")
    table.add_column("Category", style="magenta")

    for action in campus_data.quick_actions:
        label = f"{action.icon} {action.label}" if action.icon else action.label
        table.add_row(label, action.query, action.category)

    console.print(table)


@app.command()
def categories(
    data: Path | None = typer.Option(None, "--data", "-d", help=DATA_HELP),
):
    """List the categories and the phrases they answer."""
    campus_data, source = _load(data)

    table = Table(title=f"Knowledge Base ({source})")
    table.add_column("Category", style="magenta")
    table.add_column("Phrases", style="cyan")

    for name, phrases in campus_data.categories.items():
        table.add_row(name, ", ".join(phrases))

    console.print(table)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
