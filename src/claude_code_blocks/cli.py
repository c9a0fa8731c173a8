"""Command-line interface for Claude Code Blocks.

This module provides the `ccb` command, built with Typer, which copies code
blocks from the last Claude Code reply to the clipboard.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .blocks import extract_code_blocks
from .clipboard import copy_to_clipboard
from .scanner import CodeBlock, find_latest_session, get_last_assistant_text
from .selection import InvalidSelectionError, resolve_selection

app = typer.Typer(
    name="ccb",
    help="Copy code blocks from the last Claude Code response to the clipboard.",
    add_completion=False,
)
console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"ccb version {__version__}")
        raise typer.Exit()


def _language_label(block: CodeBlock) -> str:
    return escape(f"[{block.language}]")


def display_blocks(blocks: list[CodeBlock]) -> None:
    """Print an enumerated list of code blocks with a preview and line count."""
    console.print("\n[bold]Code blocks in last response:[/bold]\n")
    for i, block in enumerate(blocks, 1):
        console.print(
            f"  [bold cyan]{i}.[/bold cyan] [magenta]{_language_label(block)}[/magenta] "
            f"[dim]{escape(block.preview)}[/dim]  [dim]({block.line_count} lines)[/dim]",
            soft_wrap=True,
        )
    console.print()


def prompt_selection(block_count: int) -> str:
    """Read one selection token from stdin.

    There is no re-prompt; end of input counts as an empty token.
    """
    try:
        answer = console.input(f"[dim]Block? (1-{block_count}, [/dim]all[dim], [/dim]last[dim]):[/dim] ")
    except EOFError:
        answer = ""
    return answer.strip()


def copy_selection(token: str, blocks: list[CodeBlock]) -> None:
    """Resolve a selection token and copy the result to the clipboard."""
    try:
        selection = resolve_selection(token, blocks)
    except InvalidSelectionError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    if not copy_to_clipboard(selection.code):
        return

    if selection.block is None:
        console.print(f"[green]Copied all {selection.count} blocks to clipboard.[/green]")
    else:
        console.print(
            f"[green]Copied block {selection.index} [dim]{_language_label(selection.block)}[/dim] to clipboard.[/green]"
        )


@app.command()
def main(
    selection: Annotated[
        Optional[str],
        typer.Argument(
            help='Block to copy: a 1-based index, "all", or "last". Prompts when omitted and there are several blocks.',
            show_default=False,
        ),
    ] = None,
    projects_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--projects-dir", "-p",
            help="Claude Code projects directory to search. Defaults to ~/.claude/projects.",
            envvar="CCB_PROJECTS_DIR",
            file_okay=False,
        ),
    ] = None,
    session: Annotated[
        Optional[Path],
        typer.Option(
            "--session", "-s",
            help="Read this transcript file instead of the latest session.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version", "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
):
    """Copy a code block from the last Claude Code response to the clipboard.

    With a single code block it is copied straight away. With several, they
    are listed and one is chosen at the prompt, unless SELECTION is given.
    """
    session_path = session or find_latest_session(projects_dir)
    if session_path is None:
        err_console.print("[red]No Claude Code sessions found.[/red]")
        raise typer.Exit(1)

    try:
        text = get_last_assistant_text(session_path)
    except OSError as e:
        err_console.print(f"[red]Error: could not read {escape(str(session_path))}: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e
    if not text:
        err_console.print("[red]No assistant messages in latest session.[/red]")
        raise typer.Exit(1)

    blocks = extract_code_blocks(text)
    if not blocks:
        err_console.print("[yellow]No code blocks in last response.[/yellow]")
        raise typer.Exit(0)

    if selection:
        copy_selection(selection, blocks)
        return

    if len(blocks) == 1:
        block = blocks[0]
        if copy_to_clipboard(block.code):
            console.print(
                f"[green]Copied [dim]{_language_label(block)}[/dim] to clipboard.[/green] "
                f"[dim]({block.line_count} lines)[/dim]"
            )
        return

    display_blocks(blocks)
    copy_selection(prompt_selection(len(blocks)), blocks)


def run():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
