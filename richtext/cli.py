"""Command-line interface for richtext."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from richtext import __version__
from richtext.components import plain_text
from richtext.config import DEFAULT_PATTERN, MAX_DEPTH, compile_pattern
from richtext.logging_config import setup_logging
from richtext.parsers.markup import parse_markup
from richtext.splitting import split
from richtext.storage.yaml_writer import save_yaml

app = typer.Typer(
    name="richtext",
    help="Split styled rich-text markup on a delimiter pattern.",
)
console = Console()


@app.command("split")
def split_command(
    input_file: Path = typer.Argument(
        ...,
        help="Markup file to split",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    pattern: str = typer.Option(
        DEFAULT_PATTERN,
        "--pattern",
        "-p",
        help="Delimiter as regular expression (default: newline)",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the parts to this YAML file",
    ),
    max_depth: int = typer.Option(
        MAX_DEPTH,
        "--max-depth",
        help="Maximum markup nesting accepted",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every step of the split",
    ),
) -> None:
    """Split a markup document and show the resulting parts."""
    if verbose:
        setup_logging(logging.DEBUG)

    try:
        # Validate the pattern before reading the document
        regex = compile_pattern(pattern)
        root = parse_markup(input_file.read_bytes(), max_depth=max_depth)
        parts = split(root, regex)

        console.print(f"[bold]{len(parts)} part(s)[/bold] split on {escape(repr(pattern))}")
        for index, part in enumerate(parts, start=1):
            console.print(f"  [dim]{index:>3}[/dim] {escape(plain_text(part))}")

        if output is not None:
            output_path = save_yaml(parts, regex, output)
            console.print()
            console.print(f"[bold green]Saved to:[/bold green] {output_path}")

    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e


@app.command()
def render(
    input_file: Path = typer.Argument(
        ...,
        help="Markup file to render",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
) -> None:
    """Print the plain text of a markup document."""
    try:
        root = parse_markup(input_file.read_bytes())
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e

    console.print(escape(plain_text(root)), highlight=False)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"richtext {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
