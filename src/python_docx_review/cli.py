"""Command-line interface for python-docx-review.

Provides commands for switching on change tracking and anonymizing comment
authors from the terminal.
"""

from pathlib import Path
from typing import Annotated

import typer

from . import ReviewDocument, __version__
from .aliases import default_alias_path
from .errors import DocxReviewError
from .results import OperationResult

app = typer.Typer(
    name="docx-review",
    help="Prepare Word documents for review from the command line.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"docx-review version {__version__}")
        raise typer.Exit()


def _finish(doc: ReviewDocument, result: OperationResult, output: Path, done: str) -> None:
    """Save on success, otherwise report the failure and exit 1."""
    if not result.success:
        typer.echo(f"Error: {result.message}", err=True)
        raise typer.Exit(1)
    doc.save(output)
    typer.echo(f"{done} and saved to {output}")


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Prepare Word documents for review from the command line."""
    pass


@app.command()
def track(
    file: Annotated[Path, typer.Argument(help="Path to the .docx file")],
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Switch on change tracking."""
    try:
        with ReviewDocument(file) as doc:
            result = doc.enable_tracked_changes()
            if result.success and not result.changed:
                typer.echo(f"Change tracking already enabled in {file}")
                if output is not None and output != file:
                    doc.save(output)
                    typer.echo(f"Saved to {output}")
                return
            _finish(doc, result, output or file, "Enabled change tracking")
    except DocxReviewError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def anonymize(
    file: Annotated[Path, typer.Argument(help="Path to the .docx file")],
    aliases: Annotated[
        Path | None,
        typer.Option(
            "--aliases", "-a", help="Alias file to write (default: output path with .json)"
        ),
    ] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Replace comment authors with Author1, Author2, ... aliases."""
    output_path = output or file
    alias_path = aliases or default_alias_path(output_path)
    try:
        with ReviewDocument(file) as doc:
            result = doc.anonymize_comments(alias_path)
            _finish(doc, result, output_path, f"Anonymized {len(result.aliases or {})} authors")
            typer.echo(f"Author aliases written to {result.alias_path}")
    except DocxReviewError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def deanonymize(
    file: Annotated[Path, typer.Argument(help="Path to the .docx file")],
    aliases: Annotated[
        Path | None,
        typer.Option("--aliases", "-a", help="Alias file to read (default: file path with .json)"),
    ] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Restore comment authors from an alias file."""
    try:
        with ReviewDocument(file) as doc:
            result = doc.deanonymize_comments(aliases)
            _finish(doc, result, output or file, "Restored comment authors")
    except DocxReviewError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def authors(
    file: Annotated[Path, typer.Argument(help="Path to the .docx file")],
    details: Annotated[
        bool, typer.Option("--details", "-d", help="Also list each comment with date and text")
    ] = False,
) -> None:
    """List comment authors."""
    try:
        with ReviewDocument(file) as doc:
            comments = doc.comments
            typer.echo(f"File: {file}")
            typer.echo(f"Comments: {len(comments)}")
            typer.echo(f"Change tracking: {'on' if doc.tracking_enabled else 'off'}")
            for name in doc.comment_authors:
                typer.echo(f"  {name}")
            if details:
                typer.echo("")
                for comment in comments:
                    date = comment.date.isoformat() if comment.date else "-"
                    typer.echo(f"  [{comment.id}] {comment.author} ({date}): {comment.text}")
    except DocxReviewError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
