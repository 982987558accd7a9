"""CLI interface for YouTube transcript fetcher"""

import json
import logging
from enum import Enum
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .api.transcript_fetcher import TranscriptFetcher
from .api.video_id import extract_video_id
from .config import config
from .errors import TranscriptError
from .models import RetrievalConfig, Transcript

app = typer.Typer(
    name="yt-transcript",
    help="Fetch the timed captions of a YouTube video",
)
console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    text = "text"
    json = "json"


def _timestamp(seconds: float) -> str:
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(int(minutes), 60)
    return f"{hours:02d}:{minutes:02d}:{secs:06.3f}"


def _report(error: Exception) -> None:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", style="bold", highlight=False)


@app.callback()
def setup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Validate settings and configure logging for all commands"""
    try:
        config.validate()
    except ValueError as e:
        err_console.print(
            f"[red]Configuration error:[/red] {escape(str(e))}", style="bold", highlight=False
        )
        raise typer.Exit(1)

    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.command()
def fetch(
    video: str = typer.Argument(..., help="YouTube video ID (11 characters) or URL"),
    lang: Optional[str] = typer.Option(
        None, "--lang", "-l", help="Language code of the track to fetch (exact match)"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text, "--format", "-f", help="Output format"
    ),
    timestamps: bool = typer.Option(
        False, "--timestamps", "-t", help="Prefix each line with its start time (text format)"
    ),
):
    """Fetch the transcript of a single video

    Examples:
        yt-transcript fetch DIC-E6W4QBw
        yt-transcript fetch "https://www.youtube.com/watch?v=DIC-E6W4QBw" --lang en
        yt-transcript fetch https://youtu.be/DIC-E6W4QBw -f json
    """
    lang = lang or config.preferred_language
    try:
        video_id = extract_video_id(video)
        with TranscriptFetcher() as fetcher:
            entries = fetcher.fetch_transcript(video_id, RetrievalConfig(lang=lang))
    except TranscriptError as e:
        _report(e)
        raise typer.Exit(1)

    transcript = Transcript(
        video_id=video_id,
        language=entries[0].lang,
        entries=entries,
    )

    if output_format is OutputFormat.json:
        typer.echo(json.dumps(transcript.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return

    for entry in transcript.entries:
        if timestamps:
            typer.echo(f"[{_timestamp(entry.offset)}] {entry.text}")
        else:
            typer.echo(entry.text)


@app.command()
def languages(
    video: str = typer.Argument(..., help="YouTube video ID (11 characters) or URL"),
):
    """List the caption languages available for a video

    Example:
        yt-transcript languages DIC-E6W4QBw
    """
    try:
        with TranscriptFetcher() as fetcher:
            codes = fetcher.list_languages(video)
    except TranscriptError as e:
        _report(e)
        raise typer.Exit(1)

    if not codes:
        console.print("[yellow]No caption tracks[/yellow]")
        return

    for code in codes:
        typer.echo(code)


@app.command("video-id")
def video_id(
    video: str = typer.Argument(..., help="YouTube video URL"),
):
    """Print the video ID extracted from a URL

    Example:
        yt-transcript video-id "https://www.youtube.com/shorts/DIC-E6W4QBw"
    """
    try:
        typer.echo(extract_video_id(video))
    except TranscriptError as e:
        _report(e)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
