"""
scriptcut.cli - Typer CLI entry point.

scriptcut VIDEO PROMPT... cuts the parts of VIDEO described by PROMPT into
a single output file.
"""

from __future__ import annotations

import signal
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from scriptcut import __version__
from scriptcut.config import load_config
from scriptcut.exceptions import DependencyError, LLMResponseError, ScriptcutError
from scriptcut.llm.client import create_client_from_config
from scriptcut.llm.templates import join_prompt
from scriptcut.logging import configure_logging
from scriptcut.media.ffmpeg import FFmpegTool
from scriptcut.models import PipelineResult
from scriptcut.pipeline import run_pipeline
from scriptcut.utils import format_duration, format_size
from scriptcut.validation import check_ffmpeg

app = typer.Typer(
    name="scriptcut",
    help="Cut a video down to the parts described by a prompt.\n\n"
    "The audio is sent to Gemini, which picks the matching time ranges; "
    "FFmpeg then cuts and joins them without re-encoding.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"scriptcut {__version__}")
        raise typer.Exit()


def _terminate(signum, frame) -> None:
    raise typer.Exit(128 + signum)


def install_sigterm_handler() -> None:
    """Turn SIGTERM into an orderly exit so temporary files are cleaned up."""
    try:
        signal.signal(signal.SIGTERM, _terminate)
    except ValueError:
        # Not in the main thread
        pass


def print_summary(result: PipelineResult) -> None:
    table = Table(title="Cuts")
    table.add_column("#", style="dim")
    table.add_column("Start", style="cyan")
    table.add_column("End", style="cyan")
    table.add_column("Duration", style="green")

    for i, time_range in enumerate(result.ranges):
        table.add_row(
            str(i),
            time_range.start,
            time_range.end,
            f"{time_range.duration:.2f}s",
        )

    console.print(table)
    console.print(
        f"\n[green]✓[/green] Wrote {len(result.segments)} segment(s), "
        f"{format_duration(result.selected_duration)} total"
    )
    console.print(f"[dim]  {result.output_path} ({format_size(result.output_path)})[/dim]")


@app.command()
def cut(
    video: Path = typer.Argument(..., help="Video file to cut"),
    prompt: list[str] = typer.Argument(..., help="What to keep, in plain words"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output video path"),
    model: str | None = typer.Option(None, "--model", "-m", help="Gemini model name"),
    poll_interval: float | None = typer.Option(
        None, "--poll-interval", help="Seconds between upload status checks"
    ),
    max_poll_attempts: int | None = typer.Option(
        None, "--max-poll-attempts", help="Give up after this many status checks"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Cut VIDEO down to the ranges Gemini picks for PROMPT."""
    configure_logging(verbose)
    install_sigterm_handler()

    try:
        config = load_config(
            Path.cwd(),
            overrides={
                "output_path": output,
                "model": model,
                "poll_interval": poll_interval,
                "max_poll_attempts": max_poll_attempts,
            },
        )
        ffmpeg_path = check_ffmpeg()
        client = create_client_from_config(config)

        result = run_pipeline(
            video_path=video,
            prompt=join_prompt(prompt),
            config=config,
            media=FFmpegTool(binary=ffmpeg_path),
            client=client,
            console=console,
        )
    except DependencyError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if e.install_hint:
            console.print(f"[dim]{e.install_hint}[/dim]")
        raise typer.Exit(1)
    except LLMResponseError as e:
        console.print(f"[red]Unusable model output: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except ScriptcutError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)

    print_summary(result)
