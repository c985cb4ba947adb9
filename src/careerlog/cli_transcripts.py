"""CLI commands for episode transcripts.

This module provides the `careerlog transcripts` subcommand group.
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from careerlog.config.credentials import apply_environment_overrides, resolve_credentials
from careerlog.config.manager import ConfigManager
from careerlog.config.schema import GlobalConfig
from careerlog.episodes.store import EpisodeStore
from careerlog.highlights import GroqHighlightGenerator, apply_highlights, has_highlights
from careerlog.transcription import (
    AssemblyAIClient,
    TranscriptionManager,
    TranscriptStore,
    find_episodes_without_transcripts,
)
from careerlog.utils.errors import CareerLogError

app = typer.Typer(
    name="transcripts",
    help="Transcribe episodes and edit transcripts",
    no_args_is_help=True,
)
console = Console()

FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", help="Episodes file (default: latest in the RSS directory)"),
]
TranscriptsDirOption = Annotated[
    Path | None,
    typer.Option("--transcripts-dir", help="Transcripts directory (default: from config)"),
]


def _load_config() -> GlobalConfig:
    return apply_environment_overrides(ConfigManager().load_config())


def _transcript_store(config: GlobalConfig, transcripts_dir: Path | None) -> TranscriptStore:
    return TranscriptStore(transcripts_dir or config.transcripts_dir)


@app.command("transcribe")
def transcribe_command(
    guid: Annotated[str, typer.Argument(help="Episode GUID")],
    file: FileOption = None,
    transcripts_dir: TranscriptsDirOption = None,
) -> None:
    """Transcribe an episode with AssemblyAI (speaker labels on).

    An existing transcript for the episode is overwritten.
    """

    async def run_transcription() -> None:
        try:
            config = _load_config()
            api_key = resolve_credentials().require_assemblyai()

            store = EpisodeStore(file) if file else EpisodeStore.latest(config.rss_dir)
            episode = store.get_episode(guid)
            console.print(f"Episode: [cyan]{escape(episode.title)}[/cyan]")
            console.print(f"[dim]Audio URL: {episode.audio_url}[/dim]")

            settings = config.transcription
            manager = TranscriptionManager(
                _transcript_store(config, transcripts_dir),
                AssemblyAIClient(
                    api_key,
                    language_code=settings.language_code,
                    poll_interval=settings.poll_interval_seconds,
                    max_attempts=settings.max_poll_attempts,
                ),
            )

            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
            ) as progress:
                task = progress.add_task("Transcribing...", total=None)
                transcript = await manager.transcribe_episode(episode)
                progress.update(task, completed=True)

            console.print("\n[green]✓[/green] Transcription complete")
            console.print(f"[dim]Duration: {int(transcript.duration)}s[/dim]")
            console.print(f"[dim]Speakers: {len(transcript.speakers)}[/dim]")
            console.print(f"[dim]Utterances: {len(transcript.utterances)}[/dim]")
            console.print("\nRun `careerlog transcripts cleanup` next to tidy the text.")

        except KeyboardInterrupt:
            console.print("\n[yellow]Cancelled by user[/yellow]")
            sys.exit(130)
        except CareerLogError as e:
            console.print(f"[red]✗[/red] Error: {e}")
            sys.exit(1)

    asyncio.run(run_transcription())


@app.command("missing")
def missing_command(
    file: FileOption = None,
    transcripts_dir: TranscriptsDirOption = None,
) -> None:
    """Print a JSON array of episodes that have no transcript yet."""
    try:
        config = _load_config()
        store = EpisodeStore(file) if file else EpisodeStore.latest(config.rss_dir)
        missing = find_episodes_without_transcripts(
            store.load(), _transcript_store(config, transcripts_dir)
        )
    except CareerLogError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)

    print(json.dumps(missing, ensure_ascii=False, indent=2))


@app.command("speakers")
def speakers_command(
    guid: Annotated[str, typer.Argument(help="Episode GUID")],
    old_speaker: Annotated[str, typer.Argument(help="Current label, e.g. A")],
    new_speaker: Annotated[str, typer.Argument(help="New name, e.g. Ryo")],
    transcripts_dir: TranscriptsDirOption = None,
) -> None:
    """Rename a speaker label throughout a transcript.

    Examples:
        careerlog transcripts speakers <guid> A Ryo

        careerlog transcripts speakers <guid> D "John Smith"
    """

    async def run_rename() -> None:
        try:
            manager = TranscriptionManager(_transcript_store(_load_config(), transcripts_dir))
            count = await manager.rename_speaker(guid, old_speaker, new_speaker)
        except ValueError as e:
            console.print(f"[red]✗[/red] {e}")
            sys.exit(1)
        except CareerLogError as e:
            console.print(f"[red]✗[/red] Error: {e}")
            sys.exit(1)

        if count == 0:
            console.print(
                f'[yellow]⚠[/yellow] No utterances found with speaker "{escape(old_speaker)}"'
            )
            return

        console.print(f"[green]✓[/green] Updated {count} utterances")
        console.print(f'  Changed: "{escape(old_speaker)}" → "{escape(new_speaker)}"')

    asyncio.run(run_rename())


@app.command("cleanup")
def cleanup_command(
    guid: Annotated[str, typer.Argument(help="Episode GUID")],
    transcripts_dir: TranscriptsDirOption = None,
) -> None:
    """Collapse stray whitespace in a transcript and rebuild its full text."""

    async def run_cleanup() -> None:
        try:
            manager = TranscriptionManager(_transcript_store(_load_config(), transcripts_dir))
            count = await manager.cleanup(guid)
        except CareerLogError as e:
            console.print(f"[red]✗[/red] Error: {e}")
            sys.exit(1)

        console.print(f"[green]✓[/green] Cleaned {count} utterances")

    asyncio.run(run_cleanup())


@app.command("highlights")
def highlights_command(
    guid: Annotated[str, typer.Argument(help="Episode GUID")],
    force: Annotated[
        bool, typer.Option("--force", help="Regenerate highlights even if they exist")
    ] = False,
    transcripts_dir: TranscriptsDirOption = None,
) -> None:
    """Generate three shareable highlights for a transcript with Groq."""

    async def run_highlights() -> None:
        try:
            config = _load_config()
            store = _transcript_store(config, transcripts_dir)
            transcript = await store.load(guid)

            if has_highlights(transcript) and not force:
                console.print("Highlights already exist. Use --force to regenerate.")
                return

            generator = GroqHighlightGenerator(
                resolve_credentials().require_groq(), config.highlights
            )

            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
            ) as progress:
                task = progress.add_task("Generating highlights...", total=None)
                highlights = await generator.generate(transcript.full_text)
                progress.update(task, completed=True)

            apply_highlights(transcript, highlights)
            await store.save(transcript)

        except KeyboardInterrupt:
            console.print("\n[yellow]Cancelled by user[/yellow]")
            sys.exit(130)
        except CareerLogError as e:
            console.print(f"[red]✗[/red] Error: {e}")
            sys.exit(1)

        console.print("[green]✓[/green] Highlights generated")
        for number in (1, 2, 3):
            console.print(f"  {number}. {escape(transcript.get_highlight(number) or '')}")

    asyncio.run(run_highlights())
