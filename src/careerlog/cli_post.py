"""CLI commands for posting to X.

This module provides the `careerlog post` subcommand group. Every command
takes --dry-run to print the tweets without posting them.
"""

import asyncio
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from careerlog.config.credentials import apply_environment_overrides, resolve_credentials
from careerlog.config.manager import ConfigManager
from careerlog.config.schema import GlobalConfig
from careerlog.episodes.store import EpisodeStore
from careerlog.social import (
    PostedThread,
    XClient,
    auto_post_next_episode,
    post_episode_highlight,
    post_google_form_reminder,
    post_new_episode_intro,
)
from careerlog.transcription import TranscriptStore
from careerlog.utils.errors import CareerLogError

app = typer.Typer(
    name="post",
    help="Post episode announcements, highlights and reminders to X",
    no_args_is_help=True,
)
console = Console()

DryRunOption = Annotated[
    bool, typer.Option("--dry-run", help="Show the tweets without posting")
]
FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", help="Episodes file (default: latest in the RSS directory)"),
]


def _load_config() -> GlobalConfig:
    return apply_environment_overrides(ConfigManager().load_config())


def _x_client(dry_run: bool) -> XClient | None:
    if dry_run:
        return None
    return XClient(resolve_credentials().require_x())


def _show_thread(thread: PostedThread) -> None:
    for index, text in enumerate(thread.texts):
        label = "Tweet" if index == 0 else "Reply"
        console.print(f"\n[bold]{label}[/bold] [dim]({len(text)} chars)[/dim]")
        console.print("─" * 50)
        console.print(escape(text))
        console.print("─" * 50)

    if thread.dry_run:
        console.print("\n[yellow]Dry run:[/yellow] nothing was posted")
    else:
        for tweet_id in thread.tweet_ids:
            console.print(f"[green]✓[/green] Posted tweet {tweet_id}")


@app.command("intro")
def intro_command(
    guid: Annotated[str, typer.Argument(help="Episode GUID")],
    hosts: Annotated[str, typer.Argument(help='Host handles, e.g. "@togashi_ryo, @onepercentdsgn"')],
    file: FileOption = None,
    dry_run: DryRunOption = False,
) -> None:
    """Announce a new episode with its platform links as a reply."""

    async def run_intro() -> None:
        try:
            client = _x_client(dry_run)
            store = EpisodeStore(file) if file else EpisodeStore.latest(_load_config().rss_dir)
            thread = await post_new_episode_intro(store, guid, hosts, client, dry_run=dry_run)
        except CareerLogError as e:
            console.print(f"[red]✗[/red] Error: {e}")
            sys.exit(1)

        _show_thread(thread)

    asyncio.run(run_intro())


@app.command("auto")
def auto_command(
    hosts: Annotated[str, typer.Argument(help="Host handles for the announcement")],
    file: FileOption = None,
    dry_run: DryRunOption = False,
) -> None:
    """Announce the first episode that has not been posted yet."""

    async def run_auto() -> None:
        try:
            client = _x_client(dry_run)
            store = EpisodeStore(file) if file else EpisodeStore.latest(_load_config().rss_dir)
            thread = await auto_post_next_episode(store, hosts, client, dry_run=dry_run)
        except CareerLogError as e:
            console.print(f"[red]✗[/red] Error: {e}")
            sys.exit(1)

        if thread is None:
            console.print("[green]✓[/green] No episodes need to be posted to X")
            return

        if thread.episode is not None:
            console.print(f"Episode: [cyan]{escape(thread.episode.title)}[/cyan]")
        _show_thread(thread)

    asyncio.run(run_auto())


@app.command("highlight")
def highlight_command(
    guid: Annotated[str, typer.Argument(help="Episode GUID")],
    number: Annotated[int, typer.Argument(help="Highlight number (1-3)", min=1, max=3)],
    file: FileOption = None,
    transcripts_dir: Annotated[
        Path | None,
        typer.Option("--transcripts-dir", help="Transcripts directory (default: from config)"),
    ] = None,
    dry_run: DryRunOption = False,
) -> None:
    """Post one of an episode's transcript highlights."""

    async def run_highlight() -> None:
        try:
            config = _load_config()
            client = _x_client(dry_run)
            store = EpisodeStore(file) if file else EpisodeStore.latest(config.rss_dir)
            transcripts = TranscriptStore(transcripts_dir or config.transcripts_dir)
            thread = await post_episode_highlight(
                store, transcripts, guid, number, client, dry_run=dry_run
            )
        except ValueError as e:
            console.print(f"[red]✗[/red] {e}")
            sys.exit(1)
        except CareerLogError as e:
            console.print(f"[red]✗[/red] Error: {e}")
            sys.exit(1)

        _show_thread(thread)

    asyncio.run(run_highlight())


@app.command("form-reminder")
def form_reminder_command(
    form_url: Annotated[
        str | None, typer.Option("--url", help="Form URL (default: from config)")
    ] = None,
    dry_run: DryRunOption = False,
) -> None:
    """Remind listeners that the question form is open."""

    async def run_reminder() -> None:
        try:
            url = form_url or _load_config().social.google_form_url
            client = _x_client(dry_run)
            thread = await post_google_form_reminder(url, client, dry_run=dry_run)
        except CareerLogError as e:
            console.print(f"[red]✗[/red] Error: {e}")
            sys.exit(1)

        _show_thread(thread)

    asyncio.run(run_reminder())
