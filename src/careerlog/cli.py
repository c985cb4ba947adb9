"""CLI entry point for careerlog."""

import asyncio
import sys
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from careerlog.cli_episodes import app as episodes_app
from careerlog.cli_post import app as post_app
from careerlog.cli_transcripts import app as transcripts_app
from careerlog.config.credentials import (
    apply_environment_overrides,
    load_environment,
    resolve_credentials,
)
from careerlog.config.logging import setup_logging
from careerlog.config.manager import ConfigManager
from careerlog.enrichment import enrich_store
from careerlog.episodes.models import Platform
from careerlog.episodes.store import EpisodeStore
from careerlog.hosts import get_all_hosts
from careerlog.platforms import build_fetchers, find_episode_url, search_podcasts
from careerlog.platforms.base import DEFAULT_TIMEOUT
from careerlog.utils.errors import CareerLogError

app = typer.Typer(
    name="careerlog",
    help="Episode data, transcripts and X posts for the 海外キャリアログ podcast",
    no_args_is_help=True,
)
app.add_typer(episodes_app)
app.add_typer(transcripts_app)
app.add_typer(post_app)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """careerlog - keep the podcast's episode data and socials up to date."""
    setup_logging(verbose=verbose, log_file=log_file)
    load_environment()


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from careerlog import __version__

    console.print(f"[bold cyan]careerlog[/bold cyan] v{__version__}")


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="Action: show or set <key> <value>"),
    key: str | None = typer.Argument(None, help="Config key (for 'set' action)"),
    value: str | None = typer.Argument(None, help="Config value (for 'set' action)"),
) -> None:
    """Manage careerlog configuration.

    Examples:
        careerlog config show

        careerlog config set amazon.region com
    """
    try:
        manager = ConfigManager()

        if action == "show":
            config = apply_environment_overrides(manager.load_config())

            console.print("\n[bold]careerlog Configuration[/bold]\n")

            table = Table(show_header=False, box=None)
            table.add_column("Key", style="cyan")
            table.add_column("Value", style="white")

            table.add_row("Config file", str(manager.config_file))
            table.add_row("", "")
            table.add_row("Log level", config.log_level)
            table.add_row("RSS directory", str(config.rss_dir))
            table.add_row("Transcripts directory", str(config.transcripts_dir))
            table.add_row("Spotify show", config.spotify.show_id)
            table.add_row("YouTube channel", config.youtube.channel)
            table.add_row("Apple podcast", config.apple.podcast_id)
            table.add_row(
                "Amazon Music show", f"{config.amazon.show_id} ({config.amazon.region})"
            )
            table.add_row("Highlights model", config.highlights.model)

            console.print(table)

            credentials = resolve_credentials()
            console.print("\n[bold]Credentials[/bold]")
            console.print(f"  Spotify: {'✓' if credentials.has_spotify else '✗'}")
            console.print(f"  YouTube: {'✓' if credentials.has_youtube else '✗'}")
            console.print(f"  AssemblyAI: {'✓' if credentials.assemblyai_api_key else '✗'}")
            console.print(f"  Groq: {'✓' if credentials.groq_api_key else '✗'}")
            console.print(f"  X: {'✓' if credentials.x_api_key else '✗'}")

        elif action == "set":
            if not key or value is None:
                console.print("[red]✗[/red] Usage: careerlog config set <key> <value>")
                sys.exit(1)

            manager.set_value(key, value)
            console.print(
                f"[green]✓[/green] Set [cyan]{key}[/cyan] = [yellow]{value}[/yellow]"
            )

        else:
            console.print(f"[red]✗[/red] Unknown action: {action}")
            console.print("Valid actions: show, set")
            sys.exit(1)

    except CareerLogError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)


@app.command("enrich")
def enrich_command(
    file: Path | None = typer.Option(
        None, "--file", "-f", help="Episodes file (default: latest in the RSS directory)"
    ),
    platforms: list[Platform] | None = typer.Option(
        None, "--platform", "-p", help="Only these platforms (repeatable)"
    ),
    guid: str | None = typer.Option(None, "--guid", help="Only this episode"),
) -> None:
    """Find missing Spotify, YouTube, Apple and Amazon Music URLs.

    Platforms without credentials are skipped. Amazon Music needs a
    Playwright browser; if it cannot run, it is skipped too.

    Examples:
        careerlog enrich

        careerlog enrich --platform apple --platform spotify
    """

    async def run_enrich() -> None:
        try:
            config = apply_environment_overrides(ConfigManager().load_config())
            credentials = resolve_credentials()
            store = EpisodeStore(file) if file else EpisodeStore.latest(config.rss_dir)
            console.print(f"[dim]Episodes file: {store.path}[/dim]")

            async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as client:
                selection = build_fetchers(config, credentials, platforms or None, client=client)

                with Progress(
                    SpinnerColumn(),
                    TextColumn("[progress.description]{task.description}"),
                    console=console,
                ) as progress:
                    task = progress.add_task("Matching episodes...", total=None)
                    result = await enrich_store(
                        store, selection.fetchers, guid=guid, skipped=selection.skipped
                    )
                    progress.update(task, completed=True)

            table = Table(title="[bold]URL Enrichment[/bold]")
            table.add_column("Platform", style="cyan")
            table.add_column("Missing", justify="right")
            table.add_column("Updated", justify="right", style="green")
            table.add_column("Not found", justify="right", style="yellow")
            table.add_column("Note", style="dim")

            for report in result.reports.values():
                table.add_row(
                    report.platform.label,
                    str(report.needed),
                    str(report.updated),
                    str(len(report.not_found)),
                    f"skipped: {report.skipped_reason}" if report.skipped else "",
                )

            console.print(table)

            if result.changed:
                console.print(
                    f"\n[green]✓[/green] Updated {result.total_updated} URL(s) in {store.path}"
                )
            else:
                console.print("\n[green]✓[/green] No new URLs found")

        except KeyboardInterrupt:
            console.print("\n[yellow]Cancelled by user[/yellow]")
            sys.exit(130)
        except CareerLogError as e:
            console.print(f"[red]✗[/red] Error: {e}")
            sys.exit(1)

    asyncio.run(run_enrich())


@app.command("find-url")
def find_url_command(
    platform: Platform = typer.Argument(..., help="Platform to search"),
    title: str = typer.Argument(..., help="Episode title"),
) -> None:
    """Look up one episode title on a single platform.

    Examples:
        careerlog find-url spotify "#12 カナダで転職するには"
    """

    async def run_find() -> None:
        try:
            config = apply_environment_overrides(ConfigManager().load_config())
            selection = build_fetchers(config, resolve_credentials(), [platform])
            if not selection.fetchers:
                console.print(
                    f"[red]✗[/red] {platform.label} unavailable: {selection.skipped[platform]}"
                )
                sys.exit(1)

            url = await find_episode_url(selection.fetchers[0], title)
            if url is None:
                console.print(f"[yellow]No {platform.label} episode matches:[/yellow] {title}")
                sys.exit(1)

            console.print(f"[green]✓[/green] {url}")

        except KeyboardInterrupt:
            console.print("\n[yellow]Cancelled by user[/yellow]")
            sys.exit(130)
        except CareerLogError as e:
            console.print(f"[red]✗[/red] Error: {e}")
            sys.exit(1)

    asyncio.run(run_find())


@app.command("apple-search")
def apple_search_command(
    term: str = typer.Argument(..., help="Podcast name to search for"),
    limit: int = typer.Option(10, "--limit", "-n", help="Maximum results", min=1, max=200),
) -> None:
    """Search Apple Podcasts to discover a show's podcast ID."""

    async def run_search() -> None:
        try:
            results = await search_podcasts(term, limit=limit)
        except CareerLogError as e:
            console.print(f"[red]✗[/red] Error: {e}")
            sys.exit(1)

        if not results:
            console.print(f"[yellow]No podcasts found for:[/yellow] {term}")
            return

        table = Table(title=f"[bold]Apple Podcasts: {term}[/bold]")
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Name")
        table.add_column("Artist", style="dim")

        for result in results:
            table.add_row(str(result.collection_id), result.collection_name, result.artist_name)

        console.print(table)

    asyncio.run(run_search())


@app.command("hosts")
def hosts_command() -> None:
    """List the show's hosts."""
    table = Table(title="[bold]Hosts[/bold]")
    table.add_column("Name", style="cyan")
    table.add_column("Color")
    table.add_column("Links", style="dim")

    for host in get_all_hosts():
        table.add_row(
            host.name,
            f"[{host.color}]{host.color}[/{host.color}]",
            "\n".join(link.href for link in host.social_links),
        )

    console.print(table)


if __name__ == "__main__":
    app()
