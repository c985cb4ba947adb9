"""CLI commands for the episode store.

This module provides the `careerlog episodes` subcommand group: turning the
RSS feed into episode JSON, inspecting it, fixing URLs by hand and pruning
old files.
"""

import json
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from careerlog.config.credentials import apply_environment_overrides
from careerlog.config.manager import ConfigManager
from careerlog.config.schema import GlobalConfig
from careerlog.episodes import (
    EpisodeStore,
    Platform,
    PlatformUrls,
    apply_batch_updates,
    cleanup_rss_directory,
    find_latest_episodes_file,
    find_latest_rss_file,
    generate_episodes_file,
    parse_feed,
    timestamped_filename,
    update_channel_info,
    update_episode_urls,
)
from careerlog.episodes.store import dump_json
from careerlog.utils.atomic import write_file_atomic
from careerlog.utils.errors import CareerLogError
from careerlog.utils.formatting import format_date

app = typer.Typer(
    name="episodes",
    help="Generate, inspect and update episode JSON files",
    no_args_is_help=True,
)
console = Console()

RssDirOption = Annotated[
    Path | None,
    typer.Option("--rss-dir", help="RSS directory (default: from config)"),
]
FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", help="Episodes file (default: latest in the RSS directory)"),
]


def _load_config() -> GlobalConfig:
    return apply_environment_overrides(ConfigManager().load_config())


def _open_store(file: Path | None, rss_dir: Path | None) -> EpisodeStore:
    if file is not None:
        return EpisodeStore(file)
    return EpisodeStore.latest(rss_dir or _load_config().rss_dir)


def _require_file(path: Path) -> None:
    if not path.exists():
        console.print(f"[red]✗[/red] File not found: {path}")
        sys.exit(1)


@app.command("generate")
def generate_command(
    xml_file: Annotated[
        Path | None, typer.Argument(help="RSS XML file (default: latest feed download)")
    ] = None,
    output: Annotated[
        Path | None,
        typer.Argument(help="Output file (default: new timestamped episodes file)"),
    ] = None,
    rss_dir: RssDirOption = None,
) -> None:
    """Build the episodes file from the RSS feed, keeping known platform URLs.

    Examples:
        careerlog episodes generate

        careerlog episodes generate public/rss/latest.xml public/rss/20251101-0815-episodes.json
    """
    try:
        directory = rss_dir or _load_config().rss_dir
        xml_path = xml_file or find_latest_rss_file(directory)
        _require_file(xml_path)
        output_path = output or directory / timestamped_filename("episodes.json")

        console.print(f"[dim]Reading RSS XML from: {xml_path}[/dim]")
        new_episodes = generate_episodes_file(xml_path, output_path)

        console.print(f"[green]✓[/green] Wrote episodes to {output_path}")
        if new_episodes:
            console.print(f"  New episodes added: {len(new_episodes)}")
            for episode in new_episodes:
                console.print(f"  - [{escape(episode.guid)}] {escape(episode.title)}")
        else:
            console.print("  No new episodes")

    except CareerLogError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)


@app.command("xml-to-json")
def xml_to_json_command(
    xml_file: Annotated[Path, typer.Argument(help="RSS XML file")],
    output: Annotated[Path, typer.Argument(help="Output JSON file")],
) -> None:
    """Convert a feed to the channel + episodes JSON document."""
    _require_file(xml_file)

    try:
        feed = parse_feed(xml_file.read_text(encoding="utf-8"))
        write_file_atomic(output, dump_json(feed.to_json_dict()))
    except CareerLogError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)

    console.print(f"[green]✓[/green] Converted {len(feed.episodes)} episodes")
    console.print(f"  Channel: {escape(feed.channel.title)}")
    console.print(f"  Output: {output}")


@app.command("latest")
def latest_command(rss_dir: RssDirOption = None) -> None:
    """Print the path of the newest episodes file."""
    try:
        print(find_latest_episodes_file(rss_dir or _load_config().rss_dir))
    except CareerLogError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)


@app.command("list")
def list_command(
    file: FileOption = None,
    rss_dir: RssDirOption = None,
    missing: Annotated[
        bool, typer.Option("--missing", "-m", help="Only episodes missing a platform URL")
    ] = False,
    limit: Annotated[
        int, typer.Option("--limit", "-n", help="Number of episodes to show", min=1)
    ] = 20,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """List stored episodes and which platform URLs they have."""
    try:
        episodes = _open_store(file, rss_dir).load()
    except CareerLogError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)

    if missing:
        episodes = [
            episode
            for episode in episodes
            if any(episode.needs_url(platform) for platform in Platform)
        ]
    shown = episodes[:limit]

    if json_output:
        print(json.dumps([episode.to_json_dict() for episode in shown], ensure_ascii=False, indent=2))
        return

    if not shown:
        console.print("[yellow]No episodes found.[/yellow]")
        return

    table = Table(title="[bold]Episodes[/bold]")
    table.add_column("GUID", style="dim", no_wrap=True)
    table.add_column("Title", style="cyan")
    table.add_column("Date")
    table.add_column("Duration")
    for platform in Platform:
        table.add_column(platform.label, justify="center")
    table.add_column("X", justify="center")

    for episode in shown:
        posted = episode.new_episode_intro_posted_to_x
        table.add_row(
            episode.guid,
            escape(episode.title),
            format_date(episode.date),
            episode.display_duration,
            *("✓" if episode.get_url(platform) else "[red]✗[/red]" for platform in Platform),
            "-" if posted is None else ("✓" if posted else "✗"),
        )

    console.print(table)
    console.print(f"\n[dim]Showing {len(shown)} of {len(episodes)} episode(s)[/dim]")


@app.command("update")
def update_command(
    guid: Annotated[str, typer.Argument(help="Episode GUID")],
    spotify: Annotated[str | None, typer.Option("--spotify", help="Spotify URL")] = None,
    youtube: Annotated[str | None, typer.Option("--youtube", help="YouTube URL")] = None,
    apple: Annotated[str | None, typer.Option("--apple", help="Apple Podcasts URL")] = None,
    amazon: Annotated[str | None, typer.Option("--amazon", help="Amazon Music URL")] = None,
    file: FileOption = None,
    rss_dir: RssDirOption = None,
) -> None:
    """Set platform URLs on one episode by hand.

    Examples:
        careerlog episodes update abc123 --spotify https://open.spotify.com/episode/xyz
    """
    urls = PlatformUrls(spotify=spotify, youtube=youtube, apple=apple, amazon=amazon)

    try:
        store = _open_store(file, rss_dir)
        episodes = store.load()
        episode = update_episode_urls(episodes, guid, urls)
        store.save(episodes)
    except ValueError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(1)
    except CareerLogError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)

    console.print(f"[green]✓[/green] Updated {escape(episode.title)}")
    for platform, url in urls.provided().items():
        console.print(f"  {platform.label}: {url}")


@app.command("batch-update")
def batch_update_command(
    updates_file: Annotated[Path, typer.Argument(help="JSON array of {guid, ...Url} entries")],
    file: FileOption = None,
    rss_dir: RssDirOption = None,
) -> None:
    """Apply many URL updates from a JSON file."""
    _require_file(updates_file)

    try:
        updates = json.loads(updates_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]✗[/red] Invalid JSON in {updates_file}: {e}")
        sys.exit(1)

    if not isinstance(updates, list):
        console.print(f"[red]✗[/red] {updates_file} must contain a JSON array")
        sys.exit(1)

    try:
        store = _open_store(file, rss_dir)
        episodes = store.load()
        updated = apply_batch_updates(episodes, updates)
        if updated:
            store.save(episodes)
    except CareerLogError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)

    console.print(f"[green]✓[/green] Updated {len(updated)} of {len(updates)} episode(s)")


@app.command("cleanup")
def cleanup_command(
    rss_dir: RssDirOption = None,
    days: Annotated[
        int | None,
        typer.Option("--days", "-d", help="Keep episodes files this many days", min=0),
    ] = None,
) -> None:
    """Delete old feed downloads and episodes files."""
    try:
        config = _load_config()
        directory = rss_dir or config.rss_dir
        if not directory.is_dir():
            console.print(f"[red]✗[/red] RSS directory not found: {directory}")
            sys.exit(1)

        days_to_keep = config.retention.episode_days_to_keep if days is None else days
        report = cleanup_rss_directory(directory, days_to_keep=days_to_keep)
    except CareerLogError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)

    console.print(
        f"[green]✓[/green] Deleted {len(report.deleted)} file(s), kept {len(report.kept)}"
    )
    for path in report.deleted:
        console.print(f"  [dim]- {path.name}[/dim]")


@app.command("channel-info")
def channel_info_command(
    xml_file: Annotated[Path, typer.Argument(help="RSS XML file")],
    output: Annotated[
        Path | None,
        typer.Argument(help="Output file (default: channel_info_file from config)"),
    ] = None,
) -> None:
    """Refresh channel-info.json if the channel metadata changed."""
    _require_file(xml_file)

    try:
        output_path = output or _load_config().channel_info_file
        changed = update_channel_info(xml_file, output_path)
    except CareerLogError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)

    if changed:
        console.print(f"[green]✓[/green] Channel info written to {output_path}")
    else:
        console.print("[green]✓[/green] Channel info is up to date. No changes needed.")
