"""Watch command for treechanges CLI."""

from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from treechanges.cli.app import app
from treechanges.config import TreeChangesConfig
from treechanges.exceptions import MaskError
from treechanges.sync import ScanReport, TreeScanner, WatchService

# Create rich console
console = Console()


def display_report(scanner: TreeScanner, report: ScanReport) -> None:
    """Print one line per changed file."""
    timestamp = datetime.now().isoformat(timespec="seconds")

    for path in sorted(report.new):
        console.print(f"{timestamp} New:      [green]{escape(path)}[/green]", soft_wrap=True)
    for path in sorted(report.removed):
        console.print(f"{timestamp} Removed:  [red]{escape(path)}[/red]", soft_wrap=True)
    for path in sorted(report.modified):
        console.print(f"{timestamp} Modified: [yellow]{escape(path)}[/yellow]", soft_wrap=True)
        history = scanner.stats(path)
        if history and history.size_delta > 0:
            console.print(
                f"{timestamp}           {escape(path)} has grown by {history.size_delta} bytes",
                soft_wrap=True,
            )


@app.command()
def watch(
    directories: Optional[List[Path]] = typer.Argument(
        None, help="Directories to monitor (default: TREECHANGES_DIRECTORIES)"
    ),
    include: Optional[List[str]] = typer.Option(
        None, "--include", "-i", help="Only track filenames matching this regex"
    ),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", "-e", help="Ignore filenames matching this regex"
    ),
    recurse: Optional[bool] = typer.Option(
        None, "--recurse/--no-recurse", help="Descend into subdirectories"
    ),
    interval: Optional[float] = typer.Option(
        None, "--interval", "-n", min=0.01, help="Seconds between scans"
    ),
    scans: Optional[int] = typer.Option(
        None, "--scans", min=1, help="Stop after this many scans"
    ),
    status_file: Optional[Path] = typer.Option(
        None, "--status-file", help="Write watch status as JSON to this file"
    ),
) -> None:
    """Poll directories and print files as they are added, removed or modified."""
    config = TreeChangesConfig()

    scanner = TreeScanner(
        directories=directories or config.directories,
        include_masks=include or config.include_masks,
        exclude_masks=exclude or config.exclude_masks,
        recurse=config.recurse if recurse is None else recurse,
    )
    if not scanner.directories:
        console.print("[red]Error:[/red] no directories to watch")
        raise typer.Exit(1)

    service = WatchService(
        scanner,
        interval=interval or config.interval,
        status_path=status_file or config.status_path,
        on_scan=lambda report: display_report(scanner, report),
    )

    console.print("[cyan]Watching for changes...[/cyan]")
    try:
        service.run(max_scans=scans)
    except MaskError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[cyan]Stopped watching.[/cyan]")
