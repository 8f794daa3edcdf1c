from typing import Optional

import typer


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:  # pragma: no cover
        import treechanges

        typer.echo(f"treechanges version: {treechanges.__version__}")
        raise typer.Exit()


app = typer.Typer(name="treechanges")


@app.callback()
def app_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """treechanges - report files added, removed or modified under directories."""
