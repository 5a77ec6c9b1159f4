"""CLI entrypoint for release-retention."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Release and deployment retention policy evaluator")
config_app = typer.Typer(help="Configuration commands")


@app.callback()
def main_callback() -> None:
    """Apply configured logging before any command runs."""
    commands.setup_logging()


@app.command("releases")
def releases_cmd(
    keep: int | None = typer.Option(None, "--keep", "-n", min=0, help="Releases to keep per project"),
    data: Path | None = typer.Option(None, "--data", help="Directory holding the catalog JSON files"),
    as_json: bool = typer.Option(False, "--json", help="Emit decisions as JSON"),
) -> None:
    """Show the releases to retain."""
    commands.releases(keep=keep, data_dir=data, as_json=as_json)


@app.command("deployments")
def deployments_cmd(
    keep: int | None = typer.Option(
        None, "--keep", "-n", min=0, help="Deployments to keep per project/environment"
    ),
    data: Path | None = typer.Option(None, "--data", help="Directory holding the catalog JSON files"),
    as_json: bool = typer.Option(False, "--json", help="Emit decisions as JSON"),
) -> None:
    """Show the deployments to retain."""
    commands.deployments(keep=keep, data_dir=data, as_json=as_json)


@app.command("orphans")
def orphans_cmd(
    data: Path | None = typer.Option(None, "--data", help="Directory holding the catalog JSON files"),
) -> None:
    """List releases whose project no longer exists."""
    commands.orphans(data_dir=data)


@app.command("summary")
def summary_cmd(
    keep_releases: int | None = typer.Option(None, "--keep-releases", min=0),
    keep_deployments: int | None = typer.Option(None, "--keep-deployments", min=0),
    data: Path | None = typer.Option(None, "--data", help="Directory holding the catalog JSON files"),
) -> None:
    """Count retained and prunable records."""
    commands.summary(
        keep_releases=keep_releases, keep_deployments=keep_deployments, data_dir=data
    )


@config_app.command("show")
def config_show_cmd() -> None:
    """Show effective configuration."""
    commands.config_show()


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
