"""CLI entrypoint for generating the content manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from .config import BuildPaths
from .errors import ManifestBuildError
from .manifests import generate_manifest
from .models import Manifest

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="Generate content/manifest.json from configured HTML fragment directories.")

ProjectOption = Annotated[
    Path,
    typer.Option("--project", "-p", help="Project root containing content/manifest.config.json."),
]


@app.command()
def build(project: ProjectOption = Path(".")) -> None:
    """Scan content directories and rewrite the manifest."""
    paths = BuildPaths.for_project(project)
    try:
        manifest, written = generate_manifest(paths)
    except ManifestBuildError as exc:
        err_console.print(f"[bold red]Manifest build failed[/]: {exc}", highlight=False)
        raise typer.Exit(code=1) from exc

    console.print(f"[bold green]Generated manifest at[/] {_display_path(written, paths.root)}")
    _print_summary(manifest)


def _print_summary(manifest: Manifest) -> None:
    console.print(
        "[bold blue]Summary[/]: "
        f"{len(manifest.collections)} collection(s), "
        f"{manifest.child_count} child section(s), "
        f"{manifest.file_count} file(s)."
    )


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
