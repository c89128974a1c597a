from pathlib import Path
from typing import Optional

import typer

from autousecase.cli.factories import make_app
from autousecase.common import L, bus, needle
from autousecase.spec import GenerationMode


def generate_command(
    repository_file: Path = typer.Argument(
        ..., help="Path to the repository Dart file."
    ),
    path: Optional[Path] = typer.Option(
        None, "--path", "-p", help=needle.get(L.cli.option.path.help)
    ),
    name: Optional[str] = typer.Option(
        None, "--name", "-n", help=needle.get(L.cli.option.name.help)
    ),
    pro: bool = typer.Option(False, "--pro", help=needle.get(L.cli.option.pro.help)),
    simple: bool = typer.Option(
        False, "--simple", help=needle.get(L.cli.option.simple.help)
    ),
    project_name: Optional[str] = typer.Option(
        None, "--project-name", help=needle.get(L.cli.option.project_name.help)
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help=needle.get(L.cli.option.dry_run.help)
    ),
):
    if pro and simple:
        bus.error(L.error.conflicting_modes)
        raise typer.Exit(code=1)

    mode: Optional[GenerationMode] = None
    if pro:
        mode = GenerationMode.PRO
    elif simple:
        mode = GenerationMode.SIMPLE

    app_instance = make_app()
    result = app_instance.run_generate(
        repository_file,
        output_dir=path,
        repository_name=name,
        mode=mode,
        project_name=project_name,
        dry_run=dry_run,
    )
    if not result.success:
        raise typer.Exit(code=1)
