from pathlib import Path
from typing import Optional

import typer

from autousecase.cli.factories import make_app
from autousecase.common import L, needle


def impl_command(
    repository_file: Path = typer.Argument(
        ..., help="Path to the repository Dart file."
    ),
    name: Optional[str] = typer.Option(
        None, "--name", "-n", help=needle.get(L.cli.option.name.help)
    ),
    datasource: Optional[str] = typer.Option(
        None, "--datasource", "-d", help=needle.get(L.cli.option.datasource.help)
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help=needle.get(L.cli.option.output.help)
    ),
    project_name: Optional[str] = typer.Option(
        None, "--project-name", help=needle.get(L.cli.option.project_name.help)
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help=needle.get(L.cli.option.dry_run.help)
    ),
):
    app_instance = make_app()
    result = app_instance.run_impl(
        repository_file,
        output_dir=output,
        repository_name=name,
        data_source_name=datasource,
        project_name=project_name,
        dry_run=dry_run,
    )
    if not result.success:
        raise typer.Exit(code=1)
