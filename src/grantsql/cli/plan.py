"""The `plan` command: render every statement described by a TOML grant plan."""

from __future__ import annotations

from pathlib import Path

import click

from grantsql.cli._shared import emit, output_options
from grantsql.plan import PlanError, load_plan, render_plan
from grantsql.request import Action


@click.command()
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--revoke", "revoke", is_flag=True, help="Render REVOKE instead of GRANT.")
@output_options
def plan(path: Path, revoke: bool, output_format: str, log: bool) -> None:
    """Render GRANT (or REVOKE) statements for a grant plan file."""
    try:
        requests = load_plan(path)
    except PlanError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1) from e

    action = Action.REVOKE if revoke else Action.GRANT
    emit(
        render_plan(requests, action),
        output_format=output_format,
        command=f"plan {action.value}",
        log=log,
        source=str(path),
    )
