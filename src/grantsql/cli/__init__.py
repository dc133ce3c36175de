"""CLI entry point for `grantsql`."""

from __future__ import annotations

import click

from grantsql.cli.plan import plan
from grantsql.cli.render import grant, revoke, show, show_of


@click.group()
@click.version_option(package_name="grantsql")
def main() -> None:
    """grantsql: render Snowflake GRANT, REVOKE and SHOW GRANTS statements."""


main.add_command(show)
main.add_command(show_of)
main.add_command(grant)
main.add_command(revoke)
main.add_command(plan)
