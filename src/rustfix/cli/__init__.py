"""CLI entry point for `rustfix`."""

from __future__ import annotations

import click

from rustfix.cli.suggest import suggest


@click.group()
@click.version_option(package_name="rustfix")
def main() -> None:
    """rustfix: code-fix suggestions from rustc JSON diagnostics."""


main.add_command(suggest)
