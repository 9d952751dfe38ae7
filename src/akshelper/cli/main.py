"""Entry point for the akshelper command line interface."""

import click

from akshelper import __version__
from akshelper.cli.commands.render import render
from akshelper.cli.commands.validate import validate


@click.group()
@click.version_option(__version__, prog_name="akshelper")
def main() -> None:
    """Cluster definition validation and node runtime configuration."""


main.add_command(validate)
main.add_command(render)


if __name__ == "__main__":
    main()
