"""Command line entry point for the BSV Claude Agents installer."""

from __future__ import annotations

import sys

import click

from . import __version__, configure_logging, create_installer
from .config import get_config
from .exceptions import InstallerError


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--local",
    is_flag=True,
    help="Copy the current working directory instead of cloning the remote repository.",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output.")
@click.version_option(__version__, prog_name="bsv-claude-agents")
def main(local: bool, verbose: bool) -> None:
    """Install BSV Claude agents into ~/.claude/agents."""
    configure_logging(verbose)

    try:
        installer = create_installer(get_config())
        installer.run(local=local)
    except (InstallerError, OSError, RuntimeError) as e:
        click.echo(f"❌ Error setting up BSV Claude Agents: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
