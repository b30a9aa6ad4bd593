"""Main CLI entry point for hugeuploader."""

from __future__ import annotations

import click

from hugeuploader import __version__
from hugeuploader.cli.config_cmd import config
from hugeuploader.cli.upload import upload


# =============================================================================
# Main CLI Group
# =============================================================================


@click.group()
@click.version_option(version=__version__, prog_name="hugeuploader")
def cli() -> None:
    """hugeuploader - Upload huge files in retried HTTP chunks.

    Get started:

      hugeuploader config init                 # Save an endpoint profile

      hugeuploader upload big.iso              # Upload with the default profile

      hugeuploader upload big.iso -e URL -v    # One-off endpoint, verbose

    Use --help on any command for more information.
    """
    pass


cli.add_command(config)
cli.add_command(upload)


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
