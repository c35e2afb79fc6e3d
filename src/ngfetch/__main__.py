"""Allow ``python -m ngfetch``."""

from ngfetch.cli.main import cli

cli()
