import sys

from currencli.presentation.cli.main import cli

sys.exit(cli())
