import logging
import os

import click

from cicfacts.cli.commands.config import config_group
from cicfacts.cli.commands.diagnose import diagnose_cmd
from cicfacts.cli.commands.fact import fact_cmd
from cicfacts.cli.commands.icsurvey import icsurvey_group
from cicfacts.cli.ensure import Ensure
from cicfacts.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV = "CICFACTS_DEBUG"


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="cicfacts")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Resolve Customer Interaction Center facts and resource parameters."""
    if os.getenv(DEBUG_ENV):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            Ensure.invariant(False, str(e))


cli.add_command(config_group)
cli.add_command(diagnose_cmd)
cli.add_command(fact_cmd)
cli.add_command(icsurvey_group)


def main() -> None:
    """CLI entry point used by the `cicfacts` console script."""
    cli()
