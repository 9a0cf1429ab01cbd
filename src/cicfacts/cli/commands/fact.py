"""Fact command implementation - resolves facts for this host."""

import click

from cicfacts.cli.ensure import Ensure
from cicfacts.cli.json_output import emit_json, json_error_boundary
from cicfacts.cli.output import format_fact_value, machine_output
from cicfacts.core.context import CicfactsContext
from cicfacts.core.facts import BUILTIN_FACTS, resolve_facts


@click.command("fact")
@click.argument("names", nargs=-1)
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output JSON format",
)
@click.pass_obj
@json_error_boundary
def fact_cmd(ctx: CicfactsContext, names: tuple[str, ...], output_json: bool) -> None:
    """Resolve facts (all registered facts if no NAMES are given).

    Facts confined to another platform are not evaluated and are left out
    of the output.
    """
    if not output_json:
        known = {fact.name for fact in BUILTIN_FACTS}
        for name in names:
            Ensure.invariant(name in known, f"Unknown fact: {name}")

    values = resolve_facts(ctx, names or None)

    if output_json:
        emit_json(values)
        return

    # A single requested fact prints its bare value, like facter
    if len(names) == 1:
        if names[0] in values:
            machine_output(format_fact_value(values[names[0]]))
        return

    for name, value in values.items():
        machine_output(f"{name} => {format_fact_value(value)}")
