"""Config commands - inspect and update ~/.cicfacts/config.toml."""

from dataclasses import replace

import click

from cicfacts.cli.ensure import Ensure
from cicfacts.cli.json_output import emit_json
from cicfacts.cli.json_schemas import ConfigListResponse
from cicfacts.cli.output import machine_output, user_output
from cicfacts.core.config_store import CONFIG_KEYS, parse_config
from cicfacts.core.context import CicfactsContext


@click.group("config")
def config_group() -> None:
    """Manage cicfacts configuration."""


@config_group.command("list")
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output JSON format",
)
@click.pass_obj
def config_list(ctx: CicfactsContext, output_json: bool) -> None:
    """Print all configuration values."""
    store = ctx.config_store
    if output_json:
        response = ConfigListResponse(
            path=str(store.path()),
            exists=store.exists(),
            vendor=ctx.config.vendor,
            hive=ctx.config.hive,
        )
        emit_json(response.model_dump(mode="json"))
        return

    if not store.exists():
        user_output(f"No config at {store.path()}, using defaults")
    machine_output(f"vendor={ctx.config.vendor}")
    machine_output(f"hive={ctx.config.hive}")


@config_group.command("get")
@click.argument("key")
@click.pass_obj
def config_get(ctx: CicfactsContext, key: str) -> None:
    """Print the value of a configuration key."""
    Ensure.config_key(key, CONFIG_KEYS)
    machine_output(getattr(ctx.config, key))


@config_group.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
def config_set(ctx: CicfactsContext, key: str, value: str) -> None:
    """Update a configuration key."""
    Ensure.config_key(key, CONFIG_KEYS)

    updated = replace(ctx.config, **{key: value})
    try:
        parse_config({"vendor": updated.vendor, "hive": updated.hive}, ctx.config_store.path())
    except ValueError as e:
        Ensure.invariant(False, str(e))

    ctx.config_store.save(updated)
    user_output(f"Set {key}={value} in {ctx.config_store.path()}")
