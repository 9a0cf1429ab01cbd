"""Diagnose command implementation - explains the cic_icws_licensed value."""

import click
from rich.console import Console
from rich.table import Table

from cicfacts.cli.json_output import emit_json, json_error_boundary
from cicfacts.cli.json_schemas import DiagnoseCommandResponse
from cicfacts.cli.output import format_fact_value, user_output
from cicfacts.core.context import CicfactsContext
from cicfacts.core.license_probe import LicenseProbe, ProbeResult


def _render_steps(result: ProbeResult) -> Table:
    table = Table(title="cic_icws_licensed", show_lines=False)
    table.add_column("Step")
    table.add_column("Key")
    table.add_column("Result")

    site_ok = result.site_name is not None
    # A value-level error means the root key itself opened
    root_ok = site_ok or (result.error is not None and result.error.name is not None)
    table.add_row("open root", result.root_path, "ok" if root_ok else "failed")
    if root_ok:
        site_status = result.site_name if site_ok else result.outcome.value
        table.add_row("read SITE", result.root_path, site_status)
    if result.feature_path is not None:
        table.add_row(
            "open feature key",
            result.feature_path,
            "present" if result.licensed else "absent",
        )
    return table


@click.command("diagnose")
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output JSON format",
)
@click.pass_obj
@json_error_boundary
def diagnose_cmd(ctx: CicfactsContext, output_json: bool) -> None:
    """Show why cic_icws_licensed is true or false on this host.

    The fact itself only reports true/false; this command also reports
    whether a false value came from a missing key or a failed read.
    """
    result = LicenseProbe(ctx.registry, vendor=ctx.config.vendor).diagnose()

    if output_json:
        response = DiagnoseCommandResponse(
            licensed=result.licensed,
            outcome=result.outcome.value,
            root_path=result.root_path,
            site_name=result.site_name,
            feature_path=result.feature_path,
            error=result.error.message if result.error is not None else None,
        )
        emit_json(response.model_dump(mode="json"))
        return

    Console(stderr=True).print(_render_steps(result))
    user_output(
        f"cic_icws_licensed => {format_fact_value(result.licensed)} ({result.outcome.value})"
    )
    if result.error is not None:
        user_output(click.style(f"  {result.error.kind.value}: {result.error.message}", dim=True))
