"""icsurvey commands - check names against the icsurvey resource type."""

import click
from pydantic import ValidationError

from cicfacts.cli.json_output import emit_json
from cicfacts.cli.json_schemas import IcsurveyValidateResponse
from cicfacts.cli.output import machine_output, user_output
from cicfacts.resources.icsurvey import Icsurvey


@click.group("icsurvey")
def icsurvey_group() -> None:
    """Work with icsurvey resources."""


@icsurvey_group.command("validate")
@click.argument("name")
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output JSON format",
)
def icsurvey_validate(name: str, output_json: bool) -> None:
    """Validate NAME as an icsurvey namevar and print its normalized form."""
    try:
        resource = Icsurvey(name=name)
    except ValidationError as e:
        messages = [error["msg"] for error in e.errors()]
        if output_json:
            response = IcsurveyValidateResponse(valid=False, name=name, errors=messages)
            emit_json(response.model_dump(mode="json"))
        else:
            for message in messages:
                user_output(click.style("Error: ", fg="red") + message)
        raise SystemExit(1) from None

    if output_json:
        response = IcsurveyValidateResponse(valid=True, name=resource.identity, errors=[])
        emit_json(response.model_dump(mode="json"))
        return
    machine_output(resource.identity)
