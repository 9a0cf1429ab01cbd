"""JSON output utilities for CLI commands with machine-parseable output."""

import json
from collections.abc import Callable
from functools import wraps
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cicfacts.cli.output import machine_output


class ErrorResponse(BaseModel):
    """Pydantic model for error JSON responses.

    Attributes:
        error: Error message
        error_type: Error class name (e.g., "ValueError")
        exit_code: Exit code for the process
    """

    model_config = ConfigDict(strict=True)

    error: str
    error_type: str
    exit_code: int = Field(default=1, ge=0, le=255)


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption.

    For Pydantic models, call model.model_dump(mode='json') before
    passing to this function.
    """
    machine_output(json.dumps(data, indent=2))


def emit_json_error(error: str, error_type: str, exit_code: int = 1) -> None:
    """Output error as JSON and exit.

    Raises:
        SystemExit: Always raises to terminate with specified exit code
    """
    error_response = ErrorResponse(
        error=error,
        error_type=error_type,
        exit_code=exit_code,
    )
    emit_json(error_response.model_dump(mode="json"))
    raise SystemExit(exit_code)


def json_error_boundary(func: Callable) -> Callable:
    """Decorator to catch exceptions and emit JSON errors when in JSON mode.

    Inspects function kwargs for an 'output_json' flag. If set, exceptions
    are reported as a structured ErrorResponse. Otherwise they bubble up
    for normal error handling.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except Exception as e:
            if kwargs.get("output_json", False):
                emit_json_error(str(e), type(e).__name__, exit_code=1)
            raise

    return wrapper
