"""Pydantic models for JSON output schemas.

These models define the validated JSON shapes of commands that support
--json output.
"""

from pydantic import BaseModel, ConfigDict, Field


class DiagnoseCommandResponse(BaseModel):
    """JSON response schema for `cicfacts diagnose`.

    Attributes:
        licensed: Value the cic_icws_licensed fact reports
        outcome: Where the probe stopped
        root_path: Directory Services root key that was read
        site_name: SITE value used to build the feature path (None if unread)
        feature_path: License feature key that was checked (None if not reached)
        error: Registry error message (None on success)
    """

    model_config = ConfigDict(strict=True)

    licensed: bool
    outcome: str = Field(
        ...,
        pattern="^(licensed|root_unavailable|site_missing|feature_absent|access_denied)$",
    )
    root_path: str
    site_name: str | None
    feature_path: str | None
    error: str | None


class ConfigListResponse(BaseModel):
    """JSON response schema for `cicfacts config list --json`."""

    model_config = ConfigDict(strict=True)

    path: str
    exists: bool
    vendor: str
    hive: str


class IcsurveyValidateResponse(BaseModel):
    """JSON response schema for `cicfacts icsurvey validate --json`."""

    model_config = ConfigDict(strict=True)

    valid: bool
    name: str
    errors: list[str]
