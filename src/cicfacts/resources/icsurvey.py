"""The icsurvey resource type.

Only the `name` parameter is declared: it is the namevar, munged to a
string and validated with the generic name rule (non-empty, no whitespace).
"""

import re
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cicfacts.resources.raw_resource import RawResource

_WHITESPACE = re.compile(r"\s")


def munge_string(value: Any) -> Any:
    """Convert scalars to their string form; leave other values to validation.

    Booleans render lowercase ("true"/"false") as they appear in manifests.
    """
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    return value


def validate_name(value: str) -> str:
    """Apply the generic name rule.

    Raises:
        ValueError: If the name is empty or contains whitespace
    """
    if not value:
        raise ValueError("Name must not be empty")
    if _WHITESPACE.search(value):
        raise ValueError(f"Name must not contain whitespace: {value!r}")
    return value


class Icsurvey(BaseModel):
    """An icsurvey managed resource."""

    model_config = ConfigDict(frozen=True, strict=True)

    NAMEVAR: ClassVar[str] = "name"

    name: str = Field(..., description="icsurvey's name", json_schema_extra={"namevar": True})

    @field_validator("name", mode="before")
    @classmethod
    def _munge_name(cls, value: Any) -> Any:
        return munge_string(value)

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        return validate_name(value)

    @classmethod
    def namevar(cls) -> str:
        """Name of the parameter that identifies the resource."""
        return cls.NAMEVAR

    @property
    def identity(self) -> str:
        return getattr(self, self.NAMEVAR)

    @classmethod
    def from_raw(cls, raw_resource: RawResource) -> "Icsurvey":
        """Translate a backing record into a resource.

        Raises:
            KeyError: If the record has no name column
            pydantic.ValidationError: If the stored name fails validation
        """
        return cls(name=raw_resource.column_data("name"))
