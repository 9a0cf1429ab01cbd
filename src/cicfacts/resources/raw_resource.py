"""Backing records read when reconciling actual resource state."""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawResource:
    """One persisted record, addressed by column name."""

    columns: Mapping[str, str] = field(default_factory=dict)

    def column_data(self, column: str) -> str:
        """Return the data stored in a column.

        Raises:
            KeyError: If the record has no such column
        """
        if column not in self.columns:
            raise KeyError(f"Record has no column {column!r}")
        return self.columns[column]
