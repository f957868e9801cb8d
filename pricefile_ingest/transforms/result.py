"""Shared result type for value transforms that can emit a warning."""

from __future__ import annotations

from typing import NamedTuple


class FieldResult(NamedTuple):
    """A normalized cell value plus an optional data-quality warning."""
    value: str
    warning: str | None = None

    def add_warning_to(self, warnings: list[str]) -> str:
        """Append the warning (if any) to *warnings* and return the value."""
        if self.warning:
            warnings.append(self.warning)
        return self.value
