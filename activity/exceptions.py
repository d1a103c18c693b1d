"""Custom exceptions for the activity package."""
from __future__ import annotations

from typing import Sequence


class ActivityError(RuntimeError):
    """Base error for the internship activity engine."""


class InvalidDate(ActivityError):
    """Raised when a raw value cannot be normalized to a calendar date."""

    def __init__(self, raw: object, reasons: Sequence[str] = ()) -> None:
        self.raw = raw
        self.reasons = list(reasons)
        detail = "; ".join(self.reasons) if self.reasons else "unrecognized value"
        super().__init__(f"Invalid date {raw!r}: {detail}")
