"""Custom exceptions for the spreadsheet intake package."""
from __future__ import annotations

from activity.exceptions import ActivityError


class IngestionError(ActivityError):
    """Raised when a spreadsheet cannot be turned into internship records."""
