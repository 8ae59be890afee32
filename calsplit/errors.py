"""
Exception hierarchy for calendar splitting.

Every failure the command line reports to the user derives from
CalendarSplitError, so the entry point can catch one type and exit non-zero.
"""

from pathlib import Path
from typing import Optional


class CalendarSplitError(Exception):
    """Base class for all calendar split failures."""


class ConfigError(CalendarSplitError):
    """Configuration file missing (when given explicitly) or unparseable."""


class InputError(CalendarSplitError):
    """Source calendar could not be read or parsed."""


class OutputWriteError(CalendarSplitError):
    """Output directory could not be created or a file write failed."""


class OutputCollisionError(OutputWriteError):
    """A calendar file for this class already exists in the output directory."""

    def __init__(self, identifier: str, path: Path):
        super().__init__(f"Calendar for '{identifier}' already exists: {path}")
        self.identifier = identifier
        self.path = path


class GrouperFinalizedError(CalendarSplitError):
    """The grouper was used after finalize()."""

    def __init__(self, operation: Optional[str] = None):
        message = "ClassGrouper has already been finalized"
        if operation:
            message = f"Cannot {operation}: {message.lower()}"
        super().__init__(message)
