"""
Output storage for split calendars.

Abstract base class and a directory implementation. Output files are
never overwritten: a second calendar for the same class is an error.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path

from icalendar import Calendar as ICalCalendar

from .debug import debug_print
from .errors import OutputCollisionError, OutputWriteError


def _debug_print(msg: str) -> None:
    debug_print("STORAGE", msg)


class CalendarWriter(ABC):
    """
    Abstract base class for split calendar destinations.

    Implementations must refuse to replace an existing calendar.
    """

    @abstractmethod
    def write(self, identifier: str, calendar: ICalCalendar) -> Path:
        """Write one class calendar and return where it went."""
        pass


class DirectoryCalendarWriter(CalendarWriter):
    """
    Writes each class calendar to {output_dir}/{class code}{extension}.

    The directory is created on first write, not on construction, so a run
    that fails before writing leaves nothing behind.
    """

    def __init__(self, output_dir: Path, extension: str = ""):
        self.output_dir = Path(output_dir)
        self.extension = extension

    def _identifier_to_filename(self, identifier: str) -> str:
        """Convert a class code to a file name inside output_dir."""
        # Path separators would escape the output directory
        name = identifier.replace("/", "_").replace("\\", "_")
        if name in ("", ".", ".."):
            name = name.replace(".", "_") or "_"
        return name + self.extension

    def path_for(self, identifier: str) -> Path:
        return self.output_dir / self._identifier_to_filename(identifier)

    def ensure_output_dir(self) -> None:
        """Create the output directory if it does not exist yet."""
        if self.output_dir.is_dir():
            return
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(
                f"Cannot create output directory {self.output_dir}: {e}"
            ) from e
        _debug_print(f"Created output directory {self.output_dir}")

    def write(self, identifier: str, calendar: ICalCalendar) -> Path:
        """
        Write a class calendar to a new file.

        Raises:
            OutputCollisionError: If the file already exists
            OutputWriteError: If the directory or file cannot be written
        """
        self.ensure_output_dir()
        path = self.path_for(identifier)
        data = calendar.to_ical(sorted=False)

        try:
            with open(path, 'xb') as f:
                f.write(data)
        except FileExistsError as e:
            raise OutputCollisionError(identifier, path) from e
        except (OSError, ValueError) as e:
            raise OutputWriteError(f"Cannot write calendar for '{identifier}' to {path}: {e}") from e

        _debug_print(f"Wrote {len(data)} bytes to {path}")
        return path


def create_calendar_writer(output_dir: Path, extension: str = "") -> CalendarWriter:
    """Factory function to create a writer rooted at the current directory."""
    output_dir = Path(output_dir)
    if not output_dir.is_absolute():
        output_dir = Path(os.getcwd()) / output_dir
    return DirectoryCalendarWriter(output_dir, extension)
