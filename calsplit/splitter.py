"""
Split one calendar into one calendar per class.

Parses the source once, routes every top-level component to its class,
then writes each class calendar. The first failure stops the run; files
already written stay on disk.
"""

from pathlib import Path
from typing import Callable, Optional, Union

from .classifier import classify_component
from .component_wrapper import SourceDocument, parse_icalendar
from .debug import debug_print
from .grouper import ClassGrouper
from .header import HeaderSettings
from .output_storage import CalendarWriter


def _debug_print(msg: str) -> None:
    debug_print("SPLIT", msg)


def group_document(
    document: SourceDocument,
    settings: Optional[HeaderSettings] = None
) -> ClassGrouper:
    """Route every component of a parsed calendar into a new ClassGrouper."""
    grouper = ClassGrouper(document.header, settings)
    for component in document.components:
        grouper.insert(classify_component(component), component)
    _debug_print(
        f"Grouped {len(document.components)} components into "
        f"{len(grouper.class_codes())} classes"
    )
    return grouper


def split_document(
    document: SourceDocument,
    writer: CalendarWriter,
    settings: Optional[HeaderSettings] = None,
    on_written: Optional[Callable[[str, Path], None]] = None
) -> dict[str, Path]:
    """
    Split a parsed calendar and write one calendar per class.

    Args:
        document: Parsed source calendar
        writer: Destination for the class calendars
        settings: Header rewrite settings (defaults if None)
        on_written: Called with (class code, path) after each file is written

    Returns:
        Dict mapping class code to the written file

    Raises:
        OutputWriteError: On the first class calendar that cannot be written
    """
    grouper = group_document(document, settings)

    written = {}
    for identifier, calendar in grouper.finalize():
        path = writer.write(identifier, calendar)
        written[identifier] = path
        if on_written:
            on_written(identifier, path)
    return written


def split_calendar_text(
    ical_text: Union[str, bytes],
    writer: CalendarWriter,
    settings: Optional[HeaderSettings] = None,
    on_written: Optional[Callable[[str, Path], None]] = None
) -> dict[str, Path]:
    """Parse raw iCalendar text and split it. See split_document()."""
    return split_document(parse_icalendar(ical_text), writer, settings, on_written)
