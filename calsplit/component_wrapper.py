"""
Lightweight wrapper around icalendar components.

The splitter only needs to know a component's type and, for events, its
summary text. The wrapper delegates to the underlying icalendar component
rather than copying its data, so the component is written out exactly as it
was parsed.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from icalendar import Calendar as ICalCalendar, Component as ICalComponent

from .errors import InputError
from .header import HeaderProperty


EVENT_TYPE = 'VEVENT'


@dataclass
class SourceComponent:
    """
    One top-level component of the source calendar (VEVENT, VTODO, ...).

    Never modified by the splitter; it is only placed into a class calendar.
    """
    component: ICalComponent  # The actual iCalendar component

    @property
    def component_type(self) -> str:
        """Get the component's type tag, e.g. 'VEVENT' or 'VTODO'."""
        return self.component.name

    @property
    def is_event(self) -> bool:
        return self.component_type == EVENT_TYPE

    @property
    def summary(self) -> Optional[str]:
        """
        Get the event's SUMMARY as text.

        Returns None for non-events and for events without a SUMMARY.
        """
        if not self.is_event:
            return None
        summary = self.component.get('SUMMARY')
        if isinstance(summary, list):
            # Repeated SUMMARY lines: the first one wins
            summary = summary[0] if summary else None
        return str(summary) if summary is not None else None

    @property
    def uid(self) -> str:
        uid = self.component.get('UID')
        return str(uid) if uid else ''

    def __repr__(self):
        return f"SourceComponent(type={self.component_type!r}, summary={self.summary!r})"


@dataclass
class SourceDocument:
    """A parsed calendar: header properties plus top-level components."""
    header: list[HeaderProperty] = field(default_factory=list)
    components: list[SourceComponent] = field(default_factory=list)


def parse_icalendar(ical_text: Union[str, bytes]) -> SourceDocument:
    """
    Parse iCalendar text into a SourceDocument.

    Args:
        ical_text: Raw iCalendar text (VCALENDAR)

    Returns:
        Header properties and components, both in document order. A header
        key that appears more than once becomes a single property holding a
        list of values, placed where the key first appeared.

    Raises:
        InputError: If the text is not a single VCALENDAR
    """
    try:
        calendar = ICalCalendar.from_ical(ical_text)
    except ValueError as e:
        raise InputError(f"Could not parse calendar: {e}") from e

    if calendar.name != 'VCALENDAR':
        raise InputError(f"Expected a VCALENDAR, found {calendar.name}")

    return SourceDocument(
        header=[HeaderProperty(key, value) for key, value in calendar.items()],
        components=[SourceComponent(c) for c in calendar.subcomponents],
    )
