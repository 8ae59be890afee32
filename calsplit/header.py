"""
Calendar header properties and the per-class header rewrite.

The header of a split calendar is the source calendar's header with three
values replaced: the product identifier, the display name and the
description. Everything else is carried over untouched and in order.
"""

from dataclasses import dataclass
from typing import Any, Iterable

from icalendar import vText


PRODID_KEY = 'PRODID'
CALNAME_KEY = 'X-WR-CALNAME'
CALDESC_KEY = 'X-WR-CALDESC'

DEFAULT_PRODID = '-//github.com/fluxdiv/canvas_calendar_split//EN'
DEFAULT_DESCRIPTION = 'Calendar events for {}'


@dataclass(frozen=True)
class HeaderProperty:
    """
    One top-level calendar property (e.g. PRODID, X-WR-CALNAME).

    The value is whatever the icalendar library decoded for the key: usually a
    vText, or a list when the key is repeated in the source header.
    """
    key: str
    value: Any

    def __repr__(self):
        return f"HeaderProperty({self.key!r}, {self.value!r})"


@dataclass(frozen=True)
class HeaderSettings:
    """Fixed values written into every rewritten header."""
    prodid: str = DEFAULT_PRODID
    description: str = DEFAULT_DESCRIPTION  # One '{}' placeholder for the class

    def describe(self, identifier: str) -> str:
        return self.description.format(identifier)


def rewrite_header(
    identifier: str,
    template: Iterable[HeaderProperty],
    settings: HeaderSettings = HeaderSettings()
) -> list[HeaderProperty]:
    """
    Build the header for one class calendar from the source header.

    Args:
        identifier: Class code the calendar is being built for
        template: Source calendar header, in document order
        settings: PRODID literal and description template to apply

    Returns:
        A new list with exactly one property per template property, in the
        same order. Only PRODID, X-WR-CALNAME and X-WR-CALDESC change value.
    """
    new_header = []
    for prop in template:
        key = prop.key.upper()
        if key == PRODID_KEY:
            new_header.append(HeaderProperty(prop.key, vText(settings.prodid)))
        elif key == CALNAME_KEY:
            new_header.append(HeaderProperty(prop.key, vText(identifier)))
        elif key == CALDESC_KEY:
            new_header.append(HeaderProperty(prop.key, vText(settings.describe(identifier))))
        else:
            new_header.append(prop)
    return new_header
