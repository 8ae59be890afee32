"""
Grouping of source components into one calendar per class.

ClassGrouper is single-use: components are inserted in stream order, then
finalize() hands out one (class code, calendar) pair per non-empty group.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from icalendar import Calendar as ICalCalendar

from .classifier import DEFAULT_CLASS
from .component_wrapper import SourceComponent
from .debug import debug_print
from .errors import GrouperFinalizedError
from .header import HeaderProperty, HeaderSettings, rewrite_header


def _debug_print(msg: str) -> None:
    debug_print("GROUPER", msg)


@dataclass
class ClassGroup:
    """
    Components collected for one class, in insertion order.

    The header stays None until the grouper is finalized.
    """
    identifier: str
    components: list[SourceComponent] = field(default_factory=list)
    header: Optional[list[HeaderProperty]] = None

    @property
    def is_empty(self) -> bool:
        return not self.components

    def to_calendar(self) -> ICalCalendar:
        """
        Build the icalendar.Calendar for this group.

        Header properties are set in order and with their original value
        objects, so repeated keys and parameters survive unchanged.
        """
        calendar = ICalCalendar()
        for prop in self.header or []:
            calendar[prop.key] = prop.value
        for component in self.components:
            calendar.add_component(component.component)
        return calendar


class ClassGrouper:
    """
    Accumulates source components per class code.

    Holds the source calendar header as a read-only template and a mapping
    class code -> ClassGroup. The default class group exists from the start
    so unclassified components always have somewhere to go.
    """

    def __init__(
        self,
        header: Iterable[HeaderProperty],
        settings: Optional[HeaderSettings] = None
    ):
        """
        Args:
            header: Header properties of the source calendar
            settings: Header rewrite settings (defaults if None)
        """
        self._header: tuple[HeaderProperty, ...] = tuple(header)
        self._settings = settings or HeaderSettings()
        self._groups: dict[str, ClassGroup] = {
            DEFAULT_CLASS: ClassGroup(DEFAULT_CLASS)
        }
        self._finalized = False

    @property
    def header(self) -> tuple[HeaderProperty, ...]:
        return self._header

    @property
    def finalized(self) -> bool:
        return self._finalized

    def class_codes(self) -> list[str]:
        """Get all class codes seen so far, including the default class."""
        return list(self._groups.keys())

    def insert(self, identifier: str, component: SourceComponent) -> None:
        """Append a component to its class group, creating the group if needed."""
        if self._finalized:
            raise GrouperFinalizedError("insert")

        group = self._groups.get(identifier)
        if group is None:
            _debug_print(f"New class: {identifier}")
            group = ClassGroup(identifier)
            self._groups[identifier] = group
        group.components.append(component)

    def finalize(self) -> Iterator[tuple[str, ICalCalendar]]:
        """
        Close the grouper and produce one calendar per class.

        The default class is skipped when nothing was routed to it; every
        other class is always produced. No further insert() or finalize()
        calls are allowed afterwards.

        Returns:
            Iterator of (class code, calendar) pairs in class creation order.
            Callers should not rely on that order.
        """
        if self._finalized:
            raise GrouperFinalizedError("finalize")
        self._finalized = True

        groups = list(self._groups.values())
        self._groups = {}
        return self._emit(groups)

    def _emit(self, groups: list[ClassGroup]) -> Iterator[tuple[str, ICalCalendar]]:
        for group in groups:
            if group.identifier == DEFAULT_CLASS and group.is_empty:
                _debug_print("Default class is empty, skipping")
                continue
            group.header = rewrite_header(group.identifier, self._header, self._settings)
            _debug_print(f"Finalized {group.identifier}: {len(group.components)} components")
            yield group.identifier, group.to_calendar()
