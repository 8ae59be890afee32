"""
Class code extraction from event summaries.

Course calendars exported from an LMS tag every event with the course it
belongs to, e.g. ``SUMMARY:Final Exam [2025FallC-X-CSE360-77646]``. The text
inside the first bracket pair is the class code used to group events.
"""

from typing import Optional

from .component_wrapper import SourceComponent
from .debug import debug_print


# Calendar for components without a class (self created events, to-dos, ...)
DEFAULT_CLASS = 'no_associated_class'


def _debug_print(msg: str) -> None:
    debug_print("CLASSIFY", msg)


def extract_class_code(summary: Optional[str]) -> Optional[str]:
    """
    Extract the class code from an event summary.

    Takes the text between the first '[' and the first ']', verbatim.
    ``"Final Exam [2025FallC-X-CSE360-77646]"`` gives
    ``"2025FallC-X-CSE360-77646"``.

    Returns:
        The code, or None if there is no summary, a bracket is missing, or
        the first ']' does not come after the first '['.
    """
    if summary is None:
        return None
    start = summary.find('[')
    end = summary.find(']')
    if start == -1 or end == -1:
        return None
    if end > start:
        return summary[start + 1:end]
    return None


def classify_component(component: SourceComponent) -> str:
    """
    Pick the class a source component belongs to.

    Non-events, events without a summary and events whose summary carries no
    class code all go to DEFAULT_CLASS.
    """
    if not component.is_event:
        return DEFAULT_CLASS

    code = extract_class_code(component.summary)
    if code is None:
        return DEFAULT_CLASS

    if code == DEFAULT_CLASS:
        _debug_print(f"Summary {component.summary!r} names the default class, merging")
    return code
