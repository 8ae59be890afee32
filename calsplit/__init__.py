"""
Calendar Split Module

This module splits one calendar into one calendar per class code:
- Configuration parsing (config.py)
- Source calendar loading from a file or URL (calendar_source.py)
- Component wrapper and parsing (component_wrapper.py)
- Class code extraction (classifier.py)
- Header rewrite (header.py)
- Per-class grouping (grouper.py)
- Output files (output_storage.py)
- The split itself (splitter.py)
"""

from .config import Config
from .calendar_source import CalendarSource
from .classifier import DEFAULT_CLASS, extract_class_code, classify_component
from .component_wrapper import SourceComponent, SourceDocument, parse_icalendar
from .errors import (
    CalendarSplitError, ConfigError, InputError,
    OutputWriteError, OutputCollisionError, GrouperFinalizedError
)
from .grouper import ClassGrouper, ClassGroup
from .header import HeaderProperty, HeaderSettings, rewrite_header
from .output_storage import CalendarWriter, DirectoryCalendarWriter, create_calendar_writer
from .splitter import group_document, split_document, split_calendar_text

__all__ = [
    'Config',
    'CalendarSource',
    'DEFAULT_CLASS',
    'extract_class_code',
    'classify_component',
    'SourceComponent',
    'SourceDocument',
    'parse_icalendar',
    'CalendarSplitError',
    'ConfigError',
    'InputError',
    'OutputWriteError',
    'OutputCollisionError',
    'GrouperFinalizedError',
    'ClassGrouper',
    'ClassGroup',
    'HeaderProperty',
    'HeaderSettings',
    'rewrite_header',
    'CalendarWriter',
    'DirectoryCalendarWriter',
    'create_calendar_writer',
    'group_document',
    'split_document',
    'split_calendar_text',
]
