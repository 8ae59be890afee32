"""
Source calendar loading.

The calendar to split is either a local .ics file or a feed URL such as
the calendar feed an LMS publishes for a student.
"""

from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import requests

from .component_wrapper import SourceDocument, parse_icalendar
from .debug import debug_print
from .errors import InputError


def _debug_print(msg: str) -> None:
    debug_print("SOURCE", msg)


def is_url(location: str) -> bool:
    """Check whether a source location is an http(s) or webcal URL rather than a path."""
    return urlparse(location).scheme.lower() in ('http', 'https', 'webcal')


class CalendarSource:
    """
    A calendar to split, located by path or URL.

    Reads the raw VCALENDAR text once; parse() turns it into a
    SourceDocument.
    """

    def __init__(self, location: str, timeout: int = 30):
        """
        Args:
            location: Local file path or http(s)/webcal URL
            timeout: Request timeout in seconds for URLs
        """
        self.location = location
        self.timeout = timeout
        self._raw_data: Optional[str] = None

    @property
    def raw_data(self) -> Optional[str]:
        """Get the raw VCALENDAR text, if already read."""
        return self._raw_data

    def read(self) -> str:
        """
        Read the raw VCALENDAR text.

        Raises:
            InputError: If the file cannot be read or the request fails.
        """
        if self._raw_data is None:
            if is_url(self.location):
                self._raw_data = self._fetch()
            else:
                self._raw_data = self._read_file()
        return self._raw_data

    def parse(self) -> SourceDocument:
        """Read and parse the source calendar."""
        document = parse_icalendar(self.read())
        _debug_print(
            f"Parsed {self.location}: {len(document.header)} header properties, "
            f"{len(document.components)} components"
        )
        return document

    def _read_file(self) -> str:
        path = Path(self.location)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"Cannot read calendar {path}: {e}") from e
        _debug_print(f"Read {len(data)} characters from {path}")
        return data

    def _fetch(self) -> str:
        url = self.location
        if url.lower().startswith('webcal://'):
            url = 'https://' + url[len('webcal://'):]
        try:
            response = requests.get(
                url,
                timeout=self.timeout,
                headers={
                    'User-Agent': 'calendar-split/0.1',
                    'Accept': 'text/calendar'
                }
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise InputError(f"Network error fetching {url}: {e}") from e

        # Ensure proper UTF-8 decoding
        response.encoding = 'utf-8'
        _debug_print(f"Fetched {len(response.text)} characters from {url}")
        return response.text
