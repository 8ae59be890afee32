from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

import requests

from calsplit.calendar_source import CalendarSource, is_url
from calsplit.errors import InputError

from ics_samples import CANVAS_CALENDAR


class TestCalendarSource(unittest.TestCase):
    def test_is_url(self) -> None:
        self.assertTrue(is_url("https://canvas.example.edu/feeds/calendars/user_abc.ics"))
        self.assertTrue(is_url("webcal://canvas.example.edu/feed.ics"))
        self.assertFalse(is_url("calendar.ics"))
        self.assertFalse(is_url("/home/student/calendar.ics"))

    def test_reads_local_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "canvas.ics"
            path.write_text(CANVAS_CALENDAR, encoding="utf-8")

            document = CalendarSource(str(path)).parse()

            self.assertEqual(len(document.components), 5)

    def test_missing_file_is_input_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(InputError):
                CalendarSource(str(Path(tmp) / "missing.ics")).read()

    def test_fetches_url(self) -> None:
        response = mock.Mock()
        response.text = CANVAS_CALENDAR
        with mock.patch("calsplit.calendar_source.requests.get", return_value=response) as get:
            source = CalendarSource("webcal://canvas.example.edu/feed.ics")
            document = source.parse()

        self.assertEqual(get.call_args.args[0], "https://canvas.example.edu/feed.ics")
        response.raise_for_status.assert_called_once()
        self.assertEqual(source.raw_data, CANVAS_CALENDAR)
        self.assertEqual(len(document.header), 6)

    def test_network_error_is_input_error(self) -> None:
        with mock.patch(
            "calsplit.calendar_source.requests.get",
            side_effect=requests.ConnectionError("connection refused"),
        ):
            with self.assertRaises(InputError) as ctx:
                CalendarSource("https://canvas.example.edu/feed.ics").read()

        self.assertIsInstance(ctx.exception.__cause__, requests.ConnectionError)


if __name__ == "__main__":
    unittest.main()
