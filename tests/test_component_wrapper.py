from __future__ import annotations

import unittest

from calsplit.component_wrapper import parse_icalendar
from calsplit.errors import InputError
from calsplit.splitter import group_document

from ics_samples import CANVAS_CALENDAR


class TestParseIcalendar(unittest.TestCase):
    def test_header_in_document_order(self) -> None:
        document = parse_icalendar(CANVAS_CALENDAR)
        self.assertEqual(
            [p.key for p in document.header],
            ['VERSION', 'PRODID', 'X-WR-CALNAME', 'X-WR-CALDESC', 'CALSCALE', 'METHOD'],
        )
        self.assertEqual(document.header[2].value, 'Original')

    def test_components_in_document_order(self) -> None:
        document = parse_icalendar(CANVAS_CALENDAR)
        self.assertEqual(
            [c.uid for c in document.components],
            ['event-1', 'event-2', 'event-3', 'todo-1', 'event-4'],
        )
        self.assertEqual(
            [c.component_type for c in document.components],
            ['VEVENT', 'VEVENT', 'VEVENT', 'VTODO', 'VEVENT'],
        )

    def test_summary_only_for_events(self) -> None:
        document = parse_icalendar(CANVAS_CALENDAR)
        by_uid = {c.uid: c for c in document.components}
        self.assertEqual(by_uid['event-2'].summary, 'A [MATH101]')
        self.assertTrue(by_uid['event-2'].is_event)
        self.assertFalse(by_uid['todo-1'].is_event)
        self.assertIsNone(by_uid['todo-1'].summary)

    def test_bytes_input(self) -> None:
        document = parse_icalendar(CANVAS_CALENDAR.encode('utf-8'))
        self.assertEqual(len(document.components), 5)

    def test_garbage_is_input_error(self) -> None:
        with self.assertRaises(InputError):
            parse_icalendar("this is not a calendar")

    def test_repeated_header_key_is_one_list_property(self) -> None:
        text = (
            "BEGIN:VCALENDAR\n"
            "VERSION:2.0\n"
            "X-FOO:one\n"
            "X-WR-CALNAME:Original\n"
            "X-FOO:two\n"
            "BEGIN:VEVENT\n"
            "UID:event-1\n"
            "SUMMARY:A [MATH101]\n"
            "END:VEVENT\n"
            "END:VCALENDAR\n"
        )
        document = parse_icalendar(text)

        self.assertEqual([p.key for p in document.header], ['VERSION', 'X-FOO', 'X-WR-CALNAME'])
        self.assertEqual(document.header[1].value, ['one', 'two'])

        calendars = dict(group_document(document).finalize())
        output = calendars['MATH101'].to_ical(sorted=False).decode('utf-8')
        self.assertLess(output.index('X-FOO:one'), output.index('X-FOO:two'))
        self.assertLess(output.index('X-FOO:two'), output.index('X-WR-CALNAME:MATH101'))

    def test_non_calendar_root_is_input_error(self) -> None:
        text = "BEGIN:VEVENT\nUID:x\nSUMMARY:Lonely [CSE360]\nEND:VEVENT\n"
        with self.assertRaises(InputError):
            parse_icalendar(text)


if __name__ == "__main__":
    unittest.main()
