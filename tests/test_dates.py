"""
Unit tests for the bracketed date list.

Dates carry no year: they are resolved against the reference date
and roll over into the next year when they would lie before it.
"""

import unittest
from datetime import date

from pdfschedule.dates import parse_dates, resolve_date
from pdfschedule.errors import DateSyntaxError


class TestResolveDate(unittest.TestCase):
    def test_same_year(self) -> None:
        self.assertEqual(resolve_date(12, 3, date(2024, 1, 1)), date(2024, 3, 12))

    def test_reference_day_itself(self) -> None:
        self.assertEqual(resolve_date(2, 9, date(2024, 9, 2)), date(2024, 9, 2))

    def test_rolls_over_into_next_year(self) -> None:
        self.assertEqual(resolve_date(12, 2, date(2024, 9, 1)), date(2025, 2, 12))

    def test_impossible_date(self) -> None:
        with self.assertRaises(DateSyntaxError):
            resolve_date(31, 2, date(2024, 1, 1))

    def test_leap_day_in_next_year(self) -> None:
        # 2023 has no 29.02, the next one is in 2024
        self.assertEqual(resolve_date(29, 2, date(2023, 9, 1)), date(2024, 2, 29))

    def test_leap_day_in_reference_year(self) -> None:
        self.assertEqual(resolve_date(29, 2, date(2024, 1, 1)), date(2024, 2, 29))

    def test_leap_day_passed_and_next_year_not_leap(self) -> None:
        with self.assertRaises(DateSyntaxError):
            resolve_date(29, 2, date(2024, 3, 1))


class TestParseDates(unittest.TestCase):
    def test_single_date_and_offset(self) -> None:
        dates, start = parse_dates("Room 101. [12.03]", date(2024, 1, 1))
        self.assertEqual(dates, [date(2024, 3, 12)])
        self.assertEqual(start, 10)

    def test_date_list(self) -> None:
        dates, _ = parse_dates("[26.03, 12.03, 09.04]", date(2024, 1, 1))
        self.assertEqual(dates, [date(2024, 3, 12), date(2024, 3, 26), date(2024, 4, 9)])

    def test_duplicates_removed(self) -> None:
        dates, _ = parse_dates("[12.03, 12.03]", date(2024, 1, 1))
        self.assertEqual(dates, [date(2024, 3, 12)])

    def test_weekly_range(self) -> None:
        dates, _ = parse_dates("[05.02-26.02 к.н.]", date(2024, 1, 1))
        self.assertEqual(
            dates,
            [date(2024, 2, 5), date(2024, 2, 12), date(2024, 2, 19), date(2024, 2, 26)],
        )

    def test_range_without_frequency_is_weekly(self) -> None:
        dates, _ = parse_dates("[05.02-19.02]", date(2024, 1, 1))
        self.assertEqual(dates, [date(2024, 2, 5), date(2024, 2, 12), date(2024, 2, 19)])

    def test_every_other_week(self) -> None:
        dates, _ = parse_dates("[05.02-04.03 ч.н.]", date(2024, 1, 1))
        self.assertEqual(dates, [date(2024, 2, 5), date(2024, 2, 19), date(2024, 3, 4)])

    def test_range_across_new_year(self) -> None:
        dates, _ = parse_dates("[18.12-08.01 к.н.]", date(2024, 9, 1))
        self.assertEqual(
            dates,
            [date(2024, 12, 18), date(2024, 12, 25), date(2025, 1, 1), date(2025, 1, 8)],
        )

    def test_mixed_items(self) -> None:
        dates, _ = parse_dates("[01.03, 05.02-12.02]", date(2024, 1, 1))
        self.assertEqual(dates, [date(2024, 2, 5), date(2024, 2, 12), date(2024, 3, 1)])

    def test_last_bracket_group_is_used(self) -> None:
        text = "Lab [A]. [12.03]"
        dates, start = parse_dates(text, date(2024, 1, 1))
        self.assertEqual(dates, [date(2024, 3, 12)])
        self.assertEqual(start, text.rindex("["))

    def test_skip_leading_word(self) -> None:
        dates, _ = parse_dates("[4ч 12.03, 19.03]", date(2024, 1, 1), skip=1)
        self.assertEqual(dates, [date(2024, 3, 12), date(2024, 3, 19)])

    def test_skip_consumes_a_date_when_no_qualifier(self) -> None:
        dates, _ = parse_dates("[12.03 19.03]", date(2024, 1, 1), skip=1)
        self.assertEqual(dates, [date(2024, 3, 19)])

    def test_skip_leaves_nothing(self) -> None:
        with self.assertRaises(DateSyntaxError):
            parse_dates("[12.03]", date(2024, 1, 1), skip=1)

    def test_no_brackets(self) -> None:
        with self.assertRaises(DateSyntaxError):
            parse_dates("Room 101. 12.03", date(2024, 1, 1))

    def test_empty_list(self) -> None:
        with self.assertRaises(DateSyntaxError):
            parse_dates("Room 101. [ ]", date(2024, 1, 1))

    def test_garbage_item(self) -> None:
        with self.assertRaises(DateSyntaxError):
            parse_dates("[12.03, soon]", date(2024, 1, 1))

    def test_leap_day_range_end(self) -> None:
        dates, _ = parse_dates("[15.02-29.02 к.н.]", date(2023, 9, 1))
        self.assertEqual(dates, [date(2024, 2, 15), date(2024, 2, 22), date(2024, 2, 29)])

    def test_invalid_calendar_date(self) -> None:
        with self.assertRaises(DateSyntaxError):
            parse_dates("[30.02]", date(2024, 1, 1))


if __name__ == "__main__":
    unittest.main()
