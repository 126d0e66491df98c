import unittest
import os
import sys

# Add the parent directory to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from movement.parser import TimeParseError, time_to_seconds, parse_time_strict

class TestLenientParser(unittest.TestCase):
    def test_time_formats(self):
        """Test H, H:MM and H:MM:SS forms"""
        test_cases = [
            ("13:33:23", 48803),
            ("0:23:03", 1383),
            ("13:34", 48840),
            ("7", 25200),
            ("1:2:3", 3723),
            ("00:00:00", 0),
            ("25:00", 90000),
            ("100:00:00", 360000),
        ]

        for time_str, expected in test_cases:
            with self.subTest(time_str=time_str):
                self.assertEqual(time_to_seconds(time_str), expected)

    def test_meridiem_on_absolute_times(self):
        test_cases = [
            ("01:33:23 PM", 48803),
            ("01:33:23 pm", 48803),
            ("1:30 p.m.", 48600),
            ("01:34 AM", 5640),
            ("13:34", 48840),
            # No range checks, so 12 PM lands on hour 24
            ("12:30 PM", 88200),
        ]

        for time_str, expected in test_cases:
            with self.subTest(time_str=time_str):
                self.assertEqual(time_to_seconds(time_str, absolute=True), expected)

    def test_meridiem_ignored_on_durations(self):
        self.assertEqual(time_to_seconds("01:33:23 PM"), 5603)
        self.assertEqual(time_to_seconds("01:33:23 PM", absolute=False), 5603)

    def test_malformed_fields_default_to_zero(self):
        test_cases = [
            ("", 0),
            ("abc", 0),
            ("ab:10", 600),
            ("10:xx:05", 36005),
            ("1_0:00", 0),
            ("1.5:00", 0),
            (" 13:34", 0),          # Leading space empties the time part
            ("1:00:00:99", 3600),   # Only three fields are read
        ]

        for time_str, expected in test_cases:
            with self.subTest(time_str=time_str):
                self.assertEqual(time_to_seconds(time_str), expected)

    def test_signed_fields(self):
        self.assertEqual(time_to_seconds("-1:00"), -3600)
        self.assertEqual(time_to_seconds("+5"), 18000)
        self.assertEqual(time_to_seconds("1:-30"), 1800)

    def test_zeroed_fields_are_logged(self):
        with self.assertLogs("movement.parser", "DEBUG") as logs:
            self.assertEqual(time_to_seconds("ab:10"), 600)
        self.assertEqual(len(logs.output), 1)
        self.assertIn("hours='ab'", logs.output[0])
        self.assertIn("using 0", logs.output[0])


class TestStrictParser(unittest.TestCase):
    def test_durations(self):
        test_cases = [
            ("01:23:45", 5025),
            ("0:23:03", 1383),
            ("1:30", 5400),
            ("25", 90000),
            ("100:00:00", 360000),
        ]

        for time_str, expected in test_cases:
            with self.subTest(time_str=time_str):
                self.assertEqual(parse_time_strict(time_str), expected)

    def test_bad_durations(self):
        for time_str in ("", "1:xx", "1:60", "1:00:60", "-1:00", "1:00 PM", "1::00", "ab"):
            with self.subTest(time_str=time_str):
                with self.assertRaises(TimeParseError):
                    parse_time_strict(time_str)

    def test_clock_times(self):
        test_cases = [
            ("1:33:23 PM", 48803),
            ("1:33pm", 48780),
            ("13:34", 48840),
            ("12:00 AM", 0),
            ("12:00 PM", 43200),
            ("12:15 p.m.", 44100),
            ("7 pm", 68400),
            ("9a", 32400),
            ("23:59:59", 86399),
        ]

        for time_str, expected in test_cases:
            with self.subTest(time_str=time_str):
                self.assertEqual(parse_time_strict(time_str, absolute=True), expected)

    def test_bad_clock_times(self):
        for time_str in ("", "banana", "13:00 PM", "0:30 PM", "00:00 AM", "10:61", "123:00", "1:00 XM"):
            with self.subTest(time_str=time_str):
                with self.assertRaises(TimeParseError):
                    parse_time_strict(time_str, absolute=True)

    def test_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_time_strict("nope")
        with self.assertRaises(TimeParseError):
            parse_time_strict(5)

if __name__ == '__main__':
    unittest.main()
