import sys
import unittest
from datetime import timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from srtparse.utils import Time, TimecodeError, parse_timecode


class ParseTimecodeTest(unittest.TestCase):
    def test_parses_fields(self) -> None:
        self.assertEqual(parse_timecode("00:01:02,200"), Time(0, 1, 2, 200))
        self.assertEqual(parse_timecode("01:53:06,162"), Time(1, 53, 6, 162))

    def test_hours_take_any_number_of_digits(self) -> None:
        self.assertEqual(parse_timecode("5:00:00,000"), Time(5, 0, 0, 0))
        self.assertEqual(parse_timecode("123:00:00,001"), Time(123, 0, 0, 1))

    def test_out_of_range_fields_are_kept(self) -> None:
        time = parse_timecode("00:75:99,999")
        self.assertEqual(time, Time(0, 75, 99, 999))
        self.assertEqual(time.to_milliseconds(), (75 * 60 + 99) * 1000 + 999)

    def test_rejects_malformed_values(self) -> None:
        bad_values = [
            "",
            "x",
            "00:00:01.000",
            "00:00:00:00",
            "00:00,000",
            "00:00:01,00",
            "00:00:01,0000",
            "00:0:01,000",
            "00:00:1,000",
            ":00:01,000",
            "aa:00:01,000",
            "00:00:01,000,000",
            "-1:00:01,000",
            "+1:00:01,000",
        ]
        for value in bad_values:
            with self.subTest(value=value):
                with self.assertRaises(TimecodeError) as ctx:
                    parse_timecode(value)
                self.assertEqual(ctx.exception.value, value)

    def test_hours_too_long_to_convert(self) -> None:
        value = "9" * 5000 + ":00:01,000"
        with self.assertRaises(TimecodeError) as ctx:
            parse_timecode(value)
        self.assertIn("too large", ctx.exception.reason)

    def test_error_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            parse_timecode("bad time")

    def test_format_and_parse_agree(self) -> None:
        for time in (Time(0, 0, 0, 0), Time(1, 2, 3, 4), Time(10, 59, 59, 999), Time(100, 99, 99, 5)):
            with self.subTest(time=time):
                self.assertEqual(parse_timecode(time.to_string()), time)


class TimeTest(unittest.TestCase):
    def test_ordering_uses_total_milliseconds(self) -> None:
        self.assertGreater(Time(0, 0, 1, 0), Time(0, 0, 0, 999))
        self.assertGreater(Time(1, 0, 0, 0), Time(0, 59, 59, 999))
        self.assertLess(Time(0, 0, 59, 0), Time(0, 1, 0, 0))
        self.assertLessEqual(Time(0, 0, 60, 0), Time(0, 1, 0, 0))
        self.assertGreaterEqual(Time(0, 0, 60, 0), Time(0, 1, 0, 0))

    def test_unnormalized_values_sort_equal_but_differ(self) -> None:
        a, b = Time(0, 0, 60, 0), Time(0, 1, 0, 0)
        self.assertTrue(a <= b and a >= b)
        self.assertNotEqual(a, b)

    def test_sorting(self) -> None:
        times = [Time(0, 1, 0, 0), Time(0, 0, 0, 1), Time(1, 0, 0, 0)]
        self.assertEqual(sorted(times), [Time(0, 0, 0, 1), Time(0, 1, 0, 0), Time(1, 0, 0, 0)])

    def test_conversions(self) -> None:
        time = Time(0, 1, 2, 200)
        self.assertEqual(time.to_milliseconds(), 62200)
        self.assertEqual(time.to_timedelta(), timedelta(milliseconds=62200))
        self.assertAlmostEqual(time.to_seconds(), 62.2)

    def test_string_form(self) -> None:
        self.assertEqual(str(Time(0, 1, 2, 200)), "00:01:02,200")
        self.assertEqual(Time(0, 0, 5, 7).to_string(), "00:00:05,007")

    def test_from_milliseconds(self) -> None:
        self.assertEqual(Time.from_milliseconds(6_801_628), Time(1, 53, 21, 628))
        self.assertEqual(Time.from_milliseconds(0), Time(0, 0, 0, 0))
        with self.assertRaises(ValueError):
            Time.from_milliseconds(-1)

    def test_is_immutable_and_hashable(self) -> None:
        time = Time(0, 0, 1, 0)
        with self.assertRaises(AttributeError):
            time.seconds = 2  # type: ignore[misc]
        self.assertEqual(len({time, Time(0, 0, 1, 0)}), 1)


if __name__ == "__main__":
    unittest.main()
