import unittest
from datetime import datetime, timezone


class BacklogDateParsingTests(unittest.TestCase):
    def test_parses_valid_timestamp_as_utc(self):
        from app.services.dates import parse_backlog_date

        dt = parse_backlog_date("2013/07/08T10:24:28Z")

        self.assertEqual(dt, datetime(2013, 7, 8, 10, 24, 28, tzinfo=timezone.utc))
        self.assertEqual(dt.utcoffset().total_seconds(), 0)

    def test_fields_match_for_several_values(self):
        from app.services.dates import parse_backlog_date

        for value, fields in [
            ("2000/01/01T00:00:00Z", (2000, 1, 1, 0, 0, 0)),
            ("1999/12/31T23:59:59Z", (1999, 12, 31, 23, 59, 59)),
            ("2024/02/29T12:30:05Z", (2024, 2, 29, 12, 30, 5)),
        ]:
            with self.subTest(value=value):
                dt = parse_backlog_date(value)
                self.assertEqual(
                    (dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second), fields
                )

    def test_non_matching_input_returns_none(self):
        from app.services.dates import parse_backlog_date

        for value in [
            "",
            "2013-07-08T10:24:28Z",
            "2013/07/08 10:24:28",
            "2013/07/08T10:24:28",
            "2013/07/08T10:24:28Z trailing",
            "2013/13/08T10:24:28Z",
            "2023/02/30T00:00:00Z",
            "2013/07/08T10:24:28Z\n",
            "٢٠١٣/٠٧/٠٨T10:24:28Z",
            "２０１３/07/08T10:24:28Z",
            None,
            12345,
        ]:
            with self.subTest(value=value):
                self.assertIsNone(parse_backlog_date(value))

    def test_format_round_trips(self):
        from app.services.dates import format_backlog_date, parse_backlog_date

        dt = datetime(2020, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
        self.assertEqual(format_backlog_date(dt), "2020/05/06T07:08:09Z")
        self.assertEqual(parse_backlog_date(format_backlog_date(dt)), dt)


if __name__ == "__main__":
    unittest.main()
