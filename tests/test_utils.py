import json
import logging
import os
import unittest
from datetime import date, datetime
from unittest import mock

from config import Settings
from errors import ValidationError
from log_config import JsonFormatter, setup_logging
from utils import check_credentials, format_ts, parse_date_yyyy_mm_dd, parse_int, parse_positive_int


class ParseIntTest(unittest.TestCase):
    def test_accepts_ints_and_integer_strings(self):
        self.assertEqual(parse_int(5), 5)
        self.assertEqual(parse_int(" 42 "), 42)
        self.assertEqual(parse_int("-3"), -3)

    def test_rejects_everything_else(self):
        for value in ("", "1.5", "abc", None, 1.0, True, [1]):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    parse_int(value)

    def test_positive(self):
        self.assertEqual(parse_positive_int("7"), 7)
        for value in (0, "-1"):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    parse_positive_int(value)


class CredentialsTest(unittest.TestCase):
    def test_any_non_empty_pair_is_accepted(self):
        self.assertEqual(check_credentials(" maria ", "x"), "maria")

    def test_missing_user_or_password(self):
        for user, password in (("", "x"), ("   ", "x"), ("maria", ""), (None, None)):
            with self.subTest(user=user, password=password):
                with self.assertRaises(ValidationError):
                    check_credentials(user, password)


class DateHelpersTest(unittest.TestCase):
    def test_format_ts(self):
        self.assertEqual(format_ts(datetime(2026, 7, 3, 14, 5, 59)), "03/07/2026 14:05")

    def test_parse_date(self):
        self.assertEqual(parse_date_yyyy_mm_dd(" 2026-01-11 "), date(2026, 1, 11))
        with self.assertRaises(ValueError):
            parse_date_yyyy_mm_dd("11/01/2026")


class SettingsTest(unittest.TestCase):
    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            s = Settings(_env_file=None)
        self.assertEqual(s.RECENT_MOVEMENTS_LIMIT, 50)
        self.assertEqual(s.PRODUCT_DETAIL_LIMIT, 10)
        self.assertTrue(s.SEED_EXAMPLE_DATA)
        self.assertEqual(s.LOG_LEVEL, "INFO")

    def test_environment_overrides(self):
        env = {"SEED_EXAMPLE_DATA": "false", "RECENT_MOVEMENTS_LIMIT": "20", "LOG_JSON": "1"}
        with mock.patch.dict(os.environ, env, clear=True):
            s = Settings(_env_file=None)
        self.assertFalse(s.SEED_EXAMPLE_DATA)
        self.assertEqual(s.RECENT_MOVEMENTS_LIMIT, 20)
        self.assertTrue(s.LOG_JSON)


class LoggingSetupTest(unittest.TestCase):
    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.level, list(root.handlers))

    def tearDown(self):
        root = logging.getLogger()
        root.setLevel(self._saved[0])
        root.handlers[:] = self._saved[1]

    def test_setup_uses_settings(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            setup_logging(Settings(_env_file=None, LOG_LEVEL="debug", LOG_JSON=True))
        root = logging.getLogger()
        self.assertEqual(root.level, logging.DEBUG)
        self.assertEqual(len(root.handlers), 1)
        self.assertIsInstance(root.handlers[0].formatter, JsonFormatter)

    def test_json_formatter(self):
        record = logging.LogRecord("store", logging.INFO, __file__, 1, "stock in: %s", ("P001",), None)
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["logger"], "store")
        self.assertEqual(payload["message"], "stock in: P001")


if __name__ == "__main__":
    unittest.main()
