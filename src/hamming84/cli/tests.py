import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from hamming84.cli import LogFormatter, LogSettings, app
from hamming84.selftest import Report

runner = CliRunner()


class TestCommands(unittest.TestCase):
    def test_encode(self):
        result = runner.invoke(app, ["encode", "1010"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.strip(), "01011010")

    def test_encode_invalid(self):
        for data in ["101", "10a0", "10101"]:
            with self.subTest(data=data):
                result = runner.invoke(app, ["encode", data])
                self.assertEqual(result.exit_code, 1)

    def test_decode(self):
        result = runner.invoke(app, ["decode", "11011010"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.strip(), "1010")

    def test_decode_verbose(self):
        result = runner.invoke(app, ["decode", "01011011", "--verbose"])
        self.assertEqual(result.exit_code, 0)
        lines = result.stdout.strip().splitlines()
        self.assertEqual(lines[0], "1010")
        self.assertEqual(lines[1], "Corrected D4 (bit 7)")

        result = runner.invoke(app, ["decode", "01011010", "-v"])
        self.assertIn("No bits corrected", result.stdout)

    def test_decode_invalid(self):
        result = runner.invoke(app, ["decode", "0101101"])
        self.assertEqual(result.exit_code, 1)

    def test_flip(self):
        result = runner.invoke(app, ["flip", "01011010", "P"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.strip(), "11011010")

        result = runner.invoke(app, ["flip", "01011010", "5"])
        self.assertEqual(result.stdout.strip(), "01011110")

    def test_flip_invalid_position(self):
        result = runner.invoke(app, ["flip", "01011010", "H4"])
        self.assertNotEqual(result.exit_code, 0)

    def test_selftest(self):
        result = runner.invoke(app, ["selftest", "--runs", "50", "--seed", "5"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Test successful", result.stdout)

    def test_selftest_invalid_probability(self):
        result = runner.invoke(app, ["selftest", "--flip-probability", "2"])
        self.assertNotEqual(result.exit_code, 0)

    def test_selftest_exhaustive_output(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp).joinpath("report.json")
            result = runner.invoke(
                app, ["selftest", "--exhaustive", "--output", str(path)]
            )
            self.assertEqual(result.exit_code, 0)
            report = Report.load(path)
            self.assertEqual(report.mode, "exhaustive")
            self.assertEqual(len(report.trials), 144)

    def test_selftest_exhaustive_ignores_random_options(self):
        with self.assertLogs("hamming84.cli.main", level=logging.WARNING) as logs:
            result = runner.invoke(
                app, ["selftest", "--exhaustive", "--seed", "3", "--runs", "10"]
            )
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Test successful", result.stdout)
        self.assertEqual(len(logs.records), 1)
        self.assertIn("--runs, --seed", logs.records[0].getMessage())

    def test_selftest_exhaustive_no_warning(self):
        with self.assertNoLogs("hamming84.cli.main", level=logging.WARNING):
            result = runner.invoke(app, ["selftest", "--exhaustive"])
        self.assertEqual(result.exit_code, 0)

    def test_table(self):
        result = runner.invoke(app, ["table"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("D4", result.stdout)
        self.assertIn("unchanged", result.stdout)


class TestLogging(unittest.TestCase):
    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = LogSettings.from_env()
        self.assertEqual(settings, LogSettings(logging.INFO, False))

    def test_debug_is_verbose(self):
        with mock.patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}, clear=True):
            settings = LogSettings.from_env()
        self.assertEqual(settings, LogSettings(logging.DEBUG, True))

    def test_verbose_override(self):
        env = {"LOG_LEVEL": "debug", "VERBOSE_LOGS": "0"}
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertFalse(LogSettings.from_env().verbose)

        env = {"LOG_LEVEL": "error", "VERBOSE_LOGS": "1"}
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertEqual(LogSettings.from_env(), LogSettings(logging.ERROR, True))

    def test_invalid_level(self):
        with mock.patch.dict(os.environ, {"LOG_LEVEL": "loud"}, clear=True):
            self.assertEqual(LogSettings.from_env().level, logging.INFO)

    def test_format(self):
        record = logging.LogRecord(
            "hamming84", logging.ERROR, __file__, 1, "bad input [1, 0]", None, None
        )
        formatted = LogFormatter().format(record)
        self.assertIn("Error", formatted)
        self.assertIn("bad input [1, 0]", formatted)

    def test_format_verbose(self):
        record = logging.LogRecord(
            "hamming84", logging.WARNING, "codec.py", 12, "flip", None, None
        )
        formatted = LogFormatter(verbose=True).format(record)
        self.assertIn("Warning", formatted)
        self.assertIn("flip", formatted)
        self.assertIn("-> codec.py:None:12", formatted)

    def test_format_unstyled_level(self):
        record = logging.LogRecord(
            "hamming84", 25, __file__, 1, "custom level", None, None
        )
        self.assertEqual(LogFormatter().format(record), "custom level")


if __name__ == "__main__":
    unittest.main()
