"""
Test cases for the scanning driver.

Tests focus on finding a value embedded in surrounding text.
"""

import logging
import unittest

from fuzzyjson.core.scanner import ScanMatch, Scanner
from fuzzyjson.core.values import Array, Bool, Dict, Float, Int, Null, Str
from fuzzyjson.security.exceptions import NoValueFoundError, SecurityError
from fuzzyjson.utils.config import ParseConfig, ParseLimits


class TestScannerValues(unittest.TestCase):
    """Test which value the scanner returns for fuzzy inputs."""

    def setUp(self):
        self.scanner = Scanner()

    def test_simple_inputs(self):
        test_cases = [
            ("null", Null()),
            ("None", Null()),
            ("NUL.", Null()),
            ("yes.", Bool(True)),
            ("NO NO.", Bool(False)),
            ("This is a NULL.", Null()),
            ("PI is 3.141", Float(3.141)),
            ("PI is 3.", Int(3)),
            ('""', Str("")),
            ("''", Str("")),
            ('"dog"', Str("dog")),
            ("\"'\"", Str("'")),
            ("'\"'", Str('"')),
        ]
        for text, expected in test_cases:
            with self.subTest(text=text):
                self.assertEqual(self.scanner.scan(text), expected)

    def test_arrays(self):
        self.assertEqual(self.scanner.scan("[]"), Array())
        self.assertEqual(self.scanner.scan("[null]"), Array([Null()]))
        self.assertEqual(
            self.scanner.scan("[null, 1, []]"), Array([Null(), Int(1), Array()])
        )

    def test_dictionaries(self):
        self.assertEqual(self.scanner.scan("{}"), Dict())
        self.assertEqual(
            self.scanner.scan('{x: 42, "x 2": {}}'),
            Dict([("x", Int(42)), ("x 2", Dict())]),
        )

    def test_commented_document(self):
        text = """
{
  "x": 42,
  'y': {},
  z: [ nil ], // trailing comma!
}.
"""
        expected = Dict([
            ("x", Int(42)),
            ("y", Dict()),
            ("z", Array([Null()])),
        ])
        self.assertEqual(self.scanner.scan(text), expected)

    def test_first_value_wins(self):
        self.assertEqual(self.scanner.scan("42 and then [1, 2]"), Int(42))
        self.assertEqual(self.scanner.scan("values: [1, 2] then 42"), Array([Int(1), Int(2)]))

    def test_mid_word_match(self):
        """Literals inside words are accepted; there is no boundary check."""
        self.assertEqual(self.scanner.scan("unknown"), Bool(False))
        self.assertEqual(self.scanner.find("annulled"), ScanMatch(Null(), 2, 6))

    def test_broken_container_falls_back_to_inner_value(self):
        self.assertEqual(self.scanner.scan("{ oops [1, 2]"), Array([Int(1), Int(2)]))
        self.assertEqual(self.scanner.scan("[1, 2"), Int(1))

    def test_multibyte_text(self):
        match = self.scanner.find("héllo wörld: 12")
        self.assertEqual(match, ScanMatch(Int(12), 13, 15))


class TestScannerSpans(unittest.TestCase):
    """Test match spans and failure reporting."""

    def setUp(self):
        self.scanner = Scanner()

    def test_span_of_match(self):
        self.assertEqual(self.scanner.find("PI is 3.141"), ScanMatch(Float(3.141), 6, 11))
        self.assertEqual(
            self.scanner.find("see [1] here"), ScanMatch(Array([Int(1)]), 4, 7)
        )

    def test_no_value(self):
        for text in ("", "   ", "hello world", "{ unclosed", "'unterminated"):
            with self.subTest(text=text):
                self.assertIsNone(self.scanner.find(text))

    def test_scan_raises_no_value_found(self):
        with self.assertRaises(NoValueFoundError) as cm:
            self.scanner.scan("hello world")
        self.assertEqual(cm.exception.input_length, 11)

    def test_input_size_limit(self):
        scanner = Scanner(ParseConfig(limits=ParseLimits(max_input_size=10)))
        self.assertEqual(scanner.scan("x" * 8 + "42"), Int(42))
        with self.assertRaises(SecurityError):
            scanner.find("x" * 11)

    def test_nesting_limit(self):
        scanner = Scanner(ParseConfig(limits=ParseLimits(max_nesting_depth=2)))
        self.assertEqual(scanner.scan("[[1]]"), Array([Array([Int(1)])]))
        self.assertEqual(
            scanner.find("[[[1]]]"), ScanMatch(Array([Array([Int(1)])]), 1, 6)
        )

    def test_unclosed_brackets_before_value(self):
        text = "[" * 101 + " 42"
        for limits in (ParseLimits(), ParseLimits(max_nesting_depth=100)):
            with self.subTest(max_nesting_depth=limits.max_nesting_depth):
                scanner = Scanner(ParseConfig(limits=limits))
                self.assertEqual(scanner.find(text), ScanMatch(Int(42), 102, 104))

    def test_separator_character_ends_array(self):
        self.assertEqual(self.scanner.find("[1,\x1c2]"), ScanMatch(Int(1), 1, 2))

    def test_repeated_scans_are_identical(self):
        text = "Result: {a: [1, 'two', 3.0], b: nil}"
        self.assertEqual(self.scanner.find(text), self.scanner.find(text))


class TestScannerLogging(unittest.TestCase):
    """Test scanner log output."""

    def test_logs_found_value(self):
        with self.assertLogs("fuzzyjson.core.scanner", level="DEBUG") as cm:
            Scanner().find("PI is 3.141")
        self.assertIn("Found Float at offset 6", cm.output[0])

    def test_logs_no_value(self):
        with self.assertLogs("fuzzyjson.core.scanner", level="DEBUG") as cm:
            Scanner().find("abc")
        self.assertIn("No value found in 3 characters", cm.output[0])

    def test_configured_logger(self):
        custom = logging.getLogger("fuzzyjson.tests.custom")
        with self.assertLogs(custom, level="DEBUG"):
            Scanner(ParseConfig(logger=custom)).find("[]")


if __name__ == "__main__":
    unittest.main()
