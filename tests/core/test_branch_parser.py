#!/usr/bin/env python3
"""
Tests for the branch file parser.

This module contains tests for parse_lines, read_input_lines and
parse_input_file, and for the ParsedFile data structure.
"""

import os
import shutil
import tempfile
import unittest

from branch_validator.models import ParsedFile
from branch_validator.core import parse_input_file, parse_lines, read_input_lines


class TestParsedFile(unittest.TestCase):
    """Test cases for the ParsedFile NamedTuple."""

    def test_defaults(self):
        """Test that a default ParsedFile is empty and has no DATA section."""
        parsed = ParsedFile()
        self.assertEqual(parsed.filled_branches, ())
        self.assertEqual(parsed.empty_branch_count, 0)
        self.assertFalse(parsed.has_data_section)
        self.assertEqual(parsed.total_branches, 0)

    def test_total_branches(self):
        """Test that total branches counts filled and empty branches."""
        parsed = ParsedFile(
            filled_branches=(("A", "B"), ("B", "A")),
            empty_branch_count=3,
            has_data_section=True,
        )
        self.assertEqual(parsed.total_branches, 5)

    def test_parsed_file_immutable(self):
        """Test that ParsedFile is immutable."""
        parsed = ParsedFile()
        with self.assertRaises(AttributeError):
            parsed.empty_branch_count = 5


class TestParseLines(unittest.TestCase):
    """Test cases for the parse_lines function."""

    def test_simple_data_section(self):
        """Test parsing two filled branches."""
        parsed = parse_lines(["DATA", "A B", "A B", "/"])

        self.assertTrue(parsed.has_data_section)
        self.assertEqual(parsed.filled_branches, (("A", "B"), ("A", "B")))
        self.assertEqual(parsed.empty_branch_count, 0)

    def test_preamble_and_trailer_ignored(self):
        """Test that lines before DATA and after / are ignored."""
        lines = ["header", "A B C", "DATA", "X Y", "/", "Z Z Z", "=="]
        parsed = parse_lines(lines)

        self.assertEqual(parsed.filled_branches, (("X", "Y"),))
        self.assertEqual(parsed.empty_branch_count, 0)

    def test_missing_data_marker(self):
        """Test that a file without DATA yields no branches and no section."""
        parsed = parse_lines(["A B", "==", "/"])

        self.assertFalse(parsed.has_data_section)
        self.assertEqual(parsed.total_branches, 0)

    def test_data_marker_is_case_sensitive(self):
        """Test that 'data' or ' DATA' do not open the section."""
        parsed = parse_lines(["data", " DATA", "DATA ", "A B", "/"])
        self.assertFalse(parsed.has_data_section)

    def test_empty_branches(self):
        """Test that == lines count as empty branches."""
        parsed = parse_lines(["DATA", "==", "A B", "==", "/"])

        self.assertEqual(parsed.empty_branch_count, 2)
        self.assertEqual(parsed.filled_branches, (("A", "B"),))

    def test_missing_terminator_consumes_to_end(self):
        """Test that without / the section runs to end of input."""
        parsed = parse_lines(["DATA", "A B", "C D"])
        self.assertEqual(len(parsed.filled_branches), 2)

    def test_carriage_returns_stripped(self):
        """Test that CRLF line endings are handled."""
        parsed = parse_lines(["DATA\r", "A B\r", "==\r", "/\r", "C\r"])

        self.assertTrue(parsed.has_data_section)
        self.assertEqual(parsed.filled_branches, (("A", "B"),))
        self.assertEqual(parsed.empty_branch_count, 1)

    def test_newline_terminated_lines(self):
        """Test that lines as returned by readlines() are accepted."""
        parsed = parse_lines(["DATA\n", "A B\r\n", "/\n"])
        self.assertEqual(parsed.filled_branches, (("A", "B"),))

    def test_blank_data_lines_are_dropped(self):
        """Test that lines without symbols are neither empty nor filled branches."""
        parsed = parse_lines(["DATA", "", "   ", "\t", "A", "/"])

        self.assertEqual(parsed.filled_branches, (("A",),))
        self.assertEqual(parsed.empty_branch_count, 0)
        self.assertEqual(parsed.total_branches, 1)

    def test_adjacent_symbols_split_into_characters(self):
        """Test that a multi-character token yields one symbol per character."""
        parsed = parse_lines(["DATA", "AB C", "/"])
        self.assertEqual(parsed.filled_branches, (("A", "B", "C"),))

    def test_mixed_whitespace_separators(self):
        """Test that tabs and repeated spaces separate symbols."""
        parsed = parse_lines(["DATA", "  A\t\tB   C ", "/"])
        self.assertEqual(parsed.filled_branches, (("A", "B", "C"),))

    def test_empty_marker_with_spaces_is_not_empty_branch(self):
        """Test that '= =' is a filled branch of two '=' symbols."""
        parsed = parse_lines(["DATA", "= =", "/"])

        self.assertEqual(parsed.empty_branch_count, 0)
        self.assertEqual(parsed.filled_branches, (("=", "="),))

    def test_second_data_marker_is_a_branch(self):
        """Test that DATA inside the section is parsed as symbols."""
        parsed = parse_lines(["DATA", "DATA", "/"])
        self.assertEqual(parsed.filled_branches, (("D", "A", "T", "A"),))

    def test_empty_input(self):
        """Test that empty input parses to an empty ParsedFile."""
        self.assertEqual(parse_lines([]), ParsedFile())

    def test_accepts_any_iterable(self):
        """Test that a generator of lines is accepted."""
        parsed = parse_lines(line for line in ["DATA", "A", "/"])
        self.assertEqual(parsed.filled_branches, (("A",),))


class TestReadInputLines(unittest.TestCase):
    """Test cases for reading and parsing files from disk."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        """Clean up after tests."""
        shutil.rmtree(self.temp_dir)

    def create_temp_file(self, content: str, name: str = "branches.txt", encoding: str = "utf-8") -> str:
        """Create a temporary file with given content, written byte for byte."""
        temp_file = os.path.join(self.temp_dir, name)
        with open(temp_file, "wb") as f:
            f.write(content.encode(encoding))
        return temp_file

    def test_read_splits_on_newline_only(self):
        """Test that a lone carriage return does not split lines."""
        path = self.create_temp_file("DATA\nA\rB\n/\n")
        self.assertEqual(read_input_lines(path), ["DATA", "A\rB", "/"])

    def test_read_keeps_crlf_for_parser(self):
        """Test that CRLF files keep the carriage return for the parser to strip."""
        path = self.create_temp_file("DATA\r\nA B\r\n/\r\n")
        self.assertEqual(read_input_lines(path), ["DATA\r", "A B\r", "/\r"])

    def test_read_without_trailing_newline(self):
        """Test that the last line is kept when the file lacks a final newline."""
        path = self.create_temp_file("DATA\nA")
        self.assertEqual(read_input_lines(path), ["DATA", "A"])

    def test_read_empty_file(self):
        """Test that an empty file has no lines."""
        path = self.create_temp_file("")
        self.assertEqual(read_input_lines(path), [])

    def test_parse_input_file(self):
        """Test reading and parsing a CRLF file end to end."""
        path = self.create_temp_file("preamble\r\nDATA\r\nA B\r\n==\r\nB A\r\n/\r\n")
        parsed = parse_input_file(path)

        self.assertTrue(parsed.has_data_section)
        self.assertEqual(parsed.filled_branches, (("A", "B"), ("B", "A")))
        self.assertEqual(parsed.empty_branch_count, 1)

    def test_parse_input_file_with_encoding(self):
        """Test that a non-UTF-8 file is read with the given encoding."""
        path = self.create_temp_file("DATA\nЖ Ж\n/\n", encoding="cp1251")
        parsed = parse_input_file(path, encoding="cp1251")
        self.assertEqual(parsed.filled_branches, (("Ж", "Ж"),))

    def test_missing_file_raises(self):
        """Test that a missing file raises FileNotFoundError."""
        with self.assertRaises(FileNotFoundError):
            parse_input_file(os.path.join(self.temp_dir, "missing.txt"))

    def test_undecodable_file_raises(self):
        """Test that invalid UTF-8 raises UnicodeDecodeError."""
        path = os.path.join(self.temp_dir, "bad.txt")
        with open(path, "wb") as f:
            f.write(b"DATA\n\xff\xfe\n/\n")
        with self.assertRaises(UnicodeDecodeError):
            parse_input_file(path)


if __name__ == "__main__":
    unittest.main()
