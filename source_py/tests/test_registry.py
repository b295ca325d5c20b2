import json
import os
import tempfile
import unittest

from name_validator.errors import FormatError, ParseError
from name_validator.registry import load_canonical_names, parse_canonical_names


class TestParseCanonicalNames(unittest.TestCase):
    def test_parses_pairs_in_order(self):
        raw = json.dumps([[1, "Alice"], [2, "Bob"], [3, "Carol"]])
        self.assertEqual(parse_canonical_names(raw), ["Alice", "Bob", "Carol"])

    def test_names_are_trimmed(self):
        raw = json.dumps([[1, "  Alice "], [2, "\tBob\n"]])
        self.assertEqual(parse_canonical_names(raw), ["Alice", "Bob"])

    def test_byte_order_mark_is_stripped(self):
        raw = json.dumps([[1, "Alice"], [2, "Bob"]])
        self.assertEqual(parse_canonical_names("\ufeff" + raw), parse_canonical_names(raw))

    def test_extra_columns_are_ignored(self):
        raw = json.dumps([[1, "Alice", "extra"], ["b", "Bob", None]])
        self.assertEqual(parse_canonical_names(raw), ["Alice", "Bob"])

    def test_duplicates_are_kept(self):
        raw = json.dumps([[1, "Alice"], [2, "Alice"]])
        self.assertEqual(parse_canonical_names(raw), ["Alice", "Alice"])

    def test_invalid_json_raises_parse_error(self):
        with self.assertRaises(ParseError):
            parse_canonical_names("[[1, 'Alice']")

    def test_wrong_shapes_raise_format_error(self):
        bad_documents = [
            "{}",
            "[]",
            '"Alice"',
            '["Alice", "Bob"]',
            "[[1]]",
            '[[1, "Alice"], [2]]',
            '[[1, "Alice"], "Bob"]',
            '[[1, "Alice"], [2, 3]]',
        ]
        for raw in bad_documents:
            with self.assertRaises(FormatError, msg=raw):
                parse_canonical_names(raw)


class TestLoadCanonicalNames(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.test_dir.cleanup()

    def write(self, filename, content):
        path = os.path.join(self.test_dir.name, filename)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_loads_file_with_bom(self):
        path = self.write("names.json", '\ufeff[[1, "Alice"], [2, "Bob"]]')
        self.assertEqual(load_canonical_names(path), ["Alice", "Bob"])

    def test_missing_file_raises_parse_error(self):
        with self.assertRaises(ParseError):
            load_canonical_names(os.path.join(self.test_dir.name, "missing.json"))


if __name__ == '__main__':
    unittest.main()
