import unittest

from name_validator.errors import (
    FormatError, NameValidatorError, ParseError, RenameError, UsageError,
    exit_code_for_exception,
)


class TestErrors(unittest.TestCase):
    def test_exit_codes(self):
        self.assertEqual(exit_code_for_exception(UsageError("usage")), 2)
        self.assertEqual(exit_code_for_exception(ParseError("bad json")), 1)
        self.assertEqual(exit_code_for_exception(FormatError("bad shape")), 1)
        self.assertEqual(exit_code_for_exception(ValueError("other")), 1)

    def test_rename_error_uses_base_exit_code(self):
        error = RenameError("Alise_a.txt", "Alice_a.txt", "target already exists")
        self.assertIsInstance(error, NameValidatorError)
        self.assertEqual(error.exit_code, NameValidatorError.exit_code)
        self.assertEqual(str(error), "Alise_a.txt -> Alice_a.txt: target already exists")
        self.assertEqual(error.source, "Alise_a.txt")
        self.assertEqual(error.target, "Alice_a.txt")

    def test_rename_error_without_reason(self):
        self.assertEqual(str(RenameError("a", "b")), "a -> b")


if __name__ == '__main__':
    unittest.main()
