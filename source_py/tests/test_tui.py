import os
import tempfile
import unittest
from unittest.mock import patch

from name_validator.types import Config, DecisionRecord, Status
from name_validator import tui


class TestTUI(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.TemporaryDirectory()
        self.folder = os.path.join(self.test_dir.name, "files")
        self.reports = os.path.join(self.test_dir.name, "reports")
        os.mkdir(self.folder)
        with open(os.path.join(self.folder, "Alise_invoice.xlsx"), "w") as f:
            f.write("content")

    def tearDown(self):
        self.test_dir.cleanup()

    def make_config(self, rename):
        return Config(
            names_path="names.json",
            folder_path=self.folder,
            rename=rename,
            report_dir=self.reports,
            json=False,
            plain=False,
            verbose=False,
            log_file=None,
        )

    @patch('name_validator.tui.Console')
    @patch('name_validator.tui.Progress')
    @patch('name_validator.tui.load_canonical_names', return_value=["Alice", "Bob"])
    @patch('os.rename')
    def test_run_tui_dry_run(self, mock_rename, mock_load, mock_progress, mock_console):
        ret = tui.run_tui(self.make_config(rename=False))

        self.assertEqual(ret, 0)
        mock_load.assert_called_with("names.json")
        mock_console.return_value.print.assert_called()
        mock_rename.assert_not_called()
        self.assertTrue(os.path.exists(os.path.join(self.reports, "name-validation-results.json")))
        self.assertTrue(os.path.exists(os.path.join(self.reports, "name-validation-results.xlsx")))

    @patch('name_validator.tui.Console')
    @patch('name_validator.tui.Progress')
    @patch('name_validator.tui.load_canonical_names', return_value=["Alice", "Bob"])
    @patch('os.rename')
    def test_run_tui_execute(self, mock_rename, mock_load, mock_progress, mock_console):
        ret = tui.run_tui(self.make_config(rename=True))

        self.assertEqual(ret, 0)
        mock_rename.assert_called_with(
            os.path.join(self.folder, "Alise_invoice.xlsx"),
            os.path.join(self.folder, "Alice_invoice.xlsx"),
        )

    def test_build_table_has_one_row_per_record(self):
        records = [
            DecisionRecord("a_[1]", "a", "Alice", "Alice_[1]", 4, Status.RENAMED),
            DecisionRecord("Bob", "Bob", "Bob", "Bob", 0, Status.CORRECT),
        ]
        table = tui.build_table(records)
        self.assertEqual(table.row_count, 2)
        self.assertEqual(len(table.columns), 5)


if __name__ == '__main__':
    unittest.main()
