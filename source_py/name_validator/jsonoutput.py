"""
JSON report output for the name validator.
"""

import json
import logging
import os
from typing import Any, Dict, List

from .types import DecisionRecord

REPORT_FILENAME = "name-validation-results.json"


class JSONOutput:
    """Handles JSON report generation."""

    @staticmethod
    def to_dicts(records: List[DecisionRecord]) -> List[Dict[str, Any]]:
        """Convert records to report rows, keeping their order."""
        return [
            {
                "original": record.original,
                "extractedName": record.extracted_name,
                "matchedName": record.matched_name,
                "correctedFilename": record.corrected_filename,
                "distance": record.distance,
                "status": record.status.label,
            }
            for record in records
        ]

    @staticmethod
    def to_json(records: List[DecisionRecord]) -> str:
        """Convert the records to a JSON string."""
        return json.dumps(JSONOutput.to_dicts(records), indent=2, ensure_ascii=False)

    @staticmethod
    def write(records: List[DecisionRecord], report_dir: str) -> str:
        """Write the JSON report into ``report_dir`` and return its path."""
        path = os.path.join(report_dir, REPORT_FILENAME)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(JSONOutput.to_json(records))
        logging.info(f"Report saved to {path}")
        return path
