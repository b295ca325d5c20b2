"""
Type definitions and data structures for the name validator.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from enum import Enum


class Status(Enum):
    """Outcome of checking a single file against the canonical names."""
    CORRECT = "correct"
    RENAMED = "renamed"
    NOT_MATCHED = "not_matched"

    @property
    def label(self) -> str:
        """Human-readable label used in reports."""
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    Status.CORRECT: "✅ Correct",
    Status.RENAMED: "🟡 Renamed",
    Status.NOT_MATCHED: "❌ Not Matched",
}


@dataclass(frozen=True)
class ParsedName:
    """Filename split at the first delimiter."""
    candidate_name: str
    suffix: str


@dataclass(frozen=True)
class MatchResult:
    """Closest canonical name and its edit distance."""
    matched_name: str
    distance: int


@dataclass(frozen=True)
class DecisionRecord:
    """Result of checking one directory entry.

    ``status`` records whether the file is eligible for a rename, not whether
    the rename happened. ``rename_performed`` records the actual outcome.
    """
    original: str
    extracted_name: str
    matched_name: str
    corrected_filename: str
    distance: int
    status: Status
    rename_performed: bool = False


@dataclass
class RunSummary:
    """Aggregate counts over a validation pass."""
    total: int = 0
    correct: int = 0
    renamed: int = 0
    not_matched: int = 0
    renames_performed: int = 0
    rename_failures: int = 0
    collisions: Dict[str, List[str]] = field(default_factory=dict)


@dataclass
class Config:
    """Application configuration."""
    names_path: str
    folder_path: str
    rename: bool
    report_dir: str
    json: bool
    plain: bool
    verbose: bool
    log_file: Optional[str]
