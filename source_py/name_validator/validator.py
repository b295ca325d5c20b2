"""
Validation and renaming of directory entries against canonical names.
"""

import logging
import os
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from .errors import RenameError
from .filename import split_filename
from .matcher import Matcher
from .types import DecisionRecord, MatchResult, ParsedName, RunSummary, Status


def decide(original: str, parsed: ParsedName, match: MatchResult) -> DecisionRecord:
    """Classify a filename given its parsed parts and best match.

    A file whose candidate name equals the match (ignoring case) is correct.
    Otherwise it is marked RENAMED when the corrected filename differs from
    the original, whether or not a rename is later carried out.
    """
    is_correct = parsed.candidate_name.lower() == match.matched_name.lower()
    corrected_filename = match.matched_name + parsed.suffix

    if is_correct:
        status = Status.CORRECT
    elif corrected_filename != original:
        status = Status.RENAMED
    else:
        status = Status.NOT_MATCHED

    return DecisionRecord(
        original=original,
        extracted_name=parsed.candidate_name,
        matched_name=match.matched_name,
        corrected_filename=corrected_filename,
        distance=match.distance,
        status=status,
    )


def needs_rename(record: DecisionRecord) -> bool:
    """Whether the record asks for its file to be renamed."""
    return record.status is Status.RENAMED


class Validator:
    """Runs a single pass over a folder."""

    def __init__(self, folder_path: str, matcher: Matcher, do_rename: bool = False):
        self.folder_path = folder_path
        self.matcher = matcher
        self.do_rename = do_rename

    def list_entries(self) -> List[str]:
        """Snapshot the folder listing, sorted by name.

        Every entry is returned, subdirectories included.
        """
        return sorted(os.listdir(self.folder_path))

    def validate_folder(self, entries: Optional[Iterable[str]] = None) -> List[DecisionRecord]:
        """Check every entry in listing order and return one record per entry."""
        if entries is None:
            entries = self.list_entries()
        return [self.process_entry(filename) for filename in entries]

    def process_entry(self, filename: str) -> DecisionRecord:
        """Check one entry and rename it when enabled and needed."""
        parsed = split_filename(filename)
        match = self.matcher.best_match(parsed.candidate_name)
        record = decide(filename, parsed, match)
        logging.debug(
            f"{filename}: extracted={record.extracted_name!r} "
            f"match={record.matched_name!r} distance={record.distance} "
            f"status={record.status.value}"
        )

        if self.do_rename and needs_rename(record):
            try:
                self.rename_file(record.original, record.corrected_filename)
            except RenameError as e:
                logging.error(f"Rename failed: {e}")
            else:
                record = replace(record, rename_performed=True)

        return record

    def rename_file(self, original: str, corrected: str) -> None:
        """Rename ``original`` to ``corrected`` inside the folder.

        Refuses to overwrite an existing entry.
        """
        old_path = os.path.join(self.folder_path, original)
        new_path = os.path.join(self.folder_path, corrected)

        if os.path.lexists(new_path):
            raise RenameError(original, corrected, "target already exists")

        try:
            os.rename(old_path, new_path)
        except OSError as e:
            raise RenameError(original, corrected, str(e)) from e

        logging.info(f"Renamed: {original} -> {corrected}")


def find_collisions(records: Iterable[DecisionRecord]) -> Dict[str, List[str]]:
    """Group originals that would be renamed to the same corrected filename."""
    claims: Dict[str, List[str]] = {}
    for record in records:
        if needs_rename(record):
            claims.setdefault(record.corrected_filename, []).append(record.original)

    collisions = {target: originals for target, originals in claims.items()
                  if len(originals) > 1}
    for target, originals in collisions.items():
        logging.warning(f"{len(originals)} files map to {target}: {', '.join(originals)}")
    return collisions


def summarize(records: List[DecisionRecord], do_rename: bool = False) -> RunSummary:
    """Count records per status, renames done and renames that failed."""
    summary = RunSummary(total=len(records))
    for record in records:
        if record.status is Status.CORRECT:
            summary.correct += 1
        elif record.status is Status.RENAMED:
            summary.renamed += 1
            if record.rename_performed:
                summary.renames_performed += 1
            elif do_rename:
                summary.rename_failures += 1
        else:
            summary.not_matched += 1
    summary.collisions = find_collisions(records)
    return summary
