"""
Canonical name loading for the name validator.
"""

import json
import logging
from typing import List

from .errors import FormatError, ParseError

BOM = "\ufeff"

EXPECTED_FORMAT = "Expected format: [ [id, name], ... ]"


def parse_canonical_names(raw: str) -> List[str]:
    """Parse a ``[[id, name], ...]`` JSON document into trimmed names.

    A leading byte-order mark is ignored. Names are returned in document
    order; duplicates are kept.
    """
    if raw.startswith(BOM):
        raw = raw[len(BOM):]

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in name list: {e}") from e

    if (not isinstance(data, list) or not data
            or not isinstance(data[0], list) or len(data[0]) < 2):
        raise FormatError(EXPECTED_FORMAT)

    names = []
    for index, entry in enumerate(data):
        if not isinstance(entry, list) or len(entry) < 2:
            raise FormatError(f"{EXPECTED_FORMAT} (entry {index} is not an [id, name] pair)")
        name = entry[1]
        if not isinstance(name, str):
            raise FormatError(f"{EXPECTED_FORMAT} (entry {index} has a non-string name)")
        names.append(name.strip())

    return names


def load_canonical_names(path: str) -> List[str]:
    """Read and parse the canonical name list at ``path``."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Cannot read name list {path}: {e}") from e

    names = parse_canonical_names(raw)
    logging.info(f"Loaded {len(names)} canonical names from {path}")
    return names
