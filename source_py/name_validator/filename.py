"""
Filename parsing for the name validator.
"""

from .types import ParsedName

# Separates the name part of a filename from the rest
DELIMITER = "_"


def split_filename(filename: str) -> ParsedName:
    """Split a filename into the candidate name and the suffix.

    The candidate name is everything before the first delimiter, trimmed.
    The suffix starts at the delimiter and is kept verbatim, so
    ``"Alise_invoice.xlsx"`` gives ``("Alise", "_invoice.xlsx")``.
    Without a delimiter the whole trimmed filename is the candidate and
    the suffix is empty.
    """
    head, sep, tail = filename.partition(DELIMITER)
    return ParsedName(candidate_name=head.strip(), suffix=sep + tail)
