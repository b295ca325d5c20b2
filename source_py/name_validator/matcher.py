"""
Closest-name matching for the name validator.
"""

from typing import List, Sequence

from rapidfuzz.distance import Levenshtein

from .errors import NoCandidatesError
from .types import MatchResult


class Matcher:
    """Finds the canonical name closest to a candidate by edit distance."""

    def __init__(self, canonical_names: Sequence[str]):
        self.canonical_names: List[str] = list(canonical_names)
        self._folded = [name.lower() for name in self.canonical_names]

    def best_match(self, candidate: str) -> MatchResult:
        """Return the first canonical name with the smallest distance to ``candidate``.

        Comparison is case-insensitive. On a tie the earlier name wins.
        """
        if not self.canonical_names:
            raise NoCandidatesError("No canonical names to match against")

        folded = candidate.lower()
        best_index = 0
        best_distance = Levenshtein.distance(folded, self._folded[0])

        for index in range(1, len(self._folded)):
            if best_distance == 0:
                break
            # Distances above the cutoff come back as cutoff + 1
            distance = Levenshtein.distance(
                folded, self._folded[index], score_cutoff=best_distance - 1
            )
            if distance < best_distance:
                best_distance = distance
                best_index = index

        return MatchResult(
            matched_name=self.canonical_names[best_index],
            distance=best_distance,
        )


def find_best_match(candidate: str, canonical_names: Sequence[str]) -> MatchResult:
    """Match ``candidate`` against ``canonical_names`` without keeping a Matcher."""
    return Matcher(canonical_names).best_match(candidate)
