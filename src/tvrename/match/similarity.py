"""
Edit-distance helpers used for the fuzzy fallback stage of matching.

`distance` is the plain Levenshtein distance (insertions, deletions and
substitutions all cost 1). `is_similar` is the threshold predicate the
candidate filter relies on.
"""

from rapidfuzz.distance import Levenshtein

from tvrename.utils.constants import SIMILARITY_MAX_DISTANCE


def distance(a: str, b: str) -> int:
    """Return the minimum number of single-character edits turning `a` into `b`."""
    return Levenshtein.distance(a, b)


def is_similar(a: str, b: str, max_distance: int = SIMILARITY_MAX_DISTANCE) -> bool:
    """
    Check whether `a` and `b` are strictly closer than `max_distance` edits.

    Identical strings are always similar, even when `max_distance <= 0`: the
    equality check runs before the threshold guard, so is_similar("x", "x", 0)
    is True while is_similar("x", "y", 0) is False. Keep that ordering; callers
    may depend on it.
    """
    if a == b:
        return True
    if max_distance <= 0:
        return False
    # Edit distance is never below the length difference.
    if abs(len(a) - len(b)) >= max_distance:
        return False
    return distance(a, b) < max_distance
