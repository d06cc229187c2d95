"""Comparison keys for episode titles and file names."""

from tvrename.utils.constants import NORMALIZE_REGEX


def normalize(text: str) -> str:
    """
    Reduce a title or file name to its comparison key.

    Everything outside [A-Za-z0-9] is dropped and the rest is lowercased, so
    "The Pilot!" and "the_pilot" share the key "thepilot". The transformation
    is lossy: it trades the odd false positive for tolerance to punctuation,
    case and spacing differences.
    """
    return NORMALIZE_REGEX.sub("", text).lower()
