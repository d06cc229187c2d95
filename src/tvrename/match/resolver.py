"""
Narrowing a candidate list down to at most one file.

A single candidate is accepted as-is. Several candidates are never settled by
a heuristic: the question goes to a `Chooser`, usually a person at the
terminal, who may also answer "none of the above".
"""
from typing import Protocol, Sequence

from tvrename.models import MediaFile
from tvrename.utils import LogLevel, logger

EXACT = "exact"
SIMILAR = "similar"

_MESSAGES = {
    EXACT: "Multiple files found for episode {label}. Please select one:",
    SIMILAR: "Similar files found for episode {label}. Please select one:",
}


class Chooser(Protocol):
    """Anything able to pick one of several options, or none of them."""

    def choose(self, message: str, options: Sequence[str]) -> int | None:
        """Return the index of the selected option, or None for "none of the above"."""
        ...


def resolve(
        candidates: Sequence[MediaFile], episode_label: str, chooser: Chooser, kind: str = EXACT
) -> MediaFile | None:
    """
    Pick the file for one episode from its candidates.

    Parameters:
    - candidates: Files proposed by the candidate filter, in pool order.
    - episode_label: Display label used in the question, e.g. "Show S01E02 Title".
    - chooser: Consulted only when there is more than one candidate.
    - kind: EXACT or SIMILAR; selects the wording of the question.

    Returns:
    - The chosen file, or None when there were no candidates or the chooser
      declined all of them.
    """
    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]

    logger.log(
        "match.ambiguous", LogLevel.DEBUG, episode=episode_label, kind=kind, candidates=len(candidates)
    )
    message = _MESSAGES.get(kind, _MESSAGES[EXACT]).format(label=episode_label)
    index = chooser.choose(message, [str(c) for c in candidates])
    if index is None:
        return None
    if not 0 <= index < len(candidates):
        raise IndexError(f"Chooser returned {index} for {len(candidates)} options")
    return candidates[index]
