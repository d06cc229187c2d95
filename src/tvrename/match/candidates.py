"""
Candidate selection for a single episode.

Files are compared to the episode by their normalized base names. Exact key
matches win outright; only when there are none does the filter fall back to
similar names (a small edit distance, or one key containing the other).
"""
from dataclasses import dataclass, field
from typing import Sequence

from tvrename.match.normalize import normalize
from tvrename.match.similarity import is_similar
from tvrename.models import EpisodeRecord, MediaFile
from tvrename.utils.constants import SIMILARITY_MAX_DISTANCE


@dataclass
class CandidateMatches:
    exact: list[MediaFile] = field(default_factory=list)
    similar: list[MediaFile] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.exact or self.similar)


def find_candidates(episode: EpisodeRecord, pool: Sequence[MediaFile]) -> CandidateMatches:
    """
    Collect the files in `pool` that may hold `episode`.

    Both lists keep the order of `pool`. `similar` is only computed when
    `exact` is empty. An episode without a name yields no candidates; the
    caller is expected to skip it.
    """
    if not episode.name:
        return CandidateMatches()

    key = normalize(episode.name)
    keyed = [(f, normalize(f.base_name)) for f in pool]

    exact = [f for f, name_key in keyed if name_key == key]
    if exact:
        return CandidateMatches(exact=exact)

    similar = [
        f
        for f, name_key in keyed
        if is_similar(key, name_key, SIMILARITY_MAX_DISTANCE) or name_key in key or key in name_key
    ]
    return CandidateMatches(similar=similar)
