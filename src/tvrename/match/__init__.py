"""
File-to-episode matching.

Package organization:
- normalize: Comparison keys (alphanumeric only, lowercase).
- similarity: Levenshtein distance and the bounded `is_similar` predicate.
- candidates: Exact and similar candidate sets for one episode.
- resolver: Narrows a candidate set to one file, asking a `Chooser` on ties.
- orchestrator: Runs the whole episode list against the pool of files.

Behavior notes:
- Exact matches always take precedence; similar matches are only looked for
  when an episode has no exact match.
- A matched file is removed from the pool before the next episode, so no file
  is ever proposed twice.
- Nothing in this package renames files or raises for missing data.
"""
from .normalize import normalize
from .similarity import distance, is_similar
from .candidates import CandidateMatches, find_candidates
from .resolver import EXACT, SIMILAR, Chooser, resolve
from .orchestrator import match_episode, match_episodes

__all__ = [
    "normalize",
    "distance",
    "is_similar",
    "CandidateMatches",
    "find_candidates",
    "EXACT",
    "SIMILAR",
    "Chooser",
    "resolve",
    "match_episode",
    "match_episodes",
]
