"""
Run-level matching of episodes to files.

Episodes are handled one at a time in catalog order. Each confirmed match
removes the file from the pool before the next episode is looked at, so a
file can never be assigned twice and later episodes only see what is left.
Nothing here touches the filesystem: the result is a list of proposals the
caller may apply (or not, in dry-run mode).
"""
from typing import Iterable

from tvrename.match.candidates import find_candidates
from tvrename.match.resolver import EXACT, SIMILAR, Chooser, resolve
from tvrename.models import EpisodeRecord, MatchResult, MediaFile, RenameProposal
from tvrename.rename.formatter import build_target_path, episode_label
from tvrename.utils import LogLevel, logger


def match_episode(
        series_name: str, episode: EpisodeRecord, pool: list[MediaFile], chooser: Chooser
) -> MediaFile | None:
    """Find the file for one named episode without modifying `pool`."""
    label = episode_label(series_name, episode)
    candidates = find_candidates(episode, pool)

    if candidates.exact:
        logger.log("match.exact", LogLevel.DEBUG, episode=label, candidates=len(candidates.exact))
        return resolve(candidates.exact, label, chooser, EXACT)
    if candidates.similar:
        logger.log("match.similar", LogLevel.DEBUG, episode=label, candidates=len(candidates.similar))
        return resolve(candidates.similar, label, chooser, SIMILAR)
    return None


def match_episodes(
        series_name: str, episodes: Iterable[EpisodeRecord], files: Iterable[MediaFile], chooser: Chooser
) -> MatchResult:
    """
    Match every episode to at most one file.

    Parameters:
    - series_name: Series title used in labels and new file names.
    - episodes: Episodes in canonical order (see `utils.tvdb.sort_episodes`).
    - files: Candidate files; their order is the pool order used for ties.
    - chooser: Asked whenever an episode has more than one candidate.

    Returns:
    MatchResult with rename proposals, unmatched episode labels, the files that
    were never matched and the episodes skipped for lack of a name.
    """
    pool = list(dict.fromkeys(files))
    result = MatchResult()

    for episode in episodes:
        if not episode.name:
            logger.log(
                "match.skip",
                LogLevel.WARN,
                episode=episode_label(series_name, episode),
                episode_id=episode.id,
                reason="no name",
            )
            result.skipped_episodes.append(episode)
            continue

        label = episode_label(series_name, episode)
        chosen = match_episode(series_name, episode, pool, chooser)
        if chosen is None:
            logger.log("match.none", LogLevel.WARN, episode=label)
            result.unmatched_episodes.append(label)
            continue

        target = build_target_path(chosen.path, series_name, episode)
        logger.log("match.found", LogLevel.INFO, episode=label, file=chosen.path.name)
        result.renames.append(RenameProposal(source=chosen.path, target=target, episode_label=label))
        pool.remove(chosen)

    result.unmatched_files = pool
    return result
