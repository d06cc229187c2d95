"""
Canonical episode names.

Episodes are named "{series} S{season:02d}E{episode:02d} {title}". The display
label keeps the title untouched; the file name version drops everything that
is not a letter, digit, space or hyphen before the original extension is put
back on.
"""
from pathlib import Path

from tvrename.models import EpisodeRecord
from tvrename.utils.constants import FILENAME_STRIP_REGEX


def episode_label(series_name: str, episode: EpisodeRecord) -> str:
    """
    Build the display label of an episode.

    Examples:
    - episode_label("Show", EpisodeRecord(1, 1, 2, "Second")) -> "Show S01E02 Second"
    - episode_label("Show", EpisodeRecord(1, 0, 3, None)) -> "Show S00E03"
    """
    label = f"{series_name} {episode.token}"
    return f"{label} {episode.name}" if episode.name else label


def build_filename(series_name: str, episode: EpisodeRecord, suffix: str) -> str:
    """Build the filesystem-safe file name for an episode, keeping `suffix`."""
    return f"{FILENAME_STRIP_REGEX.sub('', episode_label(series_name, episode))}{suffix}"


def build_target_path(source: Path, series_name: str, episode: EpisodeRecord) -> Path:
    """Return the renamed path of `source`, which stays in its own directory."""
    return source.parent / build_filename(series_name, episode, source.suffix)
