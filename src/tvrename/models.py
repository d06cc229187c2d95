"""Data types shared by the matching engine, the renamer and the catalog client."""
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class MediaFile:
    """A video file discovered on disk, identified by its absolute path."""

    path: Path

    @property
    def base_name(self) -> str:
        """File name without its extension."""
        return self.path.stem

    @property
    def suffix(self) -> str:
        return self.path.suffix

    def __str__(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class EpisodeRecord:
    """An episode as listed by the catalog. A missing name means it cannot be matched."""

    id: int
    season_number: int
    number: int
    name: str | None = None

    @property
    def token(self) -> str:
        return f"S{self.season_number:02d}E{self.number:02d}"


@dataclass(frozen=True)
class RenameProposal:
    source: Path
    target: Path
    episode_label: str


@dataclass
class MatchResult:
    """
    Outcome of one matching run.

    - renames: confirmed matches, in episode order.
    - unmatched_episodes: display labels ("Series S01E02 Title") of episodes with no file.
    - unmatched_files: files still in the pool once every episode was processed.
    - skipped_episodes: episodes without a name; neither matched nor unmatched.
    """

    renames: list[RenameProposal] = field(default_factory=list)
    unmatched_episodes: list[str] = field(default_factory=list)
    unmatched_files: list[MediaFile] = field(default_factory=list)
    skipped_episodes: list[EpisodeRecord] = field(default_factory=list)
