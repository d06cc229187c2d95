"""
File discovery helpers.

The matcher never walks the filesystem itself; it is handed the list built
here. Files that already carry the series name at the start were renamed by
an earlier run and are left out of the pool.
"""
from pathlib import Path

from tvrename.models import MediaFile
from tvrename.utils.constants import FILENAME_STRIP_REGEX, VIDEO_EXTENSIONS


def is_video_file(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in VIDEO_EXTENSIONS


def collect_media_files(directory: Path, series_name: str | None = None) -> list[MediaFile]:
    """
    Recursively collect video files under `directory`, sorted by path.

    Parameters:
    - directory (Path): Root folder of the series.
    - series_name (str | None): When given, files whose name already starts
      with it, or with its filesystem-safe form, are skipped.

    Returns:
    - list[MediaFile]: Absolute, resolved paths in a stable order.
    """
    prefixes = tuple(p for p in (series_name, FILENAME_STRIP_REGEX.sub("", series_name or "")) if p)
    files = []
    for p in sorted(Path(directory).rglob("*")):
        if not is_video_file(p):
            continue
        if prefixes and p.name.startswith(prefixes):
            continue
        files.append(MediaFile(p.resolve()))
    return files


class RenameInputError(Exception):
    """Raised when the run cannot start: bad directory, nothing to rename, no series."""

    pass


def require_directory(directory: str | Path | None) -> Path:
    """Resolve `directory` and make sure it exists and is a folder."""
    if not directory:
        raise RenameInputError("No directory provided")
    root = Path(directory).expanduser().resolve()
    if not root.exists():
        raise RenameInputError(f"Directory does not exist: {root}")
    if not root.is_dir():
        raise RenameInputError(f"Not a directory: {root}")
    return root
