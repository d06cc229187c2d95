"""
Canonical naming and rename application.

Package organization:
- formatter: Builds episode labels ("Show S01E02 Title") and filesystem-safe
  file names from catalog records.
- batch: Applies rename proposals produced by `tvrename.match`, honouring
  dry-run mode.

Public API (top-level exports)
- `episode_label`, `build_filename`, `build_target_path`
- `apply_renames`
"""
from .formatter import (
    build_filename,
    build_target_path,
    episode_label,
)
from .batch import apply_renames

__all__ = [
    "episode_label",
    "build_filename",
    "build_target_path",
    "apply_renames",
]
