"""
A media renaming module for matching TV episode files to TheTVDB metadata.

This module provides the pieces needed to take a folder of ripped or downloaded
episode files, look the series up on TheTVDB, pair every file with the episode
it contains and rename it to a consistent "Series S01E02 Title" layout.

The module is organized into several categories:
- Matching files to episodes (normalization, similarity, candidate filtering,
  disambiguation and the per-run orchestrator).
- Building canonical file names and applying renames, with a dry-run mode.
- Interfacing with TheTVDB for series and episode lookup.
- Utility functions for configuration, logging, prompts and file discovery.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
