"""Applying rename proposals to the filesystem.

This is the only place where files are moved. Every proposal is logged
first; in dry-run mode nothing else happens. A failed move is logged and
reported but does not stop the remaining renames.
"""
import shutil
from pathlib import Path
from typing import Iterable

from tqdm import tqdm

from tvrename.models import RenameProposal
from tvrename.utils import LogLevel, logger
from tvrename.utils.constants import STATUS_DRY_RUN, STATUS_FAIL, STATUS_RENAMED, STATUS_SKIP, STATUS_UNCHANGED


def apply_renames(proposals: Iterable[RenameProposal], dry_run: bool = False) -> list[tuple[Path, Path, str]]:
    """Rename every proposed file unless `dry_run` is set.

    Args:
        proposals (Iterable[RenameProposal]): Confirmed matches from the matcher.
        dry_run (bool): If True, only log the proposed renames.

    Returns:
        list[tuple[Path, Path, str]]: (source, target, status) for each proposal.
    """
    proposals = list(proposals)
    results: list[tuple[Path, Path, str]] = []

    for p in proposals:
        logger.log("rename.propose", LogLevel.INFO, source=str(p.source), target=p.target.name)

    if dry_run:
        logger.log("rename.dry_run", LogLevel.WARN, msg="Test run, no files will be renamed", total=len(proposals))
        return [(p.source, p.target, STATUS_DRY_RUN) for p in proposals]

    for p in tqdm(proposals, desc="Renaming files", disable=not proposals):
        results.append((p.source, p.target, _rename_one(p.source, p.target)))

    return results


def _rename_one(source: Path, target: Path) -> str:
    if source == target:
        logger.log("rename.unchanged", LogLevel.DEBUG, file=str(source))
        return STATUS_UNCHANGED
    if target.exists():
        logger.log("rename.skip", LogLevel.WARN, source=str(source), target=str(target), reason="target exists")
        return f"{STATUS_SKIP} (target exists)"
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.move(str(source), str(target))
    except (OSError, shutil.Error) as e:
        logger.log("rename.fail", LogLevel.ERROR, source=str(source), target=str(target), error=str(e))
        return f"{STATUS_FAIL} ({e})"
    logger.log("rename.apply", LogLevel.DEBUG, source=str(source), target=str(target))
    return STATUS_RENAMED
