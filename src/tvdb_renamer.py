"""
Rename TV episode files after their TheTVDB episode titles.

Looks the series up on TheTVDB, pairs every video file in a folder with the
episode whose title matches its file name and renames it to
"Series S01E02 Title.ext". Ambiguous matches are asked about interactively.
"""

import argparse
import atexit
import sys
import time
from pathlib import Path

import tvrename as tvrename_module
from tvrename import match, rename
from tvrename.models import MatchResult
from tvrename.utils import LogLevel, logger
from tvrename.utils.constants import (
    CACHE_DIR,
    DEFAULT_DIRECTORY,
    DEFAULT_SERIES_NAME,
    EXIT_CATALOG_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_INTERRUPTED,
    EXIT_OK,
    STATUS_FAIL,
    STATUS_RENAMED,
)
from tvrename.utils.file_util import RenameInputError, collect_media_files, require_directory
from tvrename.utils.prompt import DeclineChooser, QuestionaryChooser, ask_text
from tvrename.utils.tvdb import SearchResult, TVDBClient, TVDBError


def select_series(client: TVDBClient, query: str, chooser) -> SearchResult:
    """Search for `query` and let the chooser pick a result (a single hit is taken as-is)."""
    results = client.search(query, type="series")
    if not results:
        raise RenameInputError(f"No series found for '{query}'")
    if len(results) == 1:
        return results[0]

    index = chooser.choose("Select the series you want to query:", [r.label for r in results])
    if index is None:
        raise RenameInputError("No series selected")
    return results[index]


def run(directory: Path, series_query: str, client: TVDBClient, chooser, dry_run: bool = False) -> MatchResult:
    """Look the series up, match its episodes to the files under `directory` and rename them."""
    selected = select_series(client, series_query, chooser)
    series = client.get_series(selected.tvdb_id)
    logger.log("tvdb.series", LogLevel.INFO, name=series.name, year=series.year, tvdb_id=series.id)

    files = collect_media_files(directory, series.name)
    if not files:
        raise RenameInputError(f"No media files to rename in {directory}")
    logger.log("scan.files", LogLevel.INFO, directory=str(directory), files=len(files))

    episodes = client.get_series_episodes(series.id)
    result = match.match_episodes(series.name, episodes, files, chooser)

    statuses = rename.apply_renames(result.renames, dry_run=dry_run)
    renamed = sum(1 for _, _, status in statuses if status == STATUS_RENAMED)
    failed = sum(1 for _, _, status in statuses if status.startswith(STATUS_FAIL))
    logger.log(
        "rename.summary",
        LogLevel.INFO,
        proposed=len(result.renames),
        renamed=renamed,
        failed=failed,
        dry_run=dry_run,
    )
    return result


def report(result: MatchResult) -> None:
    """Print the episodes and files that were left without a partner."""
    if result.unmatched_episodes:
        logger.safe_print("\nThe following episodes were not matched to any files:")
        for label in result.unmatched_episodes:
            logger.safe_print(f"- {label}")

    if result.unmatched_files:
        logger.safe_print("\nThe following files were not matched to any episodes:")
        for media_file in result.unmatched_files:
            logger.safe_print(f"- {media_file}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Match TV episode files to TheTVDB episode titles and rename them to "
                    "'Series S01E02 Title.ext'. Requires TVDB_API_KEY in the environment or a .env file.",
        epilog="Example: tvrename ~/Rips/Firefly --series Firefly --dry-run",
    )
    parser.add_argument("directory", nargs="?", help="TV series directory (default: $TVRENAME_DIRECTORY or prompt)")
    parser.add_argument("--series", help="Series name to search for (default: $TVRENAME_SERIES_NAME or prompt)")
    parser.add_argument(
        "--dry-run", "--test-run", dest="dry_run", action="store_true", help="Show proposed renames without changes"
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Never ask; ambiguous episodes are reported as unmatched instead",
    )
    parser.add_argument("--cache-dir", default=CACHE_DIR, help=f"TheTVDB response cache (default: {CACHE_DIR})")
    parser.add_argument("--log-file", help="Also append log output to this file")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {tvrename_module.__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logger.set_log_level(LogLevel.DEBUG if args.debug else LogLevel.INFO)

    if args.log_file:
        log_path = Path(args.log_file).expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_file_handle = open(log_path, "a", encoding="utf-8", buffering=1)
        logger.set_log_file(log_file_handle)
        atexit.register(log_file_handle.close)

    chooser = DeclineChooser() if args.no_prompt else QuestionaryChooser()
    start_time = time.time()

    try:
        directory = args.directory or DEFAULT_DIRECTORY
        if not directory and not args.no_prompt:
            directory = ask_text("Please enter the TV series directory:")
        root = require_directory(directory)

        series_query = args.series or DEFAULT_SERIES_NAME
        if not series_query and not args.no_prompt:
            series_query = ask_text("Please enter the name of the series:")
        if not series_query:
            raise RenameInputError("No series name provided")

        if args.dry_run:
            logger.log("tvrename.start", LogLevel.WARN, msg="Running in test mode. No files will be renamed.")
        else:
            logger.log("tvrename.start", LogLevel.INFO, directory=str(root), series=series_query)

        client = TVDBClient(cache_dir=args.cache_dir)
        result = run(root, series_query, client, chooser, dry_run=args.dry_run)
    except RenameInputError as e:
        logger.log("startup.error", LogLevel.ERROR, msg=str(e))
        sys.exit(EXIT_INPUT_ERROR)
    except TVDBError as e:
        logger.log("tvdb.error", LogLevel.ERROR, msg=str(e))
        sys.exit(EXIT_CATALOG_ERROR)
    except KeyboardInterrupt:
        logger.log("tvrename.interrupted", LogLevel.WARN, msg="Interrupted, remaining files left untouched")
        sys.exit(EXIT_INTERRUPTED)

    report(result)
    logger.log(
        "tvrename.end",
        LogLevel.INFO,
        runtime=f"{time.time() - start_time:.1f}s",
        renamed=len(result.renames),
        unmatched_episodes=len(result.unmatched_episodes),
        unmatched_files=len(result.unmatched_files),
        skipped=len(result.skipped_episodes),
        dry_run=args.dry_run,
    )
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
