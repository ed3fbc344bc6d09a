#!/usr/bin/env python3
"""
MP3 Title Renamer - rename MP3 files to the title stored in their ID3v1 tag.

Usage:
    python -m mp3_title_renamer /path/to/music [options]
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from mp3_title_renamer.config import (
    DEFAULT_EXTENSIONS, eprint, load_config, setup_logging, validate_config
)
from mp3_title_renamer.models import FileResult, ProcessingStats, RenameOutcome
from mp3_title_renamer.renamer import FileRenamer
from mp3_title_renamer.reporter import Reporter
from mp3_title_renamer.tag_reader import read_title
from mp3_title_renamer.utils import find_media_files, is_media_file

logger = logging.getLogger(__name__)


class Mp3TitleRenamer:
    """Main processor for title-based renaming."""

    def __init__(self, config: dict, args: argparse.Namespace,
                 reporter: Reporter):
        """
        Initialize processor.

        Args:
            config: Configuration dictionary
            args: CLI arguments
            reporter: Console reporter
        """
        self.config = config
        self.args = args
        self.reporter = reporter
        self.stats = ProcessingStats()
        self.renamer = FileRenamer()
        self.extensions = config.get("extensions") or DEFAULT_EXTENSIONS

    def process(self, path: str) -> ProcessingStats:
        """
        Main entry point for processing.

        Args:
            path: Path to process (file or folder)

        Returns:
            Statistics for the run
        """
        path_obj = Path(path)

        if path_obj.is_dir():
            self.reporter.print(f"Processing directory: '{path_obj.resolve()}'")
            self.process_directory(str(path_obj))
        elif path_obj.is_file() and is_media_file(path_obj, self.extensions):
            self.reporter.print(f"Processing single file: '{path_obj.name}'")
            self.process_file(str(path_obj))
        elif path_obj.exists():
            self.reporter.error(
                f"Error: Provided path is neither a directory nor a media file: '{path}'"
            )
            self.stats.errors.append(f"{path}: not a directory or media file")
        else:
            self.reporter.error(f"Error: Path not found at '{path}'")
            self.stats.errors.append(f"{path}: path not found")

        self.reporter.show_summary(self.stats)
        return self.stats

    def process_directory(self, folder_path: str) -> None:
        """Process every media file in a folder, one at a time."""
        folder = Path(folder_path)

        try:
            if not any(folder.iterdir()):
                self.reporter.print(f"No files found in directory: '{folder.resolve()}'")
                return
            media_files = find_media_files(
                folder, self.extensions, recursive=self.args.recursive
            )
        except OSError as e:
            self.reporter.error(
                f"Error: Could not list files in directory '{folder.resolve()}': {e}"
            )
            self.stats.errors.append(f"{folder_path}: {e}")
            return

        if not media_files:
            self.reporter.print(f"No media files found in directory: '{folder.resolve()}'")
            return

        logger.debug("Found %d media file(s) in %s", len(media_files), folder)

        for file_path in media_files:
            self.process_file(str(file_path))

        self.reporter.print("\nBatch processing complete.")

    def process_file(self, file_path: str) -> FileResult:
        """Process a single file and record its outcome."""
        self.reporter.show_file_header(file_path)
        result = self._rename_from_tag(file_path)
        self.stats.record(result)
        self.reporter.show_result(result)
        return result

    def _rename_from_tag(self, file_path: str) -> FileResult:
        """Read the tag and rename the file if needed."""
        title_result = read_title(file_path)

        if title_result.is_error:
            return FileResult(file_path, RenameOutcome.READ_ERROR,
                              message=title_result.error)

        if title_result.is_absent:
            return FileResult(file_path, RenameOutcome.NO_TAG,
                              message="No ID3v1 tag")

        title = title_result.title
        if not title:
            return FileResult(file_path, RenameOutcome.EMPTY_TITLE,
                              title=title, message="Empty title")

        new_name = self.renamer.build_filename(file_path, title)
        if new_name is None:
            return FileResult(file_path, RenameOutcome.EMPTY_AFTER_SANITIZATION,
                              title=title,
                              message="Title has no valid filename characters")

        outcome, message = self.renamer.rename_file(
            file_path, new_name, dry_run=self.args.dry_run
        )
        return FileResult(file_path, outcome, title=title,
                          new_name=new_name, message=message)


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        description="Rename MP3 files to the title stored in their ID3v1 tag.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rename a single file
  python -m mp3_title_renamer "/path/to/song.mp3"

  # Rename every MP3 in a folder
  python -m mp3_title_renamer /path/to/music

  # Preview changes, including subfolders
  python -m mp3_title_renamer /path/to/music --recursive --dry-run
"""
    )

    parser.add_argument(
        "path",
        help="Path to MP3 file or folder to process"
    )

    parser.add_argument(
        "--recursive", "-r",
        action="store_true",
        help="Also process files in subfolders"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview renames without applying them"
    )

    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: ./.env)"
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress non-essential output"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validate path
    if not os.path.exists(args.path):
        parser.error(f"Path does not exist: {args.path}")

    # Load configuration
    config = load_config(args.env_file)
    problems = validate_config(config)
    if problems:
        eprint("\nInvalid configuration:")
        for problem in problems:
            eprint(f"  - {problem}")
        return 1

    setup_logging(args.verbose, config.get("log_file"), config["log_level"])

    # Initialize reporter
    reporter = Reporter(no_color=args.no_color, quiet=args.quiet)

    # Run processor
    processor = Mp3TitleRenamer(config, args, reporter)
    try:
        stats = processor.process(args.path)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1

    return 1 if stats.has_errors else 0


if __name__ == "__main__":
    sys.exit(main())
