"""Console reporting of per-file outcomes."""

import sys
from pathlib import Path

from mp3_title_renamer.models import FileResult, ProcessingStats, RenameOutcome


class Reporter:
    """Prints progress, per-file results and the final summary."""

    COLORS = {
        "reset": "\033[0m",
        "bold": "\033[1m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "red": "\033[91m",
        "cyan": "\033[96m",
        "dim": "\033[2m",
    }

    MAX_LISTED_ERRORS = 10

    def __init__(self, no_color: bool = False, quiet: bool = False):
        """
        Initialize reporter.

        Args:
            no_color: Disable colored output
            quiet: Suppress non-essential output (errors are still shown)
        """
        self.no_color = no_color
        self.quiet = quiet

        if no_color:
            self.COLORS = {k: "" for k in self.COLORS}

    def _c(self, color: str, text: str) -> str:
        """Apply color to text."""
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"

    def print(self, *args, **kwargs):
        """Print unless quiet mode."""
        if not self.quiet:
            print(*args, **kwargs)

    def error(self, message: str) -> None:
        """Print an error to stderr, even in quiet mode."""
        print(self._c("red", message), file=sys.stderr)

    def show_file_header(self, file_path: str) -> None:
        """Announce the file about to be processed."""
        self.print(f"\n{self._c('bold', f'--- Processing file: {Path(file_path).name} ---')}")

    def show_result(self, result: FileResult) -> None:
        """Display the outcome for one file."""
        name = Path(result.file_path).name
        outcome = result.outcome

        if result.title:
            self.print(f"  Found Title: \"{result.title}\"")

        if outcome is RenameOutcome.RENAMED:
            self.print(f"  {self._c('green', 'Renamed')} to '{result.new_name}'")
        elif outcome is RenameOutcome.WOULD_RENAME:
            self.print(f"  [DRY RUN] Would rename: {name} -> {result.new_name}")
        elif outcome is RenameOutcome.ALREADY_NAMED:
            self.print(f"  File already named correctly: '{name}'. Skipping.")
        elif outcome is RenameOutcome.NO_TAG:
            self.print(f"  {self._c('yellow', 'No ID3v1 tag found')} in '{name}'. Skipping.")
        elif outcome is RenameOutcome.EMPTY_TITLE:
            self.print(f"  {self._c('yellow', 'ID3v1 tag has an empty title')} in '{name}'. Skipping.")
        elif outcome is RenameOutcome.EMPTY_AFTER_SANITIZATION:
            self.error(f"  Error: The title of '{name}' contains only invalid filename characters. Skipping.")
        elif outcome is RenameOutcome.DESTINATION_EXISTS:
            self.error(f"  Error: A file named \"{result.new_name}\" already exists in this folder. Skipping '{name}'.")
        elif outcome is RenameOutcome.RENAME_FAILED:
            self.error(f"  Error: Failed to rename '{name}': {result.message}")
        elif outcome is RenameOutcome.READ_ERROR:
            self.error(f"  An error occurred while reading '{name}': {result.message}")

    def show_summary(self, stats: ProcessingStats) -> None:
        """Display final processing summary."""
        self.print(f"\n{self._c('bold', '=' * 60)}")
        self.print(f"{self._c('bold', 'Processing Summary')}")
        self.print("=" * 60)

        self.print(f"Files processed:     {stats.total_files}")
        self.print(f"Files renamed:       {self._c('green', str(stats.renamed))}")
        self.print(f"Already named:       {stats.already_named}")
        self.print(f"Files skipped:       {stats.skipped}")

        if stats.errors:
            self.print(f"\n{self._c('red', f'Errors ({len(stats.errors)}):')}")
            for error in stats.errors[:self.MAX_LISTED_ERRORS]:
                self.print(f"  - {error}")
            if len(stats.errors) > self.MAX_LISTED_ERRORS:
                self.print(f"  ... and {len(stats.errors) - self.MAX_LISTED_ERRORS} more errors")
