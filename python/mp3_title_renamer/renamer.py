"""File renaming based on ID3v1 titles."""

import logging
from pathlib import Path
from typing import Optional, Tuple

from mp3_title_renamer.models import RenameOutcome
from mp3_title_renamer.utils import names_match, sanitize_filename

logger = logging.getLogger(__name__)


class FileRenamer:
    """Builds target filenames and renames files without overwriting."""

    def build_filename(self, file_path: str, title: str) -> Optional[str]:
        """
        Generate a filename from a tag title.

        Args:
            file_path: Current file path (its extension is kept)
            title: Title read from the tag

        Returns:
            New filename, or None if the title has no usable characters
        """
        stem = sanitize_filename(title)
        if not stem:
            return None
        return f"{stem}{Path(file_path).suffix}"

    def rename_file(self, file_path: str, new_name: str,
                    dry_run: bool = False) -> Tuple[RenameOutcome, str]:
        """
        Rename file to new name.

        The no-op and overwrite checks always run before anything touches
        the filesystem.

        Args:
            file_path: Current file path
            new_name: New filename (not full path)
            dry_run: If True, don't actually rename

        Returns:
            (outcome, new_path or message)
        """
        current = Path(file_path)
        new_path = current.parent / new_name

        if names_match(current.name, new_name):
            return RenameOutcome.ALREADY_NAMED, "File already has correct name"

        if new_path.exists():
            return RenameOutcome.DESTINATION_EXISTS, f"Target file already exists: {new_path}"

        if dry_run:
            return RenameOutcome.WOULD_RENAME, f"Would rename to: {new_name}"

        try:
            current.rename(new_path)
        except OSError as e:
            logger.debug("Rename of %s to %s failed: %s", current, new_path, e)
            return RenameOutcome.RENAME_FAILED, str(e)

        logger.debug("Renamed %s -> %s", current, new_path)
        return RenameOutcome.RENAMED, str(new_path)
