"""Utility functions for MP3 Title Renamer."""

import re
from pathlib import Path
from typing import Iterable, List

from mp3_title_renamer.config import DEFAULT_EXTENSIONS

# Characters rejected by at least one common filesystem.
INVALID_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f\x7f]')


def sanitize_filename(s: str) -> str:
    """Sanitize a tag title for use as a filename stem.

    Returns an empty string when nothing usable is left.
    """
    s = INVALID_FILENAME_CHARS.sub("", s)
    s = re.sub(r"\s+", " ", s)
    return s.strip(". ")


def is_media_file(file_path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> bool:
    """Check if the file extension is one of the configured media extensions."""
    return Path(file_path).suffix.lower() in {ext.lower() for ext in extensions}


def names_match(current_name: str, new_name: str) -> bool:
    """Compare two filenames ignoring case."""
    return current_name.lower() == new_name.lower()


def find_media_files(directory, extensions: Iterable[str] = DEFAULT_EXTENSIONS,
                     recursive: bool = False) -> List[Path]:
    """
    List media files in a directory.

    Args:
        directory: Folder to scan
        extensions: Accepted file extensions including the dot
        recursive: Also scan subfolders

    Returns:
        Sorted list of matching file paths.

    Raises:
        OSError: The directory could not be listed.
    """
    folder = Path(directory)
    candidates = folder.rglob("*") if recursive else folder.iterdir()
    return sorted(
        p for p in candidates
        if p.is_file() and is_media_file(p, extensions)
    )
