"""Data models for MP3 Title Renamer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class TagStatus(Enum):
    """Outcome of looking for an ID3v1 title."""
    PRESENT = "present"
    ABSENT = "absent"
    ERROR = "error"


@dataclass(frozen=True)
class TitleResult:
    """Tagged result of a title extraction.

    ABSENT means the file carries no ID3v1 tag (too short, or no "TAG"
    marker). PRESENT may still hold an empty title. ERROR carries the
    message of the I/O failure that stopped the read.
    """
    status: TagStatus
    title: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def present(cls, title: str) -> "TitleResult":
        return cls(TagStatus.PRESENT, title=title)

    @classmethod
    def absent(cls) -> "TitleResult":
        return cls(TagStatus.ABSENT)

    @classmethod
    def failed(cls, message: str) -> "TitleResult":
        return cls(TagStatus.ERROR, error=message)

    @property
    def is_present(self) -> bool:
        return self.status is TagStatus.PRESENT

    @property
    def is_absent(self) -> bool:
        return self.status is TagStatus.ABSENT

    @property
    def is_error(self) -> bool:
        return self.status is TagStatus.ERROR


class RenameOutcome(Enum):
    """What happened to a single file."""
    RENAMED = "renamed"
    WOULD_RENAME = "would_rename"
    ALREADY_NAMED = "already_named"
    NO_TAG = "no_tag"
    EMPTY_TITLE = "empty_title"
    EMPTY_AFTER_SANITIZATION = "empty_after_sanitization"
    DESTINATION_EXISTS = "destination_exists"
    RENAME_FAILED = "rename_failed"
    READ_ERROR = "read_error"

    @property
    def is_error(self) -> bool:
        """Check if the outcome should be reported as an error."""
        return self in (
            RenameOutcome.EMPTY_AFTER_SANITIZATION,
            RenameOutcome.DESTINATION_EXISTS,
            RenameOutcome.RENAME_FAILED,
            RenameOutcome.READ_ERROR,
        )


@dataclass
class FileResult:
    """Result of processing one file."""
    file_path: str
    outcome: RenameOutcome
    title: Optional[str] = None
    new_name: Optional[str] = None
    message: Optional[str] = None


@dataclass
class ProcessingStats:
    """Statistics for a processing run."""
    total_files: int = 0
    renamed: int = 0
    already_named: int = 0
    skipped: int = 0
    errors: List[str] = field(default_factory=list)
    results: List[FileResult] = field(default_factory=list)

    def record(self, result: FileResult) -> None:
        """Add a file result to the running totals."""
        self.total_files += 1
        self.results.append(result)

        if result.outcome in (RenameOutcome.RENAMED, RenameOutcome.WOULD_RENAME):
            self.renamed += 1
        elif result.outcome is RenameOutcome.ALREADY_NAMED:
            self.already_named += 1
        elif result.outcome.is_error:
            self.errors.append(f"{result.file_path}: {result.message}")
        else:
            self.skipped += 1

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
