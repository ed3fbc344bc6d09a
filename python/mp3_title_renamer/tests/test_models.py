"""Tests for models.py data classes."""

import sys
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mp3_title_renamer.models import (
    FileResult, ProcessingStats, RenameOutcome, TagStatus, TitleResult
)


class TestTitleResult:
    """Tests for TitleResult constructors and properties."""

    def test_present(self):
        result = TitleResult.present("Alpha")
        assert result.status is TagStatus.PRESENT
        assert result.title == "Alpha"
        assert result.is_present and not result.is_absent and not result.is_error

    def test_present_empty_differs_from_absent(self):
        """Should keep an empty title distinct from a missing tag."""
        empty = TitleResult.present("")
        assert empty.is_present
        assert empty != TitleResult.absent()

    def test_absent(self):
        result = TitleResult.absent()
        assert result.is_absent
        assert result.title is None
        assert result.error is None

    def test_failed(self):
        result = TitleResult.failed("disk on fire")
        assert result.is_error
        assert result.error == "disk on fire"
        assert result.title is None

    def test_is_frozen(self):
        """Should not allow mutation."""
        result = TitleResult.present("Alpha")
        with pytest.raises(FrozenInstanceError):
            result.title = "Beta"


class TestRenameOutcome:
    """Tests for RenameOutcome.is_error."""

    @pytest.mark.parametrize("outcome", [
        RenameOutcome.EMPTY_AFTER_SANITIZATION,
        RenameOutcome.DESTINATION_EXISTS,
        RenameOutcome.RENAME_FAILED,
        RenameOutcome.READ_ERROR,
    ])
    def test_error_outcomes(self, outcome):
        assert outcome.is_error is True

    @pytest.mark.parametrize("outcome", [
        RenameOutcome.RENAMED,
        RenameOutcome.WOULD_RENAME,
        RenameOutcome.ALREADY_NAMED,
        RenameOutcome.NO_TAG,
        RenameOutcome.EMPTY_TITLE,
    ])
    def test_non_error_outcomes(self, outcome):
        assert outcome.is_error is False


class TestProcessingStats:
    """Tests for ProcessingStats.record."""

    def test_defaults(self):
        stats = ProcessingStats()
        assert stats.total_files == 0
        assert stats.errors == []
        assert stats.has_errors is False

    def test_records_each_outcome(self):
        """Should count renamed, already named, skipped and errors."""
        stats = ProcessingStats()
        stats.record(FileResult("/m/a.mp3", RenameOutcome.RENAMED))
        stats.record(FileResult("/m/b.mp3", RenameOutcome.WOULD_RENAME))
        stats.record(FileResult("/m/c.mp3", RenameOutcome.ALREADY_NAMED))
        stats.record(FileResult("/m/d.mp3", RenameOutcome.NO_TAG))
        stats.record(FileResult("/m/e.mp3", RenameOutcome.EMPTY_TITLE))
        stats.record(FileResult("/m/f.mp3", RenameOutcome.DESTINATION_EXISTS,
                                message="Target file already exists"))

        assert stats.total_files == 6
        assert stats.renamed == 2
        assert stats.already_named == 1
        assert stats.skipped == 2
        assert stats.errors == ["/m/f.mp3: Target file already exists"]
        assert stats.has_errors is True
        assert len(stats.results) == 6

    def test_separate_instances_do_not_share_lists(self):
        first = ProcessingStats()
        first.errors.append("x")
        assert ProcessingStats().errors == []
