"""Shared test fixtures for mp3_title_renamer tests."""

import sys
from argparse import Namespace
from pathlib import Path

import pytest

# Add the python/ directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mp3_title_renamer.reporter import Reporter


def make_tag(title: bytes, identifier: bytes = b"TAG") -> bytes:
    """Build a 128-byte ID3v1 block with the given raw title field."""
    title_field = title[:30].ljust(30, b"\x00")
    block = identifier + title_field
    return block.ljust(128, b"\x00")


def space_padded(title: str) -> bytes:
    """Encode a title the way writers that pad with spaces do."""
    return title.encode("latin-1").ljust(30, b" ")


@pytest.fixture
def write_mp3(tmp_path):
    """Factory writing a fake MP3 with fake audio and an optional tag."""
    def _write(name: str, tag: bytes = None, audio_size: int = 512,
               folder: Path = None) -> Path:
        path = (folder or tmp_path) / name
        data = b"\xff\xfb\x90\x00" * (audio_size // 4)
        if tag is not None:
            data += tag
        path.write_bytes(data)
        return path
    return _write


@pytest.fixture
def reporter():
    """Reporter with no color and no console chatter."""
    return Reporter(no_color=True, quiet=True)


@pytest.fixture
def config():
    """Default configuration."""
    return {
        "extensions": (".mp3",),
        "log_file": None,
        "log_level": "WARNING",
    }


@pytest.fixture
def args():
    """Default CLI arguments."""
    return Namespace(
        path=".",
        recursive=False,
        dry_run=False,
        env_file=".env",
        no_color=True,
        quiet=True,
        verbose=False,
    )


ENV_VARS = ("MP3_RENAMER_EXTENSIONS", "MP3_RENAMER_LOG_FILE", "MP3_RENAMER_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove renamer variables from the environment."""
    for name in ENV_VARS:
        # setenv first so values loaded from .env files are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
