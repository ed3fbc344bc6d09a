"""ID3v1 title reader.

An ID3v1 tag occupies the last 128 bytes of an MP3 file:

    offset 0-2    "TAG"
    offset 3-32   title, 30 bytes, ISO-8859-1, space and/or NUL padded
    offset 33-127 artist, album, year, comment, genre (not read here)
"""

import io
import logging
import os
from pathlib import Path
from typing import BinaryIO, Union

from mp3_title_renamer.models import TitleResult

logger = logging.getLogger(__name__)

ID3V1_TAG_SIZE = 128
ID3V1_IDENTIFIER = "TAG"
TITLE_OFFSET = 3
TITLE_LENGTH = 30
# One byte per character; never a variable-width decoder.
ID3V1_ENCODING = "latin-1"


class TagReadError(OSError):
    """The tag region could not be read in full."""


def parse_tag_block(block: bytes) -> TitleResult:
    """
    Decode the title from a raw 128-byte tag block.

    Args:
        block: The last 128 bytes of a file.

    Returns:
        TitleResult.present(title) when the block starts with "TAG",
        TitleResult.absent() otherwise.
    """
    if len(block) != ID3V1_TAG_SIZE:
        raise ValueError(
            f"ID3v1 tag block must be {ID3V1_TAG_SIZE} bytes, got {len(block)}"
        )

    identifier = block[:TITLE_OFFSET].decode(ID3V1_ENCODING)
    if identifier != ID3V1_IDENTIFIER:
        return TitleResult.absent()

    raw = block[TITLE_OFFSET:TITLE_OFFSET + TITLE_LENGTH].decode(ID3V1_ENCODING)

    # Trim first, then cut at the first NUL: writers mix space and NUL padding.
    title = raw.strip()
    nul_index = title.find("\x00")
    if nul_index != -1:
        title = title[:nul_index]

    return TitleResult.present(title)


def _read_exact(source: BinaryIO, size: int) -> bytes:
    """Read exactly `size` bytes or raise TagReadError."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = source.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)

    data = b"".join(chunks)
    if len(data) != size:
        raise TagReadError(
            f"Short read: expected {size} bytes of tag data, got {len(data)}"
        )
    return data


def extract_title(source: BinaryIO) -> TitleResult:
    """
    Extract the ID3v1 title from a seekable binary stream.

    Args:
        source: Readable, seekable byte stream positioned anywhere.

    Returns:
        TitleResult, ABSENT when the stream is shorter than a tag or has
        no "TAG" marker.

    Raises:
        TagReadError: Fewer than 128 bytes could be read from the tag offset.
        OSError: Seeking or reading failed.
    """
    total_length = source.seek(0, io.SEEK_END)
    if total_length < ID3V1_TAG_SIZE:
        return TitleResult.absent()

    source.seek(total_length - ID3V1_TAG_SIZE, io.SEEK_SET)
    block = _read_exact(source, ID3V1_TAG_SIZE)
    return parse_tag_block(block)


def read_title(file_path: Union[str, os.PathLike]) -> TitleResult:
    """
    Read the ID3v1 title of a file.

    I/O failures never escape: they come back as TitleResult.failed().
    """
    path = Path(file_path)
    try:
        with path.open("rb") as source:
            result = extract_title(source)
    except OSError as e:
        logger.debug("Failed to read tag from %s: %s", path, e)
        return TitleResult.failed(str(e))

    logger.debug("Tag lookup for %s: %s", path.name, result.status.value)
    return result
