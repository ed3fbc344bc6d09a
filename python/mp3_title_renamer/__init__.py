"""
MP3 Title Renamer - rename MP3 files after their ID3v1 title tag.

This package provides tools to:
- Read the 128-byte ID3v1 trailer at the end of an MP3 file
- Extract and clean the 30-byte title field
- Rename single files or whole folders to "<Title>.mp3"
"""

__version__ = "1.0.0"
