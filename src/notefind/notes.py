"""
Note store for Notefind.

Notes are loaded once at startup and never re-read: edits made in the
editor show up on the next run.
"""

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from notefind.errors import NoteLoadError

logger = logging.getLogger(__name__)

NOTE_EXTENSION = ".txt"
UNTITLED = "<untitled>"


@dataclass(frozen=True, slots=True)
class Note:
    """One note file, with its full text."""

    path: Path
    name: str
    contents: str


def note_name(path: Path) -> str:
    """Title shown for *path*: the file name without its extension."""
    stem = path.stem
    try:
        # Undecodable bytes in the file name survive as lone surrogates
        stem.encode("utf-8")
    except UnicodeEncodeError:
        return UNTITLED
    return stem


def is_note(path: Path) -> bool:
    """Check if *path* is a regular file with the note extension. Symlinks are not followed."""
    return path.name.endswith(NOTE_EXTENSION) and not path.is_symlink() and path.is_file()


def scan_notes(root: Path) -> Iterator[Path]:
    """
    Walk *root* recursively and yield every note path.

    Directories that can't be listed are skipped. Entries are visited in
    sorted order so the scan order is stable between runs.
    """
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if is_note(path):
                yield path


def load_notes(root: Path) -> list[Note]:
    """
    Load every note under *root*.

    Raises NoteLoadError if any note can't be read. There is no partial
    load: one bad file stops the session from starting.
    """
    if not root.is_dir():
        logger.warning(f"Notes directory {root} does not exist")

    notes: list[Note] = []
    for path in scan_notes(root):
        try:
            contents = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise NoteLoadError(f"Cannot read note {path}: {e}") from e
        notes.append(Note(path=path, name=note_name(path), contents=contents))

    logger.info(f"Loaded {len(notes)} notes from {root}")
    return notes
