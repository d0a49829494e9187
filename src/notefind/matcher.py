"""Substring matching over the loaded notes."""

from collections.abc import Iterable

from notefind.notes import Note

MAX_MATCHES = 10


def find_matches(notes: Iterable[Note], query: str, limit: int = MAX_MATCHES) -> list[Note]:
    """
    Return up to *limit* notes whose name or contents contain *query*.

    Case-insensitive. Results keep the store's scan order and scanning
    stops as soon as the limit is reached. An empty query matches
    everything.
    """
    if limit <= 0:
        return []

    needle = query.lower()
    results: list[Note] = []
    for note in notes:
        if needle in note.name.lower() or needle in note.contents.lower():
            results.append(note)
            if len(results) >= limit:
                break
    return results
