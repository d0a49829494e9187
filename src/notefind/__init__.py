"""
Notefind: incremental terminal search over plain-text notes.

Type at the prompt and the matching notes appear beneath it:
- Case-insensitive substring search over titles and contents
- Live preview of the best match
- Enter opens the match (or a brand new note) in $EDITOR
"""

__version__ = "0.1.0"
