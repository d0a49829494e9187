"""
Terminal input for Notefind.

Key presses come from a prompt_toolkit Input. Its VT100 parser keeps
state between reads, so an escape sequence split across two reads still
arrives as one key.
"""

import select
from collections.abc import Iterator

from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyPress

# How long a lone Escape waits for the rest of a sequence (prompt_toolkit's ttimeoutlen)
ESCAPE_TIMEOUT = 0.5


def read_key_presses(inp: Input, escape_timeout: float = ESCAPE_TIMEOUT) -> Iterator[KeyPress | None]:
    """
    Yield key presses from *inp*, blocking until each one arrives.

    After every read the parser may be holding the start of an escape
    sequence; if nothing follows within *escape_timeout* it is flushed
    as a plain Escape. Yields None once when the input reaches end of file.
    """
    fd = inp.fileno()
    pending = False
    while not inp.closed:
        timeout = escape_timeout if pending else None
        ready, _, _ = select.select([fd], [], [], timeout)
        if ready:
            yield from inp.read_keys()
            pending = True
        else:
            yield from inp.flush_keys()
            pending = False
    yield from inp.flush_keys()
    yield None
