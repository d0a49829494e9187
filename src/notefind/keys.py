"""
Key handling for Notefind.

Each key press edits the query buffer and echoes the edit; what to do
next is reported back to the session as an Action.
"""

from enum import Enum

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from notefind.render import Renderer

EXIT_KEYS = {Keys.ControlC, Keys.ControlD}
ENTER_KEYS = {Keys.ControlM, Keys.ControlJ}
# Keys.Backspace is an alias of Keys.ControlH; DEL (0x7f) parses to it too
BACKSPACE_KEYS = {Keys.Backspace}


class Action(Enum):
    """What the session should do after a key press."""

    NOTHING = "nothing"
    SEARCH = "search"
    EDIT = "edit"
    EXIT = "exit"


class QueryBuffer:
    """The text typed so far."""

    def __init__(self, text: str = ""):
        self.text = text

    def __len__(self) -> int:
        return len(self.text)

    def __bool__(self) -> bool:
        return bool(self.text)

    def append(self, char: str) -> None:
        self.text += char

    def pop(self) -> str:
        char = self.text[-1]
        self.text = self.text[:-1]
        return char


def is_printable_key(key: object) -> bool:
    """Plain characters arrive as one-character strings; named keys are Keys members."""
    return isinstance(key, str) and not isinstance(key, Keys) and len(key) == 1 and key.isprintable()


class InputHandler:
    """Applies key presses to a QueryBuffer."""

    def __init__(self, renderer: Renderer, buffer: QueryBuffer | None = None):
        self.renderer = renderer
        self.buffer = buffer if buffer is not None else QueryBuffer()

    def handle(self, key_press: KeyPress | None) -> Action:
        """
        Handle one key press. None means the input has ended.

        Arrow keys, function keys and anything else unrecognised are
        ignored.
        """
        if key_press is None:
            return Action.EXIT

        key = key_press.key

        if key in EXIT_KEYS:
            return Action.EXIT

        if key in ENTER_KEYS:
            return Action.EDIT

        if key in BACKSPACE_KEYS:
            if not self.buffer:
                return Action.NOTHING
            self.buffer.pop()
            self.renderer.echo_delete()
            return Action.SEARCH if self.buffer else Action.NOTHING

        if is_printable_key(key):
            self.buffer.append(key)
            self.renderer.echo_insert(key)
            return Action.SEARCH

        return Action.NOTHING
