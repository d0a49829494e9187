"""
Interactive session for Notefind.

Drives the key -> match -> redraw cycle and decides which file the
editor should open. The terminal is held in raw mode only for the
lifetime of terminal_session(); the editor is launched after it exits.
"""

import io
import logging
import os
import sys
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import NoReturn, TextIO

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.output import Output, create_output

from notefind.errors import EditorLaunchError, EditorNotConfigured, TerminalError
from notefind.keys import Action, InputHandler
from notefind.matcher import find_matches
from notefind.notes import NOTE_EXTENSION, Note
from notefind.render import Renderer

logger = logging.getLogger(__name__)


def new_note_path(root: Path, query: str) -> Path:
    """Path of the note created when nothing matches *query*."""
    return root / f"{query}{NOTE_EXTENSION}"


class Session:
    """One search session over a fixed set of notes."""

    def __init__(
        self,
        notes: Sequence[Note],
        root: Path,
        renderer: Renderer,
        handler: InputHandler | None = None,
    ):
        self.notes = notes
        self.root = root
        self.renderer = renderer
        self.handler = handler or InputHandler(renderer)
        self.results: list[Note] = []
        self.showing_results = False

    @property
    def query(self) -> str:
        return self.handler.buffer.text

    def run(self, keys: Iterable[KeyPress | None]) -> Path | None:
        """
        Process key presses until the user picks a note or quits.

        Returns the path to open in the editor, or None on exit.
        """
        self.renderer.show_prompt()

        for key_press in keys:
            action = self.handler.handle(key_press)
            if action is Action.EXIT:
                return None
            target = self.dispatch(action)
            if target is not None:
                return target

        return None

    def dispatch(self, action: Action) -> Path | None:
        """Carry out *action*. Returns a path only for an edit."""
        if action is Action.SEARCH:
            self.search()
        elif action is Action.NOTHING:
            if not self.query and self.showing_results:
                self.results = []
                self.showing_results = False
                self.renderer.clear_results(self.query)
        elif action is Action.EDIT:
            return self.edit_target()
        return None

    def search(self) -> None:
        query = self.query
        self.results = find_matches(self.notes, query)
        logger.debug(f"Query {query!r}: {len(self.results)} matches")
        self.renderer.redraw_results(self.results, query)
        self.showing_results = True

    def edit_target(self) -> Path | None:
        """
        The first match, or a new note named after the query.

        Enter on an empty query does nothing.
        """
        if not self.query:
            return None
        if self.results:
            return self.results[0].path
        return new_note_path(self.root, self.query)


@contextmanager
def terminal_session(
    stdin: TextIO | None = None, stdout: TextIO | None = None
) -> Iterator[tuple[Input, Output]]:
    """
    Hold the terminal in raw mode for the duration of the block.

    Yields the prompt_toolkit input and output. Cooked mode is restored
    however the block exits.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    # prompt_toolkit ignores a failure to enter raw mode
    if not stdin.isatty():
        raise TerminalError("Standard input is not a terminal")

    try:
        inp = create_input(stdin)
    except io.UnsupportedOperation as e:
        raise TerminalError(f"Cannot read keys from standard input: {e}") from e
    output = create_output(stdout)

    with inp.raw_mode():
        try:
            yield inp, output
        finally:
            # Leave the shell below the prompt with nothing left from the results
            output.write("\r\n")
            output.erase_down()
            output.show_cursor()
            output.flush()


def get_editor() -> str:
    """Get the editor command from $EDITOR."""
    editor = os.environ.get("EDITOR", "").strip()
    if not editor:
        raise EditorNotConfigured("EDITOR is not set. Set it to the command that opens your editor.")
    return editor


def launch_editor(editor: str, path: Path) -> NoReturn:
    """
    Replace this process with *editor* on *path*.

    Only call once the terminal is back in cooked mode.
    """
    logger.info(f"Opening {path} with {editor}")
    try:
        os.execvp(editor, [editor, str(path)])
    except OSError as e:
        raise EditorLaunchError(f"Cannot run editor {editor!r}: {e}") from e
