"""
Terminal rendering for Notefind.

The screen is a single input row (prompt + query) with a result region
beneath it. Every operation leaves the cursor on the input row at
``input_column(query)``, however many result rows were drawn before.
"""

import os
import textwrap
from collections.abc import Sequence

from prompt_toolkit.output import Output
from prompt_toolkit.styles import DEFAULT_ATTRS, Attrs

from notefind.notes import Note

PROMPT = "> "
NEW_NOTE_PLACEHOLDER = "No matches. Press enter to create a new note."

TITLE_ATTRS = DEFAULT_ATTRS._replace(bold=True)
PREVIEW_ATTRS = DEFAULT_ATTRS._replace(italic=True)
PLACEHOLDER_ATTRS = DEFAULT_ATTRS._replace(underline=True)


def colors_enabled() -> bool:
    """Check if styling should be enabled."""
    # Disable if NO_COLOR is set
    if os.environ.get("NO_COLOR"):
        return False
    return True


def printable(text: str) -> str:
    """Replace control characters so a row is one row on screen."""
    return "".join(ch if ch.isprintable() else "?" for ch in text)


def preview_line(contents: str, width: int) -> str:
    """First line of *contents*, wrapped to *width*; the rest is dropped."""
    lines = contents.splitlines()
    if not lines:
        return ""
    wrapped = textwrap.wrap(lines[0], width=max(1, width))
    if not wrapped:
        return ""
    return printable(wrapped[0])


class Renderer:
    """Owns all writes to the terminal."""

    def __init__(self, output: Output, prompt: str = PROMPT):
        self.output = output
        self.prompt = prompt

    def input_column(self, query: str) -> int:
        """Cursor column on the input row for *query* (one column per character)."""
        return len(self.prompt) + len(query)

    def show_prompt(self) -> None:
        self.output.write(self.prompt)
        self.output.flush()

    def echo_insert(self, char: str) -> None:
        self.output.write(char)
        self.output.flush()

    def echo_delete(self) -> None:
        self.output.cursor_backward(1)
        self.output.write(" ")
        self.output.cursor_backward(1)
        self.output.flush()

    def redraw_results(self, results: Sequence[Note], query: str) -> int:
        """
        Redraw the result region for *query*.

        Steps, in order:
        1. Move to the row below the input row and hide the cursor
        2. Erase everything below, whatever the previous region held
        3. One title row per match; the first match also gets a preview row
        4. With no matches, a single placeholder row instead
        5. Move back up over the rows written and across to the input column

        Returns the number of rows written.
        """
        size = self.output.get_size()
        # Leave the last column free so no row ever wraps
        width = max(1, size.columns - 1)

        rows = self._result_rows(results, width)
        # Moving up only works for rows that are still on screen
        rows = rows[: max(1, size.rows - 1)]

        self.output.write("\r\n")
        self.output.hide_cursor()
        self.output.erase_down()

        for i, (text, attrs) in enumerate(rows):
            if i:
                self.output.write("\r\n")
            self._write_styled(text, attrs)

        self._restore_cursor(len(rows), query)
        return len(rows)

    def clear_results(self, query: str) -> None:
        """Erase the result region and put the cursor back on the input row."""
        self.output.write("\r\n")
        self.output.hide_cursor()
        self.output.erase_down()
        self._restore_cursor(1, query)

    def _result_rows(self, results: Sequence[Note], width: int) -> list[tuple[str, Attrs | None]]:
        if not results:
            return [(NEW_NOTE_PLACEHOLDER[:width], PLACEHOLDER_ATTRS)]

        rows: list[tuple[str, Attrs | None]] = []
        for i, note in enumerate(results):
            title = printable(note.name)[:width]
            if i == 0:
                rows.append((title, TITLE_ATTRS))
                rows.append((preview_line(note.contents, width), PREVIEW_ATTRS))
            else:
                rows.append((title, None))
        return rows

    def _write_styled(self, text: str, attrs: Attrs | None) -> None:
        if attrs is None or not colors_enabled():
            self.output.write(text)
            return
        self.output.set_attributes(attrs, self.output.get_default_color_depth())
        self.output.write(text)
        self.output.reset_attributes()

    def _restore_cursor(self, rows: int, query: str) -> None:
        self.output.cursor_up(rows)
        self.output.write("\r")
        self.output.cursor_forward(self.input_column(query))
        self.output.show_cursor()
        self.output.flush()
