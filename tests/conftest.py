import pytest
from prompt_toolkit.data_structures import Size
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys
from prompt_toolkit.output import DummyOutput

from notefind.render import Renderer


def key_presses(*items: str | Keys | None) -> list[KeyPress | None]:
    """Typed text becomes one KeyPress per character; named keys pass through."""
    presses: list[KeyPress | None] = []
    for item in items:
        if item is None:
            presses.append(None)
        elif isinstance(item, Keys):
            presses.append(KeyPress(item))
        else:
            presses.extend(KeyPress(ch) for ch in item)
    return presses


class ScreenOutput(DummyOutput):
    """
    prompt_toolkit Output that keeps a character grid.

    Tracks the cursor so tests can check where each render leaves it and
    what is left on screen.
    """

    def __init__(self, rows: int = 24, columns: int = 80):
        self.rows = rows
        self.columns = columns
        self.grid = [[" "] * columns for _ in range(rows)]
        self.row = 0
        self.col = 0
        self.cursor_visible = True
        self.ops: list[tuple] = []

    # Screen model

    def _newline(self) -> None:
        self.row += 1
        if self.row >= self.rows:
            self.grid.pop(0)
            self.grid.append([" "] * self.columns)
            self.row = self.rows - 1

    def line(self, row: int) -> str:
        return "".join(self.grid[row]).rstrip()

    def lines(self) -> list[str]:
        return [self.line(i) for i in range(self.rows)]

    @property
    def cursor(self) -> tuple[int, int]:
        return self.row, self.col

    # Output interface

    def write(self, text: str) -> None:
        self.ops.append(("write", text))
        for ch in text:
            if ch == "\r":
                self.col = 0
            elif ch == "\n":
                self._newline()
            else:
                if self.col >= self.columns:
                    self.col = 0
                    self._newline()
                self.grid[self.row][self.col] = ch
                self.col += 1

    def flush(self) -> None:
        pass

    def get_size(self) -> Size:
        return Size(rows=self.rows, columns=self.columns)

    def cursor_up(self, amount: int) -> None:
        self.ops.append(("up", amount))
        self.row = max(0, self.row - amount)

    def cursor_forward(self, amount: int) -> None:
        self.ops.append(("forward", amount))
        self.col = min(self.columns - 1, self.col + amount)

    def cursor_backward(self, amount: int) -> None:
        self.ops.append(("backward", amount))
        self.col = max(0, self.col - amount)

    def erase_down(self) -> None:
        self.ops.append(("erase_down",))
        for c in range(self.col, self.columns):
            self.grid[self.row][c] = " "
        for r in range(self.row + 1, self.rows):
            self.grid[r] = [" "] * self.columns

    def hide_cursor(self) -> None:
        self.ops.append(("hide",))
        self.cursor_visible = False

    def show_cursor(self) -> None:
        self.ops.append(("show",))
        self.cursor_visible = True

    def write_raw(self, data: str) -> None:
        self.write(data)

    def set_attributes(self, attrs, color_depth) -> None:
        self.ops.append(("attrs", attrs))

    def reset_attributes(self) -> None:
        self.ops.append(("reset",))


@pytest.fixture
def screen():
    return ScreenOutput()


@pytest.fixture
def renderer(screen):
    return Renderer(screen)


@pytest.fixture
def notes_dir(tmp_path):
    root = tmp_path / "notes"
    root.mkdir()
    (root / "alpha.txt").write_text("hello world", encoding="utf-8")
    (root / "beta.txt").write_text("goodbye", encoding="utf-8")
    return root
