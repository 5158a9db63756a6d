"""Layout of text into screen rows around the dot."""

from __future__ import annotations

from dataclasses import dataclass, field

from simedit.document import Address


@dataclass
class Window:
    """Screen size in cells and the terminal's tab width."""

    width: int = 80
    height: int = 24
    tabstop: int = 8


def rune_width(char: str, column: int, tabstop: int) -> int:
    """Cells a character takes when drawn at the given column."""
    if char == "\n":
        raise ValueError("a newline has no width")
    return tabstop - column % tabstop if char == "\t" else 1


def wrap_line(text: str, p0: int, window: Window) -> list[Address]:
    """Split the line starting at p0 into screen rows.

    Each row's p1 is the position of its last character, which for the
    final row is the newline (or the end of the text).
    """
    n = len(text)

    def at(i: int) -> str:
        return text[i] if i < n else "\0"

    rows: list[Address] = []
    start = end = p0
    while True:
        wx = 0
        while wx < window.width and end < n:
            if text[end] == "\n":
                break
            wx += rune_width(text[end], wx, window.tabstop)
            if wx < window.width:
                end += 1
            if wx >= window.width:
                if at(end) == "\t":
                    end += 1
                if at(end + 1) == "\n":
                    end += 1
        rows.append(Address(start, end))
        end += 1
        start = end
        if not (end <= n and at(end - 1) != "\n"):
            return rows


def _line_start(text: str, pos: int) -> int:
    while pos and text[pos - 1] != "\n":
        pos -= 1
    return pos


@dataclass
class Frame:
    """Rows laid out around the dot and the index of the dot's row."""

    rows: list[Address] = field(default_factory=list)
    cur: int = 0

    def reset(self) -> None:
        self.rows = []
        self.cur = 0

    def _row(self, index: int) -> Address:
        return self.rows[index] if index < len(self.rows) else Address()

    def calc(self, text: str, dot: Address, window: Window) -> None:
        """Move to the dot's row, laying the rows out again when needed."""
        while self.cur and dot.p1 < self._row(self.cur).p0:
            self.cur -= 1
        while dot.p1 > self._row(self.cur).p1 and self.cur + 1 < len(self.rows):
            self.cur += 1
        rows, height = self.rows, window.height
        if (
            not rows
            or dot.p1 != dot.p0
            or dot.p1 < rows[0].p0
            or dot.p1 > rows[-1].p1
            or (self.cur < height and rows[0].p0)
            or (self.cur + height > len(rows) and rows[-1].p1 + 1 < len(text))
        ):
            self.reset()
            p0 = _line_start(text, dot.p1)
            while p0 < len(text) and len(self.rows) < height * 2:
                self.rows.extend(wrap_line(text, p0, window))
                p0 = self.rows[-1].p1 + 1
            while self.rows and self.rows[0].p0 and self.cur < height:
                above = wrap_line(text, _line_start(text, self.rows[0].p0 - 1), window)
                self.rows[0:0] = above
                self.cur += len(above)
            while self.cur < len(self.rows) and dot.p1 > self.rows[self.cur].p1:
                self.cur += 1
            self.cur = min(self.cur, max(len(self.rows) - 1, 0))

    def column(self, text: str, pos: int, window: Window) -> int:
        """Screen column of pos within the current row."""
        wx = 0
        for char in text[self._row(self.cur).p0:pos]:
            wx += rune_width(char, wx, window.tabstop)
        return wx