"""A file held in the editor: its text, name, dot and undo history."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from simedit.history import History
from simedit.utf import decode, encode

UNNAMED = "-unnamed-"


@dataclass
class Address:
    """A pair of positions in a text."""

    p0: int = 0
    p1: int = 0


@dataclass
class Document:
    """Text being edited together with where it lives on disk."""

    name: str = ""
    text: str = ""
    dot: Address = field(default_factory=Address)
    history: History = field(default_factory=History)

    def insert(self, pos: int, text: str) -> None:
        """Insert text before position pos."""
        if not 0 <= pos <= len(self.text):
            raise IndexError(f"position {pos} outside text of length {len(self.text)}")
        self.text = self.text[:pos] + text + self.text[pos:]

    def delete(self, p0: int, p1: int) -> str:
        """Remove the range [p0, p1) and return what was removed."""
        if not 0 <= p0 <= p1 <= len(self.text):
            raise IndexError(f"range {p0}:{p1} outside text of length {len(self.text)}")
        removed = self.text[p0:p1]
        self.text = self.text[:p0] + self.text[p1:]
        return removed

    def load(self) -> bool:
        """Read the named file; return False and keep the text if it cannot be opened."""
        try:
            data = Path(self.name).read_bytes()
        except OSError:
            return False
        self.text = decode(data)
        return True

    def save(self) -> None:
        """Write the text to the named file and mark the history saved."""
        if not self.name:
            raise ValueError("document has no file name")
        Path(self.name).write_bytes(encode(self.text))
        self.history.mark_saved()

    def reset(self) -> None:
        """Return to an empty, unnamed document."""
        self.name = ""
        self.text = ""
        self.dot = Address()
        self.history.clear()

    def display_name(self) -> str:
        return self.name or UNNAMED