"""Undo history: a line of edits with a current position and a saved mark."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from simedit.motion import Motion


class Action(IntEnum):
    """Kind of a recorded edit."""

    INSERT = int(Motion.INSERT)
    DELETE = int(Motion.DELETE)
    CHANGE = int(Motion.CHANGE)


@dataclass(eq=False)
class Edit:
    """One recorded edit: text inserted and deleted at a position."""

    action: Action | None = None
    arg: int = 0
    count: int = 0
    pos: int = 0
    inserted: str = ""
    deleted: str = ""


class History:
    """Edits in order, with the current one and the one last saved."""

    def __init__(self) -> None:
        self.clear()

    def clear(self) -> None:
        """Forget every edit; the empty state counts as saved."""
        self._edits: list[Edit] = [Edit()]
        self._index = 0
        self._saved = self._edits[0]

    def record(self, edit: Edit) -> Edit:
        """Append an edit after the current one, dropping anything redoable."""
        del self._edits[self._index + 1:]
        self._edits.append(edit)
        self._index += 1
        return edit

    def undo(self) -> Edit | None:
        """Step back; return the edit to revert, or None at the start."""
        if not self._index:
            return None
        edit = self._edits[self._index]
        self._index -= 1
        return edit

    def redo(self) -> Edit | None:
        """Step forward; return the edit to reapply, or None at the end."""
        if self._index + 1 >= len(self._edits):
            return None
        self._index += 1
        return self._edits[self._index]

    def mark_saved(self) -> None:
        """Remember the current edit as the state on disk."""
        self._saved = self.current

    @property
    def current(self) -> Edit:
        """The most recent edit still in effect (the root when none is)."""
        return self._edits[self._index]

    @property
    def modified(self) -> bool:
        """Whether the state differs from the one last saved."""
        return self.current is not self._saved

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index + 1 < len(self._edits)