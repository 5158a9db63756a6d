"""Motion and selection codes shared by the editor and its key table."""

from __future__ import annotations

from enum import IntEnum

CTRL = -0x60
ESC = 0x1B
DEL = 0x7F
# Selections above this value mean "up to the given rune" (value - TILL_BASE).
TILL_BASE = 0x7F

_SEPARATORS = frozenset(" \t\n.(){}[]:;,<>#*+-!%\\/\"=")


class Motion(IntEnum):
    """Cursor motions, selections and edit kinds."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    HALF_UP = 5
    HALF_DOWN = 6
    TOP = 7
    BOTTOM = 8
    LETTER = 9
    WORD = 10
    END_WORD = 11
    PREV_WORD = 12
    TILL = 13
    LINE = 14
    START_LINE = 15
    END_LINE = 16
    INSERT = 17
    DELETE = 18
    CHANGE = 19


def is_word(char: str | int) -> bool:
    """Whether a character belongs to a word.

    Only the low byte of the character is looked at.
    """
    code = char if isinstance(char, int) else ord(char)
    return chr(code & 0xFF) not in _SEPARATORS