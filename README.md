# simedit

The parts of a small modal terminal text editor: coding text to and from
bytes, holding a file's text with its undo history, laying text out into
screen rows around the cursor, reading keystrokes from a byte stream, and
putting a POSIX terminal into raw mode.

## Installing

    pip install .

## What is in the package

### `simedit.utf`

Rune coding covering UTF-8 and the older 5- and 6-byte forms.

- `RuneDecoder` decodes one byte at a time. `feed(byte)` returns the rune
  once it is complete and `None` while a sequence is still pending; a byte
  that does not continue a pending sequence raises `ValueError` and leaves
  the decoder idle. `reset()` drops a partial rune.
- `encode_rune(rune)` encodes one value; negative values raise
  `ValueError`, values of 2**31 and above encode to `b""`.
- `encode(text)` encodes a whole string.
- `decode(data)` decodes up to the first NUL byte, dropping broken and
  unfinished sequences; values beyond U+10FFFF become U+FFFD.

### `simedit.motion`

`Motion`, an `IntEnum` of cursor motions, selections and edit kinds
(`UP`, `DOWN`, `LEFT`, `RIGHT`, `HALF_UP`, `HALF_DOWN`, `TOP`, `BOTTOM`,
`LETTER`, `WORD`, `END_WORD`, `PREV_WORD`, `TILL`, `LINE`, `START_LINE`,
`END_LINE`, `INSERT`, `DELETE`, `CHANGE`), the key constants `CTRL`, `ESC`
and `DEL`, `TILL_BASE`, and `is_word(char)`, which tells whether a
character (or code) belongs to a word, looking only at its low byte.

### `simedit.history`

- `Action`: `INSERT`, `DELETE`, `CHANGE`.
- `Edit`: a dataclass with `action`, `arg`, `count`, `pos`, `inserted` and
  `deleted`.
- `History`: `record(edit)` appends after the current edit and drops any
  redoable ones; `undo()` and `redo()` return the edit to revert or reapply,
  or `None` at either end; `mark_saved()`, `clear()`, and the properties
  `current`, `modified`, `can_undo` and `can_redo`.

```python
from simedit.history import Action, Edit, History

history = History()
history.record(Edit(Action.INSERT, pos=0, inserted="hello"))
assert history.modified
history.undo()
assert not history.modified and history.can_redo
```

### `simedit.document`

`Address(p0, p1)` and `Document`, a dataclass with `name`, `text`, `dot`
and `history`:

- `insert(pos, text)` and `delete(p0, p1)` (which returns the removed
  text); positions outside the text raise `IndexError`.
- `load()` reads the named file, returning `False` and keeping the text if
  it cannot be opened.
- `save()` writes the file and marks the history saved; it raises
  `ValueError` when the document has no name.
- `reset()` returns to an empty, unnamed document; `display_name()` gives
  the name or `-unnamed-`.

### `simedit.frame`

- `Window(width=80, height=24, tabstop=8)`.
- `rune_width(char, column, tabstop)`: cells a character takes at a column;
  a tab reaches the next tab stop, a newline raises `ValueError`.
- `wrap_line(text, p0, window)`: the screen rows of the line starting at
  `p0`, as `Address` values.
- `Frame`: the rows around the dot and the index `cur` of the dot's row.
  `calc(text, dot, window)` moves to the dot's row and lays the rows out
  again when the dot has left them; `column(text, pos, window)` gives the
  screen column of a position in the current row; `reset()` empties it.

### `simedit.keyinput`

`KeyReader(stream=None)` reads from a binary stream (standard input by
default): `read_byte()`, `unread(byte)` and `read_rune()`. At the end of
the stream `EndOfInput` (an `EOFError`) is raised.

```python
import io
from simedit.keyinput import KeyReader

reader = KeyReader(io.BytesIO("é".encode()))
assert reader.read_rune() == 0xE9
```

### `simedit.terminal`

- `parse_cursor_report(data)` returns `(row, column)` from a report such
  as `ESC[3;9R`, and raises `ValueError` for anything else.
- `Terminal(fd=0, out=None)` switches the terminal to raw mode (no echo,
  no line editing, no signal keys) and is a context manager.
  `query_size()` returns `(width, height)`; `query_tabstop()` measures the
  tab width by printing a tab and asking for the cursor position;
  `on_resize(callback)` calls `callback(width, height)` at once and on every
  `SIGWINCH`; `close()` clears the screen, homes the cursor and restores the
  original modes and signal handler.

## What the package does not do

There is no editor command and no interactive editing loop: nothing reads
keys and turns them into motions, inserts, deletes, searches or file
switches, and no screen is drawn. The modules above are the pieces such a
program is built from. The terminal module needs a POSIX system.

## Tests

    pip install .[test]
    pytest