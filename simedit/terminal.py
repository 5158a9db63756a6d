"""Raw-mode terminal handling: modes, size, tab width and resize signals."""

from __future__ import annotations

import os
import re
import signal
import sys
import termios
from typing import Callable, TextIO

_CSI = "\x1b["
_ED = "\x1b[2J"

_REPORT = re.compile(rb"\x1b\[(\d+);(\d+)R")


def parse_cursor_report(data: bytes | str) -> tuple[int, int]:
    """Return (row, column) from a cursor position report such as ESC[3;9R."""
    raw = data.encode("latin-1") if isinstance(data, str) else bytes(data)
    match = _REPORT.search(raw)
    if match is None:
        raise ValueError(f"not a cursor position report: {raw!r}")
    return int(match.group(1)), int(match.group(2))


class Terminal:
    """A terminal put into raw mode until it is closed."""

    def __init__(self, fd: int = 0, out: TextIO | None = None) -> None:
        self.fd = fd
        self.out = out if out is not None else sys.stdout
        self._saved = termios.tcgetattr(fd)
        raw = termios.tcgetattr(fd)
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG)
        termios.tcsetattr(fd, termios.TCSAFLUSH, raw)
        self._previous_handler: object = None
        self._handler_installed = False
        self._closed = False

    def __enter__(self) -> Terminal:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _read_report(self) -> bytes:
        buffer = bytearray()
        while True:
            byte = os.read(self.fd, 1)
            if not byte:
                raise EOFError("terminal closed while waiting for a cursor report")
            buffer += byte
            if byte == b"R":
                return bytes(buffer)

    def query_size(self) -> tuple[int, int]:
        """Return (width, height) of the terminal in cells."""
        size = os.get_terminal_size(self.fd)
        return size.columns, size.lines

    def query_tabstop(self) -> int:
        """Measure the tab width by printing a tab and asking where the cursor is."""
        self._write(f"{_CSI}H\t{_CSI}6n")
        _, column = parse_cursor_report(self._read_report())
        return column - 1

    def on_resize(self, callback: Callable[[int, int], object]) -> None:
        """Call callback(width, height) now and whenever the terminal is resized."""

        def handle(signum: int, frame: object) -> None:
            callback(*self.query_size())

        previous = signal.signal(signal.SIGWINCH, handle)
        if not self._handler_installed:
            self._previous_handler = previous
            self._handler_installed = True
        handle(signal.SIGWINCH, None)

    def close(self) -> None:
        """Clear the screen, home the cursor and restore the original modes."""
        if self._closed:
            return
        self._closed = True
        self._write(_ED + _CSI + "H")
        termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._saved)
        if self._handler_installed:
            handler = self._previous_handler
            signal.signal(signal.SIGWINCH, handler if handler is not None else signal.SIG_DFL)
            self._handler_installed = False