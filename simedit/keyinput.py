"""Reading keystrokes from a byte stream."""

from __future__ import annotations

import sys
from typing import BinaryIO

from simedit.utf import RuneDecoder


class EndOfInput(EOFError):
    """The input stream has no more bytes."""


class KeyReader:
    """Reads bytes and runes from a stream, with push-back."""

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin.buffer
        self._pending: list[int] = []

    def read_byte(self) -> int:
        """Next byte; raises EndOfInput at the end of the stream."""
        if self._pending:
            return self._pending.pop()
        while True:
            chunk = self._stream.read(1)
            if chunk is None:
                continue
            if not chunk:
                raise EndOfInput
            return chunk[0]

    def unread(self, byte: int) -> None:
        """Push a byte back so that it is read next."""
        self._pending.append(byte)

    def read_rune(self) -> int:
        """Next rune.

        A byte that breaks a sequence is pushed back and the partial
        value read so far is returned.
        """
        decoder = RuneDecoder()
        while True:
            byte = self.read_byte()
            try:
                rune = decoder.feed(byte)
            except ValueError:
                self.unread(byte)
                return decoder.value
            if rune is not None:
                return rune