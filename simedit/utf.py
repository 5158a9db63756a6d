"""Rune coding for editor text: UTF-8 plus the older 5- and 6-byte forms."""

from __future__ import annotations

from dataclasses import dataclass

REPLACEMENT = "\ufffd"

# (mask, lead bits, payload mask, continuation bytes)
_LEADS = (
    (0x80, 0x00, 0x7F, 0),
    (0xE0, 0xC0, 0x1F, 1),
    (0xF0, 0xE0, 0x0F, 2),
    (0xF8, 0xF0, 0x07, 3),
    (0xFC, 0xF8, 0x03, 4),
    (0xFE, 0xFC, 0x01, 5),
)


@dataclass
class RuneDecoder:
    """Incremental decoder turning bytes into rune values one at a time."""

    value: int = 0
    remaining: int = 0

    def feed(self, byte: int) -> int | None:
        """Consume one byte; return the rune once complete, otherwise None.

        A byte that fails to continue a pending sequence raises ValueError;
        the decoder is then idle again and ``value`` keeps the partial rune.
        """
        if self.remaining:
            if byte & 0xC0 != 0x80:
                self.remaining = 0
                raise ValueError(f"byte 0x{byte:02x} does not continue a sequence")
            self.value = (self.value << 6) | (byte & 0x3F)
            self.remaining -= 1
            return None if self.remaining else self.value
        for mask, lead, payload, extra in _LEADS:
            if byte & mask == lead:
                self.value = byte & payload
                self.remaining = extra
                break
        else:
            self.value = byte
            self.remaining = 0
        return None if self.remaining else self.value

    def reset(self) -> None:
        """Drop any partially decoded rune."""
        self.value = 0
        self.remaining = 0


def encode_rune(rune: int) -> bytes:
    """Encode one rune value; values of 2**31 and above encode to nothing."""
    if rune < 0:
        raise ValueError(f"negative rune {rune}")
    if rune < 1 << 7:
        return bytes([rune])
    if rune < 1 << 11:
        return bytes([0xC0 | (rune >> 6), 0x80 | (rune & 0x3F)])
    if rune < 1 << 16:
        return bytes([
            0xE0 | (rune >> 12),
            0x80 | ((rune >> 6) & 0x3F),
            0x80 | (rune & 0x3F),
        ])
    if rune < 1 << 21:
        return bytes([
            0xF0 | (rune >> 18),
            0x80 | ((rune >> 12) & 0x3F),
            0x80 | ((rune >> 6) & 0x3F),
            0x80 | (rune & 0x3F),
        ])
    if rune < 1 << 26:
        return bytes([
            0xF8 | (rune >> 24),
            0x80 | ((rune >> 18) & 0x3F),
            0x80 | ((rune >> 12) & 0x3F),
            0x80 | ((rune >> 6) & 0x3F),
            0x80 | (rune & 0x3F),
        ])
    if rune < 1 << 31:
        return bytes([
            0xFE | (rune >> 30),
            0x80 | ((rune >> 24) & 0x3F),
            0x80 | ((rune >> 18) & 0x3F),
            0x80 | ((rune >> 12) & 0x3F),
            0x80 | ((rune >> 6) & 0x3F),
            0x80 | (rune & 0x3F),
        ])
    return b""


def encode(text: str) -> bytes:
    """Encode a whole string."""
    return b"".join(encode_rune(ord(char)) for char in text)


def _to_char(rune: int) -> str:
    return chr(rune) if rune <= 0x10FFFF else REPLACEMENT


def decode(data: bytes) -> str:
    """Decode bytes up to the first NUL byte.

    A broken sequence is dropped and the offending byte starts afresh;
    an unfinished sequence at the end is dropped too.
    """
    decoder = RuneDecoder()
    out: list[str] = []
    for byte in data.split(b"\0", 1)[0]:
        try:
            rune = decoder.feed(byte)
        except ValueError:
            rune = decoder.feed(byte)
        if rune is not None:
            out.append(_to_char(rune))
    return "".join(out)