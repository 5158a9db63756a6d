import io

import pytest

from simedit.keyinput import EndOfInput, KeyReader


def test_read_bytes_then_end():
    reader = KeyReader(io.BytesIO(b"ab"))
    assert reader.read_byte() == ord("a")
    assert reader.read_byte() == ord("b")
    with pytest.raises(EndOfInput):
        reader.read_byte()


def test_end_of_input_is_eof_error():
    reader = KeyReader(io.BytesIO(b""))
    with pytest.raises(EOFError):
        reader.read_rune()


def test_unread_is_last_in_first_out():
    reader = KeyReader(io.BytesIO(b"z"))
    reader.unread(1)
    reader.unread(2)
    assert reader.read_byte() == 2
    assert reader.read_byte() == 1
    assert reader.read_byte() == ord("z")


def test_read_rune_multibyte():
    reader = KeyReader(io.BytesIO("\u00e9\u20acq".encode("utf-8")))
    assert reader.read_rune() == ord("\u00e9")
    assert reader.read_rune() == ord("\u20ac")
    assert reader.read_rune() == ord("q")


def test_read_rune_broken_sequence_returns_partial_and_keeps_byte():
    reader = KeyReader(io.BytesIO(b"\xc3A"))
    assert reader.read_rune() == 3
    assert reader.read_rune() == ord("A")


def test_read_rune_uses_pushed_back_bytes():
    reader = KeyReader(io.BytesIO(b""))
    for byte in reversed("\u00e9".encode("utf-8")):
        reader.unread(byte)
    assert reader.read_rune() == ord("\u00e9")