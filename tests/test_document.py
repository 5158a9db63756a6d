import pytest

from simedit.document import Address, Document
from simedit.history import Action, Edit


def test_insert_and_delete():
    doc = Document(text="hello world")
    doc.insert(5, ",")
    assert doc.text == "hello, world"
    removed = doc.delete(0, 7)
    assert removed == "hello, "
    assert doc.text == "world"


@pytest.mark.parametrize("pos", [-1, 4])
def test_insert_out_of_range(pos):
    doc = Document(text="abc")
    with pytest.raises(IndexError):
        doc.insert(pos, "x")


@pytest.mark.parametrize("p0,p1", [(2, 1), (0, 9), (-1, 1)])
def test_delete_out_of_range(p0, p1):
    doc = Document(text="abc")
    with pytest.raises(IndexError):
        doc.delete(p0, p1)


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "note.txt"
    doc = Document(name=str(path), text="caf\u00e9\n\u4e2d\n")
    doc.history.record(Edit(action=Action.INSERT, inserted="x"))
    assert doc.history.modified
    doc.save()
    assert not doc.history.modified
    assert path.read_bytes() == doc.text.encode("utf-8")
    other = Document(name=str(path))
    assert other.load() is True
    assert other.text == doc.text


def test_load_missing_file_keeps_text(tmp_path):
    doc = Document(name=str(tmp_path / "absent"), text="keep")
    assert doc.load() is False
    assert doc.text == "keep"


def test_load_stops_at_nul(tmp_path):
    path = tmp_path / "bin"
    path.write_bytes(b"abc\x00def")
    doc = Document(name=str(path))
    doc.load()
    assert doc.text == "abc"


def test_save_without_name_raises():
    with pytest.raises(ValueError):
        Document(text="x").save()


def test_display_name():
    assert Document().display_name() == "-unnamed-"
    assert Document(name="a.txt").display_name() == "a.txt"


def test_reset():
    doc = Document(name="a", text="b", dot=Address(1, 1))
    doc.history.record(Edit(action=Action.DELETE))
    doc.reset()
    assert (doc.name, doc.text, doc.dot) == ("", "", Address(0, 0))
    assert not doc.history.can_undo