from simedit.history import Action, Edit, History


def _edit(text="abc", pos=0):
    return Edit(action=Action.INSERT, inserted=text, pos=pos)


def test_new_history_is_clean():
    history = History()
    assert not history.can_undo
    assert not history.can_redo
    assert not history.modified
    assert history.undo() is None
    assert history.redo() is None


def test_record_undo_redo():
    history = History()
    root = history.current
    edit = history.record(_edit())
    assert history.current is edit
    assert history.undo() is edit
    assert history.current is root
    assert history.can_redo
    assert history.redo() is edit
    assert history.current is edit
    assert history.redo() is None


def test_record_after_undo_drops_redo():
    history = History()
    first = history.record(_edit("a"))
    history.record(_edit("b"))
    history.undo()
    third = history.record(_edit("c"))
    assert not history.can_redo
    assert history.undo() is third
    assert history.undo() is first


def test_modified_tracks_saved_mark():
    history = History()
    history.record(_edit())
    assert history.modified
    history.mark_saved()
    assert not history.modified
    history.record(_edit("x"))
    assert history.modified
    history.undo()
    assert not history.modified


def test_new_branch_at_saved_depth_is_modified():
    history = History()
    history.record(_edit("a"))
    history.record(_edit("b"))
    history.mark_saved()
    history.undo()
    history.record(_edit("c"))
    assert history.modified


def test_clear_resets():
    history = History()
    history.record(_edit())
    history.clear()
    assert not history.can_undo
    assert not history.modified
    assert history.current.action is None


def test_current_edit_is_mutable():
    history = History()
    edit = history.record(_edit())
    history.current.deleted = "zz"
    assert edit.deleted == "zz"