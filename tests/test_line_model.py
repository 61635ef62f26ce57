import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ydnotes.core.line_model import LineModel


def test_empty_document_has_one_line():
    model = LineModel()
    assert model.line_count() == 1
    assert model.line(0) == ""
    assert model.content() == ""


def test_split_only_on_newline():
    model = LineModel("a\r\nb\n\nc")
    assert model.lines() == ["a\r", "b", "", "c"]
    assert model.content() == "a\r\nb\n\nc"


def test_trailing_newline_is_a_line():
    model = LineModel("# Title\n\n")
    assert model.lines() == ["# Title", "", ""]
    assert model.content() == "# Title\n\n"


def test_line_primitives():
    model = LineModel("one\ntwo")
    model.replace_line(0, "ONE")
    model.insert_line(1, "middle")
    model.insert_line(3, "end")
    assert model.lines() == ["ONE", "middle", "two", "end"]

    model.delete_line(1)
    assert model.lines() == ["ONE", "two", "end"]


def test_delete_last_remaining_line_leaves_empty_document():
    model = LineModel("only")
    model.delete_line(0)
    assert model.lines() == [""]


def test_out_of_range_index_raises():
    model = LineModel("x")
    with pytest.raises(IndexError):
        model.line(1)
    with pytest.raises(IndexError):
        model.replace_line(-1, "y")
    with pytest.raises(IndexError):
        model.insert_line(2, "y")


def test_edits_emit_content_changed(recorder):
    model = LineModel("a")
    model.content_changed.connect(recorder)

    model.replace_line(0, "b")
    model.insert_line(1, "c")
    assert len(recorder.calls) == 2


def test_noop_replace_is_silent(recorder):
    model = LineModel("a")
    model.content_changed.connect(recorder)
    model.replace_line(0, "a")
    assert recorder.calls == []


def test_set_content_is_not_a_user_edit(recorder):
    model = LineModel("a")
    replaced = []
    model.content_changed.connect(recorder)
    model.content_replaced.connect(lambda: replaced.append(True))

    model.set_content("x\ny")

    assert recorder.calls == []
    assert replaced == [True]
    assert model.lines() == ["x", "y"]


def test_batch_emits_once(recorder):
    model = LineModel("a\nb\nc")
    model.content_changed.connect(recorder)

    with model.batch():
        model.replace_line(0, "A")
        model.replace_line(1, "B")
        model.delete_line(2)
        assert recorder.calls == []

    assert len(recorder.calls) == 1
    assert model.content() == "A\nB"


def test_batch_without_changes_is_silent(recorder):
    model = LineModel("a")
    model.content_changed.connect(recorder)
    with model.batch():
        model.replace_line(0, "a")
    assert recorder.calls == []
