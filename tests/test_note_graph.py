import sys
import os
from dataclasses import replace
from datetime import datetime, timezone

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ydnotes.core.errors import DuplicateNoteError, NoteNotFound
from ydnotes.core.models import Link, Note, new_note
from ydnotes.core.note_graph import NoteGraph


def graph_with(*pairs):
    graph = NoteGraph()
    ids = [graph.add(Note(id="", title=t, content=c)) for t, c in pairs]
    return graph, ids


def test_intro_guide_scenario():
    graph, (a, b) = graph_with(("Intro", "see [[Guide]]"), ("Guide", "hello"))

    assert graph.backlinks_of(b) == [a]
    assert [n.id for n in graph.search("hello")] == [b]
    assert sorted(n.id for n in graph.search("")) == sorted([a, b])
    assert [n.title for n in graph.list_by_title()] == ["Guide", "Intro"]


def test_add_assigns_id_and_notifies(recorder):
    graph = NoteGraph()
    graph.note_added.connect(recorder)

    note_id = graph.add(Note(id="", title="T"))

    assert note_id
    assert recorder.calls == [(note_id,)]
    assert graph.get(note_id).title == "T"


def test_add_keeps_given_id_and_rejects_duplicates():
    graph = NoteGraph()
    assert graph.add(Note(id="n1", title="T")) == "n1"
    with pytest.raises(DuplicateNoteError):
        graph.add(Note(id="n1", title="Other"))


def test_create_seeds_heading():
    graph = NoteGraph()
    note = graph.create("Groceries")
    assert note.content == "# Groceries\n\n"
    assert graph.get(note.id) == note


def test_missing_id_is_explicit():
    graph = NoteGraph()
    assert graph.get("nope") is None
    with pytest.raises(NoteNotFound):
        graph.require("nope")
    assert graph.update(Note(id="nope", title="x")) is False
    assert graph.delete("nope") is False
    assert graph.set_content("nope", "x") is False
    assert graph.backlinks_of("nope") == []


def test_reads_return_copies():
    graph, (a,) = graph_with(("T", "body"))
    note = graph.get(a)
    note.content = "changed outside"
    assert graph.get(a).content == "body"


def test_update_refreshes_timestamp_and_notifies(recorder):
    graph = NoteGraph()
    note = new_note("T")
    graph.add(note)
    graph.note_updated.connect(recorder)

    assert graph.update(replace(note, content="new"))

    stored = graph.get(note.id)
    assert stored.content == "new"
    assert stored.updated_at >= note.updated_at
    assert stored.created_at == note.created_at
    assert recorder.calls == [(note.id,)]


def test_update_keeps_creation_time():
    graph = NoteGraph()
    note = new_note("T")
    graph.add(note)

    assert graph.update(replace(note, created_at=datetime(1999, 1, 1, tzinfo=timezone.utc)))
    assert graph.get(note.id).created_at == note.created_at


def test_set_title_and_content_emit_once_each(recorder):
    graph, (a,) = graph_with(("T", "body"))
    graph.note_updated.connect(recorder)

    graph.set_title(a, "New")
    graph.set_content(a, "text")

    assert len(recorder.calls) == 2
    assert graph.get(a).title == "New"
    assert graph.get(a).content == "text"


def test_delete_notifies_and_leaves_links_dangling(recorder):
    graph, (a, b) = graph_with(("A", "[[B]]"), ("B", ""))
    graph.note_deleted.connect(recorder)

    assert graph.delete(b)
    assert recorder.calls == [(b,)]
    assert b not in graph
    assert graph.get(a).content == "[[B]]"
    assert graph.links_from(a) == [Link(a, "B")]


def test_search_is_case_insensitive_on_title_or_content():
    graph, (a, b, c) = graph_with(("Shopping", "eggs"), ("Work", "Buy EGGS"), ("Other", ""))
    assert [n.id for n in graph.search("eggs")] == [a, b]
    assert [n.id for n in graph.search("SHOP")] == [a]
    assert graph.search("zzz") == []


def test_backlinks_exclude_self_and_non_linking_notes():
    graph, (a, b, c) = graph_with(
        ("A", "[[A]] and [[B]]"),
        ("B", "[[A]]"),
        ("C", "mentions A and [[a]]"),
    )
    assert graph.backlinks_of(a) == [b]
    assert graph.backlinks_of(b) == [a]
    assert graph.backlinks_of(c) == []


def test_backlink_title_is_not_a_regex():
    graph, (a, b, c) = graph_with(("C++ (old)", ""), ("X", "see [[C++ (old)]]"), ("Y", "see [[C+ (old)]]"))
    assert graph.backlinks_of(a) == [b]


def test_rename_breaks_backlinks():
    graph, (a, b) = graph_with(("Intro", "see [[Guide]]"), ("Guide", ""))
    graph.set_title(b, "Handbook")
    assert graph.backlinks_of(b) == []


def test_extract_links_after_updates():
    graph, (a,) = graph_with(("A", "[[x]]"))
    graph.set_content(a, "[[B]] then [[c]] and [[B]]")
    graph.set_content(a, "[[B]] then [[C]] and [[B]]")
    assert graph.extract_links(graph.get(a).content) == ["B", "C", "B"]
    assert [l.target_title for l in graph.links_from(a)] == ["B", "C", "B"]


def test_resolve_title_ignores_case():
    graph, (a, b) = graph_with(("Guide", ""), ("Intro", ""))
    assert graph.resolve_title("guide").id == a
    assert graph.resolve_title("  INTRO ").id == b
    assert graph.resolve_title("missing") is None
    assert graph.resolve_title("") is None


def test_replace_all_is_atomic(recorder):
    graph, (a,) = graph_with(("Keep", ""))
    graph.notes_reset.connect(recorder)

    with pytest.raises(DuplicateNoteError):
        graph.replace_all([Note(id="x", title="1"), Note(id="x", title="2")])
    assert [n.id for n in graph.list_all()] == [a]
    assert recorder.calls == []

    graph.replace_all([Note(id="x", title="1"), Note(id="y", title="2")])
    assert sorted(n.id for n in graph.list_all()) == ["x", "y"]
    assert recorder.calls == [()]
