import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ydnotes.core.wikilinks import extract_links, links_to


def test_extract_in_order_with_duplicates():
    text = "See [[Note A]] and [[note a]], then [[Note A]] again"
    assert extract_links(text) == ["Note A", "note a", "Note A"]


def test_extract_keeps_text_verbatim():
    assert extract_links("[[ Spaced ]] [[Alias|Shown]]") == [" Spaced ", "Alias|Shown"]


def test_extract_empty():
    assert extract_links("") == []
    assert extract_links("no links [here] or [[]]") == []


def test_links_to_is_literal():
    assert links_to("go to [[a.b]]", "a.b")
    assert not links_to("go to [[axb]]", "a.b")
    assert not links_to("go to [[A.b]]", "a.b")
    assert not links_to("anything", "")
