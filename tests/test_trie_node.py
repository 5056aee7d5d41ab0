"""Tests for the word-level trie node."""

import pytest

from phrasetrie import PhraseTrieNode


P1 = ["break"]
P2 = ["shooting"]
P3 = ["break", "out"]
P4 = ["break", "up"]
P5 = ["shooting", "up"]
P6 = ["break", "out", "nicely"]
P7 = ["r/g"]


def _node(key, value=1):
    return PhraseTrieNode(key=key, value=value)


def test_is_leaf():
    n = _node("test")
    assert n.is_leaf()

    n.children["child"] = _node("child")
    assert not n.is_leaf()


def test_is_member_on_hand_built_tree():
    root = PhraseTrieNode()
    assert root.is_member(P1) == (False, 0)

    root.children["break"] = _node("break", 1)
    assert root.is_member(P1) == (True, 1)

    root.children["shooting"] = _node("shooting", 2)
    assert root.is_member(P2) == (True, 2)

    # 3 word phrase only; partial phrases are not members
    root = PhraseTrieNode()
    brk = _node("break")
    out = _node("out")
    out.children["nicely"] = _node("nicely", 6)
    brk.children["out"] = out
    root.children["break"] = brk

    assert root.is_member(["break"]) == (False, 0)
    assert root.is_member(["break", "out"]) == (False, 0)
    assert root.is_member(P6) == (True, 6)


def test_is_member_phrase_running_past_a_leaf():
    root = PhraseTrieNode()
    root.add(P1, 1)
    assert root.is_member(P3) == (False, 0)


def test_add_sequence():
    root = PhraseTrieNode()

    root.add(P1, 1)
    assert root.is_member(P1) == (True, 1)

    root.add(P2, 2)
    assert root.is_member(P2) == (True, 2)

    root.add(P3, 3)
    assert root.is_member(P3) == (True, 3)
    # "break" is now only a prefix of "break out"
    assert root.is_member(P1) == (False, 0)

    root.add(P4, 4)
    assert root.is_member(P3) == (True, 3)
    assert root.is_member(P4) == (True, 4)

    root.add(P5, 5)
    assert root.is_member(P3) == (True, 3)
    assert root.is_member(P4) == (True, 4)
    assert root.is_member(P5) == (True, 5)
    assert root.is_member(P2) == (False, 0)

    root.add(P6, 6)
    assert root.is_member(P3) == (False, 0)
    assert root.is_member(P4) == (True, 4)
    assert root.is_member(P5) == (True, 5)
    assert root.is_member(P6) == (True, 6)

    root.add(P7, 7)
    assert root.is_member(P7) == (True, 7)


def test_shadowing_prefix_added_first():
    root = PhraseTrieNode()
    root.add(P3, 3)
    root.add(P6, 6)

    assert root.is_member(P3) == (False, 0)
    assert root.is_member(P6) == (True, 6)
    # value is kept on the shadowed node
    assert root.children["break"].children["out"].value == 3


def test_shadowing_prefix_added_last():
    root = PhraseTrieNode()
    root.add(P6, 6)
    root.add(P3, 3)

    assert root.is_member(P6) == (True, 6)
    assert root.is_member(P3) == (False, 0)
    assert root.children["break"].children["out"].value == 0


def test_add_existing_leaf_keeps_first_value():
    root = PhraseTrieNode()
    root.add(P4, 4)
    root.add(P4, 40)
    assert root.is_member(P4) == (True, 4)


def test_children_keep_insertion_order():
    root = PhraseTrieNode()
    for phrase in (P2, P1, P7):
        root.add(phrase, 1)
    assert list(root.children) == ["shooting", "break", "r/g"]


def test_find_member():
    root = PhraseTrieNode()
    for value, phrase in enumerate((P3, P4, P5), start=3):
        root.add(phrase, value)

    found = root.find_member(["break", "up", "hard"])
    assert found.valid
    assert found.phrase == ["break", "up"]
    assert found.value == 4

    found = root.find_member(["shooting", "up"])
    assert found == (True, ["shooting", "up"], 5)


def test_find_member_stops_at_first_leaf():
    root = PhraseTrieNode()
    root.add(P7, 7)
    found = root.find_member(["r/g", "break", "out"])
    assert found == (True, ["r/g"], 7)


def test_find_member_no_match():
    root = PhraseTrieNode()
    root.add(P6, 6)

    assert root.find_member(["nothing", "here"]) == (False, [], 0)
    # input ends on a prefix
    assert root.find_member(["break", "out"]) == (False, [], 0)
    # deeper word does not match
    assert root.find_member(["break", "out", "badly"]) == (False, [], 0)


@pytest.mark.parametrize("method", ["add", "is_member", "find_member"])
def test_empty_phrase_rejected(method):
    root = PhraseTrieNode()
    root.add(P1, 1)
    args = ([], 1) if method == "add" else ([],)
    with pytest.raises(ValueError):
        getattr(root, method)(*args)


def test_remove_is_unimplemented():
    root = PhraseTrieNode()
    root.add(P1, 1)
    with pytest.raises(NotImplementedError):
        root.remove(P1)
    # nothing was removed
    assert root.is_member(P1) == (True, 1)
