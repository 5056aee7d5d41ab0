"""
trie_node.py

Word-level trie node for PhraseTrie.

A PhraseTrieNode stores one word of one or more phrases. Walking from the
root down to a node spells out a word sequence; a node terminates a phrase
only when it is a **leaf**. This gives the trie its shadowing rule:

    trie.add(["break", "out"], 3)
    trie.add(["break", "out", "nicely"], 6)

After the second call, ``"break out"`` has a child and is no longer a member
phrase. Its value is still stored on the node but it can never be matched
again, whatever the insertion order of later phrases.
"""

from __future__ import annotations

from typing import Dict, List, NamedTuple, Sequence, Tuple


class MemberMatch(NamedTuple):
    """
    Result of :meth:`PhraseTrieNode.find_member`.

    Attributes
    ----------
    valid:
        True if the scanned sequence begins with a complete member phrase.
    phrase:
        Words of the matched phrase (empty when ``valid`` is False).
    value:
        Score stored on the terminating node (0 when ``valid`` is False).
    """

    valid: bool
    phrase: List[str]
    value: int


_NO_MATCH_VALUE = 0


def _require_words(words: Sequence[str], what: str) -> None:
    if len(words) == 0:
        raise ValueError(f"{what} must contain at least one word.")


class PhraseTrieNode:
    """
    One word position in the phrase tree.

    Children are kept in a ``dict`` keyed by word, so iteration follows
    insertion order and each word appears at most once per level.
    """

    __slots__ = ("key", "value", "children")

    def __init__(self, key: str = "", value: int = 0) -> None:
        self.key = key
        self.value = value
        self.children: Dict[str, PhraseTrieNode] = {}

    def __repr__(self) -> str:
        return (
            f"PhraseTrieNode(key={self.key!r}, value={self.value}, "
            f"children={list(self.children)})"
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def add(self, phrase: Sequence[str], value: int) -> None:
        """
        Recursively add a phrase below this node.

        If ``phrase`` extends a phrase that already ends in this subtree,
        that shorter phrase stops being a member (its node gains a child).
        If ``phrase`` ends on a node that already exists, nothing changes:
        the existing node keeps its value and its children.

        Raises
        ------
        ValueError
            If ``phrase`` is empty.
        """
        _require_words(phrase, "phrase")

        word = phrase[0]
        child = self.children.get(word)

        if child is not None:
            if len(phrase) != 1:
                child.add(phrase[1:], value)
            # else: node already exists, keep it as is
            return

        child = PhraseTrieNode(key=word)
        self.children[word] = child
        if len(phrase) != 1:
            child.add(phrase[1:], value)
        else:
            child.value = value

    def remove(self, phrase: Sequence[str]) -> None:
        """
        Phrase removal is not supported.

        Raises
        ------
        NotImplementedError
            Always.
        """
        raise NotImplementedError(
            "PhraseTrieNode.remove() is not implemented; rebuild the trie "
            "from a vocabulary without the phrase instead."
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def is_leaf(self) -> bool:
        """Return True if this node has no children."""
        return len(self.children) == 0

    def is_member(self, phrase: Sequence[str]) -> Tuple[bool, int]:
        """
        Check whether ``phrase`` is a member phrase below this node.

        A phrase is a member only when its last word lands on a leaf. An
        exact-length walk that ends on an inner node is a shadowed prefix
        and does not match.

        Returns
        -------
        (member, value):
            ``(True, value)`` on a match, ``(False, 0)`` otherwise.
        """
        _require_words(phrase, "phrase")

        child = self.children.get(phrase[0])
        if child is None:
            return False, _NO_MATCH_VALUE

        if len(phrase) != 1:
            if child.is_leaf():  # phrase runs past a full phrase
                return False, _NO_MATCH_VALUE
            return child.is_member(phrase[1:])

        if child.is_leaf():
            return True, child.value

        # inner node: shadowed by a longer phrase
        return False, _NO_MATCH_VALUE

    def find_member(self, sequence: Sequence[str]) -> MemberMatch:
        """
        Find the member phrase that ``sequence`` begins with, if any.

        The walk stops at the first leaf it reaches, so trailing words of
        ``sequence`` are ignored once a complete phrase has been read. If
        the walk reaches an inner node when ``sequence`` is exhausted, or a
        deeper word has no matching child, the sequence only starts with a
        prefix and the result is invalid.

        Raises
        ------
        ValueError
            If ``sequence`` is empty.
        """
        _require_words(sequence, "sequence")

        child = self.children.get(sequence[0])
        if child is None:
            return MemberMatch(False, [], _NO_MATCH_VALUE)

        if child.is_leaf():
            return MemberMatch(True, [child.key], child.value)

        if len(sequence) == 1:  # input ends on a prefix
            return MemberMatch(False, [], _NO_MATCH_VALUE)

        found = child.find_member(sequence[1:])
        if not found.valid:
            return MemberMatch(False, [], _NO_MATCH_VALUE)

        return MemberMatch(True, [child.key] + found.phrase, found.value)
