"""
phrase_trie.py

PhraseTrie: a trie over words for single and multi word phrases.

A classic trie stores strings one character per level; PhraseTrie stores
phrases one *word* per level, and every complete phrase carries an integer
score. The root-level API scans tokenized sentences:

    trie = build_trie({"break out": 3, "break out nicely": 6, "shooting up": 5})

    matches = trie.find_all_members("its shooting up will break out nicely".split(" "))
    # -> "shooting up" (1, 2) = 5, "break out nicely" (4, 6) = 6

    supers = matches.super_only()

Only phrases that end on a leaf are members; see ``trie_node`` for the
shadowing rule this implies.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .phrase_context import PhraseContext, PhraseContextList
from .trie_node import MemberMatch, PhraseTrieNode
from .vocabulary import PhraseVocabulary


VocabularyLike = Union[Mapping[str, int], PhraseVocabulary]


class PhraseTrie:
    """
    Root of a phrase tree plus the sentence-scanning API.

    The trie is meant to be built once (see :func:`build_trie`) and then
    only read. Scans do not modify it, so one built trie can serve any
    number of callers.
    """

    def __init__(self, log_fn: Optional[Callable[[str], None]] = None) -> None:
        """
        Parameters
        ----------
        log_fn:
            Optional logging callback taking a single string. Falls back to
            ``print`` when omitted.
        """
        self.root = PhraseTrieNode()
        self._log_fn = log_fn

    # ------------------------------------------------------------------
    # Internal helper – unified logging
    # ------------------------------------------------------------------
    def _log(self, message: str, verbose: bool = True) -> None:
        if not verbose:
            return
        if self._log_fn is not None:
            self._log_fn(message)
        else:
            print(message)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_vocabulary(
        cls,
        vocabulary: VocabularyLike,
        *,
        log_fn: Optional[Callable[[str], None]] = None,
        verbose: bool = False,
    ) -> PhraseTrie:
        """
        Build a trie by adding every vocabulary phrase in mapping order.

        Plain mappings are validated through :class:`PhraseVocabulary`
        first, so blank phrases are rejected before anything is added.
        """
        if not isinstance(vocabulary, PhraseVocabulary):
            vocabulary = PhraseVocabulary(phrases=dict(vocabulary))

        trie = cls(log_fn=log_fn)
        for words, value in vocabulary.word_sequences():
            trie.add(words, value)

        trie._log(
            f"[PhraseTrie] Built trie from {len(vocabulary)} phrase(s); "
            f"{len(trie)} reachable.",
            verbose,
        )
        return trie

    def add(self, phrase: Sequence[str], value: int) -> None:
        """Add a phrase (list of words) with its score."""
        self.root.add(phrase, value)

    def remove(self, phrase: Sequence[str]) -> None:
        """Not supported; raises NotImplementedError."""
        self.root.remove(phrase)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def is_empty(self) -> bool:
        return self.root.is_leaf()

    def is_member(self, phrase: Sequence[str]) -> Tuple[bool, int]:
        return self.root.is_member(phrase)

    def __contains__(self, phrase: object) -> bool:
        if isinstance(phrase, str):
            phrase = phrase.split(" ")
        if not isinstance(phrase, (list, tuple)) or len(phrase) == 0:
            return False
        member, _ = self.root.is_member(phrase)
        return member

    def find_member(self, sequence: Sequence[str]) -> MemberMatch:
        """
        Check whether ``sequence`` begins with a complete member phrase.

        Returns
        -------
        MemberMatch
            ``(valid, phrase, value)``. If several member phrases start the
            sequence only the first one found is returned.
        """
        return self.root.find_member(sequence)

    def find_all_members(self, sentence: Sequence[str]) -> PhraseContextList:
        """
        Find every member phrase starting at every position of ``sentence``.

        Matches from different start positions may overlap and are all
        kept; use :meth:`PhraseContextList.super_only` to resolve them.
        The list is in scan order (ascending start index).

        Raises
        ------
        ValueError
            If ``sentence`` is empty.
        """
        if len(sentence) == 0:
            raise ValueError("sentence must contain at least one word.")

        found = PhraseContextList()
        if self.root.is_leaf():  # nothing to match
            return found

        for i in range(len(sentence)):
            match = self.root.find_member(sentence[i:])
            if match.valid:
                found.append(
                    PhraseContext(
                        phrase=tuple(match.phrase),
                        sentence=sentence,
                        indices=(i, i + len(match.phrase) - 1),
                        value=match.value,
                    )
                )

        return found

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def items(self) -> Iterator[Tuple[str, int]]:
        """
        Yield ``(phrase, value)`` for every phrase that can still match.

        Shadowed prefixes are not reported. Order follows insertion order
        depth-first.
        """
        stack: List[Tuple[PhraseTrieNode, List[str]]] = [
            (child, [child.key]) for child in reversed(list(self.root.children.values()))
        ]
        while stack:
            node, words = stack.pop()
            if node.is_leaf():
                yield " ".join(words), node.value
                continue
            for child in reversed(list(node.children.values())):
                stack.append((child, words + [child.key]))

    def __len__(self) -> int:
        return sum(1 for _ in self.items())


# ---------------------------------------------------------------------
# Module-level API
# ---------------------------------------------------------------------


def build_trie(vocabulary: VocabularyLike) -> PhraseTrie:
    """Build a PhraseTrie from a ``{phrase: score}`` vocabulary."""
    return PhraseTrie.from_vocabulary(vocabulary)


def scan(trie: PhraseTrie, sentence: Sequence[str]) -> PhraseContextList:
    """Return all member phrases found in a tokenized sentence."""
    return trie.find_all_members(sentence)
