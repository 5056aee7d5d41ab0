"""
phrase_context.py

Located phrase matches and overlap resolution for PhraseTrie.

- PhraseContext:
    One match of a trie phrase inside a tokenized sentence: the phrase
    words, an inclusive ``(first, last)`` word span, the phrase score, and
    a shared reference to the sentence it was found in.

- PhraseContextList:
    A list of PhraseContext ordered by span (start ascending, then end
    ascending). ``super_only()`` drops every match whose span is swallowed
    by a dominating super-phrase, e.g.

        super phrase: "breaking double bottom"   (1, 3)
        sub phrase:   "double bottom"            (2, 3)   -> removed

    Sub-phrases that come *before* a super-phrase without overlapping it
    are left alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence, Tuple

import numpy as np
import pandas as pd


_UNASSIGNED = -1

MATCH_COLUMNS = ["phrase", "start", "end", "n_tokens", "value", "sentence"]


# ---------------------------------------------------------------------
# PhraseContext
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class PhraseContext:
    """
    A single phrase occurrence found by the scanner.

    Attributes
    ----------
    phrase:
        Matched words, in sentence order.
    sentence:
        The full tokenized sentence that was scanned. This is the caller's
        sequence, not a copy; all matches of one scan share it.
    indices:
        Inclusive, 0-based ``(first, last)`` word span into ``sentence``.
    value:
        Score of the trie phrase.
    """

    phrase: Tuple[str, ...]
    sentence: Sequence[str] = field(repr=False, hash=False)
    indices: Tuple[int, int]
    value: int

    def __post_init__(self) -> None:
        if len(self.phrase) == 0:
            raise ValueError("phrase must contain at least one word.")
        first, last = self.indices
        if first < 0 or last >= len(self.sentence):
            raise ValueError(
                f"indices {self.indices} fall outside a sentence of "
                f"{len(self.sentence)} word(s)."
            )
        if last - first != len(self.phrase) - 1:
            raise ValueError(
                f"indices {self.indices} do not span a phrase of "
                f"{len(self.phrase)} word(s)."
            )

    @property
    def phrase_str(self) -> str:
        return " ".join(self.phrase)

    @property
    def sentence_str(self) -> str:
        return " ".join(self.sentence)

    @property
    def sort_key(self) -> Tuple[int, int]:
        """Span order: lower bound first, then upper bound."""
        return self.indices[0], self.indices[1]

    def dominates(self, other: PhraseContext) -> bool:
        """
        Return True if this match wins a shared position over ``other``.

        An earlier start wins. With equal starts the longer span wins; an
        exact tie goes to ``self``, the later of the two in sorted order.
        """
        first, last = self.indices
        other_first, other_last = other.indices
        if first != other_first:
            return first < other_first
        return last >= other_last


# ---------------------------------------------------------------------
# PhraseContextList
# ---------------------------------------------------------------------


class PhraseContextList(list):
    """
    Ordered collection of PhraseContext.

    Scanner output is kept in scan order; ``sorted_by_span()`` and
    ``super_only()`` return new lists and never reorder this one.
    """

    def sorted_by_span(self) -> PhraseContextList:
        # stable: exact span ties keep their scan order
        return PhraseContextList(sorted(self, key=lambda c: c.sort_key))

    def super_only(self) -> PhraseContextList:
        """
        Return only the super-phrases of this list.

        Matches are visited in span order while a per-word lookup array
        records which match owns each sentence position. A match that
        meets a position owned by a match it does not dominate is a
        sub-phrase and is skipped. Positions are never handed back to an
        earlier owner. Each owner is then emitted once, left to right.

        Raises
        ------
        ValueError
            If the matches do not all come from the same sentence.
        """
        if len(self) == 0:
            return PhraseContextList()

        ordered = self.sorted_by_span()
        sentence = ordered[0].sentence
        for c in ordered:
            if c.sentence is not sentence and list(c.sentence) != list(sentence):
                raise ValueError(
                    "super_only() expects matches from a single sentence."
                )

        lookups = np.full(len(sentence), _UNASSIGNED, dtype=np.int64)

        for i, c in enumerate(ordered):
            first, last = c.indices
            for j in range(first, last + 1):
                owner = lookups[j]
                if owner == _UNASSIGNED or c.dominates(ordered[owner]):
                    lookups[j] = i
                else:  # sub-phrase, skip it
                    break

        supers = PhraseContextList()
        last_owner = _UNASSIGNED
        for owner in lookups:
            if owner != _UNASSIGNED and owner != last_owner:
                supers.append(ordered[owner])
                last_owner = owner

        return supers

    def total_value(self) -> int:
        return sum(c.value for c in self)

    def to_records(self) -> List[Dict[str, Any]]:
        """One dict per match, keyed by MATCH_COLUMNS."""
        return [
            {
                "phrase": c.phrase_str,
                "start": c.indices[0],
                "end": c.indices[1],
                "n_tokens": len(c.phrase),
                "value": c.value,
                "sentence": c.sentence_str,
            }
            for c in self
        ]

    def to_dataframe(self) -> pd.DataFrame:
        """
        Render matches as a DataFrame.

        Columns
        -------
        - phrase   : matched phrase string
        - start    : first word index (inclusive)
        - end      : last word index (inclusive)
        - n_tokens : phrase length in words
        - value    : phrase score
        - sentence : sentence string
        """
        return pd.DataFrame(self.to_records(), columns=MATCH_COLUMNS)


def resolve_overlaps(matches: Iterable[PhraseContext]) -> PhraseContextList:
    """Resolve overlapping matches, keeping super-phrases only."""
    return PhraseContextList(matches).super_only()
