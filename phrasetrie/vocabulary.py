"""
vocabulary.py

Phrase vocabularies for PhraseTrie: a validated mapping from a phrase string
(words separated by single spaces) to its integer score.

    vocab = PhraseVocabulary(phrases={"break out": 3, "break out nicely": 6})
    vocab = load_vocabulary("phrases.json")   # {"break out": 3, ...}

Mapping order is kept and is the order in which phrases are added to the
trie, which matters for prefix shadowing.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

from pydantic import BaseModel, Field, field_validator


PHRASE_SEPARATOR = " "


class PhraseVocabulary(BaseModel):
    """
    Phrase → score mapping used to build a PhraseTrie.

    Attributes
    ----------
    phrases:
        Phrase strings mapped to integer scores (e.g. sentiment weights).
    """

    phrases: Dict[str, int] = Field(
        default_factory=dict,
        description="Space-delimited phrase strings mapped to integer scores.",
    )

    @field_validator("phrases")
    @classmethod
    def _check_phrases(cls, phrases: Dict[str, int]) -> Dict[str, int]:
        for phrase in phrases:
            if not phrase.strip():
                raise ValueError("vocabulary phrases must not be empty or blank.")
        return phrases

    def __len__(self) -> int:
        return len(self.phrases)

    def word_sequences(self) -> Iterator[Tuple[List[str], int]]:
        """Yield ``(words, value)`` pairs in mapping order."""
        for phrase, value in self.phrases.items():
            yield phrase.split(PHRASE_SEPARATOR), value


def load_vocabulary(path: str | Path) -> PhraseVocabulary:
    """
    Load a vocabulary from a JSON file.

    Args:
        path: Path to a UTF-8 JSON object of ``{phrase: score}``

    Returns:
        Validated PhraseVocabulary
    """
    with open(path, "r", encoding="utf-8") as f:
        return PhraseVocabulary(phrases=json.load(f))
