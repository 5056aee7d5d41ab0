"""
phrase_tagger.py

PhraseTagger: tag raw text with known phrases and their scores.

Main features
-------------
- Builds a PhraseTrie once from a phrase → score vocabulary.
- Splits text into tokenized sentences (whitespace, NLTK or spaCy).
- Scans every sentence for member phrases and, by default, keeps only the
  super-phrases (``"breaking double bottom"`` wins over ``"double bottom"``).
- Sums phrase scores into a simple text score.
- Tabulates matches over a document collection as a pandas DataFrame.

Quick usage
-----------
    from phrasetrie import PhraseTagger

    tagger = PhraseTagger({"break out": 3, "break out nicely": 6, "double bottom": 9})

    matches = tagger.tag("$AAPL will break out nicely")
    print([(m.phrase_str, m.indices, m.value) for m in matches])
    # [('break out nicely', (2, 4), 6)]

    result = tagger.tag_documents(["...", "..."])
    print(result.matches_df.head())
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import pandas as pd

from .phrase_context import MATCH_COLUMNS, PhraseContextList
from .phrase_trie import PhraseTrie, VocabularyLike
from .tokenizer import SentenceTokenizer


@dataclass
class TaggingResult:
    """
    Output of :meth:`PhraseTagger.tag_documents`.

    Attributes
    ----------
    matches_df:
        One row per surviving match. Columns:
            - doc_index   : index of the source document
            - sent_index  : sentence index within that document
            - phrase      : matched phrase string
            - start, end  : inclusive word span within the sentence
            - n_tokens    : phrase length in words
            - value       : phrase score
            - sentence    : sentence string
    sentences_by_doc:
        Tokenized sentences per document, aligned with
        ``doc_index`` / ``sent_index``.
    config:
        Run-time parameters used for this tagging pass.
    """

    matches_df: pd.DataFrame
    sentences_by_doc: List[List[List[str]]]
    config: Dict[str, Any]


class PhraseTagger:
    """
    Vocabulary-driven phrase tagging for tokenized text.

    This class is responsible for:
      * building the phrase trie from a vocabulary
      * tokenizing raw text into sentences
      * scanning sentences and resolving overlapping matches
      * aggregating scores and tabulating matches
    """

    def __init__(
        self,
        vocabulary: VocabularyLike,
        *,
        tokenizer: Union[str, SentenceTokenizer] = "whitespace",
        super_only: bool = True,
        log_fn: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        Parameters
        ----------
        vocabulary:
            Mapping (or PhraseVocabulary) from space-delimited phrase
            strings to integer scores.
        tokenizer:
            Backend name for :class:`SentenceTokenizer`, or a ready
            tokenizer instance.
        super_only:
            If True (default), overlapping matches are resolved with
            :meth:`PhraseContextList.super_only`.
        log_fn:
            Optional logging callback taking a single string. Falls back
            to ``print``.
        """
        self.log_fn = log_fn
        self.super_only = super_only

        if isinstance(tokenizer, SentenceTokenizer):
            self.tokenizer = tokenizer
        else:
            self.tokenizer = SentenceTokenizer(method=tokenizer, log_fn=log_fn)

        self.trie = PhraseTrie.from_vocabulary(vocabulary, log_fn=log_fn)
        self.vocabulary_size = len(vocabulary)

    def _log(self, message: str, verbose: bool = True) -> None:
        if not verbose:
            return
        if self.log_fn is not None:
            self.log_fn(message)
        else:
            print(message)

    @property
    def config(self) -> Dict[str, Any]:
        return {
            "tokenizer": self.tokenizer.method,
            "super_only": self.super_only,
            "vocabulary_size": self.vocabulary_size,
            "reachable_phrases": len(self.trie),
        }

    # ------------------------------------------------------------------
    # Tagging
    # ------------------------------------------------------------------
    def tag_sentence(self, tokens: Sequence[str]) -> PhraseContextList:
        """Scan one tokenized sentence."""
        found = self.trie.find_all_members(tokens)
        if self.super_only:
            return found.super_only()
        return found

    def tag(self, text: str) -> PhraseContextList:
        """
        Tag every sentence of ``text``.

        Matches of all sentences are concatenated in sentence order. Text
        with no tokens gives an empty list.
        """
        matches = PhraseContextList()
        for tokens in self.tokenizer.sentences(text):
            matches.extend(self.tag_sentence(tokens))
        return matches

    def score(self, text: str) -> int:
        """Sum of the scores of all phrases tagged in ``text``."""
        return self.tag(text).total_value()

    def tag_documents(
        self,
        texts: Sequence[str],
        verbose: bool = False,
    ) -> TaggingResult:
        """
        Tag a collection of documents.

        Parameters
        ----------
        texts:
            Raw documents (comments, posts, headlines, ...).
        verbose:
            If True, log progress through ``log_fn``.

        Returns
        -------
        TaggingResult
        """
        rows: List[Dict[str, Any]] = []
        sentences_by_doc: List[List[List[str]]] = []

        self._log(f"[PhraseTagger] Tagging {len(texts)} document(s)...", verbose)

        for doc_index, text in enumerate(texts):
            doc_sentences = self.tokenizer.sentences(text)
            sentences_by_doc.append(doc_sentences)

            for sent_index, tokens in enumerate(doc_sentences):
                for record in self.tag_sentence(tokens).to_records():
                    record["doc_index"] = doc_index
                    record["sent_index"] = sent_index
                    rows.append(record)

        matches_df = pd.DataFrame(rows, columns=["doc_index", "sent_index"] + MATCH_COLUMNS)

        self._log(
            f"[PhraseTagger] Found {len(matches_df)} match(es) in "
            f"{sum(len(s) for s in sentences_by_doc)} sentence(s).",
            verbose,
        )

        config = dict(self.config)
        config["n_documents"] = len(texts)

        return TaggingResult(
            matches_df=matches_df,
            sentences_by_doc=sentences_by_doc,
            config=config,
        )
