"""
tokenizer.py

Sentence splitting + word tokenization in front of the phrase trie.

The trie matches words exactly as given (no lowercasing, no stemming), so
the tokenizer decides what a "word" is. Three backends are available:

- ``"whitespace"`` (default): one sentence per non-blank line, tokens split
  on whitespace. No extra dependencies; ``$AAPL`` and ``r/g`` stay intact.
- ``"nltk"``: Punkt sentence splitting + Treebank word tokenization.
- ``"spacy"``: spaCy sentence boundaries and tokens.

Heavy backends are imported lazily so PhraseTrie can be used without them.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional


TOKENIZER_METHODS = ("whitespace", "nltk", "spacy")


class SentenceTokenizer:
    """
    Split raw text into tokenized sentences.

    Parameters
    ----------
    method:
        One of ``"whitespace"``, ``"nltk"`` or ``"spacy"``.
    spacy_model:
        Name of the spaCy model to use if ``method="spacy"``.
    log_fn:
        Optional logging callback (falls back to ``print``).
    """

    def __init__(
        self,
        method: str = "whitespace",
        spacy_model: str = "en_core_web_sm",
        log_fn: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.method = method.lower()
        self.spacy_model = spacy_model
        self._log_fn = log_fn

        if self.method not in TOKENIZER_METHODS:
            raise ValueError(
                f"method must be one of {', '.join(repr(m) for m in TOKENIZER_METHODS)}"
            )

        # Load the chosen backend up front so a missing dependency fails fast.
        self._nlp: Any = None
        self._word_tokenizer: Any = None
        if self.method == "spacy":
            self._nlp = self._load_spacy_model(spacy_model)
        elif self.method == "nltk":
            self._word_tokenizer = self._load_nltk_models()

    def _log(self, message: str) -> None:
        if self._log_fn is not None:
            self._log_fn(message)
        else:
            print(message)

    def sentences(self, text: str) -> List[List[str]]:
        """
        Tokenize ``text`` into a list of sentences, each a list of words.

        Blank input yields an empty list; sentences never come back empty.
        """
        if not text or not text.strip():
            return []

        if self.method == "spacy":
            doc = self._nlp(text)
            result = []
            for sent in doc.sents:
                tokens = [t.text for t in sent if not t.is_space]
                if tokens:
                    result.append(tokens)
            return result

        if self.method == "nltk":
            import nltk

            result = []
            # Punkt can glue block-level lines together; split them again.
            for chunk in nltk.sent_tokenize(text):
                for line in chunk.splitlines():
                    tokens = self._word_tokenizer.tokenize(line.strip())
                    if tokens:
                        result.append(tokens)
            return result

        return [line.split() for line in text.splitlines() if line.strip()]

    # ---------------------------------------------------------------------
    # Lazy back-end loaders (keep heavy imports optional)
    # ---------------------------------------------------------------------
    def _load_spacy_model(self, model_name: str):
        """
        Load a spaCy model, downloading it on-the-fly if necessary.
        """
        import subprocess
        import sys

        try:
            import spacy
        except ImportError as e:  # spaCy not installed
            raise ImportError(
                "spaCy is required for method='spacy'. Install with "
                "'pip install phrasetrie[spacy]'."
            ) from e

        try:
            return spacy.load(model_name)
        except OSError:
            # Model not downloaded yet → auto-download.
            self._log(f"[SentenceTokenizer] spaCy model '{model_name}' not found. Downloading…")
            subprocess.run([sys.executable, "-m", "spacy", "download", model_name], check=True)
            return spacy.load(model_name)

    @staticmethod
    def _load_nltk_models():
        """
        Load NLTK's Treebank tokenizer, fetching the Punkt data quietly.
        """
        try:
            import nltk
            from nltk.tokenize import TreebankWordTokenizer
        except ImportError as e:
            raise ImportError(
                "NLTK is required for method='nltk'. Install with "
                "'pip install phrasetrie[nltk]'."
            ) from e

        nltk.download("punkt", quiet=True)
        nltk.download("punkt_tab", quiet=True)
        return TreebankWordTokenizer()
