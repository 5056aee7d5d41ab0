"""
PhraseTrie

Word-level phrase trie, sentence scanning and overlap resolution for
tagging text with known expressions and their scores.

High-level API
--------------
- build_trie / PhraseTrie    → build the phrase tree, scan sentences
- scan                       → all member phrases of a tokenized sentence
- resolve_overlaps           → keep super-phrases only (SuperOnly)
- PhraseContext(List)        → located matches + span ordering
- PhraseVocabulary           → validated phrase → score mapping
- PhraseTagger               → raw text → tagged matches / scores / DataFrame
"""

from importlib.metadata import PackageNotFoundError, version


# Core APIs
from .trie_node import PhraseTrieNode, MemberMatch
from .phrase_trie import PhraseTrie, build_trie, scan
from .phrase_context import PhraseContext, PhraseContextList, resolve_overlaps
from .vocabulary import PhraseVocabulary, load_vocabulary

# Text-level APIs
from .tokenizer import SentenceTokenizer
from .phrase_tagger import PhraseTagger, TaggingResult


# ---------------------------------------------------------------------
# Runtime version (single source of truth = pyproject.toml)
# ---------------------------------------------------------------------
try:
    __version__ = version("phrasetrie")
except PackageNotFoundError:
    # Fallback when running directly from a clone without installation
    __version__ = "0.0.0"

__all__ = [
    "PhraseTrieNode",
    "MemberMatch",
    "PhraseTrie",
    "build_trie",
    "scan",
    "PhraseContext",
    "PhraseContextList",
    "resolve_overlaps",
    "PhraseVocabulary",
    "load_vocabulary",
    "SentenceTokenizer",
    "PhraseTagger",
    "TaggingResult",
    "__version__",
]
