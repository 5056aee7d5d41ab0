"""Tests for the end-to-end phrase tagger."""

import pytest

from phrasetrie import PhraseTagger, SentenceTokenizer


TEXT = "its shooting up it might even break up i bet $100 $AAPL will break out nicely"


@pytest.fixture
def tagger(full_vocabulary):
    return PhraseTagger(full_vocabulary, log_fn=lambda _msg: None)


def test_tag(tagger):
    matches = tagger.tag(TEXT)
    assert [(m.phrase_str, m.indices, m.value) for m in matches] == [
        ("shooting up", (1, 2), 5),
        ("break up", (6, 7), 4),
        ("break out nicely", (13, 15), 6),
    ]


def test_tag_keeps_overlaps_when_disabled(full_vocabulary):
    tagger = PhraseTagger(full_vocabulary, super_only=False, log_fn=lambda _msg: None)
    matches = tagger.tag("its breaking double bottom")
    assert [m.phrase_str for m in matches] == ["breaking double bottom", "double bottom"]


def test_tag_multiple_lines(tagger):
    matches = tagger.tag("its breaking double bottom\nsee r/g")
    assert [(m.phrase_str, m.indices) for m in matches] == [
        ("breaking double bottom", (1, 3)),
        ("r/g", (1, 1)),
    ]


def test_tag_empty_text(tagger):
    assert tagger.tag("") == []
    assert tagger.score("   ") == 0


def test_score(tagger):
    assert tagger.score(TEXT) == 15
    assert tagger.score("its breaking double bottom $100 $AAPL will break out") == 8
    assert tagger.score("$AAPL isn't doing anything today") == 0


def test_tagger_accepts_tokenizer_instance(full_vocabulary):
    tok = SentenceTokenizer("whitespace")
    tagger = PhraseTagger(full_vocabulary, tokenizer=tok, log_fn=lambda _msg: None)
    assert tagger.tokenizer is tok


def test_config(tagger):
    assert tagger.config == {
        "tokenizer": "whitespace",
        "super_only": True,
        "vocabulary_size": 9,
        "reachable_phrases": 6,
    }


def test_tag_documents(full_vocabulary):
    messages = []
    tagger = PhraseTagger(full_vocabulary, log_fn=messages.append)
    docs = [TEXT, "$AAPL isn't doing anything today", "nothing\nits breaking double bottom"]

    result = tagger.tag_documents(docs, verbose=True)
    df = result.matches_df

    assert list(df.columns) == [
        "doc_index", "sent_index", "phrase", "start", "end", "n_tokens", "value", "sentence",
    ]
    assert df["doc_index"].tolist() == [0, 0, 0, 2]
    assert df["sent_index"].tolist() == [0, 0, 0, 1]
    assert df["phrase"].tolist() == [
        "shooting up", "break up", "break out nicely", "breaking double bottom",
    ]
    assert df["value"].sum() == 23

    assert len(result.sentences_by_doc) == 3
    assert result.sentences_by_doc[2] == [["nothing"], ["its", "breaking", "double", "bottom"]]
    assert result.config["n_documents"] == 3
    assert len(messages) == 2


def test_tag_documents_quiet_and_empty(tagger):
    result = tagger.tag_documents([])
    assert result.matches_df.empty
    assert result.sentences_by_doc == []
