# src/e2e/test_word_index.py

import pytest

from shakesearch.index import WordIndex


def test_offsets_for_plain_text():
    idx = WordIndex.build("the quick brown fox jumps over the lazy dog")
    assert idx.positions("the") == (0, 31)
    assert idx.positions("quick") == (4,)
    assert idx.positions("brown") == (10,)
    assert idx.positions("fox") == (16,)
    assert idx.positions("jumps") == (20,)
    assert idx.positions("over") == (26,)
    assert idx.positions("lazy") == (35,)
    # last word has no trailing boundary and is still indexed
    assert idx.positions("dog") == (40,)
    assert len(idx) == 8


def test_offsets_with_punctuation_and_newlines():
    idx = WordIndex.build("To be, or not to be: that is the question.\n")
    assert idx.positions("to") == (0, 14)
    # trailing comma is stripped, so the offset lands one char late
    assert idx.positions("be") == (4,)
    # ':' is not in the punctuation set
    assert idx.positions("be:") == (17,)
    assert idx.positions("not") == (10,)
    assert idx.positions("question") == (34,)


def test_single_char_tokens_absorb_the_boundary():
    idx = WordIndex.build("I am here now")
    assert "am" not in idx
    assert idx.positions("i am") == (0,)
    assert idx.positions("here") == (5,)
    assert idx.positions("now") == (10,)


def test_punctuation_only_tokens_are_not_indexed():
    idx = WordIndex.build("alas -- poor yorick")
    assert "" not in idx.vocabulary
    assert idx.vocabulary == ("alas", "poor", "yorick")


def test_offsets_strictly_increasing():
    idx = WordIndex.build("ab cd ab\nab cd ab ab\n" * 5)
    for _, offs in idx.items():
        assert list(offs) == sorted(set(offs))


def test_index_is_read_only():
    idx = WordIndex.build("hello world")
    with pytest.raises(TypeError):
        idx._words["new"] = (1,)  # type: ignore[index]
    assert idx.positions("missing") == ()
    assert idx.text == "hello world"
