import pytest
from pydantic import ValidationError

from simtok.tokenizer import QGramTokenizer, create_qgram_tokenizer


def test_bigrams_left_to_right():
    assert QGramTokenizer(2).tokenize_to_list("hello") == ["he", "el", "ll", "lo"]


def test_trigrams():
    assert QGramTokenizer(3).tokenize_to_list("hello") == ["hel", "ell", "llo"]


def test_unigrams_are_characters():
    assert QGramTokenizer(1).tokenize_to_list("abc") == ["a", "b", "c"]


@pytest.mark.parametrize("q", [1, 2, 3, 4])
@pytest.mark.parametrize("word", ["a", "ab", "abc", "abcd", "abcdefgh"])
def test_qgram_count(q, word):
    qgrams = QGramTokenizer(q).tokenize_to_list(word)
    if len(word) >= q:
        assert len(qgrams) == len(word) - q + 1
        assert all(len(g) == q for g in qgrams)
    else:
        assert qgrams == []


def test_input_equal_to_q_is_single_qgram():
    assert QGramTokenizer(3).tokenize_to_list("abc") == ["abc"]


def test_short_input_yields_nothing():
    assert QGramTokenizer(3).tokenize_to_list("ab") == []
    assert QGramTokenizer(2).tokenize_to_list("") == []


def test_set_removes_duplicates():
    tokenizer = QGramTokenizer(2)
    assert tokenizer.tokenize_to_list("aaaa") == ["aa", "aa", "aa"]
    assert tokenizer.tokenize_to_set("aaaa") == {"aa"}


def test_extended_padding():
    tokenizer = QGramTokenizer.extended(2)
    assert tokenizer.start_padding == "#"
    assert tokenizer.end_padding == "#"
    assert tokenizer.tokenize_to_list("ab") == ["#a", "ab", "b#"]


def test_extended_padding_trigrams_single_character():
    tokenizer = QGramTokenizer.extended(3, "$")
    assert tokenizer.tokenize_to_list("a") == ["$$a", "$a$", "a$$"]


def test_short_input_policy_applies_to_padded_string():
    assert QGramTokenizer.extended(2).tokenize_to_list("") == ["##"]
    assert QGramTokenizer(3, start_padding="#").tokenize_to_list("a") == []


def test_extended_q1_has_no_padding():
    tokenizer = QGramTokenizer.extended(1)
    assert tokenizer.start_padding == ""
    assert tokenizer.tokenize_to_list("ab") == ["a", "b"]


def test_custom_asymmetric_padding():
    tokenizer = QGramTokenizer(2, start_padding="<", end_padding="")
    assert tokenizer.tokenize_to_list("ab") == ["<a", "ab"]


@pytest.mark.parametrize("q", [0, -1, "2", 2.5, None])
def test_invalid_q_fails_fast(q):
    with pytest.raises(ValidationError):
        QGramTokenizer(q)


def test_invalid_q_fails_fast_when_extended():
    with pytest.raises(ValidationError):
        QGramTokenizer.extended(0)


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        QGramTokenizer(0)


def test_config_is_frozen():
    tokenizer = QGramTokenizer(2)
    with pytest.raises(ValidationError):
        tokenizer.config.q = 3
    assert tokenizer.q == 2


def test_repr():
    assert repr(QGramTokenizer(2)) == "QGramTokenizer(q=2)"
    assert (
        repr(QGramTokenizer.extended(3))
        == "QGramTokenizer(q=3, start_padding='##', end_padding='##')"
    )


def test_factory():
    assert create_qgram_tokenizer().q == 2
    padded = create_qgram_tokenizer(3, padding="#")
    assert padded.q == 3
    assert padded.start_padding == "##"
    assert padded.end_padding == "##"


@pytest.mark.parametrize("padding", [None, "", "##", 1])
def test_extended_rejects_bad_padding(padding):
    with pytest.raises(ValidationError):
        QGramTokenizer.extended(2, padding)


@pytest.mark.parametrize("q", [0, "2", None])
def test_extended_rejects_bad_q_before_padding(q):
    with pytest.raises(ValidationError):
        QGramTokenizer.extended(q, "#")


def test_factory_rejects_multi_character_padding():
    with pytest.raises(ValidationError):
        create_qgram_tokenizer(2, padding="<>")
