"""Tests for keyword normalization and whitespace tokenization."""

import pytest

from tokenizer import get_keyword, tokenize


class TestGetKeyword:
    def test_strips_trailing_period_and_lowercases(self, noise_words):
        assert get_keyword("Fig.", noise_words) == "fig"

    def test_noise_word_is_rejected(self, noise_words):
        assert get_keyword("it", noise_words) is None
        assert get_keyword("The", noise_words) is None

    def test_noise_check_happens_before_stripping(self, noise_words):
        # "the." is not itself a noise word, so it survives as "the"
        assert get_keyword("the.", noise_words) == "the"

    @pytest.mark.parametrize("word", ["a", "I", "x", "."])
    def test_single_characters_are_rejected(self, word):
        assert get_keyword(word, set()) is None

    def test_repeated_punctuation_is_stripped(self, noise_words):
        assert get_keyword("Really?!?", noise_words) == "really"
        assert get_keyword("end;:,", noise_words) == "end"

    def test_single_letter_followed_by_punctuation(self, noise_words):
        # Only the original length is checked, so "b." becomes "b"
        assert get_keyword("b.", noise_words) == "b"

    @pytest.mark.parametrize(
        "word", ["word'", 'quote"', "number7", "dash-", "paren)", "100%"]
    )
    def test_other_trailing_characters_reject(self, word):
        assert get_keyword(word, set()) is None

    @pytest.mark.parametrize(
        "word", ["fish-like", "4ever", "e.g.", "don't", "a1b", "mid,dle"]
    )
    def test_embedded_non_letters_reject(self, word):
        assert get_keyword(word, set()) is None

    def test_only_punctuation_is_rejected(self):
        assert get_keyword("?!", set()) is None
        assert get_keyword("...", set()) is None

    def test_normalizing_a_keyword_again_is_stable(self, noise_words):
        for word in ["Deep.", "OCEAN!", "Whales,", "swim"]:
            keyword = get_keyword(word, noise_words)
            assert get_keyword(keyword, noise_words) == keyword


class TestTokenize:
    def test_splits_on_any_whitespace(self):
        text = "Deep  ocean,\twhales\nswim!\r\n"
        assert tokenize(text) == ["Deep", "ocean,", "whales", "swim!"]

    def test_empty_text(self):
        assert tokenize("") == []
        assert tokenize("   \n ") == []
