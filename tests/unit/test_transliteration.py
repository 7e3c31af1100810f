#!/usr/bin/env python3
"""
Tests for the kana transliterator and the callable adapter.
"""

import pytest
from juliusgram.shared.errors import TransliterationError
from juliusgram.transliteration import CallableTransliterator, KanaTransliterator, to_katakana


@pytest.fixture
def kana():
    return KanaTransliterator()


class TestKana:
    """Katakana and hiragana to phones"""

    @pytest.mark.parametrize("text,expected", [
        ("イチ", "i ch i"),
        ("ニ", "n i"),
        ("トウキョウ", "t o u ky o u"),
        ("シャシン", "sh a sh i N"),
        ("ガッコウ", "g a q k o u"),
        ("ファイル", "f a i r u"),
        ("ヴァイオリン", "b a i o r i N"),
    ])
    def test_katakana(self, kana, text, expected):
        assert kana.phonetic(text) == expected

    def test_hiragana_matches_katakana(self, kana):
        assert kana.phonetic("きょうと") == kana.phonetic("キョウト") == "ky o u t o"

    def test_long_vowel_mark(self, kana):
        assert kana.phonetic("ラーメン") == "r a: m e N"
        assert kana.phonetic("コーヒー") == "k o: h i:"

    def test_repeated_long_vowel_mark_is_idempotent(self, kana):
        assert kana.phonetic("アーー") == "a:"

    def test_spaces_are_skipped(self, kana):
        assert kana.phonetic("オハヨウ ゴザイマス") == "o h a y o u g o z a i m a s u"
        assert kana.phonetic("ア　イ") == "a i"

    def test_empty_text(self, kana):
        assert kana.phonetic("") == ""


class TestKanaErrors:
    """Characters with no phonetic form"""

    @pytest.mark.parametrize("text,position", [
        ("abc", 0),
        ("アカx", 2),
        ("東京", 0),
        ("ーア", 0),
        ("ンー", 1),
    ])
    def test_rejected(self, kana, text, position):
        with pytest.raises(TransliterationError) as info:
            kana.phonetic(text)
        assert info.value.position == position
        assert info.value.text == text


class TestHelpers:

    def test_to_katakana(self):
        assert to_katakana("ひらがな カタカナ abc") == "ヒラガナ カタカナ abc"

    def test_callable_transliterator(self):
        upper = CallableTransliterator(str.upper)
        assert upper.phonetic("ab") == "AB"
