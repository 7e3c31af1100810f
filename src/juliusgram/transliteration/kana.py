"""
Kana to Julius phone conversion

Longest match over a katakana table (hiragana is shifted to katakana
first). `ー` lengthens the previous vowel (`a` -> `a:`), `ッ` is the
geminate `q` and `ン` the moraic nasal `N`.
"""

import logging
from typing import Dict, List

from .base import Transliterator
from ..shared.errors import TransliterationError

logger = logging.getLogger(__name__)

_HIRAGANA_START = 0x3041
_HIRAGANA_END = 0x3096
_KATAKANA_OFFSET = 0x60

LONG_VOWEL_MARK = "ー"
_VOWELS = frozenset("aiueo")
_SPACES = frozenset(" 　\t")

# Two-character sequences (small ya/yu/yo/vowel combinations)
_DIGRAPHS: Dict[str, str] = {
    "キャ": "ky a", "キュ": "ky u", "キョ": "ky o", "キェ": "ky e",
    "シャ": "sh a", "シュ": "sh u", "ショ": "sh o", "シェ": "sh e",
    "チャ": "ch a", "チュ": "ch u", "チョ": "ch o", "チェ": "ch e",
    "ニャ": "ny a", "ニュ": "ny u", "ニョ": "ny o", "ニェ": "ny e",
    "ヒャ": "hy a", "ヒュ": "hy u", "ヒョ": "hy o", "ヒェ": "hy e",
    "ミャ": "my a", "ミュ": "my u", "ミョ": "my o", "ミェ": "my e",
    "リャ": "ry a", "リュ": "ry u", "リョ": "ry o", "リェ": "ry e",
    "ギャ": "gy a", "ギュ": "gy u", "ギョ": "gy o", "ギェ": "gy e",
    "ジャ": "j a", "ジュ": "j u", "ジョ": "j o", "ジェ": "j e",
    "ヂャ": "j a", "ヂュ": "j u", "ヂョ": "j o",
    "ビャ": "by a", "ビュ": "by u", "ビョ": "by o", "ビェ": "by e",
    "ピャ": "py a", "ピュ": "py u", "ピョ": "py o", "ピェ": "py e",
    "ファ": "f a", "フィ": "f i", "フェ": "f e", "フォ": "f o", "フュ": "hy u",
    "ティ": "t i", "トゥ": "t u", "テュ": "ty u",
    "ディ": "d i", "ドゥ": "d u", "デュ": "dy u",
    "ウィ": "w i", "ウェ": "w e", "ウォ": "w o",
    "ヴァ": "b a", "ヴィ": "b i", "ヴェ": "b e", "ヴォ": "b o", "ヴュ": "by u",
    "ツァ": "ts a", "ツィ": "ts i", "ツェ": "ts e", "ツォ": "ts o",
    "スィ": "s i", "ズィ": "z i",
    "クァ": "k a", "グァ": "g a",
}

_MONOGRAPHS: Dict[str, str] = {
    "ア": "a", "イ": "i", "ウ": "u", "エ": "e", "オ": "o",
    "カ": "k a", "キ": "k i", "ク": "k u", "ケ": "k e", "コ": "k o",
    "サ": "s a", "シ": "sh i", "ス": "s u", "セ": "s e", "ソ": "s o",
    "タ": "t a", "チ": "ch i", "ツ": "ts u", "テ": "t e", "ト": "t o",
    "ナ": "n a", "ニ": "n i", "ヌ": "n u", "ネ": "n e", "ノ": "n o",
    "ハ": "h a", "ヒ": "h i", "フ": "f u", "ヘ": "h e", "ホ": "h o",
    "マ": "m a", "ミ": "m i", "ム": "m u", "メ": "m e", "モ": "m o",
    "ヤ": "y a", "ユ": "y u", "ヨ": "y o",
    "ラ": "r a", "リ": "r i", "ル": "r u", "レ": "r e", "ロ": "r o",
    "ワ": "w a", "ヰ": "i", "ヱ": "e", "ヲ": "o", "ン": "N",
    "ガ": "g a", "ギ": "g i", "グ": "g u", "ゲ": "g e", "ゴ": "g o",
    "ザ": "z a", "ジ": "j i", "ズ": "z u", "ゼ": "z e", "ゾ": "z o",
    "ダ": "d a", "ヂ": "j i", "ヅ": "z u", "デ": "d e", "ド": "d o",
    "バ": "b a", "ビ": "b i", "ブ": "b u", "ベ": "b e", "ボ": "b o",
    "パ": "p a", "ピ": "p i", "プ": "p u", "ペ": "p e", "ポ": "p o",
    "ヴ": "b u",
    "ァ": "a", "ィ": "i", "ゥ": "u", "ェ": "e", "ォ": "o",
    "ャ": "y a", "ュ": "y u", "ョ": "y o", "ヮ": "w a",
    "ッ": "q",
}


def to_katakana(text: str) -> str:
    """Shift hiragana code points into the katakana block."""
    return "".join(
        chr(ord(ch) + _KATAKANA_OFFSET) if _HIRAGANA_START <= ord(ch) <= _HIRAGANA_END else ch
        for ch in text
    )


class KanaTransliterator(Transliterator):
    """Transliterator for text already written in kana."""

    def phonetic(self, text: str) -> str:
        kana = to_katakana(text)
        phones: List[str] = []
        i = 0
        while i < len(kana):
            ch = kana[i]
            if ch in _SPACES:
                i += 1
                continue
            if ch == LONG_VOWEL_MARK:
                if not phones or phones[-1][-1] not in _VOWELS | {":"}:
                    raise TransliterationError(text, i)
                if not phones[-1].endswith(":"):
                    phones[-1] += ":"
                i += 1
                continue
            pair = kana[i:i + 2]
            if pair in _DIGRAPHS:
                phones.extend(_DIGRAPHS[pair].split())
                i += 2
                continue
            if ch not in _MONOGRAPHS:
                raise TransliterationError(text, i)
            phones.extend(_MONOGRAPHS[ch].split())
            i += 1
        logger.debug(f"{text!r} -> {' '.join(phones)!r}")
        return " ".join(phones)
