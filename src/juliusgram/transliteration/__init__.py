"""
Transliterators: literal text -> Julius phone strings.
"""

from .base import Transliterator, CallableTransliterator
from .kana import KanaTransliterator, to_katakana

__all__ = ["Transliterator", "CallableTransliterator", "KanaTransliterator", "to_katakana"]
