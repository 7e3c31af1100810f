"""
Transliterator interface

The compiler only needs `phonetic(text) -> str`: the space-separated phone
string written next to a literal in the vocabulary file.
"""

from abc import ABC, abstractmethod
from typing import Callable


class Transliterator(ABC):
    """Maps literal surface text to Julius phone units."""

    @abstractmethod
    def phonetic(self, text: str) -> str:
        raise NotImplementedError


class CallableTransliterator(Transliterator):
    """Adapter for a plain `str -> str` function."""

    def __init__(self, func: Callable[[str], str]):
        self.func = func

    def phonetic(self, text: str) -> str:
        return self.func(text)
