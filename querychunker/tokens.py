"""
tokens.py

Token record shared by the tagger adapter, the normalizer and the chunker.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .pos import MajorPOS, MinorPOS, major_pos


@dataclass
class Token:
    original_word: str               # surface text as tagged
    normalized_word: str             # lower-cased, depunctuated, singular form
    pos: MinorPOS
    # Noun attributes; None when the token is not a noun
    is_possessive: Optional[bool] = None
    is_proper: Optional[bool] = None
    is_plural: Optional[bool] = None

    @classmethod
    def from_tagged(cls, word: str, tag: MinorPOS) -> "Token":
        token = cls(original_word=word, normalized_word=word, pos=tag)
        if token.major is MajorPOS.NOUN:
            token.is_possessive = False
            token.is_proper = False
            token.is_plural = False
        return token

    @property
    def major(self) -> MajorPOS:
        return major_pos(self.pos)

    def clear_noun_attributes(self) -> None:
        self.is_possessive = None
        self.is_proper = None
        self.is_plural = None
