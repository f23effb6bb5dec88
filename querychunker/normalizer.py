"""
normalizer.py

Deterministic corrections applied to tagger output before chunking.

Taggers are trained on prose, while queries are short and often
ungrammatical ("Dishes with eggs and chicken"), so their tags are a first
guess. :class:`TokenNormalizer` fixes the surface form of every token
(punctuation, possessive ending, case, plural) and reclassifies tags with a
fixed series of heuristics. The order of the rules matters: later rules
read attributes that earlier rules set.

Per-token rules
---------------
1. A verb at the first or last position becomes NN.
2. Noun attributes are seeded from the tag (NNO/PP possessive,
   NNP/NNPS/NNPA proper, NNPS/NNS plural).
3. ``.``, ``?`` and ``!`` are removed from the word.
4. A trailing ``'s`` or ``'`` is removed; the token becomes a possessive noun.
5. The word is lower-cased; capitalisation after the first position marks
   a proper noun (NNP).
6. Common nouns are singularized; a change marks the token plural.
7. "in" tagged as an adjective becomes the preposition IN.
8. Fixed lexical overrides (is, was, had, will, not, <, >, ",").

A second pass then reclassifies wh-words (that, which, who, whose, where...).
"""

from __future__ import annotations

import re
from typing import Dict, FrozenSet, List, Optional

from .pos import MajorPOS, MinorPOS
from .singularizer import Singularizer, singularize
from .tokens import Token


_PUNCTUATION_RE = re.compile(r"[.?!]")
_POSSESSIVE_RE = re.compile(r"(?:['’]s|['’])$")

_POSSESSIVE_TAGS: FrozenSet[MinorPOS] = frozenset({MinorPOS.NNO, MinorPOS.PP})
_PROPER_TAGS: FrozenSet[MinorPOS] = frozenset({MinorPOS.NNP, MinorPOS.NNPS, MinorPOS.NNPA})
_PLURAL_TAGS: FrozenSet[MinorPOS] = frozenset({MinorPOS.NNPS, MinorPOS.NNS})

# Words with no ambiguous reading that taggers still get wrong
_LEXICAL_OVERRIDES: Dict[str, MinorPOS] = {
    "is": MinorPOS.VBZ,
    "was": MinorPOS.VBD,
    "had": MinorPOS.VBD,
    "not": MinorPOS.RB,
}
_SYMBOL_OVERRIDES: Dict[str, MinorPOS] = {
    ">": MinorPOS.GT,
    "<": MinorPOS.LT,
    ",": MinorPOS.SEP,
}

_WH_DETERMINERS: FrozenSet[str] = frozenset({"that", "whatever", "which"})
_WH_PRONOUNS: FrozenSet[str] = frozenset({"who", "what", "whom"})
_WH_ADVERBS: FrozenSet[str] = frozenset({"how", "when", "however", "whenever", "where", "why"})


class TokenNormalizer:
    """
    Apply the correction heuristics to a token sequence, in place.

    Parameters
    ----------
    singularizer:
        Backend used by rule 6. ``None`` disables singularization, which
        only makes sense for debugging.
    """

    def __init__(self, singularizer: Optional[Singularizer] = None) -> None:
        self.singularizer = singularizer

    def normalize(self, tokens: List[Token]) -> List[Token]:
        last = len(tokens) - 1
        for i, token in enumerate(tokens):
            self._normalize_token(token, is_first=(i == 0), is_last=(i == last))
        for token in tokens:
            self._correct_wh_word(token)
        for token in tokens:
            if token.major is not MajorPOS.NOUN and token.pos is not MinorPOS.WPO:
                token.clear_noun_attributes()
        return tokens

    # ------------------------------------------------------------------
    # Rules 1-8
    # ------------------------------------------------------------------
    def _normalize_token(self, token: Token, is_first: bool, is_last: bool) -> None:
        # 1) queries rarely begin or end with a verb
        if (is_first or is_last) and token.major is MajorPOS.VERB:
            token.pos = MinorPOS.NN

        # 2) noun attribute defaults
        if token.major is MajorPOS.NOUN:
            self._seed_noun_attributes(token)

        # 3) punctuation
        word = _PUNCTUATION_RE.sub("", token.normalized_word)

        # 4) possessive ending
        before = word
        word = _POSSESSIVE_RE.sub("", word)
        # a bare "'s" (contraction split off a pronoun) strips to nothing
        if word != before and word:
            if token.major is not MajorPOS.NOUN:
                token.pos = MinorPOS.NN
                self._seed_noun_attributes(token)
            token.is_possessive = True

        # 5) case; capitals past the first word mark a proper noun
        before = word
        word = word.lower()
        if word != before and not is_first:
            token.pos = MinorPOS.NNP
            self._seed_noun_attributes(token)
            token.is_proper = True

        # 6) plural
        if token.major is MajorPOS.NOUN and token.is_proper is False:
            before = word
            word = singularize(word, self.singularizer)
            if word != before:
                token.is_plural = True

        token.normalized_word = word

        # 7) "the in crowd" is rare; treat "in" as a preposition
        if word == "in" and token.major is MajorPOS.ADJECTIVE:
            token.pos = MinorPOS.IN

        # 8) fixed overrides
        if word in _LEXICAL_OVERRIDES:
            token.pos = _LEXICAL_OVERRIDES[word]
        elif word == "will" and token.major is not MajorPOS.NOUN:
            token.pos = MinorPOS.MD
        if word in _SYMBOL_OVERRIDES:
            token.pos = _SYMBOL_OVERRIDES[word]

    @staticmethod
    def _seed_noun_attributes(token: Token) -> None:
        if token.is_possessive is None:
            token.is_possessive = False
        if token.is_proper is None:
            token.is_proper = False
        if token.is_plural is None:
            token.is_plural = False
        if token.pos in _POSSESSIVE_TAGS:
            token.is_possessive = True
        if token.pos in _PROPER_TAGS:
            token.is_proper = True
        if token.pos in _PLURAL_TAGS:
            token.is_plural = True

    # ------------------------------------------------------------------
    # Second pass: wh- words
    # ------------------------------------------------------------------
    @staticmethod
    def _correct_wh_word(token: Token) -> None:
        word = token.normalized_word
        if word in _WH_DETERMINERS:
            if token.pos is MinorPOS.DT:
                token.pos = MinorPOS.WDT
            elif token.pos in (MinorPOS.PRP, MinorPOS.PP):
                token.pos = MinorPOS.WP
        elif word in _WH_PRONOUNS:
            token.pos = MinorPOS.WP
        elif word == "whose":
            # the only possessive wh-pronoun
            token.pos = MinorPOS.WPO
            token.is_proper = False
            token.is_possessive = True
        elif word in _WH_ADVERBS:
            token.pos = MinorPOS.WRB
