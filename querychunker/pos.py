"""
pos.py

Part-of-speech vocabulary for QueryChunker.

Two levels are used throughout the pipeline:

- MinorPOS: the fine-grained tag every token carries (VBD, NNP, WDT, ...).
- MajorPOS: the coarse category a minor tag belongs to (VERB, NOUN, ...).

Every heuristic in the normalizer and chunker branches on the major
category, so :func:`major_pos` is total: each MinorPOS member belongs to
exactly one MajorPOS, and anything that is not a MinorPOS raises
:class:`PartOfSpeechError` instead of yielding ``None``.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Union


class PartOfSpeechError(ValueError):
    """Raised when a tag cannot be classified."""


class MajorPOS(Enum):
    VERB = "VERB"
    ADJECTIVE = "ADJECTIVE"
    ADVERB = "ADVERB"
    NOUN = "NOUN"
    GLUE = "GLUE"
    VALUE = "VALUE"
    WHWORD = "WHWORD"
    SYMBOL = "SYMBOL"


class MinorPOS(Enum):
    # Verb
    VB = "VB"        # generic verb (eat)
    VBD = "VBD"      # past tense (ate)
    VBN = "VBN"      # past participle (eaten)
    VBP = "VBP"      # infinitive (eat)
    VBZ = "VBZ"      # present tense (eats)
    VBF = "VBF"      # future tense (eat)
    CP = "CP"        # copula (is, was, were)
    VBG = "VBG"      # gerund verb (eating)
    # Adjective
    JJ = "JJ"
    JJR = "JJR"
    JJS = "JJS"
    # Adverb
    RB = "RB"
    RBR = "RBR"
    RBS = "RBS"
    # Noun
    NN = "NN"        # singular noun (dog)
    NNPA = "NNPA"    # acronym (FBI)
    NNAB = "NNAB"    # abbreviation (jr.)
    NG = "NG"        # gerund used as a noun (winning)
    PRP = "PRP"      # personal pronoun (I, you, she)
    PP = "PP"        # possessive pronoun (my, one's)
    NNP = "NNP"      # singular proper noun (Smith)
    NNPS = "NNPS"    # plural proper noun (Smiths)
    NNO = "NNO"      # possessive noun (people's)
    NNS = "NNS"      # plural noun (people)
    NNA = "NNA"
    # Glue
    FW = "FW"        # foreign word (voila)
    IN = "IN"        # preposition (of, in, by)
    MD = "MD"        # modal (can, should)
    CC = "CC"        # coordinating conjunction (and, or)
    DT = "DT"        # determiner (the, some)
    UH = "UH"        # interjection (oh)
    EX = "EX"        # existential there
    # Value
    CD = "CD"        # cardinal (one, first)
    DA = "DA"        # date (june 5th 1998)
    NU = "NU"        # number (100)
    # Symbol
    LT = "LT"        # <
    GT = "GT"        # >
    SEP = "SEP"      # ,
    # Wh- word
    WDT = "WDT"      # wh-determiner (which)
    WP = "WP"        # wh-pronoun (who, what)
    WPO = "WPO"      # possessive wh-pronoun (whose)
    WRB = "WRB"      # wh-adverb (where, why)

    @classmethod
    def from_tag(cls, tag: str) -> "MinorPOS":
        """Look up a minor tag by name, failing loudly on unknown tags."""
        try:
            return cls[tag]
        except KeyError:
            raise PartOfSpeechError(f"Unknown part-of-speech tag: {tag!r}") from None


_MAJOR_MEMBERS: Dict[MajorPOS, FrozenSet[MinorPOS]] = {
    MajorPOS.VERB: frozenset({
        MinorPOS.VB, MinorPOS.VBD, MinorPOS.VBN, MinorPOS.VBP,
        MinorPOS.VBZ, MinorPOS.VBF, MinorPOS.CP, MinorPOS.VBG,
    }),
    MajorPOS.ADJECTIVE: frozenset({MinorPOS.JJ, MinorPOS.JJR, MinorPOS.JJS}),
    MajorPOS.ADVERB: frozenset({MinorPOS.RB, MinorPOS.RBR, MinorPOS.RBS}),
    MajorPOS.NOUN: frozenset({
        MinorPOS.NN, MinorPOS.NNA, MinorPOS.NNPA, MinorPOS.NNAB,
        MinorPOS.NNP, MinorPOS.NNPS, MinorPOS.NNS, MinorPOS.NNO,
        MinorPOS.NG, MinorPOS.PRP, MinorPOS.PP,
    }),
    MajorPOS.GLUE: frozenset({
        MinorPOS.FW, MinorPOS.IN, MinorPOS.MD, MinorPOS.CC,
        MinorPOS.DT, MinorPOS.UH, MinorPOS.EX,
    }),
    MajorPOS.VALUE: frozenset({MinorPOS.CD, MinorPOS.DA, MinorPOS.NU}),
    MajorPOS.WHWORD: frozenset({MinorPOS.WDT, MinorPOS.WP, MinorPOS.WPO, MinorPOS.WRB}),
    MajorPOS.SYMBOL: frozenset({MinorPOS.LT, MinorPOS.GT, MinorPOS.SEP}),
}

# Inverted once at import time; the check below keeps the table total.
MINOR_TO_MAJOR: Dict[MinorPOS, MajorPOS] = {
    minor: major
    for major, members in _MAJOR_MEMBERS.items()
    for minor in members
}

_unmapped = set(MinorPOS) - set(MINOR_TO_MAJOR)
if _unmapped or sum(len(m) for m in _MAJOR_MEMBERS.values()) != len(MinorPOS):
    raise PartOfSpeechError(
        f"Minor tags must map to exactly one major category; unmapped: "
        f"{sorted(t.value for t in _unmapped)}"
    )


def major_pos(minor: Union[MinorPOS, str]) -> MajorPOS:
    """
    Return the major category for a minor tag.

    Strings are accepted for convenience and resolved with
    :meth:`MinorPOS.from_tag`. Raises :class:`PartOfSpeechError` for
    anything outside the minor tag set.
    """
    if isinstance(minor, str):
        minor = MinorPOS.from_tag(minor)
    try:
        return MINOR_TO_MAJOR[minor]
    except (KeyError, TypeError):
        raise PartOfSpeechError(f"No major category for {minor!r}") from None


def is_noun(minor: MinorPOS) -> bool:
    return major_pos(minor) is MajorPOS.NOUN
