"""
Shared fixtures: deterministic stand-ins for the tagging and
singularization backends, so no test needs a spaCy model or NLTK data.
"""

from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from querychunker import QueryParser, Token, TokenNormalizer, tokens_from_tagged


class LexiconTagger:
    """Whitespace tokenizer + dictionary lookup; unknown words get ``default``."""

    def __init__(self, lexicon: Optional[Dict[str, str]] = None, default: str = "NN") -> None:
        self.lexicon = lexicon or {}
        self.default = default
        self.calls: List[str] = []

    def tag(self, text: str) -> List[Tuple[str, str]]:
        self.calls.append(text)
        pairs = []
        for word in text.split():
            tag = self.lexicon.get(word, self.lexicon.get(word.lower(), self.default))
            pairs.append((word, tag))
        return pairs


class SuffixSingularizer:
    """Tiny English singularizer: -ies → -y, -oes → -o, -s → ''."""

    def singular(self, word: str) -> str:
        if word.endswith("ss") or len(word) <= 3:
            return word
        if word.endswith("ies") and len(word) > 4:
            return word[:-3] + "y"
        if word.endswith("oes"):
            return word[:-2]
        if word.endswith("s"):
            return word[:-1]
        return word


LEXICON: Dict[str, str] = {
    "the": "DT", "a": "DT", "each": "DT",
    "of": "IN", "in": "IN", "from": "IN", "with": "IN", "per": "IN",
    "and": "CC", "or": "CC",
    "is": "VBZ", "are": "VBP", "had": "VBD", "ran": "VB", "have": "VB", "do": "VBP",
    "away": "RB", "not": "RB",
    "yellow": "JJ", "most": "JJS", "last": "JJ", "average": "JJ", "highest": "JJS",
    "who": "WP", "what": "WP", "whose": "WP",
    ",": "SEP", "<": "SEP",
    "30": "CD",
    "Chris": "NNP", "Steve": "NNP", "Granger": "NNP",
    "Corey": "NNP", "Montella's": "NNP",
    "dogs": "NNS", "sales": "NNS", "eggs": "NNS", "points": "NNS", "Ages": "NNS",
    "salaries": "NNS", "Dishes": "NNS",
}


@pytest.fixture
def singularizer() -> SuffixSingularizer:
    return SuffixSingularizer()


@pytest.fixture
def normalizer(singularizer) -> TokenNormalizer:
    return TokenNormalizer(singularizer)


@pytest.fixture
def tagger() -> LexiconTagger:
    return LexiconTagger(LEXICON)


@pytest.fixture
def parser(tagger, singularizer) -> QueryParser:
    return QueryParser(tagger=tagger, singularizer=singularizer)


def make_tokens(pairs: Sequence[Tuple[str, str]]) -> List[Token]:
    return tokens_from_tagged(pairs)


@pytest.fixture
def normalize(normalizer):
    def _normalize(pairs: Sequence[Tuple[str, str]]) -> List[Token]:
        return normalizer.normalize(make_tokens(pairs))
    return _normalize
