"""
singularizer.py

Word singularization used by the token normalizer.

The normalizer only depends on the narrow :class:`Singularizer` protocol
(``singular(word) -> word``), so tests and callers can swap in any
deterministic implementation. The default backend lemmatizes nouns with
NLTK's WordNet lemmatizer.
"""

from __future__ import annotations

from typing import FrozenSet, Optional, Protocol


# Words the singularizer gets wrong; returned as-is.
PASS_THROUGH_WORDS: FrozenSet[str] = frozenset({"his", "united states"})


class Singularizer(Protocol):
    def singular(self, word: str) -> str:
        ...


class WordNetSingularizer:
    """
    Singularize nouns with NLTK's WordNet lemmatizer.

    The lemmatizer (and the ``wordnet`` corpus it needs) is loaded on first
    use so that importing the package stays cheap.
    """

    def __init__(self) -> None:
        self._lemmatizer = None

    def singular(self, word: str) -> str:
        if self._lemmatizer is None:
            self._lemmatizer = self._load_lemmatizer()
        return self._lemmatizer.lemmatize(word, pos="n")

    @staticmethod
    def _load_lemmatizer():
        """
        Load WordNetLemmatizer, downloading the ``wordnet`` corpus quietly
        if it is not available yet.
        """
        import nltk
        from nltk.stem import WordNetLemmatizer

        try:
            nltk.data.find("corpora/wordnet")
        except LookupError:
            nltk.download("wordnet", quiet=True)
            nltk.download("omw-1.4", quiet=True)
        return WordNetLemmatizer()


def singularize(word: str, singularizer: Optional[Singularizer]) -> str:
    """
    Return the singular form of ``word``.

    Empty strings, symbols and numbers (anything without a letter) are
    returned unchanged, as are the entries of :data:`PASS_THROUGH_WORDS`.
    """
    if singularizer is None or word in PASS_THROUGH_WORDS:
        return word
    if not any(ch.isalpha() for ch in word):
        return word
    return singularizer.singular(word)
