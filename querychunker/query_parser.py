"""
query_parser.py

QueryParser: turn a natural-language question into normalized, tagged
tokens and noun groups.

Pipeline
--------
1. Preprocess the query string (a space before every comma so commas are
   tagged as separators).
2. Tag the first sentence (spaCy or NLTK backend, or any injected tagger).
3. Normalize the tokens in place (see :mod:`querychunker.normalizer`).
4. Chunk the tokens into noun groups (see :mod:`querychunker.chunker`).

Quick usage
-----------
    from querychunker import QueryParser

    parser = QueryParser(method="spacy", spacy_model="en_core_web_sm")
    result = parser.parse("What is the average elevation of the highest points in each state?")

    for group in result.noun_groups:
        print(group.begin, group.end, group.text)

    print(result.tokens_df())

Relationship finding, prepositional-phrase attachment and query DSL
generation are later stages; they consume ``ParseResult.tokens`` and
``ParseResult.noun_groups`` and are not part of this package.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import pandas as pd

from .chunker import NounGroup, NounGroupChunker
from .debug import noun_group_array_to_string, token_array_to_string
from .normalizer import TokenNormalizer
from .singularizer import Singularizer, WordNetSingularizer
from .tagger import Tagger, build_tagger, tokens_from_tagged
from .tokens import Token


def preprocess_query_string(query: str) -> str:
    """Insert a space before every comma."""
    return query.replace(",", " ,")


@dataclass
class ParseResult:
    """
    Output of :meth:`QueryParser.parse`.

    Attributes
    ----------
    query:
        The query as passed in (before preprocessing).
    tokens:
        Normalized tokens of the first sentence.
    noun_groups:
        Noun groups in token order, proper-noun runs already merged.
        ``begin``/``end`` index into ``tokens``.
    claims:
        Token index → ``group_id`` of the noun group holding that token.
    config:
        Backend settings used for this parse.
    """

    query: str
    tokens: List[Token]
    noun_groups: List[NounGroup]
    claims: Dict[int, int] = field(default_factory=dict)
    config: Dict[str, Any] = field(default_factory=dict)

    @property
    def used(self) -> List[bool]:
        return [i in self.claims for i in range(len(self.tokens))]

    def unused_tokens(self) -> List[Token]:
        return [t for i, t in enumerate(self.tokens) if i not in self.claims]

    def tokens_df(self) -> pd.DataFrame:
        """One row per token, with tags, noun attributes and owning group."""
        rows = [
            {
                "index": i,
                "original_word": t.original_word,
                "normalized_word": t.normalized_word,
                "major_pos": t.major.value,
                "minor_pos": t.pos.value,
                "is_possessive": t.is_possessive,
                "is_proper": t.is_proper,
                "is_plural": t.is_plural,
                "used": i in self.claims,
                "group_id": self.claims.get(i),
            }
            for i, t in enumerate(self.tokens)
        ]
        return pd.DataFrame(
            rows,
            columns=[
                "index", "original_word", "normalized_word", "major_pos",
                "minor_pos", "is_possessive", "is_proper", "is_plural",
                "used", "group_id",
            ],
        )

    def noun_groups_df(self) -> pd.DataFrame:
        """One row per noun group."""
        rows = [
            {
                "group_id": g.group_id,
                "noun": g.text,
                "children": " ".join(t.normalized_word for t in g.children),
                "begin": g.begin,
                "end": g.end,
                "is_possessive": g.is_possessive,
                "is_proper": g.is_proper,
                "is_plural": g.is_plural,
            }
            for g in self.noun_groups
        ]
        return pd.DataFrame(
            rows,
            columns=[
                "group_id", "noun", "children", "begin", "end",
                "is_possessive", "is_proper", "is_plural",
            ],
        )


class QueryParser:
    """
    Tokenizing and noun-group chunking for natural-language queries.

    Each call to :meth:`parse` builds its own tokens and groups, so one
    parser can be reused (and shared) freely; the only cached state is the
    lazily loaded tagging/singularization backends.
    """

    def __init__(
        self,
        method: str = "spacy",
        spacy_model: str = "en_core_web_sm",
        tagger: Optional[Tagger] = None,
        singularizer: Optional[Singularizer] = None,
        logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        Parameters
        ----------
        method:
            Either ``"spacy"`` (default) or ``"nltk"``; selects the built-in
            tagger when ``tagger`` is not given.
        spacy_model:
            Name of the spaCy model to use if ``method="spacy"``.
        tagger:
            Any object with ``tag(text) -> [(surface, minor_tag), ...]``.
            Overrides ``method``.
        singularizer:
            Any object with ``singular(word) -> word``. Defaults to the
            WordNet lemmatizer.
        logger:
            Optional callback used when ``verbose=True`` in :meth:`parse`.
            Falls back to ``print``.
        """
        self.method = method.lower()
        self.spacy_model = spacy_model
        self.logger = logger

        if tagger is None:
            tagger = build_tagger(self.method, spacy_model=spacy_model)
        self.tagger = tagger
        self.singularizer = singularizer if singularizer is not None else WordNetSingularizer()

        self.normalizer = TokenNormalizer(self.singularizer)
        self.chunker = NounGroupChunker()

    # ------------------------------------------------------------------
    # Internal helper – unified logging
    # ------------------------------------------------------------------
    def _log(self, message: str, verbose: bool = True) -> None:
        if not verbose:
            return
        if self.logger is not None:
            self.logger(message)
        else:
            print(message)

    @property
    def config(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "spacy_model": self.spacy_model,
            "tagger": type(self.tagger).__name__,
            "singularizer": type(self.singularizer).__name__,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get_tokens(self, query: str) -> List[Token]:
        """Preprocess, tag and normalize ``query``; no chunking."""
        text = preprocess_query_string(query)
        if not text.strip():
            return []
        tokens = tokens_from_tagged(self.tagger.tag(text))
        return self.normalizer.normalize(tokens)

    def parse(self, query: str, verbose: bool = False) -> ParseResult:
        """
        Parse a query into normalized tokens and noun groups.

        Malformed or ungrammatical input never aborts the parse; it just
        yields fewer groups. An empty query gives an empty result.
        """
        tokens = self.get_tokens(query)
        chunked = self.chunker.chunk(tokens)
        result = ParseResult(
            query=query,
            tokens=tokens,
            noun_groups=chunked.noun_groups,
            claims=chunked.claims,
            config=self.config,
        )

        self._log(noun_group_array_to_string(result.noun_groups), verbose)
        self._log(token_array_to_string(result.unused_tokens()), verbose)
        return result
