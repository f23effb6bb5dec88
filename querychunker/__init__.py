"""
QueryChunker

Tokenizing and noun-group chunking for natural-language queries.

High-level API
--------------
- QueryParser        → preprocess, tag, normalize and chunk a query
- ParseResult        → tokens, noun groups, claim map (+ pandas views)
- TokenNormalizer    → tag/surface corrections over tagger output
- NounGroupChunker   → determiner/preposition attachment + proper-noun merge
- Backends:
    * SpacyTagger, NltkTagger, build_tagger
    * WordNetSingularizer
"""

from importlib.metadata import PackageNotFoundError, version


from .pos import MajorPOS, MinorPOS, PartOfSpeechError, major_pos
from .tokens import Token
from .tagger import (
    Tagger,
    SpacyTagger,
    NltkTagger,
    build_tagger,
    tokens_from_tagged,
)
from .singularizer import Singularizer, WordNetSingularizer, singularize
from .normalizer import TokenNormalizer
from .chunker import ChunkResult, NounGroup, NounGroupChunker
from .query_parser import ParseResult, QueryParser, preprocess_query_string
from .debug import (
    token_to_string,
    token_array_to_string,
    noun_group_to_string,
    noun_group_array_to_string,
)


# ---------------------------------------------------------------------
# Runtime version (single source of truth = pyproject.toml)
# ---------------------------------------------------------------------
try:
    __version__ = version("querychunker")
except PackageNotFoundError:
    # Fallback when running directly from a clone without installation
    __version__ = "0.0.0"

__all__ = [
    "MajorPOS",
    "MinorPOS",
    "PartOfSpeechError",
    "major_pos",
    "Token",
    "Tagger",
    "SpacyTagger",
    "NltkTagger",
    "build_tagger",
    "tokens_from_tagged",
    "Singularizer",
    "WordNetSingularizer",
    "singularize",
    "TokenNormalizer",
    "ChunkResult",
    "NounGroup",
    "NounGroupChunker",
    "ParseResult",
    "QueryParser",
    "preprocess_query_string",
    "token_to_string",
    "token_array_to_string",
    "noun_group_to_string",
    "noun_group_array_to_string",
    "__version__",
]
