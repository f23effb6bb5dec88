"""
tagger.py

Tagging backends and the tagger adapter for QueryChunker.

Main pieces
-----------
- :class:`Tagger` protocol: ``tag(text) -> [(surface, minor_tag), ...]`` for
  the *first sentence* of ``text``. Anything after the first sentence is
  dropped on purpose: a query is a single question.
- :class:`SpacyTagger` / :class:`NltkTagger`: Penn-Treebank taggers whose
  output is glued (possessives, sentence punctuation) and converted to the
  minor tag set understood by the rest of the pipeline.
- :func:`tokens_from_tagged`: the adapter turning ``(surface, tag)`` pairs
  into :class:`Token` records.

Quick usage
-----------
    from querychunker.tagger import build_tagger, tokens_from_tagged

    tagger = build_tagger("spacy", spacy_model="en_core_web_sm")
    tokens = tokens_from_tagged(tagger.tag("Who had the most sales last year?"))
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Protocol, Sequence, Tuple

from .pos import MinorPOS, PartOfSpeechError
from .tokens import Token


TaggedWord = Tuple[str, str]


class Tagger(Protocol):
    def tag(self, text: str) -> List[TaggedWord]:
        ...


# Penn Treebank (spaCy ``token.tag_`` / NLTK PerceptronTagger) → minor tag.
PENN_TO_MINOR: Dict[str, str] = {
    # nouns
    "NN": "NN", "NNS": "NNS", "NNP": "NNP", "NNPS": "NNPS",
    "PRP": "PRP", "PRP$": "PP",
    # verbs
    "VB": "VB", "VBD": "VBD", "VBG": "VBG", "VBN": "VBN",
    "VBP": "VBP", "VBZ": "VBZ",
    # adjectives / adverbs
    "JJ": "JJ", "JJR": "JJR", "JJS": "JJS", "AFX": "JJ",
    "RB": "RB", "RBR": "RBR", "RBS": "RBS", "RP": "RB",
    # glue
    "DT": "DT", "PDT": "DT", "IN": "IN", "TO": "IN",
    "CC": "CC", "MD": "MD", "UH": "UH", "EX": "EX",
    "FW": "FW", "XX": "FW",
    "ADD": "NN",  # emails and URLs behave like names in a query
    # values
    "CD": "CD", "LS": "CD",
    # wh- words
    "WDT": "WDT", "WP": "WP", "WP$": "WPO", "WRB": "WRB",
    # punctuation and symbols
    ",": "SEP", ":": "SEP", ".": "SEP", "``": "SEP", "''": "SEP",
    '"': "SEP", "-LRB-": "SEP", "-RRB-": "SEP", "(": "SEP", ")": "SEP",
    "HYPH": "SEP", "NFP": "SEP", "SYM": "SEP", "$": "SEP", "#": "SEP",
    "POS": "SEP",
}

_PRONOUN_TAGS: FrozenSet[str] = frozenset({"PRP", "PRP$", "WP", "WP$"})
_BARE_APOSTROPHES: FrozenSet[str] = frozenset({"'", "’"})
_SENTENCE_PUNCTUATION: FrozenSet[str] = frozenset({".", "?", "!"})


def penn_to_minor(tag: str) -> str:
    """Convert a Penn Treebank tag to a minor tag name, failing on unknown tags."""
    try:
        return PENN_TO_MINOR[tag]
    except KeyError:
        raise PartOfSpeechError(f"No minor tag for Penn tag {tag!r}") from None


def tokens_from_tagged(tagged: Iterable[TaggedWord]) -> List[Token]:
    """
    Tagger adapter: turn ``(surface, tag)`` pairs into Token records.

    ``normalized_word`` starts out equal to the surface text; noun
    attributes are initialised to False for noun tags. Tags outside the
    minor tag set raise :class:`PartOfSpeechError`.
    """
    return [Token.from_tagged(word, MinorPOS.from_tag(tag)) for word, tag in tagged]


# ---------------------------------------------------------------------------
# Token gluing shared by both Penn backends
# ---------------------------------------------------------------------------
def merge_possessives(tokens: List[str], tags: List[str]) -> Tuple[List[str], List[str]]:
    """
    Merge [NOUN, 's] or [NOUN, '] into a single possessive token.

    * Do NOT merge when the first token is a pronoun (PRP, PRP$, WP, WP$)
      so that forms like "she's" and "who's" remain separate.
    * An 's is only glued when tagged POS; contractions ("there's",
      "that's") are tagged VBZ and stay separate.
    * The merged token keeps the tag of the word, not of the ending.
    """
    merged_tok: List[str] = []
    merged_tag: List[str] = []
    i = 0
    while i < len(tokens):
        if (i + 1 < len(tokens)
                and (tags[i + 1] == "POS" or tokens[i + 1] in _BARE_APOSTROPHES)
                and tags[i] not in _PRONOUN_TAGS):
            merged_tok.append(tokens[i] + tokens[i + 1])    # Smith + 's → Smith's
            merged_tag.append(tags[i])
            i += 2
        else:
            merged_tok.append(tokens[i])
            merged_tag.append(tags[i])
            i += 1
    return merged_tok, merged_tag


def attach_sentence_punctuation(tokens: List[str], tags: List[str]) -> Tuple[List[str], List[str]]:
    """
    Glue standalone ``.``, ``?`` and ``!`` onto the preceding word.

    The normalizer strips these characters from the word itself, so
    "year ?" becomes the single token "year?". A leading punctuation token
    has nothing to attach to and is kept.
    """
    out_tok: List[str] = []
    out_tag: List[str] = []
    for word, tag in zip(tokens, tags):
        if out_tok and word in _SENTENCE_PUNCTUATION:
            out_tok[-1] = out_tok[-1] + word
            continue
        out_tok.append(word)
        out_tag.append(tag)
    return out_tok, out_tag


def _finish_penn_sentence(tokens: Sequence[str], tags: Sequence[str]) -> List[TaggedWord]:
    pairs = [(w, t) for w, t in zip(tokens, tags) if w.strip() and t != "_SP"]
    words = [w for w, _ in pairs]
    penn = [t for _, t in pairs]
    words, penn = merge_possessives(words, penn)
    words, penn = attach_sentence_punctuation(words, penn)
    return [(w, penn_to_minor(t)) for w, t in zip(words, penn)]


# ---------------------------------------------------------------------------
# Backends
# ---------------------------------------------------------------------------
class SpacyTagger:
    """Tag the first sentence of a query with a spaCy pipeline."""

    def __init__(self, model_name: str = "en_core_web_sm", nlp=None) -> None:
        self.model_name = model_name
        self._nlp = nlp

    def tag(self, text: str) -> List[TaggedWord]:
        if self._nlp is None:
            self._nlp = self._load_spacy_model(self.model_name)
        doc = self._nlp(text)
        first = next(iter(doc.sents), None)
        if first is None:
            return []
        return _finish_penn_sentence(
            [token.text for token in first],
            [token.tag_ for token in first],
        )

    @staticmethod
    def _load_spacy_model(model_name: str):
        """
        Load a spaCy model, downloading it on-the-fly if necessary.
        """
        import subprocess
        import sys

        try:
            import spacy

            return spacy.load(model_name)
        except OSError:
            # Model not downloaded yet → auto-download.
            print(f"[SpacyTagger] spaCy model '{model_name}' not found. Downloading…")
            subprocess.run([sys.executable, "-m", "spacy", "download", model_name], check=True)
            import spacy

            return spacy.load(model_name)
        except ImportError as e:
            raise ImportError(
                "spaCy is required for method='spacy'. Install with 'pip install spacy'."
            ) from e


class NltkTagger:
    """Tag the first sentence of a query with NLTK's PerceptronTagger."""

    def __init__(self) -> None:
        self._tokenizer = None
        self._tagger = None

    def tag(self, text: str) -> List[TaggedWord]:
        import nltk

        if self._tagger is None:
            self._tokenizer, self._tagger = self._load_nltk_models()
        sentences = nltk.sent_tokenize(text)
        if not sentences:
            return []
        tagged = self._tagger.tag(self._tokenizer.tokenize(sentences[0]))
        return _finish_penn_sentence([w for w, _ in tagged], [t for _, t in tagged])

    @staticmethod
    def _load_nltk_models():
        """
        Load NLTK's tokenizer and PerceptronTagger.

        The minimal resources (punkt + averaged_perceptron_tagger) are
        downloaded quietly; both the legacy and the ``_tab``/``_eng``
        resource names are requested so old and new NLTK releases work.
        """
        import nltk

        from nltk.tag import PerceptronTagger
        from nltk.tokenize import TreebankWordTokenizer

        for resource in (
            "averaged_perceptron_tagger",
            "averaged_perceptron_tagger_eng",
            "punkt",
            "punkt_tab",
        ):
            nltk.download(resource, quiet=True)
        return TreebankWordTokenizer(), PerceptronTagger()


def build_tagger(method: str = "spacy", spacy_model: str = "en_core_web_sm") -> Tagger:
    method = method.lower()
    if method == "spacy":
        return SpacyTagger(spacy_model)
    if method == "nltk":
        return NltkTagger()
    raise ValueError("method must be 'spacy' or 'nltk'")
