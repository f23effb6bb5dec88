"""
chunker.py

Noun-group chunking over normalized tokens.

A noun group is smaller than a noun phrase: a head noun plus the
determiner/adjectives directly in front of it and, at most, one trailing
preposition. In "the yellow dog who lived in the town ran away from home"
the noun phrase "the yellow dog who lived in the town" holds two noun
groups, "the yellow dog" and "the town".

The chunker makes one left-to-right pass, then merges runs of adjacent
proper-noun groups ("Chris", "Steve", "Granger" → "Chris Steve Granger").

Tokens are never mutated here. Ownership is tracked in a claim map from
token index to the ``group_id`` of the group that holds it; tokens absent
from the map (verbs, stray prepositions, adverbs) stay unclaimed for later
stages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .pos import MajorPOS, MinorPOS
from .tokens import Token


@dataclass
class NounGroup:
    group_id: int
    noun: List[Token]                # head noun(s); more than one after a merge
    children: List[Token]            # determiners, adjectives, trailing preposition
    begin: int                       # first token index (inclusive)
    end: int                         # last token index (inclusive)
    is_possessive: bool = False
    is_proper: bool = False
    is_plural: bool = False
    subsumed: bool = False

    def __post_init__(self) -> None:
        if self.begin > self.end:
            raise ValueError(
                f"NounGroup {self.group_id}: begin ({self.begin}) > end ({self.end})"
            )

    @classmethod
    def seed(cls, group_id: int, token: Token, index: int) -> "NounGroup":
        return cls(
            group_id=group_id,
            noun=[token],
            children=[],
            begin=index,
            end=index,
            is_possessive=bool(token.is_possessive),
            is_proper=bool(token.is_proper),
            is_plural=bool(token.is_plural),
        )

    def absorb(self, other: "NounGroup") -> None:
        """Append ``other`` (the next contiguous group) and mark it subsumed."""
        self.noun.extend(other.noun)
        self.children.extend(other.children)
        self.end = other.end
        self.is_plural = self.is_plural or other.is_plural
        self.is_possessive = self.is_possessive or other.is_possessive
        other.subsumed = True

    @property
    def text(self) -> str:
        return " ".join(t.normalized_word for t in self.noun)


@dataclass
class ChunkResult:
    noun_groups: List[NounGroup]
    claims: Dict[int, int] = field(default_factory=dict)   # token index → group_id

    def is_claimed(self, index: int) -> bool:
        return index in self.claims


class NounGroupChunker:
    """
    Partition a normalized token sequence into noun groups.

    Seeding
    -------
    Every unclaimed noun token seeds a group. The group then:

    * searches left, down to the previous seed, for the nearest determiner
      and claims it together with everything between it and the noun;
    * claims the next token if it is a preposition (IN).

    The previous seed index bounds the left search so that a later group
    never reaches back past an earlier group's head noun.

    Merging
    -------
    Proper-noun groups whose ranges touch (``next.begin == current.end + 1``)
    are folded into the first group of the run; absorbed groups are marked
    ``subsumed`` and filtered out of the result.
    """

    def chunk(self, tokens: Sequence[Token]) -> ChunkResult:
        claims: Dict[int, int] = {}
        groups = self._find_noun_groups(tokens, claims)
        self._merge_proper_noun_groups(groups, claims)
        groups = [g for g in groups if not g.subsumed]
        return ChunkResult(noun_groups=groups, claims=claims)

    @staticmethod
    def _find_noun_groups(tokens: Sequence[Token], claims: Dict[int, int]) -> List[NounGroup]:
        groups: List[NounGroup] = []
        last_found_noun_ix = 0

        for i, token in enumerate(tokens):
            if i in claims or token.major is not MajorPOS.NOUN:
                continue

            group = NounGroup.seed(len(groups), token, i)
            claims[i] = group.group_id

            # Left: nearest determiner, and everything between it and the noun
            for j in range(i - 1, last_found_noun_ix - 1, -1):
                if tokens[j].pos is MinorPOS.DT:
                    group.begin = j
                    for k in range(j, group.end):
                        group.children.append(tokens[k])
                        claims[k] = group.group_id
                    break

            # Right: a single trailing preposition
            if i + 1 < len(tokens) and tokens[i + 1].pos is MinorPOS.IN:
                group.children.append(tokens[i + 1])
                claims[i + 1] = group.group_id
                group.end = i + 1

            groups.append(group)
            last_found_noun_ix = i

        return groups

    @staticmethod
    def _merge_proper_noun_groups(groups: List[NounGroup], claims: Dict[int, int]) -> None:
        current = None
        absorbed_by: Dict[int, int] = {}   # absorbed group_id → surviving group_id
        for group in (g for g in groups if g.is_proper):
            if current is not None and group.begin == current.end + 1:
                current.absorb(group)
                absorbed_by[group.group_id] = current.group_id
                continue
            current = group

        if absorbed_by:
            for index, owner in claims.items():
                claims[index] = absorbed_by.get(owner, owner)
