"""
debug.py

Plain-text renderings of tokens and noun groups, used by verbose parsing
and the smoke test.
"""

from __future__ import annotations

from typing import Iterable

from .chunker import NounGroup
from .tokens import Token

_RULE = "-" * 40


def token_to_string(token: Token) -> str:
    flags = ""
    if token.is_possessive:
        flags += "possessive "
    if token.is_proper:
        flags += "proper "
    if token.is_plural:
        flags += "plural "
    return (
        f"{token.original_word} | {token.normalized_word} | "
        f"{token.major.value} | {token.pos.value} | {flags}"
    )


def token_array_to_string(tokens: Iterable[Token]) -> str:
    return "\n".join(token_to_string(t) for t in tokens)


def noun_group_to_string(group: NounGroup) -> str:
    nouns = " ".join(t.normalized_word for t in group.noun)
    children = " ".join(t.normalized_word for t in group.children)
    return f"{nouns} \n  {children}"


def noun_group_array_to_string(groups: Iterable[NounGroup]) -> str:
    body = f"\n{_RULE}\n".join(noun_group_to_string(g) for g in groups)
    return f"{_RULE}\nNOUN GROUPS\n{_RULE}\n{body}\n{_RULE}\n"
