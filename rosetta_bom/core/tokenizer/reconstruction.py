"""
Separator reinsertion for decoded token sequences.

Tokenization throws away the original separators, so decoding has to guess
them from the shape of neighbouring tokens. The guess is driven by an ordered
rule table: the first rule whose predicate matches the (current, next) pair
decides the separator, with an empty string meaning "join directly".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from ...match_utils import is_numeric_token

DEFAULT_GROUP_MARKERS = ("org", "com", "io")
DEFAULT_ARTIFACT_TOKENS = ("core", "api", "boot", "databind", "lang3")
DEFAULT_SEPARATOR = "-"

LEADING_SEPARATORS = ("-", ".", ":")


@dataclass(frozen=True, slots=True)
class SeparatorRule:
    name: str
    applies: Callable[[str, str], bool]
    separator: str


def _next_starts_with_separator(current: str, following: str) -> bool:
    return following.startswith(LEADING_SEPARATORS)


def _version_dot_bridge(current: str, following: str) -> bool:
    if is_numeric_token(current) and following == ".":
        return True
    return current == "." and is_numeric_token(following)


def _numeric_pair(current: str, following: str) -> bool:
    return is_numeric_token(current) and is_numeric_token(following)


def build_separator_rules(
    group_markers: Iterable[str] = DEFAULT_GROUP_MARKERS,
    artifact_tokens: Iterable[str] = DEFAULT_ARTIFACT_TOKENS,
) -> tuple[SeparatorRule, ...]:
    markers = tuple(group_markers)
    artifacts = frozenset(artifact_tokens)

    def looks_like_group_id(current: str, following: str) -> bool:
        return any(marker in current for marker in markers)

    def looks_like_artifact(current: str, following: str) -> bool:
        return current in artifacts

    return (
        SeparatorRule("next_starts_with_separator", _next_starts_with_separator, ""),
        SeparatorRule("version_dot_bridge", _version_dot_bridge, ""),
        SeparatorRule("group_id_fragment", looks_like_group_id, ":"),
        SeparatorRule("artifact_name", looks_like_artifact, ":"),
        SeparatorRule("numeric_pair", _numeric_pair, "."),
    )


DEFAULT_SEPARATOR_RULES = build_separator_rules()


def choose_separator(
    current: str,
    following: str,
    rules: Sequence[SeparatorRule] = DEFAULT_SEPARATOR_RULES,
) -> str:
    for rule in rules:
        if rule.applies(current, following):
            return rule.separator
    return DEFAULT_SEPARATOR


def reconstruct_text(
    tokens: Sequence[str],
    rules: Sequence[SeparatorRule] = DEFAULT_SEPARATOR_RULES,
) -> str:
    if not tokens:
        return ""
    parts = [tokens[0]]
    for current, following in zip(tokens, tokens[1:]):
        parts.append(choose_separator(current, following, rules))
        parts.append(following)
    return "".join(parts)
