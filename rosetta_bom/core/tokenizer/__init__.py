"""
Vocabulary based tokenization of component identifiers.

Encoding splits identifiers on separator characters and maps the pieces to
vocabulary ids. Decoding maps ids back and rebuilds a best-effort string from
an ordered table of separator rules.
"""

from __future__ import annotations

from .reconstruction import (
    DEFAULT_ARTIFACT_TOKENS,
    DEFAULT_GROUP_MARKERS,
    DEFAULT_SEPARATOR_RULES,
    SeparatorRule,
    build_separator_rules,
    choose_separator,
    reconstruct_text,
)
from .tokenizer import (
    ComponentTokenizer,
    DecodedResult,
    EncodedSequence,
    RoundTripReport,
    TokenizerFailure,
    TokenizerMetadata,
)
from .vocabulary import SPECIAL_TOKENS, UNKNOWN_TOKEN, Vocabulary, split_tokens

__all__ = [
    "ComponentTokenizer",
    "DEFAULT_ARTIFACT_TOKENS",
    "DEFAULT_GROUP_MARKERS",
    "DEFAULT_SEPARATOR_RULES",
    "DecodedResult",
    "EncodedSequence",
    "RoundTripReport",
    "SPECIAL_TOKENS",
    "SeparatorRule",
    "TokenizerFailure",
    "TokenizerMetadata",
    "UNKNOWN_TOKEN",
    "Vocabulary",
    "build_separator_rules",
    "choose_separator",
    "reconstruct_text",
    "split_tokens",
]
