from __future__ import annotations

from typing import Sequence


class RosettaError(Exception):
    """Base class for all errors raised by rosetta_bom."""


class IdentityError(RosettaError):
    """Raised when a component identifier cannot be resolved."""


class InvalidInputError(IdentityError):
    """Raised when the identifier is not a non-empty string."""


class UnsupportedFormatError(IdentityError):
    """Raised when no extractor is registered for a detected format."""


class MalformedIdentifierError(IdentityError):
    """Raised when extraction leaves required fields empty."""

    def __init__(self, value: str, missing_fields: Sequence[str]) -> None:
        self.value = value
        self.missing_fields = list(missing_fields)
        fields = ", ".join(self.missing_fields)
        super().__init__(f"Malformed identifier {value!r}: missing {fields}")


class TokenizerError(RosettaError):
    """Raised by the vocabulary and tokenizer layer."""


class NotTrainedError(TokenizerError):
    """Raised when the tokenizer is used before a vocabulary is trained or loaded."""


class VocabularyFormatError(TokenizerError):
    """Raised when a persisted vocabulary document cannot be restored."""
