"""
Identity resolution across identifier formats.

The resolver ties format detection to the registered extractors and exposes
the cross-format equality used to reconcile SBOM entries.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Union

from ...errors import (
    IdentityError,
    InvalidInputError,
    MalformedIdentifierError,
    UnsupportedFormatError,
)
from .detection import detect_format
from .extractors import DEFAULT_EXTRACTORS, Extractor
from .models import (
    CanonicalIdentifier,
    ExtractionFailure,
    FormatTag,
    MatchOutcome,
    ValidationReport,
)

logger = logging.getLogger(__name__)

BatchItem = Union[CanonicalIdentifier, ExtractionFailure]


class IdentityResolver:
    """
    Resolves raw identifiers into canonical records and compares them.

    Extractors are injected per format so callers can register additional
    ones or override the defaults in tests.
    """

    def __init__(self, extractors: Optional[Mapping[FormatTag, Extractor]] = None) -> None:
        self._extractors: dict[FormatTag, Extractor] = dict(
            DEFAULT_EXTRACTORS if extractors is None else extractors
        )

    @property
    def supported_formats(self) -> list[str]:
        return [tag.value for tag in self._extractors]

    def extract_component(self, value: object) -> CanonicalIdentifier:
        """
        Extract the canonical record for a single identifier.

        Raises:
            InvalidInputError: value is empty or not a string
            UnsupportedFormatError: no extractor registered for the detected format
            MalformedIdentifierError: component or version came out empty
            IdentityError: the extractor itself raised
        """
        if not isinstance(value, str) or not value:
            raise InvalidInputError("Input must be a non-empty string")

        tag = detect_format(value)
        extractor = self._extractors.get(tag)
        if extractor is None:
            raise UnsupportedFormatError(f"Unsupported format: {tag.value}")

        try:
            identifier = extractor(value)
        except IdentityError:
            raise
        except Exception as exc:
            raise IdentityError(f"{tag.value} extractor failed on {value!r}: {exc}") from exc
        missing = identifier.missing_fields()
        if missing:
            raise MalformedIdentifierError(value, missing)
        return identifier

    def validate(self, value: object) -> ValidationReport:
        try:
            identifier = self.extract_component(value)
        except MalformedIdentifierError as exc:
            return ValidationReport(
                value=value,
                ok=False,
                format=detect_format(exc.value),
                missing_fields=tuple(exc.missing_fields),
                error=str(exc),
            )
        except IdentityError as exc:
            return ValidationReport(value=value, ok=False, error=str(exc))
        return ValidationReport(value=value, ok=True, format=identifier.format)

    def compare(self, first: object, second: object) -> MatchOutcome:
        try:
            left = self.extract_component(first)
            right = self.extract_component(second)
        except IdentityError as exc:
            logger.debug("Cannot compare %r and %r: %s", first, second, exc)
            return MatchOutcome.UNPARSABLE
        if left.same_identity(right):
            return MatchOutcome.SAME
        return MatchOutcome.DIFFERENT

    def same_component(self, first: object, second: object) -> bool:
        # Unparsable input is reported as "not the same".
        return self.compare(first, second) is MatchOutcome.SAME

    def extract_batch(self, values: Iterable[object]) -> list[BatchItem]:
        results: list[BatchItem] = []
        for value in values:
            try:
                results.append(self.extract_component(value))
            except IdentityError as exc:
                logger.debug("Skipping identifier %r: %s", value, exc)
                results.append(
                    ExtractionFailure(
                        input=value,
                        error=str(exc),
                        error_type=type(exc).__name__,
                    )
                )
        return results
