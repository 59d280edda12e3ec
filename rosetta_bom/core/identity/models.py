"""
Domain models for component identity.

These are pure data models with no dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class FormatTag(Enum):
    """Surface format of a raw component identifier."""
    BASIC = "basic"
    MAVEN = "maven"
    PURL = "PURL"


class MatchOutcome(Enum):
    """Result of comparing two identifiers."""
    SAME = "same"
    DIFFERENT = "different"
    UNPARSABLE = "unparsable"


@dataclass(frozen=True, slots=True)
class CanonicalIdentifier:
    """
    Normalized view of a component identifier.

    Example:
        "pkg:maven/org.apache.logging.log4j/log4j-core@2.14.1"
        - component: "log4j-core"
        - version: "2.14.1"
        - format: FormatTag.PURL
        - extras: {"ecosystem": "maven", "namespace": "org.apache.logging.log4j"}
    """
    component: str
    version: str
    format: FormatTag
    original_input: str
    extras: Mapping[str, str] = field(default_factory=dict, hash=False)
    """Format specific metadata (Maven group id, PURL ecosystem and namespace), read-only"""

    def __post_init__(self) -> None:
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    def same_identity(self, other: "CanonicalIdentifier") -> bool:
        return self.component == other.component and self.version == other.version

    def missing_fields(self) -> list[str]:
        missing = []
        if not self.component:
            missing.append("component")
        if not self.version:
            missing.append("version")
        return missing

    def to_record(self) -> dict[str, object]:
        return {
            "component": self.component,
            "version": self.version,
            "format": self.format.value,
            "original_input": self.original_input,
            "extras": dict(self.extras),
        }


@dataclass(frozen=True, slots=True)
class ExtractionFailure:
    """Inline error record produced by batch extraction."""
    input: object
    error: str
    error_type: str

    def to_record(self) -> dict[str, object]:
        return {
            "input": self.input,
            "error": self.error,
            "error_type": self.error_type,
        }


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Structured outcome of validating a single identifier."""
    value: object
    ok: bool
    format: Optional[FormatTag] = None
    missing_fields: tuple[str, ...] = ()
    error: Optional[str] = None
