"""
Component identity domain logic.

This module handles:
- Format detection (Basic, Maven, PURL)
- Per-format extraction into canonical records
- Cross-format comparison and batch extraction

All logic is pure business logic with no I/O dependencies.
"""

from __future__ import annotations

from .detection import detect_format
from .extractors import DEFAULT_EXTRACTORS, extract_basic, extract_maven, extract_purl
from .models import (
    CanonicalIdentifier,
    ExtractionFailure,
    FormatTag,
    MatchOutcome,
    ValidationReport,
)
from .resolver import IdentityResolver

__all__ = [
    "CanonicalIdentifier",
    "DEFAULT_EXTRACTORS",
    "ExtractionFailure",
    "FormatTag",
    "IdentityResolver",
    "MatchOutcome",
    "ValidationReport",
    "detect_format",
    "extract_basic",
    "extract_maven",
    "extract_purl",
]
