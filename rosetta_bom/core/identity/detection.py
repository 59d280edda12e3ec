from __future__ import annotations

from .models import FormatTag

PURL_PREFIX = "pkg"


def detect_format(value: str) -> FormatTag:
    """
    Classify a raw identifier by its surface syntax.

    Rules are checked in order and the first match wins:
    1. "pkg" prefix and an "@" anywhere -> PURL
    2. a ":" anywhere -> Maven
    3. anything else -> Basic

    A PURL-looking string without "@" still contains ":" and falls through to
    the Maven rule.
    """
    if value.startswith(PURL_PREFIX) and "@" in value:
        return FormatTag.PURL
    if ":" in value:
        return FormatTag.MAVEN
    return FormatTag.BASIC
