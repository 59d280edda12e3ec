"""
Per-format extractors.

Each extractor assumes its input already matched the corresponding format
and returns a best-effort CanonicalIdentifier. Empty fields are left for the
resolver to reject.
"""

from __future__ import annotations

from typing import Callable, Mapping

from .models import CanonicalIdentifier, FormatTag

Extractor = Callable[[str], CanonicalIdentifier]


def extract_basic(value: str) -> CanonicalIdentifier:
    # "log4j-core-2.14.1" -> ("log4j-core", "2.14.1")
    parts = value.split("-")
    return CanonicalIdentifier(
        component="-".join(parts[:-1]),
        version=parts[-1],
        format=FormatTag.BASIC,
        original_input=value,
    )


def extract_maven(value: str) -> CanonicalIdentifier:
    # group:artifact:version, group is always the first segment
    parts = value.split(":")
    component = parts[-2] if len(parts) >= 2 else ""
    return CanonicalIdentifier(
        component=component,
        version=parts[-1],
        format=FormatTag.MAVEN,
        original_input=value,
        extras={"group_id": parts[0]},
    )


def extract_purl(value: str) -> CanonicalIdentifier:
    segments = value.split("/")
    component, _, version = segments[-1].partition("@")

    extras: dict[str, str] = {}
    scheme = segments[0].split(":")
    if len(scheme) > 1:
        extras["ecosystem"] = scheme[1]
    if len(segments) > 2:
        extras["namespace"] = segments[-2]

    return CanonicalIdentifier(
        component=component,
        version=version,
        format=FormatTag.PURL,
        original_input=value,
        extras=extras,
    )


DEFAULT_EXTRACTORS: Mapping[FormatTag, Extractor] = {
    FormatTag.BASIC: extract_basic,
    FormatTag.MAVEN: extract_maven,
    FormatTag.PURL: extract_purl,
}
