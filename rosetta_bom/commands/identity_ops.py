from __future__ import annotations

from typing import Any, Sequence

from ..core.identity import IdentityResolver, MatchOutcome


def extract(resolver: IdentityResolver, values: Sequence[str]) -> list[dict[str, Any]]:
    return [item.to_record() for item in resolver.extract_batch(values)]


def compare(resolver: IdentityResolver, first: str, second: str) -> dict[str, Any]:
    outcome = resolver.compare(first, second)
    return {
        "first": first,
        "second": second,
        "outcome": outcome.value,
        "same": outcome is MatchOutcome.SAME,
    }
