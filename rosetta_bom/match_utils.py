from __future__ import annotations


def positional_similarity(a: str, b: str) -> float:
    """
    Share of characters that match at the same position.

    Only the overlapping prefix is compared and the count is divided by the
    longer length, so a single leading insertion drags the score down.
    """
    if a == b:
        return 1.0
    longest = max(len(a), len(b))
    matches = sum(1 for left, right in zip(a, b) if left == right)
    return matches / longest


def is_numeric_token(token: str) -> bool:
    return token.isascii() and token.isdigit()
