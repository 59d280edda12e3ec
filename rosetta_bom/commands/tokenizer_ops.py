from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from ..core.tokenizer import ComponentTokenizer
from ..storage import read_corpus, save_tokenizer


def parse_id_list(raw: str) -> list[int]:
    try:
        values = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Expected a JSON array of ids, got {raw!r}") from exc
    if not isinstance(values, list) or not all(
        isinstance(value, int) and not isinstance(value, bool) for value in values
    ):
        raise ValueError(f"Expected a JSON array of integer ids, got {raw!r}")
    return values


def encode(tokenizer: ComponentTokenizer, text: str) -> dict[str, Any]:
    return tokenizer.encode(text).to_record()


def decode(tokenizer: ComponentTokenizer, raw_ids: str) -> dict[str, Any]:
    return tokenizer.decode(parse_id_list(raw_ids)).to_record()


def tokenize(tokenizer: ComponentTokenizer, text: str) -> list[str]:
    return tokenizer.encode(text).tokens


def round_trip(tokenizer: ComponentTokenizer, text: str) -> dict[str, Any]:
    return tokenizer.test_round_trip(text).to_record()


def stats(tokenizer: ComponentTokenizer) -> dict[str, Any]:
    return tokenizer.stats()


def train(
    tokenizer: ComponentTokenizer,
    *,
    corpus_path: Optional[Path],
    out: Path,
) -> dict[str, Any]:
    if corpus_path is None:
        raise ValueError("No corpus given; pass --corpus or set vocabulary.corpus_path")
    tokenizer.train(read_corpus(corpus_path))
    save_tokenizer(tokenizer, out)
    summary = tokenizer.stats()
    return {
        "corpus": str(corpus_path),
        "output": str(out),
        "total_tokens": summary["total_tokens"],
        "vocabulary_size": summary["vocabulary_size"],
    }
