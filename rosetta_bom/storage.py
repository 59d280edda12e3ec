"""
File-backed persistence for corpora, vocabularies and tokenizer bundles.

All documents are UTF-8 JSON. The in-memory layout lives in the core package;
this module only moves it to and from disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence

from .core.tokenizer import DEFAULT_SEPARATOR_RULES, ComponentTokenizer, SeparatorRule, Vocabulary
from .errors import VocabularyFormatError

logger = logging.getLogger(__name__)


def read_corpus(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _read_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except json.JSONDecodeError as exc:
        raise VocabularyFormatError(f"{path} is not valid JSON: {exc}") from exc


def _write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2, ensure_ascii=False)
    tmp_path.replace(path)


def save_vocabulary(vocabulary: Vocabulary, path: Path) -> None:
    _write_json(path, vocabulary.save())
    logger.info("Saved vocabulary (%d tokens) to %s", len(vocabulary), path)


def load_vocabulary(path: Path) -> Vocabulary:
    vocabulary = Vocabulary.from_dict(_read_json(path))
    logger.debug("Loaded vocabulary (%d tokens) from %s", len(vocabulary), path)
    return vocabulary


def save_tokenizer(tokenizer: ComponentTokenizer, path: Path) -> None:
    _write_json(path, tokenizer.save())
    logger.info("Saved tokenizer bundle to %s", path)


def load_tokenizer(
    path: Path,
    *,
    rules: Sequence[SeparatorRule] = DEFAULT_SEPARATOR_RULES,
) -> ComponentTokenizer:
    tokenizer = ComponentTokenizer.from_bundle(_read_json(path), rules=rules)
    logger.debug("Loaded tokenizer bundle from %s", path)
    return tokenizer
