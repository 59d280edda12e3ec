from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from ...errors import NotTrainedError, TokenizerError, VocabularyFormatError
from ...match_utils import positional_similarity
from .reconstruction import DEFAULT_SEPARATOR_RULES, SeparatorRule, reconstruct_text
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TokenizerMetadata:
    name: str = "RosettaBOM"
    version: str = "2.0.0"
    type: str = "cybersecurity-component-tokenizer"


@dataclass(slots=True)
class EncodedSequence:
    input: str
    tokens: list[str]
    ids: list[int]

    @property
    def length(self) -> int:
        return len(self.ids)

    def to_record(self) -> dict[str, Any]:
        return {
            "input": self.input,
            "tokens": list(self.tokens),
            "ids": list(self.ids),
            "length": self.length,
        }


@dataclass(slots=True)
class DecodedResult:
    ids: list[int]
    tokens: list[str]
    text: str
    """Heuristic reconstruction; not guaranteed to match the encoded input"""

    def to_record(self) -> dict[str, Any]:
        return {"ids": list(self.ids), "tokens": list(self.tokens), "text": self.text}


@dataclass(slots=True)
class RoundTripReport:
    original: str
    encoded: EncodedSequence
    decoded: DecodedResult
    success: bool
    similarity: float

    def to_record(self) -> dict[str, Any]:
        return {
            "original": self.original,
            "encoded": self.encoded.to_record(),
            "decoded": self.decoded.to_record(),
            "success": self.success,
            "similarity": self.similarity,
        }


@dataclass(frozen=True, slots=True)
class TokenizerFailure:
    """Inline error record for isolated batch items."""
    input: object
    error: str
    error_type: str

    def to_record(self) -> dict[str, Any]:
        return {"input": self.input, "error": self.error, "error_type": self.error_type}


class ComponentTokenizer:
    """
    Encodes component identifiers to vocabulary ids and back.

    Decoding is lossy: separators are dropped during tokenization and
    re-inserted from token shape by the separator rule table.
    """

    def __init__(
        self,
        vocabulary: Optional[Vocabulary] = None,
        *,
        rules: Sequence[SeparatorRule] = DEFAULT_SEPARATOR_RULES,
        metadata: Optional[TokenizerMetadata] = None,
        isolate_batch_errors: bool = False,
    ) -> None:
        self.vocab = vocabulary
        self.rules = tuple(rules)
        self.metadata = metadata or TokenizerMetadata()
        self.isolate_batch_errors = isolate_batch_errors

    @property
    def is_loaded(self) -> bool:
        return self.vocab is not None

    def train(self, corpus_text: str) -> "ComponentTokenizer":
        logger.info("Training %s tokenizer", self.metadata.name)
        self.vocab = Vocabulary().build_from_corpus(corpus_text)
        logger.info("Training complete, vocabulary size %d", len(self.vocab))
        return self

    def load_vocabulary(self, data: Mapping[str, Any]) -> "ComponentTokenizer":
        self.vocab = Vocabulary.from_dict(data)
        return self

    def _require_vocab(self) -> Vocabulary:
        if self.vocab is None:
            raise NotTrainedError(
                "Tokenizer not loaded. Call train() or load_vocabulary() first."
            )
        return self.vocab

    def encode(self, text: str) -> EncodedSequence:
        vocab = self._require_vocab()
        tokens = vocab.tokenize(text)
        return EncodedSequence(
            input=text,
            tokens=tokens,
            ids=[vocab.encode(token) for token in tokens],
        )

    def decode(self, token_ids: Sequence[int]) -> DecodedResult:
        vocab = self._require_vocab()
        ids = list(token_ids)
        tokens = [vocab.decode(token_id) for token_id in ids]
        return DecodedResult(ids=ids, tokens=tokens, text=self.reconstruct_text(tokens))

    def reconstruct_text(self, tokens: Sequence[str]) -> str:
        return reconstruct_text(tokens, self.rules)

    def encode_batch(
        self, texts: Iterable[str], *, isolate_errors: Optional[bool] = None
    ) -> list[Union[EncodedSequence, TokenizerFailure]]:
        return [self._run_item(self.encode, text, isolate_errors) for text in texts]

    def decode_batch(
        self, id_sequences: Iterable[Sequence[int]], *, isolate_errors: Optional[bool] = None
    ) -> list[Union[DecodedResult, TokenizerFailure]]:
        return [self._run_item(self.decode, ids, isolate_errors) for ids in id_sequences]

    def _run_item(self, func, item, isolate_errors: Optional[bool]):
        if isolate_errors is None:
            isolate_errors = self.isolate_batch_errors
        if not isolate_errors:
            return func(item)
        try:
            return func(item)
        except TokenizerError as exc:
            logger.debug("Batch item %r failed: %s", item, exc)
            return TokenizerFailure(input=item, error=str(exc), error_type=type(exc).__name__)

    def test_round_trip(self, text: str) -> RoundTripReport:
        encoded = self.encode(text)
        decoded = self.decode(encoded.ids)
        return RoundTripReport(
            original=text,
            encoded=encoded,
            decoded=decoded,
            success=text == decoded.text,
            similarity=positional_similarity(text, decoded.text),
        )

    def stats(self) -> dict[str, Any]:
        base: dict[str, Any] = {}
        if self.vocab is not None:
            base.update(self.vocab.stats())
        base.update(
            {
                "is_loaded": self.is_loaded,
                "name": f"{self.metadata.name} Tokenizer",
                "version": self.metadata.version,
            }
        )
        return base

    def save(self) -> dict[str, Any]:
        if self.vocab is None:
            raise NotTrainedError("Cannot save an untrained tokenizer")
        metadata = asdict(self.metadata)
        metadata["created"] = datetime.now(timezone.utc).isoformat()
        return {"vocabulary": self.vocab.save(), "metadata": metadata}

    @classmethod
    def from_bundle(
        cls,
        data: Mapping[str, Any],
        *,
        rules: Sequence[SeparatorRule] = DEFAULT_SEPARATOR_RULES,
    ) -> "ComponentTokenizer":
        try:
            vocabulary = data["vocabulary"]
        except (KeyError, TypeError) as exc:
            raise VocabularyFormatError("Tokenizer bundle has no vocabulary") from exc
        raw_meta = data.get("metadata") or {}
        defaults = TokenizerMetadata()
        metadata = TokenizerMetadata(
            name=str(raw_meta.get("name", defaults.name)),
            version=str(raw_meta.get("version", defaults.version)),
            type=str(raw_meta.get("type", defaults.type)),
        )
        return cls(Vocabulary.from_dict(vocabulary), rules=rules, metadata=metadata)
