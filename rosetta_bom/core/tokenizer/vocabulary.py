from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from ...errors import VocabularyFormatError

logger = logging.getLogger(__name__)

UNKNOWN_TOKEN = "[UNK]"
START_TOKEN = "[START]"
END_TOKEN = "[END]"
PAD_TOKEN = "[PAD]"

# Persisted vocabularies rely on these occupying ids 0-3 in this order.
SPECIAL_TOKENS = (UNKNOWN_TOKEN, START_TOKEN, END_TOKEN, PAD_TOKEN)

SEPARATOR_PATTERN = re.compile(r"[\s\-:.@/]+")


def split_tokens(text: str) -> list[str]:
    return [token for token in SEPARATOR_PATTERN.split(text) if token]


class Vocabulary:
    """
    Bidirectional token/id table with frequency counts.

    Ids are handed out sequentially and never reused. The table only grows;
    callers sharing an instance must serialize mutation themselves.
    """

    def __init__(self) -> None:
        self.token_to_id: dict[str, int] = {}
        self.id_to_token: dict[int, str] = {}
        self.token_freq: dict[str, int] = {}
        self.next_id = 0
        for token in SPECIAL_TOKENS:
            self.add_token(token)

    def __len__(self) -> int:
        return len(self.token_to_id)

    def __contains__(self, token: object) -> bool:
        return token in self.token_to_id

    def add_token(self, token: str) -> int:
        token_id = self.token_to_id.get(token)
        if token_id is None:
            token_id = self.next_id
            self.token_to_id[token] = token_id
            self.id_to_token[token_id] = token
            self.next_id += 1
        self.token_freq[token] = self.token_freq.get(token, 0) + 1
        return token_id

    def tokenize(self, text: str) -> list[str]:
        return split_tokens(text)

    def build_from_corpus(self, corpus_text: str) -> "Vocabulary":
        for line in corpus_text.splitlines():
            if not line.strip():
                continue
            for token in self.tokenize(line):
                self.add_token(token)
        logger.info("Built vocabulary with %d tokens", len(self.token_to_id))
        return self

    @property
    def unknown_id(self) -> int:
        return self.token_to_id[UNKNOWN_TOKEN]

    def encode(self, token: str) -> int:
        return self.token_to_id.get(token, self.unknown_id)

    def decode(self, token_id: int) -> str:
        return self.id_to_token.get(token_id, UNKNOWN_TOKEN)

    def most_frequent(self, count: int = 10) -> list[tuple[str, int]]:
        ranked = sorted(self.token_freq.items(), key=lambda item: item[1], reverse=True)
        return ranked[:count]

    def stats(self) -> dict[str, Any]:
        return {
            "total_tokens": len(self.token_to_id),
            "most_frequent": self.most_frequent(10),
            "vocabulary_size": self.next_id,
        }

    def save(self) -> dict[str, Any]:
        return {
            "tokenToId": dict(self.token_to_id),
            # JSON object keys are strings; load() converts them back.
            "idToToken": {str(token_id): token for token_id, token in self.id_to_token.items()},
            "tokenFreq": dict(self.token_freq),
            "nextId": self.next_id,
        }

    def load(self, data: Mapping[str, Any]) -> "Vocabulary":
        try:
            token_to_id = {str(token): int(token_id) for token, token_id in data["tokenToId"].items()}
            id_to_token = {int(token_id): str(token) for token_id, token in data["idToToken"].items()}
            token_freq = {str(token): int(freq) for token, freq in data["tokenFreq"].items()}
            next_id = int(data["nextId"])
        except KeyError as exc:
            raise VocabularyFormatError(f"Vocabulary document missing field {exc}") from exc
        except (AttributeError, TypeError, ValueError) as exc:
            raise VocabularyFormatError(f"Invalid vocabulary document: {exc}") from exc

        if {token_id: token for token, token_id in token_to_id.items()} != id_to_token:
            raise VocabularyFormatError("idToToken is not the inverse of tokenToId")
        for expected_id, token in enumerate(SPECIAL_TOKENS):
            if token_to_id.get(token) != expected_id:
                raise VocabularyFormatError(
                    f"Special token {token} must have id {expected_id}, "
                    f"got {token_to_id.get(token)}"
                )
        # add_token() would otherwise hand out ids that are already taken.
        if next_id <= max(id_to_token, default=-1):
            raise VocabularyFormatError(
                f"nextId {next_id} does not exceed the highest assigned id {max(id_to_token)}"
            )

        self.token_to_id = token_to_id
        self.id_to_token = id_to_token
        self.token_freq = token_freq
        self.next_id = next_id
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Vocabulary":
        return cls().load(data)
