from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .core.tokenizer import DEFAULT_ARTIFACT_TOKENS, DEFAULT_GROUP_MARKERS


class VocabularySettings(BaseModel):
    corpus_path: Optional[Path] = None
    tokenizer_path: Path = Path("./data/tokenizer.json")

    @field_validator("corpus_path", mode="before")
    @classmethod
    def _expand_corpus(cls, value: Optional[str | Path]) -> Optional[Path]:
        if value is None:
            return None
        return Path(value).expanduser().resolve()

    @field_validator("tokenizer_path", mode="before")
    @classmethod
    def _expand_tokenizer(cls, value: str | Path) -> Path:
        return Path(value).expanduser().resolve()


class TokenizerSettings(BaseModel):
    name: str = "RosettaBOM"
    version: str = "2.0.0"
    type: str = "cybersecurity-component-tokenizer"
    group_markers: List[str] = Field(default_factory=lambda: list(DEFAULT_GROUP_MARKERS))
    artifact_tokens: List[str] = Field(default_factory=lambda: list(DEFAULT_ARTIFACT_TOKENS))
    isolate_batch_errors: bool = False


class Settings(BaseModel):
    vocabulary: VocabularySettings = VocabularySettings()
    tokenizer: TokenizerSettings = TokenizerSettings()

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Optional[Path]:
    if explicit_path:
        if not explicit_path.exists():
            raise FileNotFoundError(f"Config file not found: {explicit_path}")
        return explicit_path
    cwd = Path.cwd()
    for candidate in (cwd / "rosetta.yaml", cwd / "rosetta.yml"):
        if candidate.exists():
            return candidate
    return None


def load_settings(explicit_path: Optional[Path] = None) -> Settings:
    config_path = find_config(explicit_path)
    if config_path is None:
        return Settings()
    return Settings.load(config_path)
