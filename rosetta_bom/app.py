from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import Settings
from .core.identity import IdentityResolver
from .core.tokenizer import ComponentTokenizer, TokenizerMetadata, build_separator_rules
from .storage import load_tokenizer, read_corpus

logger = logging.getLogger(__name__)


@dataclass
class RosettaApp:
    settings: Settings
    resolver: IdentityResolver
    tokenizer: ComponentTokenizer

    @classmethod
    def create(cls, settings: Settings, *, load_existing: bool = True) -> "RosettaApp":
        tokenizer_settings = settings.tokenizer
        rules = build_separator_rules(
            group_markers=tokenizer_settings.group_markers,
            artifact_tokens=tokenizer_settings.artifact_tokens,
        )
        metadata = TokenizerMetadata(
            name=tokenizer_settings.name,
            version=tokenizer_settings.version,
            type=tokenizer_settings.type,
        )

        bundle_path = settings.vocabulary.tokenizer_path
        corpus_path = settings.vocabulary.corpus_path
        tokenizer = ComponentTokenizer(
            rules=rules,
            metadata=metadata,
            isolate_batch_errors=tokenizer_settings.isolate_batch_errors,
        )
        if load_existing:
            if bundle_path.exists():
                tokenizer = load_tokenizer(bundle_path, rules=rules)
                tokenizer.isolate_batch_errors = tokenizer_settings.isolate_batch_errors
                logger.info("Loaded tokenizer from %s", bundle_path)
            elif corpus_path is not None and corpus_path.exists():
                tokenizer.train(read_corpus(corpus_path))
            else:
                logger.warning(
                    "Pre-trained tokenizer not found at %s; run `rosetta-bom train` first",
                    bundle_path,
                )
        return cls(settings=settings, resolver=IdentityResolver(), tokenizer=tokenizer)
