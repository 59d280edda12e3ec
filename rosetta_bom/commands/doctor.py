from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import Settings
from ..core.identity import IdentityResolver
from ..errors import RosettaError
from ..storage import load_tokenizer
from .output import error, ok as ok_line, skipped, warning

SMOKE_IDENTIFIERS = (
    "log4j-core-2.14.1",
    "org.apache.logging.log4j:log4j-core:2.14.1",
    "pkg:maven/org.apache.logging.log4j/log4j-core@2.14.1",
)


@dataclass(slots=True)
class DoctorReport:
    ok: bool
    checks: list[str]


def run(settings: Settings, *, resolver: Optional[IdentityResolver] = None) -> DoctorReport:
    checks: list[str] = []
    ok = True

    resolver = resolver or IdentityResolver()
    first = SMOKE_IDENTIFIERS[0]
    if all(resolver.same_component(first, other) for other in SMOKE_IDENTIFIERS[1:]):
        checks.append(ok_line("Identity resolver", ", ".join(resolver.supported_formats)))
    else:
        ok = False
        checks.append(error("Identity resolver", "cross-format smoke check failed"))

    corpus_path = settings.vocabulary.corpus_path
    if corpus_path is None:
        checks.append(skipped("Corpus", "set vocabulary.corpus_path"))
    elif corpus_path.exists():
        checks.append(ok_line("Corpus", str(corpus_path)))
    else:
        checks.append(warning("Corpus", f"missing {corpus_path}"))

    bundle_path = settings.vocabulary.tokenizer_path
    if not bundle_path.exists():
        ok = False
        checks.append(error("Tokenizer", f"missing {bundle_path} (run `rosetta-bom train`)"))
        return DoctorReport(ok=ok, checks=checks)

    try:
        tokenizer = load_tokenizer(bundle_path)
    except (OSError, RosettaError) as exc:
        ok = False
        checks.append(error("Tokenizer", f"unreadable {bundle_path}: {exc}"))
        return DoctorReport(ok=ok, checks=checks)

    vocab_size = tokenizer.stats().get("total_tokens", 0)
    checks.append(ok_line("Tokenizer", f"{vocab_size} tokens in {bundle_path}"))

    unknown = [
        token
        for ident in SMOKE_IDENTIFIERS
        for token in tokenizer.encode(ident).tokens
        if token not in tokenizer.vocab
    ]
    if unknown:
        checks.append(warning("Vocabulary coverage", f"unknown tokens: {', '.join(sorted(set(unknown)))}"))
    else:
        checks.append(ok_line("Vocabulary coverage", "smoke identifiers fully covered"))

    return DoctorReport(ok=ok, checks=checks)
