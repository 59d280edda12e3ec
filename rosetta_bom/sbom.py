from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Mapping

from .core.identity import CanonicalIdentifier, ExtractionFailure, IdentityResolver

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SbomReport:
    """Aggregate result of resolving every package name in an SBOM."""
    total_packages: int = 0
    successfully_decoded: int = 0
    components: list[CanonicalIdentifier] = field(default_factory=list)
    failures: list[ExtractionFailure] = field(default_factory=list)

    def to_record(self) -> dict[str, Any]:
        return {
            "total_packages": self.total_packages,
            "successfully_decoded": self.successfully_decoded,
            "components": [item.to_record() for item in self.components],
            "failures": [item.to_record() for item in self.failures],
        }


def iter_spdx_package_names(document: Mapping[str, Any]) -> Iterator[object]:
    packages = document.get("packages") or []
    for package in packages:
        if isinstance(package, Mapping):
            yield package.get("name")
        else:
            yield None


def process_spdx(document: Mapping[str, Any], resolver: IdentityResolver) -> SbomReport:
    names = list(iter_spdx_package_names(document))
    report = SbomReport(total_packages=len(names))
    for item in resolver.extract_batch(names):
        if isinstance(item, ExtractionFailure):
            report.failures.append(item)
        else:
            report.components.append(item)
    report.successfully_decoded = len(report.components)
    if report.failures:
        logger.warning(
            "%d of %d SBOM packages could not be resolved",
            len(report.failures),
            report.total_packages,
        )
    return report


def load_spdx(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as fh:
        document = json.load(fh)
    if not isinstance(document, dict):
        raise ValueError(f"{path} does not contain an SPDX JSON object")
    return document
