from __future__ import annotations

from pathlib import Path
from typing import Any

from ..core.identity import IdentityResolver
from ..sbom import load_spdx, process_spdx


def run(resolver: IdentityResolver, path: Path, *, include_components: bool = True) -> dict[str, Any]:
    report = process_spdx(load_spdx(path), resolver)
    record = report.to_record()
    if not include_components:
        record.pop("components")
    record["source"] = str(path)
    return record
