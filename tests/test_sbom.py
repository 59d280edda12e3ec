import json
import tempfile
import unittest
from pathlib import Path

from rosetta_bom.core.identity import IdentityResolver
from rosetta_bom.sbom import iter_spdx_package_names, load_spdx, process_spdx

SPDX = {
    "spdxVersion": "SPDX-2.3",
    "packages": [
        {"name": "log4j-core-2.14.1", "SPDXID": "SPDXRef-Package-1"},
        {"name": "org.springframework:spring-core:5.3.21", "SPDXID": "SPDXRef-Package-2"},
    ],
}


class TestProcessSpdx(unittest.TestCase):
    def test_all_packages_decoded(self) -> None:
        report = process_spdx(SPDX, IdentityResolver())
        self.assertEqual(report.total_packages, 2)
        self.assertEqual(report.successfully_decoded, 2)
        self.assertEqual(
            [item.component for item in report.components], ["log4j-core", "spring-core"]
        )
        self.assertEqual(report.failures, [])

    def test_failures_are_collected(self) -> None:
        document = {
            "packages": SPDX["packages"]
            + [{"name": "invalid"}, {"SPDXID": "SPDXRef-NoName"}, "not-a-package"]
        }
        with self.assertLogs("rosetta_bom.sbom", level="WARNING"):
            report = process_spdx(document, IdentityResolver())
        self.assertEqual(report.total_packages, 5)
        self.assertEqual(report.successfully_decoded, 2)
        self.assertEqual(
            [item.error_type for item in report.failures],
            ["MalformedIdentifierError", "InvalidInputError", "InvalidInputError"],
        )
        record = report.to_record()
        self.assertEqual(len(record["failures"]), 3)

    def test_document_without_packages(self) -> None:
        self.assertEqual(list(iter_spdx_package_names({"spdxVersion": "SPDX-2.3"})), [])
        report = process_spdx({}, IdentityResolver())
        self.assertEqual(report.total_packages, 0)

    def test_load_spdx(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "sbom.json"
            path.write_text(json.dumps(SPDX), encoding="utf-8")
            self.assertEqual(load_spdx(path)["spdxVersion"], "SPDX-2.3")
            path.write_text("[]", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_spdx(path)


if __name__ == "__main__":
    unittest.main()
