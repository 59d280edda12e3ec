import unittest

from rosetta_bom.core.identity import FormatTag, detect_format


class TestDetectFormat(unittest.TestCase):
    def test_purl_requires_prefix_and_at_sign(self) -> None:
        self.assertIs(detect_format("pkg:maven/a/b@1.0"), FormatTag.PURL)
        self.assertIs(
            detect_format("pkg:maven/org.apache.logging.log4j/log4j-core@2.14.1"),
            FormatTag.PURL,
        )

    def test_purl_without_at_sign_falls_through_to_maven(self) -> None:
        self.assertIs(detect_format("pkg:maven/a/b"), FormatTag.MAVEN)

    def test_at_sign_without_pkg_prefix_is_maven(self) -> None:
        self.assertIs(detect_format("org.example:lib@x:1.0"), FormatTag.MAVEN)

    def test_colon_means_maven(self) -> None:
        self.assertIs(detect_format("a:b:1.0"), FormatTag.MAVEN)

    def test_plain_name_version_is_basic(self) -> None:
        self.assertIs(detect_format("log4j-core-2.14.1"), FormatTag.BASIC)
        self.assertIs(detect_format("pkg-maven-b-1.0"), FormatTag.BASIC)

    def test_format_tag_values(self) -> None:
        self.assertEqual(
            [tag.value for tag in FormatTag], ["basic", "maven", "PURL"]
        )


if __name__ == "__main__":
    unittest.main()
