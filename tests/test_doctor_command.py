import tempfile
import unittest
from pathlib import Path

from rosetta_bom.commands.doctor import SMOKE_IDENTIFIERS, run
from rosetta_bom.config import Settings, VocabularySettings
from rosetta_bom.core.tokenizer import ComponentTokenizer
from rosetta_bom.storage import save_tokenizer


class TestDoctorCommand(unittest.TestCase):
    def test_reports_missing_tokenizer(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            settings = Settings(
                vocabulary=VocabularySettings(tokenizer_path=tmp / "tokenizer.json")
            )
            report = run(settings)
            self.assertFalse(report.ok)
            joined = "\n".join(report.checks)
            self.assertIn("Identity resolver: OK", joined)
            self.assertIn("Corpus: SKIPPED", joined)
            self.assertIn("Tokenizer: ERROR", joined)

    def test_healthy_setup(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            corpus = tmp / "corpus.txt"
            corpus.write_text("\n".join(SMOKE_IDENTIFIERS), encoding="utf-8")
            bundle = tmp / "tokenizer.json"
            save_tokenizer(ComponentTokenizer().train(corpus.read_text(encoding="utf-8")), bundle)
            settings = Settings(
                vocabulary=VocabularySettings(corpus_path=corpus, tokenizer_path=bundle)
            )
            report = run(settings)
            self.assertTrue(report.ok)
            joined = "\n".join(report.checks)
            self.assertIn("Corpus: OK", joined)
            self.assertIn("Tokenizer: OK", joined)
            self.assertIn("Vocabulary coverage: OK", joined)

    def test_warns_on_vocabulary_gaps(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            bundle = tmp / "tokenizer.json"
            save_tokenizer(ComponentTokenizer().train("junit-4.13.2"), bundle)
            settings = Settings(
                vocabulary=VocabularySettings(
                    corpus_path=tmp / "missing.txt", tokenizer_path=bundle
                )
            )
            report = run(settings)
            self.assertTrue(report.ok)
            joined = "\n".join(report.checks)
            self.assertIn("Corpus: WARNING", joined)
            self.assertIn("Vocabulary coverage: WARNING", joined)
            self.assertIn("log4j", joined)

    def test_unreadable_bundle(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            bundle = Path(tmpdir) / "tokenizer.json"
            bundle.write_text("{}", encoding="utf-8")
            report = run(Settings(vocabulary=VocabularySettings(tokenizer_path=bundle)))
            self.assertFalse(report.ok)
            self.assertIn("unreadable", "\n".join(report.checks))


if __name__ == "__main__":
    unittest.main()
