import tempfile
import unittest
from pathlib import Path

from rosetta_bom.core.tokenizer import ComponentTokenizer, Vocabulary
from rosetta_bom.errors import VocabularyFormatError
from rosetta_bom.storage import (
    load_tokenizer,
    load_vocabulary,
    read_corpus,
    save_tokenizer,
    save_vocabulary,
)

CORPUS = "log4j-core-2.14.1\nspring-boot-2.5.0\n"


class TestStorage(unittest.TestCase):
    def test_vocabulary_file_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "vocab.json"
            vocab = Vocabulary().build_from_corpus(CORPUS)
            save_vocabulary(vocab, path)
            self.assertTrue(path.exists())
            self.assertFalse(path.with_suffix(".json.tmp").exists())

            restored = load_vocabulary(path)
            self.assertEqual(restored.id_to_token, vocab.id_to_token)
            self.assertEqual(restored.token_freq, vocab.token_freq)

    def test_tokenizer_bundle_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "tokenizer.json"
            tokenizer = ComponentTokenizer().train(CORPUS)
            save_tokenizer(tokenizer, path)

            restored = load_tokenizer(path)
            self.assertTrue(restored.is_loaded)
            self.assertEqual(
                restored.decode([4, 5]).tokens, tokenizer.decode([4, 5]).tokens
            )

    def test_read_corpus(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "corpus.txt"
            path.write_text(CORPUS, encoding="utf-8")
            self.assertEqual(read_corpus(path), CORPUS)

    def test_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "vocab.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(VocabularyFormatError):
                load_vocabulary(path)
            with self.assertRaises(VocabularyFormatError):
                load_tokenizer(path)


if __name__ == "__main__":
    unittest.main()
