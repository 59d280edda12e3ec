from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .app import RosettaApp
from .commands import doctor as cmd_doctor
from .commands import identity_ops as cmd_identity
from .commands import sbom_report as cmd_sbom
from .commands import tokenizer_ops as cmd_tokenizer
from .commands.output import emit_json
from .config import load_settings
from .errors import RosettaError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

IDENTITY_COMMANDS = frozenset({"extract", "same", "sbom"})

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


class WarningBufferHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.WARNING)
        self.records: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
        except Exception:  # pragma: no cover
            msg = record.getMessage()
        self.records.append(msg)


def configure_logging(level_name: str) -> WarningBufferHandler:
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)

    # stderr, so JSON on stdout stays parseable
    color_handler = logging.StreamHandler()
    color_handler.setFormatter(ColorFormatter(LOG_FORMAT))
    root_logger.addHandler(color_handler)

    warn_buffer = WarningBufferHandler()
    warn_buffer.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(warn_buffer)
    return warn_buffer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Cross-format SBOM component identity and tokenization"
    )
    parser.add_argument("--config", type=Path, help="Path to rosetta.yaml")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)
    encode_parser = subparsers.add_parser("encode", help="Encode an identifier to token ids")
    encode_parser.add_argument("text")
    decode_parser = subparsers.add_parser(
        "decode", help="Decode a JSON array of token ids back to text"
    )
    decode_parser.add_argument("ids", help='JSON array, e.g. "[4, 5, 6]"')
    tokenize_parser = subparsers.add_parser("tokenize", help="Split an identifier into tokens")
    tokenize_parser.add_argument("text")
    test_parser = subparsers.add_parser(
        "test", help="Encode and decode an identifier and score the reconstruction"
    )
    test_parser.add_argument("text")
    subparsers.add_parser("stats", help="Show tokenizer statistics")

    train_parser = subparsers.add_parser(
        "train", help="Build a vocabulary from a corpus and save the tokenizer bundle"
    )
    train_parser.add_argument(
        "--corpus", type=Path, default=None, help="Newline-delimited corpus file"
    )
    train_parser.add_argument(
        "--out", type=Path, default=None, help="Where to write the tokenizer bundle"
    )

    extract_parser = subparsers.add_parser(
        "extract", help="Extract component/version from one or more identifiers"
    )
    extract_parser.add_argument("values", nargs="+")
    same_parser = subparsers.add_parser(
        "same", help="Check whether two identifiers name the same component and version"
    )
    same_parser.add_argument("first")
    same_parser.add_argument("second")
    sbom_parser = subparsers.add_parser(
        "sbom", help="Resolve every package name in an SPDX JSON document"
    )
    sbom_parser.add_argument("path", type=Path)
    sbom_parser.add_argument(
        "--summary",
        action="store_true",
        help="Only print counts and failures",
    )
    subparsers.add_parser("doctor", help="Run basic config/tokenizer checks")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    warn_buffer = configure_logging(args.log_level)

    try:
        settings = load_settings(args.config)
        match args.command:
            case "doctor":
                report = cmd_doctor.run(settings)
                for line in report.checks:
                    print(line)
                if not report.ok:
                    raise SystemExit(1)
                return
            case "train":
                app = RosettaApp.create(settings, load_existing=False)
                emit_json(
                    cmd_tokenizer.train(
                        app.tokenizer,
                        corpus_path=args.corpus or settings.vocabulary.corpus_path,
                        out=args.out or settings.vocabulary.tokenizer_path,
                    )
                )
                return

        # Identity commands never touch the tokenizer bundle.
        app = RosettaApp.create(settings, load_existing=args.command not in IDENTITY_COMMANDS)
        match args.command:
            case "encode":
                emit_json(cmd_tokenizer.encode(app.tokenizer, args.text))
            case "decode":
                emit_json(cmd_tokenizer.decode(app.tokenizer, args.ids))
            case "tokenize":
                emit_json(cmd_tokenizer.tokenize(app.tokenizer, args.text))
            case "test":
                emit_json(cmd_tokenizer.round_trip(app.tokenizer, args.text))
            case "stats":
                emit_json(cmd_tokenizer.stats(app.tokenizer))
            case "extract":
                emit_json(cmd_identity.extract(app.resolver, args.values))
            case "same":
                emit_json(cmd_identity.compare(app.resolver, args.first, args.second))
            case "sbom":
                emit_json(
                    cmd_sbom.run(app.resolver, args.path, include_components=not args.summary)
                )
            case _:
                parser.error("Unknown command")
    except (RosettaError, ValueError, OSError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc
    finally:
        if warn_buffer.records:
            print("\n\033[33mWarnings/Errors summary:\033[0m", file=sys.stderr)
            for line in warn_buffer.records:
                print(f" - {line}", file=sys.stderr)


if __name__ == "__main__":
    main()
