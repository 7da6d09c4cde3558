"""Entrypoint: tokenize every text file under a path and print the candidates."""

from __future__ import annotations

import argparse
import sys

from spell_tokenizer.config.settings import Settings
from spell_tokenizer.discovery.file_collector import FileCollector
from spell_tokenizer.exceptions import SpellTokenizerError
from spell_tokenizer.observability.logger import configure_logging, get_logger
from spell_tokenizer.tokenization.tokenizer import Tokenizer

logger = get_logger("main")

USAGE = """
    Usage:
        spell-tokenizer <path>

    Description:

    Reads every file under <path>, extracts words, and prints each word
    along with its position.

    Example:

    spell-tokenizer dummy_text.txt
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spell-tokenizer", add_help=True)
    parser.add_argument("path", nargs="?", help="File or directory to tokenize")
    return parser


def run(path: str, settings: Settings) -> int:
    collector = FileCollector(
        path, use_gitignore=settings.use_gitignore, skip_dirs=settings.skip_dir_names
    )
    try:
        collector.load_gitignore()
        collector.collect()
    except SpellTokenizerError as e:
        logger.error("discovery_failed", path=path, error=str(e))
        return 1

    tokenizer = Tokenizer(
        encoding=settings.source_encoding, detect_encoding=settings.detect_encoding
    )
    exit_code = 0
    total = 0
    for file_path in collector.paths():
        tokenizer.clear()
        try:
            tokenizer.tokenize(file_path)
        except SpellTokenizerError as e:
            logger.error("tokenize_failed", path=str(file_path), error=str(e))
            exit_code = 1
            continue
        for token in tokenizer.tokens():
            pos = token.position
            print(f"{file_path}:{pos.line_no}:{pos.start}-{pos.end} {token.word}")
        total += len(tokenizer.tokens())

    print(f"Fetched {len(collector.paths())} files, {total} tokens")
    return exit_code


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.path is None:
        print(USAGE)
        return 0

    settings = Settings()
    configure_logging(settings.log_level, json=settings.log_json)
    return run(args.path, settings)


if __name__ == "__main__":
    sys.exit(main())
