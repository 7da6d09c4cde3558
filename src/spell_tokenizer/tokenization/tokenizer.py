"""Line-oriented tokenizer producing spell-check candidates with byte positions.

Per line:
    1. split on ASCII whitespace into chunks
    2. trim symbols from both chunk edges (apostrophes survive)
    3. drop chunks matching an ignore pattern (URLs, paths, numbers, ...)
    4. split compounds (snake_case, Get-Item, run—but), extract word
       candidates, drop single letters, split camelCase / PascalCase
    5. advance the running offset by the untrimmed chunk length plus one

Positions are anchored to the start of the whitespace chunk plus the
candidate's offset inside its sub-chunk. Every piece of a case split shares
the bounds of the candidate it came from.
"""

from __future__ import annotations

import codecs
import re
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from charset_normalizer import from_path

from spell_tokenizer.config.constants import KEPT_EDGE_CHARS, MIN_TOKEN_LENGTH
from spell_tokenizer.exceptions import ConfigurationError, SourceReadError
from spell_tokenizer.models.domain import Token
from spell_tokenizer.observability.logger import get_logger
from spell_tokenizer.tokenization.case_split import split_word_cases
from spell_tokenizer.tokenization.patterns import DEFAULT_PATTERNS, PatternSet

logger = get_logger("tokenizer")

_WHITESPACE = re.compile(r"\s+", re.ASCII)


def _keep(c: str) -> bool:
    return c.isalnum() or c in KEPT_EDGE_CHARS


def trim_edges(chunk: str) -> str:
    """Strip leading/trailing characters that are neither alphanumeric nor kept."""
    start, end = 0, len(chunk)
    while start < end and not _keep(chunk[start]):
        start += 1
    while end > start and not _keep(chunk[end - 1]):
        end -= 1
    return chunk[start:end]


def _byte_counter(encoding: str) -> Callable[[str], int]:
    # BOM-emitting codecs (utf-8-sig, utf-16, ...) prefix every encode call
    bom = len("".encode(encoding))

    def byte_len(text: str) -> int:
        return len(text.encode(encoding)) - bom

    return byte_len


class Tokenizer:
    def __init__(
        self,
        patterns: PatternSet = DEFAULT_PATTERNS,
        encoding: str = "utf-8",
        detect_encoding: bool = False,
    ) -> None:
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise ConfigurationError(f"Unknown source encoding '{encoding}'") from e
        self._patterns = patterns
        self._encoding = encoding
        self._detect_encoding = detect_encoding
        self._tokens: list[Token] = []

    @property
    def patterns(self) -> PatternSet:
        return self._patterns

    def tokens(self) -> Sequence[Token]:
        """Tokens collected so far, in scan order."""
        return tuple(self._tokens)

    def clear(self) -> None:
        """Drop collected tokens, keeping the list object for the next file."""
        self._tokens.clear()

    def tokenize(self, source: str | Path) -> int:
        """Append tokens parsed from the file at ``source``; returns how many were added.

        Raises SourceReadError when the file cannot be opened, read or decoded.
        Tokens appended before the failure are kept.
        """
        path = Path(source)
        encoding = self._resolve_encoding(path)
        before = len(self._tokens)
        lines = 0
        try:
            with path.open(encoding=encoding, newline="\n") as f:
                lines = self._consume(f, encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(path, str(e)) from e

        added = len(self._tokens) - before
        logger.debug(
            "tokenized", path=str(path), encoding=encoding, lines=lines, tokens=added
        )
        return added

    def tokenize_lines(self, lines: Iterable[str], encoding: str | None = None) -> int:
        """Tokenize already-decoded lines; offsets are measured in ``encoding`` bytes."""
        before = len(self._tokens)
        self._consume(lines, encoding or self._encoding)
        return len(self._tokens) - before

    def _consume(self, lines: Iterable[str], encoding: str) -> int:
        byte_len = _byte_counter(encoding)
        count = 0
        for line_no, line in enumerate(lines, start=1):
            self._tokenize_line(line.rstrip("\r\n"), line_no, byte_len)
            count = line_no
        return count

    def _tokenize_line(self, line: str, line_no: int, byte_len: Callable[[str], int]) -> None:
        offset = 0

        for chunk in _WHITESPACE.split(line):
            if not chunk:
                continue

            trimmed = trim_edges(chunk)
            if trimmed and not self._patterns.is_ignored(trimmed):
                for sub_chunk in self._patterns.split(trimmed):
                    for match in self._patterns.candidates(sub_chunk):
                        word = match.group()
                        if len(word) < MIN_TOKEN_LENGTH:
                            continue

                        start = offset + byte_len(sub_chunk[: match.start()])
                        end = start + byte_len(word) - 1
                        for piece in split_word_cases(word):
                            self._tokens.append(Token.new(piece, start, end, line_no))

            # Chunk-level bookkeeping: untrimmed length plus the separating space
            offset += byte_len(chunk) + 1

    def _resolve_encoding(self, path: Path) -> str:
        if not self._detect_encoding:
            return self._encoding
        try:
            best = from_path(path).best()
        except OSError as e:
            raise SourceReadError(path, str(e)) from e
        if best is None:
            return self._encoding
        return best.encoding
