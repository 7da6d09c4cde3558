"""Compiled matching rules: ignore shapes, word candidates and compound separators."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from spell_tokenizer.config.constants import IGNORE_PATTERNS, SPLIT_PATTERN, WORD_PATTERN
from spell_tokenizer.exceptions import PatternError


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError(f"Invalid pattern {pattern!r}: {e}") from e


@dataclass(frozen=True)
class PatternSet:
    """Read-only set of rules shared by every tokenize call in a run.

    ignore_patterns: any match over a trimmed chunk drops the whole chunk
        (URLs, file paths, bare numbers, regex literals, emails).
    word_pattern: candidate words, letters with an optional embedded digit run.
    split_pattern: separators inside compound identifiers, e.g.
        ``snake_case`` -> ["snake", "case"], ``Get-Item`` -> ["Get", "Item"].
    """

    ignore_patterns: tuple[re.Pattern[str], ...]
    word_pattern: re.Pattern[str]
    split_pattern: re.Pattern[str]

    @classmethod
    def compile(
        cls,
        ignore: Iterable[str] = IGNORE_PATTERNS,
        word: str = WORD_PATTERN,
        split: str = SPLIT_PATTERN,
    ) -> PatternSet:
        """Build a pattern set from source strings, failing on the first bad one."""
        return cls(
            ignore_patterns=tuple(_compile(p) for p in ignore),
            word_pattern=_compile(word),
            split_pattern=_compile(split),
        )

    def is_ignored(self, chunk: str) -> bool:
        return any(p.search(chunk) for p in self.ignore_patterns)

    def split(self, chunk: str) -> list[str]:
        return [part for part in self.split_pattern.split(chunk) if part]

    def candidates(self, sub_chunk: str) -> Iterator[re.Match[str]]:
        return self.word_pattern.finditer(sub_chunk)


DEFAULT_PATTERNS = PatternSet.compile()
