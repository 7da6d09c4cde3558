"""Core domain objects produced by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    start: int  # byte offset of the first byte
    end: int  # byte offset of the last byte (inclusive)
    line_no: int  # 1-based


@dataclass(frozen=True)
class Token:
    word: str
    position: Position

    @classmethod
    def new(cls, word: str, start: int, end: int, line_no: int) -> Token:
        return cls(word=word, position=Position(start=start, end=end, line_no=line_no))
