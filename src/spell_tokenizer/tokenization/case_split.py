"""Case-transition splitting for camelCase, PascalCase and acronym-prefixed words."""

from __future__ import annotations


def _all_upper(segment: str) -> bool:
    return all(c.isupper() for c in segment)


def split_word_cases(word: str) -> list[str]:
    """Split a word at its case transitions.

    e.g. "camelCaseExample" -> ["camel", "Case", "Example"]

    - A segment breaks before an uppercase letter unless the segment so far is
      entirely uppercase, so consecutive capitals stay together.
    - An uppercase run of two or more letters is closed before a capitalised
      word: "TITLECase" -> ["TITLE", "Case"], "HTTPServer" -> ["HTTP", "Server"].
    - Words without transitions come back as a single-element list.

    Joining the result reproduces the input exactly.
    """
    result: list[str] = []
    start = 0

    for i in range(1, len(word)):
        c = word[i]
        if not c.isupper():
            continue
        segment = word[start:i]
        if not _all_upper(segment):
            result.append(segment)
            start = i
        elif len(segment) >= 2 and i + 1 < len(word) and word[i + 1].islower():
            result.append(segment)
            start = i

    # Trailing segment, appended even when empty
    result.append(word[start:])
    return result
