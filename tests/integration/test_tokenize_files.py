"""Tests for tokenizing files on disk."""

import pytest

from spell_tokenizer.exceptions import SourceReadError
from spell_tokenizer.tokenization.tokenizer import Tokenizer


def _spans(tokenizer):
    return [
        (t.word, t.position.start, t.position.end, t.position.line_no)
        for t in tokenizer.tokens()
    ]


def test_tokenize_file(tokenizer, write_file):
    path = write_file(
        "notes.txt",
        "Visit https://example.com today\nfooBarBaz\n\nError 404 occurred\n",
    )
    added = tokenizer.tokenize(path)
    assert added == 7
    assert _spans(tokenizer) == [
        ("Visit", 0, 4, 1),
        ("today", 26, 30, 1),
        ("foo", 0, 8, 2),
        ("Bar", 0, 8, 2),
        ("Baz", 0, 8, 2),
        ("Error", 0, 4, 4),
        ("occurred", 10, 17, 4),
    ]


def test_accepts_str_path(tokenizer, write_file):
    path = write_file("a.txt", "hello world")
    tokenizer.tokenize(str(path))
    assert [t.word for t in tokenizer.tokens()] == ["hello", "world"]


def test_crlf_line_endings(tokenizer, write_file):
    path = write_file("crlf.txt", "hello there\r\nworld\r\n")
    tokenizer.tokenize(path)
    assert _spans(tokenizer) == [("hello", 0, 4, 1), ("there", 6, 10, 1), ("world", 0, 4, 2)]


def test_retokenize_after_clear_is_identical(tokenizer, write_file):
    path = write_file(
        "doc.md",
        "# getHTTPResponse\nContact me@test.com please, snake_case_word (done).\n",
    )
    tokenizer.tokenize(path)
    first = tokenizer.tokens()

    tokenizer.clear()
    tokenizer.tokenize(path)
    assert tokenizer.tokens() == first

    fresh = Tokenizer()
    fresh.tokenize(path)
    assert fresh.tokens() == first


def test_multiple_files_accumulate(tokenizer, write_file):
    tokenizer.tokenize(write_file("one.txt", "alpha"))
    tokenizer.tokenize(write_file("two.txt", "beta"))
    assert [t.word for t in tokenizer.tokens()] == ["alpha", "beta"]


def test_missing_file_raises(tokenizer, tmp_path):
    missing = tmp_path / "missing.txt"
    with pytest.raises(SourceReadError) as exc_info:
        tokenizer.tokenize(missing)
    assert exc_info.value.path == str(missing)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_decode_failure_keeps_earlier_tokens(tokenizer, write_file):
    tokenizer.tokenize(write_file("good.txt", "kept words"))
    bad = write_file("bad.txt", b"valid line\n\xff\xfe\xfd broken\n")
    with pytest.raises(SourceReadError) as exc_info:
        tokenizer.tokenize(bad)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
    assert [t.word for t in tokenizer.tokens()][:2] == ["kept", "words"]


def test_configured_encoding(write_file):
    path = write_file("latin.txt", "café ok", encoding="latin-1")
    tokenizer = Tokenizer(encoding="latin-1")
    tokenizer.tokenize(path)
    assert _spans(tokenizer) == [("caf", 0, 2, 1), ("ok", 5, 6, 1)]


def test_detect_encoding(write_file):
    path = write_file("plain.txt", "The quick brown fox jumps over the lazy dog.\n")
    tokenizer = Tokenizer(detect_encoding=True)
    tokenizer.tokenize(path)
    assert [t.word for t in tokenizer.tokens()] == [
        "The", "quick", "brown", "fox", "jumps", "over", "the", "lazy", "dog",
    ]


def test_detect_encoding_missing_file(tmp_path):
    tokenizer = Tokenizer(detect_encoding=True)
    with pytest.raises(SourceReadError):
        tokenizer.tokenize(tmp_path / "nope.txt")
