"""Custom exception hierarchy for the spell-check tokenizer."""

from __future__ import annotations

from pathlib import Path


class SpellTokenizerError(Exception):
    """Base exception for all tokenizer errors."""


class SourceReadError(SpellTokenizerError):
    """Error opening, reading or decoding a text source."""

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = str(path)


class ConfigurationError(SpellTokenizerError):
    """Error in system configuration."""


class PatternError(ConfigurationError):
    """A matching rule failed to compile."""


class DiscoveryError(SpellTokenizerError):
    """Error collecting candidate files."""
