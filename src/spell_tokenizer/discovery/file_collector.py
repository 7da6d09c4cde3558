"""Collect candidate text files under a base directory, honouring .gitignore."""

from __future__ import annotations

from pathlib import Path

import pathspec

from spell_tokenizer.exceptions import DiscoveryError
from spell_tokenizer.observability.logger import get_logger

logger = get_logger("discovery")


class FileCollector:
    def __init__(
        self,
        base_dir: str | Path,
        use_gitignore: bool = True,
        skip_dirs: tuple[str, ...] = (".git",),
    ) -> None:
        self._base_dir = Path(base_dir)
        self._use_gitignore = use_gitignore
        self._skip_dirs = set(skip_dirs)
        self._spec: pathspec.GitIgnoreSpec | None = None
        self._paths: list[Path] = []

    def paths(self) -> list[Path]:
        return list(self._paths)

    def load_gitignore(self) -> None:
        """Parse ``<base_dir>/.gitignore`` into ignore patterns; a missing file is a no-op."""
        if not self._use_gitignore:
            return
        gitignore_path = self._base_dir / ".gitignore"
        if not gitignore_path.is_file():
            return

        try:
            content = gitignore_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise DiscoveryError(f"Failed to read {gitignore_path}: {e}") from e

        patterns = [
            line.strip()
            for line in content.splitlines()
            if line.strip() and not line.strip().startswith("#")
        ]
        try:
            self._spec = pathspec.GitIgnoreSpec.from_lines(patterns)
        except ValueError as e:
            raise DiscoveryError(f"Invalid pattern in {gitignore_path}: {e}") from e
        logger.debug("gitignore_loaded", path=str(gitignore_path), patterns=len(patterns))

    def should_ignore(self, path: str | Path) -> bool:
        if self._spec is None:
            return False
        path = Path(path)
        try:
            relative = path.relative_to(self._base_dir)
        except ValueError:
            relative = path
        if relative == Path("."):
            return False
        rel = relative.as_posix()
        if path.is_dir():
            rel += "/"
        return self._spec.match_file(rel)

    def collect(self, path: str | Path | None = None) -> int:
        """Add files under ``path`` (default: the base directory); returns how many were added."""
        path = Path(path) if path is not None else self._base_dir
        if not path.exists():
            raise DiscoveryError(f"Path not found: {path}")

        if path.is_file():
            if self.should_ignore(path):
                return 0
            self._paths.append(path)
            return 1

        if path.is_dir():
            if path.name in self._skip_dirs:
                return 0
            count = 0
            for entry in sorted(path.iterdir()):
                if self.should_ignore(entry):
                    continue
                if entry.is_dir():
                    count += self.collect(entry)
                elif entry.is_file():
                    self._paths.append(entry)
                    count += 1
            return count

        raise DiscoveryError(f"The provided path is neither a file nor a directory: {path}")
