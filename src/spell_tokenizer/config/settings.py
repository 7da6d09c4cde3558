"""Central configuration via Pydantic Settings. All values driven by env vars."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Source decoding
    source_encoding: str = "utf-8"
    detect_encoding: bool = False

    # File discovery
    use_gitignore: bool = True
    skip_dirs: str = ".git"  # comma-separated directory names

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = {"env_file": ".env", "env_prefix": "SPELLTOK_"}

    @property
    def skip_dir_names(self) -> tuple[str, ...]:
        return tuple(name.strip() for name in self.skip_dirs.split(",") if name.strip())
