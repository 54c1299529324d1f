"""Handler Configuration — environment-driven defaults via pydantic-settings.

Invariants:
    - Every setting is optional: handlers work with no environment at all
    - get_settings() is cached (lru_cache) — single instance per process
    - Settings only supply defaults; explicit factory arguments always win

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - SHORTSTOP_ prefix: the env handler reads arbitrary variables, so our own
      knobs must not collide with the configuration being resolved
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Handler defaults from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SHORTSTOP_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Anchoring: None means "process cwd" (path/file/require/exec)
    # or "caller's directory" (glob)
    base_dir: str | None = None

    # file: handler: None reads raw bytes
    file_encoding: str | None = None

    # glob: handler
    glob_dot: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("base_dir", "file_encoding", mode="before")
    @classmethod
    def blank_is_unset(cls, v):
        """SHORTSTOP_BASE_DIR= (empty) behaves like an unset variable."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
