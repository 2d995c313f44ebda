"""Configuration management for tablednd.

This module provides two layers of configuration:

* ``Settings`` - process-wide defaults read once from the environment or a
  ``.env`` file.
* ``DragConfig`` - the per-table drag configuration, validated and merged
  once when a table is built and immutable afterwards.

Environment Variables:
    TABLEDND_SENSITIVITY: Pointer movement (px) an axis must exceed before it
                          counts as a move (default: 10)
    TABLEDND_SCROLL_AMOUNT: Viewport edge distance and auto-scroll step (default: 5)
    TABLEDND_HIERARCHY_LEVEL: Default maximum nesting depth, 0 disables (default: 0)
    TABLEDND_DRAG_CLASS: Class applied to a row while it is dragged
                         (default: tDnD_whileDrag)
    TABLEDND_LOG_LEVEL: Logging level (default: INFO)
    TABLEDND_DEBUG: Enable debug mode (default: false)
"""

import re
from functools import lru_cache
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SERIALIZE_REGEXP = r"[^\-]*$"


class Settings(BaseSettings):
    """Application settings for tablednd.

    All configuration values can be set via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="TABLEDND_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Drag defaults
    sensitivity: int = 10
    scroll_amount: int = 5
    hierarchy_level: int = 0
    drag_class: Optional[str] = "tDnD_whileDrag"

    # Logging configuration
    log_level: str = "INFO"

    # Debug mode
    debug: bool = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    return Settings()


class DragConfig(BaseModel):
    """Per-table drag configuration.

    Numeric defaults come from ``Settings`` so a deployment can tune them
    without touching call sites. Instances are frozen; use ``merged`` to
    derive a new configuration when a table is rebuilt.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    drag_handle: Optional[str] = None
    on_drag_class: Optional[str] = Field(default_factory=lambda: get_settings().drag_class)
    on_drag_style: Optional[dict[str, str]] = None
    on_drop_style: Optional[dict[str, str]] = None
    scroll_amount: int = Field(default_factory=lambda: get_settings().scroll_amount, ge=0)
    sensitivity: int = Field(default_factory=lambda: get_settings().sensitivity, ge=0)
    hierarchy_level: int = Field(default_factory=lambda: get_settings().hierarchy_level, ge=0)
    auto_clean_relations: bool = True
    json_pretty_separator: str | int = "\t\t\t"
    serialize_regexp: Optional[str] = DEFAULT_SERIALIZE_REGEXP
    serialize_param_name: Optional[str] = None
    # Flat tables historically advance the bucket key to each appended id.
    chain_flat_buckets: bool = True

    on_drag_start: Optional[Callable[..., Any]] = None
    on_drop: Optional[Callable[..., Any]] = None
    on_allow_drop: Optional[Callable[..., Any]] = None

    @field_validator("serialize_regexp")
    @classmethod
    def _check_regexp(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"Invalid serialize_regexp: {e}") from e
        return value

    @property
    def hierarchy_enabled(self) -> bool:
        """Check if parent/child nesting is switched on."""
        return self.hierarchy_level > 0

    def merged(self, **options: Any) -> "DragConfig":
        """Return a validated copy with ``options`` applied on top."""
        data = self.model_dump()
        data.update(options)
        return DragConfig(**data)
