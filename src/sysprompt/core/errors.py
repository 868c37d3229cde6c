"""Errors raised while resolving system instructions."""

from __future__ import annotations

from pathlib import Path


class ConfigurationError(Exception):
    """Raised when the configured instruction sources cannot be honoured."""


class MissingOverrideFileError(ConfigurationError):
    """An override was requested but the resolved file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"missing system prompt file '{path}'")
