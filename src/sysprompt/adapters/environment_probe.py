"""Environment probe adapter.

Detects whether a directory belongs to a git work tree and which sandbox
(if any) the process runs under. Results are snapshotted into an
EnvironmentFacts value once per resolution.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from ..config import config
from ..core.facts import EnvironmentFacts, SandboxKind

logger = logging.getLogger(__name__)


class EnvironmentProbeAdapter:
    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = os.environ if environ is None else environ

    def is_git_repository(self, directory: Path) -> bool:
        """Check ``directory`` and its ancestors for a ``.git`` entry.

        ``.git`` may be a directory or, for worktrees and submodules, a file.
        """
        try:
            current = directory.resolve()
        except OSError as e:
            logger.debug(f"Could not resolve {directory}: {e}")
            return False
        for candidate in (current, *current.parents):
            if (candidate / ".git").exists():
                return True
        return False

    def sandbox_kind(self) -> SandboxKind:
        value = self._environ.get(config.SANDBOX_VAR, "")
        if value == config.SEATBELT_SANDBOX:
            return SandboxKind.SEATBELT
        if value:
            return SandboxKind.CONTAINER
        return SandboxKind.NONE

    def snapshot(self, directory: Path) -> EnvironmentFacts:
        facts = EnvironmentFacts(
            is_git_repository=self.is_git_repository(directory),
            sandbox=self.sandbox_kind(),
        )
        logger.debug("Environment facts: %s", facts)
        return facts
