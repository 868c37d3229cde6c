"""Snapshot of the runtime environment consumed by the template composer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SandboxKind(Enum):
    """Execution sandbox the process is running under."""

    NONE = "none"
    SEATBELT = "sandbox-exec"  # macOS seatbelt profile
    CONTAINER = "container"  # any other sandbox


@dataclass(frozen=True)
class EnvironmentFacts:
    """Environment facts, computed once before resolution.

    Attributes:
        is_git_repository: Whether the working directory is inside a git work tree
        sandbox: Active sandbox kind
    """

    is_git_repository: bool = False
    sandbox: SandboxKind = SandboxKind.NONE
