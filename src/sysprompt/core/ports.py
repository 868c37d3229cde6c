"""Core ports (interfaces) for sysprompt.

These protocols define the boundaries between the resolver and the
collaborators that know about the outside world: which tools are
registered, and what the surrounding environment looks like. The resolver
only ever sees their results.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from .facts import EnvironmentFacts, SandboxKind


@dataclass(frozen=True)
class ToolNames:
    """Opaque tool identifiers referenced by the instruction template."""

    list_directory: str
    edit: str
    glob: str
    grep: str
    read_file: str
    read_many_files: str
    shell: str
    write_file: str
    memory: str


@runtime_checkable
class ToolRegistry(Protocol):
    """Source of tool names substituted into the template."""

    def tool_names(self) -> ToolNames:
        """Return the names of the registered tools."""


@runtime_checkable
class EnvironmentProbe(Protocol):
    """Environment detection used to build EnvironmentFacts."""

    def is_git_repository(self, directory: Path) -> bool:
        """Whether the directory is inside a git work tree."""

    def sandbox_kind(self) -> SandboxKind:
        """Return the active sandbox kind."""

    def snapshot(self, directory: Path) -> EnvironmentFacts:
        """Capture both facts at once."""
