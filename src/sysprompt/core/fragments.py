"""Environment fragments of the default instructions.

Each selector is a pure function of EnvironmentFacts that returns its
fragment text or an empty string. FRAGMENT_SELECTORS fixes the order in
which they appear between the opening and closing bodies.
"""

from __future__ import annotations

from typing import Callable

from .facts import EnvironmentFacts, SandboxKind

SEATBELT_FRAGMENT = """
# macOS Seatbelt
You are running under macOS Seatbelt with limited access to files outside the project directory or system temp directory, and with limited access to host system resources such as ports. If a command fails in a way that could be caused by Seatbelt (for example 'Operation not permitted'), report the error to the user, explain why Seatbelt may be the cause, and how the user may need to adjust their Seatbelt profile.
""".strip()

SANDBOX_FRAGMENT = """
# Sandbox
You are running in a sandbox container with limited access to files outside the project directory or system temp directory, and with limited access to host system resources such as ports. If a command fails in a way that could be caused by sandboxing (for example 'Operation not permitted'), report the error to the user, explain why sandboxing may be the cause, and how the user may need to adjust their sandbox configuration.
""".strip()

GIT_FRAGMENT = """
# Git Repository
- The current working (project) directory is managed by a git repository.
- Before committing, gather information with shell commands:
  - `git status` to make sure all relevant files are tracked and staged, using `git add ...` as needed.
  - `git diff HEAD` to review all changes to tracked files since the last commit.
    - `git diff --staged` to review only staged changes when a partial commit makes sense or was requested.
  - `git log -n 3` to review recent commit messages and match their style.
- Combine shell commands with `&&` where possible, for example `git status && git diff HEAD && git log -n 3`.
- Always propose a draft commit message, focused on why rather than what.
- After each commit, confirm it succeeded by running `git status`.
- If a commit fails, explain why and how it may be resolved. Never work around the failure unless asked.
- Never push to a remote repository unless explicitly asked.
""".strip()


def sandbox_fragment(facts: EnvironmentFacts) -> str:
    if facts.sandbox is SandboxKind.SEATBELT:
        return SEATBELT_FRAGMENT
    if facts.sandbox is SandboxKind.CONTAINER:
        return SANDBOX_FRAGMENT
    return ""


def git_fragment(facts: EnvironmentFacts) -> str:
    return GIT_FRAGMENT if facts.is_git_repository else ""


FragmentSelector = Callable[[EnvironmentFacts], str]

FRAGMENT_SELECTORS: tuple[FragmentSelector, ...] = (
    sandbox_fragment,
    git_fragment,
)


def select_fragments(facts: EnvironmentFacts) -> list[str]:
    """Evaluate every selector in order; absent fragments are empty strings."""
    return [selector(facts) for selector in FRAGMENT_SELECTORS]
