"""Resolution of the system instructions.

Keeps override loading, default composition, write-back and the memory
suffix in one place. Everything the resolver needs arrives as arguments:
the parsed configuration, an environment snapshot and the tool names.
"""

from __future__ import annotations

import logging

from .config_model import ConfigInput, SwitchSetting
from .errors import MissingOverrideFileError
from .facts import EnvironmentFacts
from .fragments import select_fragments
from .paths import override_setting, write_back_setting
from .ports import ToolNames
from .templates import INSTRUCTION_BODY, closing_body

logger = logging.getLogger(__name__)

MEMORY_SEPARATOR = "\n\n---\n\n"


def compose_default_template(facts: EnvironmentFacts, tools: ToolNames) -> str:
    """Build the default instructions for the given environment.

    The result depends only on ``facts`` and ``tools``.
    """
    parts = [INSTRUCTION_BODY, *select_fragments(facts), closing_body(tools)]
    return "\n\n".join(part for part in parts if part)


def load_override(setting: SwitchSetting) -> str:
    """Read the override file verbatim.

    Bytes that are not valid UTF-8 are replaced rather than rejected.

    Raises:
        MissingOverrideFileError: If the resolved path is not an existing file.
    """
    if not setting.path.is_file():
        raise MissingOverrideFileError(setting.path)
    logger.debug("Loading system instructions override from %s", setting.path)
    return setting.path.read_text(encoding="utf-8", errors="replace")


def write_back(setting: SwitchSetting, template: str) -> None:
    """Persist ``template`` when write-back is enabled.

    I/O errors propagate to the caller.
    """
    if not setting.enabled:
        return
    setting.path.parent.mkdir(parents=True, exist_ok=True)
    setting.path.write_text(template, encoding="utf-8")
    logger.debug("Wrote default system instructions to %s", setting.path)


def append_memory(base: str, user_memory: str | None) -> str:
    """Append caller-supplied memory below a horizontal rule."""
    if not user_memory or not user_memory.strip():
        return base
    return f"{base}{MEMORY_SEPARATOR}{user_memory.strip()}"


def resolve_instructions(
    config: ConfigInput,
    facts: EnvironmentFacts,
    tools: ToolNames,
    user_memory: str | None = None,
) -> str:
    """Resolve the full system instructions.

    Args:
        config: Switch values captured at process entry.
        facts: Environment snapshot used by the default template.
        tools: Tool names interpolated into the default template.
        user_memory: Optional text appended after the base instructions.

    Returns:
        The override file contents (when enabled) or the composed default,
        followed by the memory suffix.

    Raises:
        MissingOverrideFileError: If an override is enabled but its file is missing.
    """
    override = override_setting(config)
    # Checked first so that nothing is written when the override is unusable.
    base = load_override(override) if override.enabled else None

    write_setting = write_back_setting(config)
    if base is not None and write_setting.enabled and write_setting.path == override.path:
        # The loaded override is never replaced by the default.
        logger.warning(
            "Skipping write-back: %s is the active system instructions override",
            write_setting.path,
        )
        write_setting = SwitchSetting(enabled=False, path=write_setting.path)

    if base is None or write_setting.enabled:
        default = compose_default_template(facts, tools)
        logger.debug(
            "Composed default instructions (sandbox=%s, git=%s)",
            facts.sandbox.value,
            facts.is_git_repository,
        )
        write_back(write_setting, default)
        if base is None:
            base = default

    return append_memory(base, user_memory)
