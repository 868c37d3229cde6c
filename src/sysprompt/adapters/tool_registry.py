"""Tool registry adapter."""

from __future__ import annotations

from ..core.ports import ToolNames

DEFAULT_TOOL_NAMES = ToolNames(
    list_directory="list_directory",
    edit="replace",
    glob="glob",
    grep="search_file_content",
    read_file="read_file",
    read_many_files="read_many_files",
    shell="run_shell_command",
    write_file="write_file",
    memory="save_memory",
)


class ToolRegistryAdapter:
    def __init__(self, names: ToolNames | None = None):
        self._names = names or DEFAULT_TOOL_NAMES

    def tool_names(self) -> ToolNames:
        return self._names
