#!/usr/bin/env python3
"""sysprompt: print the resolved system instructions for the current environment"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .adapters.config_env import load_config_input
from .adapters.environment_probe import EnvironmentProbeAdapter
from .adapters.tool_registry import ToolRegistryAdapter
from .config import config
from .core.config_model import ConfigInput
from .core.errors import ConfigurationError
from .core.ports import EnvironmentProbe, ToolRegistry
from .core.resolver import resolve_instructions
from .core.templates import get_compression_prompt


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sysprompt",
        description=(
            "Print the system instructions resolved from "
            f"{config.SYSTEM_MD_VAR} / {config.WRITE_SYSTEM_MD_VAR}."
        ),
    )
    memory = parser.add_mutually_exclusive_group()
    memory.add_argument("--memory", help="User memory appended after the instructions")
    memory.add_argument(
        "--memory-file", type=Path, help="Read the user memory from this file"
    )
    parser.add_argument(
        "--compression",
        action="store_true",
        help="Print the history compression instructions instead",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _resolve(
    config_input: ConfigInput,
    probe: EnvironmentProbe,
    registry: ToolRegistry,
    user_memory: str | None,
) -> str:
    facts = probe.snapshot(config_input.cwd)
    return resolve_instructions(config_input, facts, registry.tool_names(), user_memory)


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (args.debug or config.DEBUG) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.compression:
        print(get_compression_prompt())
        return 0

    user_memory = args.memory
    if args.memory_file is not None:
        try:
            user_memory = args.memory_file.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            parser.error(f"cannot read --memory-file {args.memory_file}: {e.strerror or e}")

    try:
        instructions = _resolve(
            load_config_input(),
            EnvironmentProbeAdapter(),
            ToolRegistryAdapter(),
            user_memory,
        )
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(instructions)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
