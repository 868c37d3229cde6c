"""sysprompt - configuration-driven system instruction resolver"""

__version__ = "1.0.0"
__description__ = "Resolve, compose and persist agent system instructions"

__all__ = ["get_compression_prompt", "main", "resolve_instructions", "__version__"]


def __getattr__(name: str):
    """Lazy import so that importing sysprompt.core does not load .env files.

    The top-level config module calls load_dotenv() on import; only the entry
    points that actually read the process environment should trigger it.
    """
    if name == "resolve_instructions":
        from .core.resolver import resolve_instructions

        return resolve_instructions
    if name == "get_compression_prompt":
        from .core.templates import get_compression_prompt

        return get_compression_prompt
    if name == "main":
        from .main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
