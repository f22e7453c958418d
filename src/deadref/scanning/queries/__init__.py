"""Tree-sitter query registry.

Maps grammar names to their query modules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import tsx, typescript

if TYPE_CHECKING:
    from types import ModuleType

QUERY_MODULES: dict[str, ModuleType] = {
    "typescript": typescript,
    "tsx": tsx,
}


def get_queries(language: str) -> dict[str, str] | None:
    """Get all queries for a grammar.

    Args:
        language: Grammar name ("typescript" or "tsx")

    Returns:
        Dict of query_name -> query_string, or None if unsupported
    """
    module = QUERY_MODULES.get(language)
    if module is None:
        return None
    return module.get_all_queries()


__all__ = [
    "QUERY_MODULES",
    "get_queries",
]
