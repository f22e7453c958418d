"""Tree-sitter queries for plain TypeScript (.ts) files.

Extracts:
    - Import declarations and re-exports with a source
    - Dynamic import() calls with string-literal arguments
"""

# Static imports, including `import type` and side-effect imports
IMPORT_QUERY = """
(import_statement
    source: (string) @import.source
)

(export_statement
    source: (string) @export.source
)
"""

# import('./x'). Only literal arguments match; non-literal ones are skipped.
DYNAMIC_IMPORT_QUERY = """
(call_expression
    function: (import)
    arguments: (arguments (string) @dynamic_import.source)
)
"""


def get_all_queries() -> dict[str, str]:
    """Return all TypeScript queries as a dict."""
    return {
        "import": IMPORT_QUERY,
        "dynamic_import": DYNAMIC_IMPORT_QUERY,
    }
