"""Tree-sitter queries for TSX (TypeScript with JSX).

Same import queries as plain TypeScript plus JSX attributes, whose values
are inspected in Python because they come in several shapes (string,
expression container holding a string or a template literal).
"""

from .typescript import DYNAMIC_IMPORT_QUERY, IMPORT_QUERY

JSX_ATTRIBUTE_QUERY = """
(jsx_attribute) @attribute
"""


def get_all_queries() -> dict[str, str]:
    """Return all TSX queries as a dict."""
    return {
        "import": IMPORT_QUERY,
        "dynamic_import": DYNAMIC_IMPORT_QUERY,
        "jsx_attribute": JSX_ATTRIBUTE_QUERY,
    }
