"""File-type knowledge shared by the extractors and the resolver."""

from pathlib import PurePosixPath

# Extensions a reference may carry and still name a project-owned file.
RECOGNIZED_EXTENSIONS = frozenset(
    {
        "ts",
        "tsx",
        "less",
        "scss",
        "css",
        "png",
        "jpg",
        "jpeg",
        "gif",
        "svg",
        "mp3",
        "mp4",
        "wav",
        "woff",
        "woff2",
        "ttf",
        "eot",
        "json",
    }
)


def has_recognized_extension(path: str) -> bool:
    """True if the last suffix of ``path`` is a recognized extension.

    >>> has_recognized_extension("src/main.ts")
    True
    >>> has_recognized_extension("src/main.rs")
    False
    """
    suffix = PurePosixPath(path).suffix
    return bool(suffix) and suffix[1:] in RECOGNIZED_EXTENSIONS


def grammar_for(path: str) -> str:
    """Tree-sitter grammar used to parse a script path."""
    return "tsx" if path.endswith(".tsx") else "typescript"
