"""Code fence language tags derived from file extensions."""

LANGUAGE_BY_EXTENSION = {
    "py": "python",
    "js": "javascript",
    "ts": "typescript",
    "java": "java",
    "cpp": "cpp",
    "cc": "cpp",
    "cxx": "cpp",
    "c": "c",
    "h": "c",
    "hpp": "c",
    "sh": "bash",
    "html": "html",
    "css": "css",
    "json": "json",
    "xml": "xml",
    "yml": "yaml",
    "yaml": "yaml",
    "md": "markdown",
    "sql": "sql",
    "php": "php",
    "rb": "ruby",
    "go": "go",
    "rs": "rust",
}

DEFAULT_LANGUAGE = "text"


def language_for(relative_path: str) -> str:
    """Return the fence language tag for a file.

    The extension is whatever follows the last dot in the path. Lookup is
    case-sensitive, and unknown extensions map to ``text``.

    Example:
        >>> language_for("src/app/main.py")
        'python'
        >>> language_for("include/util.hpp")
        'c'
        >>> language_for("Makefile")
        'text'
        >>> language_for("README.MD")
        'text'
    """
    if "." not in relative_path:
        return DEFAULT_LANGUAGE
    extension = relative_path.rsplit(".", 1)[1]
    return LANGUAGE_BY_EXTENSION.get(extension, DEFAULT_LANGUAGE)
