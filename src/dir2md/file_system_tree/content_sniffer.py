"""Content sniffing: classify files as text, binary or empty."""

import os
from pathlib import Path

from dir2md.types import ContentKind, PathType

# Extensions that are classified without reading the content
BINARY_EXTENSIONS = frozenset(
    {
        # Executables and objects
        ".exe",
        ".dll",
        ".so",
        ".dylib",
        ".o",
        ".a",
        ".class",
        ".pyc",
        ".pyo",
        ".bin",
        # Images
        ".jpg",
        ".jpeg",
        ".png",
        ".gif",
        ".bmp",
        ".tiff",
        ".ico",
        ".webp",
        # Audio and video
        ".mp3",
        ".mp4",
        ".wav",
        ".ogg",
        ".mov",
        ".avi",
        ".mkv",
        # Archives
        ".zip",
        ".gz",
        ".bz2",
        ".xz",
        ".7z",
        ".tar",
        ".jar",
        ".whl",
        # Documents and databases
        ".pdf",
        ".sqlite",
        ".sqlite3",
        ".db",
        # Fonts
        ".ttf",
        ".otf",
        ".woff",
        ".woff2",
    }
)

TEXT_EXTENSIONS = frozenset(
    {
        ".py",
        ".js",
        ".ts",
        ".java",
        ".c",
        ".cc",
        ".cpp",
        ".cxx",
        ".h",
        ".hpp",
        ".sh",
        ".html",
        ".css",
        ".json",
        ".xml",
        ".yml",
        ".yaml",
        ".md",
        ".sql",
        ".php",
        ".rb",
        ".go",
        ".rs",
        ".txt",
        ".toml",
        ".ini",
        ".cfg",
        ".csv",
        ".svg",
    }
)

SNIFF_SIZE = 8192

# Control characters allowed in text: tab, newline, form feed, carriage return, escape
_TEXT_CONTROL_BYTES = frozenset({8, 9, 10, 12, 13, 27})


def sniff_content(file_path: PathType, chunk_size: int = SNIFF_SIZE) -> ContentKind:
    """Classify a file as text, binary or empty.

    The file is opened first, so a file that cannot be read raises instead of
    being classified. Empty files are then reported as EMPTY, so an empty
    ``.png`` is still documentable. Well-known extensions are classified
    without reading any content. Everything else is decided from the first
    ``chunk_size`` bytes: a NUL byte means binary, valid UTF-8 with few
    control characters means text, and for other encodings the share of
    printable bytes decides.

    Args:
        file_path: Path to the file to classify.
        chunk_size: Number of bytes inspected. Defaults to 8192.

    Returns:
        The content kind of the file.

    Raises:
        OSError: If the file cannot be opened or read.

    Example:
        >>> sniff_content("main.py")  # doctest: +SKIP
        <ContentKind.TEXT: 'text'>
    """
    path_obj = Path(file_path)

    with open(path_obj, "rb") as file:
        if os.fstat(file.fileno()).st_size == 0:
            return ContentKind.EMPTY

        extension = path_obj.suffix.lower()
        if extension in BINARY_EXTENSIONS:
            return ContentKind.BINARY
        if extension in TEXT_EXTENSIONS:
            return ContentKind.TEXT

        chunk = file.read(chunk_size)

    return classify_bytes(chunk)


def classify_bytes(chunk: bytes) -> ContentKind:
    """Classify a leading chunk of file content.

    Example:
        >>> classify_bytes(b"")
        <ContentKind.EMPTY: 'empty'>
        >>> classify_bytes(b"print('hi')\\n")
        <ContentKind.TEXT: 'text'>
        >>> classify_bytes(b"PK\\x03\\x04\\x00\\x00")
        <ContentKind.BINARY: 'binary'>
    """
    if not chunk:
        return ContentKind.EMPTY

    if b"\0" in chunk:
        return ContentKind.BINARY

    control_bytes = sum(1 for byte in chunk if byte < 32 and byte not in _TEXT_CONTROL_BYTES)

    try:
        chunk.decode("utf-8")
    except UnicodeDecodeError as e:
        # A multi-byte sequence cut off by the chunk boundary is still UTF-8
        if e.reason != "unexpected end of data":
            printable = sum(1 for byte in chunk if 32 <= byte < 127 or byte in _TEXT_CONTROL_BYTES or byte >= 160)
            return ContentKind.TEXT if printable / len(chunk) >= 0.95 else ContentKind.BINARY

    if control_bytes / len(chunk) > 0.01:
        return ContentKind.BINARY
    return ContentKind.TEXT
