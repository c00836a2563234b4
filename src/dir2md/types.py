from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class ContentKind(str, Enum):
    """Classification of a file's content as reported by content sniffing.

    Attributes:
        TEXT: The file holds readable text.
        BINARY: The file holds binary data.
        EMPTY: The file has no content at all.
    """

    TEXT = "text"
    BINARY = "binary"
    EMPTY = "empty"

    @property
    def is_documentable(self) -> bool:
        """Whether content of this kind can be written into a code fence."""
        return self is not ContentKind.BINARY
