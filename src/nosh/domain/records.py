"""Record contract shared by every type kept in the database."""

from collections.abc import Callable, Iterator
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, Self, TextIO

if TYPE_CHECKING:
    from nosh.domain.food import Food

FoodResolver = Callable[[str], "Food | None"]
"""Look up a food by key while decoding a record; None when it is missing."""

EXTENSION = ".txt"


class Data(Protocol):
    """A type that can be stored in the database.

    Each record kind lives under its own top-level directory and maps its key
    to a relative file path inside that directory. Decoding receives a
    resolver so that records referencing foods can embed them.
    """

    DIR: ClassVar[str]

    @classmethod
    def path(cls, key: Any) -> PurePosixPath:
        """Return the file path for a key, starting with DIR and with an extension."""

    @classmethod
    def key_from_path(cls, path: PurePosixPath) -> Any:
        """Return the key stored at a relative path; the inverse of path()."""

    @classmethod
    def load(cls, stream: TextIO, resolve: FoodResolver) -> Self:
        """Decode a record from a text stream."""

    def save(self, stream: TextIO) -> None:
        """Encode the record to a text stream."""


def keyed_path(directory: str, key: str) -> PurePosixPath:
    """Return ``directory/key.txt`` for string keyed records."""
    if not key or "/" in key or key in {".", ".."}:
        raise ValueError(f"Invalid key: '{key}'")
    # Keys are written verbatim as the left side of ``key = serving`` lines.
    if "=" in key or key[0] in "#[" or key != key.strip() or "\n" in key:
        raise ValueError(f"Invalid key: '{key}'")
    return PurePosixPath(directory, key + EXTENSION)


def key_from_keyed_path(directory: str, path: PurePosixPath) -> str:
    """Return the string key stored at ``directory/key.txt``."""
    if path.parent != PurePosixPath(directory) or path.suffix != EXTENSION:
        raise ValueError(f"Not a {directory} record path: {path}")
    return path.stem


def iter_record_lines(stream: TextIO) -> Iterator[tuple[int, str]]:
    """Yield (line number, stripped text), skipping blanks and # comments."""
    for number, raw in enumerate(stream, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        yield number, line
