"""Text-file database rooted at a directory.

Every record is a text file whose location depends on its type and key::

    <root>/food/oats.txt
    <root>/recipe/granola.txt
    <root>/journal/2024/07/01.txt
"""

import io
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any, Generic, TextIO, TypeVar

from nosh.domain.food import Food
from nosh.domain.records import Data, FoodResolver
from nosh.errors import CyclicFoodError, DecodeError, NoshError

_logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Data)


@dataclass(frozen=True)
class Listed(Generic[RecordT]):
    """One file found while listing, with its record or the error reading it."""

    path: Path
    key: Any
    record: RecordT | None = None
    error: Exception | None = None

    def unwrap(self) -> RecordT:
        """Return the record, raising the error that prevented loading it."""
        if self.error is not None:
            raise self.error
        if self.record is None:
            raise RuntimeError(f"No record loaded from {self.path}")
        return self.record


@dataclass
class Database:
    """Load, save, list and remove records under a root directory."""

    root: Path

    def __post_init__(self) -> None:
        self.root = Path(self.root)

    def load(self, kind: type[RecordT], key: Any) -> RecordT | None:
        """Load the record stored under key, or None if there is no such file."""
        relative = kind.path(key)
        return self._load(kind, relative, chain=(relative,))

    def save(self, key: Any, record: Data) -> None:
        """Write a record under key, replacing any existing file."""
        path = self.root / type(record).path(key)
        _logger.debug("Saving %r to %s", record, path)
        buffer = io.StringIO()
        record.save(buffer)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as stream:
            stream.write(buffer.getvalue())

    def remove(self, kind: type[Data], key: Any) -> None:
        """Delete the record stored under key; FileNotFoundError if absent."""
        path = self.root / kind.path(key)
        _logger.debug("Removing %s", path)
        path.unlink()

    def exists(self, kind: type[Data], key: Any) -> bool:
        """Return True when a record is stored under key."""
        return (self.root / kind.path(key)).is_file()

    def list(
        self, kind: type[RecordT], term: str | None = None
    ) -> Iterator[Listed[RecordT]]:
        """Yield every stored record of a kind, in path order.

        When term is given, only files whose path relative to the root
        contains it are loaded. Files that cannot be read or decoded are
        yielded with their error instead of stopping the listing.
        """
        directory = self.root / kind.DIR
        _logger.debug("Listing %s", directory)
        if not directory.is_dir():
            return
        for path in sorted(p for p in directory.rglob("*") if p.is_file()):
            relative = PurePosixPath(path.relative_to(self.root).as_posix())
            if term and term not in str(relative):
                continue
            yield self._listed(kind, path, relative)

    def resolve_food(self, key: str) -> Food | None:
        """Look up a food by key, embedding its ingredients."""
        return self._resolver(())(key)

    def _listed(
        self, kind: type[RecordT], path: Path, relative: PurePosixPath
    ) -> Listed[RecordT]:
        try:
            key = kind.key_from_path(relative)
        except ValueError as exc:
            return Listed(path=path, key=None, error=exc)
        try:
            with path.open(encoding="utf-8") as stream:
                record = self._decode(kind, stream, path, chain=(relative,))
        except (OSError, ValueError, NoshError) as exc:
            _logger.debug("Failed to load %s: %s", path, exc)
            return Listed(path=path, key=key, error=exc)
        return Listed(path=path, key=key, record=record)

    def _load(
        self,
        kind: type[RecordT],
        relative: PurePosixPath,
        chain: tuple[PurePosixPath, ...],
    ) -> RecordT | None:
        path = self.root / relative
        _logger.debug("Loading %s", path)
        try:
            stream = path.open(encoding="utf-8")
        except FileNotFoundError:
            return None
        with stream:
            return self._decode(kind, stream, path, chain)

    def _decode(
        self,
        kind: type[RecordT],
        stream: TextIO,
        path: Path,
        chain: tuple[PurePosixPath, ...],
    ) -> RecordT:
        try:
            return kind.load(stream, self._resolver(chain))
        except DecodeError as exc:
            if exc.path is not None:
                raise
            raise exc.with_path(path) from exc
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Invalid UTF-8: {exc.reason}", path=path) from exc

    def _resolver(self, chain: tuple[PurePosixPath, ...]) -> FoodResolver:
        def resolve(key: str) -> Food | None:
            try:
                relative = Food.path(key)
            except ValueError as exc:
                raise DecodeError(str(exc)) from exc
            if relative in chain:
                cycle = (*chain[chain.index(relative) :], relative)
                raise CyclicFoodError([Food.key_from_path(p) for p in cycle])
            return self._load(Food, relative, (*chain, relative))

        return resolve
