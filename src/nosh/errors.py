"""Error types raised by the ledger."""

from collections.abc import Sequence
from pathlib import PurePath


class NoshError(Exception):
    """Base class for ledger errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class DecodeError(NoshError, ValueError):
    """Raised when a record file cannot be parsed."""

    def __init__(
        self, message: str, path: PurePath | None = None, line: int | None = None
    ) -> None:
        super().__init__(message)
        self.path = path
        self.line = line

    def with_path(self, path: PurePath) -> "DecodeError":
        """Return a copy of this error located in the given file."""
        return DecodeError(self.message, path=path, line=self.line)

    def __str__(self) -> str:
        location = ""
        if self.path is not None:
            location = str(self.path)
            if self.line is not None:
                location = f"{location}:{self.line}"
        elif self.line is not None:
            location = f"line {self.line}"
        return f"{location}: {self.message}" if location else self.message


class ServingUnitError(NoshError, ValueError):
    """Raised when a serving unit cannot be resolved for a food."""


class UnknownServingUnitError(ServingUnitError):
    """Raised when no serving unit of a food matches the requested one."""

    def __init__(self, unit: str, known: Sequence[str]) -> None:
        super().__init__(
            f"Unknown serving unit '{unit}', expected one of: {', '.join(known)}"
        )
        self.unit = unit
        self.known = list(known)


class AmbiguousServingUnitError(ServingUnitError):
    """Raised when a unit abbreviation matches more than one serving unit."""

    def __init__(self, unit: str, candidates: Sequence[str]) -> None:
        first, second = candidates[0], candidates[1]
        super().__init__(
            f"Serving unit '{unit}' ambiguous between '{first}' and '{second}'"
        )
        self.unit = unit
        self.candidates = list(candidates)


class FoodNotFoundError(NoshError, LookupError):
    """Raised when a referenced food key has no record."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Food not found: {key}")
        self.key = key


class CyclicFoodError(NoshError):
    """Raised when a food's ingredients lead back to the food itself."""

    def __init__(self, chain: Sequence[str]) -> None:
        super().__init__(f"Food references itself: {' -> '.join(chain)}")
        self.chain = list(chain)
