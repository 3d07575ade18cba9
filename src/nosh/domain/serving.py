"""Serving quantities and their text form."""

import re
from dataclasses import dataclass
from decimal import Decimal

_SERVING_PATTERN = re.compile(r"(?P<size>[0-9]*\.?[0-9]+)\s*(?P<unit>.*)", re.DOTALL)


@dataclass(frozen=True)
class Serving:
    """A portion of food, optionally measured in a unit.

    Without a unit the size is a multiple of the food's base serving
    (``1.5`` servings). With a unit it is a quantity such as ``150 g`` that
    is resolved against the food's serving table.
    """

    size: float = 1.0
    unit: str | None = None

    @classmethod
    def parse(cls, text: str) -> "Serving":
        """Parse strings such as ``"1.5"``, ``"1.5c"`` or ``"25 g dry"``."""
        match = _SERVING_PATTERN.fullmatch(text.strip())
        if match is None:
            raise ValueError(f"Invalid serving: '{text.strip()}'")
        unit = match.group("unit").strip()
        return cls(size=float(match.group("size")), unit=unit or None)

    def __mul__(self, factor: object) -> "Serving":
        if not isinstance(factor, int | float):
            return NotImplemented
        return Serving(size=self.size * factor, unit=self.unit)

    __rmul__ = __mul__

    def __str__(self) -> str:
        if self.unit:
            return f"{format_number(self.size)} {self.unit}"
        return format_number(self.size)


def parse_number(text: str, signed: bool = False) -> float:
    """Parse a plain number as written in record files.

    A leading minus sign is only accepted when signed is True.
    """
    value = text.strip()
    pattern = r"-?[0-9]*\.?[0-9]+" if signed else r"[0-9]*\.?[0-9]+"
    if not re.fullmatch(pattern, value):
        raise ValueError(f"Invalid number: '{value}'")
    return float(value)


def format_number(value: float) -> str:
    """Render a float in the shortest form that parses back to it.

    Integral values drop the fractional part and exponent notation is
    expanded, so the output always matches the serving grammar.
    """
    if float(value).is_integer():
        return str(int(value))
    text = repr(float(value))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text
