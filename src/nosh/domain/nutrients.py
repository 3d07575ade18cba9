"""Macronutrient value type."""

import math
from collections.abc import Iterable
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Nutrients:
    """Macronutrients in grams plus energy in kilocalories."""

    carb: float = 0.0
    fat: float = 0.0
    protein: float = 0.0
    kcal: float = 0.0

    def with_computed_kcal(self) -> "Nutrients":
        """Fill in kcal with the Atwater general factors when it is unset.

        The general system uses 4 kcal/g for carbohydrate and protein and
        9 kcal/g for fat. A non-zero kcal is kept as-is.
        """
        if self.kcal > 0:
            return self
        return replace(self, kcal=self.carb * 4 + self.fat * 9 + self.protein * 4)

    def isclose(self, other: "Nutrients", rel_tol: float = 1e-6) -> bool:
        """Return True when every field matches within a relative tolerance."""
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=1e-9)
            for a, b in zip(self.as_tuple(), other.as_tuple(), strict=True)
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return (carb, fat, protein, kcal)."""
        return (self.carb, self.fat, self.protein, self.kcal)

    def __add__(self, other: object) -> "Nutrients":
        if not isinstance(other, Nutrients):
            return NotImplemented
        return Nutrients(
            carb=self.carb + other.carb,
            fat=self.fat + other.fat,
            protein=self.protein + other.protein,
            kcal=self.kcal + other.kcal,
        )

    def __mul__(self, factor: object) -> "Nutrients":
        if not isinstance(factor, int | float):
            return NotImplemented
        return Nutrients(
            carb=self.carb * factor,
            fat=self.fat * factor,
            protein=self.protein * factor,
            kcal=self.kcal * factor,
        )

    __rmul__ = __mul__


def total(items: Iterable[Nutrients]) -> Nutrients:
    """Sum nutrients, starting from zero."""
    result = Nutrients()
    for item in items:
        result = result + item
    return result
