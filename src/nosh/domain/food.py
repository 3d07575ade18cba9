"""Foods, their ingredients and nutrient resolution."""

import logging
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import ClassVar, TextIO

from nosh.domain.nutrients import Nutrients, total
from nosh.domain.records import (
    FoodResolver,
    iter_record_lines,
    key_from_keyed_path,
    keyed_path,
)
from nosh.domain.serving import Serving, format_number, parse_number
from nosh.errors import (
    AmbiguousServingUnitError,
    DecodeError,
    FoodNotFoundError,
    UnknownServingUnitError,
)

_logger = logging.getLogger(__name__)

_NUTRIENT_KEYS = ("carb", "fat", "protein", "kcal")
_SECTIONS = ("nutrients", "ingredients", "servings")


@dataclass(frozen=True)
class Ingredient:
    """A food consumed in a given serving, with the food embedded."""

    key: str
    serving: Serving
    food: "Food"

    @classmethod
    def parse(cls, line: str, resolve: FoodResolver) -> "Ingredient":
        """Parse a ``key [= serving]`` line and resolve the food it names."""
        key, sep, text = line.partition("=")
        key = key.strip()
        if not key:
            raise DecodeError(f"Missing food key: {line}")
        try:
            serving = Serving.parse(text) if sep else Serving()
        except ValueError as exc:
            raise DecodeError(str(exc)) from exc
        food = resolve(key)
        if food is None:
            raise FoodNotFoundError(key)
        return cls(key=key, serving=serving, food=food)

    def format(self) -> str:
        """Return the ``key = serving`` line for this entry."""
        return f"{self.key} = {self.serving}"

    def nutrients(self) -> Nutrients:
        """Return the nutrients in this serving of the food."""
        return self.food.serve(self.serving)


FoodSpec = Nutrients | list[Ingredient]
"""Nutrients stated directly, or derived from a list of ingredients."""


@dataclass(frozen=True)
class Food:
    """A single food item.

    ``name`` is for display; records reference a food by its key (the file
    name), not by name. ``servings`` lists ways of describing one base
    serving, e.g. ``[("g", 100.0), ("cups", 0.5)]`` means 100g or half a cup
    make one serving.
    """

    DIR: ClassVar[str] = "food"

    name: str
    spec: FoodSpec = field(default_factory=Nutrients)
    servings: list[tuple[str, float]] = field(default_factory=list)

    @property
    def ingredients(self) -> list[Ingredient]:
        """Return the ingredients of a composite food, or an empty list."""
        if isinstance(self.spec, Nutrients):
            return []
        return self.spec

    def units(self) -> list[str]:
        """Return the names of the serving units defined for this food."""
        return [unit for unit, _ in self.servings]

    def portion(self, serving: Serving) -> float:
        """Return how many base servings the given serving amounts to.

        A unit matches every serving unit it is a prefix of, so ``c`` can
        stand for ``cups``. It must match exactly one.
        """
        if serving.unit is None:
            return serving.size
        matches = [
            (unit, size)
            for unit, size in self.servings
            if unit.startswith(serving.unit)
        ]
        if not matches:
            raise UnknownServingUnitError(serving.unit, self.units())
        if len(matches) > 1:
            raise AmbiguousServingUnitError(
                serving.unit, [unit for unit, _ in matches]
            )
        _, size = matches[0]
        return serving.size / size

    def serve(self, serving: Serving) -> Nutrients:
        """Compute the nutrients in a serving of this food.

        Ingredient servings scale with the portion of the parent food.
        """
        portion = self.portion(serving)
        if isinstance(self.spec, Nutrients):
            return self.spec * portion
        return total(
            ingredient.food.serve(ingredient.serving * portion)
            for ingredient in self.spec
        )

    def nutrients(self) -> Nutrients:
        """Return the nutrients in one base serving."""
        return self.serve(Serving())

    @classmethod
    def path(cls, key: str) -> PurePosixPath:
        return keyed_path(cls.DIR, key)

    @classmethod
    def key_from_path(cls, path: PurePosixPath) -> str:
        return key_from_keyed_path(cls.DIR, path)

    @classmethod
    def load(cls, stream: TextIO, resolve: FoodResolver) -> "Food":
        """Decode a food from its sectioned text form."""
        name: str | None = None
        section: str | None = None
        seen: set[str] = set()
        values: dict[str, float] = {}
        ingredients: list[Ingredient] = []
        servings: list[tuple[str, float]] = []

        for number, line in iter_record_lines(stream):
            _logger.debug("Parsing food line %s: %s", number, line)
            if line.startswith("["):
                section = _parse_section(line, number)
                if section in seen:
                    raise DecodeError(f"Duplicate section: [{section}]", line=number)
                seen.add(section)
                continue
            if section == "ingredients":
                ingredients.append(parse_entry(line, number, resolve))
                continue

            # Serving units may contain '=' themselves, sizes never do.
            key, value = _split_pair(line, number, last=section == "servings")
            if section is None:
                if key != "name":
                    raise DecodeError(f"Unexpected food key: {key}", line=number)
                if name is not None:
                    raise DecodeError("Duplicate food key: name", line=number)
                name = value
            elif key == "name":
                raise DecodeError(
                    f"Unexpected name in [{section}] section", line=number
                )
            elif section == "nutrients":
                if key not in _NUTRIENT_KEYS:
                    raise DecodeError(f"Unexpected nutrient: {key}", line=number)
                if key in values:
                    raise DecodeError(f"Duplicate nutrient: {key}", line=number)
                values[key] = _parse_value(value, number, signed=True)
            else:
                if not key:
                    raise DecodeError("Missing serving unit", line=number)
                if key in (unit for unit, _ in servings):
                    raise DecodeError(f"Duplicate serving unit: {key}", line=number)
                size = _parse_value(value, number)
                if size <= 0:
                    raise DecodeError(
                        f"Serving size must be positive: {value}", line=number
                    )
                servings.append((key, size))

        if name is None:
            raise DecodeError("Missing food key: name")
        if ("nutrients" in seen) == ("ingredients" in seen):
            raise DecodeError(
                "Food must define exactly one of [nutrients] or [ingredients]"
            )
        spec: FoodSpec
        if "nutrients" in seen:
            nutrients = Nutrients(**values)
            spec = nutrients if "kcal" in values else nutrients.with_computed_kcal()
        else:
            spec = ingredients
        return cls(name=name, spec=spec, servings=servings)

    def save(self, stream: TextIO) -> None:
        """Encode this food in its sectioned text form."""
        lines = [f"name = {self.name}", ""]
        if isinstance(self.spec, Nutrients):
            lines.append("[nutrients]")
            lines.extend(
                f"{key} = {format_number(getattr(self.spec, key))}"
                for key in _NUTRIENT_KEYS
            )
        else:
            lines.append("[ingredients]")
            lines.extend(ingredient.format() for ingredient in self.spec)
        if self.servings:
            lines.extend(["", "[servings]"])
            lines.extend(
                f"{unit} = {format_number(size)}" for unit, size in self.servings
            )
        stream.write("\n".join(lines) + "\n")


def parse_entry(line: str, number: int, resolve: FoodResolver) -> Ingredient:
    """Parse an entry line, reporting syntax errors at the given line number."""
    try:
        return Ingredient.parse(line, resolve)
    except DecodeError as exc:
        if exc.path is not None or exc.line is not None:
            raise
        raise DecodeError(exc.message, line=number) from exc


def _parse_section(line: str, number: int) -> str:
    if not line.endswith("]"):
        raise DecodeError(f"Invalid section header: {line}", line=number)
    section = line[1:-1].strip()
    if section not in _SECTIONS:
        raise DecodeError(f"Unexpected section: [{section}]", line=number)
    return section


def _split_pair(line: str, number: int, last: bool = False) -> tuple[str, str]:
    key, sep, value = line.rpartition("=") if last else line.partition("=")
    if not sep:
        raise DecodeError(f"Invalid food line, expected '=': {line}", line=number)
    return key.strip(), value.strip()


def _parse_value(value: str, number: int, signed: bool = False) -> float:
    try:
        return parse_number(value, signed=signed)
    except ValueError as exc:
        raise DecodeError(str(exc), line=number) from exc
