"""Ordered ``key = serving`` lists shared by journals and recipes."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Self, TextIO

from nosh.domain.food import Ingredient, parse_entry
from nosh.domain.nutrients import Nutrients, total
from nosh.domain.records import FoodResolver, iter_record_lines


@dataclass(frozen=True)
class FoodList:
    """A list of foods and servings, one per line.

    The serving is optional and defaults to one base serving::

        oats = 0.5 cup
        banana = 1
        berries
    """

    entries: list[Ingredient] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Ingredient]:
        return iter(self.entries)

    def nutrients(self) -> Nutrients:
        """Return the total nutrients of every entry."""
        return total(entry.nutrients() for entry in self.entries)

    def appended(self, entry: Ingredient) -> Self:
        """Return a copy with the entry added at the end."""
        return type(self)(entries=[*self.entries, entry])

    @classmethod
    def load(cls, stream: TextIO, resolve: FoodResolver) -> Self:
        """Decode entries, checking each serving unit against its food."""
        entries = []
        for number, line in iter_record_lines(stream):
            entry = parse_entry(line, number, resolve)
            entry.food.portion(entry.serving)
            entries.append(entry)
        return cls(entries=entries)

    def save(self, stream: TextIO) -> None:
        """Encode entries one per line."""
        stream.writelines(entry.format() + "\n" for entry in self.entries)
