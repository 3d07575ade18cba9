"""Named recipes."""

from pathlib import PurePosixPath
from typing import ClassVar

from nosh.domain.entries import FoodList
from nosh.domain.food import Food
from nosh.domain.records import key_from_keyed_path, keyed_path


class Recipe(FoodList):
    """Foods in various quantities, stored under a free-form name."""

    DIR: ClassVar[str] = "recipe"

    @classmethod
    def path(cls, key: str) -> PurePosixPath:
        return keyed_path(cls.DIR, key)

    @classmethod
    def key_from_path(cls, path: PurePosixPath) -> str:
        return key_from_keyed_path(cls.DIR, path)

    def to_food(
        self, name: str, servings: list[tuple[str, float]] | None = None
    ) -> Food:
        """Return a composite food made of this recipe's entries.

        One base serving of the food is the whole recipe.
        """
        return Food(name=name, spec=list(self.entries), servings=list(servings or []))
