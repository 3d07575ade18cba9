"""Daily journals of food consumed."""

from datetime import date
from pathlib import PurePosixPath
from typing import ClassVar

from nosh.domain.entries import FoodList
from nosh.domain.food import Ingredient
from nosh.domain.records import EXTENSION

JournalEntry = Ingredient


class Journal(FoodList):
    """Foods eaten on one day, in the order they were recorded."""

    DIR: ClassVar[str] = "journal"

    @classmethod
    def path(cls, key: date) -> PurePosixPath:
        return PurePosixPath(
            cls.DIR, f"{key.year:04}", f"{key.month:02}", f"{key.day:02}" + EXTENSION
        )

    @classmethod
    def key_from_path(cls, path: PurePosixPath) -> date:
        parts = path.parts
        if len(parts) != 4 or parts[0] != cls.DIR or path.suffix != EXTENSION:
            raise ValueError(f"Not a journal path: {path}")
        year, month, day = parts[1], parts[2], path.stem
        if not (year.isdigit() and month.isdigit() and day.isdigit()):
            raise ValueError(f"Not a journal path: {path}")
        return date(int(year), int(month), int(day))
