"""Ledger operations over the record database."""

import logging
from dataclasses import dataclass
from datetime import date

from nosh.adapters.file_database import Database
from nosh.domain.food import Food
from nosh.domain.journal import Journal, JournalEntry
from nosh.domain.nutrients import Nutrients
from nosh.domain.recipe import Recipe
from nosh.domain.serving import Serving
from nosh.errors import FoodNotFoundError

_logger = logging.getLogger(__name__)


@dataclass
class LedgerService:
    """Application service for foods, journals and recipes."""

    database: Database

    def get_food(self, key: str) -> Food:
        """Return a food, raising FoodNotFoundError when it is missing."""
        food = self.database.load(Food, key)
        if food is None:
            raise FoodNotFoundError(key)
        return food

    def serve_food(self, key: str, serving: Serving | None = None) -> Nutrients:
        """Return the nutrients in a serving of a stored food."""
        return self.get_food(key).serve(serving or Serving())

    def list_foods(self, term: str | None = None) -> list[tuple[str, Food]]:
        """Return (key, food) pairs sorted by key, optionally filtered."""
        foods = [
            (listed.key, listed.unwrap()) for listed in self.database.list(Food, term)
        ]
        return sorted(foods, key=lambda item: item[0])

    def save_food(self, key: str, food: Food) -> None:
        """Create or replace a food."""
        self.database.save(key, food)

    def remove_food(self, key: str) -> None:
        """Delete a food; FileNotFoundError when it does not exist."""
        self.database.remove(Food, key)

    def journal(self, day: date) -> Journal:
        """Return the journal for a day, empty when nothing was recorded."""
        return self.database.load(Journal, day) or Journal()

    def journal_totals(self, day: date) -> Nutrients:
        """Return the nutrients eaten on a day."""
        return self.journal(day).nutrients()

    def eat(self, day: date, key: str, serving: Serving | None = None) -> Journal:
        """Record a serving of a food in the day's journal."""
        entry = JournalEntry(
            key=key, serving=serving or Serving(), food=self.get_food(key)
        )
        entry.food.portion(entry.serving)
        journal = self.journal(day).appended(entry)
        self.database.save(day, journal)
        _logger.info("Recorded %s = %s on %s", key, entry.serving, day.isoformat())
        return journal

    def recipe(self, name: str) -> Recipe:
        """Return a recipe, empty when it does not exist."""
        return self.database.load(Recipe, name) or Recipe()

    def save_recipe(self, name: str, recipe: Recipe) -> None:
        """Create or replace a recipe."""
        self.database.save(name, recipe)

    def recipe_totals(self, name: str) -> Nutrients:
        """Return the nutrients of a whole recipe."""
        return self.recipe(name).nutrients()
