"""Tests for ledger operations."""

from datetime import date
from pathlib import Path

import pytest

from nosh.adapters.file_database import Database
from nosh.domain.food import Food
from nosh.domain.journal import Journal
from nosh.domain.nutrients import Nutrients
from nosh.domain.recipe import Recipe
from nosh.domain.serving import Serving
from nosh.errors import DecodeError, FoodNotFoundError, UnknownServingUnitError
from nosh.services.ledger import LedgerService
from tests.conftest import OATS, write_file


@pytest.fixture
def service(database: Database) -> LedgerService:
    return LedgerService(database)


def test_get_food(service: LedgerService) -> None:
    assert service.get_food("oats") == OATS


def test_get_missing_food(service: LedgerService) -> None:
    with pytest.raises(FoodNotFoundError):
        service.get_food("nope")


def test_serve_food(service: LedgerService) -> None:
    assert service.serve_food("oats", Serving(10.0, "g")).isclose(
        Nutrients(carb=6.87, fat=0.589, protein=1.35, kcal=38.2)
    )
    assert service.serve_food("oats") == OATS.nutrients()


def test_list_foods_sorted(service: LedgerService) -> None:
    assert [key for key, _ in service.list_foods()] == [
        "banana",
        "banana_oatmeal",
        "oats",
    ]
    assert service.list_foods("oats") == [("oats", OATS)]


def test_list_foods_raises_first_error(
    service: LedgerService, data_root: Path
) -> None:
    write_file(data_root, "food/broken.txt", "name = Broken\n")

    with pytest.raises(DecodeError):
        service.list_foods()


def test_save_and_remove_food(service: LedgerService) -> None:
    lemon = Food(name="Lemon", spec=Nutrients(carb=4.0, kcal=16.0))

    service.save_food("lemon", lemon)
    assert service.get_food("lemon") == lemon

    service.remove_food("lemon")
    with pytest.raises(FoodNotFoundError):
        service.get_food("lemon")


@pytest.mark.parametrize("key", ["#snack", "a=b", "[x]", " lemon"])
def test_save_food_rejects_keys_unsafe_in_entries(
    service: LedgerService, key: str
) -> None:
    with pytest.raises(ValueError):
        service.save_food(key, Food(name="Lemon", spec=Nutrients(carb=4.0)))


def test_remove_missing_food(service: LedgerService) -> None:
    with pytest.raises(FileNotFoundError):
        service.remove_food("nope")


def test_journal_missing_day_is_empty(service: LedgerService) -> None:
    assert service.journal(date(2000, 1, 1)) == Journal()
    assert service.journal_totals(date(2000, 1, 1)) == Nutrients()


def test_journal_totals(service: LedgerService) -> None:
    assert service.journal_totals(date(2024, 7, 1)).as_tuple() == pytest.approx(
        (177.9, 12.38, 28.95, 921.5)
    )


def test_eat_appends_to_journal(service: LedgerService, data_root: Path) -> None:
    day = date(2024, 7, 8)

    service.eat(day, "oats")
    service.eat(day, "oats", Serving(2.5))
    service.eat(day, "banana")
    service.eat(day, "oats", Serving(1.0, "cups"))
    journal = service.eat(day, "oats", Serving(0.25, "c"))

    assert (data_root / "journal" / "2024" / "07" / "08.txt").read_text(
        encoding="utf-8"
    ) == "oats = 1\noats = 2.5\nbanana = 1\noats = 1 cups\noats = 0.25 c\n"
    assert service.journal(day) == journal
    expected = OATS.nutrients() * 6 + service.serve_food("banana")
    assert journal.nutrients().isclose(expected)


def test_eat_missing_food(service: LedgerService) -> None:
    with pytest.raises(FoodNotFoundError):
        service.eat(date(2024, 7, 8), "nope")

    assert service.journal(date(2024, 7, 8)) == Journal()


def test_eat_unknown_unit(service: LedgerService) -> None:
    with pytest.raises(UnknownServingUnitError):
        service.eat(date(2024, 7, 8), "oats", Serving(1.0, "slices"))

    assert service.journal(date(2024, 7, 8)) == Journal()


def test_recipe(service: LedgerService) -> None:
    recipe = service.recipe("banana_oatmeal")

    assert [entry.key for entry in recipe] == ["oats", "banana"]
    assert service.recipe_totals("banana_oatmeal").isclose(
        service.serve_food("banana_oatmeal")
    )


def test_missing_recipe_is_empty(service: LedgerService) -> None:
    assert service.recipe("nope") == Recipe()


def test_save_recipe_as_food(service: LedgerService) -> None:
    recipe = service.recipe("banana_oatmeal")
    service.save_recipe("copy", recipe)

    food = service.recipe("copy").to_food("Copy", [("pot", 1.0)])
    service.save_food("copy", food)

    assert service.serve_food("copy", Serving(2.0, "p")).isclose(
        recipe.nutrients() * 2
    )
