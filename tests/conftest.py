"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from nosh.adapters.fdc_client import FdcClient
from nosh.adapters.file_database import Database
from nosh.config import Settings
from nosh.domain.food import Food
from nosh.domain.nutrients import Nutrients

OATS_TEXT = """\
name = Oats

[nutrients]
carb = 68.7
fat = 5.89
protein = 13.5
kcal = 382

[servings]
cups = 0.5
g = 100
"""

BANANA_TEXT = """\
name = Banana

[nutrients]
carb = 27
fat = 0.4
protein = 1.3
kcal = 105

[servings]
g = 118
"""

BANANA_OATMEAL_TEXT = """\
name = Banana Oatmeal

[ingredients]
oats = 0.5 c
banana = 59 g

[servings]
bowl = 1
"""

JOURNAL_TEXT = """\
banana
oats = 0.5 c
oats = 1
banana = 59 g
"""

RECIPE_TEXT = """\
oats = 0.5 c
banana = 59 g
"""

OATS = Food(
    name="Oats",
    spec=Nutrients(carb=68.7, fat=5.89, protein=13.5, kcal=382.0),
    servings=[("cups", 0.5), ("g", 100.0)],
)

BANANA = Food(
    name="Banana",
    spec=Nutrients(carb=27.0, fat=0.4, protein=1.3, kcal=105.0),
    servings=[("g", 118.0)],
)


def write_file(root: Path, relative: str, text: str) -> Path:
    """Write a text file below root, creating parent directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def approx(nutrients: Nutrients) -> object:
    """Return a comparable approximation of the nutrient fields."""
    return pytest.approx(nutrients.as_tuple())


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client returning a fixed payload and recording calls."""

    payload: dict[str, object] = field(default_factory=lambda: {"foods": []})
    calls: list[tuple[str, int, int]] = field(default_factory=list)

    def search_foods(
        self, query: str, page_number: int = 1, page_size: int = 10
    ) -> dict[str, object]:
        self.calls.append((query, page_number, page_size))
        return self.payload


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    root = tmp_path / "nosh"
    write_file(root, "food/oats.txt", OATS_TEXT)
    write_file(root, "food/banana.txt", BANANA_TEXT)
    write_file(root, "food/banana_oatmeal.txt", BANANA_OATMEAL_TEXT)
    write_file(root, "journal/2024/07/01.txt", JOURNAL_TEXT)
    write_file(root, "recipe/banana_oatmeal.txt", RECIPE_TEXT)
    return root


@pytest.fixture
def database(data_root: Path) -> Database:
    return Database(data_root)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        data_dir=tmp_path / "nosh",
        fdc_api_key="fdc-key",
        fdc_base_url="https://api.test",
    )
