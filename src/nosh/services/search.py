"""Food search backed by USDA FoodData Central."""

import logging
from dataclasses import dataclass

from nosh.adapters.fdc_client import FdcClient
from nosh.adapters.fdc_models import FdcSearchFood, FdcSearchResponse
from nosh.domain.food import Food
from nosh.domain.nutrients import Nutrients

# Checked in order, the first one present wins.
_CARB_IDS = (1005, 1050)  # by difference, by summation
_FAT_IDS = (1004,)
_PROTEIN_IDS = (1003,)
_KCAL_IDS = (2048, 2047, 1008)  # Atwater specific, Atwater general, energy

# Foundation foods carry no serving metadata; their values are per 100g.
_DEFAULT_SERVING = ("g", 100.0)

_logger = logging.getLogger(__name__)


@dataclass
class FoodSearchService:
    """Service turning FDC search hits into foods."""

    fdc_client: FdcClient
    page_size: int = 10

    def search(self, query: str, page: int = 1) -> list[Food]:
        """Return one page of candidate foods for a free-text query."""
        payload = self.fdc_client.search_foods(
            query, page_number=page, page_size=self.page_size
        )
        response = FdcSearchResponse.model_validate(payload)
        foods = [food_from_search(hit) for hit in response.foods]
        _logger.debug(
            "FDC search: query=%s page=%s results=%s", query, page, len(foods)
        )
        return foods


def food_from_search(hit: FdcSearchFood) -> Food:
    """Map a search hit to a food with nutrients and servings."""
    return Food(
        name=hit.description or "",
        spec=_extract_nutrients(hit),
        servings=_extract_servings(hit),
    )


def _extract_nutrients(hit: FdcSearchFood) -> Nutrients:
    values = {nutrient.nutrient_id: nutrient.value for nutrient in hit.food_nutrients}

    def first(ids: tuple[int, ...]) -> float:
        for nutrient_id in ids:
            if nutrient_id in values:
                return values[nutrient_id]
        return 0.0

    return Nutrients(
        carb=first(_CARB_IDS),
        fat=first(_FAT_IDS),
        protein=first(_PROTEIN_IDS),
        kcal=first(_KCAL_IDS),
    )


def _extract_servings(hit: FdcSearchFood) -> list[tuple[str, float]]:
    servings: list[tuple[str, float]] = []
    if hit.serving_size_unit and hit.serving_size:
        servings.append((hit.serving_size_unit, hit.serving_size))
    household = _parse_household_serving(hit.household_serving_full_text)
    if household is not None and household[0] not in (u for u, _ in servings):
        servings.append(household)
    return servings or [_DEFAULT_SERVING]


def _parse_household_serving(text: str | None) -> tuple[str, float] | None:
    """Parse text such as ``"1 cup"`` into ``("cup", 1.0)``."""
    if not text:
        return None
    amount, _, unit = text.strip().partition(" ")
    unit = unit.strip()
    if not unit:
        _logger.warning("Failed to parse household serving: %s", text)
        return None
    try:
        size = float(amount)
    except ValueError:
        _logger.warning("Failed to parse household serving amount: %s", text)
        return None
    if size <= 0:
        _logger.warning("Ignoring non-positive household serving: %s", text)
        return None
    return unit, size
