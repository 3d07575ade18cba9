"""Pydantic models for FoodData Central search payloads."""

from pydantic import BaseModel, ConfigDict, Field


class FdcSearchNutrient(BaseModel):
    """Nutrient amount attached to a search hit."""

    model_config = ConfigDict(populate_by_name=True)

    nutrient_id: int = Field(alias="nutrientId")
    value: float = 0.0


class FdcSearchFood(BaseModel):
    """A single food returned by the search endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    fdc_id: int | None = Field(default=None, alias="fdcId")
    description: str | None = None
    data_type: str | None = Field(default=None, alias="dataType")
    serving_size: float | None = Field(default=None, alias="servingSize")
    serving_size_unit: str | None = Field(default=None, alias="servingSizeUnit")
    household_serving_full_text: str | None = Field(
        default=None, alias="householdServingFullText"
    )
    food_nutrients: list[FdcSearchNutrient] = Field(
        default_factory=list, alias="foodNutrients"
    )


class FdcSearchResponse(BaseModel):
    """Search endpoint response."""

    model_config = ConfigDict(populate_by_name=True)

    total_hits: int | None = Field(default=None, alias="totalHits")
    current_page: int | None = Field(default=None, alias="currentPage")
    total_pages: int | None = Field(default=None, alias="totalPages")
    foods: list[FdcSearchFood] = Field(default_factory=list)
