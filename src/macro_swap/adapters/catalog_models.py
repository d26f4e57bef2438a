"""Pydantic models for catalog records."""

from pydantic import BaseModel, ConfigDict, Field

from macro_swap.domain.foods import Food, MacroChannel


class CatalogRecord(BaseModel):
    """One food entry as published in the catalog file."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    name: str = Field(alias="nome", min_length=1)
    protein_per_100g: float = Field(alias="prot", ge=0)
    carb_per_100g: float = Field(alias="carb", ge=0)
    fat_per_100g: float = Field(alias="lip", ge=0)
    dominant_macro: MacroChannel = Field(alias="classif")

    def to_food(self) -> Food:
        return Food(
            id=self.id,
            name=self.name,
            protein_per_100g=self.protein_per_100g,
            carb_per_100g=self.carb_per_100g,
            fat_per_100g=self.fat_per_100g,
            dominant_macro=self.dominant_macro,
        )
