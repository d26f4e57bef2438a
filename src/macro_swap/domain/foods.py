"""Food catalog domain models."""

from dataclasses import dataclass
from enum import Enum


class MacroChannel(Enum):
    """Macronutrient a food is classified by, keyed by its catalog code."""

    PROTEIN = "P"
    CARB = "C"
    FAT = "L"

    @property
    def attribute(self) -> str:
        """Name of the per-100g attribute on Food for this channel."""
        return _CHANNEL_ATTRIBUTES[self]


_CHANNEL_ATTRIBUTES = {
    MacroChannel.PROTEIN: "protein_per_100g",
    MacroChannel.CARB: "carb_per_100g",
    MacroChannel.FAT: "fat_per_100g",
}


@dataclass(frozen=True)
class Food:
    """A catalog food with macros per 100 g.

    ``dominant_macro`` is a label chosen by the catalog and is not derived
    from the numeric values.
    """

    id: int
    name: str
    protein_per_100g: float
    carb_per_100g: float
    fat_per_100g: float
    dominant_macro: MacroChannel

    def per_100g(self, channel: MacroChannel) -> float:
        """Return grams of the given macro per 100 g of this food."""
        return getattr(self, channel.attribute)


@dataclass(frozen=True)
class IndexedFood:
    """A food paired with its normalized search key."""

    food: Food
    normalized_name: str

    @property
    def id(self) -> int:
        return self.food.id

    @property
    def name(self) -> str:
        return self.food.name
