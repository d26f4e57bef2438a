"""Substitution domain models."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum


class Dimension(Enum):
    """Nutritional dimension shown in a comparison row."""

    WEIGHT = "weight"
    ENERGY = "energy"
    PROTEIN = "protein"
    CARB = "carb"
    FAT = "fat"


class SubstitutionStage(Enum):
    """Stage of the substitution flow."""

    EMPTY = "EMPTY"
    SOURCE_SELECTED = "SOURCE_SELECTED"
    SOURCE_QUANTIFIED = "SOURCE_QUANTIFIED"
    TARGET_SELECTED = "TARGET_SELECTED"


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrition for a specific quantity of a food."""

    weight: float
    energy_kcal: float
    protein: float
    carb: float
    fat: float


@dataclass(frozen=True)
class ComparisonRow:
    """One line of the source vs target comparison table."""

    dimension: Dimension
    label: str
    from_value: float
    to_value: float
    is_dominant_for_source: bool
    unit: str
    decimals: int

    @property
    def delta(self) -> float:
        """Change from source to target at the row's display precision."""
        return round_half_up(self.to_value - self.from_value, self.decimals)


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round half away from zero using the shortest decimal form of ``value``.

    ``Decimal(repr(value))`` keeps 28.05 as 28.05 instead of the binary
    28.0499..., so ties resolve the way they read.
    """
    exact = Decimal(repr(value))
    exponent = Decimal(1).scaleb(-decimals)
    with localcontext() as context:
        # quantize needs every digit of the result to fit in the precision
        context.prec = max(context.prec, exact.adjusted() + decimals + 2)
        rounded = exact.quantize(exponent, rounding=ROUND_HALF_UP)
    return float(rounded)
