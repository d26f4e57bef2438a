"""Equivalent-quantity and nutrition comparison arithmetic."""

import math

from macro_swap.domain.errors import (
    InvalidQuantityError,
    QuantityOutOfRangeError,
    ZeroMacroContentError,
)
from macro_swap.domain.foods import Food, MacroChannel
from macro_swap.domain.substitution import (
    ComparisonRow,
    Dimension,
    NutritionFacts,
    round_half_up,
)

# Atwater factors, kcal per gram.
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARB = 4
KCAL_PER_G_FAT = 9

_MACRO_ROWS = (
    (Dimension.PROTEIN, "Prot", MacroChannel.PROTEIN),
    (Dimension.CARB, "Carb", MacroChannel.CARB),
    (Dimension.FAT, "Gord", MacroChannel.FAT),
)


def compute_equivalent_quantity(
    source: Food, target: Food, source_quantity_g: float
) -> int:
    """Grams of ``target`` holding as much of the source's dominant macro.

    Raises InvalidQuantityError for non-positive or non-finite quantities and
    ZeroMacroContentError when the target has none of that macro.
    QuantityOutOfRangeError is raised when the result overflows a float.
    """
    _require_valid_quantity(source_quantity_g)
    channel = source.dominant_macro
    target_per_100g = target.per_100g(channel)
    if target_per_100g == 0:
        raise ZeroMacroContentError(target.name, channel.name.lower())
    source_amount = source.per_100g(channel) * source_quantity_g / 100
    target_quantity = 100 * source_amount / target_per_100g
    if not math.isfinite(target_quantity):
        raise QuantityOutOfRangeError(target_quantity)
    return int(round_half_up(target_quantity))


def compute_nutrition(food: Food, quantity_g: float) -> NutritionFacts:
    """Scale a food's per-100g values to ``quantity_g``."""
    kcal_per_100g = (
        food.protein_per_100g * KCAL_PER_G_PROTEIN
        + food.carb_per_100g * KCAL_PER_G_CARB
        + food.fat_per_100g * KCAL_PER_G_FAT
    )
    return NutritionFacts(
        weight=quantity_g,
        energy_kcal=kcal_per_100g * quantity_g / 100,
        protein=food.protein_per_100g * quantity_g / 100,
        carb=food.carb_per_100g * quantity_g / 100,
        fat=food.fat_per_100g * quantity_g / 100,
    )


def compare_nutrition(
    source: Food,
    source_quantity_g: float,
    target: Food,
    target_quantity_g: float,
) -> list[ComparisonRow]:
    """Build the five comparison rows: weight, energy, protein, carb, fat."""
    before = compute_nutrition(source, source_quantity_g)
    after = compute_nutrition(target, target_quantity_g)
    for facts in (before, after):
        _require_finite_facts(facts)
    rows = [
        _row(Dimension.WEIGHT, "Gr", before.weight, after.weight, "g", 0),
        _row(
            Dimension.ENERGY, "Kcal", before.energy_kcal, after.energy_kcal, "kcal", 0
        ),
    ]
    for dimension, label, channel in _MACRO_ROWS:
        rows.append(
            _row(
                dimension,
                label,
                getattr(before, dimension.value),
                getattr(after, dimension.value),
                "g",
                1,
                is_dominant=source.dominant_macro is channel,
            )
        )
    return rows


def _row(  # noqa: PLR0913
    dimension: Dimension,
    label: str,
    from_value: float,
    to_value: float,
    unit: str,
    decimals: int,
    *,
    is_dominant: bool = False,
) -> ComparisonRow:
    return ComparisonRow(
        dimension=dimension,
        label=label,
        from_value=round_half_up(from_value, decimals),
        to_value=round_half_up(to_value, decimals),
        is_dominant_for_source=is_dominant,
        unit=unit,
        decimals=decimals,
    )


def _require_finite_facts(facts: NutritionFacts) -> None:
    for value in (
        facts.weight,
        facts.energy_kcal,
        facts.protein,
        facts.carb,
        facts.fat,
    ):
        if not math.isfinite(value):
            raise QuantityOutOfRangeError(value)


def _require_valid_quantity(quantity_g: float) -> None:
    if isinstance(quantity_g, bool) or not isinstance(quantity_g, int | float):
        raise InvalidQuantityError(quantity_g)
    if not math.isfinite(quantity_g) or quantity_g <= 0:
        raise InvalidQuantityError(quantity_g)
