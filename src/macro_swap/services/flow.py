"""Substitution flow state machine for the presentation layer."""

import logging
import math
from dataclasses import dataclass

from macro_swap.domain.errors import (
    InvalidQuantityError,
    InvalidTargetError,
    QuantityOutOfRangeError,
    ZeroMacroContentError,
)
from macro_swap.domain.foods import Food, IndexedFood
from macro_swap.domain.substitution import ComparisonRow, SubstitutionStage
from macro_swap.services.catalog import CatalogService
from macro_swap.services.substitution import (
    compare_nutrition,
    compute_equivalent_quantity,
)

_logger = logging.getLogger(__name__)


def parse_quantity(raw: str | float | None) -> float:
    """Parse user-entered grams, rejecting blank, non-finite and non-positive."""
    if raw is None:
        raise InvalidQuantityError(raw)
    text = raw
    if isinstance(raw, str):
        text = raw.strip()
        if text.count(",") == 1 and "." not in text:
            text = text.replace(",", ".")
    try:
        value = float(text)
    except (TypeError, ValueError) as exc:
        raise InvalidQuantityError(raw) from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidQuantityError(raw)
    return value


@dataclass
class SubstitutionFlow:
    """Holds one user's substitution choices and derives the comparison.

    The stage is derived from the current choices rather than stored, so
    every transition leaves the flow consistent.
    """

    catalog: CatalogService
    source: Food | None = None
    source_quantity_text: str = ""
    source_quantity_g: float | None = None
    target: Food | None = None
    target_quantity_g: int | None = None
    no_valid_substitution: bool = False

    @property
    def stage(self) -> SubstitutionStage:
        """Return the current stage of the flow."""
        if self.source is None:
            return SubstitutionStage.EMPTY
        if self.source_quantity_g is None:
            return SubstitutionStage.SOURCE_SELECTED
        if self.target is None:
            return SubstitutionStage.SOURCE_QUANTIFIED
        return SubstitutionStage.TARGET_SELECTED

    def source_search(self, query: str) -> list[IndexedFood]:
        """Suggest source foods for the query."""
        return self.catalog.suggest(query)

    def target_search(self, query: str) -> list[IndexedFood]:
        """Suggest target foods, never offering the current source."""
        exclude_id = self.source.id if self.source is not None else None
        return self.catalog.suggest(query, exclude_id=exclude_id)

    def select_source(self, food_id: int) -> SubstitutionStage:
        """Choose the source food, resetting quantities and target."""
        self.source = self.catalog.get_food(food_id)
        self.source_quantity_text = ""
        self.source_quantity_g = None
        self.target = None
        self._reset_target_quantity()
        return self.stage

    def set_source_quantity(self, raw: str) -> SubstitutionStage:
        """Record the entered quantity and refresh the target quantity."""
        if self.source is None:
            return self.stage
        self.source_quantity_text = raw
        try:
            self.source_quantity_g = parse_quantity(raw)
        except InvalidQuantityError:
            self.source_quantity_g = None
        self._recompute()
        return self.stage

    def select_target(self, food_id: int) -> SubstitutionStage:
        """Choose the target food and compute its equivalent quantity."""
        if self.source is None:
            return self.stage
        if food_id == self.source.id:
            raise InvalidTargetError("Target food must differ from the source food")
        self.target = self.catalog.get_food(food_id)
        self._recompute()
        return self.stage

    def clear_source(self) -> SubstitutionStage:
        """Clear the source food, cascading to everything else."""
        self.source = None
        self.source_quantity_text = ""
        self.source_quantity_g = None
        self.target = None
        self._reset_target_quantity()
        return self.stage

    def clear_target(self) -> SubstitutionStage:
        """Clear only the target food."""
        self.target = None
        self._reset_target_quantity()
        return self.stage

    def comparison(self) -> list[ComparisonRow]:
        """Return comparison rows, or nothing when there is no substitution."""
        if (
            self.stage is not SubstitutionStage.TARGET_SELECTED
            or self.target_quantity_g is None
        ):
            return []
        try:
            return compare_nutrition(
                self.source,
                self.source_quantity_g,
                self.target,
                self.target_quantity_g,
            )
        except QuantityOutOfRangeError as exc:
            _logger.info("Comparison out of range: %s", exc)
            return []

    def _recompute(self) -> None:
        self._reset_target_quantity()
        if self.stage is not SubstitutionStage.TARGET_SELECTED:
            return
        try:
            self.target_quantity_g = compute_equivalent_quantity(
                self.source, self.target, self.source_quantity_g
            )
        except (ZeroMacroContentError, QuantityOutOfRangeError) as exc:
            self.no_valid_substitution = True
            _logger.info("No valid substitution: %s", exc)

    def _reset_target_quantity(self) -> None:
        self.target_quantity_g = None
        self.no_valid_substitution = False
