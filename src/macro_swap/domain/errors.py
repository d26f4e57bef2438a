"""Errors raised by the substitution core."""


class MacroSwapError(Exception):
    """Base class for macro-swap errors."""


class InvalidQuantityError(MacroSwapError, ValueError):
    """Quantity is blank, non-numeric, non-finite, zero or negative."""

    def __init__(self, raw: object) -> None:
        super().__init__(f"Invalid quantity: {raw!r}")
        self.raw = raw


class ZeroMacroContentError(MacroSwapError, ZeroDivisionError):
    """Target food has none of the macro being preserved."""

    def __init__(self, food_name: str, channel_name: str) -> None:
        super().__init__(f"{food_name} has no {channel_name} to substitute with")
        self.food_name = food_name
        self.channel_name = channel_name


class FoodNotFoundError(MacroSwapError, LookupError):
    """No catalog entry exists for the requested id."""

    def __init__(self, food_id: int) -> None:
        super().__init__(f"Food not found: {food_id}")
        self.food_id = food_id


class InvalidTargetError(MacroSwapError, ValueError):
    """Target food is the same as the source food."""


class CatalogLoadError(MacroSwapError):
    """Catalog file is missing or malformed."""


class QuantityOutOfRangeError(MacroSwapError, OverflowError):
    """Result is too large to represent as a finite number of grams."""

    def __init__(self, value: float) -> None:
        super().__init__(f"Quantity out of range: {value!r}")
        self.value = value
