"""Accent-insensitive multi-term food search."""

import re
import unicodedata
from collections.abc import Iterable, Sequence

from macro_swap.domain.foods import Food, IndexedFood

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def normalize(text: str) -> str:
    """Strip diacritics and lower-case text for matching."""
    decomposed = unicodedata.normalize("NFD", text)
    return _COMBINING_MARKS.sub("", decomposed).lower()


def build_index(catalog: Iterable[Food]) -> tuple[IndexedFood, ...]:
    """Pair each catalog food with its normalized name, keeping order."""
    return tuple(
        IndexedFood(food=food, normalized_name=normalize(food.name))
        for food in catalog
    )


def query_terms(query: str) -> list[str]:
    """Split a query into normalized, non-empty terms."""
    return normalize(query).split()


def search(
    query: str,
    index: Sequence[IndexedFood],
    exclude_id: int | None = None,
) -> list[IndexedFood]:
    """Return foods whose name contains every query term, in catalog order.

    A blank query matches everything. ``exclude_id`` drops that food from the
    result whenever it is given, including id 0.
    """
    terms = query_terms(query)
    return [
        entry
        for entry in index
        if (exclude_id is None or entry.id != exclude_id)
        and all(term in entry.normalized_name for term in terms)
    ]
