"""Catalog service holding the searchable food snapshot."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from macro_swap.domain.errors import FoodNotFoundError
from macro_swap.domain.foods import Food, IndexedFood
from macro_swap.services.cache import SearchCache
from macro_swap.services.search import build_index, query_terms, search

_logger = logging.getLogger(__name__)


@dataclass
class CatalogService:
    """Application service for searching and looking up catalog foods."""

    cache: SearchCache | None = None
    max_results: int = 6
    debug: bool = False
    _index: tuple[IndexedFood, ...] = field(default=(), init=False, repr=False)

    @classmethod
    def from_catalog(
        cls,
        catalog: Iterable[Food],
        cache: SearchCache | None = None,
        max_results: int = 6,
        debug: bool = False,
    ) -> "CatalogService":
        """Create a service with its index built from ``catalog``."""
        service = cls(cache=cache, max_results=max_results, debug=debug)
        service.reload(catalog)
        return service

    @property
    def index(self) -> tuple[IndexedFood, ...]:
        return self._index

    def reload(self, catalog: Iterable[Food]) -> None:
        """Replace the index wholesale and forget memoized searches."""
        self._index = build_index(catalog)
        if self.cache is not None:
            self.cache.clear()
        _logger.info("Catalog indexed: foods=%s", len(self._index))

    def search(
        self,
        query: str,
        exclude_id: int | None = None,
        limit: int | None = None,
    ) -> list[IndexedFood]:
        """Search the catalog, truncating to ``limit`` when given."""
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        cache_key = (tuple(query_terms(query)), exclude_id)
        cached = self.cache.get(cache_key) if self.cache is not None else None
        if isinstance(cached, list):
            results = cached
        else:
            results = search(query, self._index, exclude_id=exclude_id)
            if self.cache is not None:
                self.cache.set(cache_key, results)
        if self.debug:
            _logger.info(
                "Catalog search: query=%r exclude_id=%s results=%s",
                query,
                exclude_id,
                len(results),
            )
        if limit is None:
            return list(results)
        return results[:limit]

    def suggest(self, query: str, exclude_id: int | None = None) -> list[IndexedFood]:
        """Search with the configured autocomplete limit."""
        return self.search(query, exclude_id=exclude_id, limit=self.max_results)

    def get_food(self, food_id: int) -> Food:
        """Return the catalog food with ``food_id``."""
        for entry in self._index:
            if entry.id == food_id:
                return entry.food
        raise FoodNotFoundError(food_id)
