"""Shared test fixtures."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import pytest

from macro_swap.config import Settings
from macro_swap.containers import AppContainer, build_container
from macro_swap.domain.foods import Food, MacroChannel
from macro_swap.services.cache import LruSearchCache
from macro_swap.services.catalog import CatalogService
from macro_swap.services.consent import ConsentRepository


def make_food(  # noqa: PLR0913
    food_id: int,
    name: str,
    protein: float = 0.0,
    carb: float = 0.0,
    fat: float = 0.0,
    dominant: MacroChannel = MacroChannel.CARB,
) -> Food:
    return Food(
        id=food_id,
        name=name,
        protein_per_100g=protein,
        carb_per_100g=carb,
        fat_per_100g=fat,
        dominant_macro=dominant,
    )


SAMPLE_CATALOG = [
    make_food(
        0, "Açaí polpa", protein=0.8, carb=6.2, fat=3.9, dominant=MacroChannel.FAT
    ),
    make_food(1, "Arroz branco cozido", protein=2.5, carb=28.1, fat=0.2),
    make_food(2, "Batata inglesa cozida", protein=1.2, carb=11.9, fat=0.0),
    make_food(3, "Banana prata", protein=1.3, carb=26.0, fat=0.1),
    make_food(
        4, "Abacate", protein=1.2, carb=6.0, fat=8.4, dominant=MacroChannel.FAT
    ),
    make_food(
        5, "Frango peito grelhado", protein=32.0, carb=0.0, fat=2.5,
        dominant=MacroChannel.PROTEIN,
    ),
    make_food(
        6, "Ovo de galinha cozido", protein=13.3, carb=0.6, fat=9.5,
        dominant=MacroChannel.PROTEIN,
    ),
    make_food(7, "Azeite de oliva", fat=100.0, dominant=MacroChannel.FAT),
]


@dataclass
class InMemoryConsentRepository(ConsentRepository):
    """In-memory consent repository for tests."""

    expires_at: datetime | None = None

    def get_expiry(self) -> datetime | None:
        return self.expires_at

    def set_expiry(self, expires_at: datetime) -> None:
        self.expires_at = expires_at


@pytest.fixture
def foods() -> list[Food]:
    return list(SAMPLE_CATALOG)


@pytest.fixture
def catalog_service(foods: list[Food]) -> CatalogService:
    return CatalogService.from_catalog(foods, cache=LruSearchCache())


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        consent_store_path=tmp_path / "consent.json",
        environment="test",
    )


@pytest.fixture
def container(settings: Settings, foods: list[Food]) -> AppContainer:
    return build_container(settings, catalog=foods)
