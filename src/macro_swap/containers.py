"""Dependency container wiring for the application."""

from collections.abc import Iterable
from dataclasses import dataclass

from macro_swap.adapters.json_catalog import load_catalog
from macro_swap.adapters.json_consent_repository import JsonConsentRepository
from macro_swap.app_logging import configure_logging
from macro_swap.config import Settings
from macro_swap.domain.foods import Food
from macro_swap.services.cache import LruSearchCache
from macro_swap.services.catalog import CatalogService
from macro_swap.services.consent import ConsentService
from macro_swap.services.flow import SubstitutionFlow


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    consent_service: ConsentService

    def new_flow(self) -> SubstitutionFlow:
        """Start an empty substitution flow over the shared catalog."""
        return SubstitutionFlow(catalog=self.catalog_service)


def build_container(
    settings: Settings | None = None, catalog: Iterable[Food] | None = None
) -> AppContainer:
    """Create the default dependency container.

    ``catalog`` takes precedence over ``settings.catalog_path``; with neither
    the catalog starts empty.
    """
    resolved_settings = settings or Settings()
    configure_logging(debug=resolved_settings.debug)
    if catalog is None:
        catalog = (
            load_catalog(resolved_settings.catalog_path)
            if resolved_settings.catalog_path is not None
            else []
        )
    catalog_service = CatalogService.from_catalog(
        catalog,
        cache=LruSearchCache(resolved_settings.search_cache_size),
        max_results=resolved_settings.search_max_results,
        debug=resolved_settings.debug,
    )
    consent_service = ConsentService(
        repository=JsonConsentRepository(resolved_settings.consent_store_path),
        ttl_days=resolved_settings.consent_ttl_days,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        consent_service=consent_service,
    )
