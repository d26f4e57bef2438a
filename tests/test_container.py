"""Tests for container wiring."""

import json
import logging
from pathlib import Path

from macro_swap.config import Settings
from macro_swap.containers import AppContainer, build_container
from macro_swap.domain.substitution import SubstitutionStage


def test_build_container_creates_services(container: AppContainer) -> None:
    assert container.catalog_service is not None
    assert container.consent_service.is_banner_visible() is True
    assert len(container.catalog_service.index) == 8


def test_container_flows_are_independent(container: AppContainer) -> None:
    first = container.new_flow()
    second = container.new_flow()

    first.select_source(1)

    assert first.stage is SubstitutionStage.SOURCE_SELECTED
    assert second.stage is SubstitutionStage.EMPTY


def test_build_container_loads_catalog_from_settings(tmp_path: Path) -> None:
    catalog_path = tmp_path / "alimentos.json"
    catalog_path.write_text(
        json.dumps(
            [{"id": 1, "nome": "Pão", "prot": 8, "carb": 50, "lip": 3, "classif": "C"}]
        ),
        encoding="utf-8",
    )
    settings = Settings(
        catalog_path=catalog_path,
        consent_store_path=tmp_path / "consent.json",
        search_max_results=3,
    )

    container = build_container(settings)

    assert [entry.name for entry in container.catalog_service.search("pao")] == ["Pão"]
    assert container.catalog_service.max_results == 3


def test_build_container_without_catalog_is_empty(settings: Settings) -> None:
    container = build_container(settings)

    assert container.catalog_service.search("") == []


def test_consent_persists_across_containers(settings: Settings) -> None:
    build_container(settings, catalog=[]).consent_service.accept()

    reopened = build_container(settings, catalog=[])

    assert reopened.consent_service.is_banner_visible() is False


def test_debug_settings_lower_package_log_level(tmp_path: Path) -> None:
    settings = Settings(consent_store_path=tmp_path / "consent.json", debug=True)

    container = build_container(settings, catalog=[])

    assert container.catalog_service.debug is True
    assert logging.getLogger("macro_swap").level == logging.DEBUG

    build_container(Settings(consent_store_path=tmp_path / "consent.json"))

    assert logging.getLogger("macro_swap").level == logging.INFO
