"""Tests for normalized food search."""

from macro_swap.domain.foods import Food, MacroChannel
from macro_swap.services.search import build_index, normalize, search


def test_normalize_strips_accents_and_case() -> None:
    assert normalize("Açaí") == "acai"
    assert normalize("AÇAÍ") == normalize("acai") == normalize("Açaí")
    assert normalize("Pão de Queijo") == "pao de queijo"


def test_normalize_is_idempotent() -> None:
    for text in ["Açaí", "Feijão-preto", "MAÇÃ Fuji", "crème brûlée", ""]:
        assert normalize(normalize(text)) == normalize(text)


def test_normalize_handles_precomposed_and_decomposed_forms() -> None:
    assert normalize("caf\u00e9") == normalize("cafe\u0301") == "cafe"


def test_build_index_keeps_order_and_duplicates(foods: list[Food]) -> None:
    catalog = [*foods, foods[1]]

    index = build_index(catalog)

    assert [entry.id for entry in index] == [food.id for food in catalog]
    assert index[0].normalized_name == "acai polpa"
    assert index[0].food is foods[0]


def test_blank_query_returns_everything_in_order(foods: list[Food]) -> None:
    index = build_index(foods)

    assert [entry.id for entry in search("", index)] == [f.id for f in foods]
    assert [entry.id for entry in search("   ", index)] == [f.id for f in foods]


def test_blank_query_honours_exclusion(foods: list[Food]) -> None:
    index = build_index(foods)

    results = search("", index, exclude_id=3)

    assert 3 not in [entry.id for entry in results]
    assert len(results) == len(foods) - 1


def test_all_terms_must_match() -> None:
    index = build_index(
        [
            Food(1, "Banana", 1.3, 26.0, 0.1, MacroChannel.CARB),
            Food(2, "Abacate", 1.2, 6.0, 8.4, MacroChannel.CARB),
        ]
    )

    results = search("ba na", index)

    assert [entry.name for entry in results] == ["Banana"]


def test_terms_are_order_independent(foods: list[Food]) -> None:
    index = build_index(foods)

    forward = search("frango grelhado", index)
    backward = search("grelhado   frango", index)

    assert [entry.id for entry in forward] == [5]
    assert forward == backward


def test_query_is_accent_insensitive(foods: list[Food]) -> None:
    index = build_index(foods)

    assert [entry.id for entry in search("ACAI", index)] == [0]
    assert [entry.id for entry in search("açaí", index)] == [0]


def test_substring_matching_within_words(foods: list[Food]) -> None:
    index = build_index(foods)

    results = search("coz", index)

    assert [entry.id for entry in results] == [1, 2, 6]


def test_exclude_id_zero_is_excluded(foods: list[Food]) -> None:
    index = build_index(foods)

    results = search("a", index, exclude_id=0)

    ids = [entry.id for entry in results]
    assert 0 not in ids
    assert ids == [1, 2, 3, 4, 5, 6, 7]


def test_no_matches_returns_empty(foods: list[Food]) -> None:
    index = build_index(foods)

    assert search("chocolate", index) == []
