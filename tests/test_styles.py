import itertools

import pytest

from dreamhouse.domain.styles import STYLE_SIMILARITY, best_style_match, normalize_style, style_similarity


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  Mid-Century   Modern ", "mid-century modern"),
        ("CRAFTSMAN", "craftsman"),
        ("cape\tcod\n", "cape cod"),
        ("", ""),
    ],
)
def test_normalize_style(raw, expected):
    assert normalize_style(raw) == expected
    assert normalize_style(normalize_style(raw)) == normalize_style(raw)


def test_similarity_classes():
    assert style_similarity("Craftsman", "craftsman ") == 1.0
    assert style_similarity("craftsman", "bungalow") == 0.5
    assert style_similarity("craftsman", "victorian") == 0.0


def test_similarity_checks_reverse_direction():
    # only the prairie entry lists ranch; the lookup must still find it from ranch
    assert "prairie" not in STYLE_SIMILARITY["ranch"]
    assert "ranch" in STYLE_SIMILARITY["prairie"]
    assert style_similarity("ranch", "prairie") == 0.5


def test_similarity_is_symmetric_over_table():
    names = set(STYLE_SIMILARITY)
    for related in STYLE_SIMILARITY.values():
        names.update(related)

    for a, b in itertools.combinations(sorted(names), 2):
        assert style_similarity(a, b) == style_similarity(b, a), (a, b)


def test_best_style_match_edges():
    assert best_style_match([], "craftsman") == 0
    assert best_style_match(["craftsman"], None) == 0
    assert best_style_match(["craftsman"], "") == 0


def test_best_style_match_takes_max():
    assert best_style_match(["victorian", "bungalow"], "Craftsman") == 0.5
    assert best_style_match(["victorian", "bungalow", "craftsman"], "Craftsman") == 1.0
    assert best_style_match(["victorian"], "craftsman") == 0.0
