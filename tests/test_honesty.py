import pytest

from portfolio_ai.prompts.honesty import (
    HONESTY_DIRECTIVES,
    POOR_FIT_GUIDANCE,
    HonestyTier,
    clamp_honesty_level,
    honesty_tier,
    poor_fit_guidance,
    select_honesty_directive,
)

EXPECTED_TIERS = {
    1: HonestyTier.DIPLOMATIC,
    2: HonestyTier.DIPLOMATIC,
    3: HonestyTier.BALANCED,
    4: HonestyTier.BALANCED,
    5: HonestyTier.DIRECT,
    6: HonestyTier.DIRECT,
    7: HonestyTier.BLUNT,
    8: HonestyTier.BLUNT,
    9: HonestyTier.MAXIMAL,
    10: HonestyTier.MAXIMAL,
}


@pytest.mark.parametrize("level,tier", sorted(EXPECTED_TIERS.items()))
def test_every_level_maps_to_its_tier(level, tier):
    assert honesty_tier(level) is tier


def test_five_distinct_directives():
    directives = {select_honesty_directive(level) for level in range(1, 11)}
    assert len(directives) == 5


def test_tiers_are_monotonic():
    order = list(HonestyTier)
    indices = [order.index(honesty_tier(level)) for level in range(1, 11)]
    assert indices == sorted(indices)


def test_levels_in_same_tier_share_text():
    assert select_honesty_directive(7) == select_honesty_directive(8)
    assert select_honesty_directive(8) != select_honesty_directive(9)


@pytest.mark.parametrize("level,expected", [(-1, 1), (0, 1), (11, 10), (99, 10), (None, 7), (5, 5)])
def test_clamp(level, expected):
    assert clamp_honesty_level(level) == expected


def test_out_of_range_is_clamped_not_fallthrough():
    assert honesty_tier(-1) is HonestyTier.DIPLOMATIC
    assert honesty_tier(11) is HonestyTier.MAXIMAL


def test_default_is_blunt():
    assert honesty_tier(None) is HonestyTier.BLUNT


def test_maximal_recommends_against_hiring():
    assert "recommend against hiring" in select_honesty_directive(10)
    assert "recommend against hiring" not in select_honesty_directive(1)
    assert "probably not your person" not in select_honesty_directive(1)


def test_directive_is_personalised():
    assert "Dana" in select_honesty_directive(7, name="Dana")


def test_every_tier_has_a_directive():
    assert set(HONESTY_DIRECTIVES) == set(HonestyTier)


def test_every_tier_has_poor_fit_guidance():
    assert set(POOR_FIT_GUIDANCE) == set(HonestyTier)
    assert poor_fit_guidance(2) != poor_fit_guidance(7)
