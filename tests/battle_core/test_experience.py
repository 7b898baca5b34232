import pytest

from src.battle_core.enums import GrowthRate, Species
from src.battle_core.experience import add_experience, get_exp_value, get_level_total_exp
from src.battle_core.utils.mon_factory import create_creature
from src.battle_core.utils.rng import BattleRng


@pytest.mark.parametrize("growth_rate", list(GrowthRate))
def test_curves_start_at_zero_and_strictly_increase(growth_rate):
    assert get_level_total_exp(1, growth_rate) == 0
    totals = [get_level_total_exp(level, growth_rate) for level in range(1, 101)]
    assert all(b > a for a, b in zip(totals, totals[1:]))


def test_known_curve_values():
    assert get_level_total_exp(10, GrowthRate.MEDIUM_FAST) == 1000
    assert get_level_total_exp(5, GrowthRate.MEDIUM_SLOW) == 135
    assert get_level_total_exp(10, GrowthRate.FAST) == 800
    assert get_level_total_exp(10, GrowthRate.SLOW) == 1250
    assert get_level_total_exp(100, GrowthRate.ERRATIC) == 600000
    assert get_level_total_exp(100, GrowthRate.FLUCTUATING) == 1640000


def test_exactly_reaching_threshold_levels_up_and_heals_by_max_hp_delta():
    rattata = create_creature(Species.RATTATA, 5, BattleRng(3))
    assert rattata.exp == 125
    old_max = rattata.get_max_hp()
    rattata.hp = old_max - 3

    gained = add_experience(rattata, 875)

    assert gained == 5
    assert rattata.level == 10
    assert rattata.levelExp == 0
    assert rattata.get_max_hp() > old_max
    assert rattata.hp == rattata.get_max_hp() - 3


def test_partial_progress_is_tracked():
    rattata = create_creature(Species.RATTATA, 5, BattleRng(3))
    stats_before = list(rattata.stats)

    assert add_experience(rattata, 100) == 1
    assert rattata.level == 6
    assert rattata.exp == 225
    assert rattata.levelExp == 9
    assert rattata.stats != stats_before


def test_no_level_change_keeps_stats():
    rattata = create_creature(Species.RATTATA, 5, BattleRng(3))
    stats_before = list(rattata.stats)

    assert add_experience(rattata, 10) == 0
    assert rattata.level == 5
    assert rattata.levelExp == 10
    assert rattata.stats == stats_before


def test_negative_experience_is_rejected():
    rattata = create_creature(Species.RATTATA, 5, BattleRng(3))
    with pytest.raises(ValueError):
        add_experience(rattata, -1)
    assert rattata.exp == 125


def test_level_is_capped_at_100():
    rattata = create_creature(Species.RATTATA, 99, BattleRng(3))

    assert add_experience(rattata, 10**7) == 1
    assert rattata.level == 100
    assert rattata.exp == 1000000
    assert rattata.levelExp == 0

    assert add_experience(rattata, 500) == 0
    assert rattata.level == 100
    assert rattata.exp == 1000000


def test_exp_value_drops_for_stronger_victors():
    defeated = create_creature(Species.RATTATA, 5, BattleRng(9))
    assert get_exp_value(defeated, 5) == 52
    assert get_exp_value(defeated, 10) == 27
    assert get_exp_value(defeated, 30) < get_exp_value(defeated, 10)


def test_stored_exp_above_cap_is_never_lowered():
    rattata = create_creature(Species.RATTATA, 100, BattleRng(3))
    rattata.exp = 1200000

    assert add_experience(rattata, 0) == 0
    assert rattata.exp == 1200000
    assert add_experience(rattata, 50) == 0
    assert rattata.exp == 1200000
    assert rattata.level == 100
