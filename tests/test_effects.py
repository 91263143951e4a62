import pytest

from core.effects import apply_appeal, apply_gambit, apply_gambit_chain, apply_multipliers, appeal_total_multiplier
from core.state import AppealProfile, GambitProfile, StatVector


def _gambit(mults):
    return GambitProfile("g", "G", "", mults)


def test_gambit_rounds_listed_fields_only(fenrir_stats):
    out = apply_gambit(fenrir_stats, _gambit({"cute": 1.2}))
    assert out == StatVector(cute=58, eerie=42, majestic=56, impact=54)


def test_none_gambit_is_pass_through(fenrir_stats):
    assert apply_gambit(fenrir_stats, None) == fenrir_stats
    assert apply_gambit(fenrir_stats, _gambit({})) == fenrir_stats
    assert apply_gambit_chain(fenrir_stats, [None, None, None]) == fenrir_stats


def test_chain_rounds_after_every_slot():
    # one combined multiplier would give round(10 * 1.05 * 1.05) = 11
    out = apply_gambit_chain(StatVector(10, 10, 10, 10), [_gambit({"cute": 1.05})] * 2)
    # 10.5 -> 11, 11.55 -> 12
    assert out.cute == 12


def test_chain_is_order_sensitive():
    up, down = _gambit({"cute": 1.1}), _gambit({"cute": 0.9})
    base = StatVector(5, 0, 0, 0)
    # 5*1.1 -> 6, 6*0.9 = 5.4 -> 5   vs   5*0.9 = 4.5 -> 5, 5*1.1 = 5.5 -> 6
    assert apply_gambit_chain(base, [up, down]).cute == 5
    assert apply_gambit_chain(base, [down, up]).cute == 6


def test_same_gambit_in_several_slots(fenrir_stats):
    g = _gambit({"impact": 1.2})
    out = apply_gambit_chain(fenrir_stats, [g, g, g])
    # 54 -> 65 (64.8) -> 78 -> 94 (93.6)
    assert out.impact == 94


def test_appeal_total_multiplier_is_linear():
    assert appeal_total_multiplier(1.3, 2) == pytest.approx(1.6)
    assert appeal_total_multiplier(1.25, 4) == pytest.approx(2.0)
    assert appeal_total_multiplier(1.3, 0) == pytest.approx(1.0)


def test_appeal_absent_or_no_uses_is_identity(fenrir_stats):
    kiss = AppealProfile("throw_kiss", "Kiss", "", {"cute": 1.3})
    assert apply_appeal(fenrir_stats, None, 3) == fenrir_stats
    assert apply_appeal(fenrir_stats, kiss, 0) == fenrir_stats
    assert apply_appeal(fenrir_stats, kiss, -2) == fenrir_stats


def test_appeal_scales_linearly_not_compounding(fenrir_stats):
    kiss = AppealProfile("throw_kiss", "Kiss", "", {"cute": 1.3})
    out = apply_appeal(fenrir_stats, kiss, 2)
    # 48 * 1.6 = 76.8 -> 77 (compounding would give 48 * 1.69 = 81.12)
    assert out.cute == 77
    assert (out.eerie, out.majestic, out.impact) == (42, 56, 54)


def test_appeal_multiplier_of_one_is_copied(fenrir_stats):
    flat = AppealProfile("flat", "Flat", "", {"eerie": 1.0, "impact": 1.25})
    out = apply_appeal(fenrir_stats, flat, 1)
    assert out.eerie == 42
    # 54 * 1.25 = 67.5 -> 68
    assert out.impact == 68


def test_apply_multipliers_does_not_mutate(fenrir_stats):
    apply_multipliers(fenrir_stats, {"cute": 2.0})
    assert fenrir_stats.cute == 48
