"""
core.effects
Stat modifier rules:
- gambit multipliers (chained per slot, rounded after every slot)
- appeal multipliers (linear accumulation over a use count)
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from .state import STAT_KEYS, AppealProfile, GambitProfile, StatVector, round_half_up


def apply_multipliers(stats: StatVector, multipliers: Mapping[str, float]) -> StatVector:
    """Multiply the listed stats once and round each (pure function)."""
    values = {k: stats.get(k) for k in STAT_KEYS}
    for key, mult in multipliers.items():
        values[key] = round_half_up(values[key] * float(mult))
    return StatVector(**values)


def apply_gambit(stats: StatVector, gambit: Optional[GambitProfile]) -> StatVector:
    if gambit is None:
        return stats.replace()
    return apply_multipliers(stats, gambit.multipliers)


def apply_gambit_chain(stats: StatVector, gambits: Iterable[Optional[GambitProfile]]) -> StatVector:
    """Apply gambits in slot order.

    Each slot rounds its own output before the next slot sees it, so
    A-then-B may differ from B-then-A at rounding boundaries. Do not fold
    the slots into one combined multiplier.
    """
    out = stats
    for g in gambits:
        out = apply_gambit(out, g)
    return out


def appeal_total_multiplier(mult_per_use: float, uses: int) -> float:
    """Cumulative multiplier for `uses` consecutive uses: 1 + (m - 1) * uses."""
    return 1.0 + (float(mult_per_use) - 1.0) * int(uses)


def apply_appeal(stats: StatVector, appeal: Optional[AppealProfile], uses: int) -> StatVector:
    """Apply an appeal used `uses` times in a row.

    Absent appeal or uses <= 0 returns the stats untouched. The total
    multiplier is applied in a single rounding step per stat.
    """
    if appeal is None or int(uses) <= 0:
        return stats

    values = {k: stats.get(k) for k in STAT_KEYS}
    for key in STAT_KEYS:
        mult = float(appeal.multipliers.get(key, 1.0))
        if mult == 1.0:
            continue
        values[key] = round_half_up(values[key] * appeal_total_multiplier(mult, uses))
    return StatVector(**values)
