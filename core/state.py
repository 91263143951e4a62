"""
core.state
Core domain data models (UI independent).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace as _dc_replace
from typing import Dict, Mapping, Tuple


STAT_KEYS: Tuple[str, ...] = ("cute", "eerie", "majestic", "impact")

# two-letter labels for logs / reports
STAT_LABELS: Dict[str, str] = {
    "cute": "CT",
    "eerie": "ER",
    "majestic": "MJ",
    "impact": "IP",
}


Multipliers = Dict[str, float]


def round_half_up(x: float) -> int:
    """Round to the nearest integer, .5 going up (52.5 -> 53, 4.5 -> 5).

    Every multiplicative step in the pipeline goes through here; Python's
    built-in round() is banker's rounding and would disagree on ties.
    """
    return int(math.floor(float(x) + 0.5))


@dataclass(frozen=True)
class StatVector:
    """The four contest stats.

    Instances are snapshots: transformations in core.effects / core.personality
    always build a new vector.
    """

    cute: int
    eerie: int
    majestic: int
    impact: int

    def get(self, key: str) -> int:
        return int(getattr(self, key))

    def replace(self, **values: int) -> "StatVector":
        return _dc_replace(self, **values)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.cute, self.eerie, self.majestic, self.impact)

    def short(self) -> str:
        return " / ".join(f"{STAT_LABELS[k]}{self.get(k)}" for k in STAT_KEYS)


@dataclass(frozen=True)
class GambitProfile:
    """Per-slot strategy; unlisted stats keep a 1.0 multiplier."""

    id: str
    name: str
    description: str
    multipliers: Multipliers = field(default_factory=dict)


@dataclass(frozen=True)
class AppealProfile:
    """Signature move. Multipliers are for a single use."""

    id: str
    name: str
    description: str
    multipliers: Multipliers = field(default_factory=dict)


@dataclass(frozen=True)
class JudgeProfile:
    id: str
    name: str
    description: str
    weights: Multipliers = field(default_factory=dict)


@dataclass(frozen=True)
class StageProfile:
    """Bias is applied to judge weights at scoring time, never to the stats."""

    id: str
    name: str
    description: str
    bias: Multipliers = field(default_factory=dict)


@dataclass(frozen=True)
class MonsterTemplate:
    catalog_no: int
    id: str
    name: str
    archetype: str
    base_stats: StatVector
    phase: str               # early | mid | late
    unlock_condition: str
    stamina_max: int


def stats_from_mapping(d: Mapping[str, float]) -> StatVector:
    """Bridge helper for dict-based stats (catalog rows, UI state)."""
    return StatVector(
        cute=int(d.get("cute", 0)),
        eerie=int(d.get("eerie", 0)),
        majestic=int(d.get("majestic", 0)),
        impact=int(d.get("impact", 0)),
    )


def stats_to_dict(s: StatVector) -> Dict[str, int]:
    return {
        "cute": int(s.cute),
        "eerie": int(s.eerie),
        "majestic": int(s.majestic),
        "impact": int(s.impact),
    }
