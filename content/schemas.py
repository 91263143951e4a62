"""content.schemas

Contracts for the read-only reference tables:
- profile parsing from plain mappings (JSON-like rows)
- validation of gambit / appeal / judge / stage / monster data
- Catalog: id -> profile mapping with a total (never-throwing) lookup

Validation raises ValueError with a short message. Lookups never raise:
an unknown id gives None and the pipeline treats it as a no-op or a skip.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, Iterable, Iterator, List, Mapping, Optional, Tuple, TypeVar

from core.state import (
    STAT_KEYS,
    AppealProfile,
    GambitProfile,
    JudgeProfile,
    MonsterTemplate,
    StageProfile,
    stats_from_mapping,
)

ALLOWED_PHASES = ("early", "mid", "late")

ALLOWED_ARCHETYPES = {"star", "partner", "moodmaker", "specialist", "artist"}

ALLOWED_UNLOCK_CONDITIONS = {
    "always",
    "after_local_league",
    "after_national_league",
    "after_world_league",
    "bond_with_fenrir_max",
}


def _as_float(x: Any, default: float = 0.0) -> float:
    try:
        return float(x)
    except (TypeError, ValueError):
        return float(default)


def normalize_stat_map(d: Optional[Mapping[str, Any]]) -> Dict[str, float]:
    """Lower-case keys, drop None values, coerce numbers."""
    out: Dict[str, float] = {}
    for k, v in dict(d or {}).items():
        if v is None:
            continue
        out[str(k).strip().lower()] = _as_float(v, 1.0)
    return out


def _check_stat_keys(owner: str, d: Mapping[str, float]) -> None:
    unknown = [k for k in d if k not in STAT_KEYS]
    if unknown:
        raise ValueError(f"{owner}: unknown stat field(s) {sorted(unknown)}")


def validate_gambit(g: GambitProfile) -> None:
    if not str(g.id).strip():
        raise ValueError("gambit.id must not be empty")
    _check_stat_keys(f"gambit {g.id}", g.multipliers)
    if any(float(m) <= 0 for m in g.multipliers.values()):
        raise ValueError(f"gambit {g.id}: multipliers must be > 0")


def validate_appeal(a: AppealProfile) -> None:
    if not str(a.id).strip():
        raise ValueError("appeal.id must not be empty")
    _check_stat_keys(f"appeal {a.id}", a.multipliers)
    # linear accumulation only stays non-negative for boosts
    if any(float(m) < 1.0 for m in a.multipliers.values()):
        raise ValueError(f"appeal {a.id}: multipliers must be >= 1.0")


def validate_judge(j: JudgeProfile) -> None:
    if not str(j.id).strip():
        raise ValueError("judge.id must not be empty")
    _check_stat_keys(f"judge {j.id}", j.weights)
    if any(float(w) < 0 for w in j.weights.values()):
        raise ValueError(f"judge {j.id}: weights must be >= 0")


def validate_stage(s: StageProfile) -> None:
    if not str(s.id).strip():
        raise ValueError("stage.id must not be empty")
    _check_stat_keys(f"stage {s.id}", s.bias)
    if any(float(b) < 0 for b in s.bias.values()):
        raise ValueError(f"stage {s.id}: bias must be >= 0")


def validate_monster(m: MonsterTemplate) -> None:
    if not str(m.id).strip():
        raise ValueError("monster.id must not be empty")
    if m.phase not in ALLOWED_PHASES:
        raise ValueError(f"monster {m.id}: invalid phase {m.phase!r}")
    if m.archetype not in ALLOWED_ARCHETYPES:
        raise ValueError(f"monster {m.id}: invalid archetype {m.archetype!r}")
    if m.unlock_condition not in ALLOWED_UNLOCK_CONDITIONS:
        raise ValueError(f"monster {m.id}: invalid unlock condition {m.unlock_condition!r}")
    if any(v < 0 for v in m.base_stats.as_tuple()):
        raise ValueError(f"monster {m.id}: base stats must be >= 0")
    if m.stamina_max < 1:
        raise ValueError(f"monster {m.id}: stamina_max must be >= 1")


# =========================
# Row parsing
# =========================


def gambit_from_mapping(obj: Mapping[str, Any]) -> GambitProfile:
    g = GambitProfile(
        id=str(obj.get("id") or "").strip(),
        name=str(obj.get("name") or obj.get("id") or "").strip(),
        description=str(obj.get("description", "") or "").strip(),
        multipliers=normalize_stat_map(obj.get("multipliers")),
    )
    validate_gambit(g)
    return g


def appeal_from_mapping(obj: Mapping[str, Any]) -> AppealProfile:
    a = AppealProfile(
        id=str(obj.get("id") or "").strip(),
        name=str(obj.get("name") or obj.get("id") or "").strip(),
        description=str(obj.get("description", "") or "").strip(),
        multipliers=normalize_stat_map(obj.get("multipliers")),
    )
    validate_appeal(a)
    return a


def judge_from_mapping(obj: Mapping[str, Any]) -> JudgeProfile:
    j = JudgeProfile(
        id=str(obj.get("id") or "").strip(),
        name=str(obj.get("name") or obj.get("id") or "").strip(),
        description=str(obj.get("description", "") or "").strip(),
        weights=normalize_stat_map(obj.get("weights")),
    )
    validate_judge(j)
    return j


def stage_from_mapping(obj: Mapping[str, Any]) -> StageProfile:
    s = StageProfile(
        id=str(obj.get("id") or "").strip(),
        name=str(obj.get("name") or obj.get("id") or "").strip(),
        description=str(obj.get("description", "") or "").strip(),
        bias=normalize_stat_map(obj.get("bias")),
    )
    validate_stage(s)
    return s


def monster_from_mapping(obj: Mapping[str, Any]) -> MonsterTemplate:
    m = MonsterTemplate(
        catalog_no=int(obj.get("catalog_no", 0) or 0),
        id=str(obj.get("id") or "").strip(),
        name=str(obj.get("name") or obj.get("id") or "").strip(),
        archetype=str(obj.get("archetype") or "").strip().lower(),
        base_stats=stats_from_mapping(dict(obj.get("base_stats") or {})),
        phase=str(obj.get("phase") or "early").strip().lower(),
        unlock_condition=str(obj.get("unlock_condition") or "always").strip(),
        stamina_max=int(obj.get("stamina_max", 3) or 3),
    )
    validate_monster(m)
    return m


# =========================
# Catalog
# =========================


P = TypeVar("P")


class Catalog(Generic[P]):
    """Ordered id -> profile mapping.

    get() is total: it returns None for unknown ids instead of raising.
    """

    def __init__(self, kind: str, items: Iterable[P]):
        self.kind = kind
        self._items: Dict[str, P] = {}
        for item in items:
            pid = str(getattr(item, "id"))
            if pid in self._items:
                raise ValueError(f"{kind} catalog: duplicate id {pid!r}")
            self._items[pid] = item

    def get(self, pid: Optional[str]) -> Optional[P]:
        if pid is None:
            return None
        return self._items.get(str(pid))

    def resolve_all(self, ids: Iterable[Optional[str]]) -> List[Optional[P]]:
        return [self.get(i) for i in ids]

    def ids(self) -> List[str]:
        return list(self._items)

    def first_ids(self, n: int) -> Tuple[str, ...]:
        return tuple(self.ids()[:n])

    def __contains__(self, pid: object) -> bool:
        return pid in self._items

    def __iter__(self) -> Iterator[P]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)


def validate_appeal_table(table: Mapping[str, List[str]], appeals: Catalog[AppealProfile], monsters: Catalog[MonsterTemplate]) -> None:
    for monster_id, appeal_ids in table.items():
        if monster_id not in monsters:
            raise ValueError(f"appeal table: unknown monster {monster_id!r}")
        for aid in appeal_ids:
            if aid not in appeals:
                raise ValueError(f"appeal table: monster {monster_id!r} -> unknown appeal {aid!r}")
