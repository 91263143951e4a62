"""engine.config

Evaluation configuration passed from UI (or any other caller).

The config is an immutable value: the UI rebuilds it on every change and
hands it to engine.pipeline.evaluate().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

from content.catalog import DEFAULT_CATALOG, ContestCatalog
from core.personality import DEFAULT_MOOD, NEUTRAL_PERSONALITY

SLOT_COUNT = 3

NO_GAMBIT = "none"


def _three(ids: Tuple[str, ...], fallback: str) -> Tuple[str, str, str]:
    out = list(ids[:SLOT_COUNT])
    while len(out) < SLOT_COUNT:
        out.append(out[0] if out else fallback)
    return (out[0], out[1], out[2])


@dataclass(frozen=True)
class EvaluationConfig:
    monster_id: str
    personality_id: str = NEUTRAL_PERSONALITY
    mood_id: str = DEFAULT_MOOD
    gambit_ids: Tuple[str, str, str] = (NO_GAMBIT, NO_GAMBIT, NO_GAMBIT)
    stage_ids: Tuple[str, ...] = field(default_factory=tuple)
    judge_ids: Tuple[str, ...] = field(default_factory=tuple)
    appeal_uses: int = 0


def default_config(catalog: ContestCatalog = DEFAULT_CATALOG) -> EvaluationConfig:
    """Start state of the UI: first monster, first three stages and judges, no gambits."""
    monsters = catalog.monsters.ids()
    return EvaluationConfig(
        monster_id=monsters[0] if monsters else "",
        personality_id=NEUTRAL_PERSONALITY,
        mood_id=DEFAULT_MOOD,
        gambit_ids=(NO_GAMBIT, NO_GAMBIT, NO_GAMBIT),
        stage_ids=_three(catalog.stages.first_ids(SLOT_COUNT), "standard"),
        judge_ids=_three(catalog.judges.first_ids(SLOT_COUNT), ""),
        appeal_uses=0,
    )


def _as_int(x: Any, default: int = 0) -> int:
    try:
        return int(float(x))
    except (TypeError, ValueError, OverflowError):
        return int(default)


def _slot_ids(raw: Any, defaults: Tuple[str, ...]) -> Tuple[str, ...]:
    if raw is None:
        return tuple(defaults)
    if isinstance(raw, str):
        raw = [x.strip() for x in raw.split(",")]
    if not isinstance(raw, (list, tuple)):
        return tuple(defaults)
    items: List[str] = [str(x or "").strip() for x in list(raw)[:SLOT_COUNT]]
    # short lists keep the remaining default slots
    for i in range(len(items), min(SLOT_COUNT, len(defaults))):
        items.append(defaults[i])
    return tuple(items)


def config_from_mapping(data: Optional[Mapping[str, Any]], catalog: ContestCatalog = DEFAULT_CATALOG) -> EvaluationConfig:
    """Normalise a plain mapping (JSON, query params, session state) into a config.

    Never raises. Missing keys take default_config() values; ids are not
    checked here, unknown ones are skipped later by the pipeline.
    """
    d = dict(data or {})
    base = default_config(catalog)
    return EvaluationConfig(
        monster_id=str(d.get("monster_id") or d.get("monster") or base.monster_id).strip(),
        personality_id=str(d.get("personality_id") or d.get("personality") or base.personality_id).strip().lower(),
        mood_id=str(d.get("mood_id") or d.get("mood") or base.mood_id).strip().lower(),
        gambit_ids=_three(_slot_ids(d.get("gambit_ids", d.get("gambits")), base.gambit_ids), NO_GAMBIT),
        stage_ids=_slot_ids(d.get("stage_ids", d.get("stages")), base.stage_ids),
        judge_ids=_slot_ids(d.get("judge_ids", d.get("judges")), base.judge_ids),
        appeal_uses=max(0, _as_int(d.get("appeal_uses", d.get("uses", base.appeal_uses)), 0)),
    )


def config_to_dict(cfg: EvaluationConfig) -> dict:
    return {
        "monster_id": cfg.monster_id,
        "personality_id": cfg.personality_id,
        "mood_id": cfg.mood_id,
        "gambit_ids": list(cfg.gambit_ids),
        "stage_ids": list(cfg.stage_ids),
        "judge_ids": list(cfg.judge_ids),
        "appeal_uses": int(cfg.appeal_uses),
    }
