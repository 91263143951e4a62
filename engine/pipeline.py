"""engine.pipeline

End-to-end evaluation (headless).

Responsibilities:
- Resolve config ids against the catalogs (unknown ids -> None)
- personality -> gambit x3 -> appeal -> final stats
- stage x judge scoring and aggregation

This layer is UI-agnostic and keeps no state between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from content.catalog import DEFAULT_CATALOG, ContestCatalog
from core.effects import apply_appeal, apply_gambit_chain
from core.personality import MoodSpec, PersonalitySpec, apply_personality, get_mood, get_personality
from core.scoring import ScoreSheet, aggregate_scores
from core.state import AppealProfile, GambitProfile, MonsterTemplate, StatVector, stats_to_dict

from .config import EvaluationConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evaluation:
    config: EvaluationConfig
    monster: MonsterTemplate
    personality: Optional[PersonalitySpec]
    mood: Optional[MoodSpec]
    gambits: List[Optional[GambitProfile]]
    appeal: Optional[AppealProfile]
    base_stats: StatVector            # after personality
    after_gambits: StatVector
    final_stats: StatVector           # after appeal
    sheet: ScoreSheet

    @property
    def average(self) -> float:
        return self.sheet.average


def _log_unresolved(kind: str, ids: List[str], resolved: List[Any]) -> None:
    for slot, (pid, obj) in enumerate(zip(ids, resolved), start=1):
        if obj is None:
            logger.debug("%s slot %d: %r not found, skipped", kind, slot, pid)


def final_stats_for(
    monster: MonsterTemplate,
    personality: Optional[PersonalitySpec],
    gambits: List[Optional[GambitProfile]],
    appeal: Optional[AppealProfile],
    appeal_uses: int,
) -> Dict[str, StatVector]:
    """Run the stat chain and return every intermediate snapshot."""
    base = apply_personality(monster.base_stats, personality)
    after_gambits = apply_gambit_chain(base, gambits)
    final = apply_appeal(after_gambits, appeal, appeal_uses)
    return {"base": base, "after_gambits": after_gambits, "final": final}


def evaluate(config: EvaluationConfig, catalog: ContestCatalog = DEFAULT_CATALOG) -> Optional[Evaluation]:
    """Evaluate one configuration.

    Returns None only when the monster id does not resolve; every other
    unknown id degrades to a no-op (personality/gambit/appeal) or a skipped
    slot (stage/judge).
    """
    monster = catalog.monsters.get(config.monster_id)
    if monster is None:
        logger.debug("monster %r not found", config.monster_id)
        return None

    personality = get_personality(config.personality_id)
    if personality is None:
        logger.debug("personality %r not found, treated as neutral", config.personality_id)

    gambit_ids = list(config.gambit_ids)
    gambits = catalog.gambits.resolve_all(gambit_ids)
    _log_unresolved("gambit", gambit_ids, gambits)

    appeal = catalog.default_appeal_for(monster.id)
    chain = final_stats_for(monster, personality, gambits, appeal, int(config.appeal_uses))

    stage_ids = list(config.stage_ids)
    judge_ids = list(config.judge_ids)
    stages = catalog.stages.resolve_all(stage_ids)
    judges = catalog.judges.resolve_all(judge_ids)
    _log_unresolved("stage", stage_ids, stages)
    _log_unresolved("judge", judge_ids, judges)

    sheet = aggregate_scores(chain["final"], stages, judges)

    return Evaluation(
        config=config,
        monster=monster,
        personality=personality,
        mood=get_mood(config.mood_id),
        gambits=gambits,
        appeal=appeal,
        base_stats=chain["base"],
        after_gambits=chain["after_gambits"],
        final_stats=chain["final"],
        sheet=sheet,
    )


def evaluation_to_dict(ev: Evaluation) -> Dict[str, Any]:
    """Plain-data view for the presentation layer / JSON export."""
    return {
        "monster": {
            "id": ev.monster.id,
            "name": ev.monster.name,
            "archetype": ev.monster.archetype,
            "phase": ev.monster.phase,
            "stamina_max": int(ev.monster.stamina_max),
        },
        "personality": ev.personality.key if ev.personality else None,
        "mood": ev.mood.key if ev.mood else None,
        "gambits": [g.id if g else None for g in ev.gambits],
        "appeal": ev.appeal.id if ev.appeal else None,
        "appeal_uses": int(ev.config.appeal_uses),
        "stats": {
            "template": stats_to_dict(ev.monster.base_stats),
            "base": stats_to_dict(ev.base_stats),
            "after_gambits": stats_to_dict(ev.after_gambits),
            "final": stats_to_dict(ev.final_stats),
        },
        "stages": [
            {
                "slot": r.slot,
                "stage": r.stage.id,
                "judges": [{"slot": j.slot, "judge": j.judge.id, "score": float(j.score)} for j in r.judge_scores],
                "total": float(r.total),
            }
            for r in ev.sheet.stages
        ],
        "grand_total": float(ev.sheet.grand_total),
        "average": float(ev.sheet.average),
    }
