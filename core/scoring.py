"""
core.scoring
Judge scoring and stage x judge aggregation.

Scores are kept at full float precision; formatting (one decimal) is a
presentation concern.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .state import JudgeProfile, StageProfile, StatVector


@dataclass(frozen=True)
class JudgeScore:
    slot: int                # 1-based judge slot
    judge: JudgeProfile
    score: float


@dataclass(frozen=True)
class StageResult:
    slot: int                # 1-based stage slot
    stage: StageProfile
    judge_scores: List[JudgeScore] = field(default_factory=list)

    @property
    def total(self) -> float:
        return float(sum(j.score for j in self.judge_scores))


@dataclass(frozen=True)
class ScoreSheet:
    stages: List[StageResult]
    grand_total: float
    average: float

    @property
    def valid_stage_count(self) -> int:
        return len(self.stages)


def judge_score(stats: StatVector, judge: JudgeProfile, stage: Optional[StageProfile] = None) -> float:
    """Weighted sum over the judge's fields, each weight scaled by the stage bias."""
    total = 0.0
    for key, weight in judge.weights.items():
        bias = 1.0 if stage is None else float(stage.bias.get(key, 1.0))
        total += stats.get(key) * float(weight) * bias
    return total


def average_stage_score(stage_totals: Sequence[float]) -> float:
    if not stage_totals:
        return 0.0
    return float(sum(stage_totals)) / len(stage_totals)


def aggregate_scores(
    stats: StatVector,
    stages: Sequence[Optional[StageProfile]],
    judges: Sequence[Optional[JudgeProfile]],
) -> ScoreSheet:
    """Score every resolved judge on every resolved stage.

    Unresolved slots (None) are skipped. A resolved stage counts toward the
    average even if none of its judges resolved.
    """
    results: List[StageResult] = []
    for s_idx, stage in enumerate(stages, start=1):
        if stage is None:
            continue
        scores: List[JudgeScore] = []
        for j_idx, judge in enumerate(judges, start=1):
            if judge is None:
                continue
            scores.append(JudgeScore(slot=j_idx, judge=judge, score=judge_score(stats, judge, stage)))
        results.append(StageResult(slot=s_idx, stage=stage, judge_scores=scores))

    totals = [r.total for r in results]
    return ScoreSheet(
        stages=results,
        grand_total=float(sum(totals)),
        average=average_stage_score(totals),
    )
