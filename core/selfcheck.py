"""
core.selfcheck
Minimal "it runs" proof for the stat chain and scoring rules.

Run:
  python -m core.selfcheck
"""

from __future__ import annotations

from dataclasses import asdict

from .effects import apply_appeal, apply_gambit_chain
from .personality import DEFAULT_PERSONALITIES, apply_personality
from .scoring import aggregate_scores, judge_score
from .state import AppealProfile, GambitProfile, JudgeProfile, StageProfile, StatVector


def run_smoke() -> dict:
    base = StatVector(cute=48, eerie=42, majestic=56, impact=54)
    judge = JudgeProfile("wild_focus", "Impact judge", "", {"impact": 1.0, "cute": 0.3})
    cute_up = GambitProfile("cute_up", "Cute up", "", {"cute": 1.2})
    howl = AppealProfile("cool_howl", "Cool howl", "", {"impact": 1.25, "majestic": 1.15})
    standard = StageProfile("standard", "Standard", "", {})

    # neutral personality is identity
    assert apply_personality(base, "natural") == base

    plain = judge_score(base, judge)
    assert abs(plain - 68.4) < 1e-9

    boosted = apply_gambit_chain(base, [cute_up, None, None])
    assert boosted.cute == 58
    assert abs(judge_score(boosted, judge) - 71.4) < 1e-9

    # appeal off for zero uses
    assert apply_appeal(boosted, howl, 0) == boosted

    for p in DEFAULT_PERSONALITIES.values():
        s = apply_personality(base, p)
        assert all(v >= 0 for v in s.as_tuple())

    final = apply_appeal(boosted, howl, 2)
    sheet = aggregate_scores(final, [standard, None, standard], [judge, None, None])
    assert sheet.valid_stage_count == 2
    assert abs(sheet.average - sheet.stages[0].total) < 1e-9

    return {"final": asdict(final), "average": sheet.average}


if __name__ == "__main__":
    out = run_smoke()
    print("OK: core smoke test passed.")
    print("Final stats:", out["final"])
    print("Average:", round(out["average"], 1))
