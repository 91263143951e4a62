"""engine.report

Plain-text rendering of an Evaluation (the log panel in the UI and the
headless runner output). Scores are shown with one decimal.
"""

from __future__ import annotations

from typing import List, Mapping

from content.catalog import ARCHETYPE_LABELS
from core.state import STAT_KEYS, STAT_LABELS, AppealProfile, JudgeProfile

from .pipeline import Evaluation

NO_MODIFIER = "no modifier"


def _num(x: float) -> str:
    # 1.0 -> "1.0", 0.95 -> "0.95"
    return repr(float(x))


def format_multipliers(multipliers: Mapping[str, float]) -> str:
    """"CT×1.2 / IP×0.95" in the map's own order."""
    if not multipliers:
        return NO_MODIFIER
    return " / ".join(f"{STAT_LABELS[k]}×{_num(v)}" for k, v in multipliers.items())


def format_appeal_multipliers(appeal: AppealProfile) -> str:
    parts = [f"{STAT_LABELS[k]}×{_num(v)}" for k, v in appeal.multipliers.items() if float(v) != 1.0]
    return " / ".join(parts) if parts else NO_MODIFIER


def format_judge_formula(judge: JudgeProfile) -> str:
    return " + ".join(f"{STAT_LABELS[k]}×{_num(w)}" for k, w in judge.weights.items())


def render_report(ev: Evaluation) -> str:
    m = ev.monster
    lines: List[str] = []

    lines.append("=== Current setup ===")
    lines.append(f"Name: {m.name}")
    lines.append(f"Type: {ARCHETYPE_LABELS.get(m.archetype, m.archetype)} ({m.archetype})")
    p_label = ev.personality.label if ev.personality else "-"
    lines.append(f"Personality: {p_label} ({ev.config.personality_id})")
    mood_label = ev.mood.label if ev.mood else "-"
    lines.append(f"Mood: {mood_label} ({ev.config.mood_id})")
    lines.append("")
    lines.append(f"Base stats (with personality): {ev.base_stats.short()}")
    lines.append(f"Stamina max: {m.stamina_max}")

    lines.append("")
    lines.append("=== Gambits ===")
    for idx, g in enumerate(ev.gambits, start=1):
        if g is None:
            lines.append(f"Gambit {idx}: (none)")
            continue
        lines.append(f"Gambit {idx}: {g.name}")
        lines.append(f"  About: {g.description}")
        lines.append(f"  Modifier: {format_multipliers(g.multipliers)}")

    if ev.appeal is not None:
        lines.append("")
        lines.append("=== Appeal ===")
        lines.append(f"Appeal: {ev.appeal.name}")
        lines.append(f"  About: {ev.appeal.description}")
        lines.append(f"  Modifier: {format_appeal_multipliers(ev.appeal)} (x{ev.config.appeal_uses} uses)")

    lines.append("")
    lines.append(f"Final stats (gambits + appeal): {ev.final_stats.short()}")
    lines.append("")

    lines.append("Stage line-up:")
    for r in ev.sheet.stages:
        lines.append(f"  Stage {r.slot}: {r.stage.name} ({r.stage.description})")
    lines.append("")

    lines.append("=== Judging ===")
    for r in ev.sheet.stages:
        lines.append("")
        lines.append(f"--- Stage {r.slot}: {r.stage.name} ---")
        lines.append(f"About: {r.stage.description}")
        lines.append(f"Stage bias: {format_multipliers(r.stage.bias)}")
        lines.append("")
        for js in r.judge_scores:
            lines.append(f"Judge {js.slot}: {js.judge.name} ({js.judge.description})")
            lines.append(f"  Formula: {format_judge_formula(js.judge)}")
            lines.append(f"  Score: {js.score:.1f}")
            lines.append("")
        if r.judge_scores:
            lines.append(f"Stage total: {r.total:.1f}")

    lines.append("")
    lines.append("=== Overall ===")
    lines.append(f"Average stage score: {ev.sheet.average:.1f}")
    return "\n".join(lines)


def stat_rows(ev: Evaluation) -> List[dict]:
    """Table rows (one per stat) for the UI."""
    return [
        {
            "stat": STAT_LABELS[k],
            "template": ev.monster.base_stats.get(k),
            "personality": ev.base_stats.get(k),
            "gambits": ev.after_gambits.get(k),
            "final": ev.final_stats.get(k),
        }
        for k in STAT_KEYS
    ]
