"""Monster Contest Scorer (Streamlit)

UI/Experience layer.

Principles:
- UI only renders + triggers.
- Core rules and the evaluation engine are pure Python modules.
- Every widget change rebuilds an immutable EvaluationConfig and re-evaluates.

Entry point: streamlit run app.py
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

import streamlit as st

from content.catalog import ARCHETYPE_LABELS, DEFAULT_CATALOG, PHASE_LABELS, UNLOCK_CONDITION_LABELS
from core.personality import DEFAULT_MOODS, DEFAULT_PERSONALITIES

from engine.config import SLOT_COUNT, EvaluationConfig, default_config
from engine.export import dumps_run_export, make_run_export
from engine.pipeline import evaluate
from engine.report import format_appeal_multipliers, render_report, stat_rows


APP_TITLE = "Monster Contest Scorer"
APP_SUBTITLE = "Personality → gambits ×3 → appeal → stages ×3 × judges ×3."
APP_VERSION = "1.0.0"
EXPECTED_CORE_API = "core-v1-20261019"

st.set_page_config(page_title=APP_TITLE, page_icon="🏆", layout="wide", initial_sidebar_state="expanded")

CSS = """
<style>
.block-container {padding-top: 3.2rem; padding-bottom: 2rem;}
section[data-testid="stSidebar"] .block-container {padding-top: 2.0rem;}
.card {
  border: 1px solid rgba(255,255,255,0.08);
  border-radius: 16px;
  padding: 14px 16px;
  background: rgba(255,255,255,0.03);
}
.pill {
  display: inline-block;
  padding: 2px 10px;
  border-radius: 999px;
  border: 1px solid rgba(255,255,255,0.12);
  font-size: 12px;
  opacity: .85;
}
.small {font-size: 13px; opacity:.75;}
</style>
"""

st.markdown(CSS, unsafe_allow_html=True)


def check_core_or_stop() -> None:
    """Stop with a helpful message if core and app come from different builds."""
    api_ver = getattr(__import__("core"), "API_VERSION", None)
    if api_ver != EXPECTED_CORE_API:
        st.error(
            "Core version does not match the app.\n\n"
            f"Expected core: {EXPECTED_CORE_API}, found: {api_ver!r}"
        )
        st.stop()


check_core_or_stop()


# =========================
# Helpers
# =========================


def _now_id() -> str:
    return datetime.utcnow().strftime("%Y%m%d%H%M%S%f")


def _monster_label(mid: str) -> str:
    m = DEFAULT_CATALOG.monsters.get(mid)
    if m is None:
        return mid
    return f"{m.catalog_no:03d} {m.name} · {PHASE_LABELS.get(m.phase, m.phase)}"


def _profile_label(catalog: Any, pid: str) -> str:
    p = catalog.get(pid)
    return p.name if p is not None else pid


# =========================
# Session State
# =========================


def _ensure_state() -> None:
    ss = st.session_state
    base = default_config()
    if "run_id" not in ss:
        ss.run_id = _now_id()
    if "monster_id" not in ss:
        ss.monster_id = base.monster_id
    if "personality_id" not in ss:
        ss.personality_id = base.personality_id
    if "mood_id" not in ss:
        ss.mood_id = base.mood_id
    for i in range(SLOT_COUNT):
        if f"gambit{i + 1}" not in ss:
            ss[f"gambit{i + 1}"] = base.gambit_ids[i]
        if f"stage{i + 1}" not in ss:
            ss[f"stage{i + 1}"] = base.stage_ids[i]
        if f"judge{i + 1}" not in ss:
            ss[f"judge{i + 1}"] = base.judge_ids[i]
    if "appeal_uses" not in ss:
        ss.appeal_uses = base.appeal_uses


def _current_config() -> EvaluationConfig:
    ss = st.session_state
    return EvaluationConfig(
        monster_id=str(ss.monster_id),
        personality_id=str(ss.personality_id),
        mood_id=str(ss.mood_id),
        gambit_ids=tuple(str(ss[f"gambit{i + 1}"]) for i in range(SLOT_COUNT)),  # type: ignore[arg-type]
        stage_ids=tuple(str(ss[f"stage{i + 1}"]) for i in range(SLOT_COUNT)),
        judge_ids=tuple(str(ss[f"judge{i + 1}"]) for i in range(SLOT_COUNT)),
        appeal_uses=int(ss.appeal_uses),
    )


def _reset() -> None:
    ss = st.session_state
    for k in list(ss.keys()):
        del ss[k]
    _ensure_state()


# =========================
# Sidebar
# =========================


def render_sidebar() -> None:
    with st.sidebar:
        st.markdown(f"### {APP_TITLE}")
        st.caption(f"v{APP_VERSION}")

        monster_ids: List[str] = []
        for group in DEFAULT_CATALOG.monsters_by_phase().values():
            monster_ids.extend(m.id for m in group)
        st.selectbox("Monster", monster_ids, key="monster_id", format_func=_monster_label)

        st.selectbox(
            "Personality",
            list(DEFAULT_PERSONALITIES),
            key="personality_id",
            format_func=lambda k: f"{DEFAULT_PERSONALITIES[k].label} ({k})",
        )
        st.selectbox("Mood", list(DEFAULT_MOODS), key="mood_id", format_func=lambda k: DEFAULT_MOODS[k].label)

        st.markdown("**Gambits**")
        for i in range(SLOT_COUNT):
            st.selectbox(
                f"Gambit {i + 1}",
                DEFAULT_CATALOG.gambits.ids(),
                key=f"gambit{i + 1}",
                format_func=lambda g: _profile_label(DEFAULT_CATALOG.gambits, g),
            )

        st.markdown("**Stages**")
        for i in range(SLOT_COUNT):
            st.selectbox(
                f"Stage {i + 1}",
                DEFAULT_CATALOG.stages.ids(),
                key=f"stage{i + 1}",
                format_func=lambda s: _profile_label(DEFAULT_CATALOG.stages, s),
            )

        st.markdown("**Judges**")
        for i in range(SLOT_COUNT):
            st.selectbox(
                f"Judge {i + 1}",
                DEFAULT_CATALOG.judges.ids(),
                key=f"judge{i + 1}",
                format_func=lambda j: _profile_label(DEFAULT_CATALOG.judges, j),
            )

        st.number_input("Appeal uses", min_value=0, max_value=10, step=1, key="appeal_uses")

        st.button("Reset", on_click=_reset)


# =========================
# Main
# =========================


def render_main() -> None:
    st.title(APP_TITLE)
    st.caption(APP_SUBTITLE)

    cfg = _current_config()
    ev = evaluate(cfg)
    if ev is None:
        st.error(f"Monster not found: {cfg.monster_id}")
        return

    m = ev.monster
    st.markdown(
        f"<div class='card'><b>{m.name}</b> "
        f"<span class='pill'>{ARCHETYPE_LABELS.get(m.archetype, m.archetype)}</span> "
        f"<span class='pill'>{PHASE_LABELS.get(m.phase, m.phase)}</span> "
        f"<span class='pill'>Stamina {m.stamina_max}</span><br/>"
        f"<span class='small'>{UNLOCK_CONDITION_LABELS.get(m.unlock_condition, m.unlock_condition)}</span></div>",
        unsafe_allow_html=True,
    )

    if ev.appeal is not None:
        st.info(f"Appeal: {ev.appeal.name} · {format_appeal_multipliers(ev.appeal)} · {ev.appeal.description}")
    else:
        st.caption("No appeal registered for this monster yet.")

    left, right = st.columns([1, 1])
    with left:
        st.subheader("Stats")
        st.table(stat_rows(ev))
    with right:
        st.subheader("Scores")
        rows: List[Dict[str, Any]] = []
        for r in ev.sheet.stages:
            for js in r.judge_scores:
                rows.append({"stage": f"{r.slot}. {r.stage.name}", "judge": f"{js.slot}. {js.judge.name}", "score": round(js.score, 1)})
        if rows:
            st.table(rows)
        st.metric("Average stage score", f"{ev.sheet.average:.1f}")

    with st.expander("Full report", expanded=False):
        st.code(render_report(ev), language="text")

    export = dumps_run_export(make_run_export(config=cfg, evaluations=[ev]))
    st.download_button(
        "Download evaluation (JSON)",
        data=export.encode("utf-8"),
        file_name=f"contest_{st.session_state.run_id}.json",
        mime="application/json",
    )


_ensure_state()
render_sidebar()
render_main()
