import json

from content.catalog import DEFAULT_CATALOG
from engine.config import EvaluationConfig, default_config
from engine.export import dumps_run_export, make_run_export
from engine.pipeline import evaluate
from engine.report import (
    format_appeal_multipliers,
    format_judge_formula,
    format_multipliers,
    render_report,
    stat_rows,
)


def test_format_multipliers():
    assert format_multipliers({"cute": 1.2, "impact": 0.95}) == "CT×1.2 / IP×0.95"
    assert format_multipliers({}) == "no modifier"


def test_format_judge_formula():
    assert format_judge_formula(DEFAULT_CATALOG.judges.get("wild_focus")) == "IP×1.0 + CT×0.3"


def test_format_appeal_skips_neutral_multipliers():
    howl = DEFAULT_CATALOG.appeals.get("cool_howl")
    assert format_appeal_multipliers(howl) == "IP×1.25 / MJ×1.15"


def test_report_contains_scores_and_average():
    ev = evaluate(EvaluationConfig(monster_id="fenrir_adult", stage_ids=("standard",), judge_ids=("wild_focus",), appeal_uses=1))
    text = render_report(ev)
    assert "Name: Fenrir" in text
    assert "=== Appeal ===" in text
    assert "Gambit 1: No gambit" in text
    assert "Stage total:" in text
    assert text.splitlines()[-1].startswith("Average stage score: ")


def test_stat_rows_cover_every_stat():
    rows = stat_rows(evaluate(default_config()))
    assert [r["stat"] for r in rows] == ["CT", "ER", "MJ", "IP"]
    assert rows[0]["template"] == 48


def test_export_is_json():
    cfg = default_config()
    obj = make_run_export(config=cfg, evaluations=[evaluate(cfg)])
    parsed = json.loads(dumps_run_export(obj))
    assert parsed["version"] == 1
    assert parsed["config"]["monster_id"] == "fenrir_adult"
    assert len(parsed["evaluations"][0]["stages"]) == 3


def test_judged_stage_block_describes_stage():
    ev = evaluate(EvaluationConfig(monster_id="fenrir_adult", stage_ids=("wild_show_stage",), judge_ids=("wild_focus",)))
    lines = render_report(ev).splitlines()
    header = lines.index("--- Stage 1: Wild showtime ---")
    stage = DEFAULT_CATALOG.stages.get("wild_show_stage")
    assert lines[header + 1] == f"About: {stage.description}"
    assert lines[header + 2] == "Stage bias: IP×1.2 / CT×0.9"
