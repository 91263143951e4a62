from dataclasses import replace

from core.selfcheck import run_smoke
from engine.config import default_config
from engine.sim_runner import main, rank_gambit_openers, rank_personalities, run_headless_eval


def test_core_smoke():
    out = run_smoke()
    assert out["final"]["cute"] == 58


def test_headless_eval_default():
    summary = run_headless_eval()
    assert summary["ok"] is True
    assert len(summary["stage_totals"]) == 3
    assert "Average stage score" in summary["report"]


def test_headless_eval_unknown_monster():
    summary = run_headless_eval(replace(default_config(), monster_id="ghost"))
    assert summary["ok"] is False


def test_rank_personalities_sorted():
    ranking = rank_personalities(default_config())
    assert len(ranking) == 9
    scores = [s for _, s in ranking]
    assert scores == sorted(scores, reverse=True)


def test_rank_gambit_openers_covers_catalog():
    ranking = rank_gambit_openers(default_config())
    assert {g for g, _ in ranking} >= {"none", "cute_focus", "stage_finale"}


def test_main_prints_report(capsys):
    assert main([]) == 0
    assert "Personality ranking:" in capsys.readouterr().out
    assert main(["ghost"]) == 1
