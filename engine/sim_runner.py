"""engine.sim_runner

Headless runner for quick sanity checks and balancing sweeps.

Run:
  python -m engine.sim_runner [monster_id]
"""

from __future__ import annotations

import sys
from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

from content.catalog import DEFAULT_CATALOG, ContestCatalog
from core.personality import DEFAULT_PERSONALITIES

from .config import EvaluationConfig, default_config
from .pipeline import evaluate
from .report import render_report


def run_headless_eval(config: Optional[EvaluationConfig] = None, catalog: ContestCatalog = DEFAULT_CATALOG) -> Dict[str, Any]:
    """Evaluate one config (default UI start state if omitted) and return a summary."""
    cfg = config or default_config(catalog)
    ev = evaluate(cfg, catalog)
    if ev is None:
        return {"ok": False, "config": cfg, "error": f"monster not found: {cfg.monster_id}"}
    return {
        "ok": True,
        "config": cfg,
        "final": ev.final_stats,
        "stage_totals": [r.total for r in ev.sheet.stages],
        "average": ev.sheet.average,
        "report": render_report(ev),
    }


def rank_personalities(config: EvaluationConfig, catalog: ContestCatalog = DEFAULT_CATALOG) -> List[Tuple[str, float]]:
    """Average stage score for every personality, best first (ties keep table order)."""
    out: List[Tuple[str, float]] = []
    for key in DEFAULT_PERSONALITIES:
        ev = evaluate(replace(config, personality_id=key), catalog)
        if ev is None:
            continue
        out.append((key, ev.sheet.average))
    return sorted(out, key=lambda kv: kv[1], reverse=True)


def rank_gambit_openers(config: EvaluationConfig, catalog: ContestCatalog = DEFAULT_CATALOG) -> List[Tuple[str, float]]:
    """Average stage score for each gambit placed in slot 1 (other slots unchanged)."""
    out: List[Tuple[str, float]] = []
    rest = tuple(config.gambit_ids[1:])
    for gid in catalog.gambits.ids():
        ev = evaluate(replace(config, gambit_ids=(gid,) + rest), catalog)
        if ev is None:
            continue
        out.append((gid, ev.sheet.average))
    return sorted(out, key=lambda kv: kv[1], reverse=True)


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    cfg = default_config()
    if args:
        cfg = replace(cfg, monster_id=args[0])
    summary = run_headless_eval(cfg)
    if not summary["ok"]:
        print(summary["error"])
        return 1
    print(summary["report"])
    print("")
    print("Personality ranking:")
    for key, avg in rank_personalities(cfg):
        print(f"  {key:<10} {avg:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
