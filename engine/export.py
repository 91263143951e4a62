"""engine.export

Small helpers for storing evaluation runs.

A run export is JSON-serializable so it can be downloaded / diffed later.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from .config import EvaluationConfig, config_to_dict
from .pipeline import Evaluation, evaluation_to_dict


def make_run_export(*, config: EvaluationConfig, evaluations: List[Evaluation], notes: str = "") -> Dict[str, Any]:
    return {
        "version": 1,
        "config": config_to_dict(config),
        "evaluations": [evaluation_to_dict(ev) for ev in evaluations],
        "notes": str(notes),
    }


def dumps_run_export(obj: Dict[str, Any]) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=2, sort_keys=True)
