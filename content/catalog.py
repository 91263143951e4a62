"""content.catalog

Built-in reference tables: monsters, gambits, appeals, judges, stages.

Rows are plain dicts parsed through content.schemas so the same
validation applies to built-in data and to caller-supplied tables.
Balance numbers are rough first-pass values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from core.state import AppealProfile, GambitProfile, JudgeProfile, MonsterTemplate, StageProfile

from .schemas import (
    ALLOWED_PHASES,
    Catalog,
    appeal_from_mapping,
    gambit_from_mapping,
    judge_from_mapping,
    monster_from_mapping,
    stage_from_mapping,
    validate_appeal_table,
)


PHASE_LABELS: Dict[str, str] = {
    "early": "Early",
    "mid": "Mid",
    "late": "Late",
}

ARCHETYPE_LABELS: Dict[str, str] = {
    "star": "Star",
    "partner": "Partner",
    "moodmaker": "Mood maker",
    "specialist": "Specialist",
    "artist": "Artist",
}

UNLOCK_CONDITION_LABELS: Dict[str, str] = {
    "always": "Available from the start",
    "after_local_league": "After clearing the local league",
    "after_national_league": "After clearing the national league",
    "after_world_league": "After clearing the world league",
    "bond_with_fenrir_max": "Max bond with Fenrir",
}


def _mon(no: int, mid: str, name: str, archetype: str, stats: tuple, phase: str, unlock: str) -> Dict[str, Any]:
    cute, eerie, majestic, impact = stats
    return {
        "catalog_no": no,
        "id": mid,
        "name": name,
        "archetype": archetype,
        "base_stats": {"cute": cute, "eerie": eerie, "majestic": majestic, "impact": impact},
        "phase": phase,
        "unlock_condition": unlock,
        "stamina_max": {"early": 3, "mid": 4, "late": 5}[phase],
    }


MONSTER_ROWS: List[Dict[str, Any]] = [
    # early: mild, no strong lean
    _mon(1, "fenrir_adult", "Fenrir", "star", (48, 42, 56, 54), "early", "always"),
    _mon(2, "jack_o_lantern", "Jack", "moodmaker", (57, 43, 45, 55), "early", "always"),
    _mon(3, "muse_idol_fairy", "Muse", "star", (60, 45, 50, 45), "early", "always"),
    _mon(4, "moko_plush_beast", "Moko", "partner", (58, 45, 47, 50), "early", "always"),
    _mon(5, "gear_dancer_artifact", "Gear Dancer", "specialist", (44, 46, 58, 52), "early", "always"),
    _mon(6, "healer_sprite_spirit", "Ceres", "partner", (55, 45, 52, 48), "early", "always"),
    _mon(7, "plush_guard_beast", "Guardy", "partner", (48, 45, 53, 54), "early", "always"),
    _mon(8, "trick_rabbit_kaiji", "Trick Rabbit", "moodmaker", (57, 46, 42, 55), "early", "always"),
    _mon(9, "beat_penguin_beast", "Beat Penguin", "moodmaker", (56, 44, 45, 55), "early", "always"),
    _mon(10, "dream_weaver_beast", "Dream Weaver", "artist", (46, 56, 54, 44), "early", "always"),
    # mid: similar totals, clear lean
    _mon(11, "lumina_wolf_beast", "Lumina Wolf", "star", (50, 35, 60, 75), "mid", "after_local_league"),
    _mon(12, "stella_song_spirit", "Stella", "star", (80, 25, 70, 45), "mid", "after_local_league"),
    _mon(13, "abyss_idol_kaiji", "Abyss", "star", (25, 80, 70, 45), "mid", "after_local_league"),
    _mon(14, "minotaur_mood_beast", "Minotaur", "moodmaker", (45, 35, 30, 90), "mid", "after_local_league"),
    _mon(15, "carnival_fox_spirit", "Carnival Fox", "moodmaker", (70, 30, 35, 75), "mid", "after_local_league"),
    _mon(16, "yukionna_snow_spirit", "Yuki-onna", "specialist", (35, 80, 75, 30), "mid", "after_local_league"),
    _mon(17, "tempo_sniper_artifact", "Tempo Sniper", "specialist", (30, 40, 85, 65), "mid", "after_local_league"),
    _mon(18, "rhythm_blade_beast", "Rhythm Blade", "specialist", (35, 35, 80, 70), "mid", "after_local_league"),
    _mon(19, "tutor_dragon", "Tutor", "partner", (40, 50, 75, 45), "mid", "after_local_league"),
    _mon(20, "lantern_painter_spirit", "Lantern Painter", "artist", (45, 75, 80, 30), "mid", "after_local_league"),
    # late: extreme stats near 0 / 100
    _mon(21, "nocturne_artist_dragon", "Nocturne", "artist", (10, 95, 95, 20), "late", "after_national_league"),
    _mon(22, "shield_knight_artifact", "Shield Knight", "partner", (30, 10, 90, 80), "late", "after_national_league"),
    _mon(23, "score_alchemist_kaiji", "Score Alchemist", "specialist", (5, 100, 85, 30), "late", "after_national_league"),
    _mon(24, "medusa_artist_kaiji", "Medusa", "artist", (0, 100, 95, 25), "late", "bond_with_fenrir_max"),
    _mon(25, "relic_sculptor_artifact", "Relic Sculptor", "artist", (15, 80, 100, 25), "late", "after_national_league"),
]


GAMBIT_ROWS: List[Dict[str, Any]] = [
    {
        "id": "none",
        "name": "No gambit",
        "description": "Compete on raw charm. No stat modifier.",
        "multipliers": {},
    },
    {
        "id": "cute_focus",
        "name": "All-in cute appeal",
        "description": "Pushes CUTE hard; everything else is toned down a little.",
        "multipliers": {"cute": 1.2, "eerie": 0.95, "majestic": 0.95, "impact": 0.95},
    },
    {
        "id": "wild_show",
        "name": "Wild showtime",
        "description": "Aggressive IMPACT-first routine that sacrifices some CUTE and MAJESTIC.",
        "multipliers": {"impact": 1.2, "cute": 0.95, "majestic": 0.9},
    },
    {
        "id": "balanced_pose",
        "name": "Balanced poise",
        "description": "Evens everything out to leave a decent impression on every judge.",
        "multipliers": {"cute": 1.05, "eerie": 1.05, "majestic": 1.05, "impact": 1.05},
    },
    {
        "id": "eerie_focus",
        "name": "Mysterious focus",
        "description": "Leans hard into EERIE, holding CUTE back for atmosphere.",
        "multipliers": {"eerie": 1.25, "cute": 0.9, "impact": 0.95},
    },
    {
        "id": "majestic_focus",
        "name": "Full-aura stage",
        "description": "Raises MAJESTIC and wins on presence; the rest is held back slightly.",
        "multipliers": {"majestic": 1.25, "cute": 0.95, "eerie": 0.95},
    },
    {
        "id": "glass_cannon",
        "name": "All-or-nothing appeal",
        "description": "Big CUTE and MAJESTIC gains paid for with heavy IMPACT and EERIE cuts.",
        "multipliers": {"cute": 1.35, "majestic": 1.25, "impact": 0.8, "eerie": 0.9},
    },
    {
        "id": "steady_performance",
        "name": "Steady performance",
        "description": "Small lift across the board; hard to break on any stage.",
        "multipliers": {"cute": 1.03, "eerie": 1.03, "majestic": 1.03, "impact": 1.03},
    },
    {
        "id": "stage_finale",
        "name": "Climax appeal",
        "description": "Finale set piece centred on CUTE and MAJESTIC with an IMPACT lift.",
        "multipliers": {"cute": 1.15, "majestic": 1.15, "impact": 1.1},
    },
]


APPEAL_ROWS: List[Dict[str, Any]] = [
    {
        "id": "cool_howl",
        "name": "Cool howl",
        "description": "A cool howl that cuts the silence, showing wildness and dignity.",
        "multipliers": {"impact": 1.25, "majestic": 1.15},
    },
    {
        "id": "throw_kiss",
        "name": "Blown kiss",
        "description": "A kiss blown to the audience. Fan service built on CUTE.",
        "multipliers": {"cute": 1.3},
    },
    {
        "id": "spin_turn",
        "name": "Spin turn",
        "description": "A graceful turn that uses the whole stage to grow presence.",
        "multipliers": {"cute": 1.1, "majestic": 1.2},
    },
    {
        "id": "glance_shot",
        "name": "Sidelong glance",
        "description": "A sidelong look that pins the crowd, all allure and focus.",
        "multipliers": {"cute": 1.15, "eerie": 1.1},
    },
    {
        "id": "bashful_smile",
        "name": "Bashful smile",
        "description": "A sudden shy smile that makes everyone want to protect it.",
        "multipliers": {"cute": 1.2},
    },
    {
        "id": "weird_dance",
        "name": "Eerie dance",
        "description": "Odd, addictive steps that take over the room.",
        "multipliers": {"eerie": 1.4, "impact": 1.1},
    },
]

# monster id -> appeal ids; the first entry is the default appeal
MONSTER_APPEALS: Dict[str, List[str]] = {
    "fenrir_adult": ["cool_howl"],
    "jack_o_lantern": ["weird_dance"],
}


JUDGE_ROWS: List[Dict[str, Any]] = [
    {
        "id": "cute_focus",
        "name": "Cuteness purist",
        "description": "Soft on anything with high CUTE. Glances at MAJESTIC too.",
        "weights": {"cute": 1.0, "majestic": 0.4},
    },
    {
        "id": "wild_focus",
        "name": "Impact judge",
        "description": "Values IMPACT. Extra points when there is CUTE inside the impact.",
        "weights": {"impact": 1.0, "cute": 0.3},
    },
    {
        "id": "balance_focus",
        "name": "Balance critic",
        "description": "Rates the overall balance; not fond of extreme spikes.",
        "weights": {"cute": 0.5, "eerie": 0.5, "majestic": 0.5, "impact": 0.5},
    },
    {
        "id": "dark_mystic",
        "name": "Dark connoisseur",
        "description": "Loves the EERIE and MAJESTIC combination.",
        "weights": {"eerie": 1.0, "majestic": 0.6},
    },
]


STAGE_ROWS: List[Dict[str, Any]] = [
    {
        "id": "standard",
        "name": "Standard stage",
        "description": "An orthodox stage with no particular lean.",
        "bias": {},
    },
    {
        "id": "cute_focus_stage",
        "name": "Cute festival",
        "description": "CUTE shines here; MAJESTIC gets a small bonus too.",
        "bias": {"cute": 1.2, "majestic": 1.05},
    },
    {
        "id": "wild_show_stage",
        "name": "Wild showtime",
        "description": "A show stage for loud routines. IMPACT first, CUTE slightly discounted.",
        "bias": {"impact": 1.2, "cute": 0.9},
    },
    {
        "id": "spooky_cute_stage",
        "name": "Spooky-cute stage",
        "description": "Creepy-meets-cute goes down well. Bonus for EERIE and CUTE.",
        "bias": {"eerie": 1.15, "cute": 1.1},
    },
]


@dataclass(frozen=True)
class ContestCatalog:
    """All reference tables the pipeline resolves ids against."""

    monsters: Catalog[MonsterTemplate]
    gambits: Catalog[GambitProfile]
    appeals: Catalog[AppealProfile]
    judges: Catalog[JudgeProfile]
    stages: Catalog[StageProfile]
    monster_appeals: Dict[str, List[str]] = field(default_factory=dict)

    def default_appeal_for(self, monster_id: str) -> Optional[AppealProfile]:
        """First registered appeal for the monster, or None."""
        ids = self.appeal_ids_for(monster_id)
        if not ids:
            return None
        return self.appeals.get(ids[0])

    def appeal_ids_for(self, monster_id: str) -> List[str]:
        return list(self.monster_appeals.get(str(monster_id), []))

    def monsters_by_phase(self) -> Dict[str, List[MonsterTemplate]]:
        """Templates grouped by phase (early/mid/late), catalog-number order."""
        out: Dict[str, List[MonsterTemplate]] = {}
        for phase in ALLOWED_PHASES:
            group = sorted((m for m in self.monsters if m.phase == phase), key=lambda m: m.catalog_no)
            if group:
                out[phase] = group
        return out


def build_catalog(
    *,
    monsters: List[Mapping[str, Any]],
    gambits: List[Mapping[str, Any]],
    appeals: List[Mapping[str, Any]],
    judges: List[Mapping[str, Any]],
    stages: List[Mapping[str, Any]],
    monster_appeals: Optional[Mapping[str, List[str]]] = None,
) -> ContestCatalog:
    """Parse and validate raw rows into a ContestCatalog (raises ValueError)."""
    cat = ContestCatalog(
        monsters=Catalog("monster", [monster_from_mapping(r) for r in monsters]),
        gambits=Catalog("gambit", [gambit_from_mapping(r) for r in gambits]),
        appeals=Catalog("appeal", [appeal_from_mapping(r) for r in appeals]),
        judges=Catalog("judge", [judge_from_mapping(r) for r in judges]),
        stages=Catalog("stage", [stage_from_mapping(r) for r in stages]),
        monster_appeals={str(k): [str(x) for x in v] for k, v in dict(monster_appeals or {}).items()},
    )
    validate_appeal_table(cat.monster_appeals, cat.appeals, cat.monsters)
    return cat


DEFAULT_CATALOG = build_catalog(
    monsters=MONSTER_ROWS,
    gambits=GAMBIT_ROWS,
    appeals=APPEAL_ROWS,
    judges=JUDGE_ROWS,
    stages=STAGE_ROWS,
    monster_appeals=MONSTER_APPEALS,
)
