import pytest

from content.catalog import (
    APPEAL_ROWS,
    DEFAULT_CATALOG,
    GAMBIT_ROWS,
    JUDGE_ROWS,
    MONSTER_ROWS,
    STAGE_ROWS,
    build_catalog,
)
from content.schemas import (
    Catalog,
    appeal_from_mapping,
    gambit_from_mapping,
    judge_from_mapping,
    monster_from_mapping,
    normalize_stat_map,
    stage_from_mapping,
)
from core.state import StatVector


def test_default_catalog_sizes():
    assert len(DEFAULT_CATALOG.monsters) == 25
    assert len(DEFAULT_CATALOG.gambits) == 9
    assert len(DEFAULT_CATALOG.appeals) == 6
    assert len(DEFAULT_CATALOG.judges) == 4
    assert len(DEFAULT_CATALOG.stages) == 4


def test_lookup_is_total():
    assert DEFAULT_CATALOG.monsters.get("fenrir_adult").base_stats == StatVector(48, 42, 56, 54)
    assert DEFAULT_CATALOG.judges.get("no_such_judge") is None
    assert DEFAULT_CATALOG.stages.get(None) is None
    assert DEFAULT_CATALOG.gambits.resolve_all(["none", "bogus"])[1] is None


def test_default_appeals():
    assert DEFAULT_CATALOG.default_appeal_for("fenrir_adult").id == "cool_howl"
    assert DEFAULT_CATALOG.default_appeal_for("jack_o_lantern").id == "weird_dance"
    assert DEFAULT_CATALOG.default_appeal_for("muse_idol_fairy") is None
    assert DEFAULT_CATALOG.appeal_ids_for("muse_idol_fairy") == []


def test_monsters_grouped_by_phase_in_catalog_order():
    groups = DEFAULT_CATALOG.monsters_by_phase()
    assert list(groups) == ["early", "mid", "late"]
    assert [m.catalog_no for m in groups["early"]] == list(range(1, 11))
    assert all(m.stamina_max == 5 for m in groups["late"])


def test_none_gambit_has_no_multipliers():
    assert DEFAULT_CATALOG.gambits.get("none").multipliers == {}


def test_normalize_stat_map():
    assert normalize_stat_map({" Cute ": "1.2", "impact": None}) == {"cute": 1.2}
    assert normalize_stat_map(None) == {}


@pytest.mark.parametrize(
    "parser,row",
    [
        (gambit_from_mapping, {"id": "g", "multipliers": {"charm": 1.2}}),
        (gambit_from_mapping, {"id": "g", "multipliers": {"cute": 0}}),
        (appeal_from_mapping, {"id": "a", "multipliers": {"cute": 0.8}}),
        (judge_from_mapping, {"id": "j", "weights": {"cute": -1}}),
        (stage_from_mapping, {"id": "", "bias": {}}),
        (monster_from_mapping, {"id": "m", "archetype": "star", "phase": "final", "base_stats": {}}),
        (monster_from_mapping, {"id": "m", "archetype": "villain", "base_stats": {}}),
    ],
)
def test_invalid_rows_raise(parser, row):
    with pytest.raises(ValueError):
        parser(row)


def test_duplicate_ids_raise():
    g = gambit_from_mapping({"id": "g", "multipliers": {}})
    with pytest.raises(ValueError):
        Catalog("gambit", [g, g])


def test_appeal_table_must_point_at_known_ids():
    with pytest.raises(ValueError):
        build_catalog(
            monsters=MONSTER_ROWS,
            gambits=GAMBIT_ROWS,
            appeals=APPEAL_ROWS,
            judges=JUDGE_ROWS,
            stages=STAGE_ROWS,
            monster_appeals={"fenrir_adult": ["moonwalk"]},
        )
    with pytest.raises(ValueError):
        build_catalog(
            monsters=MONSTER_ROWS,
            gambits=GAMBIT_ROWS,
            appeals=APPEAL_ROWS,
            judges=JUDGE_ROWS,
            stages=STAGE_ROWS,
            monster_appeals={"ghost": ["cool_howl"]},
        )
