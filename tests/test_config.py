from engine.config import EvaluationConfig, config_from_mapping, config_to_dict, default_config


def test_default_config_matches_start_state():
    cfg = default_config()
    assert cfg.monster_id == "fenrir_adult"
    assert cfg.personality_id == "natural"
    assert cfg.mood_id == "idol"
    assert cfg.gambit_ids == ("none", "none", "none")
    assert cfg.stage_ids == ("standard", "cute_focus_stage", "wild_show_stage")
    assert cfg.judge_ids == ("cute_focus", "wild_focus", "balance_focus")
    assert cfg.appeal_uses == 0


def test_config_from_empty_mapping_is_default():
    assert config_from_mapping(None) == default_config()
    assert config_from_mapping({}) == default_config()


def test_config_from_mapping_normalises_messy_input():
    cfg = config_from_mapping(
        {
            "monster": "jack_o_lantern",
            "personality": " Shy ",
            "gambits": "cute_focus, wild_show",
            "judges": ["dark_mystic"],
            "uses": "3",
        }
    )
    assert cfg.monster_id == "jack_o_lantern"
    assert cfg.personality_id == "shy"
    assert cfg.gambit_ids == ("cute_focus", "wild_show", "none")
    assert cfg.judge_ids == ("dark_mystic", "wild_focus", "balance_focus")
    assert cfg.appeal_uses == 3


def test_bad_appeal_uses_never_raise():
    assert config_from_mapping({"appeal_uses": "lots"}).appeal_uses == 0
    assert config_from_mapping({"appeal_uses": -4}).appeal_uses == 0


def test_config_round_trip_through_dict():
    cfg = EvaluationConfig(monster_id="tutor_dragon", stage_ids=("standard",), judge_ids=("dark_mystic",), appeal_uses=1)
    assert config_from_mapping(config_to_dict(cfg)).stage_ids[0] == "standard"
    assert config_to_dict(cfg)["gambit_ids"] == ["none", "none", "none"]


def test_overflowing_appeal_uses_fall_back_to_zero():
    assert config_from_mapping({"appeal_uses": "inf"}).appeal_uses == 0
    assert config_from_mapping({"appeal_uses": float("-inf")}).appeal_uses == 0
    assert config_from_mapping({"appeal_uses": "nan"}).appeal_uses == 0


def test_non_list_slot_values_keep_defaults():
    base = default_config()
    cfg = config_from_mapping({"gambits": 5, "stages": 1.5, "judges": {"a": 1}})
    assert cfg.gambit_ids == base.gambit_ids
    assert cfg.stage_ids == base.stage_ids
    assert cfg.judge_ids == base.judge_ids
