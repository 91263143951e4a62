"""
core.personality
Personality (up/down stat pair) and mood specifications.

Kept in core so balancing lives in one place, but UI can still display labels.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .state import STAT_KEYS, StatVector, round_half_up


PERSONALITY_UP = 1.1
PERSONALITY_DOWN = 0.9

NEUTRAL_PERSONALITY = "natural"


@dataclass(frozen=True)
class PersonalitySpec:
    key: str
    label: str
    up: Optional[str] = None
    down: Optional[str] = None

    @property
    def neutral(self) -> bool:
        return self.up is None and self.down is None


@dataclass(frozen=True)
class MoodSpec:
    key: str
    label: str
    flavors: List[str] = field(default_factory=list)


DEFAULT_PERSONALITIES: Dict[str, PersonalitySpec] = {
    "natural": PersonalitySpec(key="natural", label="Natural"),
    "daring": PersonalitySpec(key="daring", label="Daring", up="impact", down="cute"),
    "shy": PersonalitySpec(key="shy", label="Shy", up="eerie", down="impact"),
    "noble": PersonalitySpec(key="noble", label="Noble", up="majestic", down="impact"),
    "radiant": PersonalitySpec(key="radiant", label="Radiant", up="majestic", down="eerie"),
    "cheerful": PersonalitySpec(key="cheerful", label="Cheerful", up="cute", down="eerie"),
    "gloomy": PersonalitySpec(key="gloomy", label="Gloomy", up="eerie", down="cute"),
    "fierce": PersonalitySpec(key="fierce", label="Fierce", up="impact", down="majestic"),
    "fluffy": PersonalitySpec(key="fluffy", label="Fluffy", up="cute", down="impact"),
}


DEFAULT_MOODS: Dict[str, MoodSpec] = {
    "idol": MoodSpec("idol", "Idol", ["Classic idol", "Second-string idol", "Underdog heroine"]),
    "elegance": MoodSpec(
        "elegance",
        "Elegance",
        ["Leading man", "Cool beauty", "Mode", "Stylish", "High fashion"],
    ),
    "mysterious": MoodSpec("mysterious", "Mysterious", ["Bewitching", "Artistic", "Yandere"]),
    "wild": MoodSpec("wild", "Wild", ["Full of pep", "Child of nature", "Rowdy"]),
    "trickster": MoodSpec("trickster", "Trickster", ["Little devil", "Prankster"]),
    "heartful": MoodSpec("heartful", "Heartful", ["Easygoing", "Gentle", "Sentimental"]),
}

DEFAULT_MOOD = "idol"


def validate_personality(p: PersonalitySpec) -> None:
    for k in (p.up, p.down):
        if k is not None and k not in STAT_KEYS:
            raise ValueError(f"personality {p.key}: unknown stat {k!r}")
    if p.up is not None and p.up == p.down:
        raise ValueError(f"personality {p.key}: up and down must differ")


def get_personality(key: Optional[str]) -> Optional[PersonalitySpec]:
    """Total lookup: unknown keys give None (callers treat it as neutral)."""
    if key is None:
        return None
    return DEFAULT_PERSONALITIES.get(str(key))


def get_mood(key: Optional[str]) -> Optional[MoodSpec]:
    if key is None:
        return None
    return DEFAULT_MOODS.get(str(key))


def apply_personality(stats: StatVector, personality: Union[PersonalitySpec, str, None]) -> StatVector:
    """Apply the personality's up (x1.1) / down (x0.9) pair (pure function)."""
    spec = personality if isinstance(personality, PersonalitySpec) else get_personality(personality)
    values = {k: stats.get(k) for k in STAT_KEYS}
    if spec is not None:
        if spec.up:
            values[spec.up] = round_half_up(stats.get(spec.up) * PERSONALITY_UP)
        if spec.down:
            values[spec.down] = round_half_up(stats.get(spec.down) * PERSONALITY_DOWN)
    return StatVector(**values)


for _p in DEFAULT_PERSONALITIES.values():
    validate_personality(_p)
