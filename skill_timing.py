# skill_timing.py
"""
Timing / level text parsing for job-guide skills.

All times are returned as integers in hundredths of a second (2.5秒 -> 250).
Anything that cannot be parsed becomes 0; a missing level becomes 1.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

INSTANT_MARKER = "Instant"

_SECONDS_RE = re.compile(r"(\d+(?:\.\d+)?)\s*秒")
_LEVEL_RE = re.compile(r"^\s*(?:Lv\.?\s*)?(\d+)")

# Label prefixes used by the combined "detail" text blocks
COOLDOWN_LABEL = "再使用時間"
CAST_LABEL = "詠唱時間"
RECAST_LABEL = "リキャスト"

_LABELLED_RE = {
    label: re.compile(re.escape(label) + r"\s*[:：]?\s*(\d+(?:\.\d+)?)\s*秒")
    for label in (COOLDOWN_LABEL, CAST_LABEL, RECAST_LABEL)
}


@dataclass(frozen=True)
class SkillTiming:
    cast_time: int = 0
    recast_time: int = 0


@dataclass(frozen=True)
class LabelledTiming:
    cooldown: int = 0
    cast: int = 0
    recast: int = 0

    def as_skill_timing(self) -> SkillTiming:
        return SkillTiming(cast_time=self.cast, recast_time=self.recast or self.cooldown)


def _to_hundredths(number: str) -> int:
    whole, _, frac = number.partition(".")
    frac = frac.ljust(3, "0")
    try:
        value = int(whole) * 100 + int(frac[:2])
        # round half up on the exact decimal text, not half to even
        if int(frac[2]) >= 5:
            value += 1
    except ValueError:
        # more digits than int() will convert
        return 0
    return value


def parse_seconds(text: Optional[str]) -> int:
    """'2.5秒' -> 250. Empty, 'Instant' or unmatched text -> 0."""
    if not text:
        return 0
    t = text.strip()
    if not t or t == INSTANT_MARKER:
        return 0
    m = _SECONDS_RE.search(t)
    if not m:
        return 0
    return _to_hundredths(m.group(1))


def parse_skill_timing(cast_text: Optional[str], recast_text: Optional[str]) -> SkillTiming:
    return SkillTiming(cast_time=parse_seconds(cast_text), recast_time=parse_seconds(recast_text))


def has_timing_labels(text: Optional[str]) -> bool:
    return bool(text) and any(label in text for label in _LABELLED_RE)


def parse_labelled_timing(block: Optional[str]) -> LabelledTiming:
    """
    Parse a single text block such as

        "詠唱時間：Instant リキャスト：2.5秒"
        "再使用時間：60秒"

    Each label is matched on its own; a label without a number is 0.
    """
    if not block:
        return LabelledTiming()

    values = {}
    for label, rx in _LABELLED_RE.items():
        m = rx.search(block)
        values[label] = _to_hundredths(m.group(1)) if m else 0

    return LabelledTiming(
        cooldown=values[COOLDOWN_LABEL],
        cast=values[CAST_LABEL],
        recast=values[RECAST_LABEL],
    )


def parse_level(text: Optional[str], default: int = 1) -> int:
    """'Lv15' / 'Lv.15' / '15' -> 15, otherwise default."""
    if not text:
        return default
    m = _LEVEL_RE.match(text)
    if not m:
        # job-guide cells sometimes carry the job name before the level
        m = re.search(r"Lv\.?\s*(\d+)", text)
    if not m:
        return default
    try:
        return int(m.group(1))
    except ValueError:
        return default
