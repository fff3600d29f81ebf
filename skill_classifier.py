# skill_classifier.py
"""
Skill type classification.

Two strategies share one interface:

  ClassificationTextClassifier
      used when the extractor found a classification cell
      ("ウェポンスキル", "魔法", "アビリティ", "特性")

  IconTextClassifier
      used when only an icon url and the free text of the skill are available

Both apply the same priority order and fall back to SkillType.ABILITY.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple


class SkillType(str, Enum):
    WEAPONSKILL = "weaponskill"
    SPELL = "spell"
    ABILITY = "ability"
    TRAIT = "trait"
    LIMIT_BREAK = "limit_break"


# Priority order matters: first hit wins.
CLASSIFICATION_MARKERS: Tuple[Tuple[SkillType, Tuple[str, ...]], ...] = (
    (SkillType.WEAPONSKILL, ("ウェポンスキル",)),
    (SkillType.SPELL, ("魔法",)),
    (SkillType.ABILITY, ("アビリティ",)),
    (SkillType.TRAIT, ("特性",)),
)

# Icon paths on the job guide use latin folder / file names.
ICON_MARKERS: Tuple[Tuple[SkillType, Tuple[str, ...]], ...] = (
    (SkillType.WEAPONSKILL, ("ウェポンスキル", "weaponskill")),
    (SkillType.SPELL, ("魔法", "spell", "magic")),
    (SkillType.ABILITY, ("アビリティ", "ability")),
    (SkillType.TRAIT, ("特性", "trait")),
)

LIMIT_BREAK_MARKERS = ("リミット", "limit")


@dataclass(frozen=True)
class SkillSignals:
    name: str = ""
    classification_text: str = ""
    icon_url: str = ""
    free_text: str = ""


def _contains_any(haystacks: Iterable[Optional[str]], needles: Iterable[str]) -> bool:
    needles = tuple(needles)
    return any(n in h for h in haystacks if h for n in needles)


def _is_limit_break(name: str) -> bool:
    return _contains_any([name], LIMIT_BREAK_MARKERS)


class SkillClassifier:
    markers: Tuple[Tuple[SkillType, Tuple[str, ...]], ...] = ()

    def texts(self, signals: SkillSignals) -> Tuple[str, ...]:
        raise NotImplementedError

    def classify(self, signals: SkillSignals) -> SkillType:
        texts = self.texts(signals)
        for skill_type, needles in self.markers:
            if _contains_any(texts, needles):
                return skill_type

        if _is_limit_break(signals.name):
            return SkillType.LIMIT_BREAK

        return SkillType.ABILITY


class ClassificationTextClassifier(SkillClassifier):
    markers = CLASSIFICATION_MARKERS

    def texts(self, signals: SkillSignals) -> Tuple[str, ...]:
        return (signals.classification_text,)


class IconTextClassifier(SkillClassifier):
    markers = ICON_MARKERS

    def texts(self, signals: SkillSignals) -> Tuple[str, ...]:
        return (signals.icon_url, signals.free_text)


_BY_CLASSIFICATION = ClassificationTextClassifier()
_BY_ICON_TEXT = IconTextClassifier()


def select_classifier(signals: SkillSignals) -> SkillClassifier:
    if signals.classification_text:
        return _BY_CLASSIFICATION
    return _BY_ICON_TEXT


def classify(signals: SkillSignals) -> SkillType:
    return select_classifier(signals).classify(signals)
