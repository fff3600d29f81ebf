# skill_normalizer.py
from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ff14_jobs import JobInfo
from jobguide_extract import RawSkill
from skill_classifier import SkillSignals, SkillType, classify
from skill_timing import SkillTiming, has_timing_labels, parse_labelled_timing, parse_level, parse_skill_timing


@dataclass(frozen=True)
class SkillRecord:
    id: str
    name: str
    description: str
    level: int
    job_role: str
    skill_type: SkillType
    classification: str
    cast_time: int
    recast_time: int
    cost: str
    icon_url: str
    source_url: str
    scraped_at: str

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["skill_type"] = self.skill_type.value
        return d


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def clean_classification(text: str) -> str:
    return re.sub(r"\s+", "", text or "")


def _timing_for(raw: RawSkill) -> SkillTiming:
    if raw.cast_time_text or raw.recast_time_text:
        return parse_skill_timing(raw.cast_time_text, raw.recast_time_text)
    if has_timing_labels(raw.free_text):
        return parse_labelled_timing(raw.free_text).as_skill_timing()
    return SkillTiming()


def normalize_skill(
    raw: RawSkill,
    index: int,
    job: JobInfo,
    source_url: str,
    scraped_at: Optional[str] = None,
) -> SkillRecord:
    """
    Turn one extracted candidate into a SkillRecord.

    index is the 0-based position of the candidate on the page; the record id
    is 1-based ("paladin_skill_1").
    """
    classification = clean_classification(raw.classification_text)
    timing = _timing_for(raw)

    skill_type = classify(
        SkillSignals(
            name=raw.name,
            classification_text=classification,
            icon_url=raw.icon_url,
            free_text=raw.free_text,
        )
    )

    return SkillRecord(
        id=f"{job.key}_skill_{index + 1}",
        name=raw.name,
        description=raw.description,
        level=parse_level(raw.level_text),
        job_role=job.role,
        skill_type=skill_type,
        classification=classification,
        cast_time=timing.cast_time,
        recast_time=timing.recast_time,
        cost=raw.cost_text,
        icon_url=raw.icon_url,
        source_url=source_url,
        scraped_at=scraped_at or utc_now_iso(),
    )
