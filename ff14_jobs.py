# ff14_jobs.py
"""
ff14_jobs.py

Static table of FF14 jobs known to the scraper.

Each job maps to:
  - role         one of ROLES (tank / healer / magical_dps / melee_dps / ranged_dps)
  - url_name     path segment on the official job guide
  - display_name Japanese job name as shown on the site

The table is wrapped in a read-only JobRegistry that the collectors receive as an
argument. Run this file directly to print the jobs grouped by role.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping

from tabulate import tabulate

from scrape_errors import UnknownCategoryError

# ----------------------------
# URLs
# ----------------------------
JOBGUIDE_BASE_URL = "https://jp.finalfantasyxiv.com/jobguide"

ROLES = ("tank", "healer", "magical_dps", "melee_dps", "ranged_dps")


@dataclass(frozen=True)
class JobInfo:
    key: str
    role: str
    display_name: str
    url_name: str

    @property
    def source_url(self) -> str:
        return f"{JOBGUIDE_BASE_URL}/{self.url_name}/"


def _job(key: str, role: str, url_name: str, display_name: str) -> JobInfo:
    if role not in ROLES:
        raise ValueError(f"Unknown role {role!r} for job {key!r}")
    return JobInfo(key=key, role=role, display_name=display_name, url_name=url_name)


_JOBS: List[JobInfo] = [
    # Tanks
    _job("paladin", "tank", "paladin", "ナイト"),
    _job("warrior", "tank", "warrior", "戦士"),
    _job("dark_knight", "tank", "darkknight", "暗黒騎士"),
    _job("gunbreaker", "tank", "gunbreaker", "ガンブレイカー"),
    # Healers
    _job("white_mage", "healer", "whitemage", "白魔道士"),
    _job("scholar", "healer", "scholar", "学者"),
    _job("astrologian", "healer", "astrologian", "占星術師"),
    _job("sage", "healer", "sage", "賢者"),
    # Casters
    _job("black_mage", "magical_dps", "blackmage", "黒魔道士"),
    _job("summoner", "magical_dps", "summoner", "召喚士"),
    _job("red_mage", "magical_dps", "redmage", "赤魔道士"),
    _job("blue_mage", "magical_dps", "bluemage", "青魔道士"),
    # Melee
    _job("dragoon", "melee_dps", "dragoon", "竜騎士"),
    _job("monk", "melee_dps", "monk", "モンク"),
    _job("ninja", "melee_dps", "ninja", "忍者"),
    _job("samurai", "melee_dps", "samurai", "侍"),
    _job("reaper", "melee_dps", "reaper", "リーパー"),
    _job("viper", "melee_dps", "viper", "ヴァイパー"),
    # Ranged physical
    _job("bard", "ranged_dps", "bard", "吟遊詩人"),
    _job("machinist", "ranged_dps", "machinist", "機工士"),
    _job("dancer", "ranged_dps", "dancer", "踊り子"),
]


class JobRegistry:
    """Read-only, insertion-ordered lookup of JobInfo by key."""

    def __init__(self, jobs: Iterable[JobInfo]):
        table: Dict[str, JobInfo] = {}
        for job in jobs:
            if job.key in table:
                raise ValueError(f"Duplicate job key: {job.key}")
            table[job.key] = job
        self._jobs: Mapping[str, JobInfo] = MappingProxyType(table)

    def __contains__(self, key: object) -> bool:
        return key in self._jobs

    def __iter__(self) -> Iterator[JobInfo]:
        return iter(self._jobs.values())

    def __len__(self) -> int:
        return len(self._jobs)

    def keys(self) -> List[str]:
        return list(self._jobs)

    def get(self, key: str) -> JobInfo:
        try:
            return self._jobs[key]
        except KeyError:
            raise UnknownCategoryError(key, self._jobs) from None

    def by_role(self) -> Dict[str, List[JobInfo]]:
        groups: Dict[str, List[JobInfo]] = {}
        for job in self._jobs.values():
            groups.setdefault(job.role, []).append(job)
        return groups


DEFAULT_REGISTRY = JobRegistry(_JOBS)


def main() -> None:
    rows = [(j.key, j.display_name, j.role, j.source_url) for j in DEFAULT_REGISTRY]
    print(tabulate(rows, headers=["job", "name", "role", "url"], tablefmt="pretty"))

    print("\nJobs by role:")
    for role, jobs in DEFAULT_REGISTRY.by_role().items():
        names = ", ".join(j.display_name for j in jobs)
        print(f"  - {role}: {len(jobs)} jobs ({names})")

    print(f"\nTotal jobs: {len(DEFAULT_REGISTRY)}")


if __name__ == "__main__":
    main()
