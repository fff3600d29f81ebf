# jobguide_collector.py
"""
jobguide_collector.py

Fetch the PvE skill list of one FF14 job from the official Japanese job guide.

Flow for one job:
  registry lookup -> render page (network idle + settle) -> extract candidates
  -> normalise each candidate in page order -> JobSkillsResult

One attempt only. Whatever goes wrong propagates to the caller; the rendered
page is closed either way.

Usage:
    python jobguide_collector.py --job paladin --output data --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ff14_jobs import DEFAULT_REGISTRY, JobInfo, JobRegistry
from jobguide_extract import extract_candidates
from scrape_jobguide_skills import DEFAULT_SETTINGS, PlaywrightNavigator, ScrapeSettings
from skill_normalizer import SkillRecord, normalize_skill, utc_now_iso
from skill_store import DEFAULT_OUTPUT_DIR, JsonSkillStore

log = logging.getLogger(__name__)

SCRAPER_VERSION = "1.0.0"


@dataclass(frozen=True)
class JobSkillsResult:
    job: JobInfo
    source_url: str
    scraped_at: str
    skills: Tuple[SkillRecord, ...] = field(default_factory=tuple)

    @property
    def job_key(self) -> str:
        return self.job.key

    @property
    def metadata(self) -> Dict[str, Any]:
        return {
            "job_name": self.job.key,
            "job_display_name": self.job.display_name,
            "job_role": self.job.role,
            "source_url": self.source_url,
            "scraped_at": self.scraped_at,
            "scraper_version": SCRAPER_VERSION,
            "total_skills": len(self.skills),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": self.metadata,
            "skills": [s.to_dict() for s in self.skills],
        }


def fetch_job_skills(
    job_key: str,
    *,
    registry: JobRegistry = DEFAULT_REGISTRY,
    navigator=None,
    settings: ScrapeSettings = DEFAULT_SETTINGS,
) -> JobSkillsResult:
    """
    Render and parse one job page.

    navigator is anything with navigate(url, timeout_ms) returning a page with
    settle(ms), content() and close(); defaults to a headless PlaywrightNavigator.
    Raises UnknownCategoryError for keys missing from the registry.
    """
    job = registry.get(job_key)
    url = job.source_url
    navigator = navigator or PlaywrightNavigator(settings)

    log.info("Scraping %s (%s) from %s", job.key, job.display_name, url)

    page = navigator.navigate(url, settings.timeout_ms)
    try:
        page.settle(settings.settle_ms)
        html = page.content()
    finally:
        page.close()

    scraped_at = utc_now_iso()
    skills: List[SkillRecord] = []
    for i, raw in enumerate(extract_candidates(html, job.role, job.key, base_url=url)):
        skills.append(normalize_skill(raw, i, job, url, scraped_at=scraped_at))

    log.info("Found %d skills for %s", len(skills), job.display_name)

    return JobSkillsResult(job=job, source_url=url, scraped_at=scraped_at, skills=tuple(skills))


# --------------------------------------------------------------------------------------
# CLI
# --------------------------------------------------------------------------------------
def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrape one FF14 job's skills from the official job guide")
    parser.add_argument("-j", "--job", default="paladin", help="job key (default: paladin)")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT_DIR, help="output directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    parser.add_argument("--headed", action="store_true", help="show the browser window")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    settings = ScrapeSettings(headless=not args.headed)
    store = JsonSkillStore(args.output)

    try:
        result = fetch_job_skills(args.job, settings=settings)
        path = store.save_job(result)
    except Exception as e:
        log.error("Error: %s", e, exc_info=args.verbose)
        return 1

    print(f"Scraped {len(result.skills)} skills for {args.job}")
    print(f"Output file: {path}")

    if args.verbose:
        print("\nScraped skills:")
        for i, s in enumerate(result.skills, 1):
            print(f"  {i:02d}. {s.name} (Lv.{s.level}, {s.skill_type.value})")

    return 0


if __name__ == "__main__":
    sys.exit(main())
