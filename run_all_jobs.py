# run_all_jobs.py
"""
run_all_jobs.py

Scrape every configured FF14 job (or a --jobs subset) one after another and
write:

  <output>/<job>_skills.json     one file per successful job
  <output>/all_ff14_skills.json  combined file built from all successes

A job that fails is recorded and skipped; the batch carries on. The process
exits with 1 when any job failed.

Usage:
    python run_all_jobs.py --output data --verbose
    python run_all_jobs.py --jobs paladin,warrior --delay 5000
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import pandas as pd
from tabulate import tabulate

from ff14_jobs import DEFAULT_REGISTRY, JobRegistry
from jobguide_collector import SCRAPER_VERSION, JobSkillsResult, configure_logging, fetch_job_skills
from scrape_errors import ScrapeError
from scrape_jobguide_skills import ScrapeSettings
from skill_normalizer import SkillRecord, utc_now_iso
from skill_store import DEFAULT_OUTPUT_DIR, JsonSkillStore

log = logging.getLogger(__name__)

# -------------------------
# Settings
# -------------------------
DEFAULT_DELAY_MS = 2000


@dataclass(frozen=True)
class BatchOutcome:
    job_name: str
    succeeded: bool
    skills_count: int = 0
    error: Optional[str] = None


@dataclass(frozen=True)
class CombinedDataset:
    results: Tuple[JobSkillsResult, ...]
    scraped_at: str

    @property
    def all_skills(self) -> List[SkillRecord]:
        return [s for r in self.results for s in r.skills]

    @property
    def metadata(self) -> Dict[str, Any]:
        return {
            "total_jobs": len(self.results),
            "total_skills": sum(len(r.skills) for r in self.results),
            "scraped_at": self.scraped_at,
            "scraper_version": SCRAPER_VERSION,
            "jobs": [
                {
                    "job_name": r.job.key,
                    "job_display_name": r.job.display_name,
                    "job_role": r.job.role,
                    "skills_count": len(r.skills),
                }
                for r in self.results
            ],
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": self.metadata,
            "skills_by_job": {r.job_key: r.to_dict() for r in self.results},
            "all_skills": [s.to_dict() for s in self.all_skills],
        }


@dataclass
class BatchReport:
    outcomes: List[BatchOutcome] = field(default_factory=list)
    combined: Optional[CombinedDataset] = None

    @property
    def failed(self) -> List[BatchOutcome]:
        return [o for o in self.outcomes if not o.succeeded]

    @property
    def ok(self) -> bool:
        return not self.failed


def build_combined_dataset(results: Sequence[JobSkillsResult], scraped_at: Optional[str] = None) -> CombinedDataset:
    return CombinedDataset(results=tuple(results), scraped_at=scraped_at or utc_now_iso())


# -------------------------
# Batch
# -------------------------
def run_batch(
    job_keys: Sequence[str],
    delay_ms: int = DEFAULT_DELAY_MS,
    *,
    fetch: Optional[Callable[[str], JobSkillsResult]] = None,
    store: Optional[JsonSkillStore] = None,
    registry: JobRegistry = DEFAULT_REGISTRY,
    settings: Optional[ScrapeSettings] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> BatchReport:
    """
    Fetch each job in order, persist it, and build the combined dataset.

    fetch defaults to fetch_job_skills bound to registry/settings. store may be
    None, in which case nothing is written. A key given twice is fetched once.
    """
    if delay_ms < 0:
        raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")

    job_keys = list(dict.fromkeys(job_keys))

    if fetch is None:
        fetch = partial(fetch_job_skills, registry=registry, settings=settings or ScrapeSettings())

    report = BatchReport()
    results: List[JobSkillsResult] = []

    for i, job_key in enumerate(job_keys):
        if i > 0 and delay_ms:
            log.debug("Waiting %dms before next request...", delay_ms)
            sleep(delay_ms / 1000.0)

        log.info("[%d/%d] Processing %s...", i + 1, len(job_keys), job_key)

        try:
            result = fetch(job_key)
            if store is not None:
                store.save_job(result)
        except Exception as e:
            log.error("Error scraping %s: %s", job_key, e, exc_info=not isinstance(e, ScrapeError))
            report.outcomes.append(BatchOutcome(job_name=job_key, succeeded=False, error=str(e)))
            continue

        results.append(result)
        report.outcomes.append(BatchOutcome(job_name=job_key, succeeded=True, skills_count=len(result.skills)))
        log.info("%s: %d skills scraped", job_key, len(result.skills))

    report.combined = build_combined_dataset(results)

    if results and store is not None:
        try:
            path = store.save_combined(report.combined)
            log.info("Combined skills file created: %s", path)
        except ScrapeError as e:
            log.error("Error creating combined file: %s", e)

    return report


# -------------------------
# Summary
# -------------------------
def print_summary(outcomes: Sequence[BatchOutcome]) -> None:
    ok = [o for o in outcomes if o.succeeded]
    bad = [o for o in outcomes if not o.succeeded]

    print("\n" + "=" * 50)
    print("FF14 Skills Scraping Summary")
    print("=" * 50)
    print(f"Successful: {len(ok)} jobs")
    print(f"Failed: {len(bad)} jobs")
    print(f"Total skills scraped: {sum(o.skills_count for o in ok)}")

    if outcomes:
        df = pd.DataFrame(
            [
                {
                    "job": o.job_name,
                    "status": "ok" if o.succeeded else "FAILED",
                    "skills": o.skills_count if o.succeeded else "",
                    "error": o.error or "",
                }
                for o in outcomes
            ]
        )
        print()
        print(tabulate(df, headers="keys", tablefmt="pretty", showindex=False))

    print("=" * 50)


# -------------------------
# CLI
# -------------------------
def select_jobs(jobs_arg: Optional[str], registry: JobRegistry = DEFAULT_REGISTRY) -> List[str]:
    """
    Empty/None -> every job in registry order.
    Otherwise a comma-separated subset; unknown names are dropped with a warning
    and repeated names are kept once.
    """
    if not jobs_arg or not jobs_arg.strip():
        return registry.keys()

    # keep first occurrence, in the order given
    requested = list(dict.fromkeys(j.strip() for j in jobs_arg.split(",") if j.strip()))
    valid = [j for j in requested if j in registry]
    invalid = [j for j in requested if j not in registry]

    if invalid:
        log.warning("Invalid jobs ignored: %s", ", ".join(invalid))
    if not valid:
        raise ValueError(f"No valid jobs in --jobs {jobs_arg!r}. Available jobs: {', '.join(registry.keys())}")

    return valid


def parse_delay(text: str) -> int:
    try:
        delay_ms = int(str(text).strip())
    except ValueError:
        raise ValueError(f"--delay must be an integer number of ms, got {text!r}") from None
    if delay_ms < 0:
        raise ValueError(f"--delay must be >= 0, got {delay_ms}")
    return delay_ms


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrape skills for all FF14 jobs from the official job guide")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT_DIR, help="output directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    parser.add_argument("-j", "--jobs", default="", help="comma-separated job names (default: all)")
    parser.add_argument("--delay", default=str(DEFAULT_DELAY_MS), help="delay between requests (ms)")
    parser.add_argument("--headed", action="store_true", help="show the browser window")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        jobs = select_jobs(args.jobs)
        delay_ms = parse_delay(args.delay)
    except ValueError as e:
        log.error("Fatal error: %s", e)
        return 1

    log.info("Starting FF14 skills scraper for %d jobs", len(jobs))
    log.info("Jobs to scrape: %s", ", ".join(jobs))
    log.info("Delay between requests: %dms", delay_ms)

    report = run_batch(
        jobs,
        delay_ms,
        store=JsonSkillStore(args.output),
        settings=ScrapeSettings(headless=not args.headed),
    )

    print_summary(report.outcomes)

    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
