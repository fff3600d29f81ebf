# scrape_errors.py
from __future__ import annotations


class ScrapeError(Exception):
    """Base class for everything the job-guide scraper raises on purpose."""


class UnknownCategoryError(ScrapeError, KeyError):
    """Job key is not present in the job registry."""

    def __init__(self, job_key: str, available=()):
        self.job_key = job_key
        self.available = list(available)
        msg = f"Unknown job: {job_key}."
        if self.available:
            msg += f" Available jobs: {', '.join(self.available)}"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class NavigationError(ScrapeError):
    """The browser could not load or render a job page."""

    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"{reason} ({url})")


class NavigationTimeoutError(NavigationError):
    """The rendered page did not settle within the allotted wait."""


class ExtractionFieldError(ScrapeError):
    """A single sub-field of a candidate element could not be read."""

    def __init__(self, field: str, selector: str):
        self.field = field
        self.selector = selector
        super().__init__(f"field '{field}' not found via {selector!r}")


class PersistenceError(ScrapeError):
    """Writing a JSON output file failed."""

    def __init__(self, path, cause: Exception):
        self.path = path
        super().__init__(f"Could not write {path}: {cause}")
