# jobguide_extract.py
"""
jobguide_extract.py

Pull raw skill fields out of a rendered job-guide page.

Two strategies, tried in order:

1) TableRowExtractor
   The job guide renders PvE actions as table rows (tr[id*="pve_action"]) with
   one <td> per field: skill / jobclass / classification / cast / recast / cost
   and the description in the last cell.

2) SkillIconExtractor
   Older / alternate layouts only expose skill icons (.job__skill_icon with a
   data-tooltip name and an href pointing to a detail block), or generic
   "skill"/"action" blocks. Here there is no classification cell, so the
   classifier works from icon url + free text instead.

The second strategy only runs when the first yields nothing.

Every field is best effort: a missing sub-element gives "" and the candidate is
kept. Candidates without a name are dropped.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from typing import Callable, Iterator, List, Optional, Sequence, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from scrape_errors import ExtractionFieldError

log = logging.getLogger(__name__)

Document = Union[str, BeautifulSoup]

# ----------------------------
# Selectors
# ----------------------------
TABLE_ROW_SELECTOR = 'tr[id*="pve_action"]'

SKILL_ICON_SELECTOR = ".job__skill_icon"

# Class-name patterns seen on the job guide over time
SKILL_BLOCK_SELECTORS = (
    ".job__skill_detail",
    ".job_skill_detail",
    ".skill_detail",
    ".job-skill",
    ".skill-item",
    ".action-detail",
    ".action-item",
)

_LEVEL_IN_TEXT_RE = re.compile(r"Lv\.?\s*\d+")


@dataclass(frozen=True)
class RawSkill:
    name: str
    description: str = ""
    level_text: str = ""
    classification_text: str = ""
    cast_time_text: str = ""
    recast_time_text: str = ""
    cost_text: str = ""
    icon_url: str = ""
    free_text: str = ""
    job_role: str = ""
    job_key: str = ""


# --------------------------------------------------------------------------------------
# Field helpers
# --------------------------------------------------------------------------------------
def _normalise_text(s: str) -> str:
    return " ".join((s or "").split()).strip()


def _text(el: Tag) -> str:
    return _normalise_text(el.get_text(" ", strip=True))


def _select_one(el: Tag, selector: str, field: str) -> Tag:
    found = el.select_one(selector)
    if found is None:
        raise ExtractionFieldError(field, selector)
    return found


def _field(el: Tag, selector: str, field: str, read: Callable[[Tag], str] = _text) -> str:
    try:
        return read(_select_one(el, selector, field))
    except ExtractionFieldError as e:
        log.debug("%s", e)
        return ""


def _img_src(base_url: str) -> Callable[[Tag], str]:
    def read(img: Tag) -> str:
        src = (img.get("src") or img.get("data-src") or "").strip()
        return urljoin(base_url, src) if src and base_url else src

    return read


def _last_text_cell(cells: Sequence[Tag]) -> str:
    for cell in reversed(cells):
        t = _text(cell)
        if t:
            return t
    return ""


def _as_soup(document: Document) -> BeautifulSoup:
    if isinstance(document, BeautifulSoup):
        return document
    return BeautifulSoup(document or "", "html.parser")


# --------------------------------------------------------------------------------------
# Strategies
# --------------------------------------------------------------------------------------
class SkillExtractor:
    name = "base"

    def candidates(self, soup: BeautifulSoup) -> List[Tag]:
        raise NotImplementedError

    def read(self, el: Tag, soup: BeautifulSoup, base_url: str) -> RawSkill:
        raise NotImplementedError

    def extract(self, soup: BeautifulSoup, job_role: str, job_key: str, *, base_url: str = "") -> Iterator[RawSkill]:
        for el in self.candidates(soup):
            raw = self.read(el, soup, base_url)
            if not raw.name:
                continue
            yield replace(raw, job_role=job_role, job_key=job_key)


class TableRowExtractor(SkillExtractor):
    name = "table-rows"

    def candidates(self, soup: BeautifulSoup) -> List[Tag]:
        return soup.select(TABLE_ROW_SELECTOR)

    def read(self, el: Tag, soup: BeautifulSoup, base_url: str) -> RawSkill:
        return RawSkill(
            name=_field(el, "td.skill strong", "name"),
            description=_last_text_cell(el.find_all("td")),
            level_text=_field(el, "td.jobclass p", "level"),
            classification_text=_field(el, "td.classification", "classification"),
            cast_time_text=_field(el, "td.cast", "cast"),
            recast_time_text=_field(el, "td.recast", "recast"),
            cost_text=_field(el, "td.cost", "cost"),
            icon_url=_field(el, "td.skill img", "icon", read=_img_src(base_url)),
            free_text=_text(el),
        )


class SkillIconExtractor(SkillExtractor):
    name = "skill-icons"

    def candidates(self, soup: BeautifulSoup) -> List[Tag]:
        icons = soup.select(SKILL_ICON_SELECTOR)
        if icons:
            return icons
        blocks = soup.select(", ".join(SKILL_BLOCK_SELECTORS))
        # outermost matches only; a block nested in another block is the same skill
        matched = {id(b) for b in blocks}
        return [b for b in blocks if not any(id(p) in matched for p in b.parents)]

    def _detail_for(self, el: Tag, soup: BeautifulSoup) -> Tag:
        href = (el.get("href") or "").strip()
        if href.startswith("#") and len(href) > 1:
            target = soup.find(id=href[1:])
            if target is not None:
                return target
        return el

    def _name(self, el: Tag, detail: Tag) -> str:
        tooltip = _normalise_text(el.get("data-tooltip") or "")
        if tooltip:
            return tooltip
        for scope in (detail, el):
            for selector in ('[class*="name"]', "strong", "h3", "h4"):
                name = _field(scope, selector, "name")
                if name:
                    return name
        img = el.find("img")
        return _normalise_text(img.get("alt") or "") if img is not None else ""

    def read(self, el: Tag, soup: BeautifulSoup, base_url: str) -> RawSkill:
        detail = self._detail_for(el, soup)
        free_text = _text(detail)

        description = _field(detail, '[class*="desc"]', "description")
        if not description:
            description = _last_text_cell(detail.find_all(["p", "td"]))

        level_text = _field(detail, '[class*="level"], [class*="jobclass"]', "level")
        if not level_text:
            m = _LEVEL_IN_TEXT_RE.search(free_text)
            level_text = m.group(0) if m else ""

        icon_url = _field(el, "img", "icon", read=_img_src(base_url))
        if not icon_url and detail is not el:
            icon_url = _field(detail, "img", "icon", read=_img_src(base_url))

        return RawSkill(
            name=self._name(el, detail),
            description=description,
            level_text=level_text,
            classification_text=_field(detail, '[class*="classification"]', "classification"),
            cast_time_text=_field(detail, '[class*="cast"]:not([class*="recast"])', "cast"),
            recast_time_text=_field(detail, '[class*="recast"]', "recast"),
            cost_text=_field(detail, '[class*="cost"]', "cost"),
            icon_url=icon_url,
            free_text=free_text,
        )


EXTRACTORS: Sequence[SkillExtractor] = (TableRowExtractor(), SkillIconExtractor())


def extract_candidates(
    document: Document,
    job_role: str,
    job_key: str,
    *,
    base_url: str = "",
    extractors: Optional[Sequence[SkillExtractor]] = None,
) -> Iterator[RawSkill]:
    """
    Yield RawSkill entries from a rendered page.

    Single pass: the first strategy that produces at least one named candidate
    wins; the rest are not consulted.
    """
    soup = _as_soup(document)

    for extractor in extractors or EXTRACTORS:
        it = extractor.extract(soup, job_role, job_key, base_url=base_url)
        first = next(it, None)
        if first is None:
            log.debug("%s: no candidates via %s", job_key, extractor.name)
            continue

        log.debug("%s: extracting via %s", job_key, extractor.name)
        yield first
        yield from it
        return

    log.warning("%s: no skill elements found on page", job_key)
