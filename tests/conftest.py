"""
Shared fixtures: HTML pages on disk and fake browser / store collaborators.
"""
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class FakePage:
    def __init__(self, url, html, fail_on_content=None):
        self.url = url
        self.html = html
        self.fail_on_content = fail_on_content
        self.settled_ms = None
        self.closed = False

    def settle(self, ms):
        self.settled_ms = ms

    def content(self):
        if self.fail_on_content is not None:
            raise self.fail_on_content
        return self.html

    def close(self):
        self.closed = True


class FakeNavigator:
    """Serves fixture HTML per url; an Exception value is raised on navigate."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []
        self.opened = []

    def navigate(self, url, timeout_ms):
        self.calls.append((url, timeout_ms))
        value = self.pages[url]
        if isinstance(value, Exception):
            raise value
        page = value if isinstance(value, FakePage) else FakePage(url, value)
        self.opened.append(page)
        return page


@pytest.fixture
def paladin_html():
    return load_fixture("paladin_table.html")


@pytest.fixture
def icons_html():
    return load_fixture("skill_icons.html")


@pytest.fixture
def blocks_html():
    return load_fixture("class_blocks.html")
