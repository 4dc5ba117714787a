from __future__ import annotations

from typing import Optional

import pytest

from staticdocs.app.resolver import StaticResolver
from staticdocs.cache import ContentCache
from staticdocs.domain.errors import NotFound
from staticdocs.domain.models import CacheEntry, ResolutionRequest


class FakeLoader:
    """In-memory documents keyed by (root, lang, filename); values may be exceptions to raise."""

    def __init__(self, events: list, files: Optional[dict] = None):
        self.events = events
        self.files = dict(files or {})
        self.calls: list[tuple[str, str, str]] = []

    async def load(self, root: str, lang: str, filename: str) -> str:
        self.calls.append((root, lang, filename))
        self.events.append(("load", filename))
        found = self.files.get((root, lang, filename))
        if found is None:
            raise NotFound(f"{root}/{lang}/{filename}")
        if isinstance(found, Exception):
            raise found
        return found


class FakeSelector:
    def __init__(self, default: str = "en"):
        self.default = default

    @property
    def default_language(self) -> str:
        return self.default

    def resolve_language(self, request: ResolutionRequest) -> str:
        return request.lang or self.default


class FakeNavigator:
    def __init__(self):
        self.calls = 0

    def navigate_to_not_found(self) -> None:
        self.calls += 1


class SpyCache(ContentCache):
    """ContentCache that logs each reset into the shared event list."""

    __slots__ = ("events",)

    def __init__(self, events: list):
        super().__init__()
        self.events = events

    def reset(self, lang: str) -> CacheEntry:
        self.events.append(("reset", lang))
        return super().reset(lang)


@pytest.fixture
def events():
    return []


@pytest.fixture
def loader(events):
    return FakeLoader(events)


@pytest.fixture
def navigator():
    return FakeNavigator()


@pytest.fixture
def cache(events):
    return SpyCache(events)


@pytest.fixture
def resolver(loader, navigator, cache):
    return StaticResolver(loader=loader, selector=FakeSelector(), navigator=navigator, cache=cache)
