from __future__ import annotations

from typing import Protocol

from staticdocs.domain.models import ResolutionRequest


class LanguageSelector(Protocol):
    """
    Decides which language a request is served in.
    """

    @property
    def default_language(self) -> str: ...

    def resolve_language(self, request: ResolutionRequest) -> str:
        ...
