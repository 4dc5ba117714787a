from __future__ import annotations

from dataclasses import dataclass, field

from staticdocs.domain.models import ResolutionRequest
from staticdocs.domain.schema import DEFAULT_LANG


@dataclass(frozen=True, slots=True)
class RouteLanguageSelector:
    """
    Serves the language the route asks for when it is supported, the default
    language otherwise. An empty supported set accepts any language.
    """
    default: str = DEFAULT_LANG
    supported: frozenset[str] = field(default_factory=frozenset)

    @property
    def default_language(self) -> str:
        return self.default

    def resolve_language(self, request: ResolutionRequest) -> str:
        lang = (request.lang or "").strip().lower()
        if not lang:
            return self.default
        if self.supported and lang not in self.supported:
            return self.default
        return lang
