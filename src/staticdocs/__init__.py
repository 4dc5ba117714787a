from staticdocs.app.resolver import StaticResolver
from staticdocs.domain.models import CacheEntry, ContentResult, ResolutionRequest

__all__ = [
    "CacheEntry",
    "ContentResult",
    "ResolutionRequest",
    "StaticResolver",
]
