from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from staticdocs.domain.schema import DEFAULT_ROOT, META_TOC

Segment = tuple[str, Optional[str]]


# -------------------------
# Input
# -------------------------

@dataclass(frozen=True, slots=True)
class ResolutionRequest:
    """
    A navigational request: route segments in declaration order, the content
    root and the language code the route carries (if any).

    segments look like (("path", "guide"), ("path1", "intro.html")).
    """
    segments: Sequence[Segment] = field(default_factory=tuple)
    root: Optional[str] = None
    lang: Optional[str] = None

    @property
    def source_root(self) -> str:
        return self.root or DEFAULT_ROOT


# -------------------------
# Output
# -------------------------

@dataclass(frozen=True, slots=True)
class ContentResult:
    """
    Resolved static content.

    metadata holds every field extracted from the document comments except the
    reserved toc key, which only ever shows up as the loaded companion text.
    """
    body: str
    path: Optional[str] = None
    toc: Optional[str] = None
    metadata: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> ContentResult:
        return cls(body="")

    @property
    def is_empty(self) -> bool:
        return self.path is None and not self.body

    def to_dict(self) -> dict[str, Any]:
        """Flattened shape: body, path, each metadata field, then toc."""
        out: dict[str, Any] = {"body": self.body}
        if self.path is not None:
            out["path"] = self.path
        for k, v in self.metadata.items():
            if k not in ("body", "path", META_TOC):
                out[k] = v
        if self.toc is not None:
            out[META_TOC] = self.toc
        return out


# -------------------------
# Cache
# -------------------------

@dataclass(slots=True)
class CacheEntry:
    """
    Per-language state kept across resolutions.

    data is free for consumers (e.g. rendered output keyed by source text);
    the whole entry is dropped as soon as another language gets resolved.
    """
    lang: str
    data: dict[str, Any] = field(default_factory=dict)
