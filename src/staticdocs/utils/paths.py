from __future__ import annotations

import re
from typing import Iterable, Optional

from staticdocs.domain.errors import InvalidRequest
from staticdocs.domain.models import Segment
from staticdocs.domain.schema import DOCUMENT_SUFFIX, PATH_PARAM_RE

_EXTENSION_RE = re.compile(r"\.\w+$")


def assemble_path(segments: Iterable[Segment]) -> str:
    """
    Join the values of the path, path1, path2... route params with '/'.

    Params keep the order the route declared them in. Anything not named like
    a path param is ignored; a path param without a value is a broken route.
    """
    parts: list[str] = []
    for key, value in segments:
        if not PATH_PARAM_RE.fullmatch(key):
            continue
        if value is None:
            raise InvalidRequest(f"Route param {key!r} has no value")
        parts.append(value)
    return "/".join(parts)


def document_filename(path: str, suffix: str = DOCUMENT_SUFFIX) -> str:
    """
    'guide/intro.html' -> 'guide/intro.md'
    """
    return _EXTENSION_RE.sub("", path) + suffix


def segments_from_path(path: Optional[str]) -> tuple[Segment, ...]:
    """
    Split a slash separated path into path, path1, path2... segments, the way a
    router with a fixed number of path params would hand them over.
    """
    if not path:
        return ()
    parts = [p for p in path.strip("/").split("/") if p]
    return tuple(
        ("path" if i == 0 else f"path{i}", part)
        for i, part in enumerate(parts)
    )
