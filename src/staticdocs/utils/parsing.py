from __future__ import annotations

import re
from typing import Optional

# <!-- ... --> blocks, non-greedy so each one stops at its own closing delimiter
_COMMENT_RE = re.compile(r"<!--(.*?)-->", re.DOTALL)
# key: value pairs inside a comment; the value may be empty
_PAIR_RE = re.compile(r"\s*(\w+):\s*([\w.-]*)\s*")


def extract_metadata(source: Optional[str]) -> dict[str, str]:
    """
    Collect the key: value pairs embedded in HTML comments of a document.

    Comments are scanned in document order and pairs in order of appearance,
    so a repeated key keeps its last value. Anything that doesn't look like a
    pair is skipped; this never raises.

    Example:
        <!-- toc: nav.md
             ref: v1 -->
        -> {"toc": "nav.md", "ref": "v1"}
    """
    out: dict[str, str] = {}
    if not source:
        return out

    # finditer always moves past empty matches, no manual cursor needed
    for comment in _COMMENT_RE.finditer(source):
        for pair in _PAIR_RE.finditer(comment.group(1)):
            out[pair.group(1)] = pair.group(2)

    return out
