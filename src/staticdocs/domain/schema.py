from __future__ import annotations

import re
from typing import Final

DEFAULT_ROOT: Final[str] = "assets/docs"
DEFAULT_LANG: Final[str] = "en"
NOT_FOUND_ROUTE: Final[str] = "/not-found"

# Source documents are always markdown, whatever extension the route carries
DOCUMENT_SUFFIX: Final[str] = ".md"

# Reserved metadata key naming the companion document
META_TOC: Final[str] = "toc"

PATH_PARAM_RE: Final[re.Pattern[str]] = re.compile(r"path\d*")
