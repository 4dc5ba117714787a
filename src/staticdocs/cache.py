from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from staticdocs.domain.models import CacheEntry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ContentCache:
    """
    Holds state for the single most recently resolved language.

    Not keyed by path: there is one entry at most, and switching language
    throws it away in one go. No size or time based eviction.
    """
    _entry: Optional[CacheEntry] = None

    @property
    def current_language(self) -> Optional[str]:
        return self._entry.lang if self._entry is not None else None

    def get(self, lang: str) -> Optional[CacheEntry]:
        if self._entry is None or self._entry.lang != lang:
            return None
        return self._entry

    def reset(self, lang: str) -> CacheEntry:
        logger.debug("Resetting content cache: %s -> %s", self.current_language, lang)
        self._entry = CacheEntry(lang=lang)
        return self._entry
