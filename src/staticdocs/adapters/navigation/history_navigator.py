from __future__ import annotations

import logging
from dataclasses import dataclass, field

from staticdocs.domain.schema import NOT_FOUND_ROUTE

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HistoryNavigator:
    """
    Records redirects instead of performing them. The app layer looks at
    `history` to find out where the consumer should end up.
    """
    not_found_route: str = NOT_FOUND_ROUTE
    history: list[str] = field(default_factory=list)

    @property
    def current(self) -> str | None:
        return self.history[-1] if self.history else None

    def navigate_to_not_found(self) -> None:
        logger.info("Redirecting to %s", self.not_found_route)
        self.history.append(self.not_found_route)
