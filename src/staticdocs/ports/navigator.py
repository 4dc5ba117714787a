from __future__ import annotations

from typing import Protocol


class FallbackNavigator(Protocol):
    """
    Sends the consumer somewhere sensible when content can't be resolved.
    Fire-and-forget: nothing it returns is used.
    """

    def navigate_to_not_found(self) -> None:
        ...
