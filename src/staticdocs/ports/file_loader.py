from __future__ import annotations

from typing import Protocol


class FileLoader(Protocol):
    """
    Fetches the raw text of a document stored under root/lang/filename.

    Raises NotFound when the document is absent and TransportError for any
    other retrieval failure. Timeouts are the loader's business.
    """

    async def load(self, root: str, lang: str, filename: str) -> str:
        ...
