from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from staticdocs.domain.errors import NotFound, TransportError

logger = logging.getLogger(__name__)


def _looks_binary(data: bytes) -> bool:
    """
    NUL bytes, or more than 2% control bytes in the first 4k, means binary.
    """
    if not data:
        return False
    if b"\x00" in data:
        return True
    sample = data[:4096]
    control = sum(1 for b in sample if b < 9 or (13 < b < 32))
    return control / len(sample) > 0.02


@dataclass(frozen=True, slots=True)
class FilesystemFileLoader:
    """
    Loads documents from base_dir/root/lang/filename.

    - Reads happen in a worker thread so the event loop keeps going.
    - utf-8 first, latin-1 (with replacement) as fallback.
    - Refuses anything resolving outside base_dir.
    """
    base_dir: Path
    max_bytes: int = 2_000_000  # 2MB
    prefer_encoding: str = "utf-8"
    fallback_encoding: str = "latin-1"

    async def load(self, root: str, lang: str, filename: str) -> str:
        return await asyncio.to_thread(self._read, root, lang, filename)

    def _locate(self, root: str, lang: str, filename: str) -> Path:
        base = self.base_dir.resolve()
        try:
            path = (base / root / lang / filename).resolve()
        except (OSError, ValueError) as e:
            # e.g. an embedded NUL byte in a route segment
            raise NotFound(f"Invalid document path {root}/{lang}/{filename!r}: {e}") from e
        if not path.is_relative_to(base):
            raise NotFound(f"{root}/{lang}/{filename} is outside {base}")
        return path

    def _read(self, root: str, lang: str, filename: str) -> str:
        path = self._locate(root, lang, filename)
        logger.debug("Reading %s", path)

        try:
            is_file = path.is_file()
        except (OSError, ValueError) as e:
            raise TransportError(f"Unable to stat {path}: {e}") from e
        if not is_file:
            raise NotFound(f"No such document: {path}")

        try:
            if path.stat().st_size > self.max_bytes:
                raise TransportError(f"{path} exceeds {self.max_bytes} bytes")
            data = path.read_bytes()
        except OSError as e:
            raise TransportError(f"Unable to read {path}: {e}") from e

        if _looks_binary(data):
            raise TransportError(f"{path} is not a text document")

        try:
            return data.decode(self.prefer_encoding, errors="strict")
        except UnicodeDecodeError:
            return data.decode(self.fallback_encoding, errors="replace")
