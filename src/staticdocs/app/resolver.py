from __future__ import annotations

import logging
from dataclasses import dataclass, field

from staticdocs.cache import ContentCache
from staticdocs.domain.errors import ContentLoadError
from staticdocs.domain.models import ContentResult, ResolutionRequest
from staticdocs.domain.schema import META_TOC
from staticdocs.ports import FallbackNavigator, FileLoader, LanguageSelector
from staticdocs.utils.parsing import extract_metadata
from staticdocs.utils.paths import assemble_path, document_filename

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StaticResolver:
    """
    Resolves a request into static content.

    Loads the markdown document the route points to, reads the metadata out of
    its comments and, when the metadata names a toc, loads that companion
    document too. Load failures never reach the caller: the navigator is asked
    to show the not-found view and an empty result comes back instead.

    InvalidRequest (a route param without value) is not a load failure and
    propagates.
    """
    loader: FileLoader
    selector: LanguageSelector
    navigator: FallbackNavigator
    cache: ContentCache = field(default_factory=ContentCache)

    @property
    def default_language(self) -> str:
        return self.selector.default_language

    async def resolve(self, request: ResolutionRequest) -> ContentResult:
        root = request.source_root
        lang = self.selector.resolve_language(request)
        path = assemble_path(request.segments)

        logger.debug("Static requesting: root=%s lang=%s path=%s", root, lang, path)

        # Anything cached for another language is stale
        if lang != self.cache.current_language:
            self.cache.reset(lang)

        try:
            body = await self.loader.load(root, lang, document_filename(path))

            metadata = extract_metadata(body)
            toc_file = metadata.pop(META_TOC, None)
            if not toc_file:
                return ContentResult(body=body, path=path, metadata=metadata)

            toc = await self.loader.load(root, lang, toc_file)
            return ContentResult(body=body, path=path, toc=toc, metadata=metadata)

        except ContentLoadError as e:
            logger.warning("Unable to load %r (%s), redirecting to not-found: %s", path, lang, e)
            self.navigator.navigate_to_not_found()
            return ContentResult.empty()
