from __future__ import annotations

from dataclasses import dataclass

from staticdocs.adapters.loading.filesystem_loader import FilesystemFileLoader
from staticdocs.adapters.loading.http_loader import HttpFileLoader
from staticdocs.adapters.navigation.history_navigator import HistoryNavigator
from staticdocs.adapters.selection.route_selector import RouteLanguageSelector
from staticdocs.app.resolver import StaticResolver
from staticdocs.ports import FileLoader
from staticdocs.settings import Settings


@dataclass(frozen=True, slots=True)
class Container:
    """
    Lightweight dependency container.
    Holds the resolver plus the adapters it was built from.
    """
    settings: Settings
    loader: FileLoader
    selector: RouteLanguageSelector
    navigator: HistoryNavigator
    resolver: StaticResolver

    async def aclose(self) -> None:
        if isinstance(self.loader, HttpFileLoader):
            await self.loader.aclose()


def build_loader(settings: Settings) -> FileLoader:
    transport = settings.transport
    if transport.kind == "http":
        return HttpFileLoader(base_url=transport.base_url, timeout=transport.timeout)
    return FilesystemFileLoader(base_dir=transport.base_dir)


def build_container(settings: Settings) -> Container:
    loader = build_loader(settings)
    selector = RouteLanguageSelector(
        default=settings.content.default_lang,
        supported=settings.content.languages,
    )
    navigator = HistoryNavigator(not_found_route=settings.navigation.not_found_route)
    resolver = StaticResolver(loader=loader, selector=selector, navigator=navigator)
    return Container(
        settings=settings,
        loader=loader,
        selector=selector,
        navigator=navigator,
        resolver=resolver,
    )
