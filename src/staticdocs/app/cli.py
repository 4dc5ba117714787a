from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.rule import Rule

from staticdocs.app.container import Container, build_container
from staticdocs.domain.errors import InvalidRequest
from staticdocs.domain.models import CacheEntry, ContentResult, ResolutionRequest
from staticdocs.settings import default_settings, load_settings
from staticdocs.utils.paths import segments_from_path

console = Console()
err_console = Console(stderr=True)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Resolve a static document for a path and language.")
    p.add_argument("path", type=str, nargs="?", default="", help="Document path, e.g. guide/intro")

    p.add_argument("--lang", type=str, default=None, help="Language code (falls back to the default language)")
    p.add_argument("--root", type=str, default=None, help="Content root, overrides the configured one")
    p.add_argument("--settings", type=str, default=None, help="settings.toml to load (env only when omitted)")

    p.add_argument("--json", action="store_true", help="Print the resolved content as JSON")
    p.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING...")

    return p.parse_args(argv)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
        force=True,
    )


def render(source: str, entry: Optional[CacheEntry]) -> Markdown:
    """
    Markdown renderable for source, reused from the cache entry when the same
    text was already rendered in this language (typically the toc).
    """
    if entry is None:
        return Markdown(source)
    rendered = entry.data.get(source)
    if rendered is None:
        rendered = entry.data[source] = Markdown(source)
    return rendered


def show(result: ContentResult, entry: Optional[CacheEntry]) -> None:
    if result.toc is not None:
        console.print(Rule("Contents"))
        console.print(render(result.toc, entry))
    console.print(Rule(result.path or "/"))
    console.print(render(result.body, entry))
    if result.metadata:
        console.print(Rule())
        for k, v in result.metadata.items():
            console.print(f"[bold]{k}[/bold]: {v}")


async def run(container: Container, request: ResolutionRequest) -> ContentResult:
    try:
        return await container.resolver.resolve(request)
    finally:
        await container.aclose()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings(args.settings) if args.settings else default_settings()
    except (FileNotFoundError, KeyError, ValueError) as e:
        err_console.print(f"[red]Invalid settings:[/red] {e}")
        return 2

    setup_logging(args.log_level or settings.log_level)
    container = build_container(settings)

    request = ResolutionRequest(
        segments=segments_from_path(args.path),
        root=args.root or settings.content.root,
        lang=args.lang,
    )

    try:
        result = asyncio.run(run(container, request))
    except InvalidRequest as e:
        err_console.print(f"[red]Invalid request:[/red] {e}")
        return 2

    if args.json:
        console.print_json(json.dumps(result.to_dict(), ensure_ascii=False))
    elif not result.is_empty:
        lang = container.resolver.cache.current_language
        show(result, container.resolver.cache.get(lang) if lang else None)

    if result.is_empty:
        err_console.print(f"[yellow]Nothing found, redirected to {container.navigator.current}[/yellow]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
