import pytest

from staticdocs.adapters.loading.filesystem_loader import FilesystemFileLoader
from staticdocs.domain.errors import NotFound, TransportError


@pytest.fixture
def docs(tmp_path):
    base = tmp_path / "assets" / "docs" / "en"
    base.mkdir(parents=True)
    (base / "guide.md").write_text("# Guide\n<!-- ref: 1.0 -->", encoding="utf-8")
    return tmp_path


@pytest.mark.asyncio
async def test_reads_document(docs):
    loader = FilesystemFileLoader(base_dir=docs)
    assert await loader.load("assets/docs", "en", "guide.md") == "# Guide\n<!-- ref: 1.0 -->"


@pytest.mark.asyncio
async def test_missing_document_is_not_found(docs):
    loader = FilesystemFileLoader(base_dir=docs)
    with pytest.raises(NotFound):
        await loader.load("assets/docs", "it", "guide.md")


@pytest.mark.asyncio
async def test_escaping_base_dir_is_not_found(docs):
    loader = FilesystemFileLoader(base_dir=docs)
    with pytest.raises(NotFound):
        await loader.load("..", "en", "secret.md")


@pytest.mark.asyncio
async def test_binary_is_transport_error(docs):
    (docs / "assets" / "docs" / "en" / "logo.md").write_bytes(b"\x89PNG\x00\x00")
    loader = FilesystemFileLoader(base_dir=docs)
    with pytest.raises(TransportError):
        await loader.load("assets/docs", "en", "logo.md")


@pytest.mark.asyncio
async def test_too_large_is_transport_error(docs):
    loader = FilesystemFileLoader(base_dir=docs, max_bytes=4)
    with pytest.raises(TransportError):
        await loader.load("assets/docs", "en", "guide.md")


@pytest.mark.asyncio
async def test_latin1_fallback(docs):
    (docs / "assets" / "docs" / "en" / "cafe.md").write_bytes("café".encode("latin-1"))
    loader = FilesystemFileLoader(base_dir=docs)
    assert await loader.load("assets/docs", "en", "cafe.md") == "café"


@pytest.mark.asyncio
async def test_nul_byte_in_path_is_not_found(docs):
    loader = FilesystemFileLoader(base_dir=docs)
    with pytest.raises(NotFound):
        await loader.load("assets/docs", "en", "gu\x00ide.md")


@pytest.mark.asyncio
async def test_resolver_degrades_on_nul_byte_segment(docs):
    from staticdocs.app.resolver import StaticResolver
    from staticdocs.domain.models import ResolutionRequest

    from conftest import FakeNavigator, FakeSelector

    navigator = FakeNavigator()
    resolver = StaticResolver(
        loader=FilesystemFileLoader(base_dir=docs),
        selector=FakeSelector(),
        navigator=navigator,
    )

    result = await resolver.resolve(ResolutionRequest(segments=(("path", "gu\x00ide"),), lang="en"))

    assert result.to_dict() == {"body": ""}
    assert navigator.calls == 1
