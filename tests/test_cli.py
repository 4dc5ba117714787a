import json

import pytest

from staticdocs import config
from staticdocs.app import cli
from staticdocs.domain.models import CacheEntry

SETTINGS_TOML = """
[content]
root = "assets/docs"
default_lang = "en"
languages = ["en", "it"]

[transport]
kind = "filesystem"
base_dir = "."
"""


@pytest.fixture
def site(tmp_path):
    docs = tmp_path / "assets" / "docs"
    (docs / "it").mkdir(parents=True)
    (docs / "it" / "guide.md").write_text("# Guida\n<!-- toc: nav.md ref: 2 -->", encoding="utf-8")
    (docs / "it" / "nav.md").write_text("- Guida", encoding="utf-8")
    settings = tmp_path / "settings.toml"
    settings.write_text(SETTINGS_TOML, encoding="utf-8")
    return settings


def test_json_output(site, capsys):
    code = cli.main(["guide", "--lang", "it", "--settings", str(site), "--json"])

    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert out == {
        "body": "# Guida\n<!-- toc: nav.md ref: 2 -->",
        "path": "guide",
        "ref": "2",
        "toc": "- Guida",
    }


def test_unsupported_language_uses_default(site, capsys):
    code = cli.main(["guide", "--lang", "fr", "--settings", str(site), "--json"])

    assert code == 1
    assert json.loads(capsys.readouterr().out) == {"body": ""}


def test_rich_output(site, capsys):
    code = cli.main(["guide.html", "--lang", "it", "--settings", str(site)])

    out = capsys.readouterr().out
    assert code == 0
    assert "Guida" in out
    assert "ref" in out


def test_missing_settings(tmp_path):
    assert cli.main(["guide", "--settings", str(tmp_path / "nope.toml")]) == 2


def test_render_reuses_cached_markdown():
    entry = CacheEntry(lang="en")
    first = cli.render("- Guide", entry)
    assert cli.render("- Guide", entry) is first
    assert cli.render("- Guide", None) is not first


def test_malformed_timeout_env_exits_with_settings_error(monkeypatch):
    monkeypatch.setattr(config, "TIMEOUT", "soon")
    assert cli.main(["guide"]) == 2
