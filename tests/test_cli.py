"""Tests for the twitter-card command line."""

import json

import pytest

from twitter_card.app.cli import main
from twitter_card.settings import SITEURL_ENV

PAGE = """---
twitter:
  title: Hello
  description: World
---
<html><head><title>Hello</title></head><body></body></html>
"""


@pytest.fixture
def project(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(SITEURL_ENV, raising=False)
    (tmp_path / "site").mkdir()
    (tmp_path / "site" / "index.html").write_text(PAGE, encoding="utf-8")
    (tmp_path / "site" / "img").mkdir()
    (tmp_path / "site" / "img" / "hero.png").write_bytes(b"\x89PNG\x00\x00")
    (tmp_path / "site" / "style.css").write_text("body {}", encoding="utf-8")
    (tmp_path / "settings.toml").write_text(
        '[paths]\nsource_dir = "site"\noutput_dir = "dist"\n'
        '[twitter]\nsiteurl = "http://example.com"\nsite = "mysite"\n',
        encoding="utf-8",
    )
    return tmp_path


class TestCli:
    def test_build(self, project, capsys):
        assert main(["--config", str(project / "settings.toml")]) == 0
        out = (project / "dist" / "index.html").read_text(encoding="utf-8")
        assert 'name="twitter:site" content="@mysite"' in out
        assert "---" not in out
        assert "Twitter cards added: 1" in capsys.readouterr().out

    def test_failure_exit_code(self, project, caplog):
        (project / "site" / "bad.html").write_text(
            "---\ntwitter:\n  title: t\n---\n<html></html>", encoding="utf-8"
        )
        assert main(["--config", str(project / "settings.toml")]) == 1
        assert "description is required for summary twitter card type" in caplog.text
        assert not (project / "dist").exists()

    def test_output_override_and_report(self, project):
        code = main([
            "--config", str(project / "settings.toml"),
            "--output", str(project / "public"),
            "--dump-report", str(project / "logs"),
        ])
        assert code == 0
        assert (project / "public" / "index.html").exists()
        [report] = list((project / "logs").glob("*.json"))
        payload = json.loads(report.read_text(encoding="utf-8"))
        assert payload["process"]["processed"] == ["index.html"]
        assert payload["ingest"]["loaded"] == 1

    def test_assets_copied_unchanged(self, project, capsys):
        assert main(["--config", str(project / "settings.toml")]) == 0
        assert (project / "dist" / "style.css").read_text(encoding="utf-8") == "body {}"
        assert (project / "dist" / "img" / "hero.png").read_bytes() == b"\x89PNG\x00\x00"
        assert "copied:  2" in capsys.readouterr().out
