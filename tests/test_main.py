import asyncio
import json
import os

import pytest

from site_mirror import main as cli
from site_mirror.crawler import CrawlResult
from site_mirror.errors import InputError


@pytest.mark.parametrize("url", ["https://example.com", " http://example.com/docs/ "])
def test_validate_url_accepts_http_urls(url):
    assert cli.validate_url(url) == url.strip()


@pytest.mark.parametrize("url", ["", "example.com", "ftp://example.com/", "https://", "not a url"])
def test_validate_url_rejects_malformed(url):
    with pytest.raises(InputError):
        cli.validate_url(url)


def test_prompt_keeps_asking_until_valid(monkeypatch):
    answers = iter(["", "example.com", "https://example.com/"])
    asked = []

    def fake_ask(message, console=None):
        asked.append(message)
        return next(answers)

    monkeypatch.setattr(cli.Prompt, "ask", fake_ask)

    assert cli.prompt_for_url() == "https://example.com/"
    assert len(asked) == 3


def test_missing_config_is_fatal(tmp_path):
    code = asyncio.run(cli.main([
        "--url", "https://example.com/",
        "--config", str(tmp_path / "missing.json"),
        "--quiet",
    ]))

    assert code == 1


def test_invalid_url_argument(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text("{}", encoding="utf-8")

    code = asyncio.run(cli.main(["--url", "nope", "--config", str(config_path), "--quiet"]))

    assert code == 1


def test_main_runs_crawler_with_loaded_config(tmp_path, monkeypatch):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"blockNames": ["logout"], "project": "Docs"}), encoding="utf-8")
    created = {}

    class StubCrawler:
        def __init__(self, url, config, output_dir, max_pages, timeout, on_page):
            created.update(url=url, config=config, output_dir=output_dir, max_pages=max_pages)

        async def crawl(self):
            return CrawlResult(
                seed_url=created["url"],
                output_root=created["output_dir"],
                manifest_path=os.path.join(created["output_dir"], "README.txt"),
            )

    monkeypatch.setattr(cli, "SiteCrawler", StubCrawler)

    code = asyncio.run(cli.main([
        "--url", "https://example.com/",
        "--config", str(config_path),
        "--output", str(tmp_path / "out"),
        "--max-pages", "5",
        "--quiet",
    ]))

    assert code == 0
    assert created["url"] == "https://example.com/"
    assert created["config"].block_names == ("logout",)
    assert created["config"].metadata.project == "Docs"
    assert created["max_pages"] == 5


def test_manifest_write_failure_exits_with_error(tmp_path, monkeypatch):
    config_path = tmp_path / "config.json"
    config_path.write_text("{}", encoding="utf-8")

    class StubCrawler:
        def __init__(self, url, config, output_dir, max_pages, timeout, on_page):
            self.output_dir = output_dir

        async def crawl(self):
            return CrawlResult(seed_url="https://example.com/", output_root=self.output_dir)

    monkeypatch.setattr(cli, "SiteCrawler", StubCrawler)

    code = asyncio.run(cli.main([
        "--url", "https://example.com/",
        "--config", str(config_path),
        "--quiet",
    ]))

    assert code == 1


def test_log_file_receives_records(tmp_path):
    log_path = tmp_path / "mirror.log"

    code = asyncio.run(cli.main([
        "--url", "https://example.com/",
        "--config", str(tmp_path / "missing.json"),
        "--log-file", str(log_path),
        "--verbose",
    ]))

    assert code == 1
    assert log_path.exists()
