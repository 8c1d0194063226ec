"""Unit tests for the default title extractor and archiver (network stubbed)."""

from types import SimpleNamespace

import requests
from _helpers import page_html

from larc.api.archive import _archive_page, _extract_title
from larc.api.archive.read_artifact_meta import read_artifact_meta

URL = "https://example.com/page"


def _response(html):
    return SimpleNamespace(text=html, url=URL)


def _raise(url):
    raise requests.ConnectionError(f"cannot reach {url}")


def test_extract_title_prints_title(monkeypatch, capsys):
    monkeypatch.setattr(_extract_title, "_fetch_page", lambda url: _response(page_html(" Example \n Domain ")))
    assert _extract_title.main([URL]) == 0
    assert capsys.readouterr().out == "Example Domain\n"


def test_extract_title_network_failure(monkeypatch, capsys):
    monkeypatch.setattr(_extract_title, "_fetch_page", _raise)
    assert _extract_title.main([URL]) == 1
    assert "cannot reach" in capsys.readouterr().err


def test_extract_title_usage():
    assert _extract_title.main([]) == 2


def test_archive_page_writes_single_file(monkeypatch, tmp_path):
    monkeypatch.setattr(_archive_page, "_fetch_page", lambda url: _response(page_html("Saved")))
    output = tmp_path / "out" / "page.html"

    assert _archive_page.main([URL, str(output)]) == 0

    html = output.read_text(encoding="utf-8")
    assert f'<base href="{URL}"/>' in html
    meta = read_artifact_meta(output)
    assert meta.title == "Saved"
    assert meta.anchor_url == URL


def test_archive_page_network_failure(monkeypatch, tmp_path):
    monkeypatch.setattr(_archive_page, "_fetch_page", _raise)
    output = tmp_path / "page.html"
    assert _archive_page.main([URL, str(output)]) == 1
    assert not output.exists()
