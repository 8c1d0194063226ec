"""Unit tests for companion document persistence."""

import pytest

from larc.api.archive.read_companion_meta import read_companion_meta
from larc.api.archive.write_companion_meta import write_companion_meta
from larc.api.link._syntax import MarkdownSyntax, OrgSyntax


@pytest.mark.parametrize(("syntax", "name"), [(MarkdownSyntax(), "c.md"), (OrgSyntax(), "c.org")])
def test_write_then_read(tmp_path, syntax, name):
    path = tmp_path / "notes" / name
    assert write_companion_meta(path, syntax, "Title", "https://e.example", "2024-05-06", "body text")
    assert read_companion_meta(path, syntax) == {"title": "Title", "url": "https://e.example", "date": "2024-05-06"}
    assert "body text" in path.read_text(encoding="utf-8")


def test_existing_companion_is_never_overwritten(tmp_path):
    path = tmp_path / "c.md"
    path.write_text("my own notes", encoding="utf-8")
    assert write_companion_meta(path, MarkdownSyntax(), "T", "https://e.example", "d", "b") is False
    assert path.read_text(encoding="utf-8") == "my own notes"


def test_read_missing_companion(tmp_path):
    assert read_companion_meta(tmp_path / "missing.md", MarkdownSyntax()) == {}
