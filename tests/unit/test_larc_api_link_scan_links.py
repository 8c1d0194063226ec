"""Unit tests for larc.api.link.scan_links and scan_raw_urls."""

from larc.api.document import Document, track
from larc.api.link._syntax import MarkdownSyntax, OrgSyntax
from larc.api.link.LinkKind import LinkKind
from larc.api.link.scan_links import scan_links
from larc.api.link.scan_raw_urls import scan_raw_urls


def _scan(text, syntax=None):
    doc = Document(text)
    region = track(doc, 0, len(text))
    return doc, region, scan_links(doc, region, syntax or MarkdownSyntax())


def test_markdown_kinds_by_target_shape():
    text = (
        "See [Example](https://example.com) | [arch](archive/abc.html) | [n](notes/x.md) "
        "and [other](foo.txt) ![img](https://img.example/a.png) [ftp](ftp://host/file)"
    )
    _, _, links = _scan(text)
    assert [link.kind for link in links] == [LinkKind.URL, LinkKind.ARTIFACT, LinkKind.COMPANION]
    assert [link.target for link in links] == ["https://example.com", "archive/abc.html", "notes/x.md"]
    assert links[0].label == "Example"


def test_occurrence_markers_cover_link_text():
    text = "xx [a](https://a.example) yy"
    doc, _, links = _scan(text)
    start, end = links[0].span
    assert doc.substring(start, end) == "[a](https://a.example)"


def test_angle_bracket_targets_are_unwrapped():
    _, _, links = _scan("[doc](<archive/my page.html>)")
    assert links[0].target == "archive/my page.html"
    assert links[0].kind == LinkKind.ARTIFACT


def test_only_region_is_scanned():
    text = "[a](https://a.example) [b](https://b.example)"
    doc = Document(text)
    region = track(doc, text.index("[b]"), len(text))
    links = scan_links(doc, region, MarkdownSyntax())
    assert [link.target for link in links] == ["https://b.example"]


def test_org_links():
    text = "[[https://example.com][Example]] [[file:archive/a.html][archive]] [[notes/n.org]]"
    _, _, links = _scan(text, OrgSyntax())
    assert [link.kind for link in links] == [LinkKind.URL, LinkKind.ARTIFACT, LinkKind.COMPANION]
    assert links[1].target == "archive/a.html"


def test_raw_urls_outside_links():
    text = "Visit https://example.com/page, and [x](https://a.example). (see https://b.example/x)."
    doc, region, links = _scan(text)
    raw = scan_raw_urls(doc, region, [link.span for link in links])
    assert [occurrence.target for occurrence in raw] == ["https://example.com/page", "https://b.example/x"]
    assert all(occurrence.kind == LinkKind.UNTYPED for occurrence in raw)
    start, end = raw[1].span
    assert doc.substring(start, end) == "https://b.example/x"


def test_raw_urls_without_covered_spans_include_link_targets():
    text = "[x](https://a.example)"
    doc = Document(text)
    raw = scan_raw_urls(doc, track(doc, 0, len(text)))
    assert [occurrence.target for occurrence in raw] == ["https://a.example"]


def test_raw_urls_keep_balanced_parentheses():
    url = "https://en.wikipedia.org/wiki/Python_(programming_language)"
    text = f"See {url} now, or ({url})."
    doc = Document(text)
    raw = scan_raw_urls(doc, track(doc, 0, len(text)))
    assert [occurrence.target for occurrence in raw] == [url, url]
    start, end = raw[1].span
    assert doc.text[end:] == ")."


def test_markdown_covered_spans_include_every_url_container():
    text = (
        "![alt](https://example.com/pic.png)\n"
        '[Example](https://example.com "Tip")\n'
        "[wiki](https://en.wikipedia.org/wiki/A_(b))\n"
        "<https://auto.example>\n"
        "[ref]: https://ref.example\n"
        "[^1]: https://note.example\n"
        "bare https://bare.example\n"
    )
    doc = Document(text)
    covered = MarkdownSyntax().covered_spans(text)
    assert [text[start:end] for start, end in covered] == [
        "![alt](https://example.com/pic.png)",
        '[Example](https://example.com "Tip")',
        "[wiki](https://en.wikipedia.org/wiki/A_(b))",
        "<https://auto.example>",
        "[ref]: https://ref.example",
    ]
    raw = scan_raw_urls(doc, track(doc, 0, len(text)), covered)
    assert [occurrence.target for occurrence in raw] == ["https://note.example", "https://bare.example"]


def test_org_covered_spans_include_bracket_and_angle_links():
    text = "[[https://a.example/x.png]] [[https://b.example][B]] <https://c.example> https://d.example"
    doc = Document(text)
    covered = OrgSyntax().covered_spans(text)
    raw = scan_raw_urls(doc, track(doc, 0, len(text)), covered)
    assert len(covered) == 3
    assert [occurrence.target for occurrence in raw] == ["https://d.example"]
