"""Unit tests for larc.api.archive.ArchiveWorkflow."""

from _helpers import minimal_larc_config, page_html

from larc.api.archive.artifact_name import artifact_name
from larc.api.archive.ArchiveWorkflow import ArchiveWorkflow
from larc.api.archive.read_artifact_meta import read_artifact_meta
from larc.api.archive.reset_region import reset_region
from larc.api.archive.url_hash import url_hash
from larc.api.document import Document, track
from larc.api.link._syntax import MarkdownSyntax
from larc.api.link.DomainMapper import DomainMapper
from larc.api.link.group_links import group_links
from larc.api.link.LinkKind import LinkKind
from larc.api.link.scan_links import scan_links

URL = "https://example.com"


def _setup(tmp_path, text, diagnostic_log, **archive):
    config = minimal_larc_config(tmp_path, **archive).archive
    path = tmp_path / "doc.md"
    path.write_text(text, encoding="utf-8")
    doc = Document.open(path)
    syntax = MarkdownSyntax()
    links = scan_links(doc, track(doc, 0, len(doc)), syntax)
    canonical, other = group_links(doc, links, config.separator, config.order)
    workflow = ArchiveWorkflow(doc, config, syntax, DomainMapper(config.domain_map), diagnostic_log, today=lambda: "2024-01-02")
    return config, doc, workflow, canonical, other


def test_titled_link_becomes_two_legs_and_one_job(tmp_path, diagnostic_log):
    _, _, workflow, _, other = _setup(tmp_path, f"[Example Domain]({URL})", diagnostic_log)
    edit = workflow.archive_cluster(other[0])
    name = artifact_name(URL, "Example Domain")
    assert edit.text == f"[Example Domain]({URL}) | [archive](archive/{name})"
    assert (edit.start, edit.end) == (0, len(f"[Example Domain]({URL})"))
    assert [(job.url, job.name) for job in workflow.jobs] == [(URL, name)]


def test_link_without_title_is_skipped(tmp_path, diagnostic_log):
    _, _, workflow, _, other = _setup(tmp_path, f"[{URL}]({URL})", diagnostic_log)
    assert workflow.archive_cluster(other[0]) is None
    assert workflow.jobs == []


def test_existing_artifact_with_other_title_gets_redirect_stub(tmp_path, diagnostic_log):
    config, _, workflow, _, other = _setup(tmp_path, f"[New Title]({URL})", diagnostic_log)
    config.artifact_dir.mkdir(parents=True)
    existing = config.artifact_dir / artifact_name(URL, "Old Title")
    existing.write_text(page_html("Old Title"), encoding="utf-8")

    edit = workflow.archive_cluster(other[0])

    canonical = config.artifact_dir / artifact_name(URL, "New Title")
    assert workflow.jobs == []
    assert canonical.is_file()
    assert existing.name in canonical.read_text(encoding="utf-8")
    assert read_artifact_meta(canonical).anchor_url == URL
    assert f"archive/{canonical.name}" in edit.text


def test_existing_artifact_at_canonical_path_is_reused(tmp_path, diagnostic_log):
    config, _, workflow, _, other = _setup(tmp_path, f"[Same]({URL})", diagnostic_log)
    config.artifact_dir.mkdir(parents=True)
    canonical = config.artifact_dir / artifact_name(URL, "Same")
    canonical.write_text(page_html("Same"), encoding="utf-8")

    workflow.archive_cluster(other[0])

    assert workflow.jobs == []
    assert read_artifact_meta(canonical).title == "Same"
    assert list(config.artifact_dir.iterdir()) == [canonical]


def test_same_url_twice_in_one_pass_queues_one_download(tmp_path, diagnostic_log):
    text = f"[First]({URL}) then [Second]({URL}/)"
    config, _, workflow, _, other = _setup(tmp_path, text, diagnostic_log)
    for cluster in other:
        workflow.archive_cluster(cluster)
    assert len(workflow.jobs) == 1
    assert workflow.jobs[0].name == artifact_name(URL, "First")
    stub = config.artifact_dir / artifact_name(URL + "/", "Second")
    assert stub.is_file()
    assert workflow.jobs[0].name in stub.read_text(encoding="utf-8")


def test_companion_is_created_on_first_use(tmp_path, diagnostic_log):
    order = ["url", "artifact", "companion"]
    config, _, workflow, _, other = _setup(tmp_path, f"[Example Domain]({URL})", diagnostic_log, order=order)
    edit = workflow.archive_cluster(other[0])

    name = artifact_name(URL, "Example Domain")
    stem = name[: -len(".html")]
    companion = config.companion_dir / f"{stem}.md"
    assert edit.text == f"[Example Domain]({URL}) | [archive](archive/{name}) | [notes](notes/{stem}.md)"
    text = companion.read_text(encoding="utf-8")
    assert "title: Example Domain" in text
    assert f"url: {URL}" in text
    assert f"[archive](../archive/{name})" in text


def test_url_override_and_computed_labels(tmp_path, diagnostic_log):
    labels = {"artifact": {"type": "computed", "value": "{domain} @ {date}"}}
    _, _, workflow, _, other = _setup(
        tmp_path, f"[Example Domain]({URL})", diagnostic_log, labels=labels, url_override="url", title_override="artifact"
    )
    edit = workflow.archive_cluster(other[0])
    assert edit.text.startswith(f"[{URL}]({URL}) | [Example Domain](archive/")


def test_disagreeing_cluster_collapses_to_resource_links(tmp_path, diagnostic_log):
    text = "[A](https://a.example) | [archive](archive/x.html)"
    config, _, workflow, _, other = _setup(tmp_path, text, diagnostic_log, order=["url", "artifact", "companion"])
    config.artifact_dir.mkdir(parents=True)
    (config.artifact_dir / "x.html").write_text(
        page_html("B", '<a data-larc-infobar href="https://b.example">b</a>'), encoding="utf-8"
    )
    edit = workflow.archive_cluster(other[0])
    name = artifact_name("https://a.example", "A")
    assert f"archive/{name}" in edit.text
    assert "x.html" not in edit.text
    assert workflow.jobs[0].url == "https://a.example"


def test_title_from_artifact_when_link_has_none(tmp_path, diagnostic_log):
    text = "[archive](archive/x.html)"
    config, _, workflow, _, other = _setup(tmp_path, text, diagnostic_log)
    config.artifact_dir.mkdir(parents=True)
    (config.artifact_dir / "x.html").write_text(
        page_html("From Artifact", f'<a data-larc-infobar href="{URL}">x</a>'), encoding="utf-8"
    )
    edit = workflow.archive_cluster(other[0])
    assert edit.text.startswith(f"[From Artifact]({URL}) | [archive](archive/")


def test_revert_only_when_file_missing(tmp_path, diagnostic_log):
    name = artifact_name(URL, "Example Domain")
    text = f"[Example Domain]({URL}) | [archive](archive/{name})"
    config, _, workflow, canonical, _ = _setup(tmp_path, text, diagnostic_log)
    edit = workflow.revert_cluster(canonical[0])
    assert edit.text == f"[Example Domain]({URL})"

    config.artifact_dir.mkdir(parents=True)
    (config.artifact_dir / name).write_text(page_html("Example Domain"), encoding="utf-8")
    assert workflow.revert_cluster(canonical[0]) is None


def test_reset_deletes_files_and_restores_link(tmp_path, diagnostic_log):
    name = artifact_name(URL, "Example Domain")
    text = f"Read [Example Domain]({URL}) | [archive](archive/{name}) today"
    config, doc, _, _, _ = _setup(tmp_path, text, diagnostic_log)
    config.artifact_dir.mkdir(parents=True)
    artifact = config.artifact_dir / name
    artifact.write_text(page_html("Example Domain"), encoding="utf-8")

    count, deleted = reset_region(track(doc, 0, len(doc)), config, MarkdownSyntax(), diagnostic_log)

    assert count == 1
    assert deleted == [artifact.resolve()] or deleted == [artifact]
    assert not artifact.exists()
    assert doc.text == f"Read [Example Domain]({URL}) today"


def test_reset_without_files_leaves_cluster(tmp_path, diagnostic_log):
    name = artifact_name(URL, "Example Domain")
    text = f"[Example Domain]({URL}) | [archive](archive/{name})"
    config, doc, _, _, _ = _setup(tmp_path, text, diagnostic_log)
    assert reset_region(track(doc, 0, len(doc)), config, MarkdownSyntax(), diagnostic_log) == (0, [])
    assert doc.text == text


def test_reset_keeps_files_when_deletion_disabled(tmp_path, diagnostic_log):
    name = artifact_name(URL, "Example Domain")
    text = f"[Example Domain]({URL}) | [archive](archive/{name})"
    config, doc, _, _, _ = _setup(tmp_path, text, diagnostic_log, delete_on_reset=False)
    config.artifact_dir.mkdir(parents=True)
    artifact = config.artifact_dir / name
    artifact.write_text(page_html("Example Domain"), encoding="utf-8")

    count, deleted = reset_region(track(doc, 0, len(doc)), config, MarkdownSyntax(), diagnostic_log)

    assert (count, deleted) == (1, [])
    assert artifact.exists()
    assert doc.text == f"[Example Domain]({URL})"


def test_reset_restores_original_domain(tmp_path, diagnostic_log):
    mirror = "https://old.reddit.com/r/x"
    name = artifact_name("https://www.reddit.com/r/x", "Thread")
    text = f"[Thread]({mirror}) | [archive](archive/{name})"
    config, doc, _, _, _ = _setup(tmp_path, text, diagnostic_log, domain_map={"https://www.reddit.com": "https://old.reddit.com"})
    config.artifact_dir.mkdir(parents=True)
    (config.artifact_dir / name).write_text(page_html("Thread"), encoding="utf-8")

    reset_region(track(doc, 0, len(doc)), config, MarkdownSyntax(), diagnostic_log)

    assert doc.text == "[Thread](https://www.reddit.com/r/x)"


def test_url_hash_is_used_for_lookup(tmp_path, diagnostic_log):
    config, _, workflow, _, _ = _setup(tmp_path, "", diagnostic_log)
    config.artifact_dir.mkdir(parents=True)
    path = config.artifact_dir / f"{url_hash(URL)}-anything.html"
    path.write_text(page_html("x"), encoding="utf-8")
    assert workflow.index.find(url_hash("http://www.example.com/")) == path
    assert LinkKind.ARTIFACT in config.order
