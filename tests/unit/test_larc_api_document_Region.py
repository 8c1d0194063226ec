"""Unit tests for larc.api.document.Region and track."""

import pytest

from larc.api.document import Document, DocumentClosedError, track


def test_text_inserted_at_boundaries_stays_inside():
    doc = Document("0123456789")
    region = track(doc, 2, 5)
    doc.replace(2, 2, "ab")
    assert region.resolve() == (2, 7)
    end = region.resolve()[1]
    doc.replace(end, end, "cd")
    assert region.resolve() == (2, 9)
    assert region.text() == "ab234cd"


def test_region_follows_edits_before_it():
    doc = Document("0123456789")
    region = track(doc, 5, 8)
    doc.replace(0, 3, "")
    assert region.resolve() == (2, 5)


def test_track_rejects_inverted_range():
    doc = Document("abc")
    with pytest.raises(ValueError, match="after end"):
        track(doc, 2, 1)


def test_resolve_closed_document_raises():
    doc = Document("abc")
    region = track(doc, 0, 3)
    doc.close()
    with pytest.raises(DocumentClosedError):
        region.resolve()


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ((0, 10), (0, 10), True),
        ((0, 10), (2, 5), True),
        ((2, 5), (0, 10), True),
        ((0, 10), (5, 15), True),
        ((0, 10), (10, 20), False),
        ((0, 5), (6, 9), False),
        ((3, 3), (3, 3), True),
        ((3, 3), (0, 10), True),
    ],
)
def test_overlaps(first, second, expected):
    doc = Document("x" * 20)
    assert track(doc, *first).overlaps(track(doc, *second)) is expected


def test_regions_of_different_documents_never_overlap():
    first = Document("x" * 10)
    second = Document("x" * 10)
    assert not track(first, 0, 10).overlaps(track(second, 0, 10))


def test_release_removes_both_markers():
    doc = Document("abc")
    region = track(doc, 0, 3)
    assert doc.marker_count == 2
    region.release()
    assert doc.marker_count == 0


def test_replacement_ending_at_neighbour_start_grows_neighbour():
    document = Document("aaa|bbb")
    first = track(document, 0, 3)
    second = track(document, 3, 7)

    document.replace(0, 3, "xxxxx")

    assert first.resolve() == (0, 5)
    assert second.resolve() == (0, 9)
    assert second.text() == "xxxxx|bbb"
