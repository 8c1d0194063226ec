"""Unit tests for larc.api.link.DomainMapper."""

from larc.api.link.DomainMapper import DomainMapper

MAPPING = {"https://www.reddit.com": "https://old.reddit.com"}


def test_to_mirror_and_back():
    mapper = DomainMapper(MAPPING)
    mirrored = mapper.to_mirror("https://www.reddit.com/r/python?sort=new")
    assert mirrored == "https://old.reddit.com/r/python?sort=new"
    assert mapper.to_origin(mirrored) == "https://www.reddit.com/r/python?sort=new"


def test_bare_origin_is_mapped():
    assert DomainMapper(MAPPING).to_mirror("https://www.reddit.com") == "https://old.reddit.com"


def test_prefix_must_end_at_host_boundary():
    mapper = DomainMapper(MAPPING)
    assert mapper.to_mirror("https://www.reddit.company/x") == "https://www.reddit.company/x"


def test_unmapped_urls_pass_through():
    mapper = DomainMapper(MAPPING)
    assert mapper.to_mirror("https://example.com/") == "https://example.com/"
    assert mapper.to_origin("https://example.com/") == "https://example.com/"


def test_first_matching_entry_wins():
    mapper = DomainMapper({"https://a.com": "https://m1.com", "https://b.com": "https://m1.com"})
    assert mapper.to_origin("https://m1.com/page") == "https://a.com/page"


def test_empty_mapping():
    assert DomainMapper().to_mirror("https://example.com") == "https://example.com"
