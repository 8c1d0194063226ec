"""Save a web page as a single HTML file carrying its original URL.

Usage: python -m larc.api.archive._archive_page URL OUTPUT
"""

import sys
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from ._fetch_page import _fetch_page
from .add_infobar import add_infobar


def main(argv: list[str]) -> int:
    if len(argv) != 2:
        print("usage: _archive_page URL OUTPUT", file=sys.stderr)
        return 2
    url, output = argv
    try:
        response = _fetch_page(url)
    except requests.RequestException as e:
        print(f"Failed to fetch {url}: {e}", file=sys.stderr)
        return 1

    soup = BeautifulSoup(response.text, "html.parser")
    # Relative resources resolve against the live page
    if soup.head is not None and soup.head.find("base") is None:
        soup.head.insert(0, soup.new_tag("base", attrs={"href": response.url}))
    add_infobar(soup, url)

    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(str(soup), encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
