"""Print the title of a web page.

Usage: python -m larc.api.archive._extract_title URL
"""

import sys

import requests
from bs4 import BeautifulSoup

from ._fetch_page import _fetch_page


def main(argv: list[str]) -> int:
    if len(argv) != 1:
        print("usage: _extract_title URL", file=sys.stderr)
        return 2
    try:
        response = _fetch_page(argv[0])
    except requests.RequestException as e:
        print(f"Failed to fetch {argv[0]}: {e}", file=sys.stderr)
        return 1
    soup = BeautifulSoup(response.text, "html.parser")
    title = " ".join(soup.title.get_text().split()) if soup.title else ""
    print(title)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
