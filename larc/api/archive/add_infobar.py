"""Insert the infobar anchor into a parsed page."""

from bs4 import BeautifulSoup

from .INFOBAR_ATTRIBUTE import INFOBAR_ATTRIBUTE


def add_infobar(soup: BeautifulSoup, url: str) -> bool:
    """Add the anchor carrying ``url`` unless the page already has one."""
    if soup.find("a", attrs={INFOBAR_ATTRIBUTE: True}) is not None:
        return False
    anchor = soup.new_tag("a", attrs={"href": url, INFOBAR_ATTRIBUTE: ""})
    anchor.string = url
    container = soup.body or soup
    container.insert(0, anchor)
    return True
