"""HTTP fetch shared by the default external tools."""

import requests

USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64) larc/0.1"
TIMEOUT = 30


def _fetch_page(url: str) -> requests.Response:
    """GET ``url`` following redirects.

    Raises:
        requests.RequestException: On network errors or an HTTP error status
    """
    response = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=TIMEOUT)
    response.raise_for_status()
    return response
