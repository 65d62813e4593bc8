"""Fetch the wiki page that holds the trip tables."""

import requests

from travel_map.config import WIKI_TIMEOUT

USER_AGENT = "travel-map/1.0"


def fetch_wiki_html(url: str, timeout: int = WIKI_TIMEOUT) -> str:
    """Download a wiki page and return its HTML.

    Raises:
        requests.RequestException: on network errors or a non-2xx response.
    """
    resp = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    resp.raise_for_status()
    return resp.text
