"""Orchestrates the full pipeline: scrape or decode → aggregate → classify."""

import sys
from datetime import date
from pathlib import Path
from typing import Optional, Tuple

from travel_map.config import MAP_TITLE
from travel_map.models import DecodedInput, RegionStats
from travel_map.extract.fetch import fetch_wiki_html
from travel_map.extract.params import decode_query
from travel_map.extract.table_parser import parse_wiki_html
from travel_map.assemble.aggregate import collect_counts
from travel_map.assemble.classify import classify


def build_input(
    html_path: Optional[str] = None,
    url: Optional[str] = None,
    query: Optional[str] = None,
    today: Optional[date] = None,
    verbose: bool = True,
) -> DecodedInput:
    """Load travel data from exactly one source and normalize it.

    Args:
        html_path: Saved wiki page to scrape.
        url: Wiki page to download and scrape.
        query: URL query string in the parameter format (work=NY,CA&...).
        today: Cut-off between past and future trips. Defaults to today.
        verbose: Print progress to stderr.
    """
    sources = [s for s in (html_path, url, query) if s]
    if len(sources) != 1:
        raise ValueError("exactly one of html_path, url or query is required")

    def log(msg):
        if verbose:
            print(msg, file=sys.stderr)

    if query:
        decoded = decode_query(query)
        log(f"Decoded parameters: {len(decoded.states.referenced())} states, "
            f"{len(decoded.provinces.referenced())} provinces, "
            f"{len(decoded.countries.referenced())} countries")
        return decoded

    if html_path:
        log(f"Loading wiki page: {html_path}")
        html = Path(html_path).read_text(encoding="utf-8")
    else:
        log(f"Fetching wiki page: {url}")
        html = fetch_wiki_html(url)

    trips = parse_wiki_html(html)
    log(f"  Trip records: {len(trips)}")
    log(f"  Work states: {len(trips.work_states)}, personal states: {len(trips.personal_states)}")
    log(f"  Work provinces: {len(trips.work_provinces)}, personal provinces: {len(trips.personal_provinces)}")

    return collect_counts(trips, today=today, title=MAP_TITLE)


def run_pipeline(
    html_path: Optional[str] = None,
    url: Optional[str] = None,
    query: Optional[str] = None,
    today: Optional[date] = None,
    verbose: bool = True,
) -> Tuple[DecodedInput, RegionStats]:
    """Run the full pipeline end to end.

    Returns the decoded input (for embed URLs) and the classified regions.
    """
    decoded = build_input(html_path=html_path, url=url, query=query, today=today, verbose=verbose)
    stats = classify(decoded)
    if verbose:
        print(f"  Classified {len(stats.regions)} regions "
              f"({stats.summary.states_visited} states visited)", file=sys.stderr)
    return decoded, stats
