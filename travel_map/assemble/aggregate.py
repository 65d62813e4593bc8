"""Reduce scraped trip records to the same shape the parameter decoder produces."""

from datetime import date
from typing import Dict, Optional, Tuple

from travel_map.config import DEFAULT_TITLE
from travel_map.extract.params import sanitize_title
from travel_map.models import DecodedInput, ScrapedTrips, TripCollection


def _counts(collection: TripCollection, today: str) -> Tuple[Dict[str, int], Dict[str, int]]:
    """(total, future) per region. Undated records count as past."""
    totals: Dict[str, int] = {}
    future: Dict[str, int] = {}
    for code, records in collection.items():
        if not records:
            continue
        totals[code] = len(records)
        upcoming = sum(1 for r in records if r.date and r.date > today)
        if upcoming:
            future[code] = upcoming
    return totals, future


def collect_counts(
    trips: ScrapedTrips,
    today: Optional[date] = None,
    title: str = DEFAULT_TITLE,
) -> DecodedInput:
    """Turn per-region trip lists into code lists and trip-count maps."""
    today_str = (today or date.today()).isoformat()
    decoded = DecodedInput(title=sanitize_title(title))

    work_totals: Dict[str, int] = {}
    work_future: Dict[str, int] = {}
    pers_totals: Dict[str, int] = {}
    pers_future: Dict[str, int] = {}

    for collection, alphabet, attr, totals_into, future_into in (
        (trips.work_states, decoded.states, "work", work_totals, work_future),
        (trips.work_provinces, decoded.provinces, "work", work_totals, work_future),
        (trips.personal_states, decoded.states, "personal", pers_totals, pers_future),
        (trips.personal_provinces, decoded.provinces, "personal", pers_totals, pers_future),
    ):
        totals, future = _counts(collection, today_str)
        setattr(alphabet, attr, list(totals))
        totals_into.update(totals)
        future_into.update(future)

    decoded.work_trips = work_totals
    decoded.work_trips_future = work_future
    decoded.pers_trips = pers_totals
    decoded.pers_trips_future = pers_future
    return decoded
