"""Per-region categories, trip counts and map-wide statistics."""

from typing import Dict, List

from travel_map.config import TOP_N, US_STATE_TOTAL
from travel_map.models import (
    AlphabetInput,
    Category,
    DecodedInput,
    MapSummary,
    RegionKind,
    RegionStat,
    RegionStats,
)
from travel_map.normalize.codes import display_name, kind_of

_VISITED = (Category.WORK, Category.PERSONAL, Category.BOTH)


def _referenced_codes(decoded: DecodedInput, kind: RegionKind) -> List[str]:
    """Codes of one alphabet in first-seen order: lists first, then count maps."""
    seen: Dict[str, None] = dict.fromkeys(decoded.alphabet(kind).referenced())
    for counts in (decoded.work_trips, decoded.pers_trips,
                   decoded.work_trips_future, decoded.pers_trips_future):
        for code in counts:
            if kind_of(code) == kind:
                seen.setdefault(code, None)
    return list(seen)


def _was_visited(code: str, totals: Dict[str, int], past: int,
                 listed: List[str], future_flag: bool) -> bool:
    """Counts decide when present; otherwise list membership without a future signal."""
    if code in totals:
        return past > 0
    return code in listed and not future_flag


def classify_region(code: str, kind: RegionKind, alphabet: AlphabetInput,
                    decoded: DecodedInput) -> RegionStat:
    work_total = decoded.work_trips.get(code, 0)
    pers_total = decoded.pers_trips.get(code, 0)
    work_future = decoded.work_trips_future.get(code, 0)
    pers_future = decoded.pers_trips_future.get(code, 0)

    # future counts above the total are malformed input: clamp, never negative
    past_work = max(0, work_total - work_future)
    past_pers = max(0, pers_total - pers_future)

    work_future_flag = work_future > 0 or code in alphabet.work_future
    pers_future_flag = pers_future > 0 or code in alphabet.personal_future
    has_future = work_future_flag or pers_future_flag

    work_past = _was_visited(code, decoded.work_trips, past_work, alphabet.work, work_future_flag)
    pers_past = _was_visited(code, decoded.pers_trips, past_pers, alphabet.personal, pers_future_flag)

    if work_past and pers_past:
        category = Category.BOTH
    elif work_past:
        category = Category.WORK
    elif pers_past:
        category = Category.PERSONAL
    elif has_future:
        category = Category.FUTURE_ONLY
    else:
        category = Category.UNVISITED

    return RegionStat(
        code=code,
        kind=kind,
        name=display_name(code),
        category=category,
        work_count=work_total,
        personal_count=pers_total,
        work_future_count=work_future,
        personal_future_count=pers_future,
        past_work_count=past_work,
        past_personal_count=past_pers,
        has_future=has_future,
    )


def _percent(part: int, whole: int) -> int:
    """Integer percentage, rounded half up."""
    return (part * 100 * 2 + whole) // (whole * 2)


def summarize(regions: Dict[str, RegionStat], top_n: int = TOP_N) -> MapSummary:
    by_kind: Dict[RegionKind, List[RegionStat]] = {kind: [] for kind in RegionKind}
    for stat in regions.values():
        by_kind[stat.kind].append(stat)

    # DC shows on the map but is not one of the 50
    states = [s for s in by_kind[RegionKind.STATE] if s.code != "DC"]
    state_cats = [s.category for s in states]
    states_visited = sum(1 for c in state_cats if c in _VISITED)

    def visited(kind: RegionKind) -> int:
        return sum(1 for s in by_kind[kind] if s.category in _VISITED)

    def future_only(kind: RegionKind) -> int:
        return sum(1 for s in by_kind[kind] if s.category == Category.FUTURE_ONLY)

    ranked = sorted(
        (s for s in regions.values() if s.total_count > 0),
        key=lambda s: s.total_count,
        reverse=True,
    )

    return MapSummary(
        states_visited=states_visited,
        states_pct=_percent(states_visited, US_STATE_TOTAL),
        work_only=state_cats.count(Category.WORK),
        personal_only=state_cats.count(Category.PERSONAL),
        both=state_cats.count(Category.BOTH),
        future_only=state_cats.count(Category.FUTURE_ONLY),
        provinces_visited=visited(RegionKind.PROVINCE),
        provinces_future=future_only(RegionKind.PROVINCE),
        countries_visited=visited(RegionKind.COUNTRY),
        countries_future=future_only(RegionKind.COUNTRY),
        max_trip_count=max((s.total_count for s in regions.values()), default=0),
        top_regions=[
            {"code": s.code, "name": s.name, "total": s.total_count}
            for s in ranked[:top_n]
        ],
    )


def classify(decoded: DecodedInput, top_n: int = TOP_N) -> RegionStats:
    """Classify every referenced region and compute the map summary."""
    regions: Dict[str, RegionStat] = {}
    for kind in (RegionKind.STATE, RegionKind.PROVINCE, RegionKind.COUNTRY):
        alphabet = decoded.alphabet(kind)
        for code in _referenced_codes(decoded, kind):
            regions[code] = classify_region(code, kind, alphabet, decoded)

    return RegionStats(
        regions=regions,
        summary=summarize(regions, top_n),
        title=decoded.title,
    )
