"""Data models for the travel map pipeline."""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class RegionKind(str, Enum):
    STATE = "state"
    PROVINCE = "province"
    COUNTRY = "country"


class Category(str, Enum):
    UNVISITED = "unvisited"
    WORK = "work"
    PERSONAL = "personal"
    BOTH = "both"
    FUTURE_ONLY = "futureOnly"


class Collection(str, Enum):
    WORK = "work"
    PERSONAL = "personal"


class TableKind(str, Enum):
    GOLIVE = "golive"
    IMMERSION = "immersion"
    ADHOC = "adhoc"
    PERSONAL = "personal"


@dataclass(frozen=True)
class LocationMatch:
    code: str  # canonical upper-case code
    kind: RegionKind  # STATE or PROVINCE


@dataclass(frozen=True)
class TripRecord:
    date: Optional[str]  # ISO-8601, None when the date cell didn't parse
    location_text: str
    attributes_items: Tuple[Tuple[str, str], ...] = ()

    @property
    def attributes(self) -> Dict[str, str]:
        return dict(self.attributes_items)


TripCollection = Dict[str, List[TripRecord]]


@dataclass
class ScrapedTrips:
    """Per-region trip records pulled from the wiki tables."""
    work_states: TripCollection = field(default_factory=dict)
    work_provinces: TripCollection = field(default_factory=dict)
    personal_states: TripCollection = field(default_factory=dict)
    personal_provinces: TripCollection = field(default_factory=dict)

    def bucket(self, collection: Collection, kind: RegionKind) -> TripCollection:
        if collection == Collection.WORK:
            return self.work_provinces if kind == RegionKind.PROVINCE else self.work_states
        return self.personal_provinces if kind == RegionKind.PROVINCE else self.personal_states

    def add(self, collection: Collection, match: LocationMatch, record: TripRecord):
        self.bucket(collection, match.kind).setdefault(match.code, []).append(record)

    def __len__(self):
        return sum(
            len(records)
            for bucket in (self.work_states, self.work_provinces,
                           self.personal_states, self.personal_provinces)
            for records in bucket.values()
        )


@dataclass
class AlphabetInput:
    """Ordered, deduplicated code lists for one alphabet."""
    work: List[str] = field(default_factory=list)
    personal: List[str] = field(default_factory=list)
    work_future: List[str] = field(default_factory=list)
    personal_future: List[str] = field(default_factory=list)

    def referenced(self) -> List[str]:
        seen: Dict[str, None] = {}
        for codes in (self.work, self.personal, self.work_future, self.personal_future):
            for code in codes:
                seen.setdefault(code, None)
        return list(seen)


@dataclass
class DecodedInput:
    states: AlphabetInput = field(default_factory=AlphabetInput)
    provinces: AlphabetInput = field(default_factory=AlphabetInput)
    countries: AlphabetInput = field(default_factory=AlphabetInput)
    work_trips: Dict[str, int] = field(default_factory=dict)
    pers_trips: Dict[str, int] = field(default_factory=dict)
    work_trips_future: Dict[str, int] = field(default_factory=dict)
    pers_trips_future: Dict[str, int] = field(default_factory=dict)
    title: str = ""

    def alphabet(self, kind: RegionKind) -> AlphabetInput:
        return {
            RegionKind.STATE: self.states,
            RegionKind.PROVINCE: self.provinces,
            RegionKind.COUNTRY: self.countries,
        }[kind]


@dataclass
class RegionStat:
    code: str
    kind: RegionKind
    name: str
    category: Category
    work_count: int = 0
    personal_count: int = 0
    work_future_count: int = 0
    personal_future_count: int = 0
    past_work_count: int = 0
    past_personal_count: int = 0
    has_future: bool = False

    @property
    def total_count(self) -> int:
        return self.work_count + self.personal_count


@dataclass
class MapSummary:
    states_visited: int = 0
    states_pct: int = 0
    work_only: int = 0
    personal_only: int = 0
    both: int = 0
    future_only: int = 0
    provinces_visited: int = 0
    provinces_future: int = 0
    countries_visited: int = 0
    countries_future: int = 0
    max_trip_count: int = 0
    top_regions: List[Dict] = field(default_factory=list)  # {"code", "name", "total"}


@dataclass
class RegionStats:
    regions: Dict[str, RegionStat] = field(default_factory=dict)
    summary: MapSummary = field(default_factory=MapSummary)
    title: str = ""

    def category(self, code: str) -> Category:
        stat = self.regions.get(code.upper())
        return stat.category if stat else Category.UNVISITED

    def categories(self) -> Dict[str, str]:
        return {code: s.category.value for code, s in self.regions.items()}

    def total_trip_counts(self) -> Dict[str, int]:
        return {code: s.total_count for code, s in self.regions.items()}

    def to_dict(self) -> dict:
        regions = {}
        for code, s in self.regions.items():
            entry = asdict(s)
            entry["kind"] = s.kind.value
            entry["category"] = s.category.value
            entry["total_count"] = s.total_count
            regions[code] = entry
        return {
            "title": self.title,
            "categories": self.categories(),
            "trip_counts": self.total_trip_counts(),
            "regions": regions,
            "summary": asdict(self.summary),
        }
