"""Turn wiki trip tables into per-region trip records."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from travel_map.models import (
    Collection,
    LocationMatch,
    ScrapedTrips,
    TableKind,
    TripRecord,
)
from travel_map.normalize.date_parser import to_iso
from travel_map.normalize.location_extractor import extract_all, extract_one

EXCLUDE_ATTR = "data-map-exclude"
EXCLUDE_CLASS = "map-exclude"


@dataclass(frozen=True)
class TableSchema:
    kind: TableKind
    table_class: str
    collection: Collection
    location_column: int  # negative counts from the end
    date_column: int
    min_columns: int
    multi_location: bool
    trip_type: str
    attribute_columns: Tuple[Tuple[str, int], ...] = ()


TABLE_SCHEMAS = {
    # Customer | Go-Live Date | Role | Nearest Major City
    TableKind.GOLIVE: TableSchema(
        kind=TableKind.GOLIVE,
        table_class="golive-table",
        collection=Collection.WORK,
        location_column=-1,
        date_column=1,
        min_columns=4,
        multi_location=True,
        trip_type="Go-Live",
        attribute_columns=(("customer", 0), ("role", 2)),
    ),
    # Customer | Dates | Role | Location
    TableKind.IMMERSION: TableSchema(
        kind=TableKind.IMMERSION,
        table_class="immersion-table",
        collection=Collection.WORK,
        location_column=-1,
        date_column=1,
        min_columns=4,
        multi_location=True,
        trip_type="Immersion",
        attribute_columns=(("customer", 0), ("role", 2)),
    ),
    # Customer | Trip | Dates | Location
    TableKind.ADHOC: TableSchema(
        kind=TableKind.ADHOC,
        table_class="adhoc-trip-table",
        collection=Collection.WORK,
        location_column=3,
        date_column=2,
        min_columns=4,
        multi_location=False,
        trip_type="Customer",
        attribute_columns=(("customer", 0), ("trip", 1)),
    ),
    # Destination | Dates | Reason
    TableKind.PERSONAL: TableSchema(
        kind=TableKind.PERSONAL,
        table_class="personal-trips-table",
        collection=Collection.PERSONAL,
        location_column=0,
        date_column=1,
        min_columns=1,
        multi_location=True,
        trip_type="Personal",
        attribute_columns=(("destination", 0), ("reason", 2)),
    ),
}


@dataclass
class Row:
    cells: List[str] = field(default_factory=list)
    excluded: bool = False
    header: bool = False


def _cell(cells: List[str], index: int) -> Optional[str]:
    if index < 0:
        index += len(cells)
    if 0 <= index < len(cells):
        return cells[index]
    return None


def _record_for(row: Row, schema: TableSchema, location_text: str) -> TripRecord:
    attributes = [("type", schema.trip_type)]
    for name, index in schema.attribute_columns:
        value = _cell(row.cells, index)
        if value:
            attributes.append((name, value))
    return TripRecord(
        date=to_iso(_cell(row.cells, schema.date_column) or ""),
        location_text=location_text,
        attributes_items=tuple(attributes),
    )


def parse_trips(
    rows: Iterable[Row],
    kind: TableKind,
    into: Optional[ScrapedTrips] = None,
) -> ScrapedTrips:
    """Accumulate trip records from one table's rows.

    Best effort: rows without a recognizable location are skipped, rows with
    an unparseable date are kept with date=None.
    """
    schema = TABLE_SCHEMAS[TableKind(kind)]
    trips = into if into is not None else ScrapedTrips()

    for row in rows:
        if row.excluded or row.header:
            continue
        if len(row.cells) < schema.min_columns:
            continue

        location_text = (_cell(row.cells, schema.location_column) or "").strip()
        if not location_text:
            continue

        matches: List[LocationMatch]
        if schema.multi_location:
            matches = extract_all(location_text)
        else:
            single = extract_one(location_text)
            matches = [single] if single else []

        if not matches:
            continue

        record = _record_for(row, schema, location_text)
        for match in matches:
            trips.add(schema.collection, match, record)

    return trips


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

def rows_from_table(table: Tag) -> List[Row]:
    """Convert a <table> element into Rows (td text, header and exclude flags)."""
    rows = []
    for tr in table.find_all("tr"):
        tds = tr.find_all("td")
        rows.append(Row(
            cells=[td.get_text(" ", strip=True) for td in tds],
            excluded=tr.has_attr(EXCLUDE_ATTR) or EXCLUDE_CLASS in (tr.get("class") or []),
            header=not tds and tr.find("th") is not None,
        ))
    return rows


def parse_wiki_html(html: str) -> ScrapedTrips:
    """Parse every recognized trip table in a wiki page."""
    soup = BeautifulSoup(html or "", "html.parser")
    trips = ScrapedTrips()
    for kind, schema in TABLE_SCHEMAS.items():
        for table in soup.find_all("table", class_=schema.table_class):
            parse_trips(rows_from_table(table), kind, into=trips)
    return trips
