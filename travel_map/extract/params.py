"""Decode (and re-encode) URL-query-shaped travel map parameters."""

import re
from typing import Dict, List, Mapping, Optional
from urllib.parse import parse_qsl, urlencode

from travel_map.config import DEFAULT_TITLE, MAX_TRIP_COUNT, TITLE_MAX_CHARS
from travel_map.models import DecodedInput, RegionKind
from travel_map.normalize.codes import is_valid, kind_of

# param name -> (alphabet, AlphabetInput attribute)
LIST_PARAMS = (
    ("work", RegionKind.STATE, "work"),
    ("personal", RegionKind.STATE, "personal"),
    ("workFuture", RegionKind.STATE, "work_future"),
    ("personalFuture", RegionKind.STATE, "personal_future"),
    ("prov", RegionKind.PROVINCE, "work"),
    ("provPers", RegionKind.PROVINCE, "personal"),
    ("provFuture", RegionKind.PROVINCE, "work_future"),
    ("provPersFuture", RegionKind.PROVINCE, "personal_future"),
    ("workCountries", RegionKind.COUNTRY, "work"),
    ("persCountries", RegionKind.COUNTRY, "personal"),
    ("workCountriesFuture", RegionKind.COUNTRY, "work_future"),
    ("persCountriesFuture", RegionKind.COUNTRY, "personal_future"),
)

# param name -> DecodedInput attribute
COUNT_PARAMS = (
    ("workTrips", "work_trips"),
    ("persTrips", "pers_trips"),
    ("workTripsFuture", "work_trips_future"),
    ("persTripsFuture", "pers_trips_future"),
)

_TAGS = re.compile(r'<[^>]*>')
_UNSAFE_CHARS = re.compile(r'[<>"\'`]')


def parse_code_list(raw: Optional[str], kind: RegionKind) -> List[str]:
    """'ny, CA,ZZ,NY' -> ['NY', 'CA'] for the state alphabet."""
    codes: List[str] = []
    for token in (raw or "").split(","):
        code = token.strip().upper()
        if code and is_valid(code, kind) and code not in codes:
            codes.append(code)
    return codes


def parse_count_pairs(raw: Optional[str]) -> Dict[str, int]:
    """'NY:5,CA:3' -> {'NY': 5, 'CA': 3}; malformed or out-of-range pairs are dropped."""
    counts: Dict[str, int] = {}
    for pair in (raw or "").split(","):
        code, sep, count = pair.partition(":")
        code = code.strip().upper()
        count = count.strip()
        if not sep or not code or not count:
            continue
        if kind_of(code) is None:
            continue
        # plain ASCII digits only; int() would also take "+5", "1_000", "٣"
        if not (count.isascii() and count.isdigit()):
            continue
        n = int(count)
        if 0 < n < MAX_TRIP_COUNT:
            counts[code] = n
    return counts


def sanitize_title(raw: Optional[str]) -> str:
    title = _TAGS.sub("", raw or "")
    title = _UNSAFE_CHARS.sub("", title).strip()
    title = title[:TITLE_MAX_CHARS].strip()
    return title or DEFAULT_TITLE


def decode_params(raw: Mapping[str, str]) -> DecodedInput:
    """Validate raw string parameters into a DecodedInput. Never raises on bad data."""
    decoded = DecodedInput()

    for name, kind, attr in LIST_PARAMS:
        setattr(decoded.alphabet(kind), attr, parse_code_list(raw.get(name), kind))

    for name, attr in COUNT_PARAMS:
        setattr(decoded, attr, parse_count_pairs(raw.get(name)))

    decoded.title = sanitize_title(raw.get("title"))
    return decoded


def decode_query(query: str) -> DecodedInput:
    """Decode a URL query string ('work=NY,CA&workTrips=NY:5'). Last value wins."""
    return decode_params(dict(parse_qsl(query.lstrip("?"), keep_blank_values=True)))


def encode_params(decoded: DecodedInput) -> Dict[str, str]:
    """Inverse of decode_params; empty lists and maps are omitted."""
    params: Dict[str, str] = {}

    for name, kind, attr in LIST_PARAMS:
        codes = getattr(decoded.alphabet(kind), attr)
        if codes:
            params[name] = ",".join(codes)

    for name, attr in COUNT_PARAMS:
        counts = getattr(decoded, attr)
        if counts:
            params[name] = ",".join(f"{code}:{n}" for code, n in counts.items())

    if decoded.title:
        params["title"] = decoded.title
    return params


def build_embed_url(base_url: str, decoded: DecodedInput) -> str:
    """URL for embedding the map (e.g. in a wiki iframe)."""
    query = urlencode(encode_params(decoded), safe=",:")
    return f"{base_url.rstrip('?')}?{query}" if query else base_url
