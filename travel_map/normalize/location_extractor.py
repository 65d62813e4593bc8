"""Pull US state / Canadian province codes out of free-text locations."""

import re
from typing import Callable, Iterable, List, Optional

from travel_map.models import LocationMatch, RegionKind
from travel_map.normalize.codes import CITY_ALIASES, PROVINCE_CODES, US_STATE_CODES

Strategy = Callable[[str], Optional[LocationMatch]]

_ALIAS_PATTERNS = tuple(
    (re.compile(r'(?<![A-Za-z0-9])' + re.escape(alias) + r'(?![A-Za-z0-9])', re.I), code)
    for alias, code in CITY_ALIASES
)

_CANADA = re.compile(r'\bcanada\b', re.I)
_CANADA_SUFFIX = re.compile(r',\s*([A-Za-z]{2})\s*,\s*canada\b', re.I)
_COMMA_SUFFIX = re.compile(r',\s*([A-Z]{2})(?=\s|,|\d|$)')
_TRAILING = re.compile(r'(?<![A-Za-z])([A-Z]{2})$')
_BARE_TOKEN = re.compile(r'(?<![A-Za-z])([A-Z]{2})(?![A-Za-z])')

# "OH & MI", "Austin + Houston", "NY/NJ", "Boston and Providence"
_SEPARATORS = re.compile(r'\s*(?:&|\+|/|\band\b)\s*', re.I)


def _to_match(code: str) -> Optional[LocationMatch]:
    """Validate a token against states first, then provinces."""
    code = code.upper()
    if code in US_STATE_CODES:
        return LocationMatch(code, RegionKind.STATE)
    if code in PROVINCE_CODES:
        return LocationMatch(code, RegionKind.PROVINCE)
    return None


def _first_valid(pattern: re.Pattern, text: str) -> Optional[LocationMatch]:
    for m in pattern.finditer(text):
        match = _to_match(m.group(1))
        if match:
            return match
    return None


# ---------------------------------------------------------------------------
# Strategies, in priority order
# ---------------------------------------------------------------------------

def match_alias(text: str) -> Optional[LocationMatch]:
    """City/nickname lookup. Table order decides which alias wins."""
    for pattern, code in _ALIAS_PATTERNS:
        if pattern.search(text):
            return _to_match(code)
    return None


def match_canada(text: str) -> Optional[LocationMatch]:
    """'Toronto, ON, Canada' style.

    The token right before ", Canada" is taken in any case. Otherwise only
    upper-case tokens count, so words like "on" stay words.
    """
    if not _CANADA.search(text):
        return None
    for m in _CANADA_SUFFIX.finditer(text):
        code = m.group(1).upper()
        if code in PROVINCE_CODES:
            return LocationMatch(code, RegionKind.PROVINCE)
    for m in _BARE_TOKEN.finditer(text):
        if m.group(1) in PROVINCE_CODES:
            return LocationMatch(m.group(1), RegionKind.PROVINCE)
    return None


def match_comma_suffix(text: str) -> Optional[LocationMatch]:
    """'City, ST', 'City, ST 12345', 'City, ST, extra'."""
    return _first_valid(_COMMA_SUFFIX, text)


def match_trailing(text: str) -> Optional[LocationMatch]:
    return _first_valid(_TRAILING, text.strip())


def match_bare(text: str) -> Optional[LocationMatch]:
    """Last resort: any standalone upper-case 2-letter token."""
    return _first_valid(_BARE_TOKEN, text)


STRATEGIES = (
    match_alias,
    match_canada,
    match_comma_suffix,
    match_trailing,
    match_bare,
)


def first_match(strategies: Iterable[Strategy], text: str) -> Optional[LocationMatch]:
    """Apply strategies in order; the first non-None result wins."""
    for strategy in strategies:
        result = strategy(text)
        if result is not None:
            return result
    return None


def extract_one(text: str) -> Optional[LocationMatch]:
    """Extract a single state/province code from a location string."""
    if not text or not text.strip():
        return None
    return first_match(STRATEGIES, text)


def extract_all(text: str) -> List[LocationMatch]:
    """Extract every location from separator-joined text, deduplicated by code."""
    if not text:
        return []

    results: List[LocationMatch] = []
    seen = set()
    for part in _SEPARATORS.split(text):
        part = part.strip()
        if not part:
            continue
        match = extract_one(part)
        if match and match.code not in seen:
            seen.add(match.code)
            results.append(match)
    return results
