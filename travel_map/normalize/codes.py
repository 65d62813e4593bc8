"""Region code tables: valid codes, city aliases, display names."""

from types import MappingProxyType
from typing import Optional

from travel_map.models import RegionKind

STATE_NAMES = MappingProxyType({
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas",
    "CA": "California", "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware",
    "FL": "Florida", "GA": "Georgia", "HI": "Hawaii", "ID": "Idaho",
    "IL": "Illinois", "IN": "Indiana", "IA": "Iowa", "KS": "Kansas",
    "KY": "Kentucky", "LA": "Louisiana", "ME": "Maine", "MD": "Maryland",
    "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota", "MS": "Mississippi",
    "MO": "Missouri", "MT": "Montana", "NE": "Nebraska", "NV": "Nevada",
    "NH": "New Hampshire", "NJ": "New Jersey", "NM": "New Mexico", "NY": "New York",
    "NC": "North Carolina", "ND": "North Dakota", "OH": "Ohio", "OK": "Oklahoma",
    "OR": "Oregon", "PA": "Pennsylvania", "RI": "Rhode Island", "SC": "South Carolina",
    "SD": "South Dakota", "TN": "Tennessee", "TX": "Texas", "UT": "Utah",
    "VT": "Vermont", "VA": "Virginia", "WA": "Washington", "WV": "West Virginia",
    "WI": "Wisconsin", "WY": "Wyoming", "DC": "Washington D.C.",
})

PROVINCE_NAMES = MappingProxyType({
    "AB": "Alberta", "BC": "British Columbia", "MB": "Manitoba",
    "NB": "New Brunswick", "NL": "Newfoundland and Labrador", "NS": "Nova Scotia",
    "NT": "Northwest Territories", "NU": "Nunavut", "ON": "Ontario",
    "PE": "Prince Edward Island", "QC": "Quebec", "SK": "Saskatchewan",
    "YT": "Yukon",
})

COUNTRY_NAMES = MappingProxyType({
    # North America
    "USA": "United States", "CAN": "Canada", "MEX": "Mexico",
    "CRI": "Costa Rica", "PAN": "Panama", "GTM": "Guatemala", "BLZ": "Belize",
    "CUB": "Cuba", "DOM": "Dominican Republic", "JAM": "Jamaica",
    "BHS": "Bahamas", "PRI": "Puerto Rico",
    # South America
    "BRA": "Brazil", "ARG": "Argentina", "CHL": "Chile", "PER": "Peru",
    "COL": "Colombia", "ECU": "Ecuador", "URY": "Uruguay", "BOL": "Bolivia",
    # Europe
    "GBR": "United Kingdom", "ENG": "England", "SCT": "Scotland",
    "WLS": "Wales", "NIR": "Northern Ireland", "IRL": "Ireland",
    "FRA": "France", "DEU": "Germany", "ESP": "Spain", "PRT": "Portugal",
    "ITA": "Italy", "NLD": "Netherlands", "BEL": "Belgium", "LUX": "Luxembourg",
    "CHE": "Switzerland", "AUT": "Austria", "DNK": "Denmark", "SWE": "Sweden",
    "NOR": "Norway", "FIN": "Finland", "ISL": "Iceland", "POL": "Poland",
    "CZE": "Czechia", "SVK": "Slovakia", "HUN": "Hungary", "SVN": "Slovenia",
    "HRV": "Croatia", "GRC": "Greece", "MLT": "Malta", "CYP": "Cyprus",
    "EST": "Estonia", "LVA": "Latvia", "LTU": "Lithuania", "ROU": "Romania",
    "BGR": "Bulgaria", "SRB": "Serbia", "MNE": "Montenegro", "ALB": "Albania",
    "TUR": "Turkey", "MCO": "Monaco",
    # Africa / Middle East
    "MAR": "Morocco", "EGY": "Egypt", "ZAF": "South Africa", "KEN": "Kenya",
    "TZA": "Tanzania", "ISR": "Israel", "JOR": "Jordan", "ARE": "United Arab Emirates",
    "QAT": "Qatar",
    # Asia / Pacific
    "JPN": "Japan", "KOR": "South Korea", "CHN": "China", "HKG": "Hong Kong",
    "TWN": "Taiwan", "SGP": "Singapore", "THA": "Thailand", "VNM": "Vietnam",
    "KHM": "Cambodia", "MYS": "Malaysia", "IDN": "Indonesia", "PHL": "Philippines",
    "IND": "India", "NPL": "Nepal", "AUS": "Australia", "NZL": "New Zealand",
    "FJI": "Fiji",
})

US_STATE_CODES = frozenset(STATE_NAMES)
PROVINCE_CODES = frozenset(PROVINCE_NAMES)
COUNTRY_CODES = frozenset(COUNTRY_NAMES)

# Ordered (alias, code) pairs. The first alias found in the text wins, so
# more specific aliases must come before the generic ones they contain.
CITY_ALIASES = (
    # New York
    ("new york city", "NY"),
    ("nyc", "NY"),
    ("manhattan", "NY"),
    ("brooklyn", "NY"),
    ("albany", "NY"),
    ("ithaca", "NY"),
    # District of Columbia, before anything matching "washington"
    ("washington, d.c.", "DC"),
    ("washington d.c.", "DC"),
    ("washington dc", "DC"),
    # Maine before the Oregon default
    ("portland, me", "ME"),
    ("portland, maine", "ME"),
    ("portland", "OR"),
    # California
    ("san francisco", "CA"),
    ("bay area", "CA"),
    ("silicon valley", "CA"),
    ("los angeles", "CA"),
    ("san diego", "CA"),
    ("muir woods", "CA"),
    # Texas
    ("houston", "TX"),
    ("dallas", "TX"),
    ("austin", "TX"),
    ("lubbock", "TX"),
    ("san antonio", "TX"),
    # Pennsylvania
    ("philly", "PA"),
    ("philadelphia", "PA"),
    ("pittsburgh", "PA"),
    ("state college", "PA"),
    # Other states
    ("chicago", "IL"),
    ("boston", "MA"),
    ("atlanta", "GA"),
    ("charlotte", "NC"),
    ("raleigh", "NC"),
    ("new orleans", "LA"),
    ("nola", "LA"),
    ("las vegas", "NV"),
    ("vegas", "NV"),
    ("honolulu", "HI"),
    ("oahu", "HI"),
    ("maui", "HI"),
    ("seattle", "WA"),
    ("detroit", "MI"),
    ("cleveland", "OH"),
    ("columbus, ga", "GA"),
    ("columbus", "OH"),
    ("indianapolis", "IN"),
    ("miami", "FL"),
    ("orlando", "FL"),
    ("tallahassee", "FL"),
    ("phoenix", "AZ"),
    ("denver", "CO"),
    ("nashville", "TN"),
    ("atlantic city", "NJ"),
    ("oklahoma city", "OK"),
    # Canada
    ("toronto", "ON"),
    ("ottawa", "ON"),
    ("montreal", "QC"),
    ("quebec city", "QC"),
    ("vancouver", "BC"),
    ("calgary", "AB"),
    ("edmonton", "AB"),
    ("winnipeg", "MB"),
    ("st. john's", "NL"),
)


def kind_of(code: str) -> Optional[RegionKind]:
    """Return the alphabet a code belongs to, or None if it's in none."""
    code = (code or "").strip().upper()
    if code in US_STATE_CODES:
        return RegionKind.STATE
    if code in PROVINCE_CODES:
        return RegionKind.PROVINCE
    if code in COUNTRY_CODES:
        return RegionKind.COUNTRY
    return None


def is_valid(code: str, kind: RegionKind) -> bool:
    """Check a canonical code against a single alphabet (length + membership)."""
    if kind == RegionKind.COUNTRY:
        return len(code) == 3 and code in COUNTRY_CODES
    if len(code) != 2:
        return False
    if kind == RegionKind.STATE:
        return code in US_STATE_CODES
    return code in PROVINCE_CODES


def display_name(code: str) -> str:
    code = code.upper()
    for names in (STATE_NAMES, PROVINCE_NAMES, COUNTRY_NAMES):
        if code in names:
            return names[code]
    return code
