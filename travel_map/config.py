"""Configuration: .env loading, paths, constants."""

import os
from pathlib import Path
from dotenv import load_dotenv

# Project root = parent of travel_map/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# --- Wiki source ---
WIKI_URL = os.getenv("WIKI_URL", "")
WIKI_TIMEOUT = int(os.getenv("WIKI_TIMEOUT", "20"))  # seconds

# --- Paths ---
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(PROJECT_ROOT / "output")))

# --- Input limits ---
DEFAULT_TITLE = "Travel Map"
MAP_TITLE = os.getenv("MAP_TITLE", DEFAULT_TITLE)
TITLE_MAX_CHARS = 100
MAX_TRIP_COUNT = 100000  # counts at or above this are rejected

# --- Stats ---
# DC is a valid state code and is classified and drawn, but "N / 50 states"
# counts only the 50 states, so summarize() leaves it out of states_visited.
US_STATE_TOTAL = 50
TOP_N = int(os.getenv("TOP_N", "5"))

# --- Rendering ---
LEAFLET_VERSION = "1.9.4"
US_STATES_GEOJSON_URL = "https://raw.githubusercontent.com/PublicaMundi/MappingAPI/master/data/geojson/us-states.json"
CANADA_GEOJSON_URL = "https://raw.githubusercontent.com/codeforamerica/click_that_hood/master/public/data/canada.geojson"
WORLD_GEOJSON_URL = "https://raw.githubusercontent.com/datasets/geo-countries/master/data/countries.geojson"
