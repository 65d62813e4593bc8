"""Tests for state/province extraction from free-text locations."""

import pytest

from travel_map.extract.table_parser import Row, parse_trips
from travel_map.models import LocationMatch, RegionKind
from travel_map.normalize.codes import CITY_ALIASES, PROVINCE_CODES, US_STATE_CODES
from travel_map.normalize.location_extractor import (
    extract_all,
    extract_one,
    first_match,
    match_alias,
    match_bare,
    match_canada,
    match_comma_suffix,
    match_trailing,
)

STATE = RegionKind.STATE
PROVINCE = RegionKind.PROVINCE


class TestCodeTables:
    def test_sizes(self):
        assert len(US_STATE_CODES) == 51
        assert "DC" in US_STATE_CODES
        assert len(PROVINCE_CODES) == 13

    def test_state_and_province_codes_are_disjoint(self):
        assert not US_STATE_CODES & PROVINCE_CODES

    def test_every_alias_maps_to_a_known_code(self):
        for alias, code in CITY_ALIASES:
            assert code in US_STATE_CODES or code in PROVINCE_CODES, alias


class TestAliases:
    @pytest.mark.parametrize("text", [
        "Remote - nyc office",
        "NYC",
        "(nyc)",
        "Visiting New York City!",
    ])
    def test_alias_any_case_and_punctuation(self, text):
        assert extract_one(text) == LocationMatch("NY", STATE)

    def test_alias_must_be_whole_word(self):
        # "nyc" inside a longer word is not an alias hit
        assert match_alias("Sanyco Industries") is None

    def test_specific_alias_wins_over_generic(self):
        assert extract_one("Portland, Maine") == LocationMatch("ME", STATE)
        assert extract_one("Portland") == LocationMatch("OR", STATE)

    def test_table_order_decides_between_two_aliases(self):
        # both appear in the text; the alias listed first in the table wins
        assert match_alias("Miami or Atlanta") == LocationMatch("GA", STATE)
        assert match_alias("Boston or Chicago") == LocationMatch("IL", STATE)

    def test_alias_to_province(self):
        assert extract_one("Downtown Toronto") == LocationMatch("ON", PROVINCE)

    def test_alias_beats_explicit_code(self):
        assert extract_one("Columbus, GA") == LocationMatch("GA", STATE)
        assert extract_one("Cleveland, TN") == LocationMatch("OH", STATE)


class TestCanada:
    def test_province_with_canada_suffix(self):
        assert extract_one("Toronto, ON, Canada") == LocationMatch("ON", PROVINCE)
        assert extract_one("Kingston, ON, Canada") == LocationMatch("ON", PROVINCE)

    def test_any_case_token_when_canada_present(self):
        assert match_canada("Kingston, on, canada") == LocationMatch("ON", PROVINCE)

    def test_no_canada_word(self):
        assert match_canada("Kingston, ON") is None

    def test_canada_without_a_province(self):
        assert match_canada("Somewhere in Canada") is None

    @pytest.mark.parametrize("text, code", [
        ("Ski trip on Whistler, BC, Canada", "BC"),
        ("Work on site in Halifax, NS, Canada", "NS"),
        ("Stayed on Prince Edward Island, PE, Canada", "PE"),
    ])
    def test_word_on_is_not_ontario(self, text, code):
        assert extract_one(text) == LocationMatch(code, PROVINCE)

    def test_unanchored_token_must_be_upper_case(self):
        assert match_canada("Drove on to Banff AB Canada") == LocationMatch("AB", PROVINCE)
        assert match_canada("Drove on into Canada") is None

    def test_personal_row_with_word_on(self):
        trips = parse_trips([Row(cells=["Road trip on Cabot Trail, NS, Canada"])], "personal")
        assert list(trips.personal_provinces) == ["NS"]


class TestCodeStrategies:
    def test_comma_suffix(self):
        assert extract_one("Madison, WI") == LocationMatch("WI", STATE)
        assert match_comma_suffix("Rochester, MN 55901") == LocationMatch("MN", STATE)
        assert match_comma_suffix("Burlington, VT, USA") == LocationMatch("VT", STATE)

    def test_comma_suffix_province_without_canada(self):
        assert extract_one("Kingston, ON") == LocationMatch("ON", PROVINCE)

    def test_comma_suffix_skips_invalid_token(self):
        assert match_comma_suffix("Foo, ZZ, Bar, KS") == LocationMatch("KS", STATE)

    def test_trailing_code(self):
        assert match_trailing("Appleton WI  ") == LocationMatch("WI", STATE)
        assert extract_one("Appleton WI") == LocationMatch("WI", STATE)

    def test_bare_code(self):
        assert match_bare("NC DHHS office") == LocationMatch("NC", STATE)
        assert extract_one("Go-Live CC in the SC lowcountry") == LocationMatch("SC", STATE)

    def test_lower_case_two_letter_words_are_ignored(self):
        # "in", "or", "me" must not become Indiana, Oregon, Maine
        assert extract_one("trip in or me") is None

    def test_invalid_code_is_no_match(self):
        assert extract_one("Some City, ZZ") is None

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty(self, text):
        assert extract_one(text) is None
        assert extract_all(text) == []


class TestFirstMatch:
    def test_first_success_wins_and_later_strategies_are_not_called(self):
        calls = []

        def a(text):
            calls.append("a")
            return None

        def b(text):
            calls.append("b")
            return LocationMatch("NY", STATE)

        def c(text):
            calls.append("c")
            return LocationMatch("CA", STATE)

        assert first_match([a, b, c], "x") == LocationMatch("NY", STATE)
        assert calls == ["a", "b"]

    def test_none_when_all_fail(self):
        assert first_match([lambda t: None], "x") is None


class TestExtractAll:
    def test_split_and_order(self):
        assert extract_all("OH & MI") == [
            LocationMatch("OH", STATE),
            LocationMatch("MI", STATE),
        ]

    def test_duplicates_dropped(self):
        assert extract_all("TX & TX") == [LocationMatch("TX", STATE)]
        assert extract_all("Austin & Houston") == [LocationMatch("TX", STATE)]

    @pytest.mark.parametrize("text", ["NY/NJ", "NY + NJ", "NY and NJ", "NY AND NJ"])
    def test_separators(self, text):
        assert [m.code for m in extract_all(text)] == ["NY", "NJ"]

    def test_mixed_states_and_provinces(self):
        assert extract_all("Buffalo, NY & Toronto") == [
            LocationMatch("NY", STATE),
            LocationMatch("ON", PROVINCE),
        ]

    def test_parts_without_match_are_skipped(self):
        assert extract_all("Muir Woods & Bodega Bay") == [LocationMatch("CA", STATE)]
        assert extract_all("Somewhere & Nowhere") == []

    @pytest.mark.parametrize("text", [
        "OH & MI",
        "Buffalo, NY & Toronto & Madison, WI",
        "NYC / Philly / Boston",
        "Kingston, ON, Canada and Calgary",
    ])
    def test_rendering_codes_back_reproduces_the_set(self, text):
        first = extract_all(text)
        again = extract_all(" & ".join(m.code for m in first))
        assert again == first
