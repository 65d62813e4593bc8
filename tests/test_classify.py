"""Tests for region classification and map statistics."""

import json

import pytest

from travel_map.assemble.classify import classify
from travel_map.extract.params import decode_params, decode_query
from travel_map.models import Category, DecodedInput, RegionKind
from travel_map.normalize.codes import STATE_NAMES


def _classify(**params):
    return classify(decode_params(params))


class TestCategories:
    def test_work_with_counts(self):
        stats = classify(decode_query("work=NY,CA&workTrips=NY:5,CA:3"))
        assert stats.category("NY") == Category.WORK
        assert stats.total_trip_counts()["NY"] == 5
        assert stats.regions["CA"].total_count == 3

    def test_both(self):
        stats = _classify(workTrips="NY:1", persTrips="NY:1")
        assert stats.category("NY") == Category.BOTH

    def test_personal(self):
        assert _classify(persTrips="HI:2").category("HI") == Category.PERSONAL

    def test_future_only(self):
        stats = _classify(workFuture="DE")
        assert stats.category("DE") == Category.FUTURE_ONLY
        assert stats.regions["DE"].has_future

    def test_unknown_code_is_unvisited(self):
        assert _classify(work="NY").category("WY") == Category.UNVISITED

    def test_future_clamp(self):
        stats = _classify(workTrips="FL:3", workTripsFuture="FL:5")
        fl = stats.regions["FL"]
        assert fl.past_work_count == 0
        assert fl.category == Category.FUTURE_ONLY
        assert fl.has_future

    def test_past_is_total_minus_future(self):
        stats = _classify(workTrips="TX:14", workTripsFuture="TX:2", persTrips="TX:2")
        tx = stats.regions["TX"]
        assert tx.past_work_count == 12
        assert tx.past_personal_count == 2
        assert tx.total_count == 16
        assert tx.category == Category.BOTH

    def test_all_future_work_with_past_personal(self):
        stats = _classify(workTrips="AL:1", workTripsFuture="AL:1", persTrips="AL:1")
        assert stats.category("AL") == Category.PERSONAL

    def test_counts_win_over_list_membership(self):
        # listed for work, but every counted work trip is still ahead
        stats = _classify(work="PA", workTrips="PA:2", workTripsFuture="PA:2")
        assert stats.category("PA") == Category.FUTURE_ONLY

    def test_list_fallback_without_counts(self):
        stats = _classify(work="NY,CA", personal="CA")
        assert stats.category("NY") == Category.WORK
        assert stats.category("CA") == Category.BOTH
        assert stats.regions["CA"].total_count == 0

    def test_list_fallback_overridden_by_future_list(self):
        stats = _classify(work="DE", workFuture="DE")
        assert stats.category("DE") == Category.FUTURE_ONLY

    def test_future_in_other_collection_keeps_past_visit(self):
        stats = _classify(work="DE", personalFuture="DE")
        assert stats.category("DE") == Category.WORK
        assert stats.regions["DE"].has_future

    def test_provinces_and_countries(self):
        stats = _classify(prov="NL", provPers="BC", provFuture="QC",
                          persCountries="FRA", persCountriesFuture="JPN",
                          workTrips="NL:1")
        assert stats.category("NL") == Category.WORK
        assert stats.category("BC") == Category.PERSONAL
        assert stats.category("QC") == Category.FUTURE_ONLY
        assert stats.category("FRA") == Category.PERSONAL
        assert stats.category("JPN") == Category.FUTURE_ONLY
        assert stats.regions["NL"].kind == RegionKind.PROVINCE
        assert stats.regions["FRA"].kind == RegionKind.COUNTRY

    def test_count_only_region_is_classified_in_its_alphabet(self):
        stats = _classify(persTrips="ON:2,ITA:1")
        assert stats.regions["ON"].kind == RegionKind.PROVINCE
        assert stats.regions["ITA"].kind == RegionKind.COUNTRY
        assert stats.category("ITA") == Category.PERSONAL

    def test_missing_counts_default_to_zero(self):
        stats = classify(DecodedInput())
        assert stats.regions == {}
        assert stats.summary.max_trip_count == 0
        assert stats.summary.top_regions == []


class TestSummary:
    def test_percentage(self):
        states = [c for c in STATE_NAMES if c != "DC"][:25]
        stats = _classify(work=",".join(states))
        assert stats.summary.states_visited == 25
        assert stats.summary.states_pct == 50

    def test_percentage_rounds_half_up(self):
        states = [c for c in STATE_NAMES if c != "DC"][:1]
        assert _classify(work=",".join(states)).summary.states_pct == 2

    def test_dc_not_counted_toward_fifty(self):
        stats = _classify(work="DC,NY")
        assert stats.summary.states_visited == 1
        assert stats.category("DC") == Category.WORK

    def test_breakdown(self):
        stats = _classify(
            work="NY,CA,TX",
            personal="CA,HI",
            workFuture="AL",
            prov="NL",
            provFuture="QC",
            workCountries="GBR",
            persCountriesFuture="JPN",
        )
        s = stats.summary
        assert s.states_visited == 4
        assert s.work_only == 2
        assert s.personal_only == 1
        assert s.both == 1
        assert s.future_only == 1
        assert s.provinces_visited == 1
        assert s.provinces_future == 1
        assert s.countries_visited == 1
        assert s.countries_future == 1

    def test_top_regions_and_max(self):
        stats = _classify(workTrips="NY:39,TX:14,CA:5,OH:2", persTrips="CA:4,OH:3,HI:4,MI:1")
        s = stats.summary
        assert s.max_trip_count == 39
        assert [r["code"] for r in s.top_regions] == ["NY", "TX", "CA", "OH", "HI"]
        assert s.top_regions[0] == {"code": "NY", "name": "New York", "total": 39}

    def test_top_region_ties_keep_first_seen_order(self):
        stats = classify(decode_params({"workTrips": "OH:2,MI:2,NV:2"}), top_n=2)
        assert [r["code"] for r in stats.summary.top_regions] == ["OH", "MI"]

    def test_first_seen_order_lists_before_counts(self):
        stats = _classify(work="TX", workTrips="NY:3,TX:3")
        assert list(stats.regions) == ["TX", "NY"]
        assert [r["code"] for r in stats.summary.top_regions] == ["TX", "NY"]


class TestOutputShape:
    def test_to_dict_is_json_serializable(self):
        stats = _classify(work="NY", workTrips="NY:5", persCountries="FRA", title="Trips")
        data = json.loads(json.dumps(stats.to_dict()))
        assert data["title"] == "Trips"
        assert data["categories"] == {"NY": "work", "FRA": "personal"}
        assert data["trip_counts"] == {"NY": 5, "FRA": 0}
        assert data["regions"]["NY"]["kind"] == "state"
        assert data["regions"]["NY"]["total_count"] == 5
        assert data["summary"]["states_visited"] == 1

    @pytest.mark.parametrize("work, future", [(0, 0), (1, 0), (3, 5), (5, 3), (2, 2)])
    def test_past_never_negative(self, work, future):
        params = {}
        if work:
            params["workTrips"] = f"VA:{work}"
        if future:
            params["workTripsFuture"] = f"VA:{future}"
        stats = classify(decode_params(params))
        if "VA" in stats.regions:
            assert stats.regions["VA"].past_work_count == max(0, work - future)
