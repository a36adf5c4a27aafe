import locale

import pytest

from deckcore.field_decoder import decode_date, decode_list


class TestDecodeDate:
    def test_empty_values(self):
        assert decode_date("") == ""
        assert decode_date(None) == ""

    def test_iso_date(self):
        assert decode_date("2024-01-05") == "Jan 5, 2024"

    def test_other_formats(self):
        assert decode_date("2023-12-25T10:30:00") == "Dec 25, 2023"
        assert decode_date("March 3, 2022") == "Mar 3, 2022"

    def test_unparseable_returns_raw(self):
        assert decode_date("not-a-date") == "not-a-date"


class TestDecodeList:
    def test_list_literal(self):
        assert decode_list('["a","b"]') == ["a", "b"]

    def test_invalid_json(self):
        assert decode_list("not json") == []

    def test_non_list_json(self):
        assert decode_list('{"a":1}') == []
        assert decode_list("42") == []
        assert decode_list('"text"') == []

    def test_empty(self):
        assert decode_list("") == []
        assert decode_list(None) == []
        assert decode_list("[]") == []


class TestDecodeDateIncomplete:
    def test_weekday_alone_is_not_a_date(self):
        assert decode_date("Monday") == "Monday"

    def test_bare_number_is_not_a_date(self):
        assert decode_date("5") == "5"

    def test_month_and_day_without_year(self):
        assert decode_date("Jan 5") == "Jan 5"

    def test_full_dates_still_decode(self):
        assert decode_date("5 January 2024") == "Jan 5, 2024"
        assert decode_date("2024/11/30") == "Nov 30, 2024"

    def test_all_months_use_english_abbreviations(self):
        expected = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
        decoded = [decode_date(f"2024-{month:02d}-15") for month in range(1, 13)]
        assert decoded == [f"{name} 15, 2024" for name in expected]

    def test_month_names_ignore_time_locale(self):
        previous = locale.setlocale(locale.LC_TIME)
        try:
            locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
        except locale.Error:
            pytest.skip("de_DE.UTF-8 locale not installed")
        try:
            assert decode_date("2024-05-01") == "May 1, 2024"
            assert decode_date("2024-10-03") == "Oct 3, 2024"
        finally:
            locale.setlocale(locale.LC_TIME, previous)
