"""Property-based tests for hour-to-card assignment.

**Feature: tarot-timer**
"""

from datetime import date, datetime

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tarot_timer.assignment import assign, assign_day, assign_index
from tarot_timer.catalog import CardCatalog, get_catalog
from tarot_timer.errors import InvalidArgumentError

dates = st.dates(min_value=date(2000, 1, 1), max_value=date(2100, 12, 31))
hours = st.integers(min_value=0, max_value=23)


class TestAssignmentDeterminism:
    """
    **Feature: tarot-timer, Property: Deterministic Assignment**
    
    *For any* valid date and hour, assign returns the same card id
    every time it is called.
    """

    @given(day=dates, hour=hours)
    @settings(max_examples=200)
    def test_same_input_same_card(self, day: date, hour: int):
        assert assign(day, hour) == assign(day, hour)

    @given(day=dates, hour=hours)
    @settings(max_examples=100)
    def test_result_is_catalog_card(self, day: date, hour: int):
        assert assign(day, hour) in get_catalog()

    @given(day=dates, hour=hours)
    @settings(max_examples=100)
    def test_iso_string_and_datetime_match_date(self, day: date, hour: int):
        expected = assign(day, hour)
        assert assign(day.isoformat(), hour) == expected
        assert assign(datetime(day.year, day.month, day.day, 17, 5), hour) == expected

    @given(day=dates)
    @settings(max_examples=50)
    def test_assign_day_matches_hourly_assign(self, day: date):
        spread = assign_day(day)

        assert len(spread) == 24
        assert list(spread) == [assign(day, hour) for hour in range(24)]

    def test_known_spread_is_stable(self):
        """A fresh catalog reproduces the same spread for a fixed day."""
        day = date(2025, 1, 15)
        assert assign_day(day, CardCatalog()) == assign_day(day)

    def test_spreads_vary_between_days(self):
        """Different days do not all collapse to one spread."""
        spreads = {assign_day(date(2025, 1, d)) for d in range(1, 11)}
        assert len(spreads) > 1


class TestAssignmentValidation:
    """
    **Feature: tarot-timer, Property: Assignment Arguments**
    
    Hours outside 0..23 and malformed dates fail with InvalidArgument.
    """

    @given(hour=st.integers().filter(lambda h: h < 0 or h > 23))
    @settings(max_examples=50)
    def test_hour_out_of_range(self, hour: int):
        with pytest.raises(InvalidArgumentError):
            assign(date(2025, 1, 15), hour)

    @pytest.mark.parametrize("hour", [True, 1.5, "9", None])
    def test_hour_wrong_type(self, hour):
        with pytest.raises(InvalidArgumentError):
            assign(date(2025, 1, 15), hour)

    @pytest.mark.parametrize("day", ["2025-13-01", "yesterday", "", None, 20250115])
    def test_malformed_date(self, day):
        with pytest.raises(InvalidArgumentError):
            assign(day, 9)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            assign(date(2025, 1, 15), 24)


class TestAssignmentRange:
    """
    **Feature: tarot-timer, Property: Assignment Range**
    
    *For any* catalog size, the assigned index stays within the catalog.
    """

    @given(day=dates, hour=hours, size=st.integers(min_value=1, max_value=200))
    @settings(max_examples=100)
    def test_index_within_size(self, day: date, hour: int, size: int):
        assert 0 <= assign_index(day, hour, size) < size

    def test_small_catalog(self):
        cards = get_catalog().all_cards()[:3]
        catalog = CardCatalog(cards)
        allowed = {card.id for card in cards}

        assert set(assign_day(date(2025, 1, 15), catalog)) <= allowed
