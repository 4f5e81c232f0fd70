import pytest
from datetime import datetime
from pathlib import Path
from pydantic import ValidationError
from fabrik.schemas import CacheEntry, LunchResult, ValidityWindow

class TestSchemaValidation:
    """Unit tests for the pydantic models"""

    def test_validity_window_bounds(self):
        """Test expiry and premature checks are strict comparisons"""
        window = ValidityWindow(start=datetime(2024, 6, 3), end=datetime(2024, 6, 6))

        assert window.is_expired(datetime(2024, 6, 6)) is False
        assert window.is_expired(datetime(2024, 6, 6, 0, 0, 1)) is True
        assert window.is_premature(datetime(2024, 6, 3)) is False
        assert window.is_premature(datetime(2024, 6, 2, 23, 59, 59)) is True

    def test_validity_window_requires_dates(self):
        """Test missing fields are rejected"""
        with pytest.raises(ValidationError):
            ValidityWindow(start=datetime(2024, 6, 3))

    def test_cache_entry_freshness(self):
        """Test freshness against the start of the day"""
        entry = CacheEntry(path=Path("/tmp/fabrik-x"), text="Gulasch", written_at=datetime(2024, 6, 4, 0, 0))

        assert entry.is_fresh(datetime(2024, 6, 4)) is True
        assert entry.is_fresh(datetime(2024, 6, 5)) is False

    def test_cache_entry_from_later_day(self):
        """Test freshness has an upper bound at the next midnight"""
        entry = CacheEntry(path=Path("/tmp/fabrik-x"), text="Gulasch", written_at=datetime(2024, 6, 5, 0, 0))

        assert entry.is_fresh(datetime(2024, 6, 4)) is False
        late = entry.model_copy(update={"written_at": datetime(2024, 6, 4, 23, 59, 59)})
        assert late.is_fresh(datetime(2024, 6, 4)) is True

    def test_lunch_result_defaults(self):
        """Test defaults of a freshly extracted result"""
        result = LunchResult(text="Gulasch")

        assert result.cached is False
        assert result.validity_verified is True
        assert result.warnings == []

    def test_lunch_result_serialization(self):
        """Test the result can be dumped to a dict"""
        data = LunchResult(text="Gulasch", cached=True).model_dump()

        assert data == {
            "text": "Gulasch",
            "cached": True,
            "validity_verified": True,
            "warnings": [],
        }
