from datetime import datetime, timezone
from fabrik.fetch.mock_fetcher import MockFetcher

TUESDAY = datetime(2024, 6, 4, 11, 30)

class TestMockFetcher:
    """Unit tests for the offline sample page"""

    def test_fetched_at_is_utc(self):
        """Test the timestamp uses the same UTC convention as the HTTP fetcher"""
        result = MockFetcher(TUESDAY).fetch("http://example.test/menu")

        fetched_at = datetime.fromisoformat(result.fetched_at)
        assert fetched_at.utcoffset().total_seconds() == 0
        assert fetched_at == TUESDAY.astimezone(timezone.utc)

    def test_serves_given_html(self):
        """Test a fixed page is returned unchanged"""
        result = MockFetcher(TUESDAY, html="<h2>menu</h2>").fetch("http://example.test/menu")

        assert result.html == "<h2>menu</h2>"
        assert result.status_code == 200
        assert result.final_url == "http://example.test/menu"
