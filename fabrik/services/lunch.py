import logging
from datetime import datetime
from typing import List, Optional

from fabrik.cache.store import FreshnessCache
from fabrik.core.config import settings
from fabrik.core.errors import (
    FabrikClosed,
    FabrikOnHoliday,
    FabrikWarning,
    FetchFailed,
    MenuExpired,
    MenuNotYetValid,
)
from fabrik.fetch.base import BaseFetcher
from fabrik.fetch.html_analyzer import check_holiday, extract_meal, extract_validity
from fabrik.fetch.utils import is_weekend
from fabrik.schemas import LunchResult

logger = logging.getLogger(__name__)


class LunchPipeline:
    """
    One lookup of today's lunch.

    `now` is captured by the caller and used for every date decision of the
    run: the weekend gate, cache freshness, the validity window and the
    weekday row.
    """

    def __init__(
        self,
        fetcher: BaseFetcher,
        cache: FreshnessCache,
        now: datetime,
        url: Optional[str] = None,
        force: bool = False,
    ):
        self.fetcher = fetcher
        self.cache = cache
        self.now = now
        self.url = url or settings.MENU_URL
        self.force = force
        self.warnings: List[str] = []

    def _warn(self, warning: FabrikWarning):
        logger.warning("%s", warning)
        self.warnings.append(str(warning))

    def run(self) -> LunchResult:
        """
        1. Reject weekends
        2. Serve today's cached menu unless forced
        3. Fetch the page
        4. Stop on holiday pages
        5. Check the validity window
        6. Extract today's row and cache it
        """
        if is_weekend(self.now):
            raise FabrikClosed()

        if not self.force:
            cached = self.cache.read()
            if cached:
                return LunchResult(text=cached, cached=True)

        markup = self._fetch()

        if check_holiday(markup):
            raise FabrikOnHoliday()

        validity_verified = self._check_validity(markup)

        meal = extract_meal(markup, self.now.weekday())
        logger.debug("EXTRACTED MEAL: %r", meal)

        if meal:
            self.cache.write(meal)
        else:
            logger.warning("Menu row for today is empty, not caching it")

        return LunchResult(
            text=meal,
            cached=False,
            validity_verified=validity_verified,
            warnings=self.warnings,
        )

    def _fetch(self) -> str:
        logger.info("FETCHING %s", self.url)
        result = self.fetcher.fetch(self.url, timeout_sec=settings.REQUEST_TIMEOUT)
        if not result.html:
            raise FetchFailed(f"No content received from {self.url}")
        logger.debug("HTML RECEIVED: %d characters", len(result.html))
        return result.html

    def _check_validity(self, markup: str) -> bool:
        """False when the page carries no usable date range"""
        try:
            window = extract_validity(markup)
        except FabrikWarning as w:
            self._warn(w)
            return False

        if window.is_expired(self.now):
            raise MenuExpired()
        if window.is_premature(self.now):
            self._warn(MenuNotYetValid(
                f"the menu is from the future (valid from {window.start.date().isoformat()})"
            ))
        return True


def build_fetcher(now: datetime) -> BaseFetcher:
    """Network fetcher, or the offline sample page when USE_MOCK is set"""
    if settings.USE_MOCK:
        from fabrik.fetch.mock_fetcher import MockFetcher
        return MockFetcher(now)

    from fabrik.fetch.requests_fetcher import RequestsFetcher
    return RequestsFetcher()


def get_todays_menu(
    now: Optional[datetime] = None,
    force: bool = False,
    url: Optional[str] = None,
    fetcher: Optional[BaseFetcher] = None,
    cache: Optional[FreshnessCache] = None,
) -> LunchResult:
    """Run one lookup with collaborators taken from settings where not given"""
    now = now or datetime.now()
    pipeline = LunchPipeline(
        fetcher=fetcher or build_fetcher(now),
        cache=cache or FreshnessCache(now),
        now=now,
        url=url,
        force=force,
    )
    return pipeline.run()
