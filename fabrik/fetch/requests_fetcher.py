import datetime as dt
import logging
import requests

from fabrik.core.config import settings
from fabrik.core.errors import FetchFailed
from .base import BaseFetcher, FetchResult

logger = logging.getLogger(__name__)

class RequestsFetcher(BaseFetcher):
    def fetch(self, url: str, timeout_sec: int = 15) -> FetchResult:
        headers = {"User-Agent": settings.USER_AGENT, "Accept-Language": "de,en;q=0.8"}
        try:
            resp = requests.get(url, headers=headers, timeout=timeout_sec)
        except requests.Timeout as e:
            raise FetchFailed(f"Timeout while fetching {url}") from e
        except requests.RequestException as e:
            raise FetchFailed(f"Failed to fetch {url}: {e}") from e

        if not resp.ok:
            raise FetchFailed(f"HTTP error {resp.status_code} for {url}")

        # Without a declared charset requests falls back to ISO-8859-1
        if "charset" not in resp.headers.get("Content-Type", "").lower():
            resp.encoding = resp.apparent_encoding

        html = resp.text
        logger.debug("FETCHED %s: %d characters", resp.url, len(html))

        return FetchResult(
            url=url,
            status_code=int(resp.status_code),
            final_url=str(resp.url),
            html=html,
            fetched_at=dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds"),
        )
