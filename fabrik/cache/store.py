"""
Same-day cache of the extracted menu.

Each successful lookup leaves a small text file named <prefix>XXXX in a
scratch directory, with its mtime set to the moment of the lookup. A file
counts as fresh only if that mtime falls on the current calendar day;
files from any other day are ignored and pruned on the next write. Storage
problems never propagate: a failed read is a cache miss, a failed write is
a no-op.
"""

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from fabrik.core.config import settings
from fabrik.fetch.utils import start_of_day
from fabrik.schemas import CacheEntry

logger = logging.getLogger(__name__)


class FreshnessCache:
    def __init__(self, now: datetime, directory: Optional[str] = None, prefix: Optional[str] = None):
        self.now = now
        self.directory = Path(directory or settings.CACHE_DIR)
        self.prefix = prefix or settings.CACHE_PREFIX

    @property
    def day_start(self) -> datetime:
        return start_of_day(self.now)

    def _candidates(self) -> List[Path]:
        try:
            return [p for p in self.directory.glob(f"{self.prefix}*") if p.is_file()]
        except OSError as e:
            logger.warning("CACHE UNAVAILABLE in %s: %s", self.directory, e)
            return []

    def _load(self, path: Path) -> CacheEntry:
        written_at = datetime.fromtimestamp(path.stat().st_mtime)
        return CacheEntry(path=path, text=path.read_text(encoding="utf-8"), written_at=written_at)

    def entries(self) -> List[CacheEntry]:
        """All readable cache files, fresh or not"""
        found = []
        for path in self._candidates():
            try:
                found.append(self._load(path))
            except (OSError, UnicodeDecodeError) as e:
                logger.debug("Skipping unreadable cache file %s: %s", path, e)
        return found

    def read(self) -> Optional[str]:
        """Text of the first cache file written today, None if there is none"""
        day_start = self.day_start
        for entry in self.entries():
            if not entry.is_fresh(day_start):
                continue
            logger.info("CACHE HIT %s (written %s)", entry.path, entry.written_at.isoformat(timespec="seconds"))
            return entry.text

        logger.info("CACHE MISS for %s", self.day_start.date().isoformat())
        return None

    def write(self, text: str) -> Optional[Path]:
        """
        Store text as a new cache file stamped with `now`.
        Returns the file path, or None if the store could not be written.
        """
        if not text:
            raise ValueError("refusing to cache an empty menu")

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, name = tempfile.mkstemp(prefix=self.prefix, dir=self.directory)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            stamp = self.now.timestamp()
            os.utime(name, (stamp, stamp))
        except OSError as e:
            logger.warning("CACHE WRITE FAILED in %s: %s", self.directory, e)
            return None

        logger.info("CACHED menu in %s", name)
        self.purge_stale()
        return Path(name)

    def purge_stale(self) -> int:
        """Remove cache files not written today, returns how many were removed"""
        day_start = self.day_start
        removed = 0
        for entry in self.entries():
            if entry.is_fresh(day_start):
                continue
            try:
                entry.path.unlink()
                removed += 1
            except OSError as e:
                logger.debug("Could not prune %s: %s", entry.path, e)
        if removed:
            logger.info("PURGED %d stale cache file(s)", removed)
        return removed

    def clear(self) -> int:
        """Remove every cache file regardless of age"""
        removed = 0
        for path in self._candidates():
            try:
                path.unlink()
                removed += 1
            except OSError as e:
                logger.warning("Could not remove %s: %s", path, e)
        return removed
