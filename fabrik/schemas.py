from datetime import datetime, timedelta
from pathlib import Path
from typing import List
from pydantic import BaseModel, Field

class ValidityWindow(BaseModel):
    start: datetime = Field(description="First valid instant (local midnight of the 'from' date)")
    end: datetime = Field(description="Local midnight after the 'to' date, so the last day counts in full")

    def is_expired(self, now: datetime) -> bool:
        return now > self.end

    def is_premature(self, now: datetime) -> bool:
        return now < self.start

class CacheEntry(BaseModel):
    path: Path
    text: str
    written_at: datetime

    def is_fresh(self, day_start: datetime) -> bool:
        """Written on the calendar day starting at day_start"""
        return day_start <= self.written_at < day_start + timedelta(days=1)

class LunchResult(BaseModel):
    text: str = Field(description="Today's menu item as plain text")
    cached: bool = Field(default=False, description="Served from the same-day cache")
    validity_verified: bool = Field(default=True, description="False when the page had no usable date range")
    warnings: List[str] = Field(default_factory=list, description="Non-fatal findings of this run")
