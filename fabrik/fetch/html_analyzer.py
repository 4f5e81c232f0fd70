"""
Extraction of today's lunch from the Fabrik menu page.

The page is a weekly table, one <tr> per weekday, headed by a
"DD.MM.YYYY bis DD.MM.YYYY" range. Rows and the header are located with
regular expressions; the cell content is turned into plain text with
BeautifulSoup so entities and stray inline tags come out clean.
"""

import re
from datetime import timedelta
from typing import Optional
from bs4 import BeautifulSoup

from fabrik.core.config import settings
from fabrik.core.errors import MalformedDate, RowNotFound, FabrikResting, ValidityUnavailable
from fabrik.fetch.utils import parse_date, row_token
from fabrik.schemas import ValidityWindow

_DATE = r"\d{2}\.\d{2}\.\d{4}"
VALIDITY_PATTERN = re.compile(rf"<h2>\s*(?P<start>{_DATE}) bis (?P<end>{_DATE})\s*</h2>")

# Non-greedy and line-spanning, but never past the row's own </tr>
_ROW_TEMPLATE = r'<tr class="tr-even tr-{token}">(?:(?!</tr>).)*?<td class="td-2">(?P<cell>(?:(?!</td>).)*)</td>'


def check_holiday(markup: str, marker: Optional[str] = None) -> bool:
    """True if the holiday marker appears anywhere in the page, ignoring case"""
    marker = marker or settings.HOLIDAY_MARKER
    return marker.lower() in markup.lower()


def extract_validity(markup: str) -> ValidityWindow:
    """
    Find the "from bis to" header and return its window.

    The end is moved to midnight after the "to" date so the whole last day
    counts as valid. Raises ValidityUnavailable when the header is missing or
    either date is malformed.
    """
    match = VALIDITY_PATTERN.search(markup)
    if match is None:
        raise ValidityUnavailable("no validity range found on the menu page")

    try:
        start = parse_date(match.group("start"))
        end = parse_date(match.group("end"))
    except MalformedDate as e:
        raise ValidityUnavailable(f"unreadable validity range: {e}") from e

    return ValidityWindow(start=start, end=end + timedelta(days=1))


def row_pattern(token: str) -> re.Pattern:
    return re.compile(_ROW_TEMPLATE.format(token=re.escape(token)), re.DOTALL)


def cell_to_text(cell_html: str) -> str:
    """Plain text of a table cell: entities decoded, tags dropped, whitespace collapsed"""
    soup = BeautifulSoup(cell_html, "html.parser")
    text = soup.get_text(" ", strip=True)
    return re.sub(r"\s+", " ", text)


def extract_meal(markup: str, weekday: int, rest_day_marker: Optional[str] = None) -> str:
    """
    Return the menu item for the given weekday (Monday=0).

    Raises RowNotFound if the weekday has no row token or the row/cell is not
    in the page, and FabrikResting if the cell holds the rest-day marker.
    """
    token = row_token(weekday)
    if token is None:
        raise RowNotFound(f"no menu row for weekday {weekday}")

    match = row_pattern(token).search(markup)
    if match is None:
        raise RowNotFound(f"menu row 'tr-{token}' not found, the page layout may have changed")

    meal = cell_to_text(match.group("cell"))

    if meal == (rest_day_marker or settings.REST_DAY_MARKER):
        raise FabrikResting()

    return meal
