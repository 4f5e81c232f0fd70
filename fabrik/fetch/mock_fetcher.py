import datetime as dt
from html import escape
from typing import Dict, Optional

from fabrik.fetch.utils import DATE_LAYOUT, ROW_TOKENS
from .base import BaseFetcher, FetchResult

SAMPLE_MEALS = {
    0: "Frittatensuppe, Wiener Schnitzel mit Erd&auml;pfelsalat",
    1: "Gulasch mit Semmelkn&ouml;del",
    2: "Gem&uuml;secremesuppe, K&auml;sesp&auml;tzle",
    3: "Ruhetag",
    4: "Gebackener Fisch mit Sauce Tartare",
}

def render_menu_page(
    now: dt.datetime,
    meals: Optional[Dict[int, str]] = None,
    valid_from: Optional[dt.date] = None,
    valid_to: Optional[dt.date] = None,
    banner: str = "",
) -> str:
    """
    Render a page in the layout of the Fabrik weekly menu.

    `meals` maps weekday index (Monday=0) to the raw cell markup; weekdays
    missing from it get no row. The validity range defaults to Monday..Friday
    of the week containing `now`.
    """
    meals = SAMPLE_MEALS if meals is None else meals
    monday = now.date() - dt.timedelta(days=now.weekday())
    valid_from = valid_from or monday
    valid_to = valid_to or monday + dt.timedelta(days=4)

    rows = []
    for weekday, token in ROW_TOKENS.items():
        if weekday not in meals:
            continue
        day = monday + dt.timedelta(days=weekday)
        rows.append(
            f'<tr class="tr-even tr-{token}">\n'
            f'  <td class="td-1">{day.strftime(DATE_LAYOUT)}</td>\n'
            f'  <td class="td-2">{meals[weekday]}</td>\n'
            f'</tr>'
        )

    banner_html = f"<p>{escape(banner)}</p>" if banner else ""
    rows_html = "\n".join(rows)

    return f"""<html>
<head><title>Die Fabrik - Mittagsmen&uuml;</title></head>
<body>
  <div class="content">
    {banner_html}
    <h2>{valid_from.strftime(DATE_LAYOUT)} bis {valid_to.strftime(DATE_LAYOUT)}</h2>
    <table class="mittagsmenue">
{rows_html}
    </table>
  </div>
</body>
</html>
"""

class MockFetcher(BaseFetcher):
    """Serves a generated page for the week of `now`, no network involved"""

    def __init__(self, now: dt.datetime, html: Optional[str] = None):
        self.now = now
        self.html = html

    def fetch(self, url: str, timeout_sec: int = 15) -> FetchResult:
        html = self.html if self.html is not None else render_menu_page(self.now)
        return FetchResult(
            url=url,
            status_code=200,
            final_url=url,
            html=html,
            fetched_at=self.now.astimezone(dt.timezone.utc).isoformat(timespec="seconds"),
        )
