"""Extract an absolute calendar date from free text."""

from __future__ import annotations
import re
from dataclasses import dataclass
from datetime import date, timedelta

MONTHS = {
    "january": 1, "february": 2, "march": 3, "april": 4, "may": 5, "june": 6,
    "july": 7, "august": 8, "september": 9, "october": 10, "november": 11, "december": 12,
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "jun": 6, "jul": 7, "aug": 8,
    "sep": 9, "sept": 9, "oct": 10, "nov": 11, "dec": 12,
}

_MONTH_ALT = "|".join(sorted(MONTHS, key=len, reverse=True))

YESTERDAY_RE = re.compile(r"\b(?:yesterday|last\s+night|last\s+game)\b", re.I)
DAYS_AGO_RE = re.compile(r"\b(\d{1,3})\s+days?\s+ago\b", re.I)
MONTH_DAY_YEAR_RE = re.compile(rf"\b({_MONTH_ALT})\.?\s+(\d{{1,2}})(?:st|nd|rd|th)?,?\s+(\d{{4}})\b", re.I)
NUMERIC_RE = re.compile(r"\b(\d{1,2})/(\d{1,2})/(\d{4}|\d{2})\b")
MONTH_DAY_RE = re.compile(rf"\b({_MONTH_ALT})\.?\s+(\d{{1,2}})(?:st|nd|rd|th)?\b", re.I)


@dataclass(frozen=True)
class DateMatch:
    date: date
    date_str: str   # YYYYMMDD, the provider's scoreboard format
    display: str


def to_date_str(d: date) -> str:
    return f"{d.year:04d}{d.month:02d}{d.day:02d}"


def _display(d: date) -> str:
    return f"{d.strftime('%B')} {d.day}, {d.year}"


def _match(d: date, display: str | None = None) -> DateMatch:
    return DateMatch(date=d, date_str=to_date_str(d), display=display or _display(d))


def _from_month_day_year(m: re.Match) -> date:
    return date(int(m.group(3)), MONTHS[m.group(1).lower()], int(m.group(2)))


def _from_numeric(m: re.Match) -> date:
    year = int(m.group(3))
    if year < 100:
        year += 2000
    return date(year, int(m.group(1)), int(m.group(2)))


def _explicit_patterns(today: date):
    return [
        (MONTH_DAY_YEAR_RE, _from_month_day_year),
        (NUMERIC_RE, _from_numeric),
        (MONTH_DAY_RE, lambda m: date(today.year, MONTHS[m.group(1).lower()], int(m.group(2)))),
    ]


def resolve_date(message: str, today: date | None = None) -> DateMatch | None:
    """Find the first date reference in a message.

    Relative phrases win over explicit dates. Explicit patterns are tried in
    order (Month Day Year, MM/DD/YYYY, Month Day); a match that is not a real
    calendar date is skipped.
    """
    today = today or date.today()
    if not message:
        return None

    if YESTERDAY_RE.search(message):
        return _match(today - timedelta(days=1), "Yesterday")

    m = DAYS_AGO_RE.search(message)
    if m:
        n = int(m.group(1))
        return _match(today - timedelta(days=n), f"{n} days ago")

    for pattern, build in _explicit_patterns(today):
        for m in pattern.finditer(message):
            try:
                return _match(build(m))
            except ValueError:
                continue
    return None
