"""Calendar-date helpers.

Trades carry a plain ``YYYY-MM-DD`` date with no time component. Dates are
kept as ISO strings throughout so that ordering is a string comparison.
"""

from datetime import date, datetime


def to_iso_date(d: date | datetime | str | None = None) -> str:
    """Normalise *d* to ``YYYY-MM-DD``.

    ``None`` means the local current date. Strings are accepted in ISO form
    (a time part is dropped) or with ``/`` separators.
    """
    if d is None:
        return date.today().isoformat()
    if isinstance(d, datetime):
        return d.date().isoformat()
    if isinstance(d, date):
        return d.isoformat()

    s = d.strip()
    # Normalise YYYY/MM/DD -> YYYY-MM-DD
    if len(s) >= 10 and s[4] == "/" and s[7] == "/":
        s = f"{s[:4]}-{s[5:7]}-{s[8:]}"
    return date.fromisoformat(s[:10]).isoformat()


def today_iso() -> str:
    """Current local calendar date as ``YYYY-MM-DD``."""
    return to_iso_date()


def now_ms() -> int:
    """Milliseconds since epoch, used for ``created_at`` stamps."""
    return int(datetime.now().timestamp() * 1000)
