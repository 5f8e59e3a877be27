from datetime import date, timedelta


def shift_months(d: date, months: int) -> date:
    """
    Move a date by whole months. The day of month is kept and overflows
    into the following month instead of being clamped
    (Mar 31 - 1 month -> "Feb 31" -> Mar 3).
    """
    total = d.year * 12 + (d.month - 1) + months
    year, month0 = divmod(total, 12)
    first = date(year, month0 + 1, 1)
    return first + timedelta(days=d.day - 1)


def feed_date_path(d: date) -> str:
    return f"{d.year:04d}/{d.month:02d}/{d.day:02d}"


def strip_prefix_once(text: str, prefix: str) -> str:
    """Remove the first occurrence of prefix, wherever it appears."""
    return (text or "").replace(prefix, "", 1)
