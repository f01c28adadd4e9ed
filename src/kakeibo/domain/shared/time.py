"""Clock helpers for the domain layer."""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Timezone-aware current instant in UTC; the default query clock."""
    return datetime.now(tz=timezone.utc)


def calendar_date(moment: date | datetime) -> date:
    """Calendar day of ``moment``.

    A ``datetime`` keeps its own timezone (naive values are taken as-is), so a
    caller wanting local months passes a local datetime.
    """
    if isinstance(moment, datetime):
        return moment.date()
    return moment
