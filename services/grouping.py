"""Weekly schedule grouping.

Buckets catalog records by broadcast day. Display order of the buckets is
fixed by DAYS_OF_WEEK and imposed by the caller.
"""

from collections.abc import Iterable

from models.models import AnimeRecord, DayLabel

UNKNOWN_DAY = "Unknown"

DAYS_OF_WEEK: tuple[DayLabel, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
    UNKNOWN_DAY,
)


def broadcast_day(record: AnimeRecord) -> DayLabel:
    """Bucket key of a record: its broadcast day, or "Unknown"."""
    if record.broadcast is None or not record.broadcast.day:
        return UNKNOWN_DAY
    return record.broadcast.day


def group_by_day(records: Iterable[AnimeRecord]) -> dict[DayLabel, list[AnimeRecord]]:
    """Partition records into buckets keyed by broadcast day.

    Single pass, input order preserved inside each bucket. Keys are the
    day strings exactly as received; no day sorting happens here.

    Args:
        records: Records in API arrival order

    Returns:
        Mapping of day label to the records airing that day
    """
    grouped: dict[DayLabel, list[AnimeRecord]] = {}
    for record in records:
        grouped.setdefault(broadcast_day(record), []).append(record)
    return grouped


def bucket_for(
    grouped: dict[DayLabel, list[AnimeRecord]], label: DayLabel
) -> list[AnimeRecord] | None:
    """Look up the bucket shown under a display label.

    Jikan sends plural day names ("Mondays"), so both forms are accepted.
    Returns None when the day has no bucket at all.
    """
    bucket = grouped.get(label)
    if bucket is None and label != UNKNOWN_DAY:
        bucket = grouped.get(f"{label}s")
    return bucket
