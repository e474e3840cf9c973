"""
Deterministic synthetic series.

Each (metric, day) pair is hashed with SHA-1; the first 8 digest bytes seed a
fresh random.Random, whose first draw scales the profile:

    value = baseline + rng.random() * spread

No state is kept between calls, so the same metric and day always give the
same value, in any process.
"""
import hashlib
import random
from datetime import date

from models.metric import DateRange, MetricProfile
from schemas.metrics import DataPoint


def seed_for(metric_id: str, day: date) -> int:
    """Big-endian uint64 from the first 8 bytes of sha1(metric_id + YYYY-MM-DD)."""
    digest = hashlib.sha1(
        metric_id.encode("utf-8") + day.isoformat().encode("ascii")
    ).digest()
    return int.from_bytes(digest[:8], "big")


def generate_point(metric_id: str, profile: MetricProfile, day: date) -> DataPoint:
    rng = random.Random(seed_for(metric_id, day))
    return DataPoint(date=day, value=profile.baseline + rng.random() * profile.spread)


def generate_series(
    metric_id: str,
    profile: MetricProfile,
    date_range: DateRange,
) -> list[DataPoint]:
    """One point per day of date_range, ascending. Pure; inputs assumed valid."""
    return [generate_point(metric_id, profile, day) for day in date_range.days()]
