"""Analytics aggregation over a full list of review records."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from feedback.schemas.reviews import Analytics, ReviewRecord

STARS = ("1", "2", "3", "4", "5")


def _round_one_decimal(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def compute_analytics(
    records: Iterable[ReviewRecord], now: datetime | None = None
) -> Analytics:
    """Derive rating distribution, average and recency counts.

    "Today" is the local calendar day; "this week" starts at local midnight
    seven days ago. ``now`` must be timezone-aware when given.
    """
    now = (now or datetime.now()).astimezone()
    today_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    week_start = today_start - timedelta(days=7)

    distribution = {star: 0 for star in STARS}
    total = 0
    rating_sum = 0
    today = 0
    this_week = 0

    for record in records:
        total += 1
        rating_sum += record.rating
        distribution[str(record.rating)] += 1
        created = datetime.fromisoformat(record.created_at).astimezone()
        if created >= today_start:
            today += 1
        if created >= week_start:
            this_week += 1

    if total == 0:
        return Analytics()

    return Analytics(
        average_rating=_round_one_decimal(rating_sum / total),
        rating_distribution=distribution,
        total_reviews=total,
        reviews_today=today,
        reviews_this_week=this_week,
    )
