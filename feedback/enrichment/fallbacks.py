"""Deterministic fallback text keyed on rating band."""

from __future__ import annotations

from enum import Enum


class RatingBand(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


def rating_band(rating: int) -> RatingBand:
    if rating >= 4:
        return RatingBand.POSITIVE
    if rating >= 3:
        return RatingBand.NEUTRAL
    return RatingBand.NEGATIVE


FALLBACK_RESPONSES: dict[RatingBand, str] = {
    RatingBand.POSITIVE: (
        "Thank you so much for your wonderful feedback! We truly appreciate your "
        "support and are delighted to hear about your positive experience. Your "
        "kind words motivate our team to continue delivering excellent service."
    ),
    RatingBand.NEUTRAL: (
        "Thank you for taking the time to share your feedback. We value your "
        "honest opinion and are always looking for ways to improve. Please don't "
        "hesitate to reach out if there's anything specific we can help with."
    ),
    RatingBand.NEGATIVE: (
        "Thank you for bringing this to our attention. We sincerely apologize that "
        "your experience didn't meet expectations. Your feedback is crucial for our "
        "improvement, and we're committed to addressing these concerns."
    ),
}

FALLBACK_RECOMMENDATIONS: dict[RatingBand, tuple[str, str, str]] = {
    RatingBand.POSITIVE: (
        "Continue maintaining current service quality standards",
        "Consider asking satisfied customers for referrals or testimonials",
        "Identify specific aspects that led to this positive experience and replicate them",
    ),
    RatingBand.NEUTRAL: (
        "Follow up with customer to identify specific improvement areas",
        "Review recent service interactions for potential issues",
        "Consider implementing feedback collection at key touchpoints",
    ),
    RatingBand.NEGATIVE: (
        "Prioritize direct outreach to resolve customer concerns",
        "Conduct internal review of processes related to this feedback",
        "Implement preventive measures to avoid similar issues",
    ),
}


def fallback_response(rating: int) -> str:
    return FALLBACK_RESPONSES[rating_band(rating)]


def fallback_summary(rating: int, review: str) -> str:
    band = rating_band(rating).value
    if not review or not review.strip():
        return (
            f"Customer submitted a {band} rating of {rating}/5 stars "
            "without additional comments."
        )
    return f"Customer expressed {band} sentiment ({rating}/5 stars) regarding their experience."


def fallback_recommendations(rating: int) -> list[str]:
    return list(FALLBACK_RECOMMENDATIONS[rating_band(rating)])
