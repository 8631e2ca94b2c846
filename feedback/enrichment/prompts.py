"""Prompt templates for review enrichment."""

from feedback.enrichment.fallbacks import rating_band

NO_REVIEW_TEXT = "(No written review provided)"

FEEDBACK_ANALYST_SYSTEM_PROMPT = """\
You are a helpful customer feedback analyst for a company. Your role is to:
1. Provide empathetic, professional responses to customer reviews
2. Summarize customer feedback concisely
3. Suggest actionable recommendations for the business

Always be professional, empathetic, and constructive. Focus on understanding \
the customer's experience and providing value.
"""


def user_response_prompt(rating: int, review: str) -> str:
    closing = (
        "Express commitment to improvement"
        if rating < 4
        else "Express gratitude for their support"
    )
    return f"""\
A customer has submitted a {rating_band(rating).value} review with a rating of {rating}/5 stars.

Review: "{review or NO_REVIEW_TEXT}"

Generate a personalized, empathetic response to this customer (2-3 sentences). \
The response should:
- Thank them for their feedback
- Acknowledge their specific experience if mentioned
- {closing}

Keep the response professional and concise."""


def summary_prompt(rating: int, review: str) -> str:
    return f"""\
Summarize the following customer review in 1-2 sentences. Focus on the key \
points and sentiment.

Rating: {rating}/5 stars
Review: "{review or NO_REVIEW_TEXT}"

If no review text is provided, create a brief summary based on the rating alone."""


def recommendations_prompt(rating: int, review: str) -> str:
    return f"""\
Based on this customer feedback, suggest 2-3 specific, actionable \
recommendations for the business to improve or maintain customer satisfaction.

Rating: {rating}/5 stars
Review: "{review or NO_REVIEW_TEXT}"

Format each recommendation as a brief, actionable item. Return only the \
recommendations, one per line, without numbering or bullet points."""
