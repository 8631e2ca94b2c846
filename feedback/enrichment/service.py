"""Review enrichment: AI response, summary and recommended actions.

Three independent generations run concurrently. Each one degrades to its own
rating-band fallback on failure, so a single bad call never fails the whole
enrichment. Without an API key no network call is attempted at all.
"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass, field

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from feedback.config import Settings
from feedback.enrichment.base import with_fallback
from feedback.enrichment.fallbacks import (
    fallback_recommendations,
    fallback_response,
    fallback_summary,
)
from feedback.enrichment.models import EnrichmentModels, get_enrichment_models
from feedback.enrichment.prompts import (
    FEEDBACK_ANALYST_SYSTEM_PROMPT,
    recommendations_prompt,
    summary_prompt,
    user_response_prompt,
)

logger = logging.getLogger(__name__)

MAX_REVIEW_LENGTH_FOR_PROCESSING = 5000
MAX_RECOMMENDATIONS = 3

_BULLET_PREFIX = re.compile(r"^[-•*\d.)\s]+")


@dataclass(frozen=True)
class EnrichmentResult:
    user_response: str
    summary: str
    recommended_actions: list[str] = field(default_factory=list)


def truncate_review(review: str) -> str:
    if len(review) > MAX_REVIEW_LENGTH_FOR_PROCESSING:
        return review[:MAX_REVIEW_LENGTH_FOR_PROCESSING] + "..."
    return review


def parse_recommendations(text: str) -> list[str]:
    """Split model output into at most three clean recommendation lines."""
    items = []
    for line in text.splitlines():
        item = _BULLET_PREFIX.sub("", line).strip()
        if item:
            items.append(item)
    return items[:MAX_RECOMMENDATIONS]


def _message_text(content: str | list) -> str:
    if isinstance(content, str):
        return content.strip()
    parts = [
        block.get("text", "") if isinstance(block, dict) else str(block)
        for block in content
    ]
    return "".join(parts).strip()


class EnrichmentService:
    """Generates the AI fields of a review record."""

    def __init__(
        self, models: EnrichmentModels | None, timeout_seconds: float = 15.0
    ) -> None:
        self.models = models
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> EnrichmentService:
        return cls(
            get_enrichment_models(settings),
            timeout_seconds=settings.llm_timeout_seconds,
        )

    @property
    def configured(self) -> bool:
        return self.models is not None

    async def analyze(self, rating: int, review: str) -> EnrichmentResult:
        """Produce response, summary and recommendations for one review."""
        review = truncate_review(review)

        if self.models is None:
            logger.warning("Anthropic API key not configured, using fallback responses")
            return EnrichmentResult(
                user_response=fallback_response(rating),
                summary=fallback_summary(rating, review),
                recommended_actions=fallback_recommendations(rating),
            )

        user_response, summary, recommended_actions = await asyncio.gather(
            self.generate_user_response(rating, review),
            self.generate_summary(rating, review),
            self.generate_recommendations(rating, review),
        )
        return EnrichmentResult(
            user_response=user_response,
            summary=summary,
            recommended_actions=recommended_actions,
        )

    async def _complete(self, model: BaseChatModel, prompt: str) -> str:
        message = await asyncio.wait_for(
            model.ainvoke(
                [
                    SystemMessage(content=FEEDBACK_ANALYST_SYSTEM_PROMPT),
                    HumanMessage(content=prompt),
                ]
            ),
            timeout=self.timeout_seconds,
        )
        return _message_text(message.content)

    @with_fallback(lambda rating, _review: fallback_response(rating))
    async def generate_user_response(self, rating: int, review: str) -> str:
        assert self.models is not None
        return await self._complete(
            self.models.response, user_response_prompt(rating, review)
        )

    @with_fallback(fallback_summary)
    async def generate_summary(self, rating: int, review: str) -> str:
        assert self.models is not None
        return await self._complete(self.models.summary, summary_prompt(rating, review))

    @with_fallback(lambda rating, _review: fallback_recommendations(rating))
    async def generate_recommendations(self, rating: int, review: str) -> list[str]:
        assert self.models is not None
        text = await self._complete(
            self.models.recommendations, recommendations_prompt(rating, review)
        )
        return parse_recommendations(text)
