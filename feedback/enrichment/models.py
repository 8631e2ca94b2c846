"""Model factory for LangChain ChatAnthropic instances used by enrichment."""

from __future__ import annotations

from dataclasses import dataclass

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel
from pydantic import SecretStr

from feedback.config import Settings


@dataclass(frozen=True)
class EnrichmentModels:
    """One chat model per enrichment call, each with its own sampling limits."""

    response: BaseChatModel
    summary: BaseChatModel
    recommendations: BaseChatModel


def _chat_model(
    settings: Settings, max_tokens: int, temperature: float
) -> ChatAnthropic:
    return ChatAnthropic(  # type: ignore[call-arg]
        model_name=settings.llm_model,
        anthropic_api_key=SecretStr(settings.anthropic_api_key),
        max_tokens_to_sample=max_tokens,
        temperature=temperature,
        max_retries=0,
    )


def get_enrichment_models(settings: Settings) -> EnrichmentModels | None:
    """Build the enrichment models, or None when no API key is configured."""
    if not settings.anthropic_api_key:
        return None
    return EnrichmentModels(
        response=_chat_model(settings, max_tokens=200, temperature=0.7),
        summary=_chat_model(settings, max_tokens=100, temperature=0.5),
        recommendations=_chat_model(settings, max_tokens=200, temperature=0.7),
    )
