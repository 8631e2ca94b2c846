"""Live enrichment against the Anthropic API (requires ANTHROPIC_API_KEY)."""

import pytest

from feedback.config import Settings
from feedback.enrichment import EnrichmentService
from feedback.enrichment.fallbacks import fallback_response


@pytest.mark.integration
@pytest.mark.asyncio
async def test_live_enrichment_produces_generated_text():
    settings = Settings()
    if not settings.anthropic_api_key:
        pytest.skip("ANTHROPIC_API_KEY not configured")
    service = EnrichmentService.from_settings(settings)

    result = await service.analyze(2, "The delivery was two hours late and the food was cold.")

    assert result.user_response
    assert result.user_response != fallback_response(2)
    assert result.summary
    assert 1 <= len(result.recommended_actions) <= 3
    assert all(item.strip() for item in result.recommended_actions)
