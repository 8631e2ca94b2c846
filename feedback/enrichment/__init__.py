"""Review enrichment via the Anthropic API with rating-band fallbacks."""

from feedback.enrichment.service import EnrichmentResult, EnrichmentService

__all__ = ["EnrichmentResult", "EnrichmentService"]
