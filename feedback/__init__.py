"""Customer feedback collection service with AI enrichment and admin analytics."""
