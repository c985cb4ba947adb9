"""Cross-platform URL enrichment for stored episodes."""

from careerlog.enrichment.orchestrator import (
    EnrichmentResult,
    PlatformReport,
    enrich_missing_urls,
    enrich_store,
)

__all__ = ["EnrichmentResult", "PlatformReport", "enrich_missing_urls", "enrich_store"]
