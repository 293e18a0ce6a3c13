# ABOUTME: Core dashboard logic: enrichment pipeline, view model, export and session gate.
# ABOUTME: Independent of the terminal UI so it can be driven directly from tests.

from bookdash.core.enrichment import EnrichmentPipeline
from bookdash.core.rows import DisplayRow
from bookdash.core.session import Router, Session
from bookdash.core.view import ViewModel

__all__ = [
    "DisplayRow",
    "EnrichmentPipeline",
    "Router",
    "Session",
    "ViewModel",
]
