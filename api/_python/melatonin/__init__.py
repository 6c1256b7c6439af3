"""
Melatonin Explorer

Educational page on melatonin with a circadian timing visualizer and an
FAQ accordion, rendered server-side from static content.
"""

from .exceptions import InvalidParameterError, MelatoninError, TimelinePartitionError
from .faq import is_faq_open, toggle_faq
from .page import build_page_context, render_page
from .params import parse_api_hour, parse_page_state
from .timeline import (
    belongs_to_segment,
    highlighted_hours,
    normalize_hour,
    resolve_segment,
    validate_partition,
)
from .types import FaqItem, Guideline, PageState, QuickFact, Reference, TimeSegment

__all__ = [
    # Types
    "TimeSegment",
    "QuickFact",
    "Guideline",
    "FaqItem",
    "Reference",
    "PageState",
    # Timeline
    "normalize_hour",
    "belongs_to_segment",
    "resolve_segment",
    "highlighted_hours",
    "validate_partition",
    # FAQ
    "toggle_faq",
    "is_faq_open",
    # Page
    "parse_page_state",
    "parse_api_hour",
    "build_page_context",
    "render_page",
    # Errors
    "MelatoninError",
    "TimelinePartitionError",
    "InvalidParameterError",
]
