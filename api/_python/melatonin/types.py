"""
Data structures for the melatonin explorer page.

Static content types are frozen: they are defined once at import and never
mutated. PageState holds the two pieces of UI state for a single render.
"""

from dataclasses import dataclass

# =============================================================================
# Circadian Timeline
# =============================================================================


@dataclass(frozen=True)
class TimeSegment:
    """
    A named time-of-day range on the circadian timeline.

    Segments with end_hour <= start_hour wrap past midnight
    (e.g., 21 -> 2 covers 21:00 through 01:59).
    """

    label: str  # Short name of the circadian phase
    start_hour: int  # 0-23, inclusive
    end_hour: int  # 0-23, exclusive
    description: str

    @property
    def wraps_midnight(self) -> bool:
        """True if this segment crosses midnight."""
        return self.end_hour <= self.start_hour


# =============================================================================
# Static Page Content
# =============================================================================


@dataclass(frozen=True)
class QuickFact:
    """Single card in the facts grid."""

    label: str
    value: str  # Headline figure shown large
    detail: str


@dataclass(frozen=True)
class Guideline:
    """Supplement strategy card."""

    title: str
    dose: str
    insight: str


@dataclass(frozen=True)
class FaqItem:
    """Question/answer pair in the FAQ accordion."""

    question: str
    answer: str


@dataclass(frozen=True)
class Reference:
    """Further-reading entry."""

    citation: str
    source: str  # Journal name and year, rendered highlighted


# =============================================================================
# UI State
# =============================================================================


@dataclass(frozen=True)
class PageState:
    """
    Local UI state for one render of the page.

    Both values travel in the query string, so every slider change or FAQ
    click is a fresh request carrying the next state.
    """

    hour: int  # Selected hour, 0-23
    open_faq_index: int | None  # None when every FAQ item is closed
