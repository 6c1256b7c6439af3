"""
Circadian timeline lookups.

Maps an hour of the day onto the ordered list of named segments. Segments
whose end hour is at or before their start hour wrap past midnight, so both
the pointer lookup and the 24-slot highlight share one membership check.
"""

from typing import Sequence

from .exceptions import TimelinePartitionError
from .types import TimeSegment

HOURS_PER_DAY = 24


def normalize_hour(hour: int) -> int:
    """Reduce any integer hour to 0-23 (handles negative inputs)."""
    return ((hour % HOURS_PER_DAY) + HOURS_PER_DAY) % HOURS_PER_DAY


def belongs_to_segment(hour: int, segment: TimeSegment) -> bool:
    """
    Check whether an hour falls inside a segment.

    Args:
        hour: Hour of day, any integer (normalized before matching)
        segment: Segment to test against

    Returns:
        True if the hour is within [start_hour, end_hour), wrapping past
        midnight when end_hour <= start_hour
    """
    h = normalize_hour(hour)
    if segment.end_hour > segment.start_hour:
        return segment.start_hour <= h < segment.end_hour
    return h >= segment.start_hour or h < segment.end_hour


def resolve_segment(
    hour: int, segments: Sequence[TimeSegment]
) -> TimeSegment | None:
    """
    Find the segment containing an hour.

    Segments are checked in declaration order and the first match wins.

    Returns:
        The matching segment, or None if no segment covers the hour
        (only possible when the timeline has gaps)
    """
    for segment in segments:
        if belongs_to_segment(hour, segment):
            return segment
    return None


def highlighted_hours(segment: TimeSegment | None) -> tuple[int, ...]:
    """Hour slots (0-23) belonging to a segment; empty when there is none."""
    if segment is None:
        return ()
    return tuple(i for i in range(HOURS_PER_DAY) if belongs_to_segment(i, segment))


def validate_partition(segments: Sequence[TimeSegment]) -> None:
    """
    Verify that segments cover every hour of the day exactly once.

    Raises:
        TimelinePartitionError: If any hour is uncovered or covered twice
    """
    counts = [0] * HOURS_PER_DAY
    for segment in segments:
        for hour in highlighted_hours(segment):
            counts[hour] += 1

    uncovered = [hour for hour, count in enumerate(counts) if count == 0]
    overlapping = [hour for hour, count in enumerate(counts) if count > 1]
    if uncovered or overlapping:
        raise TimelinePartitionError(uncovered, overlapping)
