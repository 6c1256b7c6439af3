"""Exceptions raised by the melatonin package."""


class MelatoninError(Exception):
    """Base class for melatonin explorer errors."""


class TimelinePartitionError(MelatoninError, ValueError):
    """The timeline segments do not cover each hour of the day exactly once."""

    def __init__(self, uncovered: list[int], overlapping: list[int]):
        self.uncovered = uncovered
        self.overlapping = overlapping
        problems = []
        if uncovered:
            problems.append(f"uncovered hours {uncovered}")
        if overlapping:
            problems.append(f"hours in more than one segment {overlapping}")
        super().__init__("Invalid circadian timeline: " + "; ".join(problems))


class InvalidParameterError(MelatoninError, ValueError):
    """A request parameter could not be interpreted."""
