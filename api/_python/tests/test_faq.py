"""Tests for the FAQ accordion state."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from melatonin.faq import DEFAULT_OPEN_INDEX, is_faq_open, toggle_faq


class TestToggleFaq:
    """Header click transitions."""

    def test_clicking_other_item_replaces_open_one(self) -> None:
        """Default 0, click 2 -> 2 is the only open item."""
        open_index = toggle_faq(DEFAULT_OPEN_INDEX, 2)
        assert open_index == 2
        assert not is_faq_open(open_index, 0)

    def test_clicking_open_item_closes_it(self) -> None:
        """Click 2 twice -> nothing open."""
        open_index = toggle_faq(toggle_faq(DEFAULT_OPEN_INDEX, 2), 2)
        assert open_index is None

    def test_clicking_when_all_closed_opens_item(self) -> None:
        assert toggle_faq(None, 3) == 3


class TestIsFaqOpen:
    """Open-state checks used by the template."""

    def test_only_matching_index_is_open(self) -> None:
        assert is_faq_open(1, 1)
        assert not is_faq_open(1, 0)

    def test_nothing_open_when_none(self) -> None:
        assert not any(is_faq_open(None, index) for index in range(4))
