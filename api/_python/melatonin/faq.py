"""
FAQ accordion state.

At most one item is open at a time. The open item is tracked by index,
with None meaning every item is collapsed.
"""

DEFAULT_OPEN_INDEX = 0


def toggle_faq(open_index: int | None, clicked_index: int) -> int | None:
    """
    Open index after a header click.

    Clicking the open item closes it; clicking any other item makes it the
    only open one.
    """
    if open_index == clicked_index:
        return None
    return clicked_index


def is_faq_open(open_index: int | None, index: int) -> bool:
    """True if the item at index is expanded."""
    return open_index is not None and open_index == index
