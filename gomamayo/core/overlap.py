"""
Boundary overlap between two adjacent readings.
"""

from typing import Sequence

from gomamayo.core.mora import segment_morae


def find_overlap(left: Sequence[str], right: Sequence[str]) -> int:
    """
    Find the longest run of morae that ends `left` and starts `right`.

    Args:
        left: Morae of the preceding reading
        right: Morae of the following reading

    Returns:
        Number of overlapping morae, 0 if the boundary does not overlap
    """
    for degree in range(min(len(left), len(right)), 0, -1):
        if list(left[len(left) - degree :]) == list(right[:degree]):
            return degree
    return 0


def find_reading_overlap(left: str, right: str) -> int:
    """Segment two readings and return their boundary overlap."""
    return find_overlap(segment_morae(left), segment_morae(right))
