"""
Gomamayo classification over the ordered readings of a phrase.
"""

import logging
from typing import List, Sequence, Tuple

from gomamayo.core.models import GomamayoAnalysis, GomamayoKind, Junction
from gomamayo.core.mora import segment_morae
from gomamayo.core.overlap import find_overlap

logger = logging.getLogger(__name__)


def junction_degrees(readings: Sequence[str]) -> List[int]:
    """
    Compute the overlap at every junction of a phrase.

    Args:
        readings: Readings in phrase order

    Returns:
        One overlap length per consecutive pair, in order (empty for fewer than two readings)
    """
    morae = [segment_morae(reading) for reading in readings]
    degrees = [find_overlap(left, right) for left, right in zip(morae, morae[1:])]
    logger.debug("Junction degrees for %s: %s", list(readings), degrees)
    return degrees


def junctions(readings: Sequence[str]) -> List[Junction]:
    """Return the junctions of a phrase with their overlap lengths."""
    return [
        Junction(left=left, right=right, degree=degree)
        for (left, right), degree in zip(zip(readings, readings[1:]), junction_degrees(readings))
    ]


def compute_ary_and_degree(readings: Sequence[str]) -> Tuple[int, int]:
    """Count the overlapping junctions and find the longest overlap."""
    degrees = junction_degrees(readings)
    ary = sum(1 for degree in degrees if degree > 0)
    degree = max(degrees, default=0)
    return ary, degree


def classify(readings: Sequence[str]) -> GomamayoAnalysis:
    """
    Classify a phrase from its readings.

    Args:
        readings: Readings in phrase order, as produced by the tokenizer

    Returns:
        GomamayoAnalysis whose kind is None when no junction overlaps
    """
    ary, degree = compute_ary_and_degree(readings)
    kind = GomamayoKind(ary=ary, degree=degree) if ary > 0 else None
    return GomamayoAnalysis(kind=kind, readings=list(readings))
