"""
Core Package.

This package provides mora segmentation, boundary overlap, and classification.
"""

from gomamayo.core.classify import classify, compute_ary_and_degree, junction_degrees, junctions
from gomamayo.core.mora import is_combining, segment_morae
from gomamayo.core.overlap import find_overlap, find_reading_overlap

__all__ = [
    # Morae
    "is_combining",
    "segment_morae",
    # Overlap
    "find_overlap",
    "find_reading_overlap",
    # Classification
    "classify",
    "compute_ary_and_degree",
    "junction_degrees",
    "junctions",
]
