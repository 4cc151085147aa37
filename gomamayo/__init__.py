"""
Gomamayo: detect phonetic overlap across word boundaries in Japanese phrases.

This package segments katakana readings into morae, finds where the end of one
word's reading repeats at the start of the next, and classifies the phrase by
how many junctions overlap (ary) and by the longest overlap (degree).
"""

from gomamayo.core.classify import classify, compute_ary_and_degree
from gomamayo.core.errors import GomamayoError, InputError, TokenizationError, UnknownReadingError
from gomamayo.core.models import AnalyzerConfig, GomamayoAnalysis, GomamayoKind
from gomamayo.processing.analyze import analyze, analyze_many

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "analyze",
    "analyze_many",
    "classify",
    "compute_ary_and_degree",
    # Models
    "AnalyzerConfig",
    "GomamayoAnalysis",
    "GomamayoKind",
    # Exceptions
    "GomamayoError",
    "TokenizationError",
    "UnknownReadingError",
    "InputError",
]
