"""
Mora segmentation for katakana readings.

A mora is one base character followed by any small kana (ャ, ュ, ョ, ァ ...)
that attach to it. Every other character, including the prolonged sound mark,
starts a new mora.
"""

import logging
from typing import List

from gomamayo.core.constants import SMALL_KANA

logger = logging.getLogger(__name__)


def is_combining(char: str) -> bool:
    """Return True if `char` attaches to the preceding mora."""
    return char in SMALL_KANA


def segment_morae(reading: str) -> List[str]:
    """
    Split a reading into morae.

    Args:
        reading: Phonetic reading, e.g. "オレンジジュース"

    Returns:
        List of morae, e.g. ["オ", "レ", "ン", "ジ", "ジュ", "ー", "ス"].
        Joining the list gives back `reading`.
    """
    morae: List[str] = []
    buffer = ""
    for char in reading:
        if not is_combining(char) and buffer:
            morae.append(buffer)
            buffer = ""
        buffer += char
    if buffer:
        morae.append(buffer)

    logger.debug("Segmented %r into %s", reading, morae)
    return morae
