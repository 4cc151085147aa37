"""
Tokenization: split a phrase into words and resolve each word's reading.

`ReadingTokenizer` is the boundary to the morphological analyzer. The default
backend is MeCab through fugashi with the UniDic dictionary; any other
implementation can be injected.
"""

from __future__ import annotations

import logging
import shlex
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from gomamayo.core.constants import MISSING_FEATURE_VALUES, READING_FIELDS
from gomamayo.core.errors import TokenizationError, UnknownReadingError
from gomamayo.core.models import Token

logger = logging.getLogger(__name__)


class ReadingTokenizer(ABC):
    """
    Abstract interface for tokenizers.

    Implementations return tokens in phrase order. A token whose reading could
    not be resolved carries ``reading=None``; it must not be given a guessed one.
    """

    @abstractmethod
    def tokenize(self, text: str) -> List[Token]:
        """
        Split text into tokens with readings.

        Raises:
            TokenizationError: If the text cannot be tokenized
        """


class FugashiTokenizer(ReadingTokenizer):
    """MeCab (via fugashi) over UniDic."""

    def __init__(
        self,
        user_dictionary: Optional[Path] = None,
        reading_fields: Sequence[str] = READING_FIELDS,
    ) -> None:
        """
        Initialize the tagger.

        :param user_dictionary: Compiled MeCab user dictionary with corrected
            readings (e.g. for proper nouns).
        :param reading_fields: UniDic features to try, in order, for a reading.
        """
        # Import at runtime so the core stays usable without MeCab installed
        import fugashi  # type: ignore

        args = f"-u {shlex.quote(str(user_dictionary))}" if user_dictionary else ""
        try:
            self.tagger: Any = fugashi.Tagger(args)
        except RuntimeError as exc:
            raise TokenizationError(f"Failed to initialize MeCab: {exc}") from exc
        self.reading_fields = tuple(reading_fields)
        logger.debug("Initialized fugashi tagger (user dictionary: %s)", user_dictionary)

    def _reading_for(self, node: Any) -> Optional[str]:
        for field in self.reading_fields:
            value = getattr(node.feature, field, None)
            if value is not None and value not in MISSING_FEATURE_VALUES:
                return value
        return None

    def tokenize(self, text: str) -> List[Token]:
        try:
            nodes = self.tagger(text)
        except (RuntimeError, ValueError) as exc:
            raise TokenizationError(str(exc), text=text) from exc
        return [Token(text=node.surface, reading=self._reading_for(node)) for node in nodes]


class StaticTokenizer(ReadingTokenizer):
    """
    Tokenizer backed by pre-split phrases.

    Maps a phrase to its ``(text, reading)`` pairs; useful when readings are
    already known, and in tests.
    """

    def __init__(self, phrases: Optional[Dict[str, List[Tuple[str, Optional[str]]]]] = None) -> None:
        self.phrases: Dict[str, List[Tuple[str, Optional[str]]]] = dict(phrases or {})

    def add(self, phrase: str, pairs: Iterable[Tuple[str, Optional[str]]]) -> None:
        self.phrases[phrase] = list(pairs)

    def tokenize(self, text: str) -> List[Token]:
        if text not in self.phrases:
            raise TokenizationError("Phrase is not known to the static tokenizer", text=text)
        return [Token(text=surface, reading=reading) for surface, reading in self.phrases[text]]


def tokenize_to_readings(text: str, tokenizer: ReadingTokenizer) -> List[str]:
    """
    Tokenize text and return the reading of every token.

    Args:
        text: Phrase to tokenize
        tokenizer: Tokenizer to use

    Returns:
        Readings in phrase order

    Raises:
        TokenizationError: If the tokenizer fails
        UnknownReadingError: For the first token without a reading
    """
    readings: List[str] = []
    for token in tokenizer.tokenize(text):
        if not token.text.strip():
            continue
        if not token.reading:
            raise UnknownReadingError(token.text)
        readings.append(token.reading)
    logger.debug("Readings for %r: %s", text, readings)
    return readings
