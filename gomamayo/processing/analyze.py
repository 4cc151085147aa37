"""
Analysis: normalize a phrase, tokenize it, and classify its readings.

Also provides multi-phrase analysis where one failing phrase does not stop the
others, and the result/diagnostic formatting used by the CLI.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from typing import Iterable, Iterator, Optional, Tuple, Union

from gomamayo.core.classify import classify
from gomamayo.core.constants import (
    INPUT_ERROR_FORMAT,
    TOKENIZATION_ERROR_FORMAT,
    UNKNOWN_ERROR_FORMAT,
    UNKNOWN_READING_ERROR_FORMAT,
)
from gomamayo.core.errors import GomamayoError, InputError, TokenizationError, UnknownReadingError
from gomamayo.core.models import AnalyzerConfig, GomamayoAnalysis
from gomamayo.processing.tokenize import FugashiTokenizer, ReadingTokenizer, tokenize_to_readings

logger = logging.getLogger(__name__)


def normalize_text(text: str) -> str:
    """NFC normalize, trim, and collapse internal whitespace."""
    if not text:
        return ""
    normalized = unicodedata.normalize("NFC", text)
    return re.sub(r"\s+", " ", normalized).strip()


def get_tokenizer(config: Optional[AnalyzerConfig] = None) -> ReadingTokenizer:
    """Factory function to get the tokenizer for a configuration."""
    config = config or AnalyzerConfig()
    if config.backend == "fugashi":
        return FugashiTokenizer(user_dictionary=config.user_dictionary)
    raise ValueError(f"Unsupported tokenizer backend: {config.backend}")


def analyze(
    text: str,
    tokenizer: Optional[ReadingTokenizer] = None,
    config: Optional[AnalyzerConfig] = None,
) -> GomamayoAnalysis:
    """
    Analyze one phrase.

    Args:
        text: Phrase to analyze
        tokenizer: Tokenizer to use; built from `config` when omitted
        config: Analyzer configuration

    Returns:
        GomamayoAnalysis for the phrase

    Raises:
        TokenizationError: If the phrase is empty or cannot be tokenized
        UnknownReadingError: If a token has no reading
    """
    config = config or AnalyzerConfig()
    phrase = normalize_text(text) if config.normalize else text
    if not phrase:
        raise TokenizationError("Nothing to tokenize", text=text)

    tokenizer = tokenizer or get_tokenizer(config)
    readings = tokenize_to_readings(phrase, tokenizer)
    return classify(readings)


def analyze_many(
    phrases: Iterable[str],
    tokenizer: Optional[ReadingTokenizer] = None,
    config: Optional[AnalyzerConfig] = None,
) -> Iterator[Tuple[str, Union[GomamayoAnalysis, GomamayoError]]]:
    """
    Analyze phrases one by one, yielding each phrase with its analysis or error.

    The tokenizer is built once and shared. Library errors are yielded in place
    of the analysis so later phrases are still processed.
    """
    config = config or AnalyzerConfig()
    tokenizer = tokenizer or get_tokenizer(config)
    for phrase in phrases:
        try:
            yield phrase, analyze(phrase, tokenizer=tokenizer, config=config)
        except GomamayoError as exc:
            logger.debug("Analysis failed for %r: %s", phrase, exc)
            yield phrase, exc


def format_result(phrase: str, analysis: GomamayoAnalysis) -> str:
    """Render the result line for a phrase."""
    return analysis.describe(phrase)


def format_error(phrase: str, error: Exception) -> str:
    """Render a diagnostic for a failed phrase."""
    if isinstance(error, UnknownReadingError):
        message = UNKNOWN_READING_ERROR_FORMAT.format(text=error.text)
    elif isinstance(error, TokenizationError):
        message = TOKENIZATION_ERROR_FORMAT.format(detail=error.message)
    elif isinstance(error, InputError):
        message = INPUT_ERROR_FORMAT.format(detail=error.message)
    else:
        message = UNKNOWN_ERROR_FORMAT.format(detail=error)
    return f"{message} ({phrase})" if phrase else message
