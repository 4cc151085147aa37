"""
Core domain models for gomamayo analysis.

Defines typed structures for tokenizer output, junctions between readings,
the analysis result, and the analyzer configuration model.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from gomamayo.core.constants import GOMAMAYO_FORMAT, NOT_GOMAMAYO_FORMAT


class AnalyzerConfig(BaseModel):
    """Configuration for phrase analysis."""

    backend: Literal["fugashi"] = "fugashi"
    user_dictionary: Optional[Path] = None
    normalize: bool = True


class Token(BaseModel):
    """A token produced by a tokenizer, with its reading if one was found."""

    model_config = ConfigDict(frozen=True)

    text: str
    reading: Optional[str] = None


class Junction(BaseModel):
    """The boundary between two consecutive readings."""

    model_config = ConfigDict(frozen=True)

    left: str
    right: str
    degree: int = Field(default=0, ge=0)


class GomamayoKind(BaseModel):
    """How many junctions overlap (ary) and the longest overlap in morae (degree)."""

    model_config = ConfigDict(frozen=True)

    ary: int = Field(ge=0)
    degree: int = Field(ge=0)


class GomamayoAnalysis(BaseModel):
    """Result of analyzing one phrase."""

    model_config = ConfigDict(frozen=True)

    kind: Optional[GomamayoKind] = None
    readings: List[str] = Field(default_factory=list)

    @property
    def is_gomamayo(self) -> bool:
        return self.kind is not None

    def describe(self, phrase: str) -> str:
        if self.kind is None:
            return NOT_GOMAMAYO_FORMAT.format(phrase=phrase)
        return GOMAMAYO_FORMAT.format(phrase=phrase, ary=self.kind.ary, degree=self.kind.degree)
