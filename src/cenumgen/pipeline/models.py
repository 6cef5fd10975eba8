"""Data models flowing through the generation pipeline."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CaseStyle(str, Enum):
    """Naming convention applied to a stripped C name."""

    KEEP = "keep"
    LOWER_CAMEL = "lowerCamel"
    UPPER_CAMEL = "upperCamel"


class RawEntry(BaseModel):
    """A constant name exactly as it appears in the header."""

    model_config = ConfigDict(frozen=True)

    source_name: str


class Candidate(BaseModel):
    """A RawEntry plus the fields derived for it by each stage.

    Stages never rewrite a field set by an earlier stage; each one returns an
    updated copy with its own field filled in.
    """

    model_config = ConfigDict(frozen=True)

    source_name: str
    filtered_in: Optional[bool] = None
    stripped_name: Optional[str] = None
    styled_name: Optional[str] = None
    sanitized_name: Optional[str] = None


class OutputEntry(BaseModel):
    """Final mapping from a C constant to its emitted case identifier."""

    model_config = ConfigDict(frozen=True)

    original_name: str
    emitted_identifier: str  # Quoted if it is a reserved word


class ScanResult(BaseModel):
    """Names found by the header scanner, in first-seen order."""

    entries: list[RawEntry] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class GenerationResult(BaseModel):
    """Outcome of one generation run."""

    entries: list[OutputEntry] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    text: str = ""
