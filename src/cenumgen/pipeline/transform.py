"""Runs the scanner, filter, transformer, and collision detector in sequence."""

import logging
from typing import Optional, Pattern

from pydantic import BaseModel, Field

from ..exceptions import IdentifierCollisionError
from .collisions import CollisionDetector
from .filters import passes_filter
from .models import CaseStyle, Candidate, OutputEntry, RawEntry
from .naming import (
    NO_RESERVED_WORDS,
    KeywordPolicy,
    apply_case_style,
    sanitize_identifier,
    strip_affixes,
)
from .scanner import scan_header

logger = logging.getLogger(__name__)


class TransformOptions(BaseModel):
    """The part of the run configuration the name pipeline needs."""

    match: Optional[Pattern] = None
    drop_prefixes: list[str] = Field(default_factory=list)
    drop_suffixes: list[str] = Field(default_factory=list)
    case_style: CaseStyle = CaseStyle.LOWER_CAMEL


class TransformResult(BaseModel):
    entries: list[OutputEntry] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


def transform_candidate(
    entry: RawEntry, options: TransformOptions, warnings: list[str]
) -> Optional[Candidate]:
    """
    Take one scanned name through filtering, stripping, styling, and sanitizing.

    Returns:
        The fully derived Candidate, or None if it was filtered out or
        became empty after affix stripping
    """
    candidate = Candidate(source_name=entry.source_name)

    filtered_in = passes_filter(entry.source_name, options.match)
    candidate = candidate.model_copy(update={"filtered_in": filtered_in})
    if not filtered_in:
        return None

    stripped = strip_affixes(entry.source_name, options.drop_prefixes, options.drop_suffixes)
    if not stripped:
        message = f"Skipping {entry.source_name}: name is empty after dropping prefix/suffix"
        logger.debug(message)
        warnings.append(message)
        return None
    candidate = candidate.model_copy(update={"stripped_name": stripped})

    styled = apply_case_style(stripped, options.case_style)
    candidate = candidate.model_copy(update={"styled_name": styled})

    return candidate.model_copy(update={"sanitized_name": sanitize_identifier(styled)})


def transform_header(
    text: str,
    options: TransformOptions,
    keywords: KeywordPolicy = NO_RESERVED_WORDS,
) -> TransformResult:
    """
    Turn header text into ordered, collision-free output entries.

    Args:
        text: Raw header source
        options: Filter, affix, and case-style settings
        keywords: Reserved-word policy of the target syntax

    Returns:
        TransformResult with entries in first-occurrence order

    Raises:
        IdentifierCollisionError: On the first identifier produced by two
            different C names
    """
    scan = scan_header(text)
    warnings = list(scan.warnings)
    detector = CollisionDetector()
    entries = []

    for raw in scan.entries:
        candidate = transform_candidate(raw, options, warnings)
        if candidate is None:
            continue

        try:
            detector.claim(candidate.sanitized_name, candidate.source_name)
        except IdentifierCollisionError as e:
            e.warnings = list(warnings)
            raise
        entries.append(
            OutputEntry(
                original_name=candidate.source_name,
                emitted_identifier=keywords.escape(candidate.sanitized_name),
            )
        )

    logger.info(f"Transformed {len(entries)} of {len(scan.entries)} #define names")
    return TransformResult(entries=entries, warnings=warnings)
