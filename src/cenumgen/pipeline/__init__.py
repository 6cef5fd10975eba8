"""Header-to-identifier pipeline.

Scans #define names, filters them, strips affixes, applies a case style,
sanitizes the result, and rejects duplicate identifiers. Nothing here knows
about the target language beyond the injected KeywordPolicy.
"""

from .models import (
    CaseStyle,
    RawEntry,
    Candidate,
    OutputEntry,
    ScanResult,
    GenerationResult,
)
from .scanner import scan_header
from .filters import passes_filter
from .naming import (
    KeywordPolicy,
    NO_RESERVED_WORDS,
    apply_case_style,
    sanitize_identifier,
    strip_affixes,
)
from .collisions import CollisionDetector
from .transform import TransformOptions, TransformResult, transform_header

__all__ = [
    "CaseStyle",
    "RawEntry",
    "Candidate",
    "OutputEntry",
    "ScanResult",
    "GenerationResult",
    "scan_header",
    "passes_filter",
    "KeywordPolicy",
    "NO_RESERVED_WORDS",
    "apply_case_style",
    "sanitize_identifier",
    "strip_affixes",
    "CollisionDetector",
    "TransformOptions",
    "TransformResult",
    "transform_header",
]
