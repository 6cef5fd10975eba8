"""Swift output: keyword quoting, enum rendering, and raw-value expansion."""

from .keywords import SWIFT_KEYWORDS, SWIFT_KEYWORD_POLICY
from .markers import (
    CaseDeclaration,
    CaseElement,
    Diagnostic,
    EnumDeclaration,
    Marker,
    MarkerArgument,
    check_declaration,
    validate_declaration,
)
from .emitter import DeclarationEmitter, EmittedSource, build_declaration
from .expansion import expand_raw_values

__all__ = [
    "SWIFT_KEYWORDS",
    "SWIFT_KEYWORD_POLICY",
    "CaseDeclaration",
    "CaseElement",
    "Diagnostic",
    "EnumDeclaration",
    "Marker",
    "MarkerArgument",
    "check_declaration",
    "validate_declaration",
    "DeclarationEmitter",
    "EmittedSource",
    "build_declaration",
    "expand_raw_values",
]
