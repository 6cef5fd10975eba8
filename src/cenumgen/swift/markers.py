"""Enum declaration model and the checks the raw-value expansion relies on.

The ``@CEnumRawValues`` expansion rejects enums that already declare a raw
type, cases with several elements, associated values or explicit raw values,
and cases whose ``@CEnumValue`` marker is missing, duplicated or malformed.
Generated declarations are checked against the same rules before they are
rendered so that the output is always accepted downstream.
"""

import logging
from typing import Optional
from pydantic import BaseModel, Field

from ..exceptions import DeclarationError

logger = logging.getLogger(__name__)

RAW_VALUES_MARKER = "CEnumRawValues"
VALUE_MARKER = "CEnumValue"


class MarkerArgument(BaseModel):
    """One argument of an attribute, e.g. ``kIOPSPowerAdapterIDKey``."""

    expression: str
    label: Optional[str] = None


class Marker(BaseModel):
    """An attribute attached to a case declaration."""

    name: str
    arguments: list[MarkerArgument] = Field(default_factory=list)

    def render(self) -> str:
        args = ", ".join(
            f"{arg.label}: {arg.expression}" if arg.label else arg.expression
            for arg in self.arguments
        )
        return f"@{self.name}({args})"


class CaseElement(BaseModel):
    """A single name inside a ``case`` declaration."""

    name: str
    has_associated_values: bool = False
    raw_value: Optional[str] = None


class CaseDeclaration(BaseModel):
    """A ``case`` line together with the markers attached to it."""

    elements: list[CaseElement]
    markers: list[Marker] = Field(default_factory=list)

    def value_expression(self) -> Optional[str]:
        """Return the argument of the single @CEnumValue marker, if present and valid."""
        values = [m for m in self.markers if m.name == VALUE_MARKER]
        if len(values) != 1:
            return None
        arguments = values[0].arguments
        if len(arguments) != 1 or arguments[0].label is not None:
            return None
        return arguments[0].expression


class EnumDeclaration(BaseModel):
    """An enum declaration ready to be rendered or expanded."""

    name: str
    access: Optional[str] = None
    inherited_types: list[str] = Field(default_factory=list)
    cases: list[CaseDeclaration] = Field(default_factory=list)


class Diagnostic(BaseModel):
    """A reason the raw-value expansion would reject a declaration."""

    id: str
    message: str


def _diagnostic(name: str, message: str) -> Diagnostic:
    return Diagnostic(id=f"CEnumMacros.{name}", message=message)


def _check_case(case: CaseDeclaration) -> Optional[Diagnostic]:
    if len(case.elements) != 1:
        return _diagnostic(
            "multipleCaseElements",
            f"@{RAW_VALUES_MARKER} requires one case per declaration.",
        )

    element = case.elements[0]
    if element.has_associated_values:
        return _diagnostic(
            "associatedValuesNotSupported",
            f"@{RAW_VALUES_MARKER} does not support associated values.",
        )
    if element.raw_value is not None:
        return _diagnostic(
            "rawValueNotSupported",
            f"@{RAW_VALUES_MARKER} cases must not declare raw values.",
        )

    values = [m for m in case.markers if m.name == VALUE_MARKER]
    if len(values) > 1:
        return _diagnostic("duplicateCEnumValue", f"Duplicate @{VALUE_MARKER} attribute found.")
    if not values:
        return _diagnostic(
            "missingCEnumValue", f"Missing @{VALUE_MARKER} for case '{element.name}'."
        )

    arguments = values[0].arguments
    if len(arguments) != 1 or arguments[0].label is not None or not arguments[0].expression:
        return _diagnostic(
            "invalidCEnumValueArguments",
            f"@{VALUE_MARKER} requires a single unlabeled argument.",
        )
    return None


def check_declaration(declaration: EnumDeclaration) -> list[Diagnostic]:
    """
    Collect every reason the raw-value expansion would reject a declaration.

    Args:
        declaration: The enum to check

    Returns:
        Diagnostics in declaration order; empty when the enum is accepted
    """
    if declaration.inherited_types:
        return [
            _diagnostic(
                "rawTypeNotSupported",
                f"@{RAW_VALUES_MARKER} enums must not declare a raw type or other conformances.",
            )
        ]

    diagnostics = []
    for case in declaration.cases:
        diagnostic = _check_case(case)
        if diagnostic:
            diagnostics.append(diagnostic)
    return diagnostics


def validate_declaration(declaration: EnumDeclaration) -> None:
    """Raise DeclarationError for the first problem check_declaration finds."""
    diagnostics = check_declaration(declaration)
    for diagnostic in diagnostics[1:]:
        logger.debug(f"Additional declaration problem: {diagnostic.message}")
    if diagnostics:
        first = diagnostics[0]
        raise DeclarationError(first.message, first.id)
