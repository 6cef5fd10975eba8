"""Rendering of the generated Swift enum."""

import logging
from typing import Optional
from pydantic import BaseModel, Field

from ..pipeline.models import OutputEntry
from .expansion import expand_raw_values, member_access_prefix
from .markers import (
    RAW_VALUES_MARKER,
    VALUE_MARKER,
    CaseDeclaration,
    CaseElement,
    EnumDeclaration,
    Marker,
    MarkerArgument,
    validate_declaration,
)

logger = logging.getLogger(__name__)

GENERATED_HEADER = "// Generated by CEnumGen. Do not edit."
DEFAULT_SUPPORT_MODULE = "CEnumMacros"
INDENT = "  "


class EmittedSource(BaseModel):
    """Rendered file contents plus any warnings raised while rendering."""

    text: str
    warnings: list[str] = Field(default_factory=list)


def build_declaration(
    enum_name: str, entries: list[OutputEntry], access: Optional[str] = None
) -> EnumDeclaration:
    """Build the marker-annotated enum for the given entries, in order."""
    cases = [
        CaseDeclaration(
            elements=[CaseElement(name=entry.emitted_identifier)],
            markers=[
                Marker(
                    name=VALUE_MARKER,
                    arguments=[MarkerArgument(expression=entry.original_name)],
                )
            ],
        )
        for entry in entries
    ]
    return EnumDeclaration(name=enum_name, access=access, cases=cases)


class DeclarationEmitter:
    """
    Renders OutputEntry lists as a Swift source file.

    By default the enum carries @CEnumRawValues and one @CEnumValue per case
    and imports the support module that defines them. With ``expand`` set,
    the enum is written without markers and followed by the RawRepresentable
    extension the markers would have produced.
    """

    def __init__(
        self,
        enum_name: str,
        access: Optional[str] = None,
        imports: Optional[list[str]] = None,
        support_module: str = DEFAULT_SUPPORT_MODULE,
        expand: bool = False,
    ):
        self.enum_name = enum_name
        self.access = access
        self.imports = list(imports or [])
        self.support_module = support_module
        self.expand = expand

    def emit(self, entries: list[OutputEntry]) -> EmittedSource:
        """
        Render the file for the given entries.

        Args:
            entries: Collision-free entries in emission order

        Returns:
            EmittedSource whose text ends with a newline

        Raises:
            DeclarationError: If the enum would be rejected by the expansion
        """
        warnings = []
        if not entries:
            message = "No matching #define entries found"
            logger.debug(message)
            warnings.append(message)

        declaration = build_declaration(self.enum_name, entries, self.access)
        validate_declaration(declaration)

        lines = [GENERATED_HEADER]
        for module in self.imports:
            lines.append(f"import {module}")
        if not self.expand:
            lines.append(f"import {self.support_module}")
        lines.append("")

        if self.expand:
            lines.extend(self._render_plain(declaration))
            extension = expand_raw_values(declaration)
            if extension:
                lines.append("")
                lines.extend(extension.split("\n"))
        else:
            lines.extend(self._render_annotated(declaration))
        lines.append("")

        logger.info(f"Rendered enum {self.enum_name} with {len(entries)} cases")
        return EmittedSource(text="\n".join(lines), warnings=warnings)

    def _enum_line(self, declaration: EnumDeclaration) -> str:
        access = f"{declaration.access} " if declaration.access else ""
        return f"{access}enum {declaration.name} {{"

    def _render_annotated(self, declaration: EnumDeclaration) -> list[str]:
        case_access = member_access_prefix(declaration.access)
        lines = [f"@{RAW_VALUES_MARKER}", self._enum_line(declaration)]
        for case in declaration.cases:
            for marker in case.markers:
                lines.append(f"{INDENT}{marker.render()}")
            lines.append(f"{INDENT}{case_access}case {case.elements[0].name}")
            lines.append("")

        if lines[-1] == "":
            lines.pop()
        lines.append("}")
        return lines

    def _render_plain(self, declaration: EnumDeclaration) -> list[str]:
        case_access = member_access_prefix(declaration.access)
        lines = [self._enum_line(declaration)]
        for case in declaration.cases:
            lines.append(f"{INDENT}{case_access}case {case.elements[0].name}")
        lines.append("}")
        return lines
