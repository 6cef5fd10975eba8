"""Expansion of @CEnumRawValues into an explicit RawRepresentable extension."""

from .markers import EnumDeclaration, validate_declaration

INDENT = "  "

# Members of an extension must repeat these levels to be visible outside
EXPORTED_ACCESS_LEVELS = ("public", "package")


def member_access_prefix(access) -> str:
    if access in EXPORTED_ACCESS_LEVELS:
        return f"{access} "
    return ""


def expand_raw_values(declaration: EnumDeclaration) -> str:
    """
    Render the extension the raw-value expansion generates for an enum.

    The extension maps every case to the C constant named by its
    @CEnumValue marker and back again.

    Args:
        declaration: A declaration carrying one @CEnumValue per case

    Returns:
        The extension source without a trailing newline, or an empty string
        when the enum has no cases

    Raises:
        DeclarationError: If the declaration breaks the expansion's rules
    """
    validate_declaration(declaration)

    mappings = [
        (case.elements[0].name, case.value_expression()) for case in declaration.cases
    ]
    if not mappings:
        return ""

    member = member_access_prefix(declaration.access)
    lines = [
        f"extension {declaration.name}: RawRepresentable {{",
        f"{INDENT}{member}typealias RawValue = String",
        f"{INDENT}{member}init?(rawValue: String) {{",
        f"{INDENT * 2}switch rawValue {{",
    ]
    for case_name, value in mappings:
        lines.append(f"{INDENT * 3}case {value}:")
        lines.append(f"{INDENT * 3}self = .{case_name}")
    lines.extend(
        [
            f"{INDENT * 3}default:",
            f"{INDENT * 3}return nil",
            f"{INDENT * 2}}}",
            f"{INDENT}}}",
            "",
            f"{INDENT}{member}var rawValue: String {{",
            f"{INDENT * 2}switch self {{",
        ]
    )
    for case_name, value in mappings:
        lines.append(f"{INDENT * 3}case .{case_name}:")
        lines.append(f"{INDENT * 3}return {value}")
    lines.extend([f"{INDENT * 2}}}", f"{INDENT}}}", "}"])

    return "\n".join(lines)
