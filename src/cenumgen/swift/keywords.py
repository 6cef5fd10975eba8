"""Swift reserved words and backtick quoting."""

from ..pipeline.naming import KeywordPolicy

SWIFT_KEYWORDS: frozenset[str] = frozenset(
    {
        # Declarations
        "associatedtype", "class", "deinit", "enum", "extension", "fileprivate",
        "func", "import", "init", "inout", "internal", "let", "open", "operator",
        "private", "protocol", "public", "static", "struct", "subscript",
        "typealias", "var",
        # Statements
        "break", "case", "continue", "default", "defer", "do", "else",
        "fallthrough", "for", "guard", "if", "in", "repeat", "return", "switch",
        "where", "while",
        # Expressions and types
        "as", "any", "catch", "false", "is", "nil", "rethrows", "super", "self",
        "Self", "throw", "throws", "true", "try", "_",
    }
)


def is_swift_keyword(name: str) -> bool:
    return name in SWIFT_KEYWORDS


def quote_swift_identifier(name: str) -> str:
    return f"`{name}`"


SWIFT_KEYWORD_POLICY = KeywordPolicy(
    is_reserved=is_swift_keyword,
    quote=quote_swift_identifier,
)
