"""
TypeScript-specific naming utilities and sanitization.
"""

from ...core.naming import NameSanitizer


# TypeScript reserved words (strict mode)
TYPESCRIPT_RESERVED_WORDS = {
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "implements",
    "import",
    "in",
    "instanceof",
    "interface",
    "let",
    "new",
    "null",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "static",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "var",
    "void",
    "while",
    "with",
    "yield",
}


def create_typescript_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for TypeScript."""
    return NameSanitizer(TYPESCRIPT_RESERVED_WORDS)
