"""
Lua-specific naming utilities and sanitization.
"""

from ...core.naming import NameSanitizer


# Lua reserved words
LUA_RESERVED_WORDS = {
    "and",
    "break",
    "do",
    "else",
    "elseif",
    "end",
    "false",
    "for",
    "function",
    "goto",
    "if",
    "in",
    "local",
    "nil",
    "not",
    "or",
    "repeat",
    "return",
    "then",
    "true",
    "until",
    "while",
}


def create_lua_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Lua."""
    return NameSanitizer(LUA_RESERVED_WORDS)
