"""
Naming utilities for safe code generation.

Handles name sanitization, case conversions and keyword conflicts
across the target languages. Every conversion is a pure function of
its input so repeated exports render identical names.
"""

import re
from enum import Enum
from typing import Dict, Optional, Set


class NamingCase(Enum):
    """Different naming case styles."""

    ORIGINAL = "original"  # GET_LABEL_TEXT
    SNAKE_CASE = "snake"  # get_label_text
    CAMEL_CASE = "camel"  # getLabelText
    PASCAL_CASE = "pascal"  # GetLabelText
    SCREAMING_SNAKE = "screaming_snake"  # GET_LABEL_TEXT


# Unnamed natives are published as their hash, e.g. _0x4EDE34FBADD967A6
_HASH_NAME = re.compile(r"^_?0x[0-9A-Fa-f]+$")


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        builtin_types: Optional[Set[str]] = None,
        conflict_format: str = "{name}_",
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin names that might conflict
            conflict_format: How to rewrite a conflicting name
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self.conflict_format = conflict_format
        self._name_cache: Dict[str, str] = {}

    def sanitize_name(
        self, name: str, target_case: NamingCase = NamingCase.ORIGINAL
    ) -> str:
        """
        Sanitize a name for safe use in the target language.

        Args:
            name: Original name to sanitize
            target_case: Desired case style

        Returns:
            Sanitized name safe for use
        """
        cache_key = f"{name}\x00{target_case.value}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        if _HASH_NAME.match(name):
            converted = "_0x" + name.lstrip("_")[2:].upper()
        else:
            cleaned = self._clean_basic(name)
            converted = self.convert_case(cleaned, target_case)

        final_name = self._resolve_conflicts(converted)
        self._name_cache[cache_key] = final_name
        return final_name

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_words or name in self.builtin_types

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - replace invalid characters."""
        cleaned = re.sub(r"[^a-zA-Z0-9_]", "_", name)
        cleaned = cleaned.strip("_")

        if cleaned and cleaned[0].isdigit():
            cleaned = f"_{cleaned}"

        if not cleaned:
            cleaned = "unnamed"

        return cleaned

    @classmethod
    def convert_case(cls, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return cls._to_snake_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return cls._to_camel_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return cls._to_pascal_case(name)
        elif target_case == NamingCase.SCREAMING_SNAKE:
            return cls._to_snake_case(name).upper()
        else:
            return name

    @staticmethod
    def _to_snake_case(name: str) -> str:
        """Convert to snake_case."""
        name = name.replace("-", "_")
        # Humps only split mixed-case names; in UPPER_SNAKE "3D" is one word
        if name != name.upper():
            name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
        name = name.lower()
        name = re.sub(r"_+", "_", name)
        return name.strip("_")

    @classmethod
    def _to_camel_case(cls, name: str) -> str:
        """Convert to camelCase."""
        parts = [part for part in cls._to_snake_case(name).split("_") if part]
        if not parts:
            return name
        return parts[0] + "".join(part.capitalize() for part in parts[1:])

    @classmethod
    def _to_pascal_case(cls, name: str) -> str:
        """Convert to PascalCase."""
        parts = cls._to_snake_case(name).split("_")
        return "".join(part.capitalize() for part in parts if part)

    def _resolve_conflicts(self, name: str) -> str:
        """Rewrite names that collide with reserved words or builtins."""
        if self.is_reserved(name):
            return self.conflict_format.format(name=name)
        return name
