"""
TypeScript-specific settings, options schema and type mappings.
"""

from dataclasses import dataclass

from ...core.generator import (
    BASE_ADVANCED_OPTIONS,
    BASE_OPTIONS,
    CodeGeneratorBaseSettings,
)
from ...core.options import BooleanOption, ComboChoice, ComboOption


@dataclass
class TypeScriptSettings(CodeGeneratorBaseSettings):
    """Settings of the TypeScript declaration generator."""

    naming: str = "camel"
    export_namespaces: bool = False


NAMING_CHOICES = (
    ComboChoice("Original (GET_LABEL_TEXT)", "original"),
    ComboChoice("camelCase (getLabelText)", "camel"),
    ComboChoice("PascalCase (GetLabelText)", "pascal"),
)

TYPESCRIPT_OPTIONS = BASE_OPTIONS + (
    ComboOption("Naming", "naming", NAMING_CHOICES),
)

TYPESCRIPT_ADVANCED_OPTIONS = BASE_ADVANCED_OPTIONS + (
    BooleanOption("Export namespaces", "export_namespaces"),
)

TYPESCRIPT_TYPE_MAP = {
    "void": "void",
    "BOOL": "boolean",
    "bool": "boolean",
    "Any": "any",
    "Vector3": "Vector3",
}

DEFAULT_TYPESCRIPT_TYPE = "number"
