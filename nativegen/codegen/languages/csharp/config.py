"""
C#-specific settings, options schema and type mappings.
"""

from dataclasses import dataclass

from ...core.generator import (
    BASE_ADVANCED_OPTIONS,
    BASE_OPTIONS,
    CodeGeneratorBaseSettings,
)
from ...core.options import ComboChoice, ComboOption, StringOption


@dataclass
class CSharpSettings(CodeGeneratorBaseSettings):
    """Settings of the C# wrapper generator."""

    indentation: str = "    "
    namespace_name: str = "GTA.Native"
    naming: str = "pascal"
    pointer_style: str = "ref"
    invoke_function: str = "Function.Call"


NAMING_CHOICES = (
    ComboChoice("Original (GET_LABEL_TEXT)", "original"),
    ComboChoice("PascalCase (GetLabelText)", "pascal"),
)

POINTER_STYLE_CHOICES = (
    ComboChoice("ref parameters", "ref"),
    ComboChoice("Unsafe pointers", "unsafe"),
    ComboChoice("IntPtr", "intptr"),
)

CSHARP_OPTIONS = BASE_OPTIONS + (
    ComboOption("Naming", "naming", NAMING_CHOICES),
    ComboOption("Pointer style", "pointer_style", POINTER_STYLE_CHOICES),
    StringOption("Namespace", "namespace_name"),
)

CSHARP_ADVANCED_OPTIONS = BASE_ADVANCED_OPTIONS + (
    StringOption("Invoke function", "invoke_function"),
)

# Catalog base types -> C# types; unlisted engine types are int handles
CSHARP_TYPE_MAP = {
    "void": "void",
    "int": "int",
    "float": "float",
    "double": "double",
    "bool": "bool",
    "BOOL": "bool",
    "char": "char",
    "Hash": "uint",
    "uint": "uint",
    "Any": "long",
    "Vector3": "Vector3",
}

DEFAULT_HANDLE_TYPE = "int"
