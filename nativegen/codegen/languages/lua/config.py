"""
Lua-specific settings, options schema and type mappings.
"""

from dataclasses import dataclass

from ...core.generator import (
    BASE_ADVANCED_OPTIONS,
    BASE_OPTIONS,
    CodeGeneratorBaseSettings,
)
from ...core.options import BooleanOption, ComboChoice, ComboOption, StringOption


@dataclass
class LuaSettings(CodeGeneratorBaseSettings):
    """Settings of the Lua script generator."""

    naming: str = "pascal"
    invoke_function: str = "Citizen.InvokeNative"
    namespace_tables: bool = False
    result_markers: bool = True
    emit_annotations: bool = True
    include_old_names: bool = False
    generate_manifest: bool = False


NAMING_CHOICES = (
    ComboChoice("Original (GET_LABEL_TEXT)", "original"),
    ComboChoice("PascalCase (GetLabelText)", "pascal"),
)

LUA_OPTIONS = BASE_OPTIONS + (
    ComboOption("Naming", "naming", NAMING_CHOICES),
    BooleanOption("Namespace tables", "namespace_tables"),
    BooleanOption("Type annotations", "emit_annotations"),
    BooleanOption("Include old names", "include_old_names"),
    BooleanOption("Generate hash manifest", "generate_manifest"),
)

LUA_ADVANCED_OPTIONS = BASE_ADVANCED_OPTIONS + (
    StringOption("Invoke function", "invoke_function"),
    BooleanOption("Result markers", "result_markers"),
)

# Catalog base types -> LuaLS annotation types
LUA_TYPE_MAP = {
    "float": "number",
    "double": "number",
    "BOOL": "boolean",
    "bool": "boolean",
    "Any": "any",
    "Vector3": "vector3",
}

DEFAULT_LUA_TYPE = "integer"

# Return type -> result marker passed as the last invoke argument
RESULT_MARKERS = {
    "string": "Citizen.ResultAsString()",
    "number": "Citizen.ResultAsFloat()",
    "vector3": "Citizen.ResultAsVector()",
}

DEFAULT_RESULT_MARKER = "Citizen.ResultAsInteger()"
