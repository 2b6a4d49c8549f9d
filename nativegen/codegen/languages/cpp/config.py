"""
C++-specific settings, options schema and type tables.
"""

from dataclasses import dataclass

from ...core.generator import (
    BASE_ADVANCED_OPTIONS,
    BASE_OPTIONS,
    CodeGeneratorBaseSettings,
)
from ...core.options import BooleanOption, StringOption


@dataclass
class CppSettings(CodeGeneratorBaseSettings):
    """Settings of the C++ header generator."""

    generate_invokers: bool = False
    invoke_function: str = "invoke"
    include_hash_comments: bool = False
    generate_types_header: bool = False


CPP_OPTIONS = BASE_OPTIONS + (
    BooleanOption("Generate invoke wrappers", "generate_invokers"),
    BooleanOption("Generate types.h", "generate_types_header"),
)

CPP_ADVANCED_OPTIONS = BASE_ADVANCED_OPTIONS + (
    StringOption("Invoke function", "invoke_function"),
    BooleanOption("Include hash comments", "include_hash_comments"),
)

# Types the compiler already knows; everything else needs a typedef
CPP_PRIMITIVE_TYPES = {
    "void",
    "bool",
    "char",
    "short",
    "int",
    "long",
    "float",
    "double",
    "unsigned",
    "unsigned int",
    "unsigned char",
    "unsigned short",
    "long long",
    "unsigned long long",
    "int8_t",
    "int16_t",
    "int32_t",
    "int64_t",
    "uint8_t",
    "uint16_t",
    "uint32_t",
    "uint64_t",
}

# Engine types that are not plain integer handles
CPP_TYPEDEFS = {
    "Any": "int",
    "BOOL": "int",
    "Hash": "unsigned int",
    "uint": "unsigned int",
    "Void": "unsigned int",
}

DEFAULT_HANDLE_TYPE = "int"
