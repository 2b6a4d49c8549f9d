"""
C++ code generator module.

Generates a C++ header declaring (or wrapping) every native, grouped into
one namespace per catalog namespace.
"""

from .config import CPP_ADVANCED_OPTIONS, CPP_OPTIONS, CppSettings
from .generator import CppGenerator
from .naming import create_cpp_sanitizer

__all__ = [
    "CppGenerator",
    "CppSettings",
    "CPP_OPTIONS",
    "CPP_ADVANCED_OPTIONS",
    "create_cpp_sanitizer",
]
