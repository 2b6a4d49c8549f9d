"""
C# code generator module.

Generates static C# wrapper classes that forward every native to an
invoke function.
"""

from .config import CSHARP_ADVANCED_OPTIONS, CSHARP_OPTIONS, CSharpSettings
from .generator import CSharpGenerator
from .naming import create_csharp_sanitizer

__all__ = [
    "CSharpGenerator",
    "CSharpSettings",
    "CSHARP_OPTIONS",
    "CSHARP_ADVANCED_OPTIONS",
    "create_csharp_sanitizer",
]
