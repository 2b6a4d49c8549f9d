"""
Language-specific code generators.

This module contains one generator package per target language.
"""

from .cpp import CppGenerator
from .csharp import CSharpGenerator
from .lua import LuaGenerator
from .typescript import TypeScriptGenerator

__all__ = [
    "CppGenerator",
    "CSharpGenerator",
    "LuaGenerator",
    "TypeScriptGenerator",
]
