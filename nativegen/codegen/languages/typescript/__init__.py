"""
TypeScript code generator module.

Generates ambient TypeScript declarations for every native.
"""

from .config import TYPESCRIPT_ADVANCED_OPTIONS, TYPESCRIPT_OPTIONS, TypeScriptSettings
from .generator import TypeScriptGenerator
from .naming import create_typescript_sanitizer

__all__ = [
    "TypeScriptGenerator",
    "TypeScriptSettings",
    "TYPESCRIPT_OPTIONS",
    "TYPESCRIPT_ADVANCED_OPTIONS",
    "create_typescript_sanitizer",
]
