"""
Native Code Export Module

Exports native catalogs as source code in various languages.
"""

from typing import Any, Mapping, Optional, Union

from .core.exporter import ExportResult, NativeExporter, run_export
from .core.generator import CodeGenerator, CodeGeneratorBase, GeneratorError
from .core.schema import CodeGeneratorFile, CodeGenNative, CodeGenType
from .registry import (
    LanguageRegistry,
    LanguageSpec,
    RegistryError,
    create_generator,
    get_language,
    get_language_info,
    get_registry,
    list_supported_languages,
)

# Version info
__version__ = "0.1.0"


def export_catalog(
    language: str,
    catalog: Any,
    settings: Optional[Union[Any, Mapping[str, Any]]] = None,
) -> ExportResult:
    """
    Export a whole catalog with one backend.

    Args:
        language: Backend name or alias
        catalog: NativeCatalog or ``{namespaces, natives}`` mapping
        settings: Backend settings dataclass or field dict

    Returns:
        ExportResult with the generated code and extra files
    """
    generator = create_generator(language, settings)
    return run_export(generator, catalog)


def preview_native(
    language: str,
    catalog: Any,
    native_hash: str,
    settings: Optional[Union[Any, Mapping[str, Any]]] = None,
) -> ExportResult:
    """
    Export a single native, inside its namespace, for previewing.

    Args:
        language: Backend name or alias
        catalog: NativeCatalog holding the native
        native_hash: Hash of the native to show
        settings: Backend settings dataclass or field dict

    Returns:
        ExportResult for a one-native catalog
    """
    return export_catalog(language, catalog.subset(hashes=[native_hash]), settings)


# Export main interfaces
__all__ = [
    "CodeGenerator",
    "CodeGeneratorBase",
    "CodeGeneratorFile",
    "CodeGenNative",
    "CodeGenType",
    "GeneratorError",
    "NativeExporter",
    "ExportResult",
    "LanguageRegistry",
    "LanguageSpec",
    "RegistryError",
    "create_generator",
    "export_catalog",
    "get_language",
    "get_language_info",
    "get_registry",
    "list_supported_languages",
    "preview_native",
    "run_export",
]
