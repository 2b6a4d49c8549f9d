"""
Core code generation components.

Provides the type model, the generator contract and the utilities shared by
all language backends.
"""

from .config import (
    ConfigError,
    SettingsStore,
    load_settings,
    settings_from_dict,
    settings_to_dict,
)
from .exporter import (
    DataIntegrityError,
    ExportError,
    ExportResult,
    MissingNativeError,
    NativeExporter,
    run_export,
)
from .generator import (
    CodeGenerator,
    CodeGeneratorBase,
    CodeGeneratorBaseSettings,
    ContractViolationError,
    GeneratorError,
    GeneratorState,
)
from .naming import NameSanitizer, NamingCase
from .options import (
    BooleanOption,
    CodeGenOption,
    ComboChoice,
    ComboOption,
    OptionsSchemaError,
    OptionValueError,
    SettingsEditor,
    StringOption,
)
from .schema import (
    CodeGenNative,
    CodeGenParam,
    CodeGenType,
    CodeGeneratorFile,
    canonical_hash,
)
from .templates import TemplateEngine, TemplateError, create_template_engine
from .writer import CodeWriter

__all__ = [
    # Type model
    "CodeGenType",
    "CodeGenParam",
    "CodeGenNative",
    "CodeGeneratorFile",
    "canonical_hash",
    # Generator contract
    "CodeGenerator",
    "CodeGeneratorBase",
    "CodeGeneratorBaseSettings",
    "GeneratorState",
    "GeneratorError",
    "ContractViolationError",
    "CodeWriter",
    # Export driver
    "NativeExporter",
    "ExportResult",
    "ExportError",
    "DataIntegrityError",
    "MissingNativeError",
    "run_export",
    # Options schema
    "BooleanOption",
    "StringOption",
    "ComboOption",
    "ComboChoice",
    "CodeGenOption",
    "SettingsEditor",
    "OptionsSchemaError",
    "OptionValueError",
    # Configuration system
    "ConfigError",
    "SettingsStore",
    "load_settings",
    "settings_from_dict",
    "settings_to_dict",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
