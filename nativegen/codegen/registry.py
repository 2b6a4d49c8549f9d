"""
Language registry for managing available code export backends.

Maps backend identifiers and their aliases to LanguageSpec records that
bundle a generator class with its settings type and options schema.
"""

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, Union

from ..logging_config import get_logger
from .core.config import load_settings, settings_key
from .core.generator import CodeGenerator, CodeGeneratorBase
from .core.options import CodeGenOption, SettingsEditor

logger = get_logger(__name__)


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


@dataclass(frozen=True)
class LanguageSpec:
    """Everything needed to offer one backend to a user."""

    name: str
    display_name: str
    generator_class: Type[CodeGeneratorBase]
    options: Tuple[CodeGenOption, ...] = ()
    advanced_options: Tuple[CodeGenOption, ...] = ()
    aliases: Tuple[str, ...] = ()

    @property
    def settings_class(self) -> type:
        return self.generator_class.settings_class

    @property
    def extension(self) -> str:
        return self.generator_class.file_extension

    @property
    def settings_key(self) -> str:
        return settings_key(self.name)

    @property
    def all_options(self) -> Tuple[CodeGenOption, ...]:
        return tuple(self.options) + tuple(self.advanced_options)

    def default_settings(self) -> Any:
        return self.settings_class()

    def editor(self) -> SettingsEditor:
        """Settings editor over the basic and advanced options."""
        return SettingsEditor(self.settings_class, self.all_options)

    def create(self, settings: Any = None) -> CodeGeneratorBase:
        """Create a fresh generator instance."""
        return self.generator_class(settings)


class LanguageRegistry:
    """Registry for managing available code export backends."""

    def __init__(self):
        """Initialize empty registry."""
        self._languages: Dict[str, LanguageSpec] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, spec: LanguageSpec, replace: bool = False):
        """
        Register a backend.

        Args:
            spec: Language spec of the backend
            replace: If True, replace an existing registration. If False,
                skip silently when the name is already registered.

        Raises:
            RegistryError: If the generator class is invalid or an alias
                conflicts with another backend
        """
        if not (
            isinstance(spec.generator_class, type)
            and issubclass(spec.generator_class, CodeGenerator)
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = spec.name.lower()

        if language_key in self._languages and not replace:
            return

        alias_keys = []
        for alias in spec.aliases:
            alias_key = alias.lower()
            if alias_key == language_key:
                continue
            if alias_key in self._languages:
                raise RegistryError(
                    f"Alias '{alias}' conflicts with existing primary language"
                )
            if alias_key in self._aliases and self._aliases[alias_key] != language_key:
                raise RegistryError(
                    f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                )
            alias_keys.append(alias_key)

        if replace:
            self.unregister(language_key)

        self._languages[language_key] = spec
        for alias_key in alias_keys:
            self._aliases[alias_key] = language_key

        logger.debug("Registered backend %s (%s)", language_key, spec.display_name)

    def unregister(self, language: str):
        """
        Unregister a backend and its aliases.

        Args:
            language: Language name to unregister
        """
        language_key = language.lower()
        self._languages.pop(language_key, None)

        aliases_to_remove = [
            alias for alias, target in self._aliases.items() if target == language_key
        ]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def resolve(self, language: str) -> str:
        """Return the primary name for a language name or alias."""
        language_key = language.lower()
        if language_key in self._languages:
            return language_key
        if language_key in self._aliases:
            return self._aliases[language_key]

        available = self.list_languages()
        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(available)}"
        )

    def get(self, language: str) -> LanguageSpec:
        """
        Get the spec of a backend.

        Args:
            language: Language name or alias, case-insensitive

        Raises:
            RegistryError: If language not found
        """
        return self._languages[self.resolve(language)]

    def get_generator_class(self, language: str) -> Type[CodeGeneratorBase]:
        return self.get(language).generator_class

    def create_generator(
        self,
        language: str,
        settings: Optional[Union[Any, Mapping[str, Any], str, Path]] = None,
    ) -> CodeGeneratorBase:
        """
        Create generator instance for language.

        Args:
            language: Language name or alias
            settings: Settings dataclass, field dict, or JSON settings file

        Returns:
            Configured generator instance

        Raises:
            RegistryError: If generator creation fails
        """
        spec = self.get(language)

        try:
            if settings is None:
                final_settings = spec.default_settings()
            elif isinstance(settings, spec.settings_class):
                final_settings = spec.editor().validate(settings)
            elif isinstance(settings, Mapping):
                final_settings = load_settings(spec, overrides=settings)
            elif isinstance(settings, (str, Path)):
                final_settings = load_settings(spec, settings_file=settings)
            elif dataclasses.is_dataclass(settings):
                raise RegistryError(
                    f"{spec.name} expects {spec.settings_class.__name__}, "
                    f"got {type(settings).__name__}"
                )
            else:
                raise RegistryError(f"Invalid settings type: {type(settings)}")

            return spec.create(final_settings)

        except RegistryError:
            raise
        except Exception as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._languages.keys())

    def list_specs(self) -> List[LanguageSpec]:
        return [self._languages[name] for name in self.list_languages()]

    def get_aliases_for_language(self, language: str) -> List[str]:
        language_key = language.lower()
        return sorted(
            alias for alias, target in self._aliases.items() if target == language_key
        )

    def list_all_names(self) -> Dict[str, List[str]]:
        """
        Get all registered names including aliases.

        Returns:
            Dict mapping primary language to list of all names (including aliases)
        """
        return {
            language: [language] + self.get_aliases_for_language(language)
            for language in self.list_languages()
        }

    def is_supported(self, language: str) -> bool:
        """Check if a language name or alias is registered."""
        language_key = language.lower()
        return language_key in self._languages or language_key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Get information about a registered language.

        Raises:
            RegistryError: If language not found
        """
        spec = self.get(language)
        return {
            "name": spec.name,
            "display_name": spec.display_name,
            "class": spec.generator_class.__name__,
            "file_extension": spec.extension,
            "aliases": self.get_aliases_for_language(spec.name),
            "module": spec.generator_class.__module__,
            "settings_key": spec.settings_key,
        }


# Global registry instance - created once
_global_registry: Optional[LanguageRegistry] = None


def get_registry() -> LanguageRegistry:
    """Get the global language registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = LanguageRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: LanguageRegistry):
    """
    Register the bundled backends with their aliases.

    This is the single source of truth for backend registration.
    """
    from .languages.cpp import CPP_ADVANCED_OPTIONS, CPP_OPTIONS, CppGenerator
    from .languages.csharp import (
        CSHARP_ADVANCED_OPTIONS,
        CSHARP_OPTIONS,
        CSharpGenerator,
    )
    from .languages.lua import LUA_ADVANCED_OPTIONS, LUA_OPTIONS, LuaGenerator
    from .languages.typescript import (
        TYPESCRIPT_ADVANCED_OPTIONS,
        TYPESCRIPT_OPTIONS,
        TypeScriptGenerator,
    )

    registry.register(
        LanguageSpec(
            name="cpp",
            display_name="C++",
            generator_class=CppGenerator,
            options=CPP_OPTIONS,
            advanced_options=CPP_ADVANCED_OPTIONS,
            aliases=("c++", "c"),
        )
    )
    registry.register(
        LanguageSpec(
            name="csharp",
            display_name="C#",
            generator_class=CSharpGenerator,
            options=CSHARP_OPTIONS,
            advanced_options=CSHARP_ADVANCED_OPTIONS,
            aliases=("cs", "c#"),
        )
    )
    registry.register(
        LanguageSpec(
            name="lua",
            display_name="Lua",
            generator_class=LuaGenerator,
            options=LUA_OPTIONS,
            advanced_options=LUA_ADVANCED_OPTIONS,
        )
    )
    registry.register(
        LanguageSpec(
            name="typescript",
            display_name="TypeScript",
            generator_class=TypeScriptGenerator,
            options=TYPESCRIPT_OPTIONS,
            advanced_options=TYPESCRIPT_ADVANCED_OPTIONS,
            aliases=("ts",),
        )
    )


# Public API functions using the global registry


def get_language(language: str) -> LanguageSpec:
    """Get the spec of a backend from the global registry."""
    return get_registry().get(language)


def create_generator(
    language: str,
    settings: Optional[Union[Any, Mapping[str, Any], str, Path]] = None,
) -> CodeGeneratorBase:
    """
    Get a fresh generator instance from the global registry.

    Args:
        language: Language name or alias
        settings: Settings dataclass, field dict, or JSON settings file

    Returns:
        Generator instance
    """
    return get_registry().create_generator(language, settings)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)
