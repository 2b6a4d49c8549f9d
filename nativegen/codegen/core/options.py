"""
Declarative options schema for generator settings.

Each backend lists its user-facing settings as plain option records. The
records carry no behaviour; SettingsEditor turns them into a dispatch table
that writes new values into a settings dataclass by field name.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

from ...logging_config import get_logger

logger = get_logger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on", "y"}
_FALSE_VALUES = {"0", "false", "no", "off", "n", ""}


class OptionsSchemaError(Exception):
    """Raised when an options schema does not match its settings type."""

    pass


class OptionValueError(ValueError):
    """Raised when a value cannot be stored into an option's field."""

    pass


@dataclass(frozen=True)
class ComboChoice:
    label: str
    value: Any


@dataclass(frozen=True)
class BooleanOption:
    label: str
    field: str
    type: str = dataclasses.field(default="boolean", init=False)


@dataclass(frozen=True)
class StringOption:
    label: str
    field: str
    type: str = dataclasses.field(default="string", init=False)


@dataclass(frozen=True)
class ComboOption:
    label: str
    field: str
    choices: Tuple[ComboChoice, ...] = ()
    type: str = dataclasses.field(default="combo", init=False)

    def values(self) -> Tuple[Any, ...]:
        return tuple(choice.value for choice in self.choices)

    def label_for(self, value: Any) -> Optional[str]:
        for choice in self.choices:
            if choice.value == value:
                return choice.label
        return None


CodeGenOption = Union[BooleanOption, StringOption, ComboOption]


def parse_bool(value: Any) -> bool:
    """Interpret a textual flag such as ``"on"`` or ``"false"``."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise OptionValueError(f"Not a boolean value: {value!r}")


class SettingsEditor:
    """Applies option changes to a settings dataclass."""

    def __init__(self, settings_class: type, options: Sequence[CodeGenOption]):
        """
        Build the field-name dispatch table, validating the schema.

        Args:
            settings_class: Dataclass holding the backend settings
            options: Every option shown for this backend

        Raises:
            OptionsSchemaError: If an option names a missing field or a
                boolean option targets a non-boolean field
        """
        if not dataclasses.is_dataclass(settings_class):
            raise OptionsSchemaError(
                f"Settings type must be a dataclass: {settings_class!r}"
            )

        self.settings_class = settings_class
        self.options = tuple(options)
        defaults = settings_class()
        field_names = {f.name for f in dataclasses.fields(settings_class)}

        self._options: Dict[str, CodeGenOption] = {}
        self._setters: Dict[str, Callable[[Any, Any, Optional[bool]], Any]] = {}

        for option in self.options:
            if option.field not in field_names:
                raise OptionsSchemaError(
                    f"Option '{option.label}' targets unknown field "
                    f"'{option.field}' of {settings_class.__name__}"
                )

            default = getattr(defaults, option.field)
            is_bool_field = isinstance(default, bool)

            if option.type == "boolean" and not is_bool_field:
                raise OptionsSchemaError(
                    f"Boolean option '{option.field}' needs a boolean field"
                )
            if option.type != "boolean" and is_bool_field:
                raise OptionsSchemaError(
                    f"Option '{option.field}' of type {option.type} "
                    f"targets a boolean field"
                )
            if option.type == "combo" and default not in option.values():
                raise OptionsSchemaError(
                    f"Default {default!r} of '{option.field}' is not one of its choices"
                )

            self._options[option.field] = option
            self._setters[option.field] = self._make_setter(option)

    def _make_setter(self, option: CodeGenOption):
        if option.type == "boolean":

            def set_boolean(settings, value, checked):
                flag = checked if checked is not None else parse_bool(value)
                return dataclasses.replace(settings, **{option.field: bool(flag)})

            return set_boolean

        if option.type == "combo":

            def set_combo(settings, value, checked):
                if value not in option.values():
                    raise OptionValueError(
                        f"Invalid value {value!r} for '{option.field}'. "
                        f"Expected one of: {', '.join(map(repr, option.values()))}"
                    )
                return dataclasses.replace(settings, **{option.field: value})

            return set_combo

        def set_string(settings, value, checked):
            text = "" if value is None else str(value)
            return dataclasses.replace(settings, **{option.field: text})

        return set_string

    def has_field(self, field: str) -> bool:
        return field in self._setters

    def get_option(self, field: str) -> Optional[CodeGenOption]:
        return self._options.get(field)

    def apply_change(
        self,
        settings: Any,
        field: str,
        value: Any = None,
        checked: Optional[bool] = None,
    ) -> Any:
        """
        Return a copy of ``settings`` with one field updated.

        Changes for fields outside the schema are ignored so settings cached
        for another backend never break the form.

        Args:
            settings: Current settings object
            field: Name of the field being changed
            value: New raw value (string and combo options)
            checked: New checked state (boolean options)

        Returns:
            Updated settings object
        """
        setter = self._setters.get(field)
        if setter is None:
            logger.debug("Ignoring change to unknown settings field %s", field)
            return settings
        return setter(settings, value, checked)

    def parse_assignment(self, settings: Any, assignment: str) -> Any:
        """
        Apply a ``field=value`` assignment as given on the command line.

        Combo values may be given either as the stored value or as the
        choice label.
        """
        if "=" not in assignment:
            raise OptionValueError(f"Expected FIELD=VALUE, got {assignment!r}")

        field, raw = assignment.split("=", 1)
        field = field.strip()
        option = self._options.get(field)

        if option is not None and option.type == "combo":
            raw = self._match_choice(option, raw)

        return self.apply_change(settings, field, value=raw)

    @staticmethod
    def _match_choice(option: ComboOption, raw: str) -> Any:
        for choice in option.choices:
            if raw == choice.value or raw.lower() == choice.label.lower():
                return choice.value
        # Escaped whitespace values such as "\t" or "\r\n"
        unescaped = raw.encode("utf-8").decode("unicode_escape")
        if unescaped in option.values():
            return unescaped
        return raw

    def validate(self, settings: Any) -> Any:
        """
        Check a settings object against the schema.

        Args:
            settings: Settings built outside the editor (file, store, dict)

        Returns:
            The same settings object

        Raises:
            OptionValueError: If a combo field holds a value that is not one
                of its choices
        """
        for option in self.options:
            if option.type != "combo":
                continue
            value = getattr(settings, option.field)
            if value not in option.values():
                raise OptionValueError(
                    f"Invalid value {value!r} for '{option.field}'. "
                    f"Expected one of: {', '.join(map(repr, option.values()))}"
                )
        return settings

    def describe(self, settings: Any) -> Sequence[Tuple[CodeGenOption, Any]]:
        """Pair every option with its current value, in schema order."""
        return [(option, getattr(settings, option.field)) for option in self.options]
