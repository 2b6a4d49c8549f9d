"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement and a
base class carrying the lifecycle state machine, the namespace stack and
the extra-file side channel.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ...logging_config import get_logger
from .naming import NameSanitizer, NamingCase
from .options import BooleanOption, ComboChoice, ComboOption
from .schema import (
    CodeGenNative,
    CodeGenParam,
    CodeGenType,
    CodeGeneratorFile,
    canonical_hash,
)
from .templates import TemplateEngine, create_template_engine
from .writer import CodeWriter

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class ContractViolationError(GeneratorError):
    """A lifecycle method was called out of order."""

    pass


class GeneratorState(Enum):
    FRESH = "fresh"
    STARTED = "started"
    ENDED = "ended"


@dataclass
class CodeGeneratorBaseSettings:
    """Settings shared by every backend."""

    indentation: str = "  "
    line_ending: str = "\n"
    include_comments: bool = False


INDENTATION_CHOICES = (
    ComboChoice("2 spaces", "  "),
    ComboChoice("4 spaces", "    "),
    ComboChoice("Tab", "\t"),
)

LINE_ENDING_CHOICES = (
    ComboChoice("LF", "\n"),
    ComboChoice("CRLF", "\r\n"),
)

BASE_OPTIONS = (BooleanOption("Include comments", "include_comments"),)

BASE_ADVANCED_OPTIONS = (
    ComboOption("Indentation", "indentation", INDENTATION_CHOICES),
    ComboOption("Line endings", "line_ending", LINE_ENDING_CHOICES),
)


class CodeGenerator(ABC):
    """Abstract contract every backend obeys."""

    @abstractmethod
    def start(self) -> "CodeGenerator":
        """Reset the emission buffer and namespace stack."""

    @abstractmethod
    def end(self) -> "CodeGenerator":
        """Finalize the buffer; all namespaces must be closed."""

    @abstractmethod
    def native_to_codegen_native(self, native: Any) -> CodeGenNative:
        """Convert a raw catalog record into the normalized native shape."""

    @abstractmethod
    def add_native(self, native: CodeGenNative) -> "CodeGenerator":
        """Emit one native in the current namespace."""

    @abstractmethod
    def push_namespace(self, name: str) -> "CodeGenerator":
        """Open a namespace scope."""

    @abstractmethod
    def pop_namespace(self) -> "CodeGenerator":
        """Close the most recently opened namespace scope."""

    @abstractmethod
    def get(self) -> str:
        """Return the generated text. Only valid after end()."""

    @abstractmethod
    def submit_extra_file(self, file: CodeGeneratorFile) -> None:
        """Register an auxiliary generated file."""

    @abstractmethod
    def get_extra_files(self) -> List[CodeGeneratorFile]:
        """Return extra files in submission order."""

    @abstractmethod
    def clear_extra_files(self) -> None:
        """Forget all submitted extra files."""


class CodeGeneratorBase(CodeGenerator):
    """
    Shared implementation of the generator lifecycle.

    Subclasses render the target language through the ``_on_start``,
    ``_open_namespace``, ``_close_namespace``, ``_emit_native`` and
    ``_on_end`` hooks, writing into ``self.writer``. Type and name rendering
    go through ``render_type``, ``format_native_name`` and
    ``format_param_name``.
    """

    #: Registry identifier, e.g. "cpp"
    language_name: str = ""
    #: Extension of the main generated file, without dot
    file_extension: str = "txt"
    settings_class: type = CodeGeneratorBaseSettings

    def __init__(self, settings: Optional[CodeGeneratorBaseSettings] = None):
        """Initialize generator with optional settings."""
        self.settings = settings if settings is not None else self.settings_class()
        self.sanitizer = self.create_sanitizer()
        self.state = GeneratorState.FRESH
        self.writer = self._new_writer()
        self._namespaces: List[str] = []
        self._extra_files: List[CodeGeneratorFile] = []
        self._text: Optional[str] = None
        self._template_engine: Optional[TemplateEngine] = None

    # Configuration hooks

    def create_sanitizer(self) -> NameSanitizer:
        """Return the name sanitizer for this language."""
        return NameSanitizer()

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses override this to provide their template directory.
        Return None for generators that emit without templates.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(
                self.get_template_directory()
            )
        return self._template_engine

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)

    def _new_writer(self) -> CodeWriter:
        return CodeWriter(self.settings.indentation, self.settings.line_ending)

    # Lifecycle

    @property
    def namespace_depth(self) -> int:
        return len(self._namespaces)

    @property
    def current_namespace(self) -> Optional[str]:
        return self._namespaces[-1] if self._namespaces else None

    def _require_state(self, operation: str, *allowed: GeneratorState):
        if self.state not in allowed:
            raise ContractViolationError(
                f"{type(self).__name__}.{operation}() called in state "
                f"'{self.state.value}'"
            )

    def start(self) -> "CodeGeneratorBase":
        if self.state == GeneratorState.STARTED:
            logger.debug("%s restarted before end(); resetting", self.language_name)

        self.writer = self._new_writer()
        self._namespaces = []
        self._extra_files = []
        self._text = None
        self.state = GeneratorState.STARTED
        self._on_start()
        return self

    def push_namespace(self, name: str) -> "CodeGeneratorBase":
        self._require_state("push_namespace", GeneratorState.STARTED)
        self._open_namespace(name)
        self._namespaces.append(name)
        return self

    def pop_namespace(self) -> "CodeGeneratorBase":
        self._require_state("pop_namespace", GeneratorState.STARTED)
        if not self._namespaces:
            raise ContractViolationError("pop_namespace() called with no open namespace")

        name = self._namespaces.pop()
        self._close_namespace(name)
        return self

    def add_native(self, native: CodeGenNative) -> "CodeGeneratorBase":
        self._require_state("add_native", GeneratorState.STARTED)
        self._emit_native(native)
        return self

    def end(self) -> "CodeGeneratorBase":
        self._require_state("end", GeneratorState.STARTED)
        if self._namespaces:
            raise ContractViolationError(
                f"end() called with open namespaces: {', '.join(self._namespaces)}"
            )

        self._on_end()
        self._text = self.writer.build()
        self.state = GeneratorState.ENDED
        return self

    def get(self) -> str:
        self._require_state("get", GeneratorState.ENDED)
        return self._text

    # Extra files

    def submit_extra_file(self, file: CodeGeneratorFile) -> None:
        if any(existing.filename == file.filename for existing in self._extra_files):
            raise ContractViolationError(
                f"Extra file '{file.filename}' was already submitted"
            )
        self._extra_files.append(file)

    def get_extra_files(self) -> List[CodeGeneratorFile]:
        return list(self._extra_files)

    def clear_extra_files(self) -> None:
        self._extra_files = []

    # Normalization

    def native_to_codegen_native(self, native: Any) -> CodeGenNative:
        """
        Convert a raw catalog native into a CodeGenNative.

        Accepts ``nativegen.catalog.Native`` objects or plain mappings using
        the catalog's snake_case or camelCase keys.
        """
        record = _as_mapping(native)

        params = tuple(
            CodeGenParam(
                type=self.convert_type(_param_field(param, "type")),
                name=_param_field(param, "name"),
            )
            for param in record.get("params") or ()
        )

        return CodeGenNative(
            hash=self.format_hash(record["hash"]),
            jhash=record.get("jhash") or None,
            name=record["name"],
            params=params,
            return_type=self.convert_type(
                record.get("return_type", record.get("returnType", "void"))
            ),
            comment=record.get("comment") or "",
            build=record.get("build") or None,
            old_names=self.convert_old_names(
                record.get("old_names", record.get("oldNames")) or ()
            ),
        )

    def format_hash(self, value: str) -> str:
        return canonical_hash(value)

    def convert_type(self, value: Any) -> CodeGenType:
        if isinstance(value, CodeGenType):
            parsed = value
        elif isinstance(value, Mapping):
            parsed = CodeGenType(
                base_type=value.get("base_type", value.get("baseType")),
                pointers=int(value.get("pointers", 0)),
                is_const=bool(value.get("is_const", value.get("isConst", False))),
            )
        else:
            parsed = CodeGenType.parse(str(value))

        base = self.convert_type_name(parsed.base_type)
        if base == parsed.base_type:
            return parsed
        return CodeGenType(base, parsed.pointers, parsed.is_const)

    def convert_type_name(self, base_type: str) -> str:
        """Map a catalog base type name to this backend's spelling."""
        return base_type

    def convert_old_names(self, old_names) -> tuple:
        return tuple(old_names)

    # Rendering hooks

    def render_type(self, type_: CodeGenType) -> str:
        return type_.to_c()

    def format_native_name(self, name: str) -> str:
        return self.sanitizer.sanitize_name(name, NamingCase.ORIGINAL)

    def format_param_name(self, name: str) -> str:
        return self.sanitizer.sanitize_name(name, NamingCase.ORIGINAL)

    def format_text(self, text: str) -> str:
        """Apply the configured line ending to rendered text, ending with one newline."""
        lines = text.rstrip("\n").split("\n")
        return self.settings.line_ending.join(lines) + self.settings.line_ending

    def comment_lines(self, native: CodeGenNative) -> List[str]:
        """Comment text split into lines, or nothing when comments are off."""
        if not self.settings.include_comments or not native.comment:
            return []
        return [line.rstrip() for line in native.comment.strip().splitlines()]

    def _on_start(self) -> None:
        pass

    def _on_end(self) -> None:
        pass

    @abstractmethod
    def _open_namespace(self, name: str) -> None:
        pass

    @abstractmethod
    def _close_namespace(self, name: str) -> None:
        pass

    @abstractmethod
    def _emit_native(self, native: CodeGenNative) -> None:
        pass


def _as_mapping(native: Any) -> Mapping[str, Any]:
    if isinstance(native, Mapping):
        return native
    if hasattr(native, "to_dict"):
        return native.to_dict()
    raise GeneratorError(f"Cannot convert {type(native).__name__} to a native record")


def _param_field(param: Any, key: str) -> Any:
    if isinstance(param, Mapping):
        return param[key]
    return getattr(param, key)
