"""
C++ code generator implementation.

Generates a natives header: one C++ namespace per catalog namespace holding
either plain declarations or inline invoke wrappers.

Output for a single native with default settings::

    namespace NATIVE
    {
      const char* GET_LABEL_TEXT(const char* labelName);
    }
"""

from pathlib import Path
from typing import Dict, List, Optional

from ...core.generator import CodeGeneratorBase
from ...core.naming import NameSanitizer
from ...core.schema import CodeGenNative, CodeGenType, CodeGeneratorFile
from .config import (
    CPP_PRIMITIVE_TYPES,
    CPP_TYPEDEFS,
    DEFAULT_HANDLE_TYPE,
    CppSettings,
)
from .naming import create_cpp_sanitizer


class CppGenerator(CodeGeneratorBase):
    """Code generator for C++ native headers."""

    language_name = "cpp"
    file_extension = "h"
    settings_class = CppSettings

    def __init__(self, settings: Optional[CppSettings] = None):
        super().__init__(settings)
        self._types_seen: Dict[str, None] = {}

    def create_sanitizer(self) -> NameSanitizer:
        return create_cpp_sanitizer()

    def get_template_directory(self) -> Optional[Path]:
        """Return the C++ templates directory."""
        return Path(__file__).parent / "templates"

    def render_type(self, type_: CodeGenType) -> str:
        prefix = "const " if type_.is_const else ""
        return f"{prefix}{type_.base_type}{'*' * type_.pointers}"

    def _on_start(self) -> None:
        self._types_seen = {}

    def _open_namespace(self, name: str) -> None:
        self.writer.blank()
        self.writer.line(f"namespace {name}").line("{").indent()

    def _close_namespace(self, name: str) -> None:
        self.writer.dedent().line("}")

    def _emit_native(self, native: CodeGenNative) -> None:
        self._track_types(native)

        comment = self.comment_lines(native)
        if comment:
            self.writer.line("/**")
            for line in comment:
                self.writer.line(f" * {line}".rstrip())
            self.writer.line(" */")

        params = ", ".join(
            f"{self.render_type(param.type)} {self.format_param_name(param.name)}"
            for param in native.params
        )
        context = {
            "invoker": self.settings.generate_invokers,
            "invoke_function": self.settings.invoke_function,
            "return_type": self.render_type(native.return_type),
            "name": self.format_native_name(native.name),
            "params": params,
            "hash": native.hash,
            "args": [self.format_param_name(param.name) for param in native.params],
            "trailer": self._hash_trailer(native),
        }
        self.writer.line(self.render_template("function.h.j2", context))

    def _hash_trailer(self, native: CodeGenNative) -> str:
        if not self.settings.include_hash_comments:
            return ""
        parts: List[str] = [native.hash]
        if native.jhash:
            parts.append(native.jhash)
        if native.build:
            parts.append(f"b{native.build}")
        return " ".join(parts)

    def _track_types(self, native: CodeGenNative) -> None:
        for type_ in [native.return_type] + [param.type for param in native.params]:
            if type_.base_type not in CPP_PRIMITIVE_TYPES:
                self._types_seen.setdefault(type_.base_type, None)

    def _on_end(self) -> None:
        if self.settings.generate_types_header:
            self.submit_extra_file(self._build_types_header())

    def _build_types_header(self) -> CodeGeneratorFile:
        typedefs = [
            (name, CPP_TYPEDEFS.get(name, DEFAULT_HANDLE_TYPE))
            for name in sorted(self._types_seen)
            if name != "Vector3"
        ]
        content = self.render_template(
            "types.h.j2",
            {
                "typedefs": typedefs,
                "vector3": "Vector3" in self._types_seen,
                "indent": self.settings.indentation,
            },
        )
        return CodeGeneratorFile(
            name="types",
            extension="h",
            content=self.format_text(content),
            mime_type="text/x-c",
        )
