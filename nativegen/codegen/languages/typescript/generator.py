"""
TypeScript code generator implementation.

Generates ambient declarations, one namespace block per catalog namespace::

    declare namespace NATIVE {
      function getLabelText(labelName: string): string;
    }

Hashes only appear in JSDoc comments; a JavaScript number cannot hold a
64-bit hash exactly.
"""

from pathlib import Path
from typing import Optional

from ...core.generator import CodeGeneratorBase
from ...core.naming import NameSanitizer, NamingCase
from ...core.schema import CodeGenNative, CodeGenType
from .config import DEFAULT_TYPESCRIPT_TYPE, TYPESCRIPT_TYPE_MAP, TypeScriptSettings
from .naming import create_typescript_sanitizer


class TypeScriptGenerator(CodeGeneratorBase):
    """Code generator for TypeScript declarations."""

    language_name = "typescript"
    file_extension = "ts"
    settings_class = TypeScriptSettings

    def create_sanitizer(self) -> NameSanitizer:
        return create_typescript_sanitizer()

    def get_template_directory(self) -> Optional[Path]:
        """Return the TypeScript templates directory."""
        return Path(__file__).parent / "templates"

    def render_type(self, type_: CodeGenType) -> str:
        if type_.is_string():
            return "string"
        if type_.is_pointer:
            # Out parameters and raw pointers are passed as numeric handles
            return DEFAULT_TYPESCRIPT_TYPE
        return TYPESCRIPT_TYPE_MAP.get(type_.base_type, DEFAULT_TYPESCRIPT_TYPE)

    def format_native_name(self, name: str) -> str:
        return self.sanitizer.sanitize_name(name, NamingCase(self.settings.naming))

    def _open_namespace(self, name: str) -> None:
        keyword = "export" if self.settings.export_namespaces else "declare"
        self.writer.blank()
        self.writer.line(f"{keyword} namespace {name} {{").indent()

    def _close_namespace(self, name: str) -> None:
        self.writer.dedent().line("}")

    def _emit_native(self, native: CodeGenNative) -> None:
        if self.settings.include_comments:
            self.writer.line("/**")
            for line in self.comment_lines(native):
                self.writer.line(f" * {line}".rstrip())
            self.writer.line(f" * @hash {native.hash}")
            self.writer.line(" */")

        params = [
            f"{self.format_param_name(param.name)}: {self.render_type(param.type)}"
            for param in native.params
        ]
        context = {
            "name": self.format_native_name(native.name),
            "params": params,
            "return_type": self.render_type(native.return_type),
        }
        self.writer.line(self.render_template("function.ts.j2", context))
