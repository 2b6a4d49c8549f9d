"""
C# code generator implementation.

Generates static wrapper classes, one per catalog namespace, each method
forwarding to a configurable invoke function::

    using System;

    namespace GTA.Native
    {
        public static class Native
        {
            public static string GetLabelText(string labelName) => Function.Call<string>(0xD49F9B0955C367DE, labelName);
        }
    }
"""

from html import escape
from pathlib import Path
from typing import Optional

from ...core.generator import CodeGeneratorBase
from ...core.naming import NameSanitizer, NamingCase
from ...core.schema import CodeGenNative, CodeGenParam, CodeGenType
from .config import CSHARP_TYPE_MAP, DEFAULT_HANDLE_TYPE, CSharpSettings
from .naming import create_csharp_sanitizer


class CSharpGenerator(CodeGeneratorBase):
    """Code generator for C# static wrapper classes."""

    language_name = "csharp"
    file_extension = "cs"
    settings_class = CSharpSettings

    def __init__(self, settings: Optional[CSharpSettings] = None):
        super().__init__(settings)
        self._class_count = 0

    def create_sanitizer(self) -> NameSanitizer:
        return create_csharp_sanitizer()

    def get_template_directory(self) -> Optional[Path]:
        """Return the C# templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def naming_case(self) -> NamingCase:
        return NamingCase(self.settings.naming)

    # Types

    def map_base_type(self, type_: CodeGenType) -> str:
        return CSHARP_TYPE_MAP.get(type_.base_type, DEFAULT_HANDLE_TYPE)

    def render_type(self, type_: CodeGenType, is_param: bool = False) -> str:
        """
        Render a type in C# syntax.

        ``char*`` is always a string. Other pointers follow the pointer
        style: ``unsafe`` keeps real pointers, ``ref`` turns single-level
        parameter pointers into ``ref`` parameters, everything else becomes
        ``IntPtr``.
        """
        if type_.is_string():
            return "string"

        base = self.map_base_type(type_)
        if type_.pointers == 0:
            return base

        style = self.settings.pointer_style
        if style == "unsafe":
            return base + "*" * type_.pointers
        if style == "ref" and is_param and type_.pointers == 1 and base != "void":
            return f"ref {base}"
        return "IntPtr"

    def _uses_unsafe(self, native: CodeGenNative) -> bool:
        if self.settings.pointer_style != "unsafe":
            return False
        types = [native.return_type] + [param.type for param in native.params]
        return any(t.is_pointer and not t.is_string() for t in types)

    # Names

    def format_native_name(self, name: str) -> str:
        return self.sanitizer.sanitize_name(name, self.naming_case)

    def format_class_name(self, name: str) -> str:
        return self.sanitizer.sanitize_name(name, self.naming_case)

    def _format_argument(self, param: CodeGenParam) -> str:
        name = self.format_param_name(param.name)
        if self.render_type(param.type, is_param=True).startswith("ref "):
            return f"ref {name}"
        return name

    # Emission

    def _on_start(self) -> None:
        self._class_count = 0
        self.writer.line("using System;")
        if self.settings.namespace_name:
            self.writer.blank()
            self.writer.line(f"namespace {self.settings.namespace_name}")
            self.writer.line("{").indent()

    def _on_end(self) -> None:
        if self.settings.namespace_name:
            self.writer.dedent().line("}")

    def _open_namespace(self, name: str) -> None:
        # No blank line directly below the opening brace of the outer namespace
        if self._class_count or not self.settings.namespace_name:
            self.writer.blank()
        self._class_count += 1
        self.writer.line(f"public static class {self.format_class_name(name)}")
        self.writer.line("{").indent()

    def _close_namespace(self, name: str) -> None:
        self.writer.dedent().line("}")

    def _emit_native(self, native: CodeGenNative) -> None:
        comment = self.comment_lines(native)
        if comment:
            self.writer.line("/// <summary>")
            for line in comment:
                self.writer.line(f"/// {escape(line, quote=False)}".rstrip())
            self.writer.line("/// </summary>")

        params = ", ".join(
            f"{self.render_type(param.type, is_param=True)} "
            f"{self.format_param_name(param.name)}"
            for param in native.params
        )
        return_type = self.render_type(native.return_type)
        # Pointer types cannot be generic arguments
        pointer_return = return_type.endswith("*")
        context = {
            "unsafe": self._uses_unsafe(native),
            "return_type": return_type,
            "call_type": "IntPtr" if pointer_return else return_type,
            "pointer_return": pointer_return,
            "name": self.format_native_name(native.name),
            "params": params,
            "invoke_function": self.settings.invoke_function,
            "hash": native.hash,
            "args": [self._format_argument(param) for param in native.params],
        }
        self.writer.line(self.render_template("method.cs.j2", context))
