"""
Lua code generator implementation.

Generates script-side wrappers that call natives through an invoke
function, with optional LuaLS annotations::

    -- NATIVE

    ---@param labelName string
    ---@return string
    function GetLabelText(labelName)
      return Citizen.InvokeNative(0xD49F9B0955C367DE, labelName, Citizen.ResultAsString())
    end

Optionally submits a ``natives_manifest.json`` extra file mapping every
exported hash to its generated function name.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional

from ...core.generator import CodeGeneratorBase
from ...core.naming import NameSanitizer, NamingCase
from ...core.schema import CodeGenNative, CodeGenType, CodeGeneratorFile
from .config import (
    DEFAULT_LUA_TYPE,
    DEFAULT_RESULT_MARKER,
    LUA_TYPE_MAP,
    RESULT_MARKERS,
    LuaSettings,
)
from .naming import create_lua_sanitizer


class LuaGenerator(CodeGeneratorBase):
    """Code generator for Lua native wrappers."""

    language_name = "lua"
    file_extension = "lua"
    settings_class = LuaSettings

    def __init__(self, settings: Optional[LuaSettings] = None):
        super().__init__(settings)
        self._manifest: Dict[str, str] = {}

    def create_sanitizer(self) -> NameSanitizer:
        return create_lua_sanitizer()

    def get_template_directory(self) -> Optional[Path]:
        """Return the Lua templates directory."""
        return Path(__file__).parent / "templates"

    def render_type(self, type_: CodeGenType) -> str:
        """LuaLS annotation type; pointer parameters keep their pointee type."""
        if type_.is_string():
            return "string"
        return LUA_TYPE_MAP.get(type_.base_type, DEFAULT_LUA_TYPE)

    def format_native_name(self, name: str) -> str:
        return self.sanitizer.sanitize_name(name, NamingCase(self.settings.naming))

    def convert_old_names(self, old_names) -> tuple:
        if not self.settings.include_old_names:
            return ()
        return tuple(old_names)

    def _qualify(self, name: str) -> str:
        namespace = self.current_namespace
        if self.settings.namespace_tables and namespace:
            return f"{self._table_name(namespace)}.{name}"
        return name

    def _table_name(self, namespace: str) -> str:
        return self.sanitizer.sanitize_name(namespace)

    def _result_marker(self, native: CodeGenNative) -> Optional[str]:
        if not self.settings.result_markers or native.return_type.is_void:
            return None
        return RESULT_MARKERS.get(
            self.render_type(native.return_type), DEFAULT_RESULT_MARKER
        )

    # Emission

    def _on_start(self) -> None:
        self._manifest = {}

    def _open_namespace(self, name: str) -> None:
        self.writer.blank()
        if self.settings.namespace_tables:
            self.writer.line(f"{self._table_name(name)} = {{}}")
        else:
            self.writer.line(f"-- {name}")

    def _close_namespace(self, name: str) -> None:
        # Lua has no block to close; namespaces are separated by blank lines
        pass

    def _emit_native(self, native: CodeGenNative) -> None:
        self.writer.blank()

        for line in self.comment_lines(native):
            self.writer.line(f"--- {line}".rstrip())

        params = [self.format_param_name(param.name) for param in native.params]

        if self.settings.emit_annotations:
            for param, name in zip(native.params, params):
                self.writer.line(f"---@param {name} {self.render_type(param.type)}")
            if not native.return_type.is_void:
                self.writer.line(f"---@return {self.render_type(native.return_type)}")

        args: List[str] = [native.hash] + params
        marker = self._result_marker(native)
        if marker:
            args.append(marker)

        function_name = self._qualify(self.format_native_name(native.name))
        context = {
            "name": function_name,
            "params": params,
            "indent": self.settings.indentation,
            "returns": not native.return_type.is_void,
            "invoke_function": self.settings.invoke_function,
            "args": args,
        }
        self.writer.lines(self.render_template("function.lua.j2", context))

        for old_name in native.old_names:
            alias = self._qualify(self.format_native_name(old_name))
            if alias != function_name:
                self.writer.line(f"{alias} = {function_name}")

        self._manifest[native.hash] = function_name

    def _on_end(self) -> None:
        if self.settings.generate_manifest:
            self.submit_extra_file(
                CodeGeneratorFile(
                    name="natives_manifest",
                    extension="json",
                    content=self.format_text(json.dumps(self._manifest, indent=2)),
                    mime_type="application/json",
                )
            )
