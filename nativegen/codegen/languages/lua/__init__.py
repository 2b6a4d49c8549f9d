"""
Lua code generator module.

Generates Lua wrappers calling natives through the script runtime's invoke
function, optionally with a JSON hash manifest.
"""

from .config import LUA_ADVANCED_OPTIONS, LUA_OPTIONS, LuaSettings
from .generator import LuaGenerator
from .naming import create_lua_sanitizer

__all__ = [
    "LuaGenerator",
    "LuaSettings",
    "LUA_OPTIONS",
    "LUA_ADVANCED_OPTIONS",
    "create_lua_sanitizer",
]
