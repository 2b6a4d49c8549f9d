"""
Core type model for code generation.

Language-agnostic description of the C-like types, parameters and natives
that every generator backend consumes, plus the extra-file record backends
use for auxiliary artifacts.
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

_HEX_HASH = re.compile(r"^(?:0x)?([0-9a-fA-F]+)$")


def canonical_hash(value: str) -> str:
    """
    Normalize a native hash to ``0x`` followed by upper-case hex digits.

    Args:
        value: Hash as found in a catalog (``0xd49f...``, ``D49F...``)

    Returns:
        Canonical hash string

    Raises:
        ValueError: If the value is not a hexadecimal number
    """
    match = _HEX_HASH.match(str(value).strip())
    if not match:
        raise ValueError(f"Invalid native hash: {value!r}")
    return f"0x{match.group(1).upper()}"


@dataclass(frozen=True)
class CodeGenType:
    """A C-like type: base name, pointer depth and const qualifier."""

    base_type: str
    pointers: int = 0
    is_const: bool = False

    def __post_init__(self):
        if self.pointers < 0:
            raise ValueError(f"Pointer depth cannot be negative: {self.pointers}")
        if not self.base_type:
            raise ValueError("Type must have a base type name")

    @classmethod
    def parse(cls, text: str) -> "CodeGenType":
        """
        Parse a C type spelling such as ``const char*`` or ``Vector3*``.

        Args:
            text: Type as written in the catalog

        Returns:
            Parsed CodeGenType
        """
        pointers = text.count("*")
        tokens = text.replace("*", " ").replace("&", " ").split()
        is_const = "const" in tokens
        base = " ".join(token for token in tokens if token != "const")

        if not base:
            raise ValueError(f"Type has no base type: {text!r}")

        return cls(base_type=base, pointers=pointers, is_const=is_const)

    @property
    def is_pointer(self) -> bool:
        return self.pointers > 0

    @property
    def is_void(self) -> bool:
        return self.base_type == "void" and self.pointers == 0

    def is_string(self) -> bool:
        """True for ``char*`` with or without const."""
        return self.base_type == "char" and self.pointers == 1

    def to_c(self) -> str:
        """Render the canonical C spelling of this type."""
        prefix = "const " if self.is_const else ""
        return f"{prefix}{self.base_type}{'*' * self.pointers}"

    def __str__(self) -> str:
        return self.to_c()


@dataclass(frozen=True)
class CodeGenParam:
    """A single function parameter."""

    type: CodeGenType
    name: str


@dataclass(frozen=True)
class CodeGenNative:
    """Normalized native function record fed to a generator backend."""

    hash: str
    name: str
    params: Tuple[CodeGenParam, ...]
    return_type: CodeGenType
    comment: str = ""
    jhash: Optional[str] = None
    build: Optional[str] = None
    old_names: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Lists handed in by callers are frozen so param order is fixed
        if not isinstance(self.params, tuple):
            object.__setattr__(self, "params", tuple(self.params))
        if not isinstance(self.old_names, tuple):
            object.__setattr__(self, "old_names", tuple(self.old_names or ()))

    def signature(self) -> str:
        """C-style signature, used in comments and diagnostics."""
        params = ", ".join(f"{p.type.to_c()} {p.name}" for p in self.params)
        return f"{self.return_type.to_c()} {self.name}({params})"


@dataclass(frozen=True)
class CodeGeneratorFile:
    """An auxiliary artifact emitted alongside the main generated text."""

    name: str
    extension: str
    content: str
    mime_type: str = "text/plain"

    @property
    def filename(self) -> str:
        return f"{self.name}.{self.extension}"

    @property
    def language(self) -> str:
        """Mime subtype, used to pick a syntax highlighter."""
        return self.mime_type[self.mime_type.find("/") + 1 :]
