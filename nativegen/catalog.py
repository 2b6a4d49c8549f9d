"""Native catalog model and loading.

A catalog is what the code generators export: an ordered mapping of
namespaces, each listing native hashes, plus the raw native records keyed
by hash. The on-disk format is the public natives JSON layout:

    {"NAMESPACE": {"0xHASH": {"name": ..., "params": [...], ...}}}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from .codegen.core.schema import canonical_hash
from .logging_config import get_logger
from .utils import JSONLoaderError, load_json_object

logger = get_logger(__name__)


class CatalogError(Exception):
    """Raised when a catalog cannot be loaded or is malformed."""

    pass


@dataclass(frozen=True)
class NativeParam:
    type: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "name": self.name}


@dataclass(frozen=True)
class Native:
    """A raw native record as published by the catalog."""

    hash: str
    name: str
    params: tuple[NativeParam, ...] = ()
    return_type: str = "void"
    comment: str = ""
    sch_comment: str | None = None
    jhash: str | None = None
    build: str | None = None
    old_names: tuple[str, ...] = ()
    namespace: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "hash": self.hash,
            "name": self.name,
            "params": [param.to_dict() for param in self.params],
            "return_type": self.return_type,
            "comment": self.comment,
            "sch_comment": self.sch_comment,
            "jhash": self.jhash,
            "build": self.build,
            "old_names": list(self.old_names),
            "namespace": self.namespace,
        }


@dataclass
class NativeNamespace:
    name: str
    natives: list[str] = field(default_factory=list)


@dataclass
class NativeCatalog:
    """Namespaces and natives, both in export order."""

    namespaces: dict[str, NativeNamespace] = field(default_factory=dict)
    natives: dict[str, Native] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.natives)

    def find(self, native_hash: str) -> Native | None:
        try:
            return self.natives.get(canonical_hash(native_hash))
        except ValueError:
            return None

    def add(self, native: Native) -> None:
        """
        Append a native to its namespace, creating the namespace if needed.

        A native with a hash already in the catalog replaces the old record
        and is listed under the namespace of the new one.
        """
        namespace_name = native.namespace or "UNKNOWN"
        namespace = self.namespaces.setdefault(
            namespace_name, NativeNamespace(namespace_name)
        )
        previous = self.natives.get(native.hash)
        if previous is not None:
            previous_name = previous.namespace or "UNKNOWN"
            if previous_name != namespace_name:
                self.namespaces[previous_name].natives.remove(native.hash)
                namespace.natives.append(native.hash)
        else:
            namespace.natives.append(native.hash)
        self.natives[native.hash] = native

    def subset(
        self,
        namespaces: Iterable[str] | None = None,
        hashes: Iterable[str] | None = None,
    ) -> NativeCatalog:
        """
        Build a smaller catalog keeping the original order.

        Args:
            namespaces: Namespace names to keep (all when None)
            hashes: Native hashes to keep (all when None)

        Raises:
            CatalogError: If a requested namespace or hash does not exist
        """
        wanted_namespaces = None
        if namespaces is not None:
            wanted_namespaces = set(namespaces)
            missing = wanted_namespaces - set(self.namespaces)
            if missing:
                raise CatalogError(f"Unknown namespaces: {', '.join(sorted(missing))}")

        wanted_hashes = None
        if hashes is not None:
            wanted_hashes = {canonical_hash(value) for value in hashes}
            missing = wanted_hashes - set(self.natives)
            if missing:
                raise CatalogError(f"Unknown natives: {', '.join(sorted(missing))}")

        result = NativeCatalog()
        for name, namespace in self.namespaces.items():
            if wanted_namespaces is not None and name not in wanted_namespaces:
                continue
            kept = [
                native_hash
                for native_hash in namespace.natives
                if wanted_hashes is None or native_hash in wanted_hashes
            ]
            if not kept:
                continue
            result.namespaces[name] = NativeNamespace(name, kept)
            for native_hash in kept:
                result.natives[native_hash] = self.natives[native_hash]

        return result

    def to_export_dict(self) -> dict[str, Any]:
        """The ``{namespaces, natives}`` mapping consumed by the exporter."""
        return {
            "namespaces": {
                name: {"name": namespace.name, "natives": list(namespace.natives)}
                for name, namespace in self.namespaces.items()
            },
            "natives": dict(self.natives),
        }


def _get(record: dict[str, Any], snake: str, camel: str, default: Any = None) -> Any:
    if snake in record:
        return record[snake]
    return record.get(camel, default)


def native_from_dict(
    native_hash: str, record: Any, namespace: str | None = None
) -> Native:
    """Parse one native record from its JSON form."""
    if not isinstance(record, dict):
        raise CatalogError(f"Native {native_hash} must be an object")

    name = record.get("name")
    if not name:
        raise CatalogError(f"Native {native_hash} has no name")

    try:
        canonical = canonical_hash(native_hash)
    except ValueError as e:
        raise CatalogError(str(e)) from e

    params = []
    for param in record.get("params") or []:
        if not isinstance(param, dict) or "type" not in param or "name" not in param:
            raise CatalogError(f"Native {name} has a malformed parameter: {param!r}")
        params.append(NativeParam(type=str(param["type"]), name=str(param["name"])))

    old_names = _get(record, "old_names", "oldNames") or ()

    return Native(
        hash=canonical,
        name=str(name),
        params=tuple(params),
        return_type=str(_get(record, "return_type", "returnType", "void")),
        comment=record.get("comment") or "",
        sch_comment=_get(record, "sch_comment", "schComment"),
        jhash=record.get("jhash") or None,
        build=str(record["build"]) if record.get("build") else None,
        old_names=tuple(old_names),
        namespace=namespace,
    )


def catalog_from_dict(data: Any) -> NativeCatalog:
    """
    Build a catalog from the natives JSON layout.

    Args:
        data: ``{namespace: {hash: record}}`` mapping

    Returns:
        Parsed NativeCatalog in document order
    """
    if not isinstance(data, dict):
        raise CatalogError("Catalog must be a JSON object keyed by namespace")

    catalog = NativeCatalog()
    for namespace_name, natives in data.items():
        if not isinstance(natives, dict):
            raise CatalogError(f"Namespace {namespace_name} must be an object")

        namespace = NativeNamespace(namespace_name)
        catalog.namespaces[namespace_name] = namespace
        for native_hash, record in natives.items():
            native = native_from_dict(native_hash, record, namespace_name)
            first = catalog.natives.get(native.hash)
            if first is not None:
                logger.warning(
                    "Native %s listed again in %s; keeping the entry in %s",
                    native.hash,
                    namespace_name,
                    first.namespace,
                )
                continue
            namespace.natives.append(native.hash)
            catalog.natives[native.hash] = native

    logger.debug(
        "Parsed catalog with %d namespaces and %d natives",
        len(catalog.namespaces),
        len(catalog.natives),
    )
    return catalog


def load_catalog(path: str | Path) -> NativeCatalog:
    """Load and parse a natives JSON file."""
    try:
        data = load_json_object(path, "natives catalog")
    except JSONLoaderError as e:
        raise CatalogError(str(e)) from e
    return catalog_from_dict(data)
