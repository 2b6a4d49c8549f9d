"""
Export driver.

Walks a native catalog in namespace order and drives one generator
through a complete start ... end cycle.
"""

from typing import Any, Dict, List, Mapping, Optional

from ...logging_config import get_logger
from .generator import CodeGenerator, GeneratorError
from .schema import CodeGeneratorFile

logger = get_logger(__name__)


class ExportError(GeneratorError):
    """An export run failed."""

    pass


class DataIntegrityError(ExportError):
    """The catalog handed to the exporter is inconsistent."""

    pass


class MissingNativeError(DataIntegrityError):
    """A namespace references a hash that is absent from the natives map."""

    def __init__(self, native_hash: str, namespace: str):
        super().__init__(
            f"Namespace '{namespace}' references unknown native {native_hash}"
        )
        self.native_hash = native_hash
        self.namespace = namespace


def _catalog_mappings(catalog: Any):
    """Accept a NativeCatalog or a ``{namespaces, natives}`` mapping."""
    if hasattr(catalog, "to_export_dict"):
        catalog = catalog.to_export_dict()
    if not isinstance(catalog, Mapping):
        raise ExportError(f"Unsupported catalog type: {type(catalog).__name__}")
    return catalog.get("namespaces") or {}, catalog.get("natives") or {}


def _namespace_fields(name: str, namespace: Any):
    if isinstance(namespace, Mapping):
        return namespace.get("name", name), list(namespace.get("natives") or [])
    return getattr(namespace, "name", name), list(namespace.natives)


class NativeExporter:
    """Drives one generator over a native catalog."""

    def __init__(self, generator: CodeGenerator):
        self.generator = generator

    def export_natives(self, catalog: Any) -> str:
        """
        Export every native of the catalog.

        Args:
            catalog: NativeCatalog or mapping with ``namespaces`` (name ->
                {name, natives}) and ``natives`` (hash -> raw native)

        Returns:
            The generated main text

        Raises:
            MissingNativeError: If a namespace lists an unknown hash
            ExportError: If anything else fails during the run
        """
        namespaces, natives = _catalog_mappings(catalog)
        generator = self.generator
        language = getattr(generator, "language_name", type(generator).__name__)

        logger.info(
            "Exporting %d natives in %d namespaces with %s",
            len(natives),
            len(namespaces),
            language,
        )

        try:
            generator.start()

            for key, namespace in namespaces.items():
                name, hashes = _namespace_fields(key, namespace)
                logger.debug("Exporting namespace %s (%d natives)", name, len(hashes))

                generator.push_namespace(name)
                for native_hash in hashes:
                    raw = natives.get(native_hash)
                    if raw is None:
                        raise MissingNativeError(native_hash, name)
                    generator.add_native(generator.native_to_codegen_native(raw))
                generator.pop_namespace()

            generator.end()
        except GeneratorError as e:
            logger.error("Export with %s failed: %s", language, e)
            raise
        except Exception as e:
            logger.error("Export with %s failed: %s", language, e)
            raise ExportError(f"Export failed: {e}") from e

        text = generator.get()
        logger.info("Export with %s produced %d characters", language, len(text))
        return text

    def get_extra_files(self) -> List[CodeGeneratorFile]:
        return self.generator.get_extra_files()


class ExportResult:
    """Container for export results and metadata."""

    def __init__(
        self,
        code: str,
        extra_files: Optional[List[CodeGeneratorFile]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize export result.

        Args:
            code: Generated main text
            extra_files: Auxiliary files produced by the run
            metadata: Additional metadata about the run
        """
        self.code = code
        self.extra_files = extra_files or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[BaseException] = None

    @classmethod
    def error(cls, message: str, exception: BaseException = None) -> "ExportResult":
        """Create a failed export result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def run_export(generator: CodeGenerator, catalog: Any) -> ExportResult:
    """
    Export a catalog with error handling.

    Args:
        generator: Fresh generator instance
        catalog: Catalog to export

    Returns:
        ExportResult with code, extra files and metadata
    """
    try:
        exporter = NativeExporter(generator)
        code = exporter.export_natives(catalog)
        namespaces, natives = _catalog_mappings(catalog)

        metadata = {
            "language": getattr(generator, "language_name", ""),
            "file_extension": getattr(generator, "file_extension", ""),
            "namespace_count": len(namespaces),
            "native_count": len(natives),
            "extra_file_count": len(exporter.get_extra_files()),
        }
        return ExportResult(code, exporter.get_extra_files(), metadata)

    except GeneratorError as e:
        return ExportResult.error(f"Code generation failed: {str(e)}", exception=e)
