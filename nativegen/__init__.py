"""nativegen: export native function catalogs as source code.

Loads a natives catalog and drives one of several language backends over it
to produce bindings, headers or declaration files.
"""

__version__ = "0.1.0"

from .catalog import (
    CatalogError,
    Native,
    NativeCatalog,
    NativeNamespace,
    NativeParam,
    catalog_from_dict,
    load_catalog,
)
from .codegen import export_catalog, list_supported_languages, preview_native

__all__ = [
    "CatalogError",
    "Native",
    "NativeCatalog",
    "NativeNamespace",
    "NativeParam",
    "catalog_from_dict",
    "load_catalog",
    "export_catalog",
    "list_supported_languages",
    "preview_native",
    "__version__",
]
