"""Tests for the high level export helpers."""

from __future__ import annotations

import pytest

from nativegen import CatalogError, export_catalog, preview_native
from nativegen.catalog import NativeCatalog
from nativegen.codegen.core.exporter import MissingNativeError
from nativegen.codegen.languages.csharp import CSharpSettings


def test_export_catalog(label_catalog: NativeCatalog) -> None:
    result = export_catalog("c", label_catalog)

    assert result.success
    assert result.code == (
        "namespace NATIVE\n{\n  const char* GET_LABEL_TEXT(const char* labelName);\n}\n"
    )
    assert result.metadata["language"] == "cpp"
    assert result.metadata["native_count"] == 1


def test_export_catalog_with_settings(label_catalog: NativeCatalog) -> None:
    by_dict = export_catalog("cs", label_catalog, {"namespace_name": "Natives"})
    by_object = export_catalog("cs", label_catalog, CSharpSettings(namespace_name="Natives"))

    assert "namespace Natives\n" in by_dict.code
    assert by_dict.code == by_object.code


def test_export_catalog_reports_generation_failures(label_catalog: NativeCatalog) -> None:
    label_catalog.namespaces["NATIVE"].natives.append("0xDEAD")

    result = export_catalog("lua", label_catalog)

    assert not result.success
    assert isinstance(result.exception, MissingNativeError)
    assert result.error_message.startswith("Code generation failed:")


def test_preview_native(catalog: NativeCatalog) -> None:
    result = preview_native("lua", catalog, "0x4f8644af03d0e0d6", {"generate_manifest": True})

    assert result.code == (
        "-- PLAYER\n"
        "\n"
        "---@return integer\n"
        "function PlayerId()\n"
        "  return Citizen.InvokeNative(0x4F8644AF03D0E0D6, Citizen.ResultAsInteger())\n"
        "end\n"
    )
    assert [f.filename for f in result.extra_files] == ["natives_manifest.json"]


def test_preview_unknown_native(catalog: NativeCatalog) -> None:
    with pytest.raises(CatalogError):
        preview_native("ts", catalog, "0x1234")
