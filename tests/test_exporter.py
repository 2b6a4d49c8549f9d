"""Tests for nativegen.codegen.core.exporter."""

from __future__ import annotations

import re

import pytest

from nativegen.catalog import NativeCatalog
from nativegen.codegen.core.exporter import (
    DataIntegrityError,
    ExportError,
    MissingNativeError,
    NativeExporter,
    run_export,
)
from nativegen.codegen.core.generator import ContractViolationError
from nativegen.codegen.languages.cpp import CppGenerator, CppSettings
from nativegen.codegen.languages.lua import LuaGenerator, LuaSettings
from tests._samples import LABEL_HASH, SAMPLE_ORDER

SCENARIO_TEXT = "namespace NATIVE\n{\n  const char* GET_LABEL_TEXT(const char* labelName);\n}\n"


def _string_type() -> dict:
    return {"baseType": "char", "pointers": 1, "isConst": True}


def test_label_scenario_from_catalog(label_catalog: NativeCatalog) -> None:
    assert NativeExporter(CppGenerator()).export_natives(label_catalog) == SCENARIO_TEXT


def test_label_scenario_from_plain_mapping() -> None:
    catalog = {
        "namespaces": {"NATIVE": {"name": "NATIVE", "natives": [LABEL_HASH]}},
        "natives": {
            LABEL_HASH: {
                "hash": LABEL_HASH,
                "name": "GET_LABEL_TEXT",
                "returnType": _string_type(),
                "params": [{"name": "labelName", "type": _string_type()}],
            }
        },
    }

    assert NativeExporter(CppGenerator()).export_natives(catalog) == SCENARIO_TEXT


def test_export_is_deterministic(catalog: NativeCatalog) -> None:
    settings = LuaSettings(generate_manifest=True, include_old_names=True)

    first = NativeExporter(LuaGenerator(settings))
    second = NativeExporter(LuaGenerator(settings))

    assert first.export_natives(catalog) == second.export_natives(catalog)
    assert first.get_extra_files() == second.get_extra_files()


def test_namespaces_and_natives_keep_catalog_order(catalog: NativeCatalog) -> None:
    text = NativeExporter(CppGenerator()).export_natives(catalog)

    namespaces = re.findall(r"^namespace (\w+)$", text, re.MULTILINE)
    assert namespaces == ["NATIVE", "PLAYER", "ENTITY", "MISC"]

    names = [catalog.natives[h].name for h in SAMPLE_ORDER]
    positions = [text.index(f" {name}(") for name in names]
    assert positions == sorted(positions)


def test_namespace_markers_are_balanced(catalog: NativeCatalog) -> None:
    text = NativeExporter(CppGenerator()).export_natives(catalog)
    lines = text.splitlines()

    assert lines.count("{") == lines.count("}") == len(catalog.namespaces)
    depth = 0
    for line in lines:
        depth += line == "{"
        depth -= line == "}"
        assert depth in (0, 1)
    assert depth == 0


def test_missing_hash_fails_the_whole_run(label_catalog: NativeCatalog) -> None:
    label_catalog.namespaces["NATIVE"].natives.append("0x0000000000000BAD")
    generator = CppGenerator()

    with pytest.raises(MissingNativeError) as excinfo:
        NativeExporter(generator).export_natives(label_catalog)

    assert isinstance(excinfo.value, DataIntegrityError)
    assert excinfo.value.native_hash == "0x0000000000000BAD"
    assert excinfo.value.namespace == "NATIVE"
    with pytest.raises(ContractViolationError):
        generator.get()


class _ExplodingGenerator(CppGenerator):
    def _emit_native(self, native):
        raise RuntimeError("boom")


def test_unexpected_errors_are_wrapped(label_catalog: NativeCatalog) -> None:
    with pytest.raises(ExportError) as excinfo:
        NativeExporter(_ExplodingGenerator()).export_natives(label_catalog)

    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_unsupported_catalog_type() -> None:
    with pytest.raises(ExportError):
        NativeExporter(CppGenerator()).export_natives(["NATIVE"])


def test_extra_files_are_collected_per_run(catalog: NativeCatalog) -> None:
    exporter = NativeExporter(CppGenerator(CppSettings(generate_types_header=True)))

    exporter.export_natives(catalog)
    assert [f.filename for f in exporter.get_extra_files()] == ["types.h"]

    exporter.export_natives(catalog)
    assert len(exporter.get_extra_files()) == 1

    exporter.generator.clear_extra_files()
    assert exporter.get_extra_files() == []


def test_run_export_reports_success(catalog: NativeCatalog) -> None:
    result = run_export(LuaGenerator(LuaSettings(generate_manifest=True)), catalog)

    assert result.success
    assert result.error_message is None
    assert result.metadata == {
        "language": "lua",
        "file_extension": "lua",
        "namespace_count": 4,
        "native_count": 6,
        "extra_file_count": 1,
    }
    assert result.extra_files[0].filename == "natives_manifest.json"


def test_run_export_reports_failure(label_catalog: NativeCatalog) -> None:
    label_catalog.namespaces["NATIVE"].natives.append("0xBAD")

    result = run_export(CppGenerator(), label_catalog)

    assert not result.success
    assert result.code == ""
    assert "0xBAD" in result.error_message
    assert isinstance(result.exception, MissingNativeError)
