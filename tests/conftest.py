from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from nativegen.catalog import NativeCatalog, catalog_from_dict
from tests._samples import SAMPLE_NATIVES


@pytest.fixture
def natives_data() -> dict[str, Any]:
    """A fresh copy of the sample natives JSON document."""
    return copy.deepcopy(SAMPLE_NATIVES)


@pytest.fixture
def catalog(natives_data: dict[str, Any]) -> NativeCatalog:
    return catalog_from_dict(natives_data)


@pytest.fixture
def label_catalog(natives_data: dict[str, Any]) -> NativeCatalog:
    """Catalog holding only NATIVE / GET_LABEL_TEXT."""
    return catalog_from_dict({"NATIVE": natives_data["NATIVE"]})


@pytest.fixture
def catalog_file(tmp_path: Path, natives_data: dict[str, Any]) -> Path:
    path = tmp_path / "natives.json"
    path.write_text(json.dumps(natives_data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def settings_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the default settings store out of the user's home directory."""
    path = tmp_path / "store" / "settings.json"
    monkeypatch.setenv("NATIVEGEN_SETTINGS", str(path))
    return path
