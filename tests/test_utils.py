"""Tests for nativegen.utils and nativegen.logging_config."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest
from rich.console import Console
from rich.logging import RichHandler

from nativegen.logging_config import get_logger, setup_logging
from nativegen.utils import JSONLoaderError, load_json_object, write_text_file


def test_load_json_object(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text('{"b": 1, "a": 2}', encoding="utf-8")

    data = load_json_object(path)

    assert data == {"b": 1, "a": 2}
    assert list(data) == ["b", "a"]


@pytest.mark.parametrize(
    ("filename", "content", "message"),
    [
        ("missing.json", None, "Natives catalog not found"),
        ("natives.yml", "{}", "must be a JSON file"),
        ("bad.json", "{", "Invalid JSON in natives catalog"),
        ("list.json", "[1]", "must contain a JSON object"),
    ],
)
def test_load_json_object_errors(
    tmp_path: Path, filename: str, content: str | None, message: str
) -> None:
    path = tmp_path / filename
    if content is not None:
        path.write_text(content, encoding="utf-8")

    with pytest.raises(JSONLoaderError, match=message):
        load_json_object(path, "natives catalog")


def test_write_text_file_creates_directories(tmp_path: Path) -> None:
    path = write_text_file(tmp_path / "a" / "b", "natives.h", "x\r\ny\r\n")

    assert path == tmp_path / "a" / "b" / "natives.h"
    assert path.read_bytes() == b"x\r\ny\r\n"


def test_loggers_live_under_package_namespace() -> None:
    assert get_logger("nativegen.catalog").name == "nativegen.catalog"
    assert get_logger("tests").name == "nativegen.tests"


def test_setup_logging_replaces_its_handler() -> None:
    buffer = io.StringIO()
    console = Console(file=buffer, width=120)

    setup_logging("debug", console=console)
    logger = setup_logging("info", console=console)

    rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert logger.level == logging.INFO
    assert not logger.propagate

    get_logger("nativegen.tests").info("hello from the tests")
    assert "hello from the tests" in buffer.getvalue()

    setup_logging("not-a-level", console=console)
    assert logger.level == logging.WARNING
