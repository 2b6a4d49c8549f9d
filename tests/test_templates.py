from __future__ import annotations

from pathlib import Path

import pytest

from nativegen.codegen.core.templates import TemplateEngine, TemplateError


@pytest.fixture()
def template_dir(tmp_path: Path) -> Path:
    (tmp_path / "call.j2").write_text(
        "{% if void %}\n{{ name }}();\n{% else %}\nreturn {{ name }}();\n{% endif %}\n",
        encoding="utf-8",
    )
    return tmp_path


def test_blocks_do_not_leave_blank_lines(template_dir: Path) -> None:
    engine = TemplateEngine(template_dir)

    assert engine.render_template("call.j2", {"name": "Wait", "void": True}) == "Wait();\n"
    assert engine.render_template("call.j2", {"name": "Get", "void": False}) == "return Get();\n"


def test_missing_variable_is_an_error(template_dir: Path) -> None:
    with pytest.raises(TemplateError, match="call.j2"):
        TemplateEngine(template_dir).render_template("call.j2", {"void": True})


def test_missing_template(template_dir: Path) -> None:
    with pytest.raises(TemplateError, match="not found"):
        TemplateEngine(template_dir).render_template("nope.j2", {})


def test_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(TemplateError, match="directory not found"):
        TemplateEngine(tmp_path / "absent")


def test_no_autoescaping() -> None:
    engine = TemplateEngine()

    assert engine.render_string("{{ t }}", {"t": "std::vector<int>&"}) == "std::vector<int>&"
    with pytest.raises(TemplateError):
        engine.render_template("call.j2", {})
