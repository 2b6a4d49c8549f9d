"""Tests for nativegen.codegen.interactive."""

from __future__ import annotations

import io
from typing import Any

import pytest
from rich.console import Console

from nativegen.codegen import get_language, interactive
from nativegen.codegen.interactive import (
    SettingsFormHandler,
    build_settings_table,
    format_option_value,
)
from nativegen.codegen.languages.cpp import CppSettings
from nativegen.codegen.languages.csharp import CSharpSettings


class ScriptedAnswers:
    """Stands in for rich's Prompt/Confirm, replaying answers in order."""

    def __init__(self, *answers: Any):
        self.answers = list(answers)
        self.questions: list[str] = []

    def ask(self, prompt: str, **kwargs: Any) -> Any:
        self.questions.append(prompt)
        return self.answers.pop(0)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120)


def _script(monkeypatch: pytest.MonkeyPatch, confirms, prompts):
    confirm = ScriptedAnswers(*confirms)
    prompt = ScriptedAnswers(*prompts)
    monkeypatch.setattr(interactive, "Confirm", confirm)
    monkeypatch.setattr(interactive, "Prompt", prompt)
    return confirm, prompt


def test_form_walks_basic_and_advanced_options(
    monkeypatch: pytest.MonkeyPatch, console: Console
) -> None:
    confirm, prompt = _script(
        monkeypatch,
        # comments, invokers, types.h, edit advanced?, hash comments, save?
        confirms=[True, True, False, True, False, True],
        # indentation, line endings, invoke function
        prompts=["2", "1", "call"],
    )

    settings = SettingsFormHandler(get_language("cpp"), console=console).run()

    assert settings == CppSettings(
        include_comments=True,
        generate_invokers=True,
        indentation="    ",
        invoke_function="call",
    )
    assert confirm.answers == [] and prompt.answers == []
    assert confirm.questions[3] == "Edit advanced options?"


def test_form_can_skip_advanced_options_and_discard(
    monkeypatch: pytest.MonkeyPatch, console: Console
) -> None:
    start = CSharpSettings(naming="original")
    _script(
        monkeypatch,
        # comments, edit advanced?, save?
        confirms=[True, False, False],
        # naming, pointer style, namespace
        prompts=["2", "3", "Natives"],
    )

    handler = SettingsFormHandler(get_language("csharp"), start, console)

    assert handler.run() is None
    assert handler.settings is start
    assert "Settings discarded" in console.file.getvalue()


def test_keyboard_interrupt_cancels(monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
    class Interrupting:
        @staticmethod
        def ask(prompt: str, **kwargs: Any) -> Any:
            raise KeyboardInterrupt

    monkeypatch.setattr(interactive, "Confirm", Interrupting)

    assert SettingsFormHandler(get_language("lua"), console=console).run() is None
    assert "cancelled" in console.file.getvalue()


def test_format_option_value() -> None:
    spec = get_language("cpp")
    options = {option.field: option for option in spec.all_options}

    assert format_option_value(options["include_comments"], True) == "yes"
    assert format_option_value(options["indentation"], "\t") == "Tab"
    assert format_option_value(options["invoke_function"], "invoke") == "invoke"
    assert format_option_value(options["invoke_function"], "") == "''"


def test_settings_table_lists_every_option(console: Console) -> None:
    spec = get_language("ts")

    console.print(build_settings_table(spec, spec.default_settings()))
    output = console.file.getvalue()

    for option in spec.all_options:
        assert option.field in output
    assert "camelCase (getLabelText)" in output
