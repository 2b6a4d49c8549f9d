"""
Interactive settings form.

Renders a backend's options schema as a sequence of rich prompts and
collects the answers through the SettingsEditor.
"""

from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from ..logging_config import get_logger
from .core.options import CodeGenOption, SettingsEditor
from .registry import LanguageSpec

logger = get_logger(__name__)


def format_option_value(option: CodeGenOption, value: Any) -> str:
    """Human readable value of an option, using combo labels when known."""
    if option.type == "boolean":
        return "yes" if value else "no"
    if option.type == "combo":
        label = option.label_for(value)
        if label is not None:
            return label
    return repr(value) if value == "" else str(value)


def build_settings_table(spec: LanguageSpec, settings: Any, title: str = None) -> Table:
    """Table of every option of a backend with its current value."""
    table = Table(
        title=title or f"⚙️ {spec.display_name} Settings",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Option", style="bold green")
    table.add_column("Field", style="dim", no_wrap=True)
    table.add_column("Type", style="blue", no_wrap=True)
    table.add_column("Value", style="white")

    advanced = set(spec.advanced_options)
    for option, value in spec.editor().describe(settings):
        label = f"{option.label} [dim](advanced)[/dim]" if option in advanced else option.label
        table.add_row(label, option.field, option.type, format_option_value(option, value))

    return table


class SettingsFormHandler:
    """Prompts the user for every option of one backend."""

    def __init__(self, spec: LanguageSpec, settings: Any = None, console: Console = None):
        """
        Initialize the settings form.

        Args:
            spec: Backend whose options are edited
            settings: Starting values (backend defaults when None)
            console: Rich console instance (creates new if None)
        """
        self.spec = spec
        self.settings = settings if settings is not None else spec.default_settings()
        self.console = console or Console()
        self.editor: SettingsEditor = spec.editor()

    def run(self) -> Optional[Any]:
        """
        Run the form.

        Returns:
            The edited settings, or None if the user discarded the changes
        """
        self.console.print()
        self.console.print(
            Panel.fit(
                f"[bold blue]Configure {self.spec.display_name} export[/bold blue]\n"
                f"[dim]Stored under {self.spec.settings_key}[/dim]",
                border_style="blue",
            )
        )

        try:
            settings = self._ask_options(self.settings, self.spec.options)

            if self.spec.advanced_options and Confirm.ask(
                "Edit advanced options?", default=False
            ):
                settings = self._ask_options(settings, self.spec.advanced_options)

            self.console.print()
            self.console.print(build_settings_table(self.spec, settings))

            if not Confirm.ask("Save these settings?", default=True):
                self.console.print("[yellow]Settings discarded[/yellow]")
                return None

        except KeyboardInterrupt:
            self.console.print("\n[yellow]👋 Configuration cancelled[/yellow]")
            return None

        self.settings = settings
        return settings

    def _ask_options(self, settings: Any, options) -> Any:
        for option in options:
            settings = self._ask_option(settings, option)
        return settings

    def _ask_option(self, settings: Any, option: CodeGenOption) -> Any:
        current = getattr(settings, option.field)

        if option.type == "boolean":
            checked = Confirm.ask(option.label, default=bool(current))
            return self.editor.apply_change(settings, option.field, checked=checked)

        if option.type == "combo":
            return self.editor.apply_change(
                settings, option.field, value=self._ask_choice(option, current)
            )

        answer = Prompt.ask(option.label, default=current)
        return self.editor.apply_change(settings, option.field, value=answer)

    def _ask_choice(self, option, current: Any) -> Any:
        self.console.print(f"\n[bold]{option.label}:[/bold]")
        for i, choice in enumerate(option.choices, 1):
            marker = " [dim](current)[/dim]" if choice.value == current else ""
            self.console.print(f"  [cyan]{i}.[/cyan] {choice.label}{marker}")

        values = option.values()
        default = str(values.index(current) + 1) if current in values else "1"
        answer = Prompt.ask(
            "Select",
            choices=[str(i) for i in range(1, len(values) + 1)],
            default=default,
        )
        return values[int(answer) - 1]
