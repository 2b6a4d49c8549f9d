"""
CLI integration for native code export.

Provides the export, preview, languages, info and configure sub-commands.
"""

import argparse
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ..catalog import CatalogError, NativeCatalog, load_catalog
from ..logging_config import get_logger
from ..utils import write_text_file
from . import export_catalog, get_registry, preview_native
from .core.config import ConfigError, SettingsStore, load_settings
from .core.exporter import ExportResult
from .core.generator import GeneratorError
from .core.options import OptionValueError
from .interactive import SettingsFormHandler, build_settings_table
from .registry import LanguageSpec, RegistryError

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()

# Mime subtypes that are not pygments lexer names
_LEXER_ALIASES = {"x-c": "c", "plain": "text"}

_HANDLED_ERRORS = (
    CLIError,
    CatalogError,
    ConfigError,
    GeneratorError,
    OptionValueError,
    RegistryError,
)


def create_export_subparsers(subparsers) -> None:
    """
    Register every export sub-command.

    Args:
        subparsers: Subparser group from the main parser
    """
    export_parser = subparsers.add_parser(
        "export",
        help="Export a natives catalog as source code",
        description="Export every native of a catalog with one backend",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nativegen export natives.json -l cpp -o out/
  nativegen export natives.json -l lua --set generate_manifest=true
  nativegen export natives.json -l cs --namespace PLAYER --namespace PED
        """.strip(),
    )
    export_parser.add_argument("catalog", help="Natives JSON file")
    _add_language_argument(export_parser)
    export_parser.add_argument(
        "--output", "-o", metavar="DIR", help="Output directory (default: stdout)"
    )
    _add_settings_arguments(export_parser)
    export_parser.add_argument(
        "--namespace",
        action="append",
        metavar="NS",
        help="Only export this namespace (repeatable)",
    )
    export_parser.add_argument(
        "--verbose", action="store_true", help="Show export result metadata"
    )
    export_parser.set_defaults(func=_handle_export)

    preview_parser = subparsers.add_parser(
        "preview",
        help="Preview the code generated for one native",
        description="Export a single native to see the effect of the settings",
    )
    preview_parser.add_argument("catalog", help="Natives JSON file")
    _add_language_argument(preview_parser)
    preview_parser.add_argument(
        "--native",
        metavar="HASH",
        help="Hash of the native to preview (default: first native)",
    )
    _add_settings_arguments(preview_parser)
    preview_parser.set_defaults(func=_handle_preview)

    languages_parser = subparsers.add_parser(
        "languages", help="List supported target languages"
    )
    languages_parser.set_defaults(func=_handle_languages)

    info_parser = subparsers.add_parser(
        "info", help="Show a backend and its current settings"
    )
    info_parser.add_argument("language", help="Backend name or alias")
    _add_store_argument(info_parser)
    info_parser.set_defaults(func=_handle_info)

    configure_parser = subparsers.add_parser(
        "configure", help="Edit and save the settings of a backend"
    )
    configure_parser.add_argument("language", help="Backend name or alias")
    configure_parser.add_argument(
        "--reset",
        action="store_true",
        help="Forget the stored settings instead of editing them",
    )
    _add_store_argument(configure_parser)
    configure_parser.set_defaults(func=_handle_configure)


def _add_language_argument(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--language", "-l", required=True, help="Target language name or alias"
    )


def _add_store_argument(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--store",
        metavar="FILE",
        help="Settings store file (default: ~/.config/nativegen/settings.json)",
    )


def _add_settings_arguments(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        metavar="FIELD=VALUE",
        help="Override one backend setting (repeatable)",
    )
    parser.add_argument(
        "--settings",
        metavar="FILE",
        help="JSON settings file used instead of the stored settings",
    )
    _add_store_argument(parser)


def run_command(args: argparse.Namespace) -> int:
    """
    Run a parsed sub-command.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        return args.func(args)
    except _HANDLED_ERRORS as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except Exception as e:
        logger.debug("Command failed unexpectedly", exc_info=True)
        console.print(f"[red]✗ Unexpected error:[/red] {e}")
        return 1


# Commands


def _handle_export(args: argparse.Namespace) -> int:
    spec = get_registry().get(args.language)
    settings = _resolve_settings(spec, args)
    catalog = _load_catalog(args.catalog, args.namespace)

    with console.status(f"[green]Generating {spec.display_name} code..."):
        result = export_catalog(spec.name, catalog, settings)
    _check_result(result)

    if args.output:
        _write_result(result, spec, Path(args.output))
    else:
        _print_result(result, spec)

    if args.verbose and result.metadata:
        _print_metadata(result)

    return 0


def _handle_preview(args: argparse.Namespace) -> int:
    spec = get_registry().get(args.language)
    settings = _resolve_settings(spec, args)
    catalog = _load_catalog(args.catalog)

    native_hash = args.native
    if native_hash is None:
        if not catalog.natives:
            raise CLIError("Catalog contains no natives")
        native_hash = next(iter(catalog.natives))

    result = preview_native(spec.name, catalog, native_hash, settings)
    _check_result(result)
    _print_result(result, spec)
    return 0


def _handle_languages(args: argparse.Namespace) -> int:
    registry = get_registry()

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for spec in registry.list_specs():
        aliases = registry.get_aliases_for_language(spec.name)
        table.add_row(
            spec.name,
            spec.display_name,
            spec.extension,
            spec.generator_class.__name__,
            ", ".join(aliases) if aliases else "[dim]none[/dim]",
        )

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] nativegen export [dim]natives.json[/dim] -l [cyan]LANGUAGE[/cyan]\n"
            "[bold]Info:[/bold] nativegen info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _handle_info(args: argparse.Namespace) -> int:
    registry = get_registry()
    spec = registry.get(args.language)
    info = registry.get_language_info(spec.name)

    info_text = f"""[bold]Language:[/bold] {info['display_name']} ({info['name']})
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}
[bold]Settings Key:[/bold] {info['settings_key']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {spec.display_name} Generator", border_style="green")
    )

    settings = SettingsStore(args.store).load(spec)
    console.print()
    console.print(build_settings_table(spec, settings, title="⚙️ Current Settings"))
    return 0


def _handle_configure(args: argparse.Namespace) -> int:
    spec = get_registry().get(args.language)
    store = SettingsStore(args.store)

    if args.reset:
        store.reset(spec)
        console.print(f"[green]✓[/green] {spec.display_name} settings reset to defaults")
        return 0

    settings = SettingsFormHandler(spec, store.load(spec), console).run()
    if settings is None:
        return 0

    store.save(spec, settings)
    console.print(f"[green]✓[/green] Settings saved to [cyan]{store.path}[/cyan]")
    return 0


# Helpers


def _resolve_settings(spec: LanguageSpec, args: argparse.Namespace) -> Any:
    """Stored settings (or a settings file) with ``--set`` overrides applied."""
    if args.settings:
        settings = load_settings(spec, settings_file=args.settings)
    else:
        settings = SettingsStore(args.store).load(spec)

    editor = spec.editor()
    for assignment in args.set:
        field = assignment.split("=", 1)[0].strip()
        if not editor.has_field(field):
            raise CLIError(f"Unknown option '{field}' for {spec.name}")
        settings = editor.parse_assignment(settings, assignment)

    return settings


def _load_catalog(path: str, namespaces=None) -> NativeCatalog:
    catalog = load_catalog(path)
    if namespaces:
        catalog = catalog.subset(namespaces=namespaces)
    return catalog


def _check_result(result: ExportResult):
    if not result.success:
        raise CLIError(result.error_message)


def _write_result(result: ExportResult, spec: LanguageSpec, output_dir: Path):
    main_path = write_text_file(output_dir, f"natives.{spec.extension}", result.code)
    console.print(
        f"[green]✓[/green] Generated {spec.display_name} code saved to [cyan]{main_path}[/cyan]"
    )
    for extra in result.extra_files:
        path = write_text_file(output_dir, extra.filename, extra.content)
        console.print(f"[green]✓[/green] Extra file saved to [cyan]{path}[/cyan]")


def _print_result(result: ExportResult, spec: LanguageSpec):
    console.print(
        Panel.fit(
            f"📄 Generated {spec.display_name} Code", border_style="green"
        )
    )
    console.print(Syntax(result.code, spec.name, theme="monokai"))

    for extra in result.extra_files:
        lexer = _LEXER_ALIASES.get(extra.language, extra.language)
        console.print()
        console.print(Panel.fit(f"📎 {extra.filename}", border_style="blue"))
        console.print(Syntax(extra.content, lexer, theme="monokai"))


def _print_metadata(result: ExportResult):
    metadata_table = Table(
        title="📊 Export Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)
