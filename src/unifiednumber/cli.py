"""Command-line interface for unifiednumber."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from unifiednumber.exceptions import UnifiedNumberError
from unifiednumber.formatter import NumberFormat
from unifiednumber.loader import LocaleDataLoader, LocaleRegistry

app = typer.Typer(
    name="unifiednumber",
    help="Locale-aware number formatting with typed parts",
    add_completion=False,
)

console = Console()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Locale-aware number formatting with typed parts."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(name="format")
def format_cmd(
    value: Annotated[
        str,
        typer.Argument(help="Number to format (NaN and inf accepted; use -- before negatives)"),
    ],
    locale_file: Annotated[
        Path,
        typer.Option("--locale-file", "-l", help="Locale data file (JSON or YAML)"),
    ],
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", help="Locale tag (defaults to the file's locale)"),
    ] = None,
    style: Annotated[
        str,
        typer.Option("--style", "-s", help="decimal, percent, currency or unit"),
    ] = "decimal",
    currency: Annotated[
        Optional[str],
        typer.Option("--currency", help="ISO 4217 code for currency style"),
    ] = None,
    unit: Annotated[
        Optional[str],
        typer.Option("--unit", help="Unit identifier for unit style"),
    ] = None,
    unit_display: Annotated[
        Optional[str],
        typer.Option("--unit-display", help="short, narrow or long"),
    ] = None,
    notation: Annotated[
        Optional[str],
        typer.Option("--notation", "-n", help="standard, scientific or engineering"),
    ] = None,
    sign_display: Annotated[
        Optional[str],
        typer.Option("--sign-display", help="auto, always, never or exceptZero"),
    ] = None,
    numbering_system: Annotated[
        Optional[str],
        typer.Option("--numbering-system", help="Numbering system, e.g. arab"),
    ] = None,
    min_fraction: Annotated[Optional[int], typer.Option("--min-fraction")] = None,
    max_fraction: Annotated[Optional[int], typer.Option("--max-fraction")] = None,
    min_significant: Annotated[Optional[int], typer.Option("--min-significant")] = None,
    max_significant: Annotated[Optional[int], typer.Option("--max-significant")] = None,
    min_integer: Annotated[Optional[int], typer.Option("--min-integer")] = None,
    no_grouping: Annotated[
        bool,
        typer.Option("--no-grouping", help="Disable group separators"),
    ] = False,
    parts: Annotated[
        bool,
        typer.Option("--parts", "-p", help="Show a table of typed parts"),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print parts as JSON"),
    ] = False,
) -> None:
    """Format a number with the given locale data."""
    if not locale_file.exists():
        typer.echo(f"Error: File not found: {locale_file}", err=True)
        raise typer.Exit(1)

    options = {
        "style": style,
        "currency": currency,
        "unit": unit,
        "unit_display": unit_display,
        "notation": notation,
        "sign_display": sign_display,
        "numbering_system": numbering_system,
        "minimum_fraction_digits": min_fraction,
        "maximum_fraction_digits": max_fraction,
        "minimum_significant_digits": min_significant,
        "maximum_significant_digits": max_significant,
        "minimum_integer_digits": min_integer,
    }
    options = {key: val for key, val in options.items() if val is not None}
    if no_grouping:
        options["use_grouping"] = False

    try:
        number = float(value)
        registry = LocaleRegistry()
        data = LocaleDataLoader(registry=registry).load_file(locale_file)
        formatter = NumberFormat.create(locale or data.locale, registry=registry, **options)
        result = formatter.format_to_parts(number)
    except (UnifiedNumberError, ValueError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps([part.to_dict() for part in result], ensure_ascii=False))
    elif parts:
        table = Table(title=f"{value} ({formatter.config.locale})")
        table.add_column("Type", style="cyan")
        table.add_column("Value", style="green")
        for part in result:
            table.add_row(part.type.value, repr(part.value))
        console.print(table)
    else:
        typer.echo("".join(part.value for part in result))


@app.command(name="locales")
def locales_cmd(
    directory: Annotated[Path, typer.Argument(help="Directory of locale data files")],
    pattern: Annotated[
        str,
        typer.Option("--pattern", help="Glob pattern for files"),
    ] = "*.yaml",
) -> None:
    """List the locales found in a directory of data files."""
    try:
        loaded = LocaleDataLoader(registry=LocaleRegistry()).load_directory(directory, pattern)
    except OSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not loaded:
        typer.echo("No locale data found.")
        return

    table = Table(title=f"Locales in {directory}")
    table.add_column("Locale", style="cyan")
    table.add_column("Numbering systems")
    table.add_column("Styles")
    table.add_column("Units")
    for tag, data in sorted(loaded.items()):
        styles = [style.value for style in data.patterns]
        if data.unit_patterns:
            styles.append("unit")
        table.add_row(
            tag,
            ", ".join(data.numbering_systems),
            ", ".join(styles),
            ", ".join(sorted(data.unit_patterns)),
        )
    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
