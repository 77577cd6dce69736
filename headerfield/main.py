"""CLI entry point for headerfield."""

from __future__ import annotations

import sys

import click
from dotenv import load_dotenv
from rich.table import Table
from rich.text import Text

from headerfield import __version__
from headerfield.config import Settings
from headerfield.errors import InvalidHeaderFieldName, InvalidHeaderFieldValue
from headerfield.helpers.console import console, setup_logging, truncate
from headerfield.name import HeaderFieldName
from headerfield.value import HeaderFieldValue

load_dotenv()


@click.group()
@click.version_option(version=__version__, prog_name="headerfield")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Validate header field names and values."""
    setup_logging(verbose)
    ctx.obj = Settings.from_env()


@cli.command()
@click.argument("name")
def name(name: str) -> None:
    """Check that NAME is a legal header field name."""
    try:
        field = HeaderFieldName.from_str(name)
    except InvalidHeaderFieldName as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    console.print(f"[green]valid[/green] {field} ({len(field)} bytes)", highlight=False)


@cli.command()
@click.argument("value")
@click.option("--secret", is_flag=True, help="Treat the value as sensitive")
def value(value: str, secret: bool) -> None:
    """Check that VALUE is a legal header field value."""
    try:
        field = HeaderFieldValue.from_str(value)
    except InvalidHeaderFieldValue as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    if secret:
        field = field.into_secret()
    console.print("[green]valid[/green] ", end="")
    console.print(str(field), markup=False, highlight=False)


@cli.command()
@click.argument("kind", type=click.Choice(["name", "value"]))
@click.argument("text")
def clean(kind: str, text: str) -> None:
    """Drop every character of TEXT that is illegal for KIND."""
    field_type = HeaderFieldName if kind == "name" else HeaderFieldValue
    cleaned = field_type.from_bytes_lossy(text)
    click.echo(cleaned.as_utf8_str())


@cli.command()
@click.argument("har_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--show-secrets", is_flag=True, help="Print sensitive values in clear")
@click.pass_obj
def scan(settings: Settings, har_path: str, show_secrets: bool) -> None:
    """Validate every header recorded in a HAR file."""
    from headerfield.har import audit_headers, iter_har_headers

    show_secrets = show_secrets or settings.show_secrets

    findings = audit_headers(iter_har_headers(har_path), settings.policy())

    table = Table(title=f"Headers in {har_path}")
    table.add_column("Where", style="cyan")
    table.add_column("Name")
    table.add_column("Value")
    table.add_column("Status")

    for f in findings:
        shown = f.value.as_utf8_str() if show_secrets else str(f.value)
        status = "[green]ok[/green]" if f.ok else f"[red]{', '.join(f.problems)}[/red]"
        table.add_row(f.location, Text(f.name.as_utf8_str()), Text(truncate(shown, 60)), status)
    console.print(table)

    invalid = [f for f in findings if not f.ok]
    console.print(f"  {len(findings)} headers, {len(invalid)} invalid")
    if invalid:
        sys.exit(1)


if __name__ == "__main__":
    cli()
