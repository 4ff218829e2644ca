"""
idkit CLI

Command-line interface for minting, converting and inspecting identifiers.

Usage:
    idkit random --format base64
    idkit ms48 --json
    idkit encode 46 --format hex
    idkit decode 1a
    idkit decode K --format base64
    idkit convert 0x2e --json
    idkit inspect 7204436612294737920
    idkit search ab 1a 0x2e zzab
"""

import json
from typing import List, Optional

import typer
from typing_extensions import Annotated

from idkit.codec.converter import decode as decode_text
from idkit.codec.converter import encode as encode_value
from idkit.codec.converter import parse_auto_detect
from idkit.codec.formats import IdFormat
from idkit.kernel.errors import IdKitError
from idkit.kernel.logging import LogOperation, configure_logging, get_logger
from idkit.kernel.settings import IdKitSettings
from idkit.service import IdService

settings = IdKitSettings.from_env()

# Logs go to stderr so stdout stays clean for piping
configure_logging(json_output=settings.json_logs, log_level=settings.log_level)

logger = get_logger(__name__)

app = typer.Typer(
    name="idkit",
    help="idkit - mint and convert 63-bit identifiers",
    add_completion=False,
)


def get_service() -> IdService:
    """Get IdService instance"""
    return IdService()


def fail(error: Exception) -> None:
    """Report an error on stderr and exit non-zero"""
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


def echo_json(data: dict) -> None:
    typer.echo(json.dumps(data, indent=2, default=str))


# Issuing commands


@app.command()
def random(
    format: Annotated[
        Optional[IdFormat],
        typer.Option("--format", "-f", help="Also print this rendering"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Issue a random id"""
    _issue("random", format, json_output)


@app.command()
def ms48(
    format: Annotated[
        Optional[IdFormat],
        typer.Option("--format", "-f", help="Also print this rendering"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Issue a time-ordered (ms_48) id"""
    _issue("time_ordered", format, json_output)


def _issue(kind: str, format: Optional[IdFormat], json_output: bool) -> None:
    service = get_service()
    try:
        with LogOperation(logger, "issue", kind=kind):
            if kind == "random":
                issued = service.issue_random()
            else:
                issued = service.issue_time_ordered()
    except IdKitError as e:
        fail(e)
        return

    if json_output:
        echo_json(issued.model_dump(mode="json"))
        return

    rendering = format or settings.default_format
    typer.echo(f"{issued.value}")
    typer.echo(f"  {rendering.value}: {encode_value(issued.value, rendering)}")


# Codec commands


@app.command()
def encode(
    value: Annotated[int, typer.Argument(help="Integer identifier")],
    format: Annotated[
        Optional[IdFormat],
        typer.Option("--format", "-f", help="Target format"),
    ] = None,
) -> None:
    """Render an integer id in one format"""
    try:
        typer.echo(encode_value(value, format or settings.default_format))
    except IdKitError as e:
        fail(e)


@app.command()
def decode(
    text: Annotated[str, typer.Argument(help="Rendered identifier")],
    format: Annotated[
        Optional[IdFormat],
        typer.Option("--format", "-f", help="Source format (auto-detect if omitted)"),
    ] = None,
) -> None:
    """Decode a rendered id back to its integer"""
    try:
        if format is None:
            value = parse_auto_detect(text)
        else:
            value = decode_text(text, format)
    except IdKitError as e:
        fail(e)
        return
    typer.echo(str(value))


@app.command()
def convert(
    text: Annotated[str, typer.Argument(help="Identifier in any supported format")],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Show an id in every format"""
    try:
        view = get_service().convert(text)
    except IdKitError as e:
        fail(e)
        return

    if json_output:
        echo_json(view.model_dump(mode="json"))
    else:
        typer.echo(f"value:  {view.value}")
        typer.echo(f"base36: {view.base36}")
        typer.echo(f"base64: {view.base64}")
        typer.echo(f"hex:    {view.hex}")


@app.command()
def inspect(
    text: Annotated[str, typer.Argument(help="Identifier in any supported format")],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Split a time-ordered id into timestamp and offset"""
    try:
        inspection = get_service().inspect(text)
    except IdKitError as e:
        fail(e)
        return

    if json_output:
        echo_json(inspection.model_dump(mode="json"))
    else:
        typer.echo(f"value:     {inspection.view.value}")
        typer.echo(f"timestamp: {inspection.timestamp_ms} ({inspection.timestamp.isoformat()})")
        typer.echo(f"offset:    {inspection.offset}")


@app.command()
def search(
    substring: Annotated[str, typer.Argument(help="Base-36 substring to look for")],
    values: Annotated[List[str], typer.Argument(help="Identifiers to search")],
) -> None:
    """List the ids whose base-36 rendering contains a substring"""
    service = get_service()
    try:
        matches = service.filter_by_base36_substring(values, substring)
    except IdKitError as e:
        fail(e)
        return

    typer.echo(f"Matches ({len(matches)}):")
    for value in matches:
        typer.echo(f"  {value}: {service.convert(value).base36}")


def main() -> None:
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
