"""Typer-based command line interface for ZB Core."""
from __future__ import annotations

import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import NoReturn, Optional

import typer

from ..codec import ByteArrayEncoder, format_bytes
from ..config import AppConfig, dump_default_config, load_config
from ..exceptions import LossyProjectionError, ZbCoreError
from ..logging import configure_logging, get_logger
from ..paths import default_config_path
from ..utils.text import to_text

app = typer.Typer(help="ZB Core command line interface")


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        _fail(str(exc))
    configure_logging(ctx.obj.logging.normalized_level())


def _read_input(text: Optional[str]) -> str:
    if text is None or text == "-":
        return to_text(sys.stdin.buffer.read(), errors="surrogateescape")
    return text


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=2)


@app.command()
def encode(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="Text to encode; reads stdin when omitted or '-'"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: json|hex|base64"),
    strict: Optional[bool] = typer.Option(None, "--strict/--no-strict", help="Reject code points above U+00FF"),
) -> None:
    config: AppConfig = ctx.obj
    log = get_logger("zb_core.cli")
    encoder = ByteArrayEncoder(strict=config.encoder.strict if strict is None else strict)
    try:
        data = _read_input(text)
        values = encoder.encode(data)
        rendered = format_bytes(values, fmt or config.encoder.output_format)
    except LossyProjectionError as exc:
        log.warning("strict projection rejected", index=exc.index, code_point=exc.code_point)
        _fail(str(exc))
    except ZbCoreError as exc:
        _fail(str(exc))
    summary = encoder.inspect(data).summary()
    log.info("encoded text", **summary)
    typer.echo(rendered)


@app.command()
def inspect(
    text: Optional[str] = typer.Argument(None, help="Text to inspect; reads stdin when omitted or '-'"),
) -> None:
    log = get_logger("zb_core.cli")
    report = ByteArrayEncoder().inspect(_read_input(text))
    payload = {
        "summary": report.summary(),
        "chars": [asdict(char) for char in report.chars],
    }
    log.info("inspected text", **report.summary())
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def config_show(ctx: typer.Context) -> None:
    config: AppConfig = ctx.obj
    typer.echo(config.model_dump_json(indent=2))


@app.command()
def config_init(
    destination: Path = typer.Option(default_config_path(), "--destination", help="Where to write the config"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    if destination.exists() and not force:
        _fail(f"{destination} already exists; pass --force to overwrite")
    dump_default_config(destination)
    typer.echo(f"Default configuration written to {destination}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
