"""CLI commands for puidv7."""

import json
import logging
import sys
from pathlib import Path

import click

from puidv7 import PuidValidator, Settings, base32, decode, encode, parse
from puidv7.exceptions import Puidv7Error

logger = logging.getLogger(__name__)


def _load_settings(config_path: Path | None) -> Settings:
    if config_path is not None:
        return Settings.from_toml(config_path)
    try:
        return Settings.find_and_load()
    except FileNotFoundError:
        return Settings()


def _settings(ctx: click.Context) -> Settings:
    """Settings for this invocation, loaded on first use."""
    settings = ctx.meta.get("puidv7.settings")
    if settings is None:
        try:
            settings = _load_settings(ctx.obj)
        except ValueError as e:
            _fail(e)
        ctx.meta["puidv7.settings"] = settings
    return settings


def _fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(package_name="puidv7")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to puidv7.toml (default: search upwards from current directory)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """puidv7 - prefixed, Crockford Base32 encoded UUIDs."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    ctx.obj = config_path


@cli.command("encode")
@click.argument("uuid")
@click.option("--prefix", "-p", help="3-letter prefix (default: from config)")
@click.pass_context
def encode_cmd(ctx: click.Context, uuid: str, prefix: str | None) -> None:
    """Encode UUID into a puidv7 string."""
    settings = _settings(ctx)
    prefix = prefix if prefix is not None else settings.prefix
    logger.debug(f"Encoding {uuid!r} with prefix {prefix!r}")

    if not prefix:
        click.echo("Error: --prefix is required (no default prefix configured)", err=True)
        sys.exit(1)

    try:
        click.echo(encode(uuid, prefix))
    except Puidv7Error as e:
        _fail(e)


@cli.command("decode")
@click.argument("puid")
@click.option("--prefix", "-p", help="Expected prefix (default: from config, empty = any)")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def decode_cmd(ctx: click.Context, puid: str, prefix: str | None, output_json: bool) -> None:
    """Decode puidv7 string into a UUID."""
    settings = _settings(ctx)
    prefix = prefix if prefix is not None else settings.prefix
    logger.debug(f"Decoding {puid!r} with expected prefix {prefix!r}")

    try:
        if output_json:
            components = parse(puid, prefix)
            click.echo(
                json.dumps(
                    {
                        "puid": components.puid,
                        "prefix": components.prefix,
                        "uuid": components.uuid,
                    },
                    indent=2,
                )
            )
        else:
            click.echo(decode(puid, prefix))
    except Puidv7Error as e:
        _fail(e)


@cli.command()
@click.argument("puid")
@click.option("--prefix", "-p", help="Expected prefix (default: from config, empty = any)")
@click.option("--strict", is_flag=True, help="Fail on warnings (default: from config)")
@click.option("--quiet", "-q", is_flag=True, help="Only output result (0=valid, 1=invalid)")
@click.pass_context
def validate(
    ctx: click.Context,
    puid: str,
    prefix: str | None,
    strict: bool,
    quiet: bool,
) -> None:
    """Validate puidv7 format."""
    settings = _settings(ctx)
    prefix = prefix if prefix is not None else settings.prefix
    strict = strict or settings.strict

    try:
        validator = PuidValidator(prefix)
    except Puidv7Error as e:
        _fail(e)
        return

    result = validator.validate(puid, strict=strict)

    if quiet:
        sys.exit(0 if result.valid else 1)

    for warning in result.warnings or []:
        click.echo(f"! {warning}", err=True)

    if result.valid:
        click.echo(f"✓ Valid puidv7: {puid} ({result.uuid})")
        sys.exit(0)
    else:
        click.echo(f"✗ Invalid puidv7: {result.error}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("hex_data")
def b32encode(hex_data: str) -> None:
    """Encode hex bytes as Crockford Base32."""
    try:
        data = bytes.fromhex(hex_data)
    except ValueError as e:
        _fail(e)
        return
    click.echo(base32.encode(data))


@cli.command()
@click.argument("text")
def b32decode(text: str) -> None:
    """Decode Crockford Base32 text to hex bytes."""
    try:
        click.echo(base32.decode(text).hex())
    except Puidv7Error as e:
        _fail(e)


if __name__ == "__main__":
    cli()
