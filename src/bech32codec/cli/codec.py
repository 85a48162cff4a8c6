import json
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bech32codec.checksum import Variant
from bech32codec.codec import decode, decode_variant, decode_words, encode
from bech32codec.errors import Bech32Error

VARIANT_NAMES = [v.name.lower() for v in Variant]


def _fail(error: Bech32Error):
    click.echo(f"Error ({error.kind.value}): {error}", err=True)
    sys.exit(1)


def _parse_hex(ctx, param, value):
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a hex string")


@click.command("encode")
@click.argument("hrp")
@click.argument("payload", callback=_parse_hex)
@click.option(
    "--variant",
    type=click.Choice(VARIANT_NAMES),
    required=True,
    help="Checksum variant to produce.",
)
@click.option("--upper", is_flag=True, help="Print the result in uppercase.")
def encode_command(hrp, payload, variant, upper):
    """Encodes a hex PAYLOAD under the human-readable part HRP."""
    try:
        encoded = encode(hrp, payload, Variant.from_name(variant))
    except Bech32Error as e:
        _fail(e)
    click.echo(encoded.upper() if upper else encoded)


@click.command("decode")
@click.argument("bech")
@click.option(
    "--variant",
    type=click.Choice(VARIANT_NAMES + ["any"]),
    default="any",
    show_default=True,
    help="Only accept this checksum variant.",
)
@click.option(
    "--max-length",
    type=click.IntRange(min=1),
    default=None,
    help="Reject strings longer than this many characters.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def decode_command(bech, variant, max_length, as_json):
    """Decodes BECH into its human-readable part, payload and variant."""
    if max_length is not None and len(bech) > max_length:
        click.echo(
            f"Error: string is {len(bech)} characters, limit is {max_length}",
            err=True,
        )
        sys.exit(1)

    try:
        if variant == "any":
            result = decode(bech)
        else:
            result = decode_variant(bech, Variant.from_name(variant))
    except Bech32Error as e:
        _fail(e)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "hrp": result.hrp,
                    "data": result.data.hex(),
                    "variant": result.variant.name.lower(),
                }
            )
        )
        return

    table = Table(title="Decoded", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value", overflow="fold")
    table.add_row("hrp", escape(result.hrp))
    table.add_row("data", result.data.hex() or "(empty)")
    table.add_row("length", str(len(result.data)))
    table.add_row("variant", result.variant.name.lower())
    Console().print(table)


@click.command("verify")
@click.argument("bech")
def verify_command(bech):
    """Checks the checksum of BECH and prints the matching variant.

    The data part is not regrouped into bytes, so strings whose payload is
    not a whole number of bytes (segwit addresses, for one) still verify.
    """
    try:
        _, _, variant = decode_words(bech)
    except Bech32Error as e:
        _fail(e)
    click.echo(f"✓ valid {variant.name.lower()}")
