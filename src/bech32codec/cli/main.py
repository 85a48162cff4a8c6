import click

# Import individual commands from modules
from bech32codec.cli.codec import encode_command, decode_command, verify_command


@click.group()
@click.version_option(package_name="bech32codec")
def cli():
    """Encode, decode and verify Bech32 / Bech32m strings."""
    pass


# Add codec commands
cli.add_command(encode_command)
cli.add_command(decode_command)
cli.add_command(verify_command)


if __name__ == "__main__":
    cli()
