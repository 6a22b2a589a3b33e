"""Console script for hdkeys."""
import logging
import sys

import click

from . import bip32, exceptions, networks, path
from .formats import xpub


class ChoiceType(click.Choice):
    def __init__(self, typemap):
        super(ChoiceType, self).__init__(list(typemap.keys()))
        self.typemap = typemap

    def convert(self, value, param, ctx):
        value = super(ChoiceType, self).convert(value, param, ctx)
        return self.typemap[value]


class ExtendedKeyType(click.ParamType):
    name = "xkey"

    def convert(self, value, param, ctx):
        try:
            return xpub.decode(value)
        except exceptions.HDKeyError as e:
            self.fail(str(e), param, ctx)


def die(message=None, code=1):
    if message is not None:
        click.echo(message, err=True)
    sys.exit(code)


@click.group()
# fmt: off
@click.option("-v", "--verbose", is_flag=True, help="Log derivation steps")
# fmt: on
def main(verbose):
    """Derive BIP32 extended keys."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@main.command()
# fmt: off
@click.option("-n", "--network", type=ChoiceType(networks.by_name), envvar="HDKEYS_NETWORK", default="mainnet", show_default=True, help="Network")
@click.option("-P", "--public", is_flag=True, help="Print the public extended key")
@click.argument("seed_hex")
# fmt: on
def master(seed_hex, network, public):
    """Create a master key from a hex-encoded seed."""
    try:
        seed = bytes.fromhex(seed_hex)
    except ValueError:
        die(f"Seed is not valid hex: {seed_hex}")
    try:
        node = bip32.master_from_seed(seed, network)
    except ValueError as e:
        die(str(e))
    if public:
        node = bip32.neuter(node)
    click.echo(xpub.encode(node))


@main.command()
# fmt: off
@click.option("-P", "--public", is_flag=True, help="Print the public extended key")
@click.option("-s", "--skip-invalid", is_flag=True, help="Skip indices that produce invalid keys")
@click.argument("xkey", type=ExtendedKeyType())
@click.argument("derivation_path")
# fmt: on
def derive(xkey, derivation_path, public, skip_invalid):
    """Derive a descendant of XKEY along DERIVATION_PATH, e.g. m/44'/0'/0'."""
    try:
        node = path.derive_path(xkey, derivation_path, skip_invalid=skip_invalid)
    except exceptions.HDKeyError as e:
        die(str(e))
    if public:
        node = bip32.neuter(node)
    click.echo(xpub.encode(node))


@main.command()
@click.argument("xkey", type=ExtendedKeyType())
def neuter(xkey):
    """Print the public variant of XKEY."""
    click.echo(xpub.encode(bip32.neuter(xkey)))


@main.command()
@click.argument("xkey", type=ExtendedKeyType())
def show(xkey):
    """Print the fields of XKEY."""
    kind = "private" if xkey.is_private else "public"
    child = xkey.child_number & ~bip32.HARDENED_FLAG
    hardened = "'" if xkey.is_hardened else ""
    click.echo(f"Network: {xkey.network.name} ({kind})")
    click.echo(f"Depth: {xkey.depth}")
    click.echo(f"Fingerprint: {xkey.fingerprint.hex()}")
    click.echo(f"Parent fingerprint: {xkey.parent_fingerprint.hex()}")
    click.echo(f"Child number: {child}{hardened}")
    click.echo(f"Chain code: {xkey.chain_code.hex()}")
    click.echo(f"Public key: {xkey.public_key.hex()}")


if __name__ == "__main__":
    sys.exit(main())  # pragma: no cover; pylint: disable=E1120
