import construct as c
from trezorlib.tools import b58decode, b58encode

from .. import curve, hashes, networks
from ..exceptions import ChecksumMismatch, MalformedExtendedKey
from ..key import ZERO_FINGERPRINT, ExtendedKey, KeyMaterial
from . import Checksummed

SERIALIZED_LENGTH = 82

B58_ALPHABET = frozenset("123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz")

XpubPayload = c.Struct(
    "version" / c.Int32ub,
    "depth" / c.Int8ub,
    "fingerprint" / c.Bytes(4),
    "child_num" / c.Int32ub,
    "chain_code" / c.Bytes(32),
    "key" / c.Bytes(33),
)

XpubStruct = Checksummed(XpubPayload, hashes.checksum)


def serialize(node):
    if node.is_private:
        key = b"\0" + node.key.private_bytes
    else:
        key = node.public_key
    data = dict(
        version=node.version,
        depth=node.depth,
        fingerprint=node.parent_fingerprint,
        child_num=node.child_number,
        chain_code=node.chain_code,
        key=key,
    )
    return XpubStruct.build(dict(payload=dict(value=data)))


def _parse_key(data, chain_code, private):
    if private:
        if data[0] != 0:
            raise MalformedExtendedKey("Private key must be prefixed with 0x00")
        scalar = int.from_bytes(data[1:], "big")
        if not curve.is_valid_scalar(scalar):
            raise MalformedExtendedKey("Private key out of range")
        return KeyMaterial.from_private(scalar, chain_code)
    try:
        return KeyMaterial.from_public(data, chain_code)
    except curve.InvalidPoint as e:
        raise MalformedExtendedKey(str(e)) from e


def deserialize(xpub_bytes):
    if len(xpub_bytes) != SERIALIZED_LENGTH:
        raise MalformedExtendedKey(
            f"Extended key must be {SERIALIZED_LENGTH} bytes, got {len(xpub_bytes)}"
        )
    try:
        data = XpubStruct.parse(xpub_bytes).payload.value
    except c.ChecksumError as e:
        raise ChecksumMismatch("Extended key checksum mismatch") from e
    except c.ConstructError as e:
        raise MalformedExtendedKey(str(e)) from e

    network, private = networks.from_version(data.version)

    if data.depth == 0 and (
        data.fingerprint != ZERO_FINGERPRINT or data.child_num != 0
    ):
        raise MalformedExtendedKey("Master key with non-zero parent or child number")

    return ExtendedKey(
        network=network,
        key=_parse_key(data.key, data.chain_code, private),
        depth=data.depth,
        parent_fingerprint=data.fingerprint,
        child_number=data.child_num,
    )


def encode(node):
    # the checksum is already part of the serialized bytes, so plain base58
    return b58encode(serialize(node))


def decode(xpubstr):
    if not xpubstr or not set(xpubstr) <= B58_ALPHABET:
        raise MalformedExtendedKey("Extended key contains non-base58 characters")
    return deserialize(b58decode(xpubstr))
