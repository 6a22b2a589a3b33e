import typing

import attr
from trezorlib.tools import HARDENED_FLAG, hash_160

from . import curve, hashes
from .networks import Network

MAX_DEPTH = 0xFF
ZERO_FINGERPRINT = b"\0\0\0\0"


def _check_chain_code(instance, attribute, value):
    if len(value) != 32:
        raise ValueError("Chain code must be 32 bytes")


def _check_private(instance, attribute, value):
    if value is not None and not curve.is_valid_scalar(value):
        raise ValueError("Private key out of range")


def _check_public(instance, attribute, value):
    if len(value) != 33 or value[0] not in (2, 3):
        raise ValueError("Public key must be 33 bytes compressed")


@attr.s(auto_attribs=True, frozen=True)
class KeyMaterial:
    """Chain code plus a private scalar or a compressed public point.

    Use :meth:`from_private` or :meth:`from_public` rather than the raw
    constructor; they guarantee that ``public_key`` matches
    ``private_key`` and lies on the curve.
    """

    chain_code: bytes = attr.ib(validator=_check_chain_code, repr=bytes.hex)
    public_key: bytes = attr.ib(validator=_check_public, repr=bytes.hex)
    private_key: typing.Optional[int] = attr.ib(
        default=None, validator=_check_private, repr=False
    )

    @classmethod
    def from_private(cls, scalar, chain_code):
        if not curve.is_valid_scalar(scalar):
            raise ValueError("Private key out of range")
        public_key = curve.compress(curve.scalar_mul_base(scalar))
        return cls(chain_code=chain_code, public_key=public_key, private_key=scalar)

    @classmethod
    def from_public(cls, public_key, chain_code):
        curve.decompress(public_key)
        return cls(chain_code=chain_code, public_key=public_key)

    @property
    def is_private(self):
        return self.private_key is not None

    @property
    def private_bytes(self):
        if self.private_key is None:
            raise ValueError("This is a public-only key")
        return self.private_key.to_bytes(32, "big")

    @property
    def point(self):
        return curve.decompress(self.public_key)

    def neutered(self):
        if not self.is_private:
            return self
        return attr.evolve(self, private_key=None)


def _check_depth(instance, attribute, value):
    if not 0 <= value <= MAX_DEPTH:
        raise ValueError(f"Depth must be between 0 and {MAX_DEPTH}")


def _check_fingerprint(instance, attribute, value):
    if len(value) != 4:
        raise ValueError("Fingerprint must be 4 bytes")


def _check_child_number(instance, attribute, value):
    if not 0 <= value <= 0xFFFF_FFFF:
        raise ValueError("Child number must fit in 32 bits")


@attr.s(auto_attribs=True, frozen=True)
class ExtendedKey:
    """Key material together with its position in the key tree."""

    network: Network
    key: KeyMaterial
    depth: int = attr.ib(default=0, validator=_check_depth)
    parent_fingerprint: bytes = attr.ib(
        default=ZERO_FINGERPRINT, validator=_check_fingerprint, repr=bytes.hex
    )
    child_number: int = attr.ib(default=0, validator=_check_child_number)

    @property
    def is_private(self):
        return self.key.is_private

    @property
    def is_master(self):
        return self.depth == 0

    @property
    def is_hardened(self):
        return bool(self.child_number & HARDENED_FLAG)

    @property
    def version(self):
        return self.network.version(self.is_private)

    @property
    def chain_code(self):
        return self.key.chain_code

    @property
    def public_key(self):
        return self.key.public_key

    @property
    def private_key(self):
        return self.key.private_key

    @property
    def identifier(self):
        return hash_160(self.key.public_key)

    @property
    def fingerprint(self):
        return hashes.fingerprint(self.key.public_key)
