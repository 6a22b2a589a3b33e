"""BIP32 child key derivation (CKD)."""
import logging
import struct

import attr

from . import curve, hashes
from .exceptions import (
    DepthOverflow,
    HardenedFromPublicUnsupported,
    IndexOutOfRange,
    InvalidChildKey,
    InvalidMasterKey,
)
from .key import HARDENED_FLAG, MAX_DEPTH, ExtendedKey, KeyMaterial
from .networks import MAINNET

LOG = logging.getLogger(__name__)

MIN_SEED_LENGTH = 16
MAX_SEED_LENGTH = 64
MAX_INDEX = HARDENED_FLAG - 1


def _split(I64):
    return int.from_bytes(I64[:32], "big"), I64[32:]


def master_from_seed(seed, network=MAINNET):
    if not seed:
        raise ValueError("Seed must not be empty")
    if not MIN_SEED_LENGTH <= len(seed) <= MAX_SEED_LENGTH:
        LOG.warning(
            f"Seed length {len(seed)} outside recommended range "
            f"{MIN_SEED_LENGTH}..{MAX_SEED_LENGTH} bytes"
        )

    I_left, chain_code = _split(hashes.hmac_sha512(hashes.BIP32_SEED_KEY, seed))
    if not curve.is_valid_scalar(I_left):
        raise InvalidMasterKey("Seed produces an invalid master key, use another seed")

    return ExtendedKey(
        network=network, key=KeyMaterial.from_private(I_left, chain_code)
    )


def _ckd_private(parent, child_number):
    if child_number & HARDENED_FLAG:
        data = b"\0" + parent.private_bytes
    else:
        data = parent.public_key
    data += struct.pack(">L", child_number)

    I_left, chain_code = _split(hashes.hmac_sha512(parent.chain_code, data))
    if I_left >= curve.ORDER:
        raise InvalidChildKey(f"I_L not below curve order for child {child_number}")

    k = (I_left + parent.private_key) % curve.ORDER
    if k == 0:
        raise InvalidChildKey(f"Child key is zero for child {child_number}")

    return KeyMaterial.from_private(k, chain_code)


def _ckd_public(parent, child_number):
    # Public derivation: K_i = point(I_L) + K_par
    data = parent.public_key + struct.pack(">L", child_number)

    I_left, chain_code = _split(hashes.hmac_sha512(parent.chain_code, data))
    if I_left >= curve.ORDER:
        raise InvalidChildKey(f"I_L not below curve order for child {child_number}")

    point = curve.point_add(curve.scalar_mul_base(I_left), parent.point)
    if curve.is_infinity(point):
        raise InvalidChildKey(f"Point at infinity for child {child_number}")

    return KeyMaterial(chain_code=chain_code, public_key=curve.compress(point))


def _derive(parent, child_number):
    if parent.depth >= MAX_DEPTH:
        raise DepthOverflow(f"Cannot derive below depth {MAX_DEPTH}")

    if parent.is_private:
        key = _ckd_private(parent.key, child_number)
    elif child_number & HARDENED_FLAG:
        raise HardenedFromPublicUnsupported(
            "Hardened derivation requires a private key"
        )
    else:
        key = _ckd_public(parent.key, child_number)

    child = ExtendedKey(
        network=parent.network,
        key=key,
        depth=parent.depth + 1,
        parent_fingerprint=parent.fingerprint,
        child_number=child_number,
    )
    LOG.debug(f"Derived child {child_number:#010x} at depth {child.depth}")
    return child


def derive_child(parent, index, hardened=False, skip_invalid=False):
    """Derive child ``index`` of ``parent``.

    With ``skip_invalid``, an index whose derivation is invalid (probability
    lower than 1 in 2^127) is skipped and the next index is tried, as BIP32
    suggests. Otherwise :class:`InvalidChildKey` is raised and the caller
    decides.
    """
    if not 0 <= index <= MAX_INDEX:
        raise IndexOutOfRange(f"Index {index} out of range 0..{MAX_INDEX}")

    while True:
        child_number = (index | HARDENED_FLAG) if hardened else index
        try:
            return _derive(parent, child_number)
        except InvalidChildKey:
            if not skip_invalid:
                raise
            LOG.warning(f"Child {child_number:#010x} is invalid, trying next index")
            index += 1
            if index > MAX_INDEX:
                raise IndexOutOfRange("No valid child left in index range") from None


def derive_child_number(parent, child_number, skip_invalid=False):
    """Derive using a raw 32-bit child number (high bit means hardened)."""
    if not 0 <= child_number <= 0xFFFF_FFFF:
        raise IndexOutOfRange(f"Child number {child_number} does not fit in 32 bits")
    return derive_child(
        parent,
        child_number & ~HARDENED_FLAG,
        hardened=bool(child_number & HARDENED_FLAG),
        skip_invalid=skip_invalid,
    )


def neuter(key):
    if not key.is_private:
        return key
    return attr.evolve(key, key=key.key.neutered())
