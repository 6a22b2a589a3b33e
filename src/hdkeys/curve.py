"""secp256k1 arithmetic used by the derivation engine.

Thin wrapper over fastecdsa; points are ``fastecdsa.point.Point`` objects,
``None`` is the point at infinity, and serialized points are always 33-byte
compressed SEC1.
"""
from fastecdsa.curve import secp256k1
from fastecdsa.encoding.sec1 import InvalidSEC1PublicKey, SEC1Encoder

ORDER = secp256k1.q
INFINITY = None


class InvalidPoint(ValueError):
    pass


def is_valid_scalar(scalar):
    return 0 < scalar < ORDER


def scalar_mul_base(scalar):
    if scalar % ORDER == 0:
        return INFINITY
    return scalar * secp256k1.G


def point_add(p1, p2):
    if p1 is INFINITY:
        return p2
    if p2 is INFINITY:
        return p1
    if p1.x == p2.x and p1.y != p2.y:
        return INFINITY
    return p1 + p2


def is_infinity(point):
    return point is INFINITY


def compress(point):
    if is_infinity(point):
        raise InvalidPoint("Point cannot be INFINITY")
    return SEC1Encoder.encode_public_key(point, compressed=True)


def decompress(data):
    if len(data) != 33 or data[0] not in (2, 3):
        raise InvalidPoint("Expected a 33-byte compressed public key")
    if int.from_bytes(data[1:], "big") >= secp256k1.p:
        raise InvalidPoint(f"Invalid public key: {data.hex()}")
    try:
        return SEC1Encoder.decode_public_key(data, secp256k1)
    except (InvalidSEC1PublicKey, ValueError) as e:
        raise InvalidPoint(f"Invalid public key: {data.hex()}") from e
