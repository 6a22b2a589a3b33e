import hashlib
import hmac

from trezorlib.tools import btc_hash, hash_160

BIP32_SEED_KEY = b"Bitcoin seed"


def hmac_sha512(key, data):
    return hmac.HMAC(key=key, msg=data, digestmod=hashlib.sha512).digest()


def checksum(data):
    """First 4 bytes of double SHA-256, as used by Base58Check."""
    return btc_hash(data)[:4]


def fingerprint(public_key):
    """First 4 bytes of HASH160 of a compressed public key."""
    return hash_160(public_key)[:4]
