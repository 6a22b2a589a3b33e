import attr
import pytest

from hdkeys import bip32, curve
from hdkeys.key import ExtendedKey, KeyMaterial
from hdkeys.networks import MAINNET

CHAIN_CODE = bytes.fromhex(
    "873dff81c02f525623fd1fe5167eac3a55a049de3d314bb42ee227ffed37d508"
)
PRIVATE_KEY = 0xE8F32E723DECF4051AEFAC8E2C93C9C5B214313817CDB01A1494B917C8436B35
PUBLIC_KEY = bytes.fromhex(
    "0339a36013301597daef41fbe593a02cc513d0b55527ec2df1050e2e8ff49c85c2"
)


def test_from_private():
    key = KeyMaterial.from_private(PRIVATE_KEY, CHAIN_CODE)
    assert key.public_key == PUBLIC_KEY
    assert key.is_private
    assert key.private_bytes == PRIVATE_KEY.to_bytes(32, "big")


def test_from_public():
    key = KeyMaterial.from_public(PUBLIC_KEY, CHAIN_CODE)
    assert not key.is_private
    assert key.point == curve.scalar_mul_base(PRIVATE_KEY)
    with pytest.raises(ValueError):
        key.private_bytes


@pytest.mark.parametrize("scalar", [0, curve.ORDER, curve.ORDER + 1, -1])
def test_private_out_of_range(scalar):
    with pytest.raises(ValueError):
        KeyMaterial.from_private(scalar, CHAIN_CODE)


def test_invalid_public_key():
    with pytest.raises(ValueError):
        KeyMaterial.from_public(b"\x02" + b"\xff" * 32, CHAIN_CODE)
    with pytest.raises(curve.InvalidPoint):
        KeyMaterial.from_public(b"\x02" + (7).to_bytes(32, "big"), CHAIN_CODE)
    with pytest.raises(ValueError):
        KeyMaterial(chain_code=CHAIN_CODE, public_key=PUBLIC_KEY[1:])


@pytest.mark.parametrize("length", [0, 31, 33, 64])
def test_chain_code_length(length):
    with pytest.raises(ValueError):
        KeyMaterial.from_private(PRIVATE_KEY, b"\x01" * length)


def test_neutered():
    key = KeyMaterial.from_private(PRIVATE_KEY, CHAIN_CODE)
    public = key.neutered()
    assert public == KeyMaterial.from_public(PUBLIC_KEY, CHAIN_CODE)
    assert public.neutered() is public


def test_immutable():
    key = KeyMaterial.from_private(PRIVATE_KEY, CHAIN_CODE)
    with pytest.raises(attr.exceptions.FrozenInstanceError):
        key.private_key = 1


def test_repr_hides_private_key():
    key = KeyMaterial.from_private(PRIVATE_KEY, CHAIN_CODE)
    node = ExtendedKey(network=MAINNET, key=key)
    assert f"{PRIVATE_KEY:x}" not in repr(node)
    assert str(PRIVATE_KEY) not in repr(node)


@pytest.mark.parametrize(
    "fields",
    [
        dict(depth=-1),
        dict(depth=256),
        dict(parent_fingerprint=b"\0\0\0"),
        dict(child_number=-1),
        dict(child_number=2 ** 32),
    ],
)
def test_extended_key_validation(fields):
    key = KeyMaterial.from_private(PRIVATE_KEY, CHAIN_CODE)
    with pytest.raises(ValueError):
        ExtendedKey(network=MAINNET, key=key, **fields)


def test_extended_key_properties():
    node = bip32.master_from_seed(bytes.fromhex("000102030405060708090a0b0c0d0e0f"))
    assert node.private_key == PRIVATE_KEY
    assert node.public_key == PUBLIC_KEY
    assert node.chain_code == CHAIN_CODE
    assert node.identifier.hex() == "3442193e1bb70916e914552172cd4e2dbc9df811"
    assert node.version == MAINNET.private_version
    assert not node.is_hardened
