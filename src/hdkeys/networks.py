import attr

from .exceptions import UnknownVersion


@attr.s(auto_attribs=True, frozen=True)
class Network:
    name: str
    private_version: int
    public_version: int

    def version(self, private):
        return self.private_version if private else self.public_version


MAINNET = Network(name="mainnet", private_version=0x0488ADE4, public_version=0x0488B21E)
TESTNET = Network(name="testnet", private_version=0x04358394, public_version=0x043587CF)

by_name = {network.name: network for network in (MAINNET, TESTNET)}

_by_version = {}
for _network in by_name.values():
    _by_version[_network.private_version] = (_network, True)
    _by_version[_network.public_version] = (_network, False)


def get(name):
    try:
        return by_name[name]
    except KeyError as e:
        raise ValueError(f"Unknown network: {name}") from e


def from_version(version):
    """Look up a version tag, returning ``(network, is_private)``."""
    try:
        return _by_version[version]
    except KeyError:
        raise UnknownVersion(f"Unknown version bytes: {version:#010x}") from None
