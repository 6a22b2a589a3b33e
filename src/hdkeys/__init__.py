"""BIP32 hierarchical deterministic key trees."""

__version__ = "0.1.0"

from .bip32 import derive_child, derive_child_number, master_from_seed, neuter
from .exceptions import (
    ChecksumMismatch,
    DepthOverflow,
    HardenedFromPublicUnsupported,
    HDKeyError,
    IndexOutOfRange,
    InvalidChildKey,
    InvalidMasterKey,
    InvalidPathSyntax,
    MalformedExtendedKey,
    UnknownVersion,
)
from .key import ExtendedKey, KeyMaterial
from .networks import MAINNET, TESTNET, Network
from .path import DerivationPath, DerivationStep, derive_path, parse_path
