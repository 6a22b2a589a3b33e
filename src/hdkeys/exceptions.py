class HDKeyError(ValueError):
    pass


class InvalidMasterKey(HDKeyError):
    """Seed produced a master scalar of zero or not below the curve order."""


class InvalidChildKey(HDKeyError):
    """Child derivation hit an invalid scalar or the point at infinity.

    Callers may retry at the next index (see ``skip_invalid``).
    """


class HardenedFromPublicUnsupported(HDKeyError):
    pass


class DepthOverflow(HDKeyError):
    pass


class MalformedExtendedKey(HDKeyError):
    pass


class ChecksumMismatch(MalformedExtendedKey):
    pass


class UnknownVersion(MalformedExtendedKey):
    pass


class InvalidPathSyntax(HDKeyError):
    pass


class IndexOutOfRange(HDKeyError):
    pass
