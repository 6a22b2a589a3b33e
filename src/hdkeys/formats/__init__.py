import construct as c


def Checksummed(payload, checksum_func, checksum_length=4):
    """Payload followed by a checksum computed over the payload's raw bytes.

    Parsing raises ``construct.ChecksumError`` when the trailing checksum does
    not match. Build with ``{"payload": {"value": ...}}``; the checksum is
    filled in automatically.
    """
    return c.Struct(
        "payload" / c.RawCopy(payload),
        "checksum"
        / c.Checksum(c.Bytes(checksum_length), checksum_func, c.this.payload.data),
        c.Terminated,
    )
