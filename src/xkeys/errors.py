"""
Extended key errors

Codec and derivation failures are raised as subclasses of Bip32Error.
Errors describing a bad value also subclass ValueError. Constructors of
metadata and configuration values (ChainCode, KeyFingerprint, XKeyInfo,
Config), check_hint and get_params raise plain ValueError.
"""


class Bip32Error(Exception):
    pass


class Base58DecodeError(Bip32Error, ValueError):
    pass


class BadChecksum(Bip32Error, ValueError):
    pass


class BadVersionBytes(Bip32Error, ValueError):
    """
    4-byte version prefix matched no known version
    """

    def __init__(self, version: bytes):
        self.version = bytes(version)
        super().__init__(f"unknown extended key version bytes: {self.version.hex()}")


class BadXPrivVersionBytes(BadVersionBytes):
    pass


class BadXPubVersionBytes(BadVersionBytes):
    pass


class BadPadding(Bip32Error, ValueError):
    def __init__(self, padding: int):
        self.padding = padding
        super().__init__(f"expected 0x00 padding before private key, got {padding:#04x}")


class TruncatedData(Bip32Error, EOFError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} bytes, read {actual}")


class TrailingData(Bip32Error, ValueError):
    def __init__(self, extra: int):
        self.extra = extra
        super().__init__(f"{extra} unexpected trailing bytes after extended key")


class BackendError(Bip32Error, ValueError):
    pass


class NoBackend(Bip32Error):
    pass


class HardenedDerivation(Bip32Error, ValueError):
    pass


class MalformattedDerivation(Bip32Error, ValueError):
    pass


class BadSeedLength(Bip32Error, ValueError):
    pass
