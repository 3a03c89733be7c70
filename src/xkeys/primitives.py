"""
Extended key metadata
https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki#extended-keys
"""

HARDENED_OFFSET = 0x80000000
UINT32_MAX = 2**32 - 1
MAX_DEPTH = 255

CHAIN_CODE_LEN = 32
FINGERPRINT_LEN = 4


class Hint(object):
    """
    Serialization variant, selects the version bytes of an extended key

    LEGACY -> BIP32 (xprv / xpub)
    COMPATIBILITY -> BIP49, p2sh-p2wpkh (yprv / ypub)
    SEGWIT -> BIP84, p2wpkh (zprv / zpub)
    """

    LEGACY = "legacy"
    COMPATIBILITY = "compatibility"
    SEGWIT = "segwit"

    # decode tie-break order
    ALL = (LEGACY, COMPATIBILITY, SEGWIT)


def check_hint(hint: str) -> str:
    if hint not in Hint.ALL:
        raise ValueError(f"unrecognized hint: {hint}")
    return hint


class ChainCode(bytes):
    def __new__(cls, data: bytes):
        if len(data) != CHAIN_CODE_LEN:
            raise ValueError(f"chain code must be {CHAIN_CODE_LEN} bytes, got {len(data)}")
        return super().__new__(cls, data)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.hex()})"


class KeyFingerprint(bytes):
    """
    First 4 bytes of HASH160(compressed pubkey)
    """

    def __new__(cls, data: bytes):
        if len(data) != FINGERPRINT_LEN:
            raise ValueError(f"fingerprint must be {FINGERPRINT_LEN} bytes, got {len(data)}")
        return super().__new__(cls, data)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.hex()})"


KeyFingerprint.ROOT = KeyFingerprint(b"\x00" * FINGERPRINT_LEN)


class XKeyInfo(object):
    """
    Extended key metadata, everything but the key itself

    Args:
        depth: int, 0 for the root key
        parent: KeyFingerprint, fingerprint of the parent key, zero for the root key
        index: int, child number; hardened indices have the high bit set
        chain_code: ChainCode
        hint: str, one of Hint.ALL
    """

    __slots__ = ("depth", "parent", "index", "chain_code", "hint")

    def __init__(
        self,
        depth: int,
        parent: bytes,
        index: int,
        chain_code: bytes,
        hint: str = Hint.LEGACY,
    ):
        if depth < 0 or depth > MAX_DEPTH:
            raise ValueError(f"depth not in [0, {MAX_DEPTH}]: {depth}")
        if index < 0 or index > UINT32_MAX:
            raise ValueError(f"index not in [0, {UINT32_MAX}]: {index}")
        self.depth = depth
        self.parent = KeyFingerprint(parent)
        self.index = index
        self.chain_code = ChainCode(chain_code)
        self.hint = check_hint(hint)

    @classmethod
    def root(cls, chain_code: bytes, hint: str = Hint.LEGACY) -> "XKeyInfo":
        return cls(0, KeyFingerprint.ROOT, 0, chain_code, hint=hint)

    def is_root(self) -> bool:
        return self.depth == 0

    def is_hardened(self) -> bool:
        return self.index >= HARDENED_OFFSET

    def __eq__(self, other):
        if not isinstance(other, XKeyInfo):
            return NotImplemented
        return (
            self.depth == other.depth
            and self.parent == other.parent
            and self.index == other.index
            and self.chain_code == other.chain_code
            and self.hint == other.hint
        )

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(depth={self.depth}, parent={self.parent.hex()}, "
            f"index={self.index}, chain_code={self.chain_code.hex()}, hint={self.hint!r})"
        )
