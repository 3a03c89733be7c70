"""
Extended key version bytes, per network and purpose

https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki#serialization-format
https://github.com/bitcoin/bips/blob/master/bip-0049.mediawiki#extended-key-version
https://github.com/bitcoin/bips/blob/master/bip-0084.mediawiki#extended-key-version
"""
from typing import Tuple

from xkeys.errors import BadVersionBytes
from xkeys.primitives import check_hint
from xkeys.primitives import Hint


class NetworkParams(object):
    """
    Immutable set of the six version constants of one network
    """

    __slots__ = (
        "name",
        "PRIV_VERSION",
        "BIP49_PRIV_VERSION",
        "BIP84_PRIV_VERSION",
        "PUB_VERSION",
        "BIP49_PUB_VERSION",
        "BIP84_PUB_VERSION",
    )

    def __init__(
        self,
        name: str,
        priv_version: int,
        bip49_priv_version: int,
        bip84_priv_version: int,
        pub_version: int,
        bip49_pub_version: int,
        bip84_pub_version: int,
    ):
        set_ = super().__setattr__
        set_("name", name)
        set_("PRIV_VERSION", priv_version)
        set_("BIP49_PRIV_VERSION", bip49_priv_version)
        set_("BIP84_PRIV_VERSION", bip84_priv_version)
        set_("PUB_VERSION", pub_version)
        set_("BIP49_PUB_VERSION", bip49_pub_version)
        set_("BIP84_PUB_VERSION", bip84_pub_version)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name!r})"

    def priv_version(self, hint: str) -> int:
        check_hint(hint)
        if hint == Hint.LEGACY:
            return self.PRIV_VERSION
        elif hint == Hint.COMPATIBILITY:
            return self.BIP49_PRIV_VERSION
        return self.BIP84_PRIV_VERSION

    def pub_version(self, hint: str) -> int:
        check_hint(hint)
        if hint == Hint.LEGACY:
            return self.PUB_VERSION
        elif hint == Hint.COMPATIBILITY:
            return self.BIP49_PUB_VERSION
        return self.BIP84_PUB_VERSION


MAIN = NetworkParams(
    "mainnet",
    priv_version=0x0488ADE4,  # xprv
    bip49_priv_version=0x049D7878,  # yprv
    bip84_priv_version=0x04B2430C,  # zprv
    pub_version=0x0488B21E,  # xpub
    bip49_pub_version=0x049D7CB2,  # ypub
    bip84_pub_version=0x04B24746,  # zpub
)

TEST = NetworkParams(
    "testnet",
    priv_version=0x04358394,  # tprv
    bip49_priv_version=0x044A4E28,  # uprv
    bip84_priv_version=0x045F18BC,  # vprv
    pub_version=0x043587CF,  # tpub
    bip49_pub_version=0x044A5262,  # upub
    bip84_pub_version=0x045F1CF6,  # vpub
)

# regtest shares testnet version bytes
NETWORKS = {"mainnet": MAIN, "testnet": TEST, "regtest": TEST}

VERSIONS = {}
for _params in (MAIN, TEST):
    for _hint in Hint.ALL:
        VERSIONS[_params.priv_version(_hint)] = (_params, _hint, True)
        VERSIONS[_params.pub_version(_hint)] = (_params, _hint, False)


def get_params(network: str) -> NetworkParams:
    try:
        return NETWORKS[network]
    except KeyError:
        raise ValueError(f"unrecognized network: {network}")


def lookup_version(version: int) -> Tuple[NetworkParams, str, bool]:
    """
    Inverse version lookup
    Args:
        version: int, 4-byte version prefix as big endian integer
    Returns:
        (params, hint, is_private)

    >>> lookup_version(0x04B24746)
    (NetworkParams('mainnet'), 'segwit', False)
    """
    try:
        return VERSIONS[version]
    except KeyError:
        raise BadVersionBytes(version.to_bytes(4, "big"))
