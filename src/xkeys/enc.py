"""
BIP32 / BIP49 / BIP84 extended key serialization

Extended private key, 78 bytes:
    version (4, big endian) | depth (1) | parent fingerprint (4) |
    child index (4, big endian) | chain code (32) | 0x00 | private key (32)

Extended public key, 78 bytes:
    version (4, big endian) | depth (1) | parent fingerprint (4) |
    child index (4, big endian) | chain code (32) | compressed public key (33)

The base58check form appends a 4 byte HASH256 checksum before encoding.

Encoders are classes; every operation is a classmethod, e.g.

>>> xprv = MainnetEncoder.xpriv_from_base58(
...     "xprv9s21ZrQH143K3QTDL4LXw2F7HEK3wJUD2nW2nRk4stbPy6cq3jPPqjiChkVvvNKmPGJxWUtg6LnF5kejMRNNU3TGtRBeJgk33yuGBxrMPHi"
... )
>>> xprv.depth, xprv.index, xprv.hint
(0, 0, 'legacy')
"""
import io
import logging
from typing import BinaryIO
from typing import Optional
from typing import Type
from typing import Union

from xkeys.backend import Secp256k1Backend
from xkeys.base58 import decode_b58_check
from xkeys.base58 import encode_b58_check
from xkeys.config import config
from xkeys.errors import BadPadding
from xkeys.errors import BadXPrivVersionBytes
from xkeys.errors import BadXPubVersionBytes
from xkeys.errors import NoBackend
from xkeys.errors import TrailingData
from xkeys.errors import TruncatedData
from xkeys.hd import GenericXPriv
from xkeys.hd import GenericXPub
from xkeys.hd import XKey
from xkeys.keys import GenericPrivkey
from xkeys.keys import GenericPubkey
from xkeys.params import get_params
from xkeys.params import lookup_version
from xkeys.params import MAIN
from xkeys.params import NetworkParams
from xkeys.params import TEST
from xkeys.primitives import ChainCode
from xkeys.primitives import Hint
from xkeys.primitives import KeyFingerprint
from xkeys.primitives import XKeyInfo
from xkeys.secp256k1 import Secp256k1

log = logging.getLogger(__name__)

XKEY_LEN = 78
KEY_DETAILS_LEN = 41

Readable = Union[bytes, bytearray, memoryview, BinaryIO]


def read_exact(reader: BinaryIO, length: int) -> bytes:
    data = reader.read(length)
    if len(data) != length:
        raise TruncatedData(length, len(data))
    return data


class _Source(object):
    """
    Wraps bytes-like input in a stream; whole buffers must be consumed exactly
    """

    def __init__(self, data: Readable):
        if isinstance(data, (bytes, bytearray, memoryview)):
            self.reader = io.BytesIO(bytes(data))
            self.whole = True
        else:
            self.reader = data
            self.whole = False

    def __enter__(self) -> BinaryIO:
        return self.reader

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None and self.whole:
            extra = len(self.reader.read())
            if extra:
                raise TrailingData(extra)
        return False


class XKeyEncoder(object):
    """
    Network agnostic reading and writing of extended keys

    Subclasses provide version byte selection via write_xpriv, write_xpub,
    read_xpriv and read_xpub.

    Attributes:
        backend_cls: Secp256k1Backend subclass used to parse keys when no
            backend instance is supplied
    """

    backend_cls: Optional[Type[Secp256k1Backend]] = None

    @classmethod
    def _parser(cls, backend: Optional[Secp256k1Backend]) -> Type[Secp256k1Backend]:
        if backend is not None:
            return type(backend)
        if cls.backend_cls is None:
            raise NoBackend(f"{cls.__name__} has no backend_cls and no backend was given")
        return cls.backend_cls

    @classmethod
    def write_key_details(cls, key: XKey) -> bytes:
        """
        depth | parent fingerprint | child index | chain code, 41 bytes
        """
        return (
            key.depth.to_bytes(1, "big")
            + bytes(key.parent)
            + key.index.to_bytes(4, "big")
            + bytes(key.chain_code)
        )

    @classmethod
    def write_xpriv(cls, key: GenericXPriv) -> bytes:
        raise NotImplementedError

    @classmethod
    def write_xpub(cls, key: GenericXPub) -> bytes:
        raise NotImplementedError

    @classmethod
    def read_xpriv(
        cls, data: Readable, backend: Optional[Secp256k1Backend] = None
    ) -> GenericXPriv:
        raise NotImplementedError

    @classmethod
    def read_xpub(
        cls, data: Readable, backend: Optional[Secp256k1Backend] = None
    ) -> GenericXPub:
        raise NotImplementedError

    @classmethod
    def read_version(cls, reader: BinaryIO) -> bytes:
        return read_exact(reader, 4)

    @classmethod
    def read_depth(cls, reader: BinaryIO) -> int:
        return read_exact(reader, 1)[0]

    @classmethod
    def read_parent(cls, reader: BinaryIO) -> KeyFingerprint:
        return KeyFingerprint(read_exact(reader, 4))

    @classmethod
    def read_index(cls, reader: BinaryIO) -> int:
        return int.from_bytes(read_exact(reader, 4), "big")

    @classmethod
    def read_chain_code(cls, reader: BinaryIO) -> ChainCode:
        return ChainCode(read_exact(reader, 32))

    @classmethod
    def read_info(cls, reader: BinaryIO, hint: str) -> XKeyInfo:
        # depth is not cross-checked against parent / index
        depth = cls.read_depth(reader)
        parent = cls.read_parent(reader)
        index = cls.read_index(reader)
        chain_code = cls.read_chain_code(reader)
        return XKeyInfo(depth, parent, index, chain_code, hint=hint)

    @classmethod
    def read_xpriv_body(
        cls,
        reader: BinaryIO,
        hint: str,
        backend: Optional[Secp256k1Backend] = None,
    ) -> GenericXPriv:
        """
        Read everything after the version bytes of an extended private key
        """
        parser = cls._parser(backend)
        info = cls.read_info(reader, hint)
        padding = read_exact(reader, 1)[0]
        if padding != 0:
            raise BadPadding(padding)
        key = parser.privkey_from_array(read_exact(reader, 32))
        return GenericXPriv(info, GenericPrivkey(key, backend))

    @classmethod
    def read_xpub_body(
        cls,
        reader: BinaryIO,
        hint: str,
        backend: Optional[Secp256k1Backend] = None,
    ) -> GenericXPub:
        """
        Read everything after the version bytes of an extended public key
        """
        parser = cls._parser(backend)
        info = cls.read_info(reader, hint)
        key = parser.pubkey_from_array(read_exact(reader, 33))
        return GenericXPub(info, GenericPubkey(key, backend))

    @classmethod
    def read_xpriv_without_network(
        cls, data: Readable, backend: Optional[Secp256k1Backend] = None
    ) -> GenericXPriv:
        """
        UNSAFE: read an extended private key of any network or purpose

        The version bytes are read and discarded, hint defaults to legacy.
        Callers accept keys declared for another network.
        """
        with _Source(data) as reader:
            version = cls.read_version(reader)
            log.debug(f"ignoring xpriv version bytes {version.hex()}")
            return cls.read_xpriv_body(reader, Hint.LEGACY, backend)

    @classmethod
    def read_xpub_without_network(
        cls, data: Readable, backend: Optional[Secp256k1Backend] = None
    ) -> GenericXPub:
        """
        UNSAFE: read an extended public key of any network or purpose

        The version bytes are read and discarded, hint defaults to legacy.
        Callers accept keys declared for another network.
        """
        with _Source(data) as reader:
            version = cls.read_version(reader)
            log.debug(f"ignoring xpub version bytes {version.hex()}")
            return cls.read_xpub_body(reader, Hint.LEGACY, backend)

    @classmethod
    def xpriv_to_base58(cls, key: GenericXPriv) -> str:
        return encode_b58_check(cls.write_xpriv(key))

    @classmethod
    def xpub_to_base58(cls, key: GenericXPub) -> str:
        return encode_b58_check(cls.write_xpub(key))

    @classmethod
    def xpriv_from_base58(
        cls, s: str, backend: Optional[Secp256k1Backend] = None
    ) -> GenericXPriv:
        return cls.read_xpriv(decode_b58_check(s), backend=backend)

    @classmethod
    def xpub_from_base58(
        cls, s: str, backend: Optional[Secp256k1Backend] = None
    ) -> GenericXPub:
        return cls.read_xpub(decode_b58_check(s), backend=backend)


class BitcoinEncoder(XKeyEncoder):
    """
    Encoder parameterized by a NetworkParams, set as the params class attribute
    """

    params: Optional[NetworkParams] = None

    @classmethod
    def write_xpriv(cls, key: GenericXPriv) -> bytes:
        version = cls.params.priv_version(key.hint)
        return (
            version.to_bytes(4, "big")
            + cls.write_key_details(key)
            + b"\x00"
            + key.privkey_bytes()
        )

    @classmethod
    def write_xpub(cls, key: GenericXPub) -> bytes:
        version = cls.params.pub_version(key.hint)
        return version.to_bytes(4, "big") + cls.write_key_details(key) + key.pubkey_bytes()

    @classmethod
    def read_xpriv(
        cls, data: Readable, backend: Optional[Secp256k1Backend] = None
    ) -> GenericXPriv:
        """
        Read extended private key, version bytes must belong to cls.params
        Args:
            data: bytes or binary stream
            backend: Optional[Secp256k1Backend], bound to the resulting key
        """
        params = cls.params
        with _Source(data) as reader:
            buf = cls.read_version(reader)
            version = int.from_bytes(buf, "big")
            # first match wins
            if version == params.PRIV_VERSION:
                hint = Hint.LEGACY
            elif version == params.BIP49_PRIV_VERSION:
                hint = Hint.COMPATIBILITY
            elif version == params.BIP84_PRIV_VERSION:
                hint = Hint.SEGWIT
            else:
                raise BadXPrivVersionBytes(buf)
            log.trace(f"reading {params.name} {hint} xpriv")
            return cls.read_xpriv_body(reader, hint, backend)

    @classmethod
    def read_xpub(
        cls, data: Readable, backend: Optional[Secp256k1Backend] = None
    ) -> GenericXPub:
        """
        Read extended public key, version bytes must belong to cls.params
        Args:
            data: bytes or binary stream
            backend: Optional[Secp256k1Backend], bound to the resulting key
        """
        params = cls.params
        with _Source(data) as reader:
            buf = cls.read_version(reader)
            version = int.from_bytes(buf, "big")
            if version == params.PUB_VERSION:
                hint = Hint.LEGACY
            elif version == params.BIP49_PUB_VERSION:
                hint = Hint.COMPATIBILITY
            elif version == params.BIP84_PUB_VERSION:
                hint = Hint.SEGWIT
            else:
                raise BadXPubVersionBytes(buf)
            log.trace(f"reading {params.name} {hint} xpub")
            return cls.read_xpub_body(reader, hint, backend)


class MainnetEncoder(BitcoinEncoder):
    params = MAIN
    backend_cls = Secp256k1


class TestnetEncoder(BitcoinEncoder):
    params = TEST
    backend_cls = Secp256k1


ENCODERS = {"mainnet": MainnetEncoder, "testnet": TestnetEncoder, "regtest": TestnetEncoder}


def get_encoder(network: Optional[str] = None) -> Type[BitcoinEncoder]:
    """
    Args:
        network: str, mainnet, testnet or regtest; defaults to config.network
    """
    if network is None:
        network = config.network
    get_params(network)  # validation
    return ENCODERS[network]


def xkey_from_base58(
    s: str, backend: Optional[Secp256k1Backend] = None
) -> Union[GenericXPriv, GenericXPub]:
    """
    Read an extended key of any known network, purpose and type

    Network and key type are looked up from the version bytes.
    """
    data = decode_b58_check(s)
    if len(data) < 4:
        raise TruncatedData(4, len(data))
    params, _, is_private = lookup_version(int.from_bytes(data[:4], "big"))
    encoder = get_encoder(params.name)
    if is_private:
        return encoder.read_xpriv(data, backend=backend)
    return encoder.read_xpub(data, backend=backend)
