"""
Extended keys and child key derivation
https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki#child-key-derivation-ckd-functions
"""
import logging
from typing import Iterable
from typing import Optional
from typing import Type
from typing import Union

from xkeys.backend import Secp256k1Backend
from xkeys.config import config
from xkeys.crypto import hash160
from xkeys.crypto import hmac_sha512
from xkeys.errors import BadSeedLength
from xkeys.errors import HardenedDerivation
from xkeys.errors import NoBackend
from xkeys.keys import GenericPrivkey
from xkeys.keys import GenericPubkey
from xkeys.path import to_indices
from xkeys.primitives import ChainCode
from xkeys.primitives import HARDENED_OFFSET
from xkeys.primitives import KeyFingerprint
from xkeys.primitives import XKeyInfo

log = logging.getLogger(__name__)

MASTER_KEY_HMAC_KEY = b"Bitcoin seed"
MIN_SEED_LEN = 16
MAX_SEED_LEN = 64


def ser_32(i: int) -> bytes:
    """
    Serialize i as 32 bits big endian
    """
    return i.to_bytes(4, "big")


def fingerprint_of(pubkey_bytes: bytes) -> KeyFingerprint:
    return KeyFingerprint(hash160(pubkey_bytes)[:4])


class XKey(object):
    """
    Accessors shared by extended private and public keys
    """

    info: XKeyInfo

    @property
    def depth(self) -> int:
        return self.info.depth

    @property
    def parent(self) -> KeyFingerprint:
        return self.info.parent

    @property
    def index(self) -> int:
        return self.info.index

    @property
    def chain_code(self) -> ChainCode:
        return self.info.chain_code

    @property
    def hint(self) -> str:
        return self.info.hint

    def _child_info(self, index: int, chain_code: bytes) -> XKeyInfo:
        return XKeyInfo(
            self.depth + 1,
            self.fingerprint(),
            index,
            chain_code,
            hint=self.hint,
        )

    def fingerprint(self) -> KeyFingerprint:
        raise NotImplementedError

    def derive_child(self, index: int) -> "XKey":
        raise NotImplementedError

    def derive_path(self, path: Union[str, Iterable[int]]) -> "XKey":
        """
        Derive descendant along path
        Args:
            path: str in shortened notation, e.g. m/44'/0'/0'/0/0,
                or iterable of indices
        """
        key = self
        for index in to_indices(path):
            key = key.derive_child(index)
        return key


class GenericXPriv(XKey):
    """
    Extended private key

    Args:
        info: XKeyInfo
        privkey: GenericPrivkey, key and optional backend
    """

    def __init__(self, info: XKeyInfo, privkey: GenericPrivkey):
        self.info = info
        self.privkey = privkey

    @property
    def backend(self) -> Optional[Secp256k1Backend]:
        return self.privkey.backend

    def privkey_bytes(self) -> bytes:
        return self.privkey.privkey_bytes()

    @classmethod
    def root_from_seed(
        cls,
        seed: bytes,
        hint: Optional[str] = None,
        backend: Optional[Secp256k1Backend] = None,
        backend_cls: Optional[Type[Secp256k1Backend]] = None,
    ) -> "GenericXPriv":
        """
        Master key generation
        https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki#master-key-generation

        Args:
            seed: bytes, between 128 and 512 bits
            hint: Optional[str], serialization variant of the resulting key,
                defaults to config.hint
            backend: Optional[Secp256k1Backend], attached to the key
            backend_cls: parser class, used when backend is None
        """
        if hint is None:
            hint = config.hint
        if len(seed) < MIN_SEED_LEN or len(seed) > MAX_SEED_LEN:
            raise BadSeedLength(
                f"seed must be {MIN_SEED_LEN} to {MAX_SEED_LEN} bytes, got {len(seed)}"
            )
        if backend is not None:
            backend_cls = type(backend)
        if backend_cls is None:
            raise NoBackend("root_from_seed requires a backend or backend_cls")
        I = hmac_sha512(MASTER_KEY_HMAC_KEY, seed)
        key = backend_cls.privkey_from_array(I[:32])
        return cls(XKeyInfo.root(I[32:], hint=hint), GenericPrivkey(key, backend))

    def to_xpub(self) -> "GenericXPub":
        """
        N(), the extended public key with identical metadata
        """
        info = XKeyInfo(
            self.depth, self.parent, self.index, self.chain_code, hint=self.hint
        )
        return GenericXPub(info, self.privkey.derive_pubkey())

    def fingerprint(self) -> KeyFingerprint:
        return fingerprint_of(self.privkey.derive_pubkey().pubkey_bytes())

    def derive_child(self, index: int) -> "GenericXPriv":
        """
        CKDpriv, private parent to private child
        """
        backend = self.privkey.require_backend()
        if index >= HARDENED_OFFSET:
            msg = b"\x00" + self.privkey_bytes() + ser_32(index)
        else:
            msg = self.privkey.derive_pubkey().pubkey_bytes() + ser_32(index)
        I = hmac_sha512(self.chain_code, msg)
        key = backend.tweak_add_privkey(self.privkey.key, I[:32])
        log.trace(f"derived private child {index} at depth {self.depth + 1}")
        return GenericXPriv(
            self._child_info(index, I[32:]), GenericPrivkey(key, backend)
        )

    def __eq__(self, other):
        if not isinstance(other, GenericXPriv):
            return NotImplemented
        return self.info == other.info and self.privkey == other.privkey

    def __repr__(self):
        return f"{self.__class__.__name__}({self.info!r})"


class GenericXPub(XKey):
    """
    Extended public key

    Args:
        info: XKeyInfo
        pubkey: GenericPubkey, key and optional backend
    """

    def __init__(self, info: XKeyInfo, pubkey: GenericPubkey):
        self.info = info
        self.pubkey = pubkey

    @property
    def backend(self) -> Optional[Secp256k1Backend]:
        return self.pubkey.backend

    def pubkey_bytes(self) -> bytes:
        return self.pubkey.pubkey_bytes()

    def fingerprint(self) -> KeyFingerprint:
        return fingerprint_of(self.pubkey_bytes())

    def derive_child(self, index: int) -> "GenericXPub":
        """
        CKDpub, public parent to public child. Not defined for hardened children
        """
        if index >= HARDENED_OFFSET:
            raise HardenedDerivation(
                f"cannot derive hardened child {index} from a public key"
            )
        backend = self.pubkey.require_backend()
        I = hmac_sha512(self.chain_code, self.pubkey_bytes() + ser_32(index))
        key = backend.tweak_add_pubkey(self.pubkey.key, I[:32])
        log.trace(f"derived public child {index} at depth {self.depth + 1}")
        return GenericXPub(self._child_info(index, I[32:]), GenericPubkey(key, backend))

    def __eq__(self, other):
        if not isinstance(other, GenericXPub):
            return NotImplemented
        return self.info == other.info and self.pubkey == other.pubkey

    def __repr__(self):
        return (
            f"{self.__class__.__name__}({self.info!r}, pubkey={self.pubkey_bytes().hex()})"
        )
