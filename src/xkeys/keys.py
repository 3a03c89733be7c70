"""
Key values bound to an optional curve backend
"""
from typing import Optional

from xkeys.backend import Privkey
from xkeys.backend import Pubkey
from xkeys.backend import Secp256k1Backend
from xkeys.errors import NoBackend


class _BackendBound(object):
    """
    backend is a shared, non-owning handle; it is never compared or copied
    """

    backend: Optional[Secp256k1Backend]

    def require_backend(self) -> Secp256k1Backend:
        if self.backend is None:
            raise NoBackend("operation requires a curve backend, key has none")
        return self.backend


class GenericPrivkey(_BackendBound):
    def __init__(self, key: Privkey, backend: Optional[Secp256k1Backend] = None):
        self.key = key
        self.backend = backend

    def privkey_bytes(self) -> bytes:
        return self.key.privkey_array()

    def derive_pubkey(self) -> "GenericPubkey":
        backend = self.require_backend()
        return GenericPubkey(backend.derive_pubkey(self.key), backend=backend)

    def __eq__(self, other):
        if not isinstance(other, GenericPrivkey):
            return NotImplemented
        return self.privkey_bytes() == other.privkey_bytes()

    def __repr__(self):
        return f"{self.__class__.__name__}(...)"


class GenericPubkey(_BackendBound):
    def __init__(self, key: Pubkey, backend: Optional[Secp256k1Backend] = None):
        self.key = key
        self.backend = backend

    def pubkey_bytes(self) -> bytes:
        return self.key.pubkey_array()

    def __eq__(self, other):
        if not isinstance(other, GenericPubkey):
            return NotImplemented
        return self.pubkey_bytes() == other.pubkey_bytes()

    def __repr__(self):
        return f"{self.__class__.__name__}({self.pubkey_bytes().hex()})"
