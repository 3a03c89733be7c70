"""
Curve backend contract

The codec never touches curve math. It needs key classes that can be
built from, and serialized to, fixed-size byte arrays:

    Privkey.from_privkey_array(32 bytes) / privkey.privkey_array()
    Pubkey.from_pubkey_array(33 bytes)   / pubkey.pubkey_array()

Parsing is class-level so that keys can be decoded with no backend
instance at all. Curve math (used for derivation) lives on the
Secp256k1Backend instance.
"""

PRIVKEY_LEN = 32
PUBKEY_LEN = 33


class Privkey(object):
    """
    32-byte private scalar
    """

    @classmethod
    def from_privkey_array(cls, buf: bytes) -> "Privkey":
        """
        Raises:
            BackendError, scalar is zero or not below the curve order
        """
        raise NotImplementedError

    def privkey_array(self) -> bytes:
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, Privkey):
            return NotImplemented
        return self.privkey_array() == other.privkey_array()

    def __repr__(self):
        # never print key material
        return f"{self.__class__.__name__}(...)"


class Pubkey(object):
    """
    33-byte SEC1 compressed point
    """

    @classmethod
    def from_pubkey_array(cls, buf: bytes) -> "Pubkey":
        """
        Raises:
            BackendError, bad prefix or point not on the curve
        """
        raise NotImplementedError

    def pubkey_array(self) -> bytes:
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, Pubkey):
            return NotImplemented
        return self.pubkey_array() == other.pubkey_array()

    def __repr__(self):
        return f"{self.__class__.__name__}({self.pubkey_array().hex()})"


class Secp256k1Backend(object):
    """
    Curve backend

    Subclasses set Privkey and Pubkey to their concrete key classes
    and implement the arithmetic below.
    """

    Privkey = Privkey
    Pubkey = Pubkey

    @classmethod
    def privkey_from_array(cls, buf: bytes) -> Privkey:
        return cls.Privkey.from_privkey_array(buf)

    @classmethod
    def pubkey_from_array(cls, buf: bytes) -> Pubkey:
        return cls.Pubkey.from_pubkey_array(buf)

    def derive_pubkey(self, privkey: Privkey) -> Pubkey:
        """
        privkey * G
        """
        raise NotImplementedError

    def tweak_add_privkey(self, privkey: Privkey, tweak: bytes) -> Privkey:
        """
        (privkey + tweak) mod n
        """
        raise NotImplementedError

    def tweak_add_pubkey(self, pubkey: Pubkey, tweak: bytes) -> Pubkey:
        """
        pubkey + tweak * G
        """
        raise NotImplementedError
