"""
secp256k1 backend on top of the ecdsa library
"""
from ecdsa import SECP256k1
from ecdsa import SigningKey
from ecdsa import VerifyingKey
from ecdsa.ellipticcurve import INFINITY
from ecdsa.errors import MalformedPointError
from ecdsa.numbertheory import Error as NumberTheoryError

from xkeys import backend
from xkeys.errors import BackendError

SECP256K1_N = SECP256k1.order


def _check_len(buf: bytes, length: int, what: str):
    if len(buf) != length:
        raise BackendError(f"{what} must be {length} bytes, got {len(buf)}")


def _tweak_int(tweak: bytes) -> int:
    _check_len(tweak, 32, "tweak")
    t = int.from_bytes(tweak, "big")
    if t >= SECP256K1_N:
        raise BackendError("tweak not below curve order")
    return t


class Privkey(backend.Privkey):
    def __init__(self, signing_key: SigningKey):
        self.signing_key = signing_key

    @classmethod
    def from_privkey_array(cls, buf: bytes) -> "Privkey":
        _check_len(buf, backend.PRIVKEY_LEN, "private key")
        try:
            return cls(SigningKey.from_string(bytes(buf), curve=SECP256k1))
        except MalformedPointError as err:
            raise BackendError(f"invalid private key: {err}") from err

    def privkey_array(self) -> bytes:
        return self.signing_key.to_string()

    def secret_exponent(self) -> int:
        return self.signing_key.privkey.secret_multiplier


class Pubkey(backend.Pubkey):
    def __init__(self, verifying_key: VerifyingKey):
        self.verifying_key = verifying_key

    @classmethod
    def from_pubkey_array(cls, buf: bytes) -> "Pubkey":
        _check_len(buf, backend.PUBKEY_LEN, "public key")
        if buf[0] not in (2, 3):
            raise BackendError(f"invalid compressed pubkey prefix: {buf[0]:#04x}")
        try:
            return cls(VerifyingKey.from_string(bytes(buf), curve=SECP256k1))
        except (MalformedPointError, NumberTheoryError) as err:
            raise BackendError(f"invalid public key: {err}") from err

    def pubkey_array(self) -> bytes:
        return self.verifying_key.to_string("compressed")


class Secp256k1(backend.Secp256k1Backend):
    Privkey = Privkey
    Pubkey = Pubkey

    def derive_pubkey(self, privkey: Privkey) -> Pubkey:
        return Pubkey(privkey.signing_key.get_verifying_key())

    def tweak_add_privkey(self, privkey: Privkey, tweak: bytes) -> Privkey:
        k = (_tweak_int(tweak) + privkey.secret_exponent()) % SECP256K1_N
        if k == 0:
            raise BackendError("tweaked private key is zero")
        return Privkey(SigningKey.from_secret_exponent(k, curve=SECP256k1))

    def tweak_add_pubkey(self, pubkey: Pubkey, tweak: bytes) -> Pubkey:
        t = _tweak_int(tweak)
        point = pubkey.verifying_key.pubkey.point + SECP256k1.generator * t
        if point == INFINITY:
            raise BackendError("tweaked public key is the point at infinity")
        return Pubkey(VerifyingKey.from_public_point(point, curve=SECP256k1))
