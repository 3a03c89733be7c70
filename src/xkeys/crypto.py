import hashlib
import hmac

from Crypto.Hash import RIPEMD160


def ripemd160(msg: bytes) -> bytes:
    try:
        return hashlib.new("ripemd160", msg).digest()
    except ValueError:
        # OpenSSL 3 builds without the legacy provider
        return RIPEMD160.new(msg).digest()


def hash160(msg: bytes) -> bytes:
    return ripemd160(hashlib.sha256(msg).digest())


def sha256(msg: bytes) -> bytes:
    return hashlib.sha256(msg).digest()


def hash256(msg: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(msg).digest()).digest()


def hmac_sha512(key: bytes, msg: bytes) -> bytes:
    return hmac.new(key, msg, digestmod=hashlib.sha512).digest()
