"""
Base58(check) encoding / decoding
https://en.bitcoin.it/wiki/Base58Check_encoding
"""
from typing import Union

from xkeys.crypto import hash256
from xkeys.errors import Base58DecodeError
from xkeys.errors import BadChecksum
from xkeys.errors import Bip32Error

BITCOIN_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BITCOIN_ALPHABET_MAP = {char: idx for idx, char in enumerate(BITCOIN_ALPHABET)}

CHECKSUM_LEN = 4


def base58encode(data: bytes) -> str:
    """
    Encode data in base58 format
    Args:
        data: bytes, data to encode
    Returns:
        base58 encoded data

    >>> base58encode(b"hello world")
    'StV1DL6CwTryKyV'
    """
    origlen = len(data)
    data = bytes(data).lstrip(b"\x00")
    zeros = origlen - len(data)

    encoded = ""
    integer = int.from_bytes(data, "big")
    while integer:
        integer, idx = divmod(integer, 58)
        encoded = BITCOIN_ALPHABET[idx] + encoded
    return BITCOIN_ALPHABET[0] * zeros + encoded


def base58decode(data: Union[str, bytes]) -> bytes:
    """
    Decode base58 encoded data
    Args:
        data: str or ascii bytes, data to decode
    Returns:
        decoded data

    >>> base58decode("StV1DL6CwTryKyV")
    b'hello world'
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            data = data.decode("ascii")
        except UnicodeDecodeError as err:
            raise Base58DecodeError("non-ascii input") from err
    origlen = len(data)
    data = data.lstrip(BITCOIN_ALPHABET[0])
    ones = origlen - len(data)

    result = 0
    for pos, char in enumerate(data):
        try:
            result = result * 58 + BITCOIN_ALPHABET_MAP[char]
        except KeyError:
            raise Base58DecodeError(
                f"invalid base58 character {char!r} at position {ones + pos}"
            )

    decoded = b""
    if result:
        decoded = result.to_bytes((result.bit_length() + 7) // 8, "big")
    return b"\x00" * ones + decoded


def checksum(payload: bytes) -> bytes:
    """
    First 4 bytes of HASH256(payload)
    """
    return hash256(payload)[:CHECKSUM_LEN]


def encode_b58_check(payload: bytes) -> str:
    """
    Encode data as base58check
    Args:
        payload: bytes, data to encode
    Returns:
        base58check encoded data

    >>> encode_b58_check(b"hello world")
    '3vQB7B6MrGQZaxCuFg4oh'
    """
    return base58encode(bytes(payload) + checksum(payload))


def decode_b58_check(data: Union[str, bytes]) -> bytes:
    """
    Decode base58check encoded data, verifying the trailing checksum
    Args:
        data: str, data to decode
    Returns:
        payload, without checksum

    >>> decode_b58_check("3vQB7B6MrGQZaxCuFg4oh")
    b'hello world'
    """
    decoded = base58decode(data)
    if len(decoded) < CHECKSUM_LEN:
        raise BadChecksum(f"decoded data too short for checksum: {len(decoded)} bytes")
    payload = decoded[:-CHECKSUM_LEN]
    if decoded[-CHECKSUM_LEN:] != checksum(payload):
        raise BadChecksum("invalid checksum")
    return payload


def is_base58check(data: Union[str, bytes]) -> bool:
    """
    Check if data is base58check encoded
    Args:
        data: str, data to check
    Returns:
        True if base58check encoded, else False

    >>> is_base58check("DthHcFYf2SzzprfBcpKfTG")
    True
    >>> is_base58check("2yGEbwRFyhPZZckJm")
    False
    """
    try:
        decode_b58_check(data)
        return True
    except Bip32Error:
        return False
