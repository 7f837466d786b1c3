"""
rsa key material and the integer codecs used around it

keys are plain integers. on the wire rsa parameters travel as big-endian
unsigned byte strings, so the codec here always reads them as non-negative,
whatever the high bit of the first byte is.

hazard: a message representative that is >= n is reduced mod n by every
protocol operation. that loses information (two messages can collide) and is
the caller's problem, not something this module corrects.
"""

from dataclasses import dataclass
from typing import Optional

from rsablind.config import TEXT_ENCODING
from rsablind.errors import EncodingError, InvalidKeyMaterial


def bytes_to_int(data: bytes) -> int:
    """read a big-endian unsigned byte string; never negative"""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise EncodingError(f"expected bytes, got {type(data).__name__}")
    return int.from_bytes(bytes(data), byteorder='big', signed=False)


def int_to_bytes(value: int, length: Optional[int] = None) -> bytes:
    """
    minimal big-endian unsigned encoding of value

    zero encodes as a single zero byte. with length set, the result is
    left-padded to exactly that many bytes.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise EncodingError(f"expected int, got {type(value).__name__}")
    if value < 0:
        raise EncodingError("cannot encode a negative integer")
    if length is None:
        length = max(1, (value.bit_length() + 7) // 8)
    try:
        return value.to_bytes(length, byteorder='big', signed=False)
    except OverflowError as exc:
        raise EncodingError(f"value does not fit in {length} bytes") from exc


def string_to_int(message: str) -> int:
    """
    encode text as utf-8 and read the bytes as a big-endian integer

    deterministic and injective over byte strings that do not start with a
    zero byte. text starting with U+0000 maps to the same integer as the text
    without it.
    """
    if not isinstance(message, str):
        raise EncodingError(f"expected str, got {type(message).__name__}")
    try:
        data = message.encode(TEXT_ENCODING)
    except UnicodeEncodeError as exc:
        raise EncodingError(f"message is not encodable as {TEXT_ENCODING}") from exc
    return bytes_to_int(data)


def _check_key_values(modulus, exponent):
    for name, value in (("modulus", modulus), ("exponent", exponent)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidKeyMaterial(f"{name} must be an int")
    if modulus <= 1:
        raise InvalidKeyMaterial("modulus must be greater than 1")
    if exponent <= 0:
        raise InvalidKeyMaterial("exponent must be positive")


@dataclass(frozen=True)
class PublicKey:
    """rsa public key (n, e)"""
    modulus: int
    exponent: int

    def __post_init__(self):
        _check_key_values(self.modulus, self.exponent)

    @classmethod
    def from_bytes(cls, modulus: bytes, exponent: bytes) -> "PublicKey":
        return cls(bytes_to_int(modulus), bytes_to_int(exponent))

    @property
    def modulus_bytes(self) -> bytes:
        return int_to_bytes(self.modulus)

    @property
    def exponent_bytes(self) -> bytes:
        return int_to_bytes(self.exponent)

    @property
    def size_in_bits(self) -> int:
        return self.modulus.bit_length()


@dataclass(frozen=True)
class PrivateKey:
    """rsa private key (n, d); d stays out of repr"""
    modulus: int
    exponent: int

    def __post_init__(self):
        _check_key_values(self.modulus, self.exponent)

    def __repr__(self):
        return f"PrivateKey(modulus={self.modulus}, exponent=<hidden>)"

    @classmethod
    def from_bytes(cls, modulus: bytes, exponent: bytes) -> "PrivateKey":
        return cls(bytes_to_int(modulus), bytes_to_int(exponent))

    @property
    def modulus_bytes(self) -> bytes:
        return int_to_bytes(self.modulus)

    @property
    def exponent_bytes(self) -> bytes:
        return int_to_bytes(self.exponent)

    @property
    def size_in_bits(self) -> int:
        return self.modulus.bit_length()


@dataclass(frozen=True)
class KeyPair:
    """matching public and private halves of one rsa key"""
    public: PublicKey
    private: PrivateKey

    def __post_init__(self):
        if self.public.modulus != self.private.modulus:
            raise InvalidKeyMaterial("public and private key moduli differ")
