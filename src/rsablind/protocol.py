"""
rsa blind signatures (textbook, unpadded)

    requester                          signer
    ---------                          ------
    m' = m * r^e mod n   ---- m' --->
                         <--- s' ----  s' = m'^d mod n
    s  = s' * r^-1 mod n
    check s^e mod n == m

the signer never sees m or r, and s is an ordinary rsa signature on m.

no hashing or padding is applied to the message. textbook rsa is
multiplicatively malleable, so real deployments must encode the message with
a collision-resistant padding scheme before it gets here.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from rsablind.arith import mod_inverse, mod_pow
from rsablind.errors import MalformedInput
from rsablind.keygen import generate_key_pair
from rsablind.keys import KeyPair, PrivateKey, PublicKey, string_to_int
from rsablind.randomness import BlindingFactorGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlindedMessage:
    """blinded value for the signer plus the factor the requester keeps"""
    blinded: int
    factor: int

    def __repr__(self):
        return f"BlindedMessage(blinded={self.blinded}, factor=<hidden>)"


def _check_residue(name, value, modulus):
    if not isinstance(value, int) or isinstance(value, bool):
        raise MalformedInput(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value < modulus:
        raise MalformedInput(f"{name} must be in [0, n)")


def _warn_if_oversized(m, n):
    if m >= n:
        logger.warning(
            "message representative (%d bits) is not below the %d-bit modulus; "
            "it is reduced mod n and cannot be recovered",
            m.bit_length(), n.bit_length(),
        )


def blind_integer(m: int, public_key: PublicKey,
                  generator: Optional[BlindingFactorGenerator] = None) -> BlindedMessage:
    """blind a message representative: m' = m * r^e mod n"""
    if not isinstance(m, int) or isinstance(m, bool) or m < 0:
        raise MalformedInput("message representative must be a non-negative int")
    n, e = public_key.modulus, public_key.exponent
    _warn_if_oversized(m, n)

    if generator is None:
        generator = BlindingFactorGenerator()
    r = generator.generate(n)

    blinded = (m * mod_pow(r, e, n)) % n
    return BlindedMessage(blinded=blinded, factor=r)


def blind(message: str, public_key: PublicKey,
          generator: Optional[BlindingFactorGenerator] = None) -> BlindedMessage:
    """blind a text message under the signer's public key"""
    return blind_integer(string_to_int(message), public_key, generator)


def sign(blinded: int, private_key: PrivateKey) -> int:
    """
    signer side: s' = m'^d mod n

    m' is deliberately not inspected beyond the reduction mod n.
    """
    if not isinstance(blinded, int) or isinstance(blinded, bool):
        raise MalformedInput(f"blinded message must be an int, got {type(blinded).__name__}")
    return mod_pow(blinded, private_key.exponent, private_key.modulus)


def unblind(blind_signature: int, factor: int, public_key: PublicKey) -> int:
    """
    s = s' * r^-1 mod n

    raises NoModularInverse if the factor shares a divisor with n, which only
    happens with a corrupted or forged factor.
    """
    n = public_key.modulus
    _check_residue("blind signature", blind_signature, n)
    _check_residue("blinding factor", factor, n)
    return (blind_signature * mod_inverse(factor, n)) % n


def verify_integer(m: int, signature: int, public_key: PublicKey) -> bool:
    """check s^e mod n == m for a message representative"""
    if not isinstance(m, int) or isinstance(m, bool) or m < 0:
        raise MalformedInput("message representative must be a non-negative int")
    _check_residue("signature", signature, public_key.modulus)
    _warn_if_oversized(m, public_key.modulus)
    # both sides are public, a plain comparison is fine
    return mod_pow(signature, public_key.exponent, public_key.modulus) == m


def verify(message: str, signature: int, public_key: PublicKey) -> bool:
    """
    verify an unblinded signature on a text message

    returns False only for a signature that does not match; malformed input
    raises EncodingError or MalformedInput instead.
    """
    return verify_integer(string_to_int(message), signature, public_key)


class BlindSignatureIssuer:
    """signer-side blind signature operations"""

    def __init__(self, key_pair: Optional[KeyPair] = None, key_size=None):
        """use key_pair if given, else generate one (of key_size bits if set)"""
        if key_pair is None:
            key_pair = generate_key_pair() if key_size is None else generate_key_pair(key_size)
        self.key_pair = key_pair

    @property
    def public_key(self) -> PublicKey:
        return self.key_pair.public

    def sign_blinded_message(self, blinded_message_int):
        return sign(blinded_message_int, self.key_pair.private)


class BlindSignatureUser:
    """requester-side blind signature operations"""

    def __init__(self, signer_public_key: PublicKey,
                 generator: Optional[BlindingFactorGenerator] = None):
        self.public_key = signer_public_key
        self.generator = generator if generator is not None else BlindingFactorGenerator()

    def blind_message(self, message) -> BlindedMessage:
        """blind text, or an int message representative"""
        if isinstance(message, str):
            return blind(message, self.public_key, self.generator)
        return blind_integer(message, self.public_key, self.generator)

    def unblind_signature(self, blinded_signature, factor):
        return unblind(blinded_signature, factor, self.public_key)

    def verify_signature(self, message, signature):
        if isinstance(message, str):
            return verify(message, signature, self.public_key)
        return verify_integer(message, signature, self.public_key)
