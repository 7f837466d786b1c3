"""
rsa key pair generation

prime generation is delegated to the cryptography package; this module only
checks the requested size and pulls (n, e, d) out of the generated key.
"""

import logging

from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.backends import default_backend

from rsablind.config import DEFAULT_PUBLIC_EXPONENT, MIN_KEY_SIZE, RECOMMENDED_KEY_SIZE
from rsablind.errors import InvalidKeySize
from rsablind.keys import KeyPair, PrivateKey, PublicKey

logger = logging.getLogger(__name__)


def key_pair_from_private_key(private_key: rsa.RSAPrivateKey) -> KeyPair:
    """adapt a cryptography rsa private key into a KeyPair"""
    numbers = private_key.private_numbers()
    public_numbers = numbers.public_numbers
    return KeyPair(
        public=PublicKey(public_numbers.n, public_numbers.e),
        private=PrivateKey(public_numbers.n, numbers.d),
    )


def generate_key_pair(key_size: int = RECOMMENDED_KEY_SIZE,
                      public_exponent: int = DEFAULT_PUBLIC_EXPONENT) -> KeyPair:
    """
    generate a fresh rsa key pair of key_size bits

    raises InvalidKeySize below MIN_KEY_SIZE, or when the backend refuses the
    size/exponent combination.
    """
    if not isinstance(key_size, int) or key_size < MIN_KEY_SIZE:
        raise InvalidKeySize(key_size, MIN_KEY_SIZE)
    if key_size < RECOMMENDED_KEY_SIZE:
        logger.warning(
            "generating %d-bit key, %d bits or more is recommended",
            key_size, RECOMMENDED_KEY_SIZE,
        )

    logger.debug("generating %d-bit rsa key pair", key_size)
    try:
        private_key = rsa.generate_private_key(
            public_exponent=public_exponent,
            key_size=key_size,
            backend=default_backend()
        )
    except ValueError as exc:
        raise InvalidKeySize(key_size, MIN_KEY_SIZE, reason=str(exc)) from exc

    key_pair = key_pair_from_private_key(private_key)
    logger.debug("generated key pair with %d-bit modulus", key_pair.public.size_in_bits)
    return key_pair
