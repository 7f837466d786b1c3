"""
blinding factor generation

a blinding factor r must satisfy 2 <= r < n and gcd(r, n) == 1. it is drawn
by rejection sampling from an injected random source so tests can swap in a
fixed-output source. the factor is secret: it is never logged.
"""

import logging
import secrets
from typing import Optional, Protocol

from rsablind.arith import gcd
from rsablind.config import MAX_SAMPLING_ATTEMPTS
from rsablind.errors import MalformedInput, RandomGenerationExhausted

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """anything that hands out unpredictable bytes"""

    def random_bytes(self, n: int) -> bytes:
        ...


class SystemRandomSource:
    """os csprng via the secrets module"""

    def random_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


class BlindingFactorGenerator:
    """draws blinding factors for a modulus with a bounded retry budget"""

    def __init__(self, source: Optional[RandomSource] = None,
                 max_attempts: int = MAX_SAMPLING_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.source = source if source is not None else SystemRandomSource()
        self.max_attempts = max_attempts

    def generate(self, modulus: int) -> int:
        """
        return r with 2 <= r < modulus and gcd(r, modulus) == 1

        each candidate is as many bytes as the modulus, with the bits above
        the modulus' bit length cleared so it stays non-negative and at most
        one bit longer than needed. raises RandomGenerationExhausted after
        max_attempts rejected candidates.
        """
        if not isinstance(modulus, int) or modulus <= 2:
            raise MalformedInput("modulus must be an int greater than 2")

        bits = modulus.bit_length()
        byte_length = (bits + 7) // 8
        mask = (1 << bits) - 1

        for attempt in range(1, self.max_attempts + 1):
            data = self.source.random_bytes(byte_length)
            if len(data) != byte_length:
                raise RuntimeError(
                    f"random source returned {len(data)} bytes, wanted {byte_length}"
                )
            r = int.from_bytes(data, 'big') & mask
            if 2 <= r < modulus and gcd(r, modulus) == 1:
                logger.debug("blinding factor accepted after %d attempt(s)", attempt)
                return r

        raise RandomGenerationExhausted(self.max_attempts)


def generate_blinding_factor(modulus, source=None, max_attempts=MAX_SAMPLING_ATTEMPTS):
    """one-shot helper around BlindingFactorGenerator"""
    return BlindingFactorGenerator(source, max_attempts).generate(modulus)
