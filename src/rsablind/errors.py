"""
exceptions raised by the blind signature core

every failure is surfaced to the caller as one of these; nothing is swallowed
or turned into a default value.
"""


class BlindSignatureError(Exception):
    """base class for all rsablind errors"""


class InvalidKeySize(BlindSignatureError, ValueError):
    """requested key size is below the minimum safe bit length, or refused by the backend"""

    def __init__(self, key_size, minimum, reason=None):
        if reason is None:
            reason = f"below the minimum of {minimum} bits"
        super().__init__(f"key size {key_size} rejected: {reason}")
        self.reason = reason
        self.key_size = key_size
        self.minimum = minimum


class RandomGenerationExhausted(BlindSignatureError, RuntimeError):
    """blinding factor sampling ran out of attempts"""

    def __init__(self, attempts):
        super().__init__(f"no valid blinding factor found after {attempts} attempts")
        self.attempts = attempts


class NoModularInverse(BlindSignatureError, ArithmeticError):
    """value is not coprime with the modulus"""

    def __init__(self, modulus):
        # the value itself stays out of the message, it may be a blinding factor
        super().__init__(f"value has no inverse modulo {modulus}")
        self.modulus = modulus


class EncodingError(BlindSignatureError, ValueError):
    """text or bytes could not be converted to an integer"""


class InvalidKeyMaterial(BlindSignatureError, ValueError):
    """key values violate the rsa key invariants"""


class MalformedInput(BlindSignatureError, ValueError):
    """protocol input is not a usable integer for the given key"""
