"""Tunables for key generation, blinding and message encoding."""

# key generation
MIN_KEY_SIZE = 1024
RECOMMENDED_KEY_SIZE = 2048
DEFAULT_PUBLIC_EXPONENT = 65537

# blinding factor rejection sampling
MAX_SAMPLING_ATTEMPTS = 1000

# message representatives
TEXT_ENCODING = "utf-8"
