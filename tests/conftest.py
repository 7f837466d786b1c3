import pytest

from rsablind.keygen import generate_key_pair
from rsablind.keys import KeyPair, PrivateKey, PublicKey

# textbook example: p = 61, q = 53
TOY_N = 3233
TOY_E = 17
TOY_D = 2753


class FixedRandomSource:
    """hands out a scripted sequence of byte strings, then repeats the last one"""

    def __init__(self, *outputs):
        self.outputs = list(outputs)
        self.calls = 0

    def random_bytes(self, n):
        index = min(self.calls, len(self.outputs) - 1)
        self.calls += 1
        data = self.outputs[index]
        assert len(data) == n, f"scripted output has {len(data)} bytes, sampler asked for {n}"
        return data


@pytest.fixture
def toy_keys():
    return KeyPair(PublicKey(TOY_N, TOY_E), PrivateKey(TOY_N, TOY_D))


@pytest.fixture(scope="session")
def keypair():
    return generate_key_pair(2048)
