import pytest

from rsablind.errors import EncodingError, InvalidKeyMaterial
from rsablind.keys import (
    KeyPair,
    PrivateKey,
    PublicKey,
    bytes_to_int,
    int_to_bytes,
    string_to_int,
)


class TestBytesToInt:
    def test_high_bit_stays_positive(self):
        # a sign-aware reader would make these negative
        assert bytes_to_int(b"\x80") == 128
        assert bytes_to_int(b"\xff\xff") == 65535

    def test_big_endian(self):
        assert bytes_to_int(b"\x0c\xa1") == 3233

    def test_empty_is_zero(self):
        assert bytes_to_int(b"") == 0

    def test_accepts_bytearray(self):
        assert bytes_to_int(bytearray(b"\x01\x00")) == 256

    def test_rejects_text(self):
        with pytest.raises(EncodingError):
            bytes_to_int("\x01")


class TestIntToBytes:
    def test_minimal_encoding(self):
        assert int_to_bytes(3233) == b"\x0c\xa1"
        assert int_to_bytes(0) == b"\x00"

    def test_fixed_length(self):
        assert int_to_bytes(17, length=4) == b"\x00\x00\x00\x11"

    def test_too_short_length(self):
        with pytest.raises(EncodingError):
            int_to_bytes(65536, length=2)

    def test_negative(self):
        with pytest.raises(EncodingError):
            int_to_bytes(-1)

    def test_inverse_of_bytes_to_int(self):
        value = 0xFF00FF00FF00FF
        assert bytes_to_int(int_to_bytes(value)) == value


class TestStringToInt:
    def test_ascii(self):
        assert string_to_int("A") == 65
        assert string_to_int("AB") == 0x4142

    def test_utf8_multibyte(self):
        assert string_to_int("é") == 0xC3A9

    def test_deterministic(self):
        assert string_to_int("ballot #42") == string_to_int("ballot #42")

    def test_distinct_messages_distinct_integers(self):
        assert string_to_int("yes") != string_to_int("no")

    def test_unencodable_text(self):
        with pytest.raises(EncodingError):
            string_to_int("\ud800")

    def test_rejects_bytes(self):
        with pytest.raises(EncodingError):
            string_to_int(b"A")


class TestKeyMaterial:
    def test_public_key_from_bytes(self):
        key = PublicKey.from_bytes(b"\x0c\xa1", b"\x11")
        assert key == PublicKey(3233, 17)
        assert key.modulus_bytes == b"\x0c\xa1"
        assert key.exponent_bytes == b"\x11"
        assert key.size_in_bits == 12

    def test_high_bit_modulus_is_positive(self):
        key = PublicKey.from_bytes(b"\xff\x01", b"\x01\x00\x01")
        assert key.modulus == 0xFF01
        assert key.exponent == 65537

    def test_private_key_from_bytes(self):
        key = PrivateKey.from_bytes(b"\x0c\xa1", int_to_bytes(2753))
        assert key.exponent == 2753
        assert key.modulus_bytes == b"\x0c\xa1"
        assert key.exponent_bytes == b"\x0a\xc1"

    def test_private_repr_hides_exponent(self):
        assert "2753" not in repr(PrivateKey(3233, 2753))

    @pytest.mark.parametrize("modulus, exponent", [(1, 3), (0, 3), (3233, 0), (3233, -17)])
    def test_invalid_values(self, modulus, exponent):
        with pytest.raises(InvalidKeyMaterial):
            PublicKey(modulus, exponent)

    def test_non_int_values(self):
        with pytest.raises(InvalidKeyMaterial):
            PublicKey("3233", 17)

    def test_key_pair_moduli_must_match(self):
        with pytest.raises(InvalidKeyMaterial):
            KeyPair(PublicKey(3233, 17), PrivateKey(3237, 2753))

    def test_keys_are_immutable(self):
        key = PublicKey(3233, 17)
        with pytest.raises(AttributeError):
            key.modulus = 7
