import pytest
from hypothesis import given
from hypothesis import strategies as st

from geohash.base32 import BASE32, GEOHASH_ALPHABET, Encoding


def test_decode_known_value():
    assert BASE32.decode("ezs42") == 0xDFE082


def test_encode_known_value():
    assert BASE32.encode(0xDFE082) == "0000000ezs42"


def test_encode_bytes_known_value():
    assert BASE32.encode_bytes(0xDFE082) == b"0000000ezs42"


def test_decode_accepts_bytes():
    assert BASE32.decode(b"ezs42") == 0xDFE082


def test_valid_byte():
    assert BASE32.valid_byte(ord("b"))
    assert BASE32.valid_byte(ord("z"))
    assert not BASE32.valid_byte(ord("a"))
    assert not BASE32.valid_byte(ord("o"))
    assert not BASE32.valid_byte(0)


def test_invalid_character_decodes_to_marker_bits():
    assert BASE32.decode("a") == 0xFF


def test_decode_empty():
    assert BASE32.decode("") == 0


def test_alphabet_length_checked():
    with pytest.raises(ValueError):
        Encoding("abc")


def test_every_symbol_decodes_to_its_index():
    assert [BASE32.decode(ch) for ch in GEOHASH_ALPHABET] == list(range(32))


@given(st.integers(min_value=0, max_value=(1 << 60) - 1))
def test_round_trip(x):
    text = BASE32.encode(x)
    assert len(text) == 12
    assert BASE32.decode(text) == x