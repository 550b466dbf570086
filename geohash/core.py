"""Encoding and decoding of string and integer geohashes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from .base32 import BASE32

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1
_EXP232 = 2.0**32
_MAX_CHARS = 12
_MAX_BITS = 64


class Direction(IntEnum):
    """Cardinal and intercardinal directions in latitude/longitude space."""

    NORTH = 0
    NORTH_EAST = 1
    EAST = 2
    SOUTH_EAST = 3
    SOUTH = 4
    SOUTH_WEST = 5
    WEST = 6
    NORTH_WEST = 7


# Latitude and longitude steps for each direction, in Direction order.
_OFFSETS = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)


def _check_bits(bits: int) -> None:
    if not 0 <= bits <= _MAX_BITS:
        raise ValueError(f"precision must be between 0 and {_MAX_BITS} bits, got {bits}")


def _check_chars(chars: int) -> None:
    if not 0 <= chars <= _MAX_CHARS:
        raise ValueError(
            f"precision must be between 0 and {_MAX_CHARS} characters, got {chars}"
        )


def _byte_length(hash: str | bytes) -> int:
    return len(hash.encode("utf-8")) if isinstance(hash, str) else len(hash)


def _max_decimal_power(r: float) -> float:
    """Largest power of ten not exceeding ``r``."""
    m = math.floor(math.log10(r))
    return float(f"1e{m}")


@dataclass(frozen=True)
class Box:
    """A rectangle in latitude/longitude space."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    def center(self) -> tuple[float, float]:
        """Return the centre point of the box."""
        return (self.min_lat + self.max_lat) / 2.0, (self.min_lng + self.max_lng) / 2.0

    def contains(self, lat: float, lng: float) -> bool:
        """Whether the point lies in the box, edges and corners included."""
        return self.min_lat <= lat <= self.max_lat and self.min_lng <= lng <= self.max_lng

    def round(self) -> tuple[float, float]:
        """Return a point inside the box, rounded to as few decimals as possible."""
        x = _max_decimal_power(self.max_lat - self.min_lat)
        lat = math.ceil(self.min_lat / x) * x
        x = _max_decimal_power(self.max_lng - self.min_lng)
        lng = math.ceil(self.min_lng / x) * x
        return lat, lng


def spread(x: int) -> int:
    """Spread the 32 bits of ``x`` over the even bit positions of a 64-bit word."""
    x &= _MASK32
    x = (x | (x << 16)) & 0x0000FFFF0000FFFF
    x = (x | (x << 8)) & 0x00FF00FF00FF00FF
    x = (x | (x << 4)) & 0x0F0F0F0F0F0F0F0F
    x = (x | (x << 2)) & 0x3333333333333333
    x = (x | (x << 1)) & 0x5555555555555555
    return x


def squash(x: int) -> int:
    """Gather the even bit positions of a 64-bit word into a 32-bit word."""
    x &= 0x5555555555555555
    x = (x | (x >> 1)) & 0x3333333333333333
    x = (x | (x >> 2)) & 0x0F0F0F0F0F0F0F0F
    x = (x | (x >> 4)) & 0x00FF00FF00FF00FF
    x = (x | (x >> 8)) & 0x0000FFFF0000FFFF
    x = (x | (x >> 16)) & 0x00000000FFFFFFFF
    return x


def interleave(x: int, y: int) -> int:
    """Interleave ``x`` into the even bits and ``y`` into the odd bits."""
    return spread(x) | (spread(y) << 1)


def deinterleave(x: int) -> tuple[int, int]:
    """Split a 64-bit word into its even and odd bits."""
    x &= _MASK64
    return squash(x), squash(x >> 1)


def _encode_range(x: float, r: float) -> int:
    p = (x + r) / (2 * r)
    try:
        value = int(p * _EXP232)
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"coordinate {x!r} cannot be encoded") from exc
    return value & _MASK32


def _decode_range(value: int, r: float) -> float:
    p = value / _EXP232
    return 2 * r * p - r


def _error_with_precision(bits: int) -> tuple[float, float]:
    lat_bits = bits // 2
    lng_bits = bits - lat_bits
    return math.ldexp(180.0, -lat_bits), math.ldexp(360.0, -lng_bits)


def encode_int(lat: float, lng: float) -> int:
    """Encode the point as a 64-bit integer geohash."""
    return interleave(_encode_range(lat, 90), _encode_range(lng, 180))


def encode_int_with_precision(lat: float, lng: float, bits: int) -> int:
    """Encode the point as an integer geohash of ``bits`` bits."""
    _check_bits(bits)
    return encode_int(lat, lng) >> (_MAX_BITS - bits)


def encode_with_precision(lat: float, lng: float, chars: int) -> str:
    """Encode the point as a string geohash of ``chars`` characters (max 12)."""
    _check_chars(chars)
    inthash = encode_int_with_precision(lat, lng, 5 * chars)
    return BASE32.encode(inthash)[_MAX_CHARS - chars :]


def encode(lat: float, lng: float) -> str:
    """Encode the point as a 12-character string geohash."""
    return encode_with_precision(lat, lng, _MAX_CHARS)


def encode_with_max_precision(lat: float, lng: float) -> bytes:
    """Encode the point as a 12-byte geohash."""
    inthash = encode_int_with_precision(lat, lng, 5 * _MAX_CHARS)
    return BASE32.encode_bytes(inthash)


def bounding_box_int_with_precision(hash: int, bits: int) -> Box:
    """Return the region encoded by an integer geohash of ``bits`` bits."""
    _check_bits(bits)
    full_hash = ((hash & _MASK64) << (_MAX_BITS - bits)) & _MASK64
    lat_int, lng_int = deinterleave(full_hash)
    lat = _decode_range(lat_int, 90)
    lng = _decode_range(lng_int, 180)
    lat_err, lng_err = _error_with_precision(bits)
    return Box(min_lat=lat, max_lat=lat + lat_err, min_lng=lng, max_lng=lng + lng_err)


def bounding_box_int(hash: int) -> Box:
    """Return the region encoded by a 64-bit integer geohash."""
    return bounding_box_int_with_precision(hash, _MAX_BITS)


def bounding_box(hash: str) -> Box:
    """Return the region encoded by a string geohash."""
    bits = 5 * _byte_length(hash)
    return bounding_box_int_with_precision(BASE32.decode(hash), bits)


def validate(hash: str | bytes) -> None:
    """Check a string geohash, raising ValueError if it is malformed."""
    data = hash.encode("utf-8") if isinstance(hash, str) else bytes(hash)
    if 5 * len(data) > _MAX_BITS:
        raise ValueError("too long")
    for b in data:
        if not BASE32.valid_byte(b):
            raise ValueError(f"invalid character {chr(b)!r}")


def decode(hash: str) -> tuple[float, float]:
    """Decode a string geohash to a point with minimal decimal precision."""
    return bounding_box(hash).round()


def decode_center(hash: str) -> tuple[float, float]:
    """Decode a string geohash to the centre of its bounding box."""
    return bounding_box(hash).center()


def decode_int_with_precision(hash: int, bits: int) -> tuple[float, float]:
    """Decode an integer geohash of ``bits`` bits to a point."""
    return bounding_box_int_with_precision(hash, bits).round()


def decode_int(hash: int) -> tuple[float, float]:
    """Decode a 64-bit integer geohash to a point."""
    return decode_int_with_precision(hash, _MAX_BITS)


def convert_string_to_int(hash: str) -> tuple[int, int]:
    """Convert a string geohash to ``(integer hash, bits of precision)``."""
    return BASE32.decode(hash), 5 * _byte_length(hash)


def convert_int_to_string(hash: int, chars: int) -> str:
    """Convert an integer geohash of ``5 * chars`` bits to a string geohash."""
    _check_chars(chars)
    return BASE32.encode(hash)[_MAX_CHARS - chars :]


def _neighbor_points(box: Box):
    lat, lng = box.center()
    lat_delta = box.max_lat - box.min_lat
    lng_delta = box.max_lng - box.min_lng
    for dlat, dlng in _OFFSETS:
        yield lat + dlat * lat_delta, lng + dlng * lng_delta


def neighbors(hash: str) -> list[str]:
    """Return the eight neighbouring geohashes, in Direction order."""
    precision = _byte_length(hash)
    return [
        encode_with_precision(lat, lng, precision)
        for lat, lng in _neighbor_points(bounding_box(hash))
    ]


def neighbors_int_with_precision(hash: int, bits: int) -> list[int]:
    """Return the eight neighbouring integer geohashes at ``bits`` precision."""
    box = bounding_box_int_with_precision(hash, bits)
    return [encode_int_with_precision(lat, lng, bits) for lat, lng in _neighbor_points(box)]


def neighbors_int(hash: int) -> list[int]:
    """Return the eight neighbouring 64-bit integer geohashes."""
    return neighbors_int_with_precision(hash, _MAX_BITS)


def neighbor(hash: str, direction: Direction) -> str:
    """Return the neighbouring geohash in the given direction."""
    return neighbors(hash)[Direction(direction)]


def neighbor_int(hash: int, direction: Direction) -> int:
    """Return the neighbouring 64-bit integer geohash in the given direction."""
    return neighbors_int_with_precision(hash, _MAX_BITS)[Direction(direction)]


def neighbor_int_with_precision(hash: int, bits: int, direction: Direction) -> int:
    """Return the neighbouring integer geohash at ``bits`` precision."""
    return neighbors_int_with_precision(hash, bits)[Direction(direction)]