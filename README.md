# geohash

Encoding and decoding of string and integer geohashes.

A geohash packs a latitude/longitude point into a short base32 string of up to
12 characters, or into an integer of up to 64 bits. Points that are close
together usually share a prefix. This makes geohashes useful as spatial index
keys.

The package is a library only. It has no command-line tool and no other
dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from geohash.core import (
    Direction,
    bounding_box,
    decode,
    decode_center,
    encode,
    encode_int,
    encode_with_max_precision,
    encode_with_precision,
    neighbor,
    neighbors,
    validate,
)

lat, lng = -25.345457, 131.036192   # Uluru

encode(lat, lng)                     # 'qgmpvf18h86e'
encode_with_precision(lat, lng, 6)   # 'qgmpvf'
encode_with_max_precision(lat, lng)  # b'qgmpvf18h86e'
f"{encode_int(lat, lng):016x}"       # 'b3e75db828820cd5'

decode("qgmpvf18")                   # a short, rounded point inside the cell
decode_center("qgmpvf18")            # the centre of the cell

box = bounding_box("qgmpvf18")
box.contains(lat, lng)               # True
box.center()

neighbors("qgmpvf")                  # eight hashes: N, NE, E, SE, S, SW, W, NW
neighbor("qgmpvf", Direction.NORTH)

validate("bcopqr")                   # raises ValueError: invalid character 'o'
```

`validate` returns `None` for a well-formed hash. It raises `ValueError("too
long")` for a hash longer than 12 characters. It raises `ValueError` naming the
first character that is not in the geohash alphabet. The other decoding
functions do not validate their input.

### Integer geohashes

Integer geohashes carry up to 64 bits. The `*_int` functions work with the full
64 bits. The `*_int_with_precision` functions take an explicit bit count from 0
to 64.

```python
from geohash.core import (
    convert_int_to_string,
    convert_string_to_int,
    decode_int,
    decode_int_with_precision,
    encode_int_with_precision,
    neighbor_int,
    neighbors_int,
    neighbors_int_with_precision,
)

encode_int_with_precision(48.858, 2.294, 32)   # 0xd0139d52
decode_int(0xd0139d52c6b54c69)                  # approx. (48.858, 2.294)
decode_int_with_precision(0xd013, 16)           # approx. (48.6, 2.0)

convert_string_to_int("ezs42")                  # (0xdfe082, 25)
convert_int_to_string(0xdfe082, 5)              # 'ezs42'
```

### Precision limits

- String precision goes from 0 to 12 characters.
- Integer precision goes from 0 to 64 bits.

A value outside these ranges raises `ValueError`. Encoding a coordinate that
is NaN or infinite also raises `ValueError`.

### Bounding boxes

`Box` is a frozen dataclass with the fields `min_lat`, `max_lat`, `min_lng` and
`max_lng`.

- `center()` returns the midpoint as `(lat, lng)`.
- `contains(lat, lng)` includes the edges and corners.
- `round()` returns a point inside the box with as few decimal places as it can.

### Directions

`Direction` is an `IntEnum` with the members `NORTH`, `NORTH_EAST`, `EAST`,
`SOUTH_EAST`, `SOUTH`, `SOUTH_WEST`, `WEST` and `NORTH_WEST`. They are numbered
0 to 7. The lists returned by `neighbors`, `neighbors_int` and
`neighbors_int_with_precision` are in this order. `neighbor`, `neighbor_int`
and `neighbor_int_with_precision` each pick one entry from those lists.

### Low-level helpers

`geohash.core` also exposes the bit operations behind the integer form:

- `spread` places the 32 bits of a word on the even bit positions of a 64-bit word.
- `squash` does the reverse.
- `interleave(x, y)` puts `x` on the even bits and `y` on the odd bits.
- `deinterleave` splits a word back into those two values.

`geohash.base32` provides `Encoding`, a base32 codec over any 32-character
alphabet. Its methods are `valid_byte`, `decode`, `encode` and `encode_bytes`.
The module also defines `GEOHASH_ALPHABET` and the ready-made instance `BASE32`
built from it.