# rjhash

Pure-Python digest, checksum and byte-scrambling routines used by the RJv3
dialect of 802.1X authentication.

The digests here are *not* the standard algorithms. They keep the overall
structure of MD5, SHA-1, RIPEMD-128 and Tiger, but they change the initial
states, some round constants and the feed-forward step. Their output does not
match `hashlib` or any other standard implementation. Use them only where a
peer expects these exact variants.

## Installation

```
pip install rjhash
```

The package has no runtime dependencies. It needs Python 3.10 or later.

## Modules

| Module                   | Contents                                                    |
|--------------------------|-------------------------------------------------------------|
| `rjhash.bitops`          | `rotl32`, `rotr32`, `rotl64`, `rotr64`, `bswap32`, `bswap64`, `ctz`, `swap_words32`, `swap_words64` |
| `rjhash.crc16`           | `crc16(data)`: CRC-16/XMODEM (poly 0x1021, init 0, no reflection) |
| `rjhash.encode`          | `rj_encode(data)` and `rj_decode(data)`                      |
| `rjhash.md5`             | `RjMD5`, `rj_md5(data)`: 16-byte digest                     |
| `rjhash.sha1`            | `RjSHA1`, `rj_sha1(data)`: 20-byte digest                   |
| `rjhash.ripemd128`       | `RjRIPEMD128`, `rj_ripemd128(data)`: 16-byte digest         |
| `rjhash.tiger`           | `RjTiger`, `rj_tiger(data, tiger2=False)`: 24-byte digest   |
| `rjhash.tiger_sbox_low`  | Tiger S-boxes `T1`, `T2` (256 64-bit words each)            |
| `rjhash.tiger_sbox_high` | Tiger S-boxes `T3`, `T4` (256 64-bit words each)            |

## Hashing

The hash classes follow the shape of `hashlib` objects. Each constructor takes
optional initial data. `update()` can be called any number of times.
`digest()` and `hexdigest()` leave the object's state unchanged, so you can
keep feeding data afterwards. `copy()` returns an independent clone. Each
class also has `name`, `digest_size` and `block_size` attributes.

```python
from rjhash.md5 import RjMD5, rj_md5
from rjhash.sha1 import rj_sha1
from rjhash.ripemd128 import rj_ripemd128
from rjhash.tiger import RjTiger, rj_tiger

h = RjMD5()
h.update(b"hello ")
h.update(b"world")
assert h.digest() == rj_md5(b"hello world")
print(h.hexdigest())

print(rj_sha1(b"abc").hex())          # 20 bytes
print(rj_ripemd128(b"abc").hex())     # 16 bytes
print(rj_tiger(b"abc").hex())         # 24 bytes, padding byte 0x01
print(rj_tiger(b"abc", True).hex())   # 24 bytes, padding byte 0x80
```

`RjTiger(data, tiger2=True)` and `rj_tiger(data, True)` select the Tiger2
padding, which starts with 0x80 instead of 0x01. Otherwise the two modes are
the same.

## CRC-16 and byte scrambling

```python
from rjhash.crc16 import crc16
from rjhash.encode import rj_encode, rj_decode

assert crc16(b"123456789") == 0x31C3

scrambled = rj_encode(b"payload")
assert rj_decode(scrambled) == b"payload"
```

`rj_encode` reverses the bit order of each byte and then inverts every bit.
`rj_decode` undoes it.

## Bit helpers

```python
from rjhash.bitops import rotl32, bswap32, ctz, swap_words32

assert rotl32(0x80000000, 1) == 1
assert bswap32(0x11223344) == 0x44332211
assert ctz(8) == 3          # ctz(0) returns 0
assert swap_words32(b"\x01\x02\x03\x04") == b"\x04\x03\x02\x01"
```

`swap_words32` and `swap_words64` raise `ValueError` if the data length is not
a multiple of the word size.

## What this package does not do

It has no Whirlpool variant. It does not compute the composite check value or
the scrambled password that an RJv3 client derives from these digests. It does
not send or receive any authentication packets. It provides only the building
blocks listed above, and it has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```