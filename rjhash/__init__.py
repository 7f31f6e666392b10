"""Modified MD5, SHA-1, RIPEMD-128 and Tiger digests, CRC-16, byte scrambling and bit helpers."""

__version__ = "0.1.0"
__all__ = [
    "bitops",
    "crc16",
    "encode",
    "md5",
    "sha1",
    "ripemd128",
    "tiger",
    "tiger_sbox_low",
    "tiger_sbox_high",
]