"""
Bit-level helpers for the quantum randomness source:
packing, SHA-256 entropy amplification, and unbiased index extraction.
"""

from __future__ import annotations

import hashlib
from typing import List, Sequence


def bits_to_bytes(bits: Sequence[int]) -> bytes:
    """
    Pack bits (MSB first) into bytes, zero-padding the final byte.
    """
    if not bits:
        return b""

    padded = list(bits) + [0] * ((8 - len(bits) % 8) % 8)
    return bytes(bits_to_int(padded[i : i + 8]) for i in range(0, len(padded), 8))


def bytes_to_bits(data: bytes) -> List[int]:
    """Unpack bytes into bits, MSB first."""
    return [(byte >> (7 - i)) & 1 for byte in data for i in range(8)]


def bits_to_int(bits: Sequence[int]) -> int:
    """Read a big-endian run of bits as a non-negative integer."""
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def amplify_entropy(bits: Sequence[int], rounds: int = 1) -> List[int]:
    """
    Mix raw measurement bits through ``rounds`` of SHA-256.

    Zero or negative rounds return the input unchanged. Otherwise the
    result is always 256 bits, whatever the input length.
    """
    if rounds <= 0:
        return list(bits)

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()

    return bytes_to_bits(data)
