"""
Bit helpers for the quantum source, plus the theoretical entropy estimate
reported with each generated password.
"""

from __future__ import annotations

import hashlib
import math
from typing import List


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack bits (MSB first) into bytes. A trailing partial byte is padded
    with zeros on the right.
    """
    out = bytearray()
    for start in range(0, len(bits), 8):
        chunk = bits[start : start + 8]
        chunk = chunk + [0] * (8 - len(chunk))
        out.append(bits_to_int(chunk))
    return bytes(out)


def bytes_to_bits(data: bytes) -> List[int]:
    return [(byte >> shift) & 1 for byte in data for shift in range(7, -1, -1)]


def bits_to_int(bits: List[int]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def amplify_entropy(bits: List[int], rounds: int = 1) -> List[int]:
    """
    Mix a batch of raw bits through SHA-256 `rounds` times and return the
    256-bit digest as bits. With rounds <= 0 the input is returned as-is.
    """
    if rounds <= 0:
        return list(bits)

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()
    return bytes_to_bits(data)


def estimate_entropy_bits(alphabet_size: int, length: int) -> float:
    """Entropy in bits of `length` uniform draws from `alphabet_size` symbols."""
    if alphabet_size <= 0 or length <= 0:
        return 0.0
    return length * math.log2(alphabet_size)
