"""AES-128 encryption over GF(2^8), step by step, with every intermediate state."""

from __future__ import annotations

from collections.abc import Iterable

MODULUS = 0x11B
"""Irreducible polynomial x^8 + x^4 + x^3 + x + 1 defining GF(2^8)."""

SBOX: tuple[int, ...] = (
    0x63, 0x7C, 0x77, 0x7B, 0xF2, 0x6B, 0x6F, 0xC5, 0x30, 0x01, 0x67, 0x2B, 0xFE, 0xD7, 0xAB, 0x76,
    0xCA, 0x82, 0xC9, 0x7D, 0xFA, 0x59, 0x47, 0xF0, 0xAD, 0xD4, 0xA2, 0xAF, 0x9C, 0xA4, 0x72, 0xC0,
    0xB7, 0xFD, 0x93, 0x26, 0x36, 0x3F, 0xF7, 0xCC, 0x34, 0xA5, 0xE5, 0xF1, 0x71, 0xD8, 0x31, 0x15,
    0x04, 0xC7, 0x23, 0xC3, 0x18, 0x96, 0x05, 0x9A, 0x07, 0x12, 0x80, 0xE2, 0xEB, 0x27, 0xB2, 0x75,
    0x09, 0x83, 0x2C, 0x1A, 0x1B, 0x6E, 0x5A, 0xA0, 0x52, 0x3B, 0xD6, 0xB3, 0x29, 0xE3, 0x2F, 0x84,
    0x53, 0xD1, 0x00, 0xED, 0x20, 0xFC, 0xB1, 0x5B, 0x6A, 0xCB, 0xBE, 0x39, 0x4A, 0x4C, 0x58, 0xCF,
    0xD0, 0xEF, 0xAA, 0xFB, 0x43, 0x4D, 0x33, 0x85, 0x45, 0xF9, 0x02, 0x7F, 0x50, 0x3C, 0x9F, 0xA8,
    0x51, 0xA3, 0x40, 0x8F, 0x92, 0x9D, 0x38, 0xF5, 0xBC, 0xB6, 0xDA, 0x21, 0x10, 0xFF, 0xF3, 0xD2,
    0xCD, 0x0C, 0x13, 0xEC, 0x5F, 0x97, 0x44, 0x17, 0xC4, 0xA7, 0x7E, 0x3D, 0x64, 0x5D, 0x19, 0x73,
    0x60, 0x81, 0x4F, 0xDC, 0x22, 0x2A, 0x90, 0x88, 0x46, 0xEE, 0xB8, 0x14, 0xDE, 0x5E, 0x0B, 0xDB,
    0xE0, 0x32, 0x3A, 0x0A, 0x49, 0x06, 0x24, 0x5C, 0xC2, 0xD3, 0xAC, 0x62, 0x91, 0x95, 0xE4, 0x79,
    0xE7, 0xC8, 0x37, 0x6D, 0x8D, 0xD5, 0x4E, 0xA9, 0x6C, 0x56, 0xF4, 0xEA, 0x65, 0x7A, 0xAE, 0x08,
    0xBA, 0x78, 0x25, 0x2E, 0x1C, 0xA6, 0xB4, 0xC6, 0xE8, 0xDD, 0x74, 0x1F, 0x4B, 0xBD, 0x8B, 0x8A,
    0x70, 0x3E, 0xB5, 0x66, 0x48, 0x03, 0xF6, 0x0E, 0x61, 0x35, 0x57, 0xB9, 0x86, 0xC1, 0x1D, 0x9E,
    0xE1, 0xF8, 0x98, 0x11, 0x69, 0xD9, 0x8E, 0x94, 0x9B, 0x1E, 0x87, 0xE9, 0xCE, 0x55, 0x28, 0xDF,
    0x8C, 0xA1, 0x89, 0x0D, 0xBF, 0xE6, 0x42, 0x68, 0x41, 0x99, 0x2D, 0x0F, 0xB0, 0x54, 0xBB, 0x16,
)

RCON: tuple[int, ...] = (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36)

ROUNDS = 10


def _block(data: Iterable[int]) -> bytes:
    block = bytes(data)
    if len(block) != 16:
        raise ValueError(f"AES block must be 16 bytes, got {len(block)}")
    return block


def _chunks(data: bytes, size: int) -> list[bytes]:
    return [data[start:start + size] for start in range(0, len(data), size)]


def _xtime(value: int) -> int:
    value <<= 1
    return value ^ MODULUS if value & 0x100 else value


def sbox_table() -> str:
    """The S-box as a 16x16 hexadecimal table with row and column headers."""
    header = "hex |" + "".join(f"  {column:x} |" for column in range(16))
    rows = [
        f"  {row:x} | " + "".join(f"{value:02x} | " for value in chunk)
        for row, chunk in enumerate(_chunks(bytes(SBOX), 16))
    ]
    return "\n".join([header, *rows])


def format_state(state: Iterable[int]) -> str:
    """Render a state as four rows of the column-major 4x4 byte matrix."""
    block = _block(state)
    return "\n".join(
        ", ".join(f"{value:02x}" for value in block[row::4]) for row in range(4)
    )


def parse_block(text: str) -> bytes:
    """Read 16 whitespace-separated hexadecimal bytes."""
    tokens = text.split()
    if len(tokens) != 16:
        raise ValueError(f"expected 16 hexadecimal bytes, got {len(tokens)}")
    try:
        return bytes(int(token, 16) for token in tokens)
    except ValueError:
        raise ValueError(f"invalid block: {text!r}") from None


def sub_bytes(state: Iterable[int]) -> bytes:
    """Replace every byte with its S-box value."""
    return bytes(SBOX[value] for value in _block(state))


def shift_rows(state: Iterable[int]) -> bytes:
    """Rotate row r of the state left by r positions."""
    block = _block(state)
    return bytes(
        block[((index // 4 + index % 4) % 4) * 4 + index % 4] for index in range(16)
    )


def _mix_column(column: bytes) -> bytes:
    s0, s1, s2, s3 = column
    d0, d1, d2, d3 = (_xtime(s) for s in column)
    return bytes(
        (
            d0 ^ d1 ^ s1 ^ s2 ^ s3,
            s0 ^ d1 ^ d2 ^ s2 ^ s3,
            s0 ^ s1 ^ d2 ^ d3 ^ s3,
            d0 ^ s0 ^ s1 ^ s2 ^ d3,
        )
    )


def mix_columns(state: Iterable[int]) -> bytes:
    """Multiply every column by the fixed matrix [[2 3 1 1] [1 2 3 1] [1 1 2 3] [3 1 1 2]]."""
    return b"".join(_mix_column(column) for column in _chunks(_block(state), 4))


def add_round_key(state: Iterable[int], key: Iterable[int]) -> bytes:
    """XOR the state with the round key."""
    return bytes(s ^ k for s, k in zip(_block(state), _block(key)))


def next_round_key(key: Iterable[int], round_index: int) -> bytes:
    """Derive the next AES-128 round key; round_index runs from 0 to 9."""
    block = _block(key)
    if not 0 <= round_index < len(RCON):
        raise ValueError(f"round index must be in 0..{len(RCON) - 1}, got {round_index}")
    words = _chunks(block, 4)
    rotated = block[13:16] + block[12:13]
    first = bytes(SBOX[r] ^ k for r, k in zip(rotated, words[0]))
    first = bytes([first[0] ^ RCON[round_index]]) + first[1:]
    result = [first]
    for word in words[1:]:
        result.append(bytes(a ^ b for a, b in zip(result[-1], word)))
    return b"".join(result)


def encrypt_trace(plaintext: Iterable[int], key: Iterable[int]) -> list[tuple[str, bytes]]:
    """Encrypt one block, returning every labelled intermediate state in order."""
    state = _block(plaintext)
    round_key = _block(key)
    trace = [("Plaintext", state), ("Cipher Key", round_key)]
    state = add_round_key(state, round_key)
    trace.append(("After AddRoundKey", state))

    for round_index in range(ROUNDS):
        state = sub_bytes(state)
        trace.append(("After SubBytes", state))
        state = shift_rows(state)
        trace.append(("After ShiftRows", state))
        if round_index < ROUNDS - 1:
            state = mix_columns(state)
            trace.append(("After MixColumns", state))
        round_key = next_round_key(round_key, round_index)
        trace.append(("After KeySchedule", round_key))
        state = add_round_key(state, round_key)
        trace.append(("After AddRoundKey", state))
    return trace


def encrypt(plaintext: Iterable[int], key: Iterable[int]) -> bytes:
    """Encrypt one 16-byte block with a 16-byte key."""
    return encrypt_trace(plaintext, key)[-1][1]