import pytest

from cryptoexercises.aes import (
    add_round_key,
    encrypt,
    encrypt_trace,
    format_state,
    mix_columns,
    next_round_key,
    parse_block,
    sbox_table,
    shift_rows,
    sub_bytes,
)

PLAINTEXT = "32 43 f6 a8 88 5a 30 8d 31 31 98 a2 e0 37 07 34"
KEY = "2b 7e 15 16 28 ae d2 a6 ab f7 15 88 09 cf 4f 3c"


def test_parse_block_matches_hex():
    assert parse_block(PLAINTEXT) == bytes.fromhex(PLAINTEXT.replace(" ", ""))


def test_parse_block_wrong_count():
    with pytest.raises(ValueError):
        parse_block("32 43 f6")


def test_parse_block_out_of_range():
    with pytest.raises(ValueError):
        parse_block(" ".join(["100"] + ["00"] * 15))


def test_encrypt_known_vector():
    result = encrypt(parse_block(PLAINTEXT), parse_block(KEY))
    assert result == bytes.fromhex("3925841d02dc09fbdc118597196a0b32")


def test_last_round_key():
    key = parse_block(KEY)
    for round_index in range(10):
        key = next_round_key(key, round_index)
    assert key == bytes.fromhex("d014f9a8c9ee2589e13f0cc8b6630ca6")


def test_next_round_key_bad_index():
    with pytest.raises(ValueError):
        next_round_key(parse_block(KEY), 10)


def test_mix_columns_column_vector():
    state = bytes.fromhex("db135345") * 4
    assert mix_columns(state) == bytes.fromhex("8e4da1bc") * 4


def test_mix_columns_is_linear():
    x = bytes(range(16))
    y = parse_block(KEY)
    xor = bytes(a ^ b for a, b in zip(x, y))
    expected = bytes(a ^ b for a, b in zip(mix_columns(x), mix_columns(y)))
    assert mix_columns(xor) == expected


def test_sub_bytes_uses_sbox():
    assert sub_bytes(bytes(range(16)))[:4] == bytes([0x63, 0x7C, 0x77, 0x7B])
    assert sub_bytes(bytes(16)) == bytes([0x63] * 16)


def test_shift_rows_keeps_first_row_and_cycles():
    state = bytes(range(16))
    shifted = shift_rows(state)
    assert shifted[0::4] == state[0::4]
    assert sorted(shifted) == sorted(state)
    again = state
    for _ in range(4):
        again = shift_rows(again)
    assert again == state


def test_add_round_key_is_involution():
    state = parse_block(PLAINTEXT)
    key = parse_block(KEY)
    assert add_round_key(add_round_key(state, key), key) == state


def test_wrong_length_state():
    with pytest.raises(ValueError):
        sub_bytes(b"\x00" * 15)


def test_trace_structure():
    trace = encrypt_trace(parse_block(PLAINTEXT), parse_block(KEY))
    assert len(trace) == 52
    assert [label for label, _ in trace[:3]] == ["Plaintext", "Cipher Key", "After AddRoundKey"]
    assert trace[-1][0] == "After AddRoundKey"
    assert trace[-1][1] == encrypt(parse_block(PLAINTEXT), parse_block(KEY))
    assert sum(1 for label, _ in trace if label == "After MixColumns") == 9


def test_format_state_rows():
    lines = format_state(parse_block(PLAINTEXT)).splitlines()
    assert lines[0] == "32, 88, 31, e0"
    assert lines[3] == "a8, 8d, a2, 34"


def test_sbox_table_layout():
    lines = sbox_table().splitlines()
    assert len(lines) == 17
    assert lines[0].startswith("hex |  0 |  1 |")
    assert lines[1].startswith("  0 | 63 | 7c | 77 | 7b")
    assert lines[16].startswith("  f | 8c | a1")