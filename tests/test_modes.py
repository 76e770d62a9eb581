import pytest

from cryptoexercises.modes import (
    AffineFunction,
    DecryptResult,
    Mode,
    decrypt,
    encrypt,
    letter_values,
)

FUNC = AffineFunction(5, 7, 26)


def test_letter_values_folds_case():
    assert letter_values("aBc") == [0, 1, 2]


def test_affine_apply_and_invert_round_trip():
    for x in range(26):
        assert FUNC.invert(FUNC.apply(x)) == x


def test_affine_invert_without_preimage():
    with pytest.raises(ValueError):
        AffineFunction(2, 0, 26).invert(1)


def test_affine_rejects_zero_multiplier():
    with pytest.raises(ValueError):
        AffineFunction(0, 1, 26)


def test_ecb_caesar():
    assert encrypt("abc", Mode.ECB, AffineFunction(1, 3, 26)) == "def"


def test_ecb_case_insensitive():
    assert encrypt("HeLLo", Mode.ECB, FUNC) == encrypt("hello", Mode.ECB, FUNC)


def test_ecb_equal_letters_equal_output():
    cipher = encrypt("aaaa", Mode.ECB, FUNC)
    assert len(set(cipher)) == 1


@pytest.mark.parametrize("mode", [Mode.ECB, Mode.OFB, Mode.CTR])
def test_round_trip_stream_modes(mode):
    cipher = encrypt("attackatdawn", mode, FUNC, iv=11)
    assert len(cipher) == len("attackatdawn")
    assert decrypt(cipher, mode, FUNC, iv=11) == DecryptResult("attackatdawn", None)


@pytest.mark.parametrize("mode", [Mode.CBC, Mode.CFB])
def test_round_trip_chained_modes_recover_iv(mode):
    cipher = encrypt("attackatdawn", mode, FUNC, iv=9)
    assert len(cipher) == len("attackatdawn") + 1
    assert decrypt(cipher, mode, FUNC) == DecryptResult("attackatdawn", 9)


def test_cbc_starts_with_encrypted_iv():
    cipher = encrypt("hello", Mode.CBC, FUNC, iv=4)
    assert letter_values(cipher)[0] == FUNC.apply(4)


def test_ofb_identity_function_leaves_text():
    assert encrypt("secretword", Mode.OFB, AffineFunction(1, 0, 26), iv=0) == "secretword"


def test_ctr_differs_from_ecb_on_repeated_letters():
    cipher = encrypt("aaaa", Mode.CTR, FUNC, iv=0)
    assert len(set(cipher)) > 1


def test_decrypt_chained_empty():
    with pytest.raises(ValueError):
        decrypt("", Mode.CBC, FUNC)