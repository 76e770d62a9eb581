import pytest
from sympy import isprime

from cryptoexercises.publickey import (
    addition_table,
    brute_inverse,
    curve_points,
    elgamal_decrypt,
    is_curve,
    is_prime_trial,
    point_add,
    rsa_crt,
    rsa_decrypt,
    rsa_encrypt,
    strong_prime,
)

LETTERS = "abcdefghijklmnopqrstuvw"


def test_rsa_textbook_example():
    assert rsa_encrypt(3233, 17, 65) == 2790
    assert rsa_decrypt(3233, 2753, 2790) == 65


def test_rsa_crt_factors_and_inverse():
    res = rsa_crt(8633, 5, 1234)
    assert (res.p, res.q) == (89, 97)
    assert res.d * 5 % res.period == 1
    assert res.period % 88 == 0 and res.period % 96 == 0


@pytest.mark.parametrize("x", [2, 1234, 8000])
def test_rsa_crt_matches_direct_power(x):
    res = rsa_crt(8633, 5, x)
    assert res.result == rsa_decrypt(8633, res.d, x)
    assert rsa_encrypt(8633, 5, res.result) == x


def test_rsa_crt_rejects_three_factors():
    with pytest.raises(ValueError):
        rsa_crt(3 * 5 * 7, 5, 2)


def test_rsa_crt_rejects_prime_square():
    with pytest.raises(ValueError):
        rsa_crt(49, 5, 2)


def test_elgamal_round_trip():
    p, a, secret = 23, 5, 6
    c = pow(a, secret, p)
    message = "mad"
    ciphertext = ""
    for k, letter in zip((3, 7, 11), message):
        m = LETTERS.index(letter)
        ciphertext += LETTERS[pow(a, k, p)] + LETTERS[m * pow(c, k, p) % p]
    b, rows = elgamal_decrypt(p, a, c, ciphertext, LETTERS, 0)
    assert pow(a, b, p) == c
    assert "".join(row.letter for row in rows) == message
    for row in rows:
        assert row.a_value * row.b_value % p == 1


def test_elgamal_rejects_unknown_character():
    with pytest.raises(ValueError):
        elgamal_decrypt(23, 5, 8, "kz", LETTERS, 0)


def test_elgamal_rejects_odd_ciphertext():
    with pytest.raises(ValueError):
        elgamal_decrypt(23, 5, 8, "kdk", LETTERS, 0)


@pytest.mark.parametrize("a, m", [(3, 7), (-3, 7), (10, 17), (5, 12)])
def test_brute_inverse_is_inverse(a, m):
    assert a * brute_inverse(a, m) % m == 1


def test_brute_inverse_missing():
    assert brute_inverse(2, 4) == 0


def test_is_curve():
    assert is_curve(1, 1, 5) is True
    assert is_curve(0, 0, 7) is False


def test_curve_points_satisfy_equation():
    points = curve_points(1, 1, 5)
    assert points == sorted(points)
    assert len(points) == len(set(points))
    for x, y in points:
        assert (y * y - x ** 3 - x - 1) % 5 == 0
    missing = [(1, y) for y in range(5)]
    assert not set(missing) & set(points)


def test_point_add_closure():
    points = curve_points(1, 1, 5)
    on_curve = set(points)
    for first in points:
        for second in points:
            total = point_add(first, second, 1, 5)
            if total.point is not None:
                assert total.point in on_curve


def test_point_add_inverse_gives_infinity():
    result = point_add((0, 1), (0, 4), 1, 5)
    assert result.is_infinity
    assert result.lam is None


def test_point_add_doubling_flag():
    result = point_add((0, 1), (0, 1), 1, 5)
    assert result.doubling is True
    assert result.point in set(curve_points(1, 1, 5))


def test_addition_table_symmetric():
    points = curve_points(1, 1, 5)[:5]
    grid = addition_table(points, 1, 5)
    assert len(grid) == len(points)
    for i, row in enumerate(grid):
        assert len(row) == len(points)
        for j, cell in enumerate(row):
            assert cell == grid[j][i]
            assert cell == point_add(points[i], points[j], 1, 5).point


@pytest.mark.parametrize("num, expected", [(13, True), (21, False), (2, False), (97, True)])
def test_is_prime_trial(num, expected):
    assert is_prime_trial(num) is expected


def test_strong_prime_properties():
    res = strong_prime(5, 3, 20)
    assert isprime(res.q) and isprime(res.p)
    assert (res.q - 1) % 3 == 0
    assert (res.p - 1) % res.q == 0
    assert (res.p + 1) % 5 == 0
    assert res.p_candidates[-1] == res.p
    assert res.q_candidates[-1] == res.q


def test_strong_prime_no_room():
    with pytest.raises(ValueError):
        strong_prime(5, 3, 2)