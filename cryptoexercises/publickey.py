"""Public-key exercises: RSA, ElGamal, elliptic curves and strong primes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .numtheory import (
    carmichael_lambda,
    factorize_number,
    group_prime_powers,
    inverse_mod,
    lcm_of,
    multiplicative_order,
)

Point = tuple[int, int]


@dataclass(frozen=True)
class RsaCrtResult:
    """Every value of fast RSA decryption through the Chinese remainder theorem."""

    n: int
    e: int
    x: int
    p: int
    q: int
    lambdas: list[int]
    period: int
    d: int
    d1: int
    d2: int
    y1: int
    y2: int
    x1: int
    x2: int
    u: int
    v: int
    result: int


@dataclass(frozen=True)
class ElGamalRow:
    """One decrypted ciphertext pair: y1^b, its inverse, and the plaintext letter."""

    pair: str
    y1: int
    y2: int
    a_value: int
    b_value: int
    plaintext_value: int
    letter: str


@dataclass(frozen=True)
class CurveSum:
    """Sum of two curve points; ``point`` is None for the point at infinity."""

    point: Point | None
    lam: int | None = None
    doubling: bool = False

    @property
    def is_infinity(self) -> bool:
        """Whether the sum is the point at infinity."""
        return self.point is None


@dataclass(frozen=True)
class StrongPrimeResult:
    """Candidates tried and the primes found by Gordon's strong-prime method."""

    q: int
    p0: int
    p: int
    q_candidates: list[int] = field(default_factory=list)
    p_candidates: list[int] = field(default_factory=list)


def rsa_encrypt(n: int, e: int, x: int) -> int:
    """E(x) = x^e mod n."""
    if n < 1:
        raise ValueError("modulus must be positive")
    return pow(x, e, n)


def rsa_decrypt(n: int, d: int, y: int) -> int:
    """D(y) = y^d mod n."""
    if n < 1:
        raise ValueError("modulus must be positive")
    return pow(y, d, n)


def rsa_crt(n: int, e: int, x: int) -> RsaCrtResult:
    """Find d from lambda(n) and compute x^d mod n with the CRT shortcut."""
    factors = factorize_number(n)
    groups, _max_power = group_prime_powers(factors)
    if len(factors) != 2 or len(groups) != 2:
        raise ValueError(f"{n} is not a product of two distinct primes")
    p, q = groups
    lambdas = [carmichael_lambda(g) for g in groups]
    period = lcm_of(lambdas)
    d = inverse_mod(e, period)
    d1 = d % (p - 1)
    d2 = d % (q - 1)
    y1 = x % p
    y2 = x % q
    x1 = pow(y1, d1, p)
    x2 = pow(y2, d2, q)
    u = inverse_mod(q, p)
    v = inverse_mod(p, q)
    result = (x1 * u * q + x2 * v * p) % n
    return RsaCrtResult(
        n=n, e=e, x=x, p=p, q=q, lambdas=lambdas, period=period,
        d=d, d1=d1, d2=d2, y1=y1, y2=y2, x1=x1, x2=x2, u=u, v=v, result=result,
    )


def _char_value(ch: str, table: str, offset: int) -> int:
    index = table.find(ch)
    if index < 0:
        raise ValueError(f"character {ch!r} is not in the translation table")
    return index + offset


def elgamal_decrypt(
    p: int, a: int, c: int, ciphertext: str, table: str, offset: int
) -> tuple[int, list[ElGamalRow]]:
    """Recover the secret b with a^b = c (mod p) and decrypt character pairs.

    Returns b together with one row per ciphertext pair.
    """
    if p < 2:
        raise ValueError("modulus must be at least 2")
    if len(ciphertext) % 2:
        raise ValueError("ciphertext must consist of pairs of characters")
    b = multiplicative_order(a, p, c)
    rows = []
    for first, second in zip(ciphertext[::2], ciphertext[1::2]):
        y1 = _char_value(first, table, offset)
        y2 = _char_value(second, table, offset)
        a_value = pow(y1, b, p)
        b_value = inverse_mod(a_value, p)
        plain = b_value * y2 % p
        index = plain - offset
        if not 0 <= index < len(table):
            raise ValueError(f"plaintext value {plain} is outside the translation table")
        rows.append(
            ElGamalRow(
                pair=first + second,
                y1=y1,
                y2=y2,
                a_value=a_value,
                b_value=b_value,
                plaintext_value=plain,
                letter=table[index],
            )
        )
    return b, rows


def brute_inverse(a: int, m: int) -> int:
    """Inverse of a modulo m found by search, or 0 if there is none."""
    if m < 1:
        raise ValueError("modulus must be positive")
    a %= m
    return next((i for i in range(1, m) if a * i % m == 1), 0)


def is_curve(a: int, b: int, p: int) -> bool:
    """Whether (4a)^3 + (27b)^2 is non-zero modulo p."""
    if p < 2:
        raise ValueError("modulus must be at least 2")
    return (pow(4 * a % p, 3, p) + pow(27 * b % p, 2, p)) % p != 0


def curve_points(a: int, b: int, p: int) -> list[Point]:
    """All affine points of y^2 = x^3 + ax + b over Z_p, ordered by x then y."""
    if p < 2:
        raise ValueError("modulus must be at least 2")
    return [
        (x, y)
        for x in range(p)
        for y in range(p)
        if (y * y - (x * x * x + a * x + b)) % p == 0
    ]


def point_add(first: Point, second: Point, a: int, p: int) -> CurveSum:
    """Add two points of y^2 = x^3 + ax + b over Z_p."""
    x1, y1 = first
    x2, y2 = second
    total = y1 + y2
    if (x1 == x2 and total == p) or total == 0:
        return CurveSum(point=None)
    doubling = x1 == x2 and y1 == y2
    if doubling:
        lam = (3 * x1 * x1 + a) * brute_inverse(2 * y1, p) % p
    else:
        lam = (y2 - y1) * brute_inverse(x2 - x1, p) % p
    x3 = (lam * lam - x1 - x2) % p
    y3 = (lam * (x1 - x3) - y1) % p
    return CurveSum(point=(x3, y3), lam=lam, doubling=doubling)


def addition_table(points: list[Point], a: int, p: int) -> list[list[Point | None]]:
    """Grid whose cell [i][j] is points[i] + points[j] (None for infinity)."""
    return [[point_add(row, column, a, p).point for column in points] for row in points]


def is_prime_trial(num: int) -> bool:
    """Trial division by 2 and by odd numbers below the floor square root of num."""
    if num < 0:
        raise ValueError("number must be non-negative")
    if num % 2 == 0:
        return False
    root = math.isqrt(num)
    return all(num % i for i in range(3, root, 2))


def strong_prime(s: int, t: int, bits: int) -> StrongPrimeResult:
    """Gordon's method: prime q = 2it + 1, then p = p0 + 2iqs with p0 = 2(s^(q-2) mod q)s - 1."""
    limit = bits // 2
    q_candidates: list[int] = []
    q = None
    for i in range(1, limit):
        candidate = 2 * i * t + 1
        q_candidates.append(candidate)
        if is_prime_trial(candidate):
            q = candidate
            break
    if q is None:
        raise ValueError("no prime q found within the bit limit")

    p0 = 2 * pow(s, q - 2, q) * s - 1
    p_candidates: list[int] = []
    for i in range(limit):
        candidate = p0 + 2 * i * q * s
        p_candidates.append(candidate)
        if is_prime_trial(candidate):
            return StrongPrimeResult(
                q=q, p0=p0, p=candidate,
                q_candidates=q_candidates, p_candidates=p_candidates,
            )
    raise ValueError("no prime p found within the bit limit")