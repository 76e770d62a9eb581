"""Elementary number theory: orders, inverses, Jacobi symbols, CRT and friends."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field

from sympy import isprime
from sympy.ntheory.residue_ntheory import sqrt_mod as _sympy_sqrt_mod

SMALL_PRIMES: tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37,
    41, 43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89,
    97, 101, 103, 107, 109, 113, 127, 131, 137, 139, 149, 151,
    157, 163, 167, 173, 179, 181, 191, 193, 197, 199, 211, 223,
    227, 229, 233, 239, 241, 251, 257, 263, 269, 271, 277, 281,
    283, 293, 307, 311, 313, 317, 331, 337, 347, 349, 353, 359,
    367, 373, 379, 383, 389, 397, 401, 409, 419, 421, 431, 433,
    439, 443, 449, 457, 461, 463, 467, 479, 487, 491, 499, 503,
    509, 521, 523, 541, 547, 557, 563, 569, 571, 577, 587, 593,
    599, 601, 607, 613, 617, 619, 631, 641, 643, 647, 653, 659,
    661, 673, 677, 683, 691, 701, 709, 719, 727, 733, 739, 743,
    751, 757, 761, 769, 773, 787, 797, 809, 811, 821, 823, 827,
    829, 839, 853, 857, 859, 863, 877, 881, 883, 887, 907, 911,
    919, 929, 937, 941, 947, 953, 967, 971, 977, 983, 991, 997,
)
"""All primes below 1000, used for trial-division factorisation."""

GROUP_MODULUS = 10007
"""Prime modulus applied to grouped prime powers."""


@dataclass(frozen=True)
class JacobiStep:
    """One rule applied while evaluating J(p/q) by hand."""

    index: int
    p: int
    q: int
    rule: str
    value: int
    next_p: int | None = None
    next_q: int | None = None


@dataclass(frozen=True)
class JacobiTrace:
    """Result of a step-by-step Jacobi symbol evaluation."""

    p: int
    q: int
    result: int
    steps: list[JacobiStep] = field(default_factory=list)


@dataclass(frozen=True)
class CrtSteps:
    """Intermediate values of the two-congruence Chinese remainder method."""

    product: int
    inv_m: int
    inv_n: int
    term_a: int
    term_b: int
    total: int
    result: int


@dataclass(frozen=True)
class ExponentReduction:
    """How x^n mod p is reduced using the Carmichael function."""

    modulus: int
    exponent: int
    factors: list[int]
    groups: list[int]
    max_power: int
    lambdas: list[int]
    period: int
    reduced: int


def multiplicative_order(a: int, m: int, target: int = 1) -> int:
    """Smallest i in 1..m-1 with a^i = target (mod m), or 0 if there is none."""
    a %= m
    for i in range(1, m):
        if pow(a, i, m) == target:
            return i
    return 0


def inverse_mod(a: int, m: int) -> int:
    """Inverse of a modulo m; raises ValueError if it does not exist."""
    if m <= 0:
        raise ValueError(f"modulus must be positive, got {m}")
    try:
        return pow(a % m, -1, m)
    except ValueError:
        raise ValueError(f"{a} has no inverse modulo {m}") from None


def jacobi(a: int, n: int) -> int:
    """Jacobi symbol (a/n) for odd positive n."""
    if n <= 0 or n % 2 == 0:
        raise ValueError(f"Jacobi symbol needs an odd positive modulus, got {n}")
    a %= n
    result = 1
    while a:
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                result = -result
        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            result = -result
        a %= n
    return result if n == 1 else 0


def sqrt_mod(a: int, p: int) -> tuple[int, int]:
    """Both square roots (b, p - b) of a modulo the prime p."""
    if p < 2 or not isprime(p):
        raise ValueError(f"{p} is not a prime")
    if p == 2:
        root = a % 2
        return root, p - root
    if jacobi(a, p) != 1:
        raise ValueError(f"{a} is not a quadratic residue modulo {p}")
    root = int(_sympy_sqrt_mod(a % p, p))
    return root, p - root


def _check_coprime(m: int, n: int) -> None:
    if m <= 0 or n <= 0:
        raise ValueError("moduli must be positive")
    if math.gcd(m, n) != 1:
        raise ValueError(f"moduli {m} and {n} are not coprime")


def crt(a: int, m: int, b: int, n: int) -> tuple[int, int]:
    """Solve x = a (mod m), x = b (mod n); return (x, m*n) with 0 <= x < m*n."""
    _check_coprime(m, n)
    product = m * n
    x = (a + m * ((b - a) * inverse_mod(m, n) % n)) % product
    return x, product


def crt_steps(a: int, m: int, b: int, n: int) -> CrtSteps:
    """The classroom CRT formula (a*inv(n)*n + b*inv(m)*m) mod m*n, step by step."""
    _check_coprime(m, n)
    product = m * n
    inv_n = inverse_mod(m % n, n)
    inv_m = inverse_mod(n % m, m)
    term_a = a * inv_m * n
    term_b = b * inv_n * m
    total = term_a + term_b
    return CrtSteps(
        product=product,
        inv_m=inv_m,
        inv_n=inv_n,
        term_a=term_a,
        term_b=term_b,
        total=total,
        result=total % product,
    )


def quadratic_residues(p: int) -> list[int]:
    """Distinct values i^2 mod p for 1 <= i < (p+1)/2, in order of first appearance."""
    seen: dict[int, None] = {}
    for i in range(1, (p + 1) // 2):
        seen.setdefault(i * i % p, None)
    return list(seen)


def square_roots(a: int, p: int) -> list[int]:
    """All x in 1..p-1 with x^2 mod p equal to a, found by brute force."""
    return [x for x in range(1, p) if x * x % p == a]


def _minus_one(q: int) -> int:
    r = q % 4
    return {1: 1, 3: -1}.get(r, 0)


def _two(q: int) -> int:
    r = q % 8
    if r in (1, 7):
        return 1
    if r in (3, 5):
        return -1
    return 0


def jacobi_steps(p: int, q: int) -> JacobiTrace:
    """Evaluate J(p/q) by the textbook rules, recording every step."""
    if q <= 0 or p < 0:
        raise ValueError("J(p/q) needs p >= 0 and q > 0")
    orig_p, orig_q = p, q
    steps: list[JacobiStep] = []

    def record(rule: str, value: int, after: bool = True) -> None:
        steps.append(
            JacobiStep(
                index=len(steps) + 1,
                p=cur_p,
                q=cur_q,
                rule=rule,
                value=value,
                next_p=p if after else None,
                next_q=q if after else None,
            )
        )

    def finish(result: int) -> JacobiTrace:
        return JacobiTrace(p=orig_p, q=orig_q, result=result, steps=steps)

    if p > q:
        p %= q
    if p == 0:
        cur_p, cur_q = p, q
        record("GCD(p,q) != 1", 0, after=False)
        return finish(0)

    result = 1
    while True:
        while p % 2 == 0:
            cur_p, cur_q = p, q
            if p == q - 1:
                value = _minus_one(q)
                if value == 0:
                    record("J(p-1/q)", value, after=False)
                    return finish(0)
                result *= value
                p = 1
                record("J(p-1/q)", value)
                break
            value = _two(q)
            if value == 0:
                record("J(p/q) = (2/q) * ((p/2)/q)", value, after=False)
                return finish(0)
            result *= value
            p //= 2
            record("J(p/q) = (2/q) * ((p/2)/q)", value)

        cur_p, cur_q = p, q
        if p == 1:
            record("J(1/q)", 1, after=False)
            return finish(result)

        value = 1 if (p % 4 != 3 or q % 4 != 3) else -1
        p, q = q % p, p
        record("J(p/q) = J(q/p)", value)

        if p == 0:
            cur_p, cur_q = p, q
            record("GCD(p,q) != 1", 0, after=False)
            return finish(0)
        result *= value


def idempotents(p: int) -> list[int]:
    """All i in 0..p-1 with i^2 = i (mod p)."""
    return [i for i in range(p) if i * i % p == i]


def factorize_number(n: int) -> list[int]:
    """Prime factors of n (with multiplicity, ascending) using primes below 1000."""
    if n < 1:
        raise ValueError(f"cannot factorise {n}")
    factors: list[int] = []
    for prime in SMALL_PRIMES:
        while n % prime == 0:
            n //= prime
            factors.append(prime)
        if n == 1:
            break
    if n != 1:
        raise ValueError(f"{n} has a prime factor above {SMALL_PRIMES[-1]}")
    return factors


def group_prime_powers(factors: list[int]) -> tuple[list[int], int]:
    """Collapse equal primes into prime powers (mod 10007); also return the largest exponent."""
    counts = Counter(factors)
    groups = [pow(prime, count, GROUP_MODULUS) for prime, count in sorted(counts.items())]
    max_power = max([1, *counts.values()])
    return groups, max_power


def carmichael_lambda(n: int) -> int:
    """Largest multiplicative order of any element modulo n (at least 1)."""
    return max([1, *(multiplicative_order(i, n) for i in range(1, n))])


def euler_phi(n: int) -> int:
    """Count of 1 together with every i in 2..n-1 coprime to n."""
    return 1 + sum(1 for i in range(2, n) if math.gcd(i, n) == 1)


def lcm_of(values: list[int]) -> int:
    """Least common multiple of positive integers (1 for an empty list)."""
    if any(v <= 0 for v in values):
        raise ValueError("lcm needs positive values")
    return math.lcm(*values)


def simplify_exponent(p: int, n: int) -> ExponentReduction:
    """Reduce the exponent of x^n mod p using x^(k + lambda) = x^k mod p."""
    factors = factorize_number(p)
    groups, max_power = group_prime_powers(factors)
    lambdas = [carmichael_lambda(g) for g in groups]
    period = lcm_of(lambdas)
    reduced = n
    while reduced > max_power:
        reduced -= period
    reduced += period
    return ExponentReduction(
        modulus=p,
        exponent=n,
        factors=factors,
        groups=groups,
        max_power=max_power,
        lambdas=lambdas,
        period=period,
        reduced=reduced,
    )


def quadratic_sieve_table(n: int) -> tuple[int, list[tuple[int, int]]]:
    """Floor square root m of n and the rows (i, (m+i)^2 - n) for i in -3..3."""
    if n < 0:
        raise ValueError("n must be non-negative")
    m = math.isqrt(n)
    return m, [(i, (m + i) ** 2 - n) for i in range(-3, 4)]