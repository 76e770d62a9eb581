"""Polynomials over GF(p): irreducibility, factoring, inverses, CRT, DFT and Berlekamp.

Polynomials are lists of integer coefficients, lowest degree first, matching
the bracketed ``[a0 a1 a2 ...]`` notation accepted by :func:`parse_poly`.
"""

from __future__ import annotations

from dataclasses import dataclass

from sympy import isprime
from sympy.polys import galoistools as gf
from sympy.polys.densearith import dup_exquo, dup_mul
from sympy.polys.domains import ZZ

from .numtheory import inverse_mod, multiplicative_order


class NotInvertibleError(ValueError):
    """Raised when a polynomial has no inverse; carries the offending gcd."""

    def __init__(self, gcd: list[int]) -> None:
        self.gcd = gcd
        super().__init__(f"polynomial is not invertible, gcd is {format_poly(gcd)}")


@dataclass(frozen=True)
class PolyCrtResult:
    """Intermediate values and result of the polynomial Chinese remainder method."""

    modulus: list[int]
    inv_mp: list[int]
    inv_np: list[int]
    result: list[int]


@dataclass(frozen=True)
class BerlekampResult:
    """Matrices produced by the first stage of Berlekamp's algorithm."""

    q_matrix: list[list[int]]
    q_minus_identity: list[list[int]]
    transposed: list[list[int]]
    echelon: list[list[int]]
    rank: int

    @property
    def factor_count(self) -> int:
        """Number of irreducible factors of a square-free input."""
        return len(self.q_matrix) - self.rank


@dataclass(frozen=True)
class DftResult:
    """Transform matrices together with the transformed and restored vectors."""

    field: int
    root: int
    matrix: list[list[int]]
    inverse_matrix: list[list[int]]
    transformed: list[int]
    restored: list[int]


def _check_prime(p: int) -> None:
    if p < 2 or not isprime(p):
        raise ValueError(f"{p} is not a prime")


def _to_gf(coeffs: list[int], p: int) -> list:
    return gf.gf_from_int_poly(list(reversed(coeffs)), p)


def _from_gf(f: list) -> list[int]:
    return [int(c) for c in reversed(f)]


def parse_poly(text: str) -> list[int]:
    """Read coefficients written as ``[a0 a1 ...]`` (brackets optional)."""
    body = text.strip()
    if body.startswith("["):
        if not body.endswith("]"):
            raise ValueError(f"invalid polynomial: {text!r}")
        body = body[1:-1]
    try:
        return [int(token) for token in body.split()]
    except ValueError:
        raise ValueError(f"invalid polynomial: {text!r}") from None


def format_poly(coeffs: list[int]) -> str:
    """Render a polynomial highest degree first, e.g. ``3x^2 + x + 1``."""
    terms = []
    for degree, coeff in enumerate(coeffs):
        if not coeff:
            continue
        piece = str(coeff) if degree == 0 or coeff != 1 else ""
        if degree == 1:
            piece += "x"
        elif degree > 1:
            piece += f"x^{degree}"
        terms.append(piece)
    return " + ".join(reversed(terms)) or "0"


def format_factorization(factors: list[tuple[list[int], int]]) -> str:
    """Render factors as ``(f2)(f1)^k `` in reverse order of the list."""
    pieces = []
    for poly, multiplicity in reversed(factors):
        piece = f"({format_poly(poly)})"
        if multiplicity > 1:
            piece += f"^{multiplicity} "
        pieces.append(piece)
    return "".join(pieces)


def is_irreducible(poly: list[int], p: int) -> bool:
    """Whether poly is irreducible over GF(p); constants are not."""
    _check_prime(p)
    f = _to_gf(poly, p)
    if gf.gf_degree(f) < 1:
        return False
    return bool(gf.gf_irreducible_p(f, p, ZZ))


def factor(poly: list[int], p: int) -> list[tuple[list[int], int]]:
    """Factor a monic polynomial over GF(p) into (irreducible factor, multiplicity)."""
    _check_prime(p)
    f = _to_gf(poly, p)
    if not f or f[0] != 1:
        raise ValueError("polynomial must be monic")
    _lc, factors = gf.gf_factor(f, p, ZZ)
    result = [(_from_gf(g), int(k)) for g, k in factors]
    return sorted(result, key=lambda item: (len(item[0]), list(reversed(item[0]))))


def _gf_inverse(a: list, m: list, p: int) -> list:
    r = gf.gf_rem(a, m, p, ZZ)
    if not r:
        raise NotInvertibleError(_from_gf(gf.gf_monic(m, p, ZZ)[1]))
    s, _t, h = gf.gf_gcdex(r, m, p, ZZ)
    if h != [1]:
        raise NotInvertibleError(_from_gf(h))
    return gf.gf_rem(s, m, p, ZZ)


def _gf_modulus(coeffs: list[int], p: int) -> list:
    m = _to_gf(coeffs, p)
    if gf.gf_degree(m) < 1:
        raise ValueError("modulus polynomial must have positive degree")
    return m


def inverse_poly(a: list[int], modulus: list[int], p: int) -> list[int]:
    """Inverse of a modulo the polynomial modulus over GF(p)."""
    _check_prime(p)
    m = _gf_modulus(modulus, p)
    return _from_gf(_gf_inverse(_to_gf(a, p), m, p))


def poly_crt(a: list[int], mp: list[int], b: list[int], np_: list[int], p: int) -> PolyCrtResult:
    """Solve f = a (mod mp), f = b (mod np_) over GF(p)."""
    _check_prime(p)
    mp_g = _gf_modulus(mp, p)
    np_g = _gf_modulus(np_, p)
    g = gf.gf_gcd(mp_g, np_g, p, ZZ)
    if g != [1]:
        raise NotInvertibleError(_from_gf(g))
    modulus = gf.gf_mul(mp_g, np_g, p, ZZ)
    inv_np = _gf_inverse(mp_g, np_g, p)
    inv_mp = _gf_inverse(np_g, mp_g, p)
    term_a = gf.gf_mul(gf.gf_mul(_to_gf(a, p), inv_mp, p, ZZ), np_g, p, ZZ)
    term_b = gf.gf_mul(gf.gf_mul(_to_gf(b, p), inv_np, p, ZZ), mp_g, p, ZZ)
    result = gf.gf_rem(gf.gf_add(term_a, term_b, p, ZZ), modulus, p, ZZ)
    return PolyCrtResult(
        modulus=_from_gf(modulus),
        inv_mp=_from_gf(inv_mp),
        inv_np=_from_gf(inv_np),
        result=_from_gf(result),
    )


def cyclotomic_polynomials(limit: int) -> dict[int, list[int]]:
    """Integer cyclotomic polynomials Phi_1 .. Phi_limit."""
    phi: dict[int, list] = {}
    for i in range(1, limit + 1):
        divisor = [ZZ(1)]
        for j in range(1, i):
            if i % j == 0:
                divisor = dup_mul(divisor, phi[j], ZZ)
        numerator = [ZZ(1)] + [ZZ(0)] * (i - 1) + [ZZ(-1)]
        phi[i] = dup_exquo(numerator, divisor, ZZ)
    return {i: [int(c) for c in reversed(f)] for i, f in phi.items()}


def find_dft_field(n: int) -> int:
    """First prime of the form n*i + 1 with i in 1..4."""
    if n < 1:
        raise ValueError("transform order must be positive")
    for i in range(1, 5):
        if isprime(n * i + 1):
            return n * i + 1
    raise ValueError(f"no prime field found for order {n}")


def find_root_of_order(n: int, p: int) -> int:
    """Smallest element of Z_p whose multiplicative order is n."""
    if n < 1:
        raise ValueError("order must be positive")
    for candidate in range(p):
        if multiplicative_order(candidate, p) == n:
            return candidate
    raise ValueError(f"no element of order {n} modulo {p}")


def dft(vector: list[int], n: int, p: int, root: int | None = None) -> DftResult:
    """Transform vector with H[i][j] = root^(i*j) mod p and transform it back."""
    if n < 1:
        raise ValueError("transform order must be positive")
    if len(vector) != n:
        raise ValueError(f"vector must have {n} entries, got {len(vector)}")
    if p < 2:
        raise ValueError("field modulus must be at least 2")
    if root is None:
        root = find_root_of_order(n, p)
    elif multiplicative_order(root, p) != n:
        raise ValueError(f"{root} is not of order {n} modulo {p}")

    matrix = [[pow(root, i * j, p) for j in range(n)] for i in range(n)]
    inverse_matrix = [[inverse_mod(value, p) for value in row] for row in matrix]

    def times(vec: list[int], mat: list[list[int]]) -> list[int]:
        return [sum(v * c for v, c in zip(vec, column)) % p for column in zip(*mat)]

    transformed = times([v % p for v in vector], matrix)
    inv_n = inverse_mod(n, p)
    restored = [inv_n * v % p for v in times(transformed, inverse_matrix)]
    return DftResult(
        field=p,
        root=root,
        matrix=matrix,
        inverse_matrix=inverse_matrix,
        transformed=transformed,
        restored=restored,
    )


def _echelon(rows: list[list[int]], p: int) -> tuple[list[list[int]], int]:
    matrix = [row[:] for row in rows]
    height = len(matrix)
    width = len(matrix[0]) if matrix else 0
    rank = 0
    for col in range(width):
        if rank == height:
            break
        pivot = next((r for r in range(rank, height) if matrix[r][col]), None)
        if pivot is None:
            continue
        matrix[rank], matrix[pivot] = matrix[pivot], matrix[rank]
        neg_inv = -pow(matrix[rank][col], -1, p) % p
        for r in range(rank + 1, height):
            mult = matrix[r][col] * neg_inv % p
            if mult:
                matrix[r] = [(x + mult * y) % p for x, y in zip(matrix[r], matrix[rank])]
        rank += 1
    return matrix, rank


def berlekamp_matrix(poly: list[int], p: int) -> BerlekampResult:
    """Build Q from x^(p*i) mod poly, then (Q - I)^T and its row echelon form."""
    _check_prime(p)
    f = _to_gf(poly, p)
    degree = gf.gf_degree(f)
    if degree < 1:
        raise ValueError("polynomial must have positive degree")
    q_matrix = []
    for i in range(degree):
        reduced = _from_gf(gf.gf_pow_mod([ZZ(1), ZZ(0)], p * i, f, p, ZZ))
        q_matrix.append(reduced + [0] * (degree - len(reduced)))
    q_minus_identity = [
        [(value - (1 if r == c else 0)) % p for c, value in enumerate(row)]
        for r, row in enumerate(q_matrix)
    ]
    transposed = [list(column) for column in zip(*q_minus_identity)]
    echelon, rank = _echelon(transposed, p)
    return BerlekampResult(
        q_matrix=q_matrix,
        q_minus_identity=q_minus_identity,
        transposed=transposed,
        echelon=echelon,
        rank=rank,
    )