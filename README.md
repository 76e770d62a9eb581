# cryptoexercises

A toolbox for working through exercises in number theory, polynomials over
finite fields and classroom cryptography. Many routines return the
intermediate values along with the result, so you can check a hand
calculation step by step.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

The only runtime dependency is `sympy`.

## Interactive use

```
cryptoexercises
```

This prints a banner and a menu of four topics:

1. RAL: multiplicative order, modular inverse, irreducibility and factoring of
   polynomials mod a prime, polynomial inverse, CRT for integers and for
   polynomials, DFT over a prime field, the quadratic sieve table, the
   Berlekamp matrix, and square roots mod a prime.
2. ZKRY1: quadratic residues, the Jacobi symbol (plain and with a worked
   derivation), brute-force square roots, idempotents, the step-by-step CRT
   and reduction of the exponent of `x^n mod p`.
3. ZKRY2: the affine letter cipher in ECB/CBC/CFB/OFB/CTR modes (encrypt and
   decrypt), RSA with CRT decryption, ElGamal decryption, elliptic curve
   points and addition, Gordon's strong prime construction, plain RSA
   encryption and decryption.
4. NKS: the AES S-box table and a full AES-128 trace of the fixed example
   block `32 43 f6 a8 ...` under the key `2b 7e 15 16 ...`.

Pick a topic, then an exercise, and enter the values when asked. The menus
and prompts are in Slovak. Polynomials are typed as coefficient lists, lowest
degree first, e.g. `[1 0 1]` for `x^2 + 1`. Enter `0` to go back a level or
to quit; the program also stops at the end of input. Invalid input to an
exercise is reported as `Chyba: ...` and the menu continues.

## Library use

- `cryptoexercises.numtheory`: `multiplicative_order`, `inverse_mod`,
  `jacobi`, `jacobi_steps` (returns a `JacobiTrace` of `JacobiStep`s),
  `sqrt_mod`, `crt` and `crt_steps` (returns `CrtSteps`),
  `quadratic_residues`, `square_roots`, `idempotents`, `factorize_number`
  (primes below 1000 only), `group_prime_powers`, `carmichael_lambda`,
  `euler_phi`, `lcm_of`, `simplify_exponent` (returns `ExponentReduction`)
  and `quadratic_sieve_table`.
- `cryptoexercises.polymod`: `parse_poly`, `format_poly`,
  `format_factorization`, `is_irreducible`, `factor` (monic input),
  `inverse_poly` and `poly_crt` (raise `NotInvertibleError` carrying the gcd),
  `cyclotomic_polynomials`, `find_dft_field`, `find_root_of_order`, `dft`
  (returns `DftResult`) and `berlekamp_matrix` (returns `BerlekampResult`).
- `cryptoexercises.aes`: `sub_bytes`, `shift_rows`, `mix_columns`,
  `add_round_key`, `next_round_key`, `encrypt`, `encrypt_trace` (every
  labelled intermediate state), `parse_block`, `format_state` and
  `sbox_table`.
- `cryptoexercises.modes`: `Mode`, `AffineFunction`, `letter_values`,
  `encrypt` and `decrypt` (returns `DecryptResult`; CBC and CFB recover the
  initial value from the ciphertext).
- `cryptoexercises.publickey`: `rsa_encrypt`, `rsa_decrypt`, `rsa_crt`
  (returns `RsaCrtResult`), `elgamal_decrypt`, `brute_inverse`, `is_curve`,
  `curve_points`, `point_add` (returns `CurveSum`), `addition_table`,
  `is_prime_trial` and `strong_prime` (returns `StrongPrimeResult`).
- `cryptoexercises.cli`: the `Console` menu class and `main`.

Example:

```python
from cryptoexercises import aes, numtheory

numtheory.jacobi(2, 7)          # 1
numtheory.crt(2, 3, 3, 5)       # (8, 15)

ciphertext = aes.encrypt(
    aes.parse_block("32 43 f6 a8 88 5a 30 8d 31 31 98 a2 e0 37 07 34"),
    aes.parse_block("2b 7e 15 16 28 ae d2 a6 ab f7 15 88 09 cf 4f 3c"),
)
```

## Limitations

- The AES menu entry always encrypts the built-in example block; use
  `aes.encrypt` from Python for other data. Only encryption is provided.
- There is no solver for linear congruences `Ax + b = c (mod m)`.
- Cyclotomic polynomials are available only through
  `polymod.cyclotomic_polynomials`; nothing is written to files.

## Running the tests

```
pytest
```