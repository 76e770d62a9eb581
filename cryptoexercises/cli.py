"""Interactive menu for the number-theory, polynomial and cipher exercises."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable

from sympy import isprime

from . import aes, modes, numtheory, polymod, publickey

BANNER = (
    "  ~~~~ ____   |~~~~~~~~~~~~~~~~~~~~| \n"
    " Y_,___|[]|   | SCAM TRAIN POOGERS | \n"
    "{|_|_|_|PU|_,_|____________________| \n"
    "//oo---OO=OO   OOO     OOO      OOO  \n"
)

MAIN_MENU = (
    "\n Vyber predmet:\n"
    " 0- ukoncenie programu\n"
    " 1- RAL\n"
    " 2- ZKRY1\n"
    " 3- ZKRY2 + RT2020\n"
    " 4- NKS\n"
)

SUBJECT_MENUS = {
    1: (
        "\n RAL funkcie\n"
        "  0- navrat do menu.\n"
        "  1- ord_Zp\n"
        "  2- INV_Zp, 5- INV_Zp[x]\n"
        "  3- is poly A irred mod M\n"
        "  4- factor poly A mod M\n"
        "  6- CRT_Zp, 7- CRT_Zp[x]\n"
        "  8- DFT_Zp,\n"
        "  9- kvadraticke_sito\n"
        " 10- berlekamp\n"
        " 11- sqrt\n"
    ),
    2: (
        "\n ZKRY zapocet1 funkcie\n"
        " 0- navrat do menu.\n"
        " 1- pre vsetky X={1..p-1} vypis vsetky A pre ktore plati ze X^2 = A mod P"
        " (mnozina kvadratickych zvyskov modulo P)\n"
        " 2- Jakobi bez postupu, iba rovno vysledok (zisti ci x^2 = a mod p ma riesenie)\n"
        " 3- vypis vsetky x pre x^2 = a mod p\n"
        " 4- Jakobi s postupom pre a mod p\n"
        " 5- list indeponentov modulo p\n"
        " 6- my CRT test\n"
        " 7- zjednodus vyraz X^n modulo p\n"
    ),
    3: (
        "\n ZKRY zapocet2 funkcie\n"
        " 0- navrat do menu.\n"
        " 1- sifrovanie   (ecb, cbc, cfb, ofb, ctr)\n"
        " 2- desifrovanie (ecb, cbc, cfb, ofb, ctr)\n"
        " ZKRY RT2020 funkcie\n"
        " 3- RSA\n"
        " 4- El gamal\n"
        " 5- epilepticke krivky\n"
        " 6- Gordon Helman Bach\n"
        " Ostatne funkcie\n"
        " 7- RSA sifrovanie\n"
        " 8- RSA desifrovanie\n"
    ),
    4: (
        "\n NKS funkcie\n"
        " 0- navrat do menu.\n"
        " 1- Sbox\n"
        " 2- AES\n"
    ),
}

WRONG_INPUT = "\n!!!NEPLATNY VSTUP!!!\n"
DONE = "########## Koniec vypoctu ##########\n"
CLEAR_SCREEN = "\033c"

AES_PLAINTEXT = "32 43 f6 a8 88 5a 30 8d 31 31 98 a2 e0 37 07 34"
AES_KEY = "2b 7e 15 16 28 ae d2 a6 ab f7 15 88 09 cf 4f 3c"

MODE_PROMPT = "Aky mod chces pouzit?: 1-ecb, 2-cbc, 3-cfb, 4-ofb, 5-ctr: "


class _EndOfInput(Exception):
    """Raised when the input source is exhausted."""


def _fmt_list(values) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def _fmt_matrix(rows) -> str:
    return "[" + "\n".join(_fmt_list(row) for row in rows) + "\n]"


def _reduce(poly: list[int], p: int) -> list[int]:
    coeffs = [c % p for c in poly]
    while coeffs and coeffs[-1] == 0:
        coeffs.pop()
    return coeffs


class Console:
    """Menu-driven session; ``read`` returns one line ("" at end), ``write`` prints text."""

    def __init__(self, read: Callable[[], str], write: Callable[[str], None]) -> None:
        self._read = read
        self._write = write
        self._tokens: deque[str] = deque()
        self._actions: dict[int, list[Callable[[], None]]] = {
            1: [
                self._order,
                self._inverse,
                self._irreducible,
                self._factor,
                self._inverse_poly,
                self._basic_crt,
                self._poly_crt,
                self._dft,
                self._sieve,
                self._berlekamp,
                self._sqrt,
            ],
            2: [
                self._residues,
                self._jacobi_symbol,
                self._square_roots,
                self._jacobi_steps,
                self._idempotents,
                self._crt_steps,
                self._simplify,
            ],
            3: [
                self._encrypt,
                self._decrypt,
                self._rsa_crt,
                self._elgamal,
                self._curves,
                self._strong_prime,
                self._rsa_encrypt,
                self._rsa_decrypt,
            ],
            4: [self._sbox, self._aes],
        }

    def run(self) -> int:
        """Run the menu loop until the user quits or the input ends; return 0."""
        self._write(BANNER)
        try:
            while True:
                self._write(MAIN_MENU)
                subject = self._menu_choice()
                if subject not in self._actions and subject != 0:
                    self._write(WRONG_INPUT)
                    continue
                if subject == 0:
                    return 0
                self._write(SUBJECT_MENUS[subject])
                self._subject_loop(subject)
                self._write(CLEAR_SCREEN)
        except _EndOfInput:
            return 0

    def _subject_loop(self, subject: int) -> None:
        actions = self._actions[subject]
        while True:
            choice = self._menu_choice()
            if choice is None or not 0 <= choice <= len(actions):
                self._write(WRONG_INPUT)
                continue
            if choice == 0:
                return
            try:
                actions[choice - 1]()
            except (ValueError, ZeroDivisionError) as exc:
                self._write(f"\nChyba: {exc}\n")
            self._write(DONE)

    # input helpers

    def _token(self) -> str:
        while not self._tokens:
            line = self._read()
            if not line:
                raise _EndOfInput
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def _menu_choice(self) -> int | None:
        token = self._token()
        try:
            return int(token)
        except ValueError:
            return None

    def _int(self) -> int:
        token = self._token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"ocakavane cele cislo, nie {token!r}") from None

    def _ask_int(self, prompt: str) -> int:
        self._write(prompt)
        return self._int()

    def _bracketed(self) -> str:
        parts = [self._token()]
        if parts[0].startswith("["):
            while not parts[-1].endswith("]"):
                parts.append(self._token())
        return " ".join(parts)

    def _ask_poly(self, prompt: str, p: int) -> list[int]:
        self._write(prompt)
        return _reduce(polymod.parse_poly(self._bracketed()), p)

    def _ask_congruences(self) -> tuple[int, int, int, int]:
        m = self._ask_int("Zadaj modulo M: ")
        a = self._ask_int("Zadaj hodnotu A: ")
        n = self._ask_int("Zadaj modulo N: ")
        b = self._ask_int("Zadaj hodnotu B: ")
        return m, a, n, b

    # RAL

    def _order(self) -> None:
        m = self._ask_int("Input modulo M: ")
        a = self._ask_int("Input value A: ")
        order = numtheory.multiplicative_order(a, m)
        self._write(f"ord of value: {a} modulo: {m} is: {order}\n")

    def _inverse(self) -> None:
        m = self._ask_int("Input mod M: ")
        a = self._ask_int("Input val A: ")
        self._write(f"invA: {numtheory.inverse_mod(a, m)}\n")

    def _irreducible(self) -> None:
        m = self._ask_int("Input mod M: ")
        poly = self._ask_poly("Input polynom A: ", m)
        verdict = "is" if polymod.is_irreducible(poly, m) else "is not"
        self._write(f"your polynom {_fmt_list(poly)} {verdict} irreducible mod {m}\n")

    def _factor(self) -> None:
        m = self._ask_int("Input mod M: ")
        poly = self._ask_poly("Input polynom A: ", m)
        factors = polymod.factor(poly, m)
        raw = "[" + " ".join(f"[{_fmt_list(f)} {k}]" for f, k in factors) + "]"
        self._write(f"Vysledkom faktorizacie je: {polymod.format_factorization(factors)}.\n")
        self._write(f"Raw format: {raw}\n")

    def _inverse_poly(self) -> None:
        m = self._ask_int("Input mod M: ")
        mp = self._ask_poly("Input polynom MP: ", m)
        a = self._ask_poly("Input polynom A: ", m)
        try:
            inverse = polymod.inverse_poly(a, mp, m)
        except polymod.NotInvertibleError as exc:
            self._write(f"GCD: {_fmt_list(exc.gcd)}\n")
            return
        self._write(f"invA: {polymod.format_poly(inverse)}\n")
        self._write(f"Raw format: {_fmt_list(inverse)}\n")

    def _basic_crt(self) -> None:
        m, a, n, b = self._ask_congruences()
        x, product = numtheory.crt(a, m, b, n)
        self._write(f"result: {x} mod: {product}\n")

    def _poly_crt(self) -> None:
        p = self._ask_int("Input mod M: ")
        mp = self._ask_poly("Zadaj polynom MP: ", p)
        a = self._ask_poly("Zadaj polynom A: ", p)
        np_ = self._ask_poly("Zadaj polynom NP: ", p)
        b = self._ask_poly("Zadaj polynom B: ", p)
        fmt = polymod.format_poly
        self._write(f"\nzadane pole: GF({p})\n")
        self._write(f"\nzadany polynom A: {fmt(a)}\nmodulo MP: {fmt(mp)}\n")
        self._write(f"\nzadany polynom B: {fmt(b)}\nmodulo NP: {fmt(np_)}\n\n")
        try:
            result = polymod.poly_crt(a, mp, b, np_, p)
        except polymod.NotInvertibleError as exc:
            self._write(f"GCD(MP,NP) != 1, ale: {_fmt_list(exc.gcd)}\n")
            return
        self._write("M = MP * NP\n")
        self._write(f"M: {fmt(result.modulus)}\nRaw format: {_fmt_list(result.modulus)}\n\n")
        self._write(f"inv_MP: {fmt(result.inv_mp)}\nRaw format: {_fmt_list(result.inv_mp)}\n\n")
        self._write(f"inv_NP: {fmt(result.inv_np)}\nRaw format: {_fmt_list(result.inv_np)}\n\n")
        self._write("result = (A * inv_MP * NP + B * inv_NP * MP) % M\n")
        self._write(f"result: {fmt(result.result)}\nRaw format: {_fmt_list(result.result)}\n")

    def _dft(self) -> None:
        n = self._ask_int("zadaj n, pre DFT n-teho radu: ")
        self._write("Chces zadat vlasne pole? (Y/N)")
        if self._token() == "N":
            field = polymod.find_dft_field(n)
            self._write(f"pole ktore sa pouzije  je: {field}\n")
        else:
            field = self._ask_int("\n Zadaj pole ")
        self._write("Chces zadat vlasny prvok z tohoto pola? (Y/N)")
        if self._token() == "N":
            root = polymod.find_root_of_order(n, field)
            self._write(f"prvok {root} je radu {n} v poli {field}\n")
        else:
            root = self._ask_int(f"\n Zadaj prvok radu {n} z pola {field}")
            if numtheory.multiplicative_order(root, field) != n:
                self._write(f"zadany prvok nie je radu {n} v poli {field}\n")
                return
        matrices = polymod.dft([0] * n, n, field, root)
        self._write(f"obsah matice H je: \n{_fmt_matrix(matrices.matrix)}\n")
        self._write(f"obsah matice H2 je: \n{_fmt_matrix(matrices.inverse_matrix)}\n")
        self._write("zadaj vektor V na zobrazenie: ")
        vector = polymod.parse_poly(self._bracketed())
        result = polymod.dft(vector, n, field, root)
        self._write(f"vektor V' je: {_fmt_list(result.transformed)}\n")
        self._write(f"overenie V = 1/n * V' * H' = {_fmt_list(result.restored)}\n\n")

    def _sieve(self) -> None:
        n = self._ask_int("zadaj N: ")
        m, rows = numtheory.quadratic_sieve_table(n)
        self._write(f"Spodny stvorec ku {n} je {m}\n")
        self._write(" i |Q(i)=(m+i)^2 -N | rozklad\n")
        for i, value in rows:
            self._write(f" {i} |   {value} | \n")

    def _berlekamp(self) -> None:
        p = self._ask_int("zadaj modulo p: ")
        poly = self._ask_poly("\nzadaj polynom: ", p)
        self._write(f" zadany polynom: {polymod.format_poly(poly)}\n")
        result = polymod.berlekamp_matrix(poly, p)
        for i, row in enumerate(result.q_matrix):
            before = polymod.format_poly([0] * (p * i) + [1])
            self._write(f"polynom na {i} riadku je pred redukciou: {before}\n")
            self._write(f" po redukcii: {polymod.format_poly(row)}\n\n")
        size = len(result.q_matrix)
        identity = [[int(r == c) for c in range(size)] for r in range(size)]
        self._write(f"matica ma teda tvar Q: \n{_fmt_matrix(result.q_matrix)}\n")
        self._write(f"jednotkova matica I: \n{_fmt_matrix(identity)}\n")
        self._write(f"Q-I \n{_fmt_matrix(result.q_minus_identity)}\n")
        self._write(f"Q-I transponovana: \n{_fmt_matrix(result.transposed)}\n")
        self._write(f"vysledok gaussovej eliminacie: \n{_fmt_matrix(result.echelon)}\n")

    def _sqrt(self) -> None:
        p = self._ask_int("zadaj modulo p: ")
        a = self._ask_int("zadaj value a: ")
        if not isprime(p):
            self._write("p nieje prvocislo\n")
        symbol = numtheory.jacobi(a, p)
        self._write(f"Jakobi pre {a} modulo: {p} je: {symbol}\n")
        if symbol == 1:
            b, c = numtheory.sqrt_mod(a, p)
            self._write(f"Korene z: {a} modulo: {p} su: {b} a {c}\n")

    # ZKRY1

    def _residues(self) -> None:
        p = self._ask_int("zadaj modulo p: ")
        self._write(f"{_fmt_list(numtheory.quadratic_residues(p))}\n")

    def _jacobi_symbol(self) -> None:
        p = self._ask_int("zadaj modulo p: ")
        a = self._ask_int("zadaj value a: ")
        symbol = numtheory.jacobi(a, p)
        self._write(f"pre value: {a % p} modulo: {p} je jakobiho symbol: {symbol}\n")

    def _square_roots(self) -> None:
        p = self._ask_int("zadaj modulo p: ")
        a = self._ask_int("zadaj value a: ")
        roots = numtheory.square_roots(a, p)
        self._write(f"Result bruteforce korenov: {_fmt_list(roots)}\n")
        if p > 2 and isprime(p) and numtheory.jacobi(a, p) == 1:
            b, c = numtheory.sqrt_mod(a, p)
            self._write(f"Korene z hodnoty: {a} modulo: {p} su: {b} a {c}\n")

    def _jacobi_steps(self) -> None:
        self._write("Priklad na ratanie Jacobiho symbolu s postupom pre J(p/q):\n")
        p = self._ask_int("zadaj p: ")
        q = self._ask_int("zadaj q: ")
        trace = numtheory.jacobi_steps(p, q)
        for step in trace.steps:
            self._write(f"\n{step.index}...pre J({step.p}/{step.q}) plati pravidlo {step.rule}")
            self._write(f"\nmedzivysledok je -> {step.value}\n")
            if step.next_p is not None:
                self._write(f"vysledok operacie = J({step.next_p}/{step.next_q})\n")
        self._write(f"\nVysledok pre J({p}/{q}) = {trace.result}\n\n")

    def _idempotents(self) -> None:
        p = self._ask_int("zadaj modulo p: ")
        self._write(f"{_fmt_list(numtheory.idempotents(p))}\n")

    def _crt_steps(self) -> None:
        m, a, n, b = self._ask_congruences()
        s = numtheory.crt_steps(a, m, b, n)
        self._write(
            f"mod1 * mod2: {s.product}\n"
            f"inv prvok prva rovnica: {s.inv_m}\n"
            f"inv prvok druha rovnica: {s.inv_n}\n"
            f" prvok A( {a} ) * invMP( {s.inv_m} ) *  modulo NP( {n}) = {s.term_a}\n"
            f" prvok B( {b} ) * invNP( {s.inv_n} ) *  modulo MP( {m}) = {s.term_b}\n"
            f"tieto vysledky teraz scitam a zmodulujem-> ( {s.total} ) % ({s.product}) = "
            f"{s.result} mod {s.product}\n"
        )

    def _simplify(self) -> None:
        p = self._ask_int(" zadaj modulo p: ")
        n = self._ask_int(" pre X^n zadaj n: ")
        r = numtheory.simplify_exponent(p, n)
        lams = ", ".join(f" lam( {g} )" for g in r.groups)
        values = ", ".join(str(v) for v in r.lambdas)
        self._write(
            f" hodnota p( {p} ) rozlozena na prvociselne delitele : {_fmt_list(r.factors)}\n"
            f" prvocisla zgrupene podla rovnakych do skupin: {_fmt_list(r.groups)}\n"
            f" lambda( {p} ) = lcm( {lams} ) = lcm( {values} ) = {r.period}\n"
            f" Vzorec na upravu teda vyzera takto: x^( {r.max_power} + {r.period} ) = "
            f"x^( {r.max_power} ) mod {p}\n"
            f" takze originalny vyraz: x^ ( {n} ) modulo {p} je zjednoduseny na : "
            f"x^ ( {r.reduced} ) mod {p}\n"
        )

    # ZKRY2

    def _ask_mode(self) -> modes.Mode:
        choice = self._ask_int(MODE_PROMPT)
        try:
            return modes.Mode(choice)
        except ValueError:
            raise ValueError(f"neznamy mod {choice}") from None

    def _ask_text(self, label: str) -> str:
        self._write(f"Zadaj {label}: ")
        text = self._token()
        self._write("".join(f"{v} " for v in modes.letter_values(text)))
        return text

    def _ask_function(self) -> modes.AffineFunction:
        self._write("Zadaj parametre (a b c) funkcie f pre Ax+b mod c:")
        a, b, c = self._int(), self._int(), self._int()
        self._write(f"{a}x + {b} mod {c}\n")
        return modes.AffineFunction(a, b, c)

    def _encrypt(self) -> None:
        mode = self._ask_mode()
        text = self._ask_text("OT")
        iv = 0 if mode is modes.Mode.ECB else self._ask_int("Zadaj hodnotu IV: ")
        func = self._ask_function()
        self._write(f"{modes.encrypt(text, mode, func, iv)}\n")

    def _decrypt(self) -> None:
        mode = self._ask_mode()
        text = self._ask_text("ZT")
        iv = 0
        if mode in (modes.Mode.OFB, modes.Mode.CTR):
            iv = self._ask_int("Zadaj hodnotu IV: ")
        func = self._ask_function()
        result = modes.decrypt(text, mode, func, iv)
        if result.iv is None:
            self._write(f"{result.plaintext}\n")
        else:
            self._write(f"\nOT: {result.plaintext}\nIV: {result.iv}\n")

    def _rsa_crt(self) -> None:
        self._write("pre VK(n,e) a msg x, zadaj n,e,x:")
        n, e, x = self._int(), self._int(), self._int()
        factors = numtheory.factorize_number(n)
        self._write(f" hodnota n( {n} ) rozlozena na prvociselne delitele : {_fmt_list(factors)}\n")
        r = publickey.rsa_crt(n, e, x)
        self._write(
            f" lambda( {n} ) = lcm(  lam( {r.p} ),  lam( {r.q} ) ) = "
            f"lcm( {', '.join(str(v) for v in r.lambdas)} ) = {r.period}\n"
            f" {e} x d = 1 (mod {r.period}) -> d = {e}^-1(inverzny prvok) -> d = {r.d}\n"
            "Algorytmus rychleho desifrovania:\n"
            f"d1= {r.d}(mod {r.p - 1}) = {r.d1}\n"
            f"d2= {r.d}(mod {r.q - 1}) = {r.d2}\n"
            f"y1= {x}(mod {r.p}) = {r.y1}\n"
            f"y2= {x}(mod {r.q}) = {r.y2}\n"
            f"x1= {r.y1}^{r.d1}(mod {r.p}) = {r.x1}\n"
            f"x2= {r.y2}^{r.d2}(mod {r.q}) = {r.x2}\n"
            f"u= {r.q}^-1(mod {r.p}) = {r.u}\n"
            f"v= {r.p}^-1(mod {r.q}) = {r.v}\n"
            "result-> (x1 * u * q + x2 * v * p) mod n\n"
            f"( {r.x1} * {r.u} * {r.q} + {r.x2} * {r.v} * {r.p} ) mod {n} = {r.result}\n"
        )

    def _elgamal(self) -> None:
        self._write("Zadaj VK(p,a,c): ")
        p, a, c = self._int(), self._int(), self._int()
        self._write("Zadaj ZT: ")
        ciphertext = self._token()
        self._write("Zadaj prekladovu tabulku: ")
        table = self._token()
        offset = self._ask_int("Zadaj offset zaciatku indexovania: ")
        b, rows = publickey.elgamal_decrypt(p, a, c, ciphertext, table, offset)
        self._write(
            "Ak pozname b tak mozeme desifrovat podla vzorca x = y2 * (y1^b)^-1 mod p,"
            " kde y1,y2 je ZT a x je OT\n"
            f"b je :{b}\n"
            "_________________________________________\n"
            "|            |   A  |   B  |             |\n"
            "| ZT=(y1,y2) | y1^b | A^-1 | y2 * B | OT |\n"
        )
        for row in rows:
            first, second = row.pair
            self._write(
                f"|({first},{second})=({row.y1},{row.y2})|  {row.a_value}  |  {row.b_value}"
                f"  |   {row.plaintext_value}   | {row.letter}  |\n"
            )

    def _curves(self) -> None:
        self._write("Zadaj parametre (a,b,p) pre krivku y^2 = x^3 + ax + b mod p: ")
        a, b, p = self._int(), self._int(), self._int()
        if not publickey.is_curve(a, b, p):
            self._write("Zadane parametre netvoria elipticku krivku.\n")
            return
        self._write("Zadane parametre tvoria elipticku krivku.\n")
        points = publickey.curve_points(a, b, p)
        for index, (x, y) in enumerate(points[:20], 1):
            self._write(f"Bod {index} x, y = [{x}, {y}]\n")
        self._write(self._curve_table(points[:5], a, p))
        while True:
            self._write("Stlac 0 pre ukoncenie prikladu\nStlac 1 pre vypocet konkretneho suctu:")
            choice = self._token()
            if choice == "0":
                return
            if choice == "1":
                self._curve_sum(a, p)

    @staticmethod
    def _curve_table(points, a: int, p: int) -> str:
        def cell(point) -> str:
            return "   0   " if point is None else f"| ({point[0]},{point[1]})"

        grid = publickey.addition_table(points, a, p)
        lines = [" +     " + "".join(cell(point) for point in points)]
        lines.extend(
            cell(point) + "".join(cell(value) for value in row)
            for point, row in zip(points, grid)
        )
        return "\n".join(lines) + "\n"

    def _curve_sum(self, a: int, p: int) -> None:
        self._write("zadaj P(x1,y1): ")
        first = (self._int(), self._int())
        self._write("zadaj Q(x2,y2): ")
        second = (self._int(), self._int())
        total = publickey.point_add(first, second, a, p)
        if total.point is None:
            self._write("P + Q = 0\n")
            return
        if total.doubling:
            self._write("lam= (3 * x1^2 + a) * (2 * y1)^-1 mod p\n")
        else:
            self._write("lam= (y2 - y1) * (x2 - x1)^-1 mod p\n")
        x3, y3 = total.point
        self._write(
            f"lam = {total.lam}\n"
            "x3= lam^2 - x1 - x2\n"
            f"x3= {x3}\n"
            "y3= lam * (x1 - x3) - y1\n"
            f"y3= {y3}\n"
            f"P({first[0]},{first[1]}) + Q({second[0]},{second[1]}) = ({x3},{y3})\n"
        )

    def _strong_prime(self) -> None:
        self._write("Zadaj parametre s,t a pocet bitov b: ")
        s, t, bits = self._int(), self._int(), self._int()
        result = publickey.strong_prime(s, t, bits)
        for i, candidate in enumerate(result.q_candidates, 1):
            self._write(f"i: {i},q: {candidate}\n")
        self._write(
            "p0= 2 * (s^(q-2) mod q) * s -1\n"
            f"p0= 2 * ({s}^({result.q - 2}) mod {result.q})* {s} - 1\n"
            f"p0={result.p0}\n"
        )
        for i, candidate in enumerate(result.p_candidates):
            self._write(f"i: {i},p: {candidate}\n")
        self._write(f"Cislo p({result.p}) je silne prvocislo s {bits} alebo viac bitmi.\n")

    def _rsa_encrypt(self) -> None:
        self._write("Zadaj VK(n,e) a spravu x:")
        n, e, x = self._int(), self._int(), self._int()
        value = publickey.rsa_encrypt(n, e, x)
        self._write(f"E(x)= x^e mod n\nE(x)= {x}^{e} mod {n} = {value}\n")

    def _rsa_decrypt(self) -> None:
        self._write("Zadaj PK(n,d) a spravu y:")
        n, d, y = self._int(), self._int(), self._int()
        value = publickey.rsa_decrypt(n, d, y)
        self._write(f"D(y)= y^d mod n\nD(y)= {y}^{d} mod {n} = {value}\n")

    # NKS

    def _sbox(self) -> None:
        self._write(aes.sbox_table() + "\n")

    def _aes(self) -> None:
        self._write(f"mod: {aes.MODULUS:x}\n")
        plaintext = aes.parse_block(AES_PLAINTEXT)
        key = aes.parse_block(AES_KEY)
        for label, state in aes.encrypt_trace(plaintext, key):
            self._write(f"{label}:\n{aes.format_state(state)}\n\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive exercise menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="cryptoexercises",
        description="Interactive number theory and cryptography exercises.",
    )
    parser.parse_args(argv)

    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    return Console(sys.stdin.readline, write).run()


if __name__ == "__main__":
    sys.exit(main())