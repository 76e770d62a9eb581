import io
import sys

from cryptoexercises import aes, modes, numtheory, polymod, publickey
from cryptoexercises.cli import Console, main


def run_console(text):
    lines = iter(text.splitlines(keepends=True))
    output = []
    code = Console(lambda: next(lines, ""), output.append).run()
    return code, "".join(output)


def test_exit_immediately():
    code, out = run_console("0\n")
    assert code == 0
    assert "Vyber predmet" in out
    assert "NEPLATNY VSTUP" not in out


def test_end_of_input_returns_zero():
    code, out = run_console("")
    assert code == 0
    assert "Vyber predmet" in out


def test_invalid_subject():
    code, out = run_console("9\n0\n")
    assert code == 0
    assert "!!!NEPLATNY VSTUP!!!" in out


def test_non_integer_subject():
    _code, out = run_console("abc\n0\n")
    assert "!!!NEPLATNY VSTUP!!!" in out


def test_invalid_function_number():
    _code, out = run_console("1\n12\n0\n0\n")
    assert "!!!NEPLATNY VSTUP!!!" in out
    assert "Koniec vypoctu" not in out


def test_order():
    _code, out = run_console("1\n1\n7\n3\n0\n0\n")
    expected = numtheory.multiplicative_order(3, 7)
    assert f"ord of value: 3 modulo: 7 is: {expected}\n" in out
    assert "Koniec vypoctu" in out


def test_inverse():
    _code, out = run_console("1\n2\n7\n3\n0\n0\n")
    assert f"invA: {numtheory.inverse_mod(3, 7)}\n" in out


def test_inverse_error_is_reported():
    _code, out = run_console("1\n2\n4\n2\n0\n0\n")
    assert "Chyba" in out
    assert "invA" not in out
    assert "Koniec vypoctu" in out


def test_basic_crt():
    _code, out = run_console("1\n6\n3\n2\n5\n3\n0\n0\n")
    x, product = numtheory.crt(2, 3, 3, 5)
    assert f"result: {x} mod: {product}\n" in out


def test_irreducible_and_reducible():
    _code, out = run_console("1\n3\n2\n[1 1 1]\n3\n2\n[1 0 1]\n0\n0\n")
    assert "your polynom [1 1 1] is irreducible mod 2" in out
    assert "your polynom [1 0 1] is not irreducible mod 2" in out


def test_factor():
    _code, out = run_console("1\n4\n2\n[1 0\n1]\n0\n0\n")
    factors = polymod.factor([1, 0, 1], 2)
    assert f"Vysledkom faktorizacie je: {polymod.format_factorization(factors)}." in out


def test_inverse_poly():
    _code, out = run_console("1\n5\n2\n[1 1 1]\n[0 1]\n0\n0\n")
    inverse = polymod.inverse_poly([0, 1], [1, 1, 1], 2)
    assert f"invA: {polymod.format_poly(inverse)}\n" in out


def test_jacobi_steps():
    _code, out = run_console("2\n4\n2\n7\n0\n0\n")
    assert f"Vysledok pre J(2/7) = {numtheory.jacobi(2, 7)}" in out


def test_idempotents():
    _code, out = run_console("2\n5\n6\n0\n0\n")
    listed = " ".join(str(v) for v in numtheory.idempotents(6))
    assert f"[{listed}]\n" in out


def test_encrypt_ecb():
    _code, out = run_console("3\n1\n1\nabc\n3 1 26\n0\n0\n")
    expected = modes.encrypt("abc", modes.Mode.ECB, modes.AffineFunction(3, 1, 26))
    assert f"{expected}\n" in out


def test_decrypt_cbc_round_trip():
    func = modes.AffineFunction(3, 1, 26)
    ciphertext = modes.encrypt("hello", modes.Mode.CBC, func, iv=4)
    _code, out = run_console(f"3\n2\n2\n{ciphertext}\n3 1 26\n0\n0\n")
    assert "OT: hello\n" in out
    assert "IV: 4\n" in out


def test_rsa_encrypt():
    _code, out = run_console("3\n7\n33 7 4\n0\n0\n")
    assert f"mod 33 = {publickey.rsa_encrypt(33, 7, 4)}\n" in out


def test_rsa_crt():
    _code, out = run_console("3\n3\n33 3 4\n0\n0\n")
    result = publickey.rsa_crt(33, 3, 4)
    assert f"mod 33 = {result.result}\n" in out
    assert f"d = {result.d}\n" in out


def test_curve_points_listed():
    _code, out = run_console("3\n5\n1 1 5\n0\n0\n0\n")
    x, y = publickey.curve_points(1, 1, 5)[0]
    assert "Zadane parametre tvoria elipticku krivku." in out
    assert f"Bod 1 x, y = [{x}, {y}]\n" in out


def test_singular_curve_rejected():
    _code, out = run_console("3\n5\n0 0 5\n0\n0\n")
    assert "Zadane parametre netvoria elipticku krivku." in out


def test_strong_prime():
    _code, out = run_console("3\n6\n7 5 20\n0\n0\n")
    result = publickey.strong_prime(7, 5, 20)
    assert f"Cislo p({result.p}) je silne prvocislo s 20 alebo viac bitmi." in out


def test_sbox_table():
    _code, out = run_console("4\n1\n0\n0\n")
    assert aes.sbox_table() in out


def test_aes_example():
    _code, out = run_console("4\n2\n0\n0\n")
    ciphertext = aes.encrypt(
        aes.parse_block("32 43 f6 a8 88 5a 30 8d 31 31 98 a2 e0 37 07 34"),
        aes.parse_block("2b 7e 15 16 28 ae d2 a6 ab f7 15 88 09 cf 4f 3c"),
    )
    assert aes.format_state(ciphertext) in out
    assert "39, 02, dc, 19" in out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0\n"))
    code = main([])
    captured = capsys.readouterr()
    assert code == 0
    assert "Vyber predmet" in captured.out