"""Block cipher modes (ECB, CBC, CFB, OFB, CTR) over letters with an affine round function."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Mode(Enum):
    """Cipher mode, numbered as in the menu."""

    ECB = 1
    CBC = 2
    CFB = 3
    OFB = 4
    CTR = 5


@dataclass(frozen=True)
class AffineFunction:
    """The function f(x) = (multiplier * x + offset) mod modulus."""

    multiplier: int
    offset: int
    modulus: int

    def __post_init__(self) -> None:
        if self.multiplier < 1:
            raise ValueError("multiplier must be positive")
        if self.modulus < 1:
            raise ValueError("modulus must be positive")

    def apply(self, x: int) -> int:
        """Value of f at x."""
        return (x * self.multiplier + self.offset) % self.modulus

    def invert(self, y: int) -> int:
        """A value x in 0..modulus-1 with f(x) = y, found by adding the modulus until divisible."""
        value = y - self.offset
        for _ in range(self.multiplier):
            if value % self.multiplier == 0:
                return (value // self.multiplier) % self.modulus
            value += self.modulus
        raise ValueError(f"{y} has no preimage under {self}")


@dataclass(frozen=True)
class DecryptResult:
    """Recovered plaintext and, for CBC and CFB, the recovered initial value."""

    plaintext: str
    iv: int | None = None


def letter_values(text: str) -> list[int]:
    """Letters as numbers, 'a' = 0; ASCII capitals are folded to lower case."""
    return [
        (ord(ch) + 32 if "A" <= ch <= "Z" else ord(ch)) - ord("a") for ch in text
    ]


def _letters(values: list[int]) -> str:
    return "".join(chr(value + ord("a")) for value in values)


def encrypt(text: str, mode: Mode, func: AffineFunction, iv: int = 0) -> str:
    """Encrypt text; CBC and CFB output starts with the encrypted initial value."""
    values = letter_values(text)
    c = func.modulus
    out: list[int] = []
    if mode in (Mode.CBC, Mode.CFB):
        out.append(func.apply(iv))
    state = iv
    for i, value in enumerate(values):
        if mode is Mode.ECB:
            out.append(func.apply(value))
        elif mode is Mode.CBC:
            out.append(func.apply(value + out[i]))
        elif mode is Mode.CFB:
            out.append((func.apply(out[i]) + value) % c)
        elif mode is Mode.OFB:
            state = func.apply(state)
            out.append((value + state) % c)
        else:
            state = func.apply(state + i + 1)
            out.append((value + state) % c)
    return _letters(out)


def decrypt(text: str, mode: Mode, func: AffineFunction, iv: int = 0) -> DecryptResult:
    """Decrypt text; for CBC and CFB the initial value is recovered from the first letter."""
    values = letter_values(text)
    c = func.modulus
    if mode in (Mode.CBC, Mode.CFB):
        if not values:
            raise ValueError("ciphertext must hold at least the initial value")
        out = [
            (func.invert(current) - previous) % c
            if mode is Mode.CBC
            else (current - func.apply(previous)) % c
            for previous, current in zip(values, values[1:])
        ]
        return DecryptResult(_letters(out), func.invert(values[0]))

    out = []
    state = iv
    for i, value in enumerate(values):
        if mode is Mode.ECB:
            out.append(func.invert(value))
        elif mode is Mode.OFB:
            state = func.apply(state)
            out.append((value - state) % c)
        else:
            state = func.apply(state + i + 1)
            out.append((value - state) % c)
    return DecryptResult(_letters(out))