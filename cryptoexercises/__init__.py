"""Worked exercises in number theory, finite fields and classroom cryptography."""

__version__ = "0.1.0"
__all__ = ["numtheory", "polymod", "aes", "modes", "publickey", "cli"]