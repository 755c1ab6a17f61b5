"""Classical cipher implementations, one module per algorithm."""

from .caesar     import CaesarCipher
from .vigenere   import VigenereCipher
from .rail_fence import RailFenceCipher

__all__ = [
    "CaesarCipher",
    "VigenereCipher",
    "RailFenceCipher",
]
