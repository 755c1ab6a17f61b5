"""
Vigenère Polyalphabetic Cipher
==============================
Each letter is shifted by the matching letter of a repeating keyword
(A=0, B=1, ... Z=25).

Historical note: Blaise de Vigenère, 1553. Called "le chiffre
indéchiffrable" for 300 years, until Kasiski published a general
attack on the repeating key in 1863.

Key handling: the keyword is uppercased and everything outside A-Z is
dropped. A keyword with no letters left leaves the text unchanged.
The key position only advances on letters, so spaces and punctuation
do not consume key material. Output case follows the input letter.
"""

import re


class VigenereCipher:
    """Vigenère cipher with a repeating keyword."""

    NAME        = "Vigenère Cipher"
    DESCRIPTION = ("A polyalphabetic substitution cipher using a repeating "
                   "keyword to shift letters.")
    KEY_LABEL   = "Keyword"
    DEFAULT_KEY = "KEY"
    ALPHA       = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

    _NON_ALPHA = re.compile(r"[^A-Z]")

    def __init__(self, key: str = DEFAULT_KEY):
        self._key = self.normalize_key(key)

    @classmethod
    def normalize_key(cls, key: str) -> str:
        """Uppercase the keyword and strip every non A-Z character."""
        return cls._NON_ALPHA.sub("", (key or "").upper())

    @property
    def key(self) -> str:
        return self._key

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext string. Non-alpha characters pass through."""
        return self._apply(plaintext, 1)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext string."""
        return self._apply(ciphertext, -1)

    def _keystream(self):
        """Endless shifts drawn from the keyword, one per letter."""
        shifts = [self.ALPHA.index(c) for c in self._key]
        k_idx = 0
        while True:
            yield shifts[k_idx % len(shifts)]
            k_idx += 1

    def _apply(self, text: str, sign: int) -> str:
        if not self._key:
            return text
        stream = self._keystream()
        result = []
        for ch in text:
            if "A" <= ch <= "Z":
                base = 65
            elif "a" <= ch <= "z":
                base = 97
            else:
                result.append(ch)
                continue
            pos = (ord(ch) - base + sign * next(stream) + 26) % 26
            result.append(chr(pos + base))
        return "".join(result)


def encode(text: str, key: str = VigenereCipher.DEFAULT_KEY) -> str:
    return VigenereCipher(key).encrypt(text)


def decode(text: str, key: str = VigenereCipher.DEFAULT_KEY) -> str:
    return VigenereCipher(key).decrypt(text)
