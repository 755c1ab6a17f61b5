"""
Caesar Shift Cipher
===================
Monoalphabetic substitution: every letter moves a fixed number of places
along its alphabet, wrapping from Z back to A.

Historical note: Suetonius records Julius Caesar shifting his letters
by three. With only 26 possible keys it falls to brute force by hand.

Upper- and lowercase letters rotate within their own alphabet.
Anything that is not an ASCII letter passes through untouched.
"""

from ..errors import InvalidKeyFormat


class CaesarCipher:
    """
    Shift cipher over A-Z / a-z.

    The key is an integer string. Any integer is accepted and reduced
    mod 26, so "29" and "-23" both behave like "3".
    """

    NAME          = "Caesar Cipher"
    DESCRIPTION   = ("A substitution cipher where each letter is shifted by "
                     "a fixed number of positions in the alphabet.")
    KEY_LABEL     = "Shift (0-25)"
    DEFAULT_KEY   = "3"
    ALPHABET_SIZE = 26

    def __init__(self, key: str = DEFAULT_KEY):
        self._shift = self.parse_key(key)

    @classmethod
    def parse_key(cls, key: str) -> int:
        """Parse a key string into a shift in [0, 25]."""
        try:
            value = int(str(key).strip())
        except ValueError as exc:
            raise InvalidKeyFormat(cls.NAME, key) from exc
        return value % cls.ALPHABET_SIZE

    @property
    def shift(self) -> int:
        return self._shift

    def encrypt(self, plaintext: str) -> str:
        """Shift every letter forward."""
        return self._rotate(plaintext, self._shift)

    def decrypt(self, ciphertext: str) -> str:
        """Shift every letter back."""
        return self._rotate(ciphertext, -self._shift)

    # ── helpers ──────────────────────────────────────────────────────────────

    @classmethod
    def _rotate(cls, text: str, shift: int) -> str:
        result = []
        for ch in text:
            if "A" <= ch <= "Z":
                base = 65
            elif "a" <= ch <= "z":
                base = 97
            else:
                result.append(ch)
                continue
            pos = (ord(ch) - base + shift + cls.ALPHABET_SIZE) % cls.ALPHABET_SIZE
            result.append(chr(pos + base))
        return "".join(result)


def encode(text: str, key: str = CaesarCipher.DEFAULT_KEY) -> str:
    return CaesarCipher(key).encrypt(text)


def decode(text: str, key: str = CaesarCipher.DEFAULT_KEY) -> str:
    return CaesarCipher(key).decrypt(text)
