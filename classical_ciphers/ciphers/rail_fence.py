"""
Rail Fence Transposition Cipher
===============================
Write the message in a zigzag down and up across N rails, then read
the rails off top to bottom.

    W . . . E . . . C . . . R . . . L . . . T . . . E
    . E . R . D . S . O . E . E . F . E . A . O . C .
    . . A . . . I . . . V . . . D . . . E . . . N . .

No letter is changed, only moved. The key is the rail count.

Degenerate fences: one rail (or fewer), or at least as many rails as
there are characters, leave the text as it is.

Decryption cannot place a character until it knows which rail owns
each position, so it runs in three passes over a rails × length grid:
mark the zigzag cells, fill them row by row from the ciphertext, then
walk the zigzag again to read the plaintext back out.
"""

from typing import List

from ..errors import InvalidKeyFormat

_MARK = object()


class RailFenceCipher:
    """Zigzag transposition across a fixed number of rails."""

    NAME        = "Rail Fence Cipher"
    DESCRIPTION = ("A transposition cipher that arranges text in a zigzag "
                   "pattern across multiple rails.")
    KEY_LABEL   = "Number of Rails"
    DEFAULT_KEY = "3"

    def __init__(self, key: str = DEFAULT_KEY):
        self._rails = self.parse_key(key)

    @classmethod
    def parse_key(cls, key: str) -> int:
        try:
            return int(str(key).strip())
        except ValueError as exc:
            raise InvalidKeyFormat(cls.NAME, key) from exc

    @property
    def rails(self) -> int:
        return self._rails

    def pattern(self, length: int) -> List[int]:
        """
        Rail index for each of `length` positions.

        Starts on rail 0 and bounces between rail 0 and the last rail.
        A fence of one rail (or fewer) keeps everything on rail 0.
        """
        if self._rails <= 1:
            return [0] * length
        rails = []
        rail = 0
        direction = 1
        for _ in range(length):
            rails.append(rail)
            rail += direction
            if rail == self._rails - 1 or rail == 0:
                direction = -direction
        return rails

    def _degenerate(self, text: str) -> bool:
        return self._rails <= 1 or self._rails >= len(text)

    def encrypt(self, plaintext: str) -> str:
        if self._degenerate(plaintext):
            return plaintext
        fence = [[] for _ in range(self._rails)]
        for ch, rail in zip(plaintext, self.pattern(len(plaintext))):
            fence[rail].append(ch)
        return "".join("".join(row) for row in fence)

    def decrypt(self, ciphertext: str) -> str:
        if self._degenerate(ciphertext):
            return ciphertext
        length = len(ciphertext)
        walk = self.pattern(length)
        grid = [[None] * length for _ in range(self._rails)]

        # mark
        for col, rail in enumerate(walk):
            grid[rail][col] = _MARK

        # fill, row-major
        chars = iter(ciphertext)
        for row in grid:
            for col, cell in enumerate(row):
                if cell is _MARK:
                    row[col] = next(chars)

        # read
        return "".join(grid[rail][col] for col, rail in enumerate(walk))


def encode(text: str, key: str = RailFenceCipher.DEFAULT_KEY) -> str:
    return RailFenceCipher(key).encrypt(text)


def decode(text: str, key: str = RailFenceCipher.DEFAULT_KEY) -> str:
    return RailFenceCipher(key).decrypt(text)
