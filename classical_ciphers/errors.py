"""
Errors raised by the cipher engine.

Everything derives from CipherError, which is a ValueError so callers that
only expect the builtin still catch it. Empty keywords and degenerate rail
counts are not errors: those ciphers hand the text back unchanged.
"""


class CipherError(ValueError):
    """Base class for every engine failure."""


class InvalidKeyFormat(CipherError):
    """The key string cannot be parsed into what the algorithm needs."""

    def __init__(self, algorithm: str, key: str, expected: str = "an integer"):
        self.algorithm = algorithm
        self.key = key
        super().__init__(f"{algorithm} key must be {expected}, got {key!r}.")


class UnknownAlgorithm(CipherError, KeyError):
    """No registered algorithm carries the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown algorithm: {name!r}.")

    def __str__(self):
        return self.args[0]


class InputRequired(CipherError):
    """Raised by a session asked to process blank input."""


class KeyRequired(CipherError):
    """Raised by a session whose algorithm needs a key and has none."""
