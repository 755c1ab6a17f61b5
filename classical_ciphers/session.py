"""
CipherSession — caller-owned working state.

Holds what a front end keeps between clicks: the chosen algorithm, the
input and output text, the key field and the direction. The ciphers
themselves stay stateless; everything mutable lives here and is passed
in on each call.
"""

import logging
from typing import Optional

from .errors import InputRequired, KeyRequired
from .registry import ALGORITHMS, AlgorithmDescriptor, get_algorithm

logger = logging.getLogger(__name__)


class CipherSession:
    """Selected algorithm, key and text buffers for one user."""

    def __init__(self, algorithm: Optional[str] = None):
        self.algorithm: AlgorithmDescriptor = (
            get_algorithm(algorithm) if algorithm else ALGORITHMS[0]
        )
        self.input_text  = ""
        self.output_text = ""
        self.key         = self.algorithm.default_key or ""
        self.encrypting  = True

    def select(self, name: str) -> AlgorithmDescriptor:
        """
        Switch algorithm.

        Resets the key to the new algorithm's default and drops any
        previous output. The input text is kept.
        """
        self.algorithm   = get_algorithm(name)
        self.key         = self.algorithm.default_key or ""
        self.output_text = ""
        logger.info(f"Switched to {self.algorithm.name} (key reset to {self.key!r})")
        return self.algorithm

    def process(self) -> str:
        """
        Encrypt or decrypt `input_text` with the current key.

        Raises:
            InputRequired : input is empty or whitespace only
            KeyRequired   : the algorithm needs a key and the field is blank
            CipherError   : whatever the cipher itself rejects
        """
        if not self.input_text.strip():
            raise InputRequired("Please enter some text to process.")
        algo = self.algorithm
        if algo.requires_key and not self.key.strip():
            label = (algo.key_label or "key").lower()
            raise KeyRequired(f"Please enter a {label}.")

        transform = algo.encode if self.encrypting else algo.decode
        self.output_text = transform(self.input_text, self.key)
        logger.debug(
            f"{'Encrypted' if self.encrypting else 'Decrypted'} "
            f"{len(self.input_text)} chars with {algo.name}"
        )
        return self.output_text

    def swap(self):
        """Feed the output back in as input and flip the direction."""
        self.input_text, self.output_text = self.output_text, self.input_text
        self.encrypting = not self.encrypting

    def clear(self):
        self.input_text  = ""
        self.output_text = ""
        self.key         = self.algorithm.default_key or ""
