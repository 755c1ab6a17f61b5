"""
classical_ciphers
=================
Three classical text ciphers behind one calling convention.

Algorithms:
    Caesar Cipher      — fixed shift substitution            key: integer shift
    Vigenère Cipher    — repeating keyword substitution      key: keyword
    Rail Fence Cipher  — zigzag transposition                key: number of rails

Every algorithm is reachable through an AlgorithmDescriptor in the
ALGORITHMS registry:

    algo = get_algorithm("Caesar Cipher")
    algo.encode("Attack, at dawn!", "3")   # 'Dwwdfn, dw gdzq!'

These are teaching ciphers. None of them protects real data.
"""

__version__  = "1.0.0"

from .ciphers   import CaesarCipher, VigenereCipher, RailFenceCipher
from .errors    import (CipherError, InvalidKeyFormat, UnknownAlgorithm,
                        InputRequired, KeyRequired)
from .registry  import (AlgorithmDescriptor, ALGORITHMS, get_algorithm,
                        algorithm_names, default_key_for)
from .session   import CipherSession

__all__ = [
    "CaesarCipher",
    "VigenereCipher",
    "RailFenceCipher",
    "AlgorithmDescriptor",
    "ALGORITHMS",
    "get_algorithm",
    "algorithm_names",
    "default_key_for",
    "CipherSession",
    "CipherError",
    "InvalidKeyFormat",
    "UnknownAlgorithm",
    "InputRequired",
    "KeyRequired",
]
