"""
Algorithm registry
==================
A fixed, ordered list of descriptors, one per cipher. The order is the
display order offered to users, not a priority.

Every descriptor exposes the same calling convention,
``encode(text, key)`` / ``decode(text, key)``, with the key always a
string. Each cipher parses and validates its own key.

When a caller switches algorithm it should clear its output and reset
the key field to ``default_key``. The engine keeps no state of its own;
see ``CipherSession`` for a ready-made holder of that state.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .ciphers import caesar, vigenere, rail_fence
from .errors import UnknownAlgorithm

logger = logging.getLogger(__name__)

Transform = Callable[[str, str], str]


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """Metadata plus encode/decode functions for one algorithm."""

    name:         str
    description:  str
    requires_key: bool
    encode:       Transform
    decode:       Transform
    key_label:    Optional[str] = None
    default_key:  Optional[str] = None

    def __post_init__(self):
        if self.requires_key and not self.key_label:
            raise ValueError(f"{self.name}: a keyed algorithm needs a key label.")
        if not self.requires_key and self.key_label is not None:
            raise ValueError(f"{self.name}: key label given for a keyless algorithm.")

    def __repr__(self):
        return f"AlgorithmDescriptor({self.name!r})"


def _describe(cls, module) -> AlgorithmDescriptor:
    return AlgorithmDescriptor(
        name=cls.NAME,
        description=cls.DESCRIPTION,
        requires_key=True,
        key_label=cls.KEY_LABEL,
        default_key=cls.DEFAULT_KEY,
        encode=module.encode,
        decode=module.decode,
    )


CAESAR     = _describe(caesar.CaesarCipher, caesar)
VIGENERE   = _describe(vigenere.VigenereCipher, vigenere)
RAIL_FENCE = _describe(rail_fence.RailFenceCipher, rail_fence)

ALGORITHMS: Tuple[AlgorithmDescriptor, ...] = (CAESAR, VIGENERE, RAIL_FENCE)

_BY_NAME = {algo.name: algo for algo in ALGORITHMS}
assert len(_BY_NAME) == len(ALGORITHMS), "algorithm names must be unique"


def get_algorithm(name: str) -> AlgorithmDescriptor:
    """Look up a descriptor by its exact name."""
    try:
        algo = _BY_NAME[name]
    except KeyError:
        raise UnknownAlgorithm(name) from None
    logger.debug(f"Selected algorithm: {algo.name}")
    return algo


def algorithm_names() -> List[str]:
    return [algo.name for algo in ALGORITHMS]


def default_key_for(name: str) -> str:
    """The key a caller should reset to when switching to `name`."""
    return get_algorithm(name).default_key or ""
