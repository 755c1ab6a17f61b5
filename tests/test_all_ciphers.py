"""
classical_ciphers — Cipher Test Suite
=====================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_all_ciphers.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from classical_ciphers.ciphers.caesar     import CaesarCipher
from classical_ciphers.ciphers.vigenere   import VigenereCipher
from classical_ciphers.ciphers.rail_fence import RailFenceCipher
from classical_ciphers.ciphers            import caesar, vigenere, rail_fence
from classical_ciphers.errors             import CipherError, InvalidKeyFormat

MSG   = "Attack, at dawn!"
FENCE = "WEAREDISCOVEREDFLEEATONCE"

# ── Caesar ────────────────────────────────────────────────────────────────────
def test_caesar_known_vector():
    assert caesar.encode(MSG, "3") == "Dwwdfn, dw gdzq!"

def test_caesar_roundtrip():
    ct = caesar.encode(MSG, "7")
    assert ct != MSG
    assert caesar.decode(ct, "7") == MSG

@pytest.mark.parametrize("key", ["0", "26", "52"])
def test_caesar_identity_shifts(key):
    assert caesar.encode(MSG, key) == MSG

def test_caesar_case_preserved():
    assert caesar.encode("AbC", "1") == "BcD"

def test_caesar_wraps_alphabet():
    assert caesar.encode("xyz XYZ", "3") == "abc ABC"
    assert caesar.decode("abc ABC", "3") == "xyz XYZ"

def test_caesar_negative_key_normalized():
    assert CaesarCipher("-1").shift == 25
    assert caesar.encode("ABC", "-1") == "ZAB"
    assert caesar.encode(MSG, "29") == caesar.encode(MSG, "3")

def test_caesar_key_whitespace_ignored():
    assert caesar.encode(MSG, " 3 ") == "Dwwdfn, dw gdzq!"

@pytest.mark.parametrize("key", ["abc", "3abc", "", "2.5"])
def test_caesar_rejects_non_integer_key(key):
    with pytest.raises(InvalidKeyFormat) as info:
        caesar.encode(MSG, key)
    assert info.value.algorithm == "Caesar Cipher"
    assert info.value.key == key

def test_caesar_length_invariant():
    text = "Hello, World! 123 ~"
    assert len(caesar.encode(text, "11")) == len(text)

# ── Vigenère ──────────────────────────────────────────────────────────────────
def test_vigenere_known_vector():
    assert vigenere.encode("ATTACKATDAWN", "LEMON") == "LXFOPVEFRNHR"

def test_vigenere_roundtrip():
    ct = vigenere.encode(MSG, "LEMON")
    assert ct != MSG
    assert vigenere.decode(ct, "LEMON") == MSG

def test_vigenere_non_letters_do_not_advance_key():
    assert vigenere.encode("ATTACK AT DAWN", "LEMON") == "LXFOPV EF RNHR"

def test_vigenere_case_follows_input():
    assert vigenere.encode("attackatdawn", "LEMON") == "lxfopvefrnhr"

def test_vigenere_key_normalized():
    assert VigenereCipher("le-mon 42").key == "LEMON"
    assert vigenere.encode(MSG, "lemon") == vigenere.encode(MSG, "LEMON")

@pytest.mark.parametrize("key", ["123", "", "!!"])
def test_vigenere_empty_key_is_identity(key):
    assert vigenere.encode("HELLO", key) == "HELLO"
    assert vigenere.decode("HELLO", key) == "HELLO"

def test_vigenere_length_invariant():
    text = "Mixed CASE, digits 0-9 and symbols #@!"
    assert len(vigenere.encode(text, "KEY")) == len(text)

# ── Rail Fence ────────────────────────────────────────────────────────────────
def test_rail_fence_known_vector():
    ct = rail_fence.encode(FENCE, "3")
    assert ct == "WECRLTEERDSOEEFEAOCAIVDEN"
    assert rail_fence.decode(ct, "3") == FENCE

def test_rail_fence_two_rails():
    assert rail_fence.encode("HELLO", "2") == "HLOEL"
    assert rail_fence.decode("HLOEL", "2") == "HELLO"

def test_rail_fence_pattern():
    assert RailFenceCipher("3").pattern(7) == [0, 1, 2, 1, 0, 1, 2]
    assert RailFenceCipher("1").pattern(3) == [0, 0, 0]

@pytest.mark.parametrize("rails", ["2", "3", "4", "5", "10"])
def test_rail_fence_roundtrip(rails):
    text = "The quick brown fox jumps over the lazy dog."
    assert rail_fence.decode(rail_fence.encode(text, rails), rails) == text

@pytest.mark.parametrize("text,key", [("AB", "5"), ("ABC", "3"), (FENCE, "1"),
                                      (FENCE, "0"), (FENCE, "-4"), ("", "3")])
def test_rail_fence_degenerate_is_identity(text, key):
    assert rail_fence.encode(text, key) == text
    assert rail_fence.decode(text, key) == text

def test_rail_fence_rejects_non_integer_key():
    with pytest.raises(InvalidKeyFormat):
        rail_fence.encode(FENCE, "three")

def test_invalid_key_is_value_error():
    with pytest.raises(ValueError):
        RailFenceCipher("x")
    assert issubclass(InvalidKeyFormat, CipherError)

# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
