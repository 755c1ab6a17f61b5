"""
classical_ciphers — Live Demo: All Algorithms
=============================================
Run:  python examples/demo_all_ciphers.py [-v]

Walks the registry, encrypting and decrypting one message with every
algorithm at its default key, then drives a CipherSession the way a
front end would.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classical_ciphers import ALGORITHMS, CipherSession, CipherError

LINE = "═" * 70
MSG  = "WE ARE DISCOVERED. Flee at once!"

def header(n, name):
    print(f"\n{LINE}")
    print(f"  {n} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(
    level=logging.DEBUG if "-v" in sys.argv[1:] else logging.WARNING,
    format=" %(name)s: %(message)s",
)

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  classical_ciphers — Demo")
print(LINE)
print(f"  Message: {MSG}\n")

for n, algo in enumerate(ALGORITHMS, 1):
    header(n, algo.name)
    ct = algo.encode(MSG, algo.default_key)
    pt = algo.decode(ct, algo.default_key)
    ok(algo.key_label, algo.default_key)
    ok("Encrypted", ct)
    ok("Decrypted", pt)
    ok("Round-trip", "match" if pt == MSG else "MISMATCH")

# ── Session ──────────────────────────────────────────────────────────────────
header("S", "CipherSession")
session = CipherSession()
session.select("Vigenère Cipher")
session.key = "LEMON"
session.input_text = MSG
ok("Encrypted", session.process())
session.swap()
ok("Decrypted", session.process())

session.select("Caesar Cipher")
session.key = "three"
try:
    session.process()
except CipherError as e:
    ok("Rejected", e)

print(f"\n{LINE}\n")
