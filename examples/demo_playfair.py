"""
playfair_cipher — Live Demo
===========================
Run:  python examples/demo_playfair.py

Builds the key square for the Wikipedia example key, encrypts the
classic message, and decrypts it again.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from playfair_cipher import Playfair

LINE = "═" * 70
KEY  = "playfair example"
MSG  = "Hide the gold in the tree stump"

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.INFO, format=" %(message)s")

print(f"\n{LINE}")
print("  playfair_cipher — Demo")
print(LINE)

pf = Playfair(KEY)
print()
for row in pf.table:
    print("     " + " ".join(row))
print()

ct = pf.encrypt(MSG)
pt = pf.decrypt(ct)
ok("Message",    MSG)
ok("Digraphs",   " ".join(a + b for a, b in pf.digraphs(MSG)))
ok("Encrypted",  ct)
ok("Decrypted",  pt)
ok("Filler 'Z'", Playfair(KEY, filler="Z").encrypt(MSG))

print(f"{LINE}\n")
