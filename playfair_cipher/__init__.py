"""
playfair_cipher — Playfair digraph substitution cipher
======================================================
Wheatstone (1854). Classical, pedagogical, not secure.

Components:
    table   — 5x5 key square built from a passphrase (J merged into I)
    cipher  — digraph splitting and same-row / same-column / rectangle rules

Usage:
    >>> from playfair_cipher import Playfair
    >>> Playfair("playfair example").encrypt("Hide the gold in the tree stump")
    'BMODZBXDNABEKUDMUIXMMOUVIF'

License: Apache 2.0
"""

__version__  = "1.0.0"

from .table   import PlayfairTable, build_table, normalize, REDUCED_ALPHABET, TABLE_SIZE
from .cipher  import Playfair

__all__ = [
    "Playfair",
    "PlayfairTable",
    "build_table",
    "normalize",
    "REDUCED_ALPHABET",
    "TABLE_SIZE",
]
