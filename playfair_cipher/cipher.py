"""
Digraph Transformer: Playfair encryption and decryption
========================================================
Charles Wheatstone, 1854; promoted by Lord Playfair. The first practical
digraph substitution cipher: letters are enciphered two at a time, which
flattens single-letter frequencies. Broken by hand in WWI. Not secure
against anything modern.

Rules, for a pair located at (r1, c1) and (r2, c2) in the key square:

  same row     -> letter to the right of each (left when decrypting)
  same column  -> letter below each (above when decrypting)
  rectangle    -> (square[r1][c2], square[r2][c1]), its own inverse

Plaintext is normalized (uppercase, no spaces, J -> I) and split into
pairs. A doubled letter is broken with the filler, and a lone trailing
letter gets the filler too:  "balloon" -> BA LX LO ON.

Decryption does not undo the filler or the J merge:
  encrypt("Hide the gold in the tree stump") -> BMODZBXDNABEKUDMUIXMMOUVIF
  decrypt(...)                              -> HIDETHEGOLDINTHETREXESTUMP
"""

import logging
from typing import List, Tuple

from .table import PlayfairTable, REDUCED_ALPHABET, normalize

logger = logging.getLogger(__name__)

Pair = Tuple[str, str]


class Playfair:
    """
    Playfair cipher keyed by a passphrase.

    The key square is built once in the constructor and never modified,
    so one instance can be shared freely between threads.
    """

    DEFAULT_FILLER = "X"

    def __init__(self, key: str, filler: str = DEFAULT_FILLER):
        """
        key    : passphrase; non-letters are ignored when building the square
        filler : letter used to split doubled letters and pad odd input.
                 Changing it changes ciphertext for such inputs.
        """
        if not isinstance(key, str):
            raise TypeError("Playfair key must be a string.")
        if not isinstance(filler, str) or len(filler) != 1 or not filler.isascii():
            raise ValueError("Filler must be a single letter.")
        filler = filler.upper()
        if filler not in REDUCED_ALPHABET:
            raise ValueError(f"Filler must be one of {REDUCED_ALPHABET}, got {filler!r}.")
        self._key    = key
        self._filler = filler
        self._table  = PlayfairTable(key)
        logger.info(f"Playfair key_length={len(key)} filler={filler}")

    @property
    def key(self) -> str:
        return self._key

    @property
    def filler(self) -> str:
        return self._filler

    @property
    def table(self) -> PlayfairTable:
        return self._table

    # ── pair splitting ──────────────────────────────────────────────────────
    def digraphs(self, plaintext: str) -> List[Pair]:
        """
        Normalize `plaintext` and split it into pairs.
        Raises ValueError on characters other than letters and whitespace.
        """
        text = normalize(plaintext)
        for ch in text:
            if ch not in REDUCED_ALPHABET:
                raise ValueError(f"Cannot encrypt {ch!r}: only letters and spaces are allowed.")

        pairs = []
        i = 0
        while i < len(text):
            first = text[i]
            second = text[i + 1] if i + 1 < len(text) else self._filler
            if first == second:
                # second letter starts the next pair
                pairs.append((first, self._filler))
                i += 1
            else:
                pairs.append((first, second))
                i += 2
        return pairs

    # ── single-pair substitution ────────────────────────────────────────────
    def _substitute(self, a: str, b: str, step: int) -> str:
        r1, c1 = self._table.locate(a)
        r2, c2 = self._table.locate(b)
        at = self._table.at
        if r1 == r2:
            return at(r1, c1 + step) + at(r2, c2 + step)
        if c1 == c2:
            return at(r1 + step, c1) + at(r2 + step, c2)
        return at(r1, c2) + at(r2, c1)

    def encrypt_pair(self, a: str, b: str) -> str:
        return self._substitute(a, b, 1)

    def decrypt_pair(self, a: str, b: str) -> str:
        return self._substitute(a, b, -1)

    # ── messages ────────────────────────────────────────────────────────────
    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext. Output is uppercase, even-length, and at least
        as long as the normalized input.
        """
        pairs = self.digraphs(plaintext)
        ciphertext = "".join(self.encrypt_pair(a, b) for a, b in pairs)
        logger.debug(f"Encrypt: {len(pairs)} digraphs -> {len(ciphertext)} letters")
        return ciphertext

    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt ciphertext taken two letters at a time, as produced by
        encrypt(). No normalization is applied: the input must be an
        even number of letters from the square (uppercase, no J, no
        separators), otherwise ValueError is raised.
        Fillers and the I/J merge are left in the result.
        """
        if len(ciphertext) % 2:
            raise ValueError(f"Ciphertext length must be even, got {len(ciphertext)}.")
        for ch in ciphertext:
            if ch not in REDUCED_ALPHABET:
                raise ValueError(f"Invalid ciphertext character {ch!r}.")
        plaintext = "".join(
            self.decrypt_pair(ciphertext[i], ciphertext[i + 1])
            for i in range(0, len(ciphertext), 2)
        )
        logger.debug(f"Decrypt: {len(ciphertext) // 2} digraphs")
        return plaintext

    def __eq__(self, other):
        if not isinstance(other, Playfair):
            return NotImplemented
        return (self._key, self._filler, self._table) == (other._key, other._filler, other._table)

    def __hash__(self):
        return hash((self._key, self._filler, self._table))

    def __str__(self):
        return f"key: {self._key}\ntable:\n{self._table}\n"

    def __repr__(self):
        return f"Playfair(key={self._key!r}, filler={self._filler!r})"


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format=" %(message)s")

    pf = Playfair("playfair example")
    print(f"\n{'═'*60}")
    print(pf)
    ct = pf.encrypt("Hide the gold in the tree stump")
    print(f"Ciphertext: {ct}")
    pt = pf.decrypt(ct)
    print(f"Plaintext : {pt}")
    assert ct == "BMODZBXDNABEKUDMUIXMMOUVIF"
    assert pt == "HIDETHEGOLDINTHETREXESTUMP"
    print(f"{'═'*60}\n")
