"""
Table Builder: the 5x5 Playfair key square
===========================================
The key phrase is written into a 5x5 grid, duplicates removed, and the
rest of the alphabet follows in A to Z order. J shares a cell with I, so
the square holds exactly the 25 letters of the reduced alphabet.

Example, key "playfair example":

    P L A Y F
    I R E X M
    B C D G H
    K N O Q S
    T U V W Z

The square never changes after construction. Every position lookup goes
through a precomputed reverse index instead of scanning the grid.
"""

from typing import Iterator, Tuple

REDUCED_ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"
TABLE_SIZE = 5

Grid = Tuple[Tuple[str, ...], ...]


def normalize(text: str) -> str:
    """
    Uppercase ASCII letters, drop whitespace, fold J into I.
    Non-ASCII characters are left as they are; str.upper() would expand
    some of them into several ASCII letters (ß -> SS, ﬅ -> ST).
    """
    text = "".join(ch.upper() if ch.isascii() else ch for ch in text)
    return "".join(text.split()).replace("J", "I")


def build_table(key: str) -> Grid:
    """
    Derive the 5x5 grid for `key`.

    Key letters come first in order of first appearance, then the unused
    letters of the reduced alphabet. Characters that are not letters are
    ignored, so an empty or all-punctuation key gives the plain A-Z square.
    """
    seen = []
    for ch in normalize(key) + REDUCED_ALPHABET:
        if ch in REDUCED_ALPHABET and ch not in seen:
            seen.append(ch)
    return tuple(
        tuple(seen[row * TABLE_SIZE:(row + 1) * TABLE_SIZE])
        for row in range(TABLE_SIZE)
    )


class PlayfairTable:
    """Immutable 5x5 key square with O(1) letter -> (row, col) lookup."""

    __slots__ = ("_rows", "_index")

    def __init__(self, key: str = ""):
        rows = build_table(key)
        index = {}
        for r, row in enumerate(rows):
            for c, ch in enumerate(row):
                index[ch] = (r, c)
        # 25 distinct cells or the grid is broken
        assert len(index) == TABLE_SIZE * TABLE_SIZE
        object.__setattr__(self, "_rows", rows)
        object.__setattr__(self, "_index", index)

    def __setattr__(self, name, value):
        raise AttributeError("PlayfairTable is immutable.")

    def __delattr__(self, name):
        raise AttributeError("PlayfairTable is immutable.")

    @property
    def rows(self) -> Grid:
        return self._rows

    @property
    def letters(self) -> str:
        """The 25 letters in row-major order."""
        return "".join("".join(row) for row in self._rows)

    def locate(self, letter: str) -> Tuple[int, int]:
        """
        Return (row, col) of `letter`.
        Raises ValueError for anything outside the reduced alphabet;
        callers are expected to normalize first.
        """
        try:
            return self._index[letter]
        except (KeyError, TypeError):
            raise ValueError(f"{letter!r} is not in the table.") from None

    def at(self, row: int, col: int) -> str:
        """Cell at (row, col), wrapping both coordinates modulo 5."""
        return self._rows[row % TABLE_SIZE][col % TABLE_SIZE]

    def __iter__(self) -> Iterator[Tuple[str, ...]]:
        return iter(self._rows)

    def __eq__(self, other):
        if not isinstance(other, PlayfairTable):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __str__(self):
        return "\n".join(" ".join(row) for row in self._rows)

    def __repr__(self):
        return f"PlayfairTable({self.letters!r})"
