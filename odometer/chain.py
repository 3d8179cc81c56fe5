"""Digit column chain: six base-10 cells with carry/borrow cascade.

Cells are stored least-significant first. The "next" neighbour of cell
``i`` is cell ``i + 1``; the most significant cell has none, so overflow
and underflow past it are dropped and the number wraps.
"""

COLUMNS = 6
BASE = 10
MAX_VALUE = BASE ** COLUMNS - 1

# Status strings shown in the totals panel
WORKING = "Working..."
DONE = "Done!"


class DigitChain:
    """Ordered chain of six digit cells, index 0 is least significant."""

    def __init__(self) -> None:
        self._digits = [0] * COLUMNS

    @classmethod
    def from_value(cls, value: int) -> "DigitChain":
        """Build a chain showing ``value``.

        Raises:
            ValueError: if ``value`` is outside 0..999999.
        """
        if not 0 <= value <= MAX_VALUE:
            raise ValueError(f"value must be between 0 and {MAX_VALUE}, got {value}")
        chain = cls()
        for i in range(COLUMNS):
            chain._digits[i] = value % BASE
            value //= BASE
        return chain

    def __len__(self) -> int:
        return COLUMNS

    def __getitem__(self, index: int) -> int:
        return self._digits[index]

    @property
    def digits(self) -> tuple[int, ...]:
        """Digit values, least significant first."""
        return tuple(self._digits)

    @property
    def value(self) -> int:
        return sum(d * BASE ** i for i, d in enumerate(self._digits))

    def is_terminal(self, digit: int) -> bool:
        """True when every cell holds ``digit``."""
        return all(d == digit for d in self._digits)

    def increment(self, index: int = 0) -> str:
        """Tick cell ``index`` up by one, carrying into higher cells.

        Returns the transitional status marker; the breakdown is stale
        until recomputed.
        """
        self._check_index(index)
        while index < COLUMNS:
            before = self._digits[index]
            self._digits[index] = (before + 1) % BASE
            if before != BASE - 1:
                break
            index += 1
        return WORKING

    def decrement(self, index: int = 0) -> str:
        """Tick cell ``index`` down by one, borrowing from higher cells."""
        self._check_index(index)
        while index < COLUMNS:
            before = self._digits[index]
            self._digits[index] = (before - 1) % BASE
            if before != 0:
                break
            index += 1
        return WORKING

    def _check_index(self, index: int) -> None:
        if not 0 <= index < COLUMNS:
            raise IndexError(f"column index out of range: {index}")

    def clear(self) -> None:
        self._digits = [0] * COLUMNS


def format_breakdown(chain: DigitChain) -> str:
    """Express the chain as a sum of place values, most significant first.

    >>> format_breakdown(DigitChain.from_value(123456))
    '100000 + 20000 + 3000 + 400 + 50 + 6'
    """
    terms = [str(chain[i] * BASE ** i) for i in reversed(range(len(chain)))]
    return " + ".join(terms)
