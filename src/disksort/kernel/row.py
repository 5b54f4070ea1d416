"""
Kernel Component: Row State

A fixed-length row of light and dark disks, mutated only by adjacent swaps.

Representation:
  - list[int] of length 2k
  - DISK_LIGHT = 0, DISK_DARK = 1
  - Index 0 is the leftmost disk

Invariant:
  Length and color counts never change after construction.
"""

from ..core.registry import param_registry

DISK_LIGHT = 0
DISK_DARK = 1

_REGISTRY = param_registry()
_LETTERS = {
    DISK_LIGHT: _REGISTRY["token_letters"]["LIGHT"],
    DISK_DARK: _REGISTRY["token_letters"]["DARK"],
}
_COLORS_BY_LETTER = {letter: color for color, letter in _LETTERS.items()}
_SEPARATOR = _REGISTRY["token_separator"]


class DiskState:
    """
    State of one row of disks.

    Constructed in the canonical alternating layout
    (index 0 LIGHT, index 1 DARK, index 2 LIGHT, ...).
    """

    def __init__(self, light_count: int):
        """
        Build an alternating row of 2 * light_count disks, light first.

        Raises:
            PreconditionError: If light_count is not an int, or the row
                would hold no dark disks (light_count < 1).
        """
        if isinstance(light_count, bool) or not isinstance(light_count, int):
            raise PreconditionError(
                f"light_count must be an int, got {type(light_count).__name__}"
            )
        if light_count < 1:
            raise PreconditionError(
                f"Row must hold at least one dark disk (light_count={light_count})"
            )

        self._colors = [DISK_LIGHT] * (light_count * 2)
        for i in range(1, len(self._colors), 2):
            self._colors[i] = DISK_DARK

    @classmethod
    def from_string(cls, text: str) -> "DiskState":
        """
        Rebuild a state from its debug rendering, e.g. "L L D D".

        Raises:
            PreconditionError: On unknown letters, an empty or odd-length
                row, or unequal light/dark counts.
        """
        letters = text.split()
        if not letters or len(letters) % 2 != 0:
            raise PreconditionError(
                f"Row must have a positive even length, got {len(letters)} disks"
            )
        unknown = sorted(set(letters) - set(_COLORS_BY_LETTER))
        if unknown:
            raise PreconditionError(f"Unknown disk letters: {unknown}")
        colors = [_COLORS_BY_LETTER[ch] for ch in letters]
        if colors.count(DISK_DARK) != len(colors) // 2:
            raise PreconditionError(
                f"Row must hold equal light and dark counts: '{text}'"
            )

        state = cls(len(colors) // 2)
        state._colors = colors
        return state

    def copy(self) -> "DiskState":
        """Independent state with the same tokens."""
        other = DiskState(self.light_count())
        other._colors = list(self._colors)
        return other

    # Equality operator for tests. Mutable, so not hashable.
    def __eq__(self, other):
        if not isinstance(other, DiskState):
            return NotImplemented
        return self._colors == other._colors

    __hash__ = None

    def __repr__(self):
        return f"DiskState('{self.to_string()}')"

    def __str__(self):
        return self.to_string()

    def total_count(self) -> int:
        return len(self._colors)

    def dark_count(self) -> int:
        return self.total_count() // 2

    def light_count(self) -> int:
        return self.dark_count()

    def is_index(self, i: int) -> bool:
        if isinstance(i, bool) or not isinstance(i, int):
            return False
        return 0 <= i < self.total_count()

    def get(self, index: int) -> int:
        if not self.is_index(index):
            raise IndexOutOfRangeError(
                f"Index {index} out of range for {self.total_count()} disks"
            )
        return self._colors[index]

    def swap(self, left_index: int) -> None:
        """Exchange the disks at left_index and left_index + 1."""
        if not (self.is_index(left_index) and self.is_index(left_index + 1)):
            raise IndexOutOfRangeError(
                f"Cannot swap at {left_index!r} in {self.total_count()} disks"
            )
        right_index = left_index + 1
        self._colors[left_index], self._colors[right_index] = (
            self._colors[right_index], self._colors[left_index]
        )

    def colors(self) -> tuple[int, ...]:
        """Snapshot of all colors in index order."""
        return tuple(self._colors)

    def count(self, color: int) -> int:
        return self._colors.count(color)

    def to_string(self) -> str:
        return _SEPARATOR.join(_LETTERS[c] for c in self._colors)

    def is_alternating(self) -> bool:
        """
        True when the row is in alternating format: index 0 is light,
        index 1 is dark, and so on for every pair of the row.
        """
        for i in range(0, self.total_count() - 1, 2):
            if self._colors[i] != DISK_LIGHT or self._colors[i + 1] != DISK_DARK:
                return False
        return True

    def is_sorted(self) -> bool:
        """
        True when all light disks sit on the left (low indices) and all
        dark disks on the right (high indices).
        """
        k = self.light_count()
        for i in range(k):
            if self._colors[i] != DISK_LIGHT:
                return False
            if self._colors[i + k] != DISK_DARK:
                return False
        return True


class ContractError(Exception):
    """Raised when a caller breaks the kernel's contract (programming error)."""
    pass


class PreconditionError(ContractError):
    """Raised when an operation's precondition does not hold."""
    pass


class IndexOutOfRangeError(ContractError, IndexError):
    """Raised when a disk index falls outside 0..total_count()-1."""
    pass
