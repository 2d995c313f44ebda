"""Movement direction detection with a sensitivity dead zone."""

from typing import NamedTuple


class Direction(NamedTuple):
    """Signed movement per axis.

    Moving toward a larger coordinate reports -1 and toward a smaller one
    +1, so ``vertical == -1`` means the pointer went down and
    ``horizontal == -1`` means it went right. Callers branch on these signs.
    """

    horizontal: int
    vertical: int

    @property
    def is_still(self) -> bool:
        return self.horizontal == 0 and self.vertical == 0


class DirectionFilter:
    """Debounces pointer jitter into discrete per-axis moves."""

    def __init__(self, x: float = 0, y: float = 0):
        self.settled_x = x
        self.settled_y = y

    def reset(self, x: float, y: float) -> None:
        """Set both settled coordinates, e.g. at the start of a gesture."""
        self.settled_x = x
        self.settled_y = y

    def detect(self, x: float, y: float, sensitivity: float) -> Direction:
        """
        Decide which axes moved significantly since they last fired.

        An axis fires only when its delta exceeds ``sensitivity``; firing
        moves that axis's settled value to the new coordinate.

        Args:
            x: Current x coordinate
            y: Current y coordinate
            sensitivity: Dead-zone half width

        Returns:
            Direction with -1, 0 or 1 per axis
        """
        horizontal = self._axis(x, self.settled_x, sensitivity)
        vertical = self._axis(y, self.settled_y, sensitivity)
        if horizontal:
            self.settled_x = x
        if vertical:
            self.settled_y = y
        return Direction(horizontal, vertical)

    @staticmethod
    def _axis(value: float, settled: float, sensitivity: float) -> int:
        if settled - sensitivity <= value <= settled + sensitivity:
            return 0
        return -1 if value > settled else 1
