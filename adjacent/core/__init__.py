"""Core pair adaptor types for adjacent."""

from adjacent.core.cursor import PairCursor
from adjacent.core.positions import IndexPosition, Position
from adjacent.core.view import PairView, make_adjacent_range

__all__ = ["IndexPosition", "PairCursor", "PairView", "Position", "make_adjacent_range"]
