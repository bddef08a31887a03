"""
Board model for the lambdago toolkit.

Provides:
- Color: closed enumeration of stone colors
- Point: 1-based (x, y) board coordinate
- Board: immutable rectangular grid of cell states
- render: text serialization of a board
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Iterable, Iterator, NamedTuple, Optional, Tuple


# Rendering characters
EMPTY_SYMBOL = "."
BLACK_SYMBOL = "X"
WHITE_SYMBOL = "O"


# ============================================================================
# Exceptions
# ============================================================================

class BoardError(ValueError):
    """Base exception for board and move errors."""
    pass


class InvalidDimensionError(BoardError):
    """Raised when a board is created with a non-positive width or height."""
    pass


class OutOfBoundsError(BoardError):
    """Raised when a point lies outside the board."""
    pass


class InvalidGroupQueryError(BoardError):
    """Raised when a group is resolved at an empty point."""
    pass


class IllegalMoveError(BoardError):
    """Base exception for moves rejected by the move engine."""
    pass


class OccupiedPointError(IllegalMoveError):
    """Raised when a stone is placed on a non-empty point."""
    pass


class SuicideMoveError(IllegalMoveError):
    """Raised when a move leaves its own group without liberties."""
    pass


# ============================================================================
# Colors and Points
# ============================================================================

class Color(Enum):
    """Stone color. Empty points are represented by None."""
    BLACK = "B"
    WHITE = "W"

    @property
    def opponent(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @property
    def symbol(self) -> str:
        return BLACK_SYMBOL if self is Color.BLACK else WHITE_SYMBOL

    @classmethod
    def from_tag(cls, tag: str) -> "Color":
        """
        Parse a color tag.

        Args:
            tag: 'B'/'W' in either case, as used by SGF and GTP

        Returns:
            The matching Color

        Raises:
            ValueError: If tag is not a color
        """
        try:
            return cls(tag.upper())
        except (AttributeError, ValueError):
            raise ValueError(f"Color must be 'B' or 'W', got {tag!r}")


class Point(NamedTuple):
    """1-based board coordinate: x is the column, y is the row."""
    x: int
    y: int


# ============================================================================
# Board
# ============================================================================

@dataclass(frozen=True)
class Board:
    """
    Immutable Go board of arbitrary rectangular size.

    Every modifying operation returns a new Board, so board values can be
    retained, compared and shared between threads freely. Legality of moves
    is not checked here (see lambdago.engine).

    Attributes:
        width: Number of columns (x runs from 1 to width)
        height: Number of rows (y runs from 1 to height)
        cells: Row-major cell states, None for empty
    """
    width: int
    height: int
    cells: Tuple[Optional[Color], ...]

    def __post_init__(self):
        """Validate dimensions and cells; cells are frozen into a tuple."""
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensionError(
                f"Board dimensions must be positive, got {self.width}x{self.height}"
            )
        object.__setattr__(self, "cells", tuple(self.cells))
        if len(self.cells) != self.width * self.height:
            raise InvalidDimensionError(
                f"Expected {self.width * self.height} cells, got {len(self.cells)}"
            )
        for cell in self.cells:
            if cell is not None and not isinstance(cell, Color):
                raise ValueError(f"Cells must be None or a Color, got {cell!r}")

    @classmethod
    def create(cls, width: int, height: int) -> "Board":
        """
        Create an empty board.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)

        Returns:
            Board with every point empty

        Raises:
            InvalidDimensionError: If width or height is not positive
        """
        if width <= 0 or height <= 0:
            raise InvalidDimensionError(
                f"Board dimensions must be positive, got {width}x{height}"
            )
        return cls(width=width, height=height, cells=(None,) * (width * height))

    # --- indexing ---

    def in_bounds(self, point: Point) -> bool:
        x, y = point
        if not (isinstance(x, Integral) and isinstance(y, Integral)):
            return False
        return 1 <= x <= self.width and 1 <= y <= self.height

    def index(self, point: Point) -> int:
        """
        Row-major offset of a point in cells.

        Raises:
            OutOfBoundsError: If point is outside the board
        """
        if not self.in_bounds(point):
            raise OutOfBoundsError(
                f"Point {tuple(point)} out of bounds for {self.width}x{self.height} board"
            )
        x, y = point
        return (y - 1) * self.width + (x - 1)

    def point_at(self, index: int) -> Point:
        """Inverse of index()."""
        y, x = divmod(index, self.width)
        return Point(x + 1, y + 1)

    def points(self) -> Iterator[Point]:
        """All points in row-major order."""
        for y in range(1, self.height + 1):
            for x in range(1, self.width + 1):
                yield Point(x, y)

    def neighbors(self, point: Point) -> Iterator[Point]:
        """In-bounds 4-adjacent points of point."""
        x, y = point
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            neighbor = Point(x + dx, y + dy)
            if self.in_bounds(neighbor):
                yield neighbor

    # --- access ---

    def get(self, point: Point) -> Optional[Color]:
        """
        Cell state at point.

        Args:
            point: 1-based (x, y)

        Returns:
            Color of the stone at point, or None if empty

        Raises:
            OutOfBoundsError: If point is outside the board
        """
        return self.cells[self.index(point)]

    def is_empty(self, point: Point) -> bool:
        return self.get(point) is None

    def stones(self, color: Optional[Color] = None) -> Iterator[Point]:
        """Points holding a stone (of the given color, if any)."""
        for i, cell in enumerate(self.cells):
            if cell is not None and (color is None or cell is color):
                yield self.point_at(i)

    # --- transformations ---

    def _replace(self, updates: Iterable[Tuple[int, Optional[Color]]]) -> "Board":
        cells = list(self.cells)
        for i, cell in updates:
            cells[i] = cell
        return Board(width=self.width, height=self.height, cells=tuple(cells))

    def with_stone(self, point: Point, color: Color) -> "Board":
        """
        Return a new board with point set to color.

        No legality check is made; the point may even be occupied.

        Raises:
            OutOfBoundsError: If point is outside the board
        """
        if not isinstance(color, Color):
            raise ValueError(f"Expected a Color, got {color!r}")
        return self._replace([(self.index(point), color)])

    def with_empty(self, point: Point) -> "Board":
        """
        Return a new board with point emptied.

        Raises:
            OutOfBoundsError: If point is outside the board
        """
        return self._replace([(self.index(point), None)])

    def with_empties(self, points: Iterable[Point]) -> "Board":
        """Return a new board with all given points emptied."""
        return self._replace([(self.index(p), None) for p in points])

    # --- output ---

    def render(self) -> str:
        """
        Text form of the board.

        One line per row starting with row 1, one character per column:
        'X' black, 'O' white, '.' empty. Every row ends with a newline.
        """
        lines = []
        for y in range(self.height):
            row = self.cells[y * self.width:(y + 1) * self.width]
            lines.append("".join(
                EMPTY_SYMBOL if cell is None else cell.symbol for cell in row
            ))
            lines.append("\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Board(width={self.width}, "
            f"height={self.height}, "
            f"black={sum(1 for c in self.cells if c is Color.BLACK)}, "
            f"white={sum(1 for c in self.cells if c is Color.WHITE)})"
        )


def create_board(width: int, height: Optional[int] = None) -> Board:
    """
    Factory function for an empty board.

    Args:
        width: Number of columns
        height: Number of rows (default: same as width)

    Returns:
        Empty Board
    """
    if height is None:
        height = width
    return Board.create(width, height)


def render(board: Board) -> str:
    """Text form of board, see Board.render."""
    return board.render()
