"""
Group resolution for the lambdago board model.

A group (chain) is a maximal set of same-colored stones connected through
4-adjacency. Its liberties are the distinct empty points adjacent to any of
its stones. Groups are never stored on the board; they are recomputed from
a Board on demand.
"""

from collections import deque
from dataclasses import dataclass
from typing import FrozenSet, Tuple

from .board import Board, Color, InvalidGroupQueryError, Point


@dataclass(frozen=True)
class Group:
    """
    A connected group of stones.

    Attributes:
        color: Color of every stone in the group
        stones: Points of the group
        liberties: Distinct empty points adjacent to the group
    """
    color: Color
    stones: FrozenSet[Point]
    liberties: FrozenSet[Point]

    @property
    def liberty_count(self) -> int:
        return len(self.liberties)

    @property
    def is_captured(self) -> bool:
        return not self.liberties

    def __len__(self) -> int:
        return len(self.stones)

    def __contains__(self, point) -> bool:
        return point in self.stones


def find_group(board: Board, point: Point) -> Group:
    """
    Resolve the group containing point by breadth-first flood fill.

    Visited stones and liberties are tracked by row-major index, so every
    point is expanded at most once and the cost is O(width * height).

    Args:
        board: Board to inspect (not modified)
        point: A point holding a stone

    Returns:
        The Group containing point

    Raises:
        OutOfBoundsError: If point is outside the board
        InvalidGroupQueryError: If point is empty
    """
    color = board.get(point)
    if color is None:
        raise InvalidGroupQueryError(f"No stone at {tuple(point)}")

    start = board.index(point)
    visited = {start}
    liberties = set()
    queue = deque([point])

    while queue:
        current = queue.popleft()
        for neighbor in board.neighbors(current):
            i = board.index(neighbor)
            cell = board.cells[i]
            if cell is None:
                liberties.add(i)
            elif cell is color and i not in visited:
                visited.add(i)
                queue.append(neighbor)

    return Group(
        color=color,
        stones=frozenset(board.point_at(i) for i in visited),
        liberties=frozenset(board.point_at(i) for i in liberties),
    )


def group_and_liberties(board: Board, point: Point) -> Tuple[Group, int]:
    """
    Group containing point and its liberty count.

    A liberty shared by several stones of the group counts once.

    Raises:
        InvalidGroupQueryError: If point is empty
    """
    group = find_group(board, point)
    return group, group.liberty_count
