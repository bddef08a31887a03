"""
SGF (Smart Game Format) records for lambdago.

Provides import/export of game records using the sgfmill library, and the
mapping between sgfmill points and 1-based Board points.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple

from sgfmill import sgf

from .board import Color, Point
from .engine import Move


# SGF root properties copied into GameRecord.metadata
METADATA_PROPERTIES = [
    ("PB", "black_player"),
    ("PW", "white_player"),
    ("DT", "date"),
    ("RE", "result"),
    ("EV", "event"),
    ("GN", "game_name"),
]


@dataclass
class GameRecord:
    """
    A parsed game record (main line only).

    Attributes:
        board_size: Board size from SZ
        komi: Komi value (default 7.5)
        handicap: Number of handicap stones from HA
        setup_stones: Stones added by AB/AW in the root node
        moves: Moves of the main line in order; passes have point None
        analysis: Raw LZ (Lizzie) text of each move node, None if absent
        metadata: Player names, date, result, event, game name
    """
    board_size: int = 19
    komi: float = 7.5
    handicap: int = 0
    setup_stones: List[Tuple[Color, Point]] = field(default_factory=list)
    moves: List[Move] = field(default_factory=list)
    analysis: List[Optional[str]] = field(default_factory=list)
    metadata: Dict[str, str] = field(default_factory=dict)

    @property
    def black_player(self) -> str:
        return self.metadata.get("black_player", "")

    @property
    def white_player(self) -> str:
        return self.metadata.get("white_player", "")

    @property
    def result(self) -> str:
        return self.metadata.get("result", "")


# ============================================================================
# Coordinate Conversion
# ============================================================================

def sgf_point_to_board(point: Optional[Tuple[int, int]], board_size: int) -> Optional[Point]:
    """
    Convert sgfmill point (row, col) to a Board point.

    sgfmill uses (row, col) where row 0 is the bottom and col 0 is the left.
    Board points are 1-based with y = 1 at the top, the same orientation as
    the letters of the SGF text ("pd" is x = 16, y = 4).
    """
    if point is None:
        return None

    row, col = point
    if not (0 <= row < board_size and 0 <= col < board_size):
        return None

    return Point(col + 1, board_size - row)


def board_point_to_sgf(point: Optional[Point], board_size: int) -> Optional[Tuple[int, int]]:
    """
    Convert a Board point to sgfmill point (row, col).
    """
    if point is None:
        return None

    x, y = point
    if not (1 <= x <= board_size and 1 <= y <= board_size):
        return None

    return (board_size - y, x - 1)


# ============================================================================
# Parsing
# ============================================================================

def _get_property(node, identifier: str, default=None):
    if not node.has_property(identifier):
        return default
    value = node.get(identifier)
    return default if value is None else value


def _get_text(node, identifier: str) -> Optional[str]:
    """Raw text of a property, bypassing sgfmill's typed interpretation."""
    if not node.has_property(identifier):
        return None
    raw = node.get_raw(identifier)
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    return raw


def parse_sgf(sgf_content: str) -> GameRecord:
    """
    Parse an SGF string into a GameRecord.

    Args:
        sgf_content: Raw SGF file content as string

    Returns:
        GameRecord of the main line

    Raises:
        ValueError: If the SGF is malformed
    """
    game = sgf.Sgf_game.from_string(sgf_content)
    root = game.get_root()
    board_size = game.get_size()

    record = GameRecord(
        board_size=board_size,
        komi=float(_get_property(root, "KM", 7.5)),
        handicap=int(_get_property(root, "HA", 0)),
    )

    # Setup stones (AB/AW) in the root node
    black, white, _ = root.get_setup_stones()
    for color, points in ((Color.BLACK, black), (Color.WHITE, white)):
        for sgf_point in sorted(points):
            point = sgf_point_to_board(sgf_point, board_size)
            if point is not None:
                record.setup_stones.append((color, point))

    for prop, key in METADATA_PROPERTIES:
        value = _get_property(root, prop)
        if value:
            record.metadata[key] = value

    for node in game.get_main_sequence():
        # Root node holds setup, not moves
        if node is root:
            continue

        colour, sgf_point = node.get_move()
        if colour is None:
            continue

        record.moves.append(Move(
            Color.from_tag(colour),
            sgf_point_to_board(sgf_point, board_size),
        ))
        record.analysis.append(_get_text(node, "LZ"))

    return record


def create_sgf(
    board_size: int,
    moves: List[Move],
    komi: float = 7.5,
    handicap: int = 0,
    setup_stones: Optional[List[Tuple[Color, Point]]] = None,
    black_player: str = "Black",
    white_player: str = "White",
    result: Optional[str] = None,
    game_name: str = "lambdago game",
) -> str:
    """
    Create an SGF string from game data.

    Args:
        board_size: Board size
        moves: Moves in play order; a Move with point None is a pass
        komi: Komi value
        handicap: Number of handicap stones (HA)
        setup_stones: Stones to add in the root node (AB/AW)
        black_player: Black player name
        white_player: White player name
        result: Game result, e.g. "B+12.5"
        game_name: Name of the game

    Returns:
        SGF formatted string
    """
    game = sgf.Sgf_game(size=board_size)
    root = game.get_root()

    root.set("KM", komi)
    root.set("PB", black_player)
    root.set("PW", white_player)
    root.set("DT", date.today().isoformat())
    root.set("GN", game_name)
    root.set("AP", ("lambdago", "1.0"))
    if result:
        root.set("RE", result)
    if handicap > 0:
        root.set("HA", handicap)

    if setup_stones:
        black = [board_point_to_sgf(p, board_size) for c, p in setup_stones if c is Color.BLACK]
        white = [board_point_to_sgf(p, board_size) for c, p in setup_stones if c is Color.WHITE]
        root.set_setup_stones(
            [p for p in black if p is not None],
            [p for p in white if p is not None],
        )

    current_node = root
    for move in moves:
        new_node = current_node.new_child()
        new_node.set_move(move.color.value.lower(), board_point_to_sgf(move.point, board_size))
        current_node = new_node

    return game.serialise().decode("utf-8")


def load_sgf_file(file_path: str) -> GameRecord:
    """
    Load and parse an SGF file from disk.

    Args:
        file_path: Path to the SGF file

    Returns:
        Parsed game record (same as parse_sgf)
    """
    with open(file_path, "rb") as f:
        content = f.read().decode("utf-8", errors="replace")
    return parse_sgf(content)


def save_sgf_file(file_path: str, sgf_content: str) -> None:
    """
    Save an SGF string to a file.

    Args:
        file_path: Path to save the file
        sgf_content: SGF formatted string
    """
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(sgf_content)
