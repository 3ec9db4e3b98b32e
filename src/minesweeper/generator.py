"""
Mine generation.

Layouts are produced lazily on the first reveal so the clicked cell and
its neighbors can be kept mine-free. The random source is always passed
in; nothing here touches the global random state.
"""
import logging
import random
from typing import FrozenSet, Iterable

from .board import Board, Position
from .errors import GenerationError

logger = logging.getLogger(__name__)


def safe_zone(board: Board, safe_position: Position) -> FrozenSet[Position]:
    """The clicked cell plus all of its neighbors."""
    return frozenset(board.neighbors(safe_position) | {safe_position})


def generate_layout(
    width: int,
    height: int,
    mine_count: int,
    excluded: Iterable[Position],
    rng: random.Random,
) -> FrozenSet[Position]:
    """
    Choose mine positions uniformly at random without replacement.

    Args:
        width: Number of columns.
        height: Number of rows.
        mine_count: Number of mines to place.
        excluded: Positions that must stay mine-free.
        rng: Random source used for the selection.

    Returns:
        Frozen set of exactly mine_count positions.

    Raises:
        GenerationError: If fewer than mine_count positions are eligible.
    """
    excluded_set = set(excluded)
    eligible = [
        (row, col)
        for row in range(height)
        for col in range(width)
        if (row, col) not in excluded_set
    ]
    if mine_count < 0 or mine_count > len(eligible):
        raise GenerationError(
            f"Cannot place {mine_count} mines in {len(eligible)} eligible cells"
        )
    return frozenset(rng.sample(eligible, mine_count))


def place_mines(
    board: Board,
    mine_count: int,
    safe_position: Position,
    rng: random.Random,
) -> FrozenSet[Position]:
    """
    Generate a layout that keeps the safe zone clear and lay it on board.

    Returns:
        The mine positions that were laid.
    """
    zone = safe_zone(board, safe_position)
    mines = generate_layout(board.width, board.height, mine_count, zone, rng)
    board.lay_mines(mines)
    logger.debug(
        f"Laid {len(mines)} mines avoiding {len(zone)} cells "
        f"around {safe_position}"
    )
    return mines
