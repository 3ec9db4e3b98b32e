"""
Results of reveal and chord commands.

These are normal outcomes that drive state transitions, not errors.
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Union

from .board import Position


@dataclass(frozen=True)
class Revealed:
    """Cells were revealed safely (possibly none, for a no-op)."""

    positions: FrozenSet[Position] = frozenset()


@dataclass(frozen=True)
class HitMine:
    """
    A mine was revealed.

    Attributes:
        position: The mine that ended the game (the first one, for chords).
        positions: Every cell newly revealed by the command, mine included.
    """

    position: Position
    positions: FrozenSet[Position] = field(default=frozenset())


@dataclass(frozen=True)
class Mismatch:
    """Chord ignored because the flag count does not match the number."""

    flagged: int
    expected: int


RevealOutcome = Union[Revealed, HitMine]
ChordOutcome = Union[Revealed, HitMine, Mismatch]
