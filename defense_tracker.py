# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Defensive alignment tracking for both teams through a game."""

from __future__ import annotations

import logging
from typing import Optional

from models import (
    POSITION_SLOTS,
    BoxScore,
    DefenseAssignment,
    HalfInning,
    Position,
)

logger = logging.getLogger(__name__)

# Order in which a batter's own defensive slot is searched.
BATTER_POSITION_ORDER: tuple[Position, ...] = (
    Position.CATCHER,
    Position.FIRST_BASE,
    Position.SECOND_BASE,
    Position.SHORT_STOP,
    Position.THIRD_BASE,
    Position.LEFT_FIELD,
    Position.RIGHT_FIELD,
    Position.CENTER_FIELD,
    Position.PITCHER,
    Position.DESIGNATED_HITTER,
)


class DefenseTracker:
    """Current fielder at each position for the home and away teams.

    The home team fields in the top half, the away team in the bottom half.
    """

    def __init__(self, home: DefenseAssignment, away: DefenseAssignment) -> None:
        self.home = home
        self.away = away

    @classmethod
    def from_boxscore(cls, boxscore: BoxScore) -> DefenseTracker:
        return cls(boxscore.home_defense, boxscore.away_defense)

    def fielding(self, half: HalfInning) -> DefenseAssignment:
        return self.home if half == HalfInning.TOP else self.away

    def batting(self, half: HalfInning) -> DefenseAssignment:
        return self.away if half == HalfInning.TOP else self.home

    def substitute(
        self,
        half: HalfInning,
        player_id: int,
        position: Optional[Position],
    ) -> None:
        """Place ``player_id`` at ``position`` for the team in the field.

        A substitution without a position is a designated-hitter swap.
        Positions with no defensive slot (PH, PR, bench) are ignored.
        """
        if position is None:
            position = Position.DESIGNATED_HITTER
        slot = POSITION_SLOTS.get(position)
        if slot is None:
            logger.debug("Ignoring substitution of %s to %s", player_id, position.value)
            return

        updated = self.fielding(half).model_copy(update={slot: player_id})
        if half == HalfInning.TOP:
            self.home = updated
        else:
            self.away = updated
        logger.debug("Defense (%s half): %s -> %s", half.value, player_id, position.value)

    def batter_position(self, half: HalfInning, batter_id: int) -> Position:
        """Defensive position the batter holds for the batting team, else BENCH."""
        assignment = self.batting(half)
        for position in BATTER_POSITION_ORDER:
            if getattr(assignment, POSITION_SLOTS[position]) == batter_id:
                return position
        return Position.BENCH
