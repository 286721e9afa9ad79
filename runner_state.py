# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Runner-state tracking across a half-inning.

The play-by-play carries runner movements as a flat list per plate
appearance, each tagged with the event index it belongs to.  The tracker
keeps the last known movement of every runner seen in the current
half-inning so the base-occupancy code always reflects the whole base
state, while outs and runs are attributed only to the event being applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from models import Position, RunnerMovement


@dataclass(frozen=True)
class RunnerUpdate:
    """Result of applying one event's runner movements."""
    base_value: int
    outs: int
    runs: int
    fielded_by_id: Optional[int] = None
    fielded_by_position: Optional[Position] = None


class RunnerStateTracker:
    """Persistent runner-id -> last-movement map for one half-inning."""

    def __init__(self) -> None:
        self._runners: dict[int, RunnerMovement] = {}

    @property
    def base_value(self) -> int:
        return sum(r.end_base_value for r in self._runners.values())

    def apply(
        self,
        movements: Optional[Iterable[RunnerMovement]],
        play_index: int,
    ) -> RunnerUpdate:
        """Merge the movements for ``play_index`` into the runner map.

        Movements for other indexes are ignored.  When a runner appears more
        than once for the index, the last entry in source order wins.

        Args:
            movements: Every runner movement of the plate appearance.
            play_index: Event index to apply.

        Returns:
            Base code over all tracked runners, plus outs, runs and fielding
            credit from this index's movements only.
        """
        matched = [m for m in movements or () if m.play_index == play_index]

        latest: dict[int, RunnerMovement] = {}
        for movement in matched:
            latest[movement.runner_id] = movement
        self._runners.update(latest)

        fielder = next(
            (m for m in matched if m.fielded_by_position is not None),
            None,
        )
        return RunnerUpdate(
            base_value=self.base_value,
            outs=sum(m.outs for m in latest.values()),
            runs=sum(m.runs for m in latest.values()),
            fielded_by_id=fielder.fielded_by_id if fielder else None,
            fielded_by_position=fielder.fielded_by_position if fielder else None,
        )

    def remove_runner_on_base(self, base: int) -> None:
        """Drop the runner currently standing on ``base`` (1, 2 or 3)."""
        if base < 1:
            return
        value = 2 ** (base - 1)
        self._runners = {
            runner_id: movement
            for runner_id, movement in self._runners.items()
            if movement.end_base_value != value
        }

    def clear(self) -> None:
        self._runners.clear()
