# /// script
# requires-python = ">=3.12"
# dependencies = ["pytest>=7.0", "pydantic>=2.0"]
# ///
"""Tests for runner_state.RunnerStateTracker.

Validates:
  1. Only movements for the applied event index are merged
  2. Duplicate runner entries resolve last-wins
  3. The runner map persists across events until cleared
  4. Outs and runs count only the applied index's movements
  5. Fielding credit and pinch-runner removal
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from models import Position, RunnerMovement
from runner_state import RunnerStateTracker


def move(runner_id, play_index, end=None, is_out=False, **kwargs) -> RunnerMovement:
    return RunnerMovement(runner_id=runner_id, play_index=play_index, end=end,
                          is_out=is_out, **kwargs)


@pytest.fixture
def tracker() -> RunnerStateTracker:
    return RunnerStateTracker()


class TestApply:
    def test_empty(self, tracker):
        update = tracker.apply(None, 0)
        assert (update.base_value, update.outs, update.runs) == (0, 0, 0)

    def test_filters_by_index(self, tracker):
        moves = [move(1, 0, end="1B"), move(2, 3, end="2B")]
        update = tracker.apply(moves, 0)
        assert update.base_value == 1

    def test_last_entry_wins(self, tracker):
        update = tracker.apply([move(1, 0, end="1B"), move(1, 0, end="3B")], 0)
        assert update.base_value == 4

    def test_duplicate_out_counted_once(self, tracker):
        update = tracker.apply([move(1, 0, is_out=True), move(1, 0, is_out=True)], 0)
        assert update.outs == 1

    def test_map_persists_between_events(self, tracker):
        moves = [move(1, 0, end="1B"), move(2, 2, end="1B"), move(1, 2, end="2B")]
        tracker.apply(moves, 0)
        update = tracker.apply(moves, 2)
        assert update.base_value == 3
        assert update.outs == 0

    def test_outs_and_runs_only_for_index(self, tracker):
        tracker.apply([move(1, 0, end="3B")], 0)
        update = tracker.apply([move(1, 1, end="score"), move(2, 1, is_out=True)], 1)
        assert update.runs == 1
        assert update.outs == 1
        assert update.base_value == 0

        update = tracker.apply([], 2)
        assert (update.runs, update.outs) == (0, 0)

    @pytest.mark.parametrize("ends,expected", [
        (["1B"], 1),
        (["2B"], 2),
        (["3B"], 4),
        (["1B", "2B"], 3),
        (["1B", "3B"], 5),
        (["2B", "3B"], 6),
        (["1B", "2B", "3B"], 7),
    ])
    def test_base_value_encoding(self, tracker, ends, expected):
        moves = [move(i, 0, end=end) for i, end in enumerate(ends)]
        assert tracker.apply(moves, 0).base_value == expected

    def test_fielding_credit_first_with_position(self, tracker):
        moves = [
            move(1, 0, end="1B"),
            move(2, 0, is_out=True, fielded_by_id=6, fielded_by_position=Position.SHORT_STOP),
            move(3, 0, is_out=True, fielded_by_id=4, fielded_by_position=Position.SECOND_BASE),
        ]
        update = tracker.apply(moves, 0)
        assert update.fielded_by_id == 6
        assert update.fielded_by_position == Position.SHORT_STOP

    def test_no_fielding_credit(self, tracker):
        update = tracker.apply([move(1, 0, end="1B")], 0)
        assert update.fielded_by_id is None
        assert update.fielded_by_position is None


class TestMutation:
    def test_remove_runner_on_base(self, tracker):
        tracker.apply([move(1, 0, end="1B"), move(2, 0, end="3B")], 0)
        tracker.remove_runner_on_base(1)
        assert tracker.base_value == 4
        tracker.remove_runner_on_base(3)
        assert tracker.base_value == 0

    def test_remove_from_empty_base(self, tracker):
        tracker.apply([move(1, 0, end="2B")], 0)
        tracker.remove_runner_on_base(3)
        assert tracker.base_value == 2

    def test_clear(self, tracker):
        tracker.apply([move(1, 0, end="2B")], 0)
        tracker.clear()
        assert tracker.base_value == 0
        assert tracker.apply(None, 0).base_value == 0
