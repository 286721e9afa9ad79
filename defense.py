# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Per-fielder projection of balls in play.

Expands a finished ``PitchRecord`` into one ``DefenseRecord`` per fielder
(catcher through center field, then the pitcher) so fielding can be analysed
player by player.
"""

from __future__ import annotations

import logging
from typing import Mapping

from models import Player, Position
from records import DefenseRecord, PitchRecord

logger = logging.getLogger(__name__)

# Record field holding each fielder's id, in output order.
FIELDER_SLOTS: tuple[tuple[str, Position], ...] = (
    ("catcher_id", Position.CATCHER),
    ("first_base_id", Position.FIRST_BASE),
    ("second_base_id", Position.SECOND_BASE),
    ("third_base_id", Position.THIRD_BASE),
    ("short_stop_id", Position.SHORT_STOP),
    ("left_field_id", Position.LEFT_FIELD),
    ("right_field_id", Position.RIGHT_FIELD),
    ("center_field_id", Position.CENTER_FIELD),
)

# Play-level context copied verbatim onto every fielder row.
_SHARED_FIELDS = (
    "game_date",
    "game_type",
    "batter",
    "batter_name",
    "batter_bats",
    "batter_bats_desc",
    "pitcher",
    "pitcher_name",
    "hit_data_trajectory",
    "hit_data_contact_quality",
    "hit_data_launch_angle",
    "hit_data_exit_velocity",
    "hit_data_total_distance",
    "hit_data_spray_angle",
    "hit_data_calc_distance",
    "sport_id",
    "sport_code",
    "sport_name",
    "sport_abbr",
    "sport_affiliation",
    "sport_level_of_play",
    "league_name",
    "venue_id",
    "venue_name",
    "venue_city",
    "venue_capacity",
    "venue_surface",
    "venue_roof",
    "venue_left_line",
    "venue_left",
    "venue_left_center",
    "venue_center",
    "venue_right_center",
    "venue_right",
    "venue_right_line",
    "venue_retrosheet_id",
)


def fielders(record: PitchRecord) -> list[tuple[int, Position]]:
    """Fielders on the play: every filled defensive slot plus the pitcher."""
    result = [
        (getattr(record, slot), position)
        for slot, position in FIELDER_SLOTS
        if getattr(record, slot) is not None
    ]
    result.append((record.pitcher, Position.PITCHER))
    return result


def project_defense(
    record: PitchRecord,
    players: Mapping[int, Player],
) -> list[DefenseRecord]:
    """Expand a ball in play into one row per fielder.

    Args:
        record: A finished pitch record.
        players: Player directory keyed by person id.

    Returns:
        Rows in catcher-to-pitcher order.  Empty when the pitch was not put
        in play or any fielder is missing from ``players``.
    """
    if record.in_play != 1:
        return []

    shared = {name: getattr(record, name) for name in _SHARED_FIELDS}
    shared.update(
        team_id=record.pitcher_team_id,
        team_name=record.pitcher_team_name,
        parent_team_id=record.pitcher_parent_team_id,
        parent_team_name=record.pitcher_parent_team_name,
    )

    rows: list[DefenseRecord] = []
    for fielder_id, position in fielders(record):
        player = players.get(fielder_id)
        if player is None:
            logger.warning(
                "Game %d play %s: no player record for fielder %d, dropping play",
                record.game_pk, record.play_id, fielder_id,
            )
            return []
        rows.append(DefenseRecord(
            **shared,
            fielder=fielder_id,
            fielder_name=player.name,
            fielder_dob=player.birth_date.isoformat() if player.birth_date else "",
            fielder_draft_pick_number=player.draft_pick_number,
            fielder_throws_code=player.throws_code,
            fielder_throws_desc=player.throws_desc,
            fielder_height_str=player.height_str,
            fielder_height_in=player.height_in,
            fielder_weight=player.weight,
            fielder_college_name=player.college_name,
            fielder_birth_country=player.birth_country,
            position=position,
        ))
    return rows
