# /// script
# requires-python = ">=3.12"
# dependencies = []
# ///
"""Level-of-play metadata keyed by MLB Stats API sport id.

Every pitch record carries the sport code, name and abbreviation of the game
along with whether the level is MLB-affiliated and a level-of-play rank
(1 = Major League Baseball, larger numbers are lower levels).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Affiliation(str, Enum):
    MLB = "MLB"
    NON_MLB = "NonMLB"


@dataclass(frozen=True)
class SportInfo:
    sport_id: int
    code: str
    name: str
    abbr: str
    affiliation: Affiliation
    level_of_play_rank: int


UNKNOWN_LEVEL_OF_PLAY = 99

# ---------------------------------------------------------------------------
# Sport lookup table
# ---------------------------------------------------------------------------

SPORTS: dict[int, SportInfo] = {
    1: SportInfo(1, "mlb", "Major League Baseball", "MLB", Affiliation.MLB, 1),
    11: SportInfo(11, "aaa", "Triple-A", "AAA", Affiliation.MLB, 2),
    12: SportInfo(12, "aax", "Double-A", "AA", Affiliation.MLB, 3),
    13: SportInfo(13, "afa", "High-A", "A+", Affiliation.MLB, 4),
    14: SportInfo(14, "afx", "Single-A", "A", Affiliation.MLB, 5),
    15: SportInfo(15, "asx", "Class A Short Season", "A(Short)", Affiliation.MLB, 6),
    16: SportInfo(16, "rok", "Rookie", "ROK", Affiliation.MLB, 7),
    17: SportInfo(17, "win", "Winter Leagues", "WIN", Affiliation.NON_MLB, 8),
    21: SportInfo(21, "min", "Minor League Baseball", "Minors", Affiliation.MLB, 9),
    22: SportInfo(22, "bbc", "College Baseball", "College", Affiliation.NON_MLB, 10),
    23: SportInfo(23, "ind", "Independent Leagues", "IND", Affiliation.NON_MLB, 11),
    51: SportInfo(51, "int", "International Baseball", "INT", Affiliation.NON_MLB, 12),
    586: SportInfo(586, "hsb", "High School Baseball", "HS", Affiliation.NON_MLB, 13),
}


def get_sport(sport_id: int) -> SportInfo:
    """Return level-of-play metadata, or an "unknown" entry for unlisted ids."""
    sport = SPORTS.get(sport_id)
    if sport is not None:
        return sport
    return SportInfo(
        sport_id=sport_id,
        code="",
        name="Unknown",
        abbr="",
        affiliation=Affiliation.NON_MLB,
        level_of_play_rank=UNKNOWN_LEVEL_OF_PLAY,
    )
