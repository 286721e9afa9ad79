# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Data models for pitch-by-pitch game reconstruction.

Input models describe one game's play-by-play (plate appearances, their
events and runner movements) and the metadata directory that the
reconstruction engine consults (schedule, boxscore, venue, team and player
lookups).  Output records live in ``records``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from data.run_expectancy import RE288_DEFAULT, RunExpectancyTable

# Runner movements tied to the plate appearance as a whole rather than to a
# specific event carry this play index.
UNASSIGNED_INDEX = -1


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class HalfInning(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"


class PlayEventType(str, Enum):
    PITCH = "pitch"
    ACTION = "action"
    PICKOFF = "pickoff"
    NO_PITCH = "no_pitch"
    STEPOFF = "stepoff"


class ActionKind(str, Enum):
    DEFENSIVE_SUBSTITUTION = "defensive_substitution"
    DEFENSIVE_SWITCH = "defensive_switch"
    OFFENSIVE_SUBSTITUTION = "offensive_substitution"
    PITCHING_SUBSTITUTION = "pitching_substitution"
    OTHER = "other"

    @classmethod
    def from_event_type(cls, event_type: str | None) -> ActionKind:
        """Map a feed ``eventType`` to an action kind; unlisted types are OTHER."""
        try:
            return cls(event_type)
        except ValueError:
            return cls.OTHER


class PitchCode(str, Enum):
    """Pitch result codes reported on pitch events."""
    # Balls
    BALL = "B"
    BALL_IN_DIRT = "*B"
    PITCHOUT = "P"
    INTENT_BALL = "I"
    HIT_BY_PITCH = "H"
    AUTOMATIC_BALL = "V"
    AUTOMATIC_BALL_SHIFT = "VS"
    AUTOMATIC_BALL_CATCHER = "VC"
    AUTOMATIC_BALL_BATTER = "VB"
    AUTOMATIC_BALL_PITCHER = "VP"
    # Called / automatic strikes
    CALLED_STRIKE = "C"
    AUTOMATIC_STRIKE = "A"
    AUTOMATIC_STRIKE_CATCHER = "AC"
    AUTOMATIC_STRIKE_BATTER = "AB"
    # Swings and misses
    SWINGING_STRIKE = "S"
    SWINGING_STRIKE_BLOCKED = "W"
    SWINGING_PITCHOUT = "Q"
    MISSED_BUNT = "M"
    # Fouls
    FOUL = "F"
    FOUL_PITCHOUT = "R"
    FOUL_BUNT = "L"
    FOUL_TIP = "T"
    FOUL_TIP_BUNT = "O"
    # Balls in play
    IN_PLAY_NO_OUT = "D"
    IN_PLAY_RUNS = "E"
    IN_PLAY_OUT = "X"
    IN_PLAY_PITCHOUT_NO_OUT = "J"
    IN_PLAY_PITCHOUT = "Y"
    IN_PLAY_PITCHOUT_RUNS = "Z"
    # No pitch
    NO_PITCH = "N"
    NO_PITCH_PSO = "PSO"
    NO_PITCH_PO = "PO"


class PitchOutcome(str, Enum):
    BALL = "ball"
    CALLED_STRIKE = "called_strike"
    SWINGING_STRIKE = "swinging_strike"
    FOUL = "foul"
    FOUL_TIP = "foul_tip"
    IN_PLAY = "in_play"
    NO_PITCH = "no_pitch"


PITCH_OUTCOMES: dict[PitchCode, PitchOutcome] = {
    PitchCode.BALL: PitchOutcome.BALL,
    PitchCode.BALL_IN_DIRT: PitchOutcome.BALL,
    PitchCode.PITCHOUT: PitchOutcome.BALL,
    PitchCode.INTENT_BALL: PitchOutcome.BALL,
    PitchCode.HIT_BY_PITCH: PitchOutcome.BALL,
    PitchCode.AUTOMATIC_BALL: PitchOutcome.BALL,
    PitchCode.AUTOMATIC_BALL_SHIFT: PitchOutcome.BALL,
    PitchCode.AUTOMATIC_BALL_CATCHER: PitchOutcome.BALL,
    PitchCode.AUTOMATIC_BALL_BATTER: PitchOutcome.BALL,
    PitchCode.AUTOMATIC_BALL_PITCHER: PitchOutcome.BALL,
    PitchCode.CALLED_STRIKE: PitchOutcome.CALLED_STRIKE,
    PitchCode.AUTOMATIC_STRIKE: PitchOutcome.CALLED_STRIKE,
    PitchCode.AUTOMATIC_STRIKE_CATCHER: PitchOutcome.CALLED_STRIKE,
    PitchCode.AUTOMATIC_STRIKE_BATTER: PitchOutcome.CALLED_STRIKE,
    PitchCode.SWINGING_STRIKE: PitchOutcome.SWINGING_STRIKE,
    PitchCode.SWINGING_STRIKE_BLOCKED: PitchOutcome.SWINGING_STRIKE,
    PitchCode.SWINGING_PITCHOUT: PitchOutcome.SWINGING_STRIKE,
    PitchCode.MISSED_BUNT: PitchOutcome.SWINGING_STRIKE,
    PitchCode.FOUL: PitchOutcome.FOUL,
    PitchCode.FOUL_PITCHOUT: PitchOutcome.FOUL,
    PitchCode.FOUL_BUNT: PitchOutcome.FOUL,
    PitchCode.FOUL_TIP: PitchOutcome.FOUL_TIP,
    PitchCode.FOUL_TIP_BUNT: PitchOutcome.FOUL_TIP,
    PitchCode.IN_PLAY_NO_OUT: PitchOutcome.IN_PLAY,
    PitchCode.IN_PLAY_RUNS: PitchOutcome.IN_PLAY,
    PitchCode.IN_PLAY_OUT: PitchOutcome.IN_PLAY,
    PitchCode.IN_PLAY_PITCHOUT_NO_OUT: PitchOutcome.IN_PLAY,
    PitchCode.IN_PLAY_PITCHOUT: PitchOutcome.IN_PLAY,
    PitchCode.IN_PLAY_PITCHOUT_RUNS: PitchOutcome.IN_PLAY,
    PitchCode.NO_PITCH: PitchOutcome.NO_PITCH,
    PitchCode.NO_PITCH_PSO: PitchOutcome.NO_PITCH,
    PitchCode.NO_PITCH_PO: PitchOutcome.NO_PITCH,
}


def classify_pitch(code: str | None) -> Optional[PitchOutcome]:
    """Return the outcome for a raw result code, or None if it is unrecognised."""
    if not code:
        return None
    try:
        return PITCH_OUTCOMES[PitchCode(code)]
    except ValueError:
        return None


class Trajectory(str, Enum):
    GROUND_BALL = "ground_ball"
    LINE_DRIVE = "line_drive"
    FLY_BALL = "fly_ball"
    POPUP = "popup"
    BUNT_GROUNDER = "bunt_grounder"
    BUNT_POPUP = "bunt_popup"
    BUNT_LINE_DRIVE = "bunt_line_drive"
    UNKNOWN = "unknown"


BUNT_TRAJECTORIES = frozenset({
    Trajectory.BUNT_GROUNDER,
    Trajectory.BUNT_POPUP,
    Trajectory.BUNT_LINE_DRIVE,
})


class Hardness(str, Enum):
    SOFT = "soft"
    MEDIUM = "medium"
    HARD = "hard"


class Position(str, Enum):
    PITCHER = "P"
    CATCHER = "C"
    FIRST_BASE = "1B"
    SECOND_BASE = "2B"
    THIRD_BASE = "3B"
    SHORT_STOP = "SS"
    LEFT_FIELD = "LF"
    CENTER_FIELD = "CF"
    RIGHT_FIELD = "RF"
    DESIGNATED_HITTER = "DH"
    PINCH_HITTER = "PH"
    PINCH_RUNNER = "PR"
    TWO_WAY_PLAYER = "TWP"
    BENCH = "Bench"

    @classmethod
    def parse(cls, abbreviation: str | None) -> Optional[Position]:
        """Return the position for a feed abbreviation, or None if unknown."""
        if not abbreviation:
            return None
        try:
            return cls(abbreviation)
        except ValueError:
            return None


class PitcherRole(str, Enum):
    SP = "SP"
    RP = "RP"


# ---------------------------------------------------------------------------
# Play-by-play: events
# ---------------------------------------------------------------------------

class EventDetails(BaseModel):
    code: Optional[str] = None
    description: Optional[str] = None
    event: Optional[str] = None
    event_type: Optional[str] = None
    is_in_play: Optional[bool] = None
    pitch_type_code: Optional[str] = None
    pitch_type_desc: Optional[str] = None


class EventCount(BaseModel):
    """Count reported by the source after the event."""
    balls: Optional[int] = None
    strikes: Optional[int] = None
    outs: Optional[int] = None


class PitchCoordinates(BaseModel):
    a_x: Optional[float] = None
    a_y: Optional[float] = None
    a_z: Optional[float] = None
    pfx_x: Optional[float] = None
    pfx_z: Optional[float] = None
    p_x: Optional[float] = None
    p_z: Optional[float] = None
    v_x0: Optional[float] = None
    v_y0: Optional[float] = None
    v_z0: Optional[float] = None
    x: Optional[float] = None
    y: Optional[float] = None
    x0: Optional[float] = None
    y0: Optional[float] = None
    z0: Optional[float] = None


class PitchBreaks(BaseModel):
    break_vertical_induced: Optional[float] = None
    break_horizontal: Optional[float] = None
    spin_rate: Optional[float] = None
    spin_direction: Optional[float] = None


class PitchData(BaseModel):
    start_speed: Optional[float] = None
    end_speed: Optional[float] = None
    strike_zone_top: Optional[float] = None
    strike_zone_bottom: Optional[float] = None
    plate_time: Optional[float] = None
    extension: Optional[float] = None
    coordinates: PitchCoordinates = Field(default_factory=PitchCoordinates)
    breaks: Optional[PitchBreaks] = None


class HitData(BaseModel):
    coord_x: Optional[float] = None
    coord_y: Optional[float] = None
    trajectory: Optional[Trajectory] = None
    hardness: Optional[Hardness] = None
    launch_speed: Optional[float] = None
    launch_angle: Optional[float] = None
    total_distance: Optional[float] = None


class PlayEvent(BaseModel):
    """A single occurrence inside a plate appearance."""
    index: int
    type: PlayEventType
    play_id: Optional[str] = None
    start_time: Optional[str] = None
    details: EventDetails = Field(default_factory=EventDetails)
    count: EventCount = Field(default_factory=EventCount)
    pitch_data: Optional[PitchData] = None
    hit_data: Optional[HitData] = None
    # Substitution / switch actions
    player_id: Optional[int] = None
    position: Optional[Position] = None
    base: Optional[int] = None

    @property
    def action_kind(self) -> ActionKind:
        return ActionKind.from_event_type(self.details.event_type)


# ---------------------------------------------------------------------------
# Play-by-play: runner movements
# ---------------------------------------------------------------------------

BASE_VALUES: dict[str, int] = {"1B": 1, "2B": 2, "3B": 4}


class RunnerMovement(BaseModel):
    """One runner's base-state contribution on one event."""
    runner_id: int
    play_index: int = UNASSIGNED_INDEX
    start: Optional[str] = None
    end: Optional[str] = None
    is_out: bool = False
    fielded_by_id: Optional[int] = None
    fielded_by_position: Optional[Position] = None

    @property
    def end_base_value(self) -> int:
        return BASE_VALUES.get(self.end or "", 0)

    @property
    def outs(self) -> int:
        return 1 if self.is_out else 0

    @property
    def runs(self) -> int:
        return 1 if self.end == "score" else 0


# ---------------------------------------------------------------------------
# Play-by-play: plate appearances
# ---------------------------------------------------------------------------

class Matchup(BaseModel):
    batter_id: int
    batter_name: str = ""
    bat_side_code: Optional[str] = None
    bat_side_desc: Optional[str] = None
    pitcher_id: int
    pitcher_name: str = ""
    pitch_hand_code: Optional[str] = None
    pitch_hand_desc: Optional[str] = None


class PlateAppearanceResult(BaseModel):
    event: Optional[str] = None
    event_type: Optional[str] = None
    description: Optional[str] = None


class PlateAppearance(BaseModel):
    at_bat_index: int
    inning: int
    half_inning: HalfInning
    matchup: Matchup
    result: PlateAppearanceResult = Field(default_factory=PlateAppearanceResult)
    play_events: list[PlayEvent] = Field(default_factory=list)
    runners: list[RunnerMovement] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Metadata: schedule and boxscore
# ---------------------------------------------------------------------------

class GameSchedule(BaseModel):
    game_pk: int
    game_date: date
    game_type: str = ""
    game_type_desc: str = ""
    game_status: str = ""
    venue_id: int = 0
    sport_id: int = 1


class LineupEntry(BaseModel):
    player_id: int
    batting_order: Optional[int] = None


class DefenseAssignment(BaseModel):
    """Current occupant of each fielding slot for one team."""
    model_config = ConfigDict(frozen=True)

    pitcher: Optional[int] = None
    catcher: Optional[int] = None
    first_base: Optional[int] = None
    second_base: Optional[int] = None
    third_base: Optional[int] = None
    short_stop: Optional[int] = None
    left_field: Optional[int] = None
    center_field: Optional[int] = None
    right_field: Optional[int] = None
    designated_hitter: Optional[int] = None


# Slot on DefenseAssignment for each position that occupies one.
POSITION_SLOTS: dict[Position, str] = {
    Position.PITCHER: "pitcher",
    Position.CATCHER: "catcher",
    Position.FIRST_BASE: "first_base",
    Position.SECOND_BASE: "second_base",
    Position.THIRD_BASE: "third_base",
    Position.SHORT_STOP: "short_stop",
    Position.LEFT_FIELD: "left_field",
    Position.CENTER_FIELD: "center_field",
    Position.RIGHT_FIELD: "right_field",
    Position.DESIGNATED_HITTER: "designated_hitter",
}


class BoxScore(BaseModel):
    home_team_id: int
    away_team_id: int
    home_parent_team_id: int
    away_parent_team_id: int
    home_league_name: Optional[str] = None
    home_players: list[LineupEntry] = Field(default_factory=list)
    away_players: list[LineupEntry] = Field(default_factory=list)
    home_defense: DefenseAssignment = Field(default_factory=DefenseAssignment)
    away_defense: DefenseAssignment = Field(default_factory=DefenseAssignment)
    hp_umpire_id: Optional[int] = None
    attendance: Optional[int] = None
    first_pitch: Optional[float] = None
    weather_condition: Optional[str] = None
    weather_temp_f: Optional[float] = None
    wind_speed_mph: Optional[int] = None
    wind_direction: Optional[str] = None


# ---------------------------------------------------------------------------
# Metadata: venue, team, player
# ---------------------------------------------------------------------------

class Venue(BaseModel):
    venue_id: int = 0
    venue_name: str = ""
    venue_city: str = ""
    venue_state: str = ""
    venue_state_abbr: str = ""
    venue_time_zone: str = ""
    venue_time_zone_offset: int = 0
    venue_capacity: Optional[int] = None
    venue_surface: Optional[str] = None
    venue_roof: Optional[str] = None
    venue_left_line: Optional[int] = None
    venue_left: Optional[int] = None
    venue_left_center: Optional[int] = None
    venue_center: Optional[int] = None
    venue_right_center: Optional[int] = None
    venue_right: Optional[int] = None
    venue_right_line: Optional[int] = None
    venue_retrosheet_id: str = ""
    venue_latitude: Optional[float] = None
    venue_longitude: Optional[float] = None


class VenueCoordinates(BaseModel):
    """Home-plate reference point on the venue's spray chart."""
    x: Optional[float] = None
    y: Optional[float] = None


class Team(BaseModel):
    team_id: int = 0
    team_name: str = ""


class Player(BaseModel):
    player_id: int = 0
    name: str = ""
    birth_date: Optional[date] = None
    mlb_debut_date: Optional[date] = None
    birth_city: Optional[str] = None
    birth_state_province: Optional[str] = None
    birth_country: Optional[str] = None
    height_str: Optional[str] = None
    height_in: int = 0
    weight: Optional[int] = None
    draft_school_name: Optional[str] = None
    draft_year: Optional[int] = None
    draft_pick_number: Optional[int] = None
    fangraphs_id: Optional[str] = None
    retrosheet_id: Optional[str] = None
    highschool_city: Optional[str] = None
    highschool_prov_state: Optional[str] = None
    college_name: Optional[str] = None
    bat_side_code: Optional[str] = None
    bat_side_desc: Optional[str] = None
    throws_code: Optional[str] = None
    throws_desc: Optional[str] = None


# ---------------------------------------------------------------------------
# Metadata directory
# ---------------------------------------------------------------------------

@dataclass
class MetadataDirectory:
    """Lookups consulted while reconstructing games.

    Keys follow the source directories: schedule and boxscore by game id,
    venues and teams by ``(id, season)``, venue coordinates by venue id and
    players by person id.
    """
    schedule: dict[int, GameSchedule] = field(default_factory=dict)
    boxscore: dict[int, BoxScore] = field(default_factory=dict)
    venues: dict[tuple[int, int], Venue] = field(default_factory=dict)
    venue_coordinates: dict[int, VenueCoordinates] = field(default_factory=dict)
    teams: dict[tuple[int, int], Team] = field(default_factory=dict)
    players: dict[int, Player] = field(default_factory=dict)
    run_expectancy: RunExpectancyTable = field(default_factory=lambda: dict(RE288_DEFAULT))
