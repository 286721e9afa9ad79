# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Output records produced by game reconstruction.

A ``PitchRecord`` is a fully denormalised snapshot of one pitch: game, venue,
teams, participants, umpire, the defense on the field, count and base/out
state, run expectancy, swing taxonomy, raw kinematics, trajectory physics and
batted-ball data.  Records are frozen once built.

A ``DefenseRecord`` is one fielder's row for a ball in play.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from data.sports import Affiliation
from models import Hardness, HalfInning, PitcherRole, Position, Trajectory


class PitchRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    play_id: str

    # Plate-appearance context
    half_inning: HalfInning
    num_plate_appearance: int
    num_inning: int
    start_time: Optional[str] = None

    # Defense on the field for this pitch
    catcher_id: Optional[int] = None
    catcher_name: Optional[str] = None
    first_base_id: Optional[int] = None
    first_base_name: Optional[str] = None
    second_base_id: Optional[int] = None
    second_base_name: Optional[str] = None
    short_stop_id: Optional[int] = None
    short_stop_name: Optional[str] = None
    third_base_id: Optional[int] = None
    third_base_name: Optional[str] = None
    left_field_id: Optional[int] = None
    left_field_name: Optional[str] = None
    center_field_id: Optional[int] = None
    center_field_name: Optional[str] = None
    right_field_id: Optional[int] = None
    right_field_name: Optional[str] = None

    # Home-plate umpire
    hp_umpire_id: Optional[int] = None
    hp_umpire_name: Optional[str] = None
    hp_umpire_dob: str = ""
    hp_umpire_age: Optional[float] = None
    hp_umpire_height: Optional[int] = None
    hp_umpire_height_str: Optional[str] = None

    # Pitcher
    pitcher: int
    pitcher_name: str
    pitcher_team_id: int
    pitcher_team_name: str
    pitcher_parent_team_id: int
    pitcher_parent_team_name: str
    pitcher_throws: Optional[str] = None
    pitcher_throws_desc: Optional[str] = None
    pitcher_dob: str = ""
    pitcher_mlb_debut_date: str = ""
    pitcher_age: Optional[float] = None
    pitcher_birth_city: Optional[str] = None
    pitcher_birth_state_province: Optional[str] = None
    pitcher_birth_country: Optional[str] = None
    pitcher_height_str: Optional[str] = None
    pitcher_height_in: int = 0
    pitcher_weight: Optional[int] = None
    pitcher_draft_school_name: Optional[str] = None
    pitcher_draft_year: Optional[int] = None
    pitcher_draft_pick_number: Optional[int] = None
    pitcher_fangraphs_id: Optional[str] = None
    pitcher_retrosheet_id: Optional[str] = None
    pitcher_highschool_city: Optional[str] = None
    pitcher_highschool_prov_state: Optional[str] = None
    pitcher_college_name: Optional[str] = None
    pitcher_sp_rp: PitcherRole
    pitcher_num_pitch: int
    pitcher_num_plate_appearance: int

    # Batter
    batter: int
    batter_name: str
    batter_team_id: int
    batter_team_name: str
    batter_parent_team_id: int
    batter_parent_team_name: str
    batter_dob: str = ""
    batter_mlb_debut_date: str = ""
    batter_age: Optional[float] = None
    batter_birth_city: Optional[str] = None
    batter_birth_state_province: Optional[str] = None
    batter_birth_country: Optional[str] = None
    batter_height_str: Optional[str] = None
    batter_height_in: int = 0
    batter_weight: Optional[int] = None
    batter_draft_school_name: Optional[str] = None
    batter_draft_year: Optional[int] = None
    batter_draft_pick_number: Optional[int] = None
    batter_fangraphs_id: Optional[str] = None
    batter_retrosheet_id: Optional[str] = None
    batter_highschool_city: Optional[str] = None
    batter_highschool_prov_state: Optional[str] = None
    batter_college_name: Optional[str] = None
    batter_bats: Optional[str] = None
    batter_bats_desc: Optional[str] = None
    batter_stands: Optional[str] = None
    batter_stands_desc: Optional[str] = None
    batter_pos: Position
    batter_batting_order: Optional[int] = None
    strike_zone_top: Optional[float] = None
    strike_zone_bottom: Optional[float] = None

    # Pitch counters
    pitch_num_plate_appearance: int
    pitch_num_inning: int
    pitch_num_game: int
    preceded_by_pickoff: bool
    double_play_opportunity: bool

    # Count and base/out state (RE288)
    balls_start: int
    balls_end: int
    strikes_start: int
    strikes_end: int
    outs_start: int
    outs_end: int
    base_value_start: int
    base_value_end: int
    runs_scored: int
    re_288_batter_responsible: bool
    re_288_start: float
    re_288_end: float
    re_288_val: float

    # Swing taxonomy
    in_play: int
    swing: int
    swing_and_miss: Optional[int] = None
    foul: int
    bunt: Optional[bool] = None

    description: str = ""
    plate_appearance_description: str = ""
    plate_appearance_result: Optional[str] = None

    # Raw pitch kinematics
    pitch_speed_start: Optional[float] = None
    pitch_speed_end: Optional[float] = None
    pitch_break_vertical_induced: Optional[float] = None
    pitch_break_horizontal: Optional[float] = None
    pitch_spin_rate: Optional[float] = None
    pitch_spin_direction: Optional[float] = None
    pitch_plate_time: Optional[float] = None
    pitch_extension: Optional[float] = None
    pitch_pixels_x: Optional[float] = None
    pitch_pixels_y: Optional[float] = None
    pitch_a_x: Optional[float] = None
    pitch_a_y: Optional[float] = None
    pitch_a_z: Optional[float] = None
    pitch_pfx_x: Optional[float] = None
    pitch_pfx_z: Optional[float] = None
    pitch_p_x: Optional[float] = None
    pitch_p_z: Optional[float] = None
    pitch_v_x0: Optional[float] = None
    pitch_v_y0: Optional[float] = None
    pitch_v_z0: Optional[float] = None
    pitch_x0: Optional[float] = None
    pitch_y0: Optional[float] = None
    pitch_z0: Optional[float] = None
    pitch_type_code: Optional[str] = None
    pitch_type_desc: Optional[str] = None

    # Trajectory physics
    xr: Optional[float] = None
    yr: Optional[float] = None
    zr: Optional[float] = None
    tr: Optional[float] = None
    vxr: Optional[float] = None
    vyr: Optional[float] = None
    vzr: Optional[float] = None
    tf: Optional[float] = None
    vxbar: Optional[float] = None
    vybar: Optional[float] = None
    vzbar: Optional[float] = None
    vbar: Optional[float] = None
    vxhat: Optional[float] = None
    vyhat: Optional[float] = None
    vzhat: Optional[float] = None
    ad: Optional[float] = None
    atx: Optional[float] = None
    aty: Optional[float] = None
    atz: Optional[float] = None
    atx_hat: Optional[float] = None
    aty_hat: Optional[float] = None
    atz_hat: Optional[float] = None
    at: Optional[float] = None
    phi_t: Optional[float] = None
    ivb: Optional[float] = None
    hb: Optional[float] = None
    cd: Optional[float] = None

    # Result indicators
    in_play_result: Optional[str] = None
    in_play_1b: Optional[int] = None
    in_play_2b: Optional[int] = None
    in_play_3b: Optional[int] = None
    in_play_hr: Optional[int] = None
    strikeout: int
    walk: int

    fielded_by_id: Optional[int] = None
    fielded_by_pos: Optional[Position] = None
    fielded_by_name: str = ""

    # Batted-ball data
    hit_data_coord_x: Optional[float] = None
    hit_data_coord_y: Optional[float] = None
    hit_data_trajectory: Optional[Trajectory] = None
    hit_data_contact_quality: Optional[Hardness] = None
    hit_data_launch_angle: Optional[float] = None
    hit_data_exit_velocity: Optional[float] = None
    hit_data_total_distance: Optional[float] = None
    hit_data_spray_angle: Optional[float] = None
    hit_data_calc_distance: Optional[float] = None

    # Level of play
    sport_id: int
    sport_code: str
    sport_name: str
    sport_abbr: str
    sport_affiliation: Affiliation
    sport_level_of_play: int

    team_name_home: str
    team_name_away: str

    # Game
    game_pk: int
    game_type: str
    game_type_desc: str
    game_date: str
    game_year: int
    game_month: int
    game_status: str

    # Venue
    venue_id: int
    venue_home_plate_x: float
    venue_home_plate_y: float
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

    league_name: str = ""

    # Boxscore
    game_attendance: Optional[int] = None
    game_first_pitch: Optional[float] = None
    game_weather_temp_f: Optional[float] = None
    game_weather_temp_c: Optional[float] = None
    game_weather_condition: Optional[str] = None
    game_wind_speed_mph: Optional[int] = None
    game_wind_direction: Optional[str] = None


class DefenseRecord(BaseModel):
    """One fielder's view of a ball in play."""
    model_config = ConfigDict(frozen=True)

    game_date: str
    game_type: str

    fielder: int
    fielder_name: str
    fielder_dob: str = ""
    fielder_draft_pick_number: Optional[int] = None
    fielder_throws_code: Optional[str] = None
    fielder_throws_desc: Optional[str] = None
    fielder_height_str: Optional[str] = None
    fielder_height_in: int = 0
    fielder_weight: Optional[int] = None
    fielder_college_name: Optional[str] = None
    fielder_birth_country: Optional[str] = None
    position: Position

    batter: int
    batter_name: str
    batter_bats: Optional[str] = None
    batter_bats_desc: Optional[str] = None
    pitcher: int
    pitcher_name: str

    hit_data_trajectory: Optional[Trajectory] = None
    hit_data_contact_quality: Optional[Hardness] = None
    hit_data_launch_angle: Optional[float] = None
    hit_data_exit_velocity: Optional[float] = None
    hit_data_total_distance: Optional[float] = None
    hit_data_spray_angle: Optional[float] = None
    hit_data_calc_distance: Optional[float] = None

    sport_id: int
    sport_code: str
    sport_name: str
    sport_abbr: str
    sport_affiliation: Affiliation
    sport_level_of_play: int
    league_name: str = ""

    # Fielding team
    team_id: int
    team_name: str
    parent_team_id: int
    parent_team_name: str

    venue_id: int
    venue_name: str = ""
    venue_city: str = ""
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
