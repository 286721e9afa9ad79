# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Pitch-by-pitch game reconstruction.

Walks one game's plate appearances in order, maintaining the count, outs,
base occupancy, runners, both defensive alignments and pitcher usage, and
emits one ``PitchRecord`` per pitch thrown.  Each record is a complete
snapshot: game, venue, participants, defense, count and base/out state, run
expectancy (RE288), swing taxonomy, batted-ball geometry and trajectory
physics.

Usage::

    from reconstruction import reconstruct_game
    records = reconstruct_game(game_pk, plate_appearances, directory)
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any, Iterable, Optional

from config import DEFAULT_HOME_PLATE_X, DEFAULT_HOME_PLATE_Y
from data.run_expectancy import MAX_BASE_VALUE, RunExpectancyTable, lookup_run_expectancy
from data.sports import get_sport
from defense_tracker import DefenseTracker
from models import (
    BUNT_TRAJECTORIES,
    UNASSIGNED_INDEX,
    ActionKind,
    HalfInning,
    MetadataDirectory,
    PitchData,
    PitcherRole,
    PitchOutcome,
    PlateAppearance,
    PlayEvent,
    PlayEventType,
    Player,
    Position,
    Team,
    Trajectory,
    Venue,
    classify_pitch,
)
from records import PitchRecord
from runner_state import RunnerStateTracker, RunnerUpdate
from trajectory import TrajectoryInputs, compute_trajectory

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.25


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ReconstructionError(Exception):
    """Raised when a game cannot be reconstructed at all."""

    def __init__(self, message: str, game_pk: int | None = None,
                 field: str | None = None):
        self.game_pk = game_pk
        self.field = field
        super().__init__(message)


# ---------------------------------------------------------------------------
# Pitch classification tables
# ---------------------------------------------------------------------------

# (swing, swing_and_miss, foul) per outcome
OUTCOME_FLAGS: dict[PitchOutcome, tuple[int, Optional[int], int]] = {
    PitchOutcome.BALL: (0, None, 0),
    PitchOutcome.CALLED_STRIKE: (0, None, 0),
    PitchOutcome.SWINGING_STRIKE: (1, 1, 0),
    PitchOutcome.FOUL: (1, 0, 1),
    PitchOutcome.FOUL_TIP: (1, 1, 1),
    PitchOutcome.IN_PLAY: (1, 0, 0),
    PitchOutcome.NO_PITCH: (0, None, 0),
}

# First match wins.
TRAJECTORY_KEYWORDS: tuple[tuple[str, Trajectory], ...] = (
    ("line drive", Trajectory.LINE_DRIVE),
    ("lines out", Trajectory.LINE_DRIVE),
    ("flies out", Trajectory.FLY_BALL),
    ("fly ball", Trajectory.FLY_BALL),
    ("ground ball", Trajectory.GROUND_BALL),
    ("grounds out", Trajectory.GROUND_BALL),
    ("pop fly", Trajectory.POPUP),
    ("pops out", Trajectory.POPUP),
)

# Plate-appearance results with their own in-play indicator.
HIT_RESULTS = {
    "Single": "in_play_1b",
    "Double": "in_play_2b",
    "Triple": "in_play_3b",
    "Home Run": "in_play_hr",
}

DOUBLE_PLAY_BASE_VALUES = frozenset({1, 3, 5, 7})


# ---------------------------------------------------------------------------
# Derived metrics
# ---------------------------------------------------------------------------

def years_between(later: date, earlier: Optional[date]) -> Optional[float]:
    """Age in fractional years, or None when the earlier date is unknown."""
    if earlier is None:
        return None
    return (later - earlier).days / DAYS_PER_YEAR


def spray_geometry(
    x: Optional[float],
    y: Optional[float],
    home_x: float,
    home_y: float,
) -> tuple[Optional[float], Optional[float]]:
    """Spray angle (degrees) and distance of a batted ball from home plate.

    The angle runs from 0 along the third-base line to 90 along the
    first-base line, with 45 straight away center.  Both values are None
    when either coordinate is missing; the angle is None for a ball landing
    on the reference point itself.
    """
    if x is None or y is None:
        return None, None
    distance = math.sqrt((home_x - x) ** 2 + (home_y - y) ** 2)
    if distance == 0:
        return None, 0.0
    theta = math.degrees(math.acos((home_y - y) / distance))
    angle = 45.0 - theta if x < home_x else 45.0 + theta
    return angle, distance


def impute_trajectory(description: str) -> Trajectory:
    """Guess a batted-ball trajectory from the play description."""
    for keyword, trajectory in TRAJECTORY_KEYWORDS:
        if keyword in description:
            return trajectory
    return Trajectory.UNKNOWN


def bunt_from_trajectory(trajectory: Optional[Trajectory]) -> Optional[bool]:
    if trajectory is None or trajectory == Trajectory.UNKNOWN:
        return None
    return trajectory in BUNT_TRAJECTORIES


def is_double_play_opportunity(outs: int, base_value: int) -> bool:
    return outs < 2 and base_value in DOUBLE_PLAY_BASE_VALUES


def run_expectancy_change(
    table: RunExpectancyTable,
    start: tuple[int, int, int, int],
    end: tuple[int, int, int, int],
    runs: int,
) -> tuple[float, float, float]:
    """RE288 value of a pitch.

    Args:
        table: RE288 lookup.
        start: ``(balls, strikes, base_value, outs)`` before the pitch.
        end: The same after the pitch, as reported.
        runs: Runs scored on the pitch.

    Returns:
        ``(re_start, re_end, re_val)``.  The end state wraps balls mod 4,
        strikes mod 3 and outs mod 3; three outs end the inning and are worth
        zero.
    """
    re_start = lookup_run_expectancy(table, *start)
    balls, strikes, base_value, outs = end
    if outs == 3:
        re_end = 0.0
    else:
        re_end = lookup_run_expectancy(table, balls % 4, strikes % 3, base_value, outs % 3)
    return re_start, re_end, re_end - re_start + runs


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

_PLAYER_BIO_FIELDS = (
    "birth_city",
    "birth_state_province",
    "birth_country",
    "height_str",
    "height_in",
    "weight",
    "draft_school_name",
    "draft_year",
    "draft_pick_number",
    "fangraphs_id",
    "retrosheet_id",
    "highschool_city",
    "highschool_prov_state",
    "college_name",
)

_DEFENSE_SLOTS = (
    "catcher",
    "first_base",
    "second_base",
    "short_stop",
    "third_base",
    "left_field",
    "center_field",
    "right_field",
)


class GameReconstructor:
    """Single-use state machine that reconstructs one game.

    Game-level lookups are resolved once at construction; everything that
    changes during the game lives on the instance and is never shared.
    """

    def __init__(self, game_pk: int, directory: MetadataDirectory) -> None:
        self.game_pk = game_pk
        self.directory = directory
        self.boxscore = directory.boxscore.get(game_pk)
        schedule = directory.schedule.get(game_pk)
        # Without a boxscore the game is skipped, so the schedule is optional.
        if schedule is None and self.boxscore is not None:
            raise ReconstructionError(
                f"No schedule entry for game {game_pk}",
                game_pk=game_pk,
                field="schedule",
            )
        self.schedule = schedule
        self.season = schedule.game_date.year if schedule is not None else None

        # Running state
        self._half = HalfInning.TOP
        self._balls_start = 0
        self._strikes_start = 0
        self._outs_start = 0
        self._outs_end = 0
        self._base_start = 0
        self._base_end = 0
        self._pitch_num_game = 0
        self._pitch_num_inning = 0
        self._pitch_num_pa = 0
        self._preceded_by_pickoff = False
        self._batter_responsible = True
        # Keyed by the half-inning in which that pitcher is fielding.
        self._pitcher_pitches = {HalfInning.TOP: 0, HalfInning.BOTTOM: 0}
        self._pitcher_pas = {HalfInning.TOP: 0, HalfInning.BOTTOM: 0}
        self._pitcher_roles = {HalfInning.TOP: PitcherRole.SP, HalfInning.BOTTOM: PitcherRole.SP}
        self._runners = RunnerStateTracker()
        self._defense: Optional[DefenseTracker] = None

    # -- lookups -----------------------------------------------------------

    def _player(self, player_id: Optional[int]) -> Optional[Player]:
        if player_id is None:
            return None
        return self.directory.players.get(player_id)

    def _player_name(self, player_id: Optional[int]) -> Optional[str]:
        player = self._player(player_id)
        return player.name if player is not None else None

    def _team(self, team_id: int) -> Team:
        return self.directory.teams.get((team_id, self.season), Team())

    # -- per-game fields ---------------------------------------------------

    def _game_fields(self) -> dict[str, Any]:
        schedule = self.schedule
        box = self.boxscore
        venue = self.directory.venues.get((schedule.venue_id, self.season), Venue())
        coords = self.directory.venue_coordinates.get(schedule.venue_id)
        home_x = coords.x if coords is not None and coords.x is not None else DEFAULT_HOME_PLATE_X
        home_y = coords.y if coords is not None and coords.y is not None else DEFAULT_HOME_PLATE_Y
        sport = get_sport(schedule.sport_id)

        umpire = self._player(box.hp_umpire_id)
        temp_c = None
        if box.weather_temp_f is not None:
            temp_c = (box.weather_temp_f - 32.0) * 5.0 / 9.0

        fields = venue.model_dump(exclude={"venue_id"})
        fields.update(
            venue_id=schedule.venue_id,
            venue_home_plate_x=home_x,
            venue_home_plate_y=home_y,
            sport_id=schedule.sport_id,
            sport_code=sport.code,
            sport_name=sport.name,
            sport_abbr=sport.abbr,
            sport_affiliation=sport.affiliation,
            sport_level_of_play=sport.level_of_play_rank,
            team_name_home=self._team(box.home_team_id).team_name,
            team_name_away=self._team(box.away_team_id).team_name,
            game_pk=schedule.game_pk,
            game_type=schedule.game_type,
            game_type_desc=schedule.game_type_desc,
            game_date=schedule.game_date.isoformat(),
            game_year=schedule.game_date.year,
            game_month=schedule.game_date.month,
            game_status=schedule.game_status,
            league_name=box.home_league_name or "",
            game_attendance=box.attendance,
            game_first_pitch=box.first_pitch,
            game_weather_temp_f=box.weather_temp_f,
            game_weather_temp_c=temp_c,
            game_weather_condition=box.weather_condition,
            game_wind_speed_mph=box.wind_speed_mph,
            game_wind_direction=box.wind_direction,
            hp_umpire_id=box.hp_umpire_id,
            hp_umpire_name=umpire.name if umpire else None,
            hp_umpire_dob=umpire.birth_date.isoformat() if umpire and umpire.birth_date else "",
            hp_umpire_age=years_between(schedule.game_date, umpire.birth_date) if umpire else None,
            hp_umpire_height=umpire.height_in if umpire else None,
            hp_umpire_height_str=umpire.height_str if umpire else None,
        )
        return fields

    # -- per-plate-appearance fields ---------------------------------------

    def _person_fields(self, role: str, person_id: int, fallback_name: str) -> dict[str, Any]:
        player = self._player(person_id) or Player()
        fields: dict[str, Any] = {
            role: person_id,
            f"{role}_name": player.name or fallback_name,
            f"{role}_dob": player.birth_date.isoformat() if player.birth_date else "",
            f"{role}_mlb_debut_date": (
                player.mlb_debut_date.isoformat() if player.mlb_debut_date else ""
            ),
            f"{role}_age": years_between(self.schedule.game_date, player.birth_date),
        }
        for name in _PLAYER_BIO_FIELDS:
            fields[f"{role}_{name}"] = getattr(player, name)
        return fields

    def _plate_appearance_fields(self, pa: PlateAppearance) -> dict[str, Any]:
        box = self.boxscore
        matchup = pa.matchup
        if pa.half_inning == HalfInning.TOP:
            batting_ids = (box.away_team_id, box.away_parent_team_id)
            fielding_ids = (box.home_team_id, box.home_parent_team_id)
            lineup = box.away_players
        else:
            batting_ids = (box.home_team_id, box.home_parent_team_id)
            fielding_ids = (box.away_team_id, box.away_parent_team_id)
            lineup = box.home_players

        batting_order = next(
            (p.batting_order for p in lineup if p.player_id == matchup.batter_id),
            None,
        )
        batter = self._player(matchup.batter_id) or Player()

        fields: dict[str, Any] = {
            "half_inning": pa.half_inning,
            "num_plate_appearance": pa.at_bat_index + 1,
            "num_inning": pa.inning,
            "batter_team_id": batting_ids[0],
            "batter_team_name": self._team(batting_ids[0]).team_name,
            "batter_parent_team_id": batting_ids[1],
            "batter_parent_team_name": self._team(batting_ids[1]).team_name,
            "pitcher_team_id": fielding_ids[0],
            "pitcher_team_name": self._team(fielding_ids[0]).team_name,
            "pitcher_parent_team_id": fielding_ids[1],
            "pitcher_parent_team_name": self._team(fielding_ids[1]).team_name,
            "batter_bats": matchup.bat_side_code,
            "batter_bats_desc": matchup.bat_side_desc,
            "batter_stands": batter.bat_side_code,
            "batter_stands_desc": batter.bat_side_desc,
            "batter_batting_order": batting_order,
            "pitcher_throws": matchup.pitch_hand_code,
            "pitcher_throws_desc": matchup.pitch_hand_desc,
            "plate_appearance_description": pa.result.description or "",
            "plate_appearance_result": pa.result.event,
        }
        fields.update(self._person_fields("batter", matchup.batter_id, matchup.batter_name))
        fields.update(self._person_fields("pitcher", matchup.pitcher_id, matchup.pitcher_name))
        return fields

    # -- state transitions -------------------------------------------------

    def _start_half_inning(self, half: HalfInning) -> None:
        logger.debug("Game %d: new half-inning (%s)", self.game_pk, half.value)
        self._base_start = 0
        self._base_end = 0
        self._outs_start = 0
        self._outs_end = 0
        self._pitch_num_inning = 0
        self._runners.clear()

    def _apply_runners(self, pa: PlateAppearance, play_index: int) -> RunnerUpdate:
        update = self._runners.apply(pa.runners, play_index)
        self._base_end = update.base_value
        self._outs_end = self._outs_start + update.outs
        return update

    def _carry_forward(self) -> None:
        self._outs_start = self._outs_end
        self._base_start = self._base_end

    def _apply_action(self, event: PlayEvent, half: HalfInning) -> None:
        kind = event.action_kind
        if kind in (ActionKind.DEFENSIVE_SUBSTITUTION, ActionKind.DEFENSIVE_SWITCH):
            if event.player_id is None:
                logger.warning(
                    "Game %d: %s without a player at event %d",
                    self.game_pk, kind.value, event.index,
                )
                return
            self._defense.substitute(half, event.player_id, event.position)
        elif kind == ActionKind.OFFENSIVE_SUBSTITUTION:
            if event.base is not None:
                self._runners.remove_runner_on_base(event.base)
                self._base_end = self._runners.base_value
        elif kind == ActionKind.PITCHING_SUBSTITUTION:
            # The incoming pitcher owns the current plate appearance.
            self._pitcher_roles[half] = PitcherRole.RP
            self._pitcher_pitches[half] = 0
            # 1, not 0: this plate appearance already counts for the reliever.
            self._pitcher_pas[half] = 1
            if event.player_id is not None:
                self._defense.substitute(half, event.player_id, Position.PITCHER)
            logger.debug("Game %d: pitching change (%s half)", self.game_pk, half.value)
        else:
            self._batter_responsible = False

    # -- pitches -----------------------------------------------------------

    def _missing_pitch_fields(self, event: PlayEvent) -> list[str]:
        missing = []
        if event.details.is_in_play is None:
            missing.append("is_in_play")
        if classify_pitch(event.details.code) is None:
            missing.append(f"code ({event.details.code!r})")
        if event.count.balls is None or event.count.strikes is None:
            missing.append("count")
        return missing

    def _pitch_record(
        self,
        pa: PlateAppearance,
        event: PlayEvent,
        update: RunnerUpdate,
        game_fields: dict[str, Any],
        pa_fields: dict[str, Any],
    ) -> Optional[PitchRecord]:
        missing = self._missing_pitch_fields(event)
        if missing:
            logger.warning(
                "Game %d: skipping pitch at at-bat %d event %d, missing %s",
                self.game_pk, pa.at_bat_index, event.index, ", ".join(missing),
            )
            return None

        half = pa.half_inning
        details = event.details
        in_play = bool(details.is_in_play)

        self._pitch_num_game += 1
        self._pitch_num_inning += 1
        self._pitch_num_pa += 1
        self._pitcher_pitches[half] += 1

        swing, swing_and_miss, foul = OUTCOME_FLAGS[classify_pitch(details.code)]
        balls_end = event.count.balls
        strikes_end = event.count.strikes

        result_fields: dict[str, Any] = {name: None for name in HIT_RESULTS.values()}
        result_fields["in_play_result"] = None
        if in_play:
            result = pa.result.event or "Other"
            result_fields["in_play_result"] = result
            for name, field_name in HIT_RESULTS.items():
                result_fields[field_name] = 1 if result == name else 0

        double_play = is_double_play_opportunity(self._outs_start, self._base_start)

        # Impossible runner chains can exceed bases loaded.
        self._base_start = min(self._base_start, MAX_BASE_VALUE)
        self._base_end = min(self._base_end, MAX_BASE_VALUE)

        re_start, re_end, re_val = run_expectancy_change(
            self.directory.run_expectancy,
            (self._balls_start, self._strikes_start, self._base_start, self._outs_start),
            (balls_end, strikes_end, self._base_end, self._outs_end),
            update.runs,
        )

        # Batted ball
        hit = event.hit_data
        coord_x = hit.coord_x if hit else None
        coord_y = hit.coord_y if hit else None
        spray_angle, calc_distance = spray_geometry(
            coord_x, coord_y,
            game_fields["venue_home_plate_x"], game_fields["venue_home_plate_y"],
        )
        explicit_trajectory = hit.trajectory if hit else None
        trajectory = explicit_trajectory
        if trajectory is None and in_play:
            trajectory = impute_trajectory(pa.result.description or "")
        bunt = bunt_from_trajectory(explicit_trajectory)
        if bunt is None and in_play:
            bunt = "bunt" in (details.description or "")

        pitch = event.pitch_data or PitchData()
        coords = pitch.coordinates
        breaks = pitch.breaks
        metrics = compute_trajectory(TrajectoryInputs.from_pitch(pitch))

        fielding = self._defense.fielding(half)
        defense_fields: dict[str, Any] = {}
        for slot in _DEFENSE_SLOTS:
            player_id = getattr(fielding, slot)
            defense_fields[f"{slot}_id"] = player_id
            defense_fields[f"{slot}_name"] = self._player_name(player_id)

        fielded_by_name = self._player_name(update.fielded_by_id) or ""

        record = PitchRecord(
            **game_fields,
            **pa_fields,
            **defense_fields,
            **result_fields,
            **metrics.as_dict(),
            play_id=event.play_id or "",
            start_time=event.start_time,
            pitcher_sp_rp=self._pitcher_roles[half],
            pitcher_num_pitch=self._pitcher_pitches[half],
            pitcher_num_plate_appearance=self._pitcher_pas[half],
            batter_pos=self._defense.batter_position(half, pa.matchup.batter_id),
            strike_zone_top=pitch.strike_zone_top,
            strike_zone_bottom=pitch.strike_zone_bottom,
            pitch_num_plate_appearance=self._pitch_num_pa,
            pitch_num_inning=self._pitch_num_inning,
            pitch_num_game=self._pitch_num_game,
            preceded_by_pickoff=self._preceded_by_pickoff,
            double_play_opportunity=double_play,
            balls_start=self._balls_start,
            balls_end=balls_end,
            strikes_start=self._strikes_start,
            strikes_end=strikes_end,
            outs_start=self._outs_start,
            outs_end=self._outs_end,
            base_value_start=self._base_start,
            base_value_end=self._base_end,
            runs_scored=update.runs,
            re_288_batter_responsible=self._batter_responsible,
            re_288_start=re_start,
            re_288_end=re_end,
            re_288_val=re_val,
            in_play=int(in_play),
            swing=swing,
            swing_and_miss=swing_and_miss,
            foul=foul,
            bunt=bunt,
            description=details.description or "",
            pitch_speed_start=pitch.start_speed,
            pitch_speed_end=pitch.end_speed,
            pitch_break_vertical_induced=breaks.break_vertical_induced if breaks else None,
            pitch_break_horizontal=breaks.break_horizontal if breaks else None,
            pitch_spin_rate=breaks.spin_rate if breaks else None,
            pitch_spin_direction=breaks.spin_direction if breaks else None,
            pitch_plate_time=pitch.plate_time,
            pitch_extension=pitch.extension,
            pitch_pixels_x=coords.x,
            pitch_pixels_y=coords.y,
            pitch_a_x=coords.a_x,
            pitch_a_y=coords.a_y,
            pitch_a_z=coords.a_z,
            pitch_pfx_x=coords.pfx_x,
            pitch_pfx_z=coords.pfx_z,
            pitch_p_x=coords.p_x,
            pitch_p_z=coords.p_z,
            pitch_v_x0=coords.v_x0,
            pitch_v_y0=coords.v_y0,
            pitch_v_z0=coords.v_z0,
            pitch_x0=coords.x0,
            pitch_y0=coords.y0,
            pitch_z0=coords.z0,
            pitch_type_code=details.pitch_type_code,
            pitch_type_desc=details.pitch_type_desc,
            strikeout=1 if strikes_end == 3 else 0,
            walk=1 if balls_end == 4 else 0,
            fielded_by_id=update.fielded_by_id,
            fielded_by_pos=update.fielded_by_position,
            fielded_by_name=fielded_by_name,
            hit_data_coord_x=coord_x,
            hit_data_coord_y=coord_y,
            hit_data_trajectory=trajectory,
            hit_data_contact_quality=hit.hardness if hit else None,
            hit_data_launch_angle=hit.launch_angle if hit else None,
            hit_data_exit_velocity=hit.launch_speed if hit else None,
            hit_data_total_distance=hit.total_distance if hit else None,
            hit_data_spray_angle=spray_angle,
            hit_data_calc_distance=calc_distance,
        )

        self._preceded_by_pickoff = False
        self._balls_start = balls_end
        self._strikes_start = strikes_end
        return record

    # -- driver ------------------------------------------------------------

    def _process_plate_appearance(
        self,
        pa: PlateAppearance,
        game_fields: dict[str, Any],
        records: list[PitchRecord],
    ) -> None:
        half = pa.half_inning
        if half != self._half:
            self._start_half_inning(half)
        self._half = half

        self._balls_start = 0
        self._strikes_start = 0
        self._pitch_num_pa = 0
        self._preceded_by_pickoff = False
        self._batter_responsible = True
        self._pitcher_pas[half] += 1

        if not pa.play_events:
            # Runner-only plate appearance: state moves, no pitch is recorded.
            self._apply_runners(pa, UNASSIGNED_INDEX)
            self._batter_responsible = False
            self._carry_forward()
            return

        pa_fields = self._plate_appearance_fields(pa)
        for event in pa.play_events:
            update = self._apply_runners(pa, event.index)

            if event.type == PlayEventType.PITCH:
                record = self._pitch_record(pa, event, update, game_fields, pa_fields)
                if record is not None:
                    records.append(record)
            elif event.type == PlayEventType.ACTION:
                self._apply_action(event, half)
            elif event.type == PlayEventType.PICKOFF:
                self._preceded_by_pickoff = True
            self._carry_forward()

    def reconstruct(self, plate_appearances: Iterable[PlateAppearance]) -> list[PitchRecord]:
        """Walk the plate appearances in order and return the pitch records.

        Returns an empty list when the game has no boxscore.
        """
        if self.boxscore is None:
            logger.info("Game %d has no boxscore, skipping", self.game_pk)
            return []
        self._defense = DefenseTracker.from_boxscore(self.boxscore)

        game_fields = self._game_fields()
        records: list[PitchRecord] = []
        for pa in plate_appearances:
            self._process_plate_appearance(pa, game_fields, records)

        logger.info("Game %d: reconstructed %d pitches", self.game_pk, len(records))
        return records


def reconstruct_game(
    game_pk: int,
    plate_appearances: Iterable[PlateAppearance],
    directory: MetadataDirectory,
) -> list[PitchRecord]:
    """Reconstruct one game into pitch records.

    Args:
        game_pk: Game identifier used for every metadata lookup.
        plate_appearances: The game's plate appearances in order.
        directory: Schedule, boxscore, venue, team, player and RE288 lookups.

    Returns:
        One ``PitchRecord`` per pitch, in game order.  Empty when the game
        has no boxscore.

    Raises:
        ReconstructionError: If the game has a boxscore but no schedule
            entry.
    """
    return GameReconstructor(game_pk, directory).reconstruct(plate_appearances)
