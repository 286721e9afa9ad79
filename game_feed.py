# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Reconstruction inputs from MLB Stats API game feeds.

Converts the ``/api/v1.1/game/{gamePk}/feed/live`` payload into the plate
appearances and metadata directory that ``reconstruct_game`` consumes.

Usage::

    from game_feed import load_game, reconstruct_feed

    game = load_game(feed)
    records = reconstruct_feed(feed)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, TypeVar

from pydantic import ValidationError

from config import load_run_expectancy
from data.run_expectancy import RunExpectancyTable
from models import (
    POSITION_SLOTS,
    UNASSIGNED_INDEX,
    BoxScore,
    DefenseAssignment,
    EventCount,
    EventDetails,
    GameSchedule,
    HalfInning,
    Hardness,
    HitData,
    LineupEntry,
    Matchup,
    MetadataDirectory,
    PitchBreaks,
    PitchCoordinates,
    PitchData,
    PlateAppearance,
    PlateAppearanceResult,
    PlayEvent,
    PlayEventType,
    Player,
    Position,
    RunnerMovement,
    Team,
    Trajectory,
    Venue,
)
from records import PitchRecord
from reconstruction import reconstruct_game

logger = logging.getLogger(__name__)

GAME_TYPE_DESCRIPTIONS = {
    "R": "Regular Season",
    "S": "Spring Training",
    "E": "Exhibition",
    "A": "All-Star Game",
    "F": "Wild Card Game",
    "D": "Division Series",
    "L": "League Championship Series",
    "W": "World Series",
    "P": "Postseason",
}

FIELDED_CREDIT = "f_fielded_ball"

_HEIGHT_RE = re.compile(r"(\d+)'\s*(\d+)")
_WIND_RE = re.compile(r"(\d+)\s*mph", re.IGNORECASE)

E = TypeVar("E", bound=Enum)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class FeedError(Exception):
    """Raised when a game feed payload cannot be converted."""

    def __init__(self, message: str, field: str | None = None,
                 details: list[str] | None = None):
        self.field = field
        self.details = details or []
        super().__init__(message)


@dataclass
class LoadedGame:
    game_pk: int
    plate_appearances: list[PlateAppearance]
    directory: MetadataDirectory


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _safe_float(value: Any) -> Optional[float]:
    """Convert a value to float, returning None on failure."""
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _safe_int(value: Any) -> Optional[int]:
    """Convert a value to int, returning None on failure."""
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _safe_date(value: Any) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def _enum_or_none(enum_cls: type[E], value: Any) -> Optional[E]:
    """Member of ``enum_cls`` for ``value``, or None when unrecognised."""
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _validation_details(exc: ValidationError) -> list[str]:
    return [f"{e.get('loc', '?')}: {e.get('msg', '?')}" for e in exc.errors()]


def parse_height(height: Optional[str]) -> int:
    """Inches from a feed height such as ``6' 2"``; 0 when unparseable."""
    if not height:
        return 0
    match = _HEIGHT_RE.search(height)
    if match is None:
        return 0
    return int(match.group(1)) * 12 + int(match.group(2))


def parse_wind(wind: Optional[str]) -> tuple[Optional[int], Optional[str]]:
    """Split a feed wind string such as ``"7 mph, Out To CF"``."""
    if not wind:
        return None, None
    speed_part, _, direction = wind.partition(",")
    match = _WIND_RE.search(speed_part)
    speed = int(match.group(1)) if match else None
    return speed, direction.strip() or None


def parse_first_pitch(value: Optional[str]) -> Optional[float]:
    """Hour of day (UTC, fractional) of an ISO first-pitch timestamp."""
    if not value:
        return None
    try:
        ts = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return ts.hour + ts.minute / 60.0


# ---------------------------------------------------------------------------
# Play-by-play
# ---------------------------------------------------------------------------

def _parse_pitch_data(raw: Optional[dict]) -> Optional[PitchData]:
    if not raw:
        return None
    c = raw.get("coordinates", {})
    breaks = raw.get("breaks")
    return PitchData(
        start_speed=raw.get("startSpeed"),
        end_speed=raw.get("endSpeed"),
        strike_zone_top=raw.get("strikeZoneTop"),
        strike_zone_bottom=raw.get("strikeZoneBottom"),
        plate_time=raw.get("plateTime"),
        extension=raw.get("extension"),
        coordinates=PitchCoordinates(
            a_x=c.get("aX"), a_y=c.get("aY"), a_z=c.get("aZ"),
            pfx_x=c.get("pfxX"), pfx_z=c.get("pfxZ"),
            p_x=c.get("pX"), p_z=c.get("pZ"),
            v_x0=c.get("vX0"), v_y0=c.get("vY0"), v_z0=c.get("vZ0"),
            x=c.get("x"), y=c.get("y"),
            x0=c.get("x0"), y0=c.get("y0"), z0=c.get("z0"),
        ),
        breaks=PitchBreaks(
            break_vertical_induced=breaks.get("breakVerticalInduced"),
            break_horizontal=breaks.get("breakHorizontal"),
            spin_rate=breaks.get("spinRate"),
            spin_direction=breaks.get("spinDirection"),
        ) if breaks else None,
    )


def _parse_hit_data(raw: Optional[dict]) -> Optional[HitData]:
    if not raw:
        return None
    coords = raw.get("coordinates", {})
    return HitData(
        coord_x=coords.get("coordX"),
        coord_y=coords.get("coordY"),
        trajectory=_enum_or_none(Trajectory, raw.get("trajectory")),
        hardness=_enum_or_none(Hardness, raw.get("hardness")),
        launch_speed=raw.get("launchSpeed"),
        launch_angle=raw.get("launchAngle"),
        total_distance=raw.get("totalDistance"),
    )


def _parse_event(raw: dict, at_bat_index: int) -> Optional[PlayEvent]:
    event_type = _enum_or_none(PlayEventType, raw.get("type"))
    if event_type is None:
        logger.warning(
            "At-bat %d: ignoring event %s of unknown type %r",
            at_bat_index, raw.get("index"), raw.get("type"),
        )
        return None

    details = raw.get("details", {})
    pitch_type = details.get("type") or {}
    count = raw.get("count", {})
    return PlayEvent(
        index=raw.get("index", 0),
        type=event_type,
        play_id=raw.get("playId"),
        start_time=raw.get("startTime"),
        details=EventDetails(
            code=details.get("code"),
            description=details.get("description"),
            event=details.get("event"),
            event_type=details.get("eventType"),
            is_in_play=details.get("isInPlay"),
            pitch_type_code=pitch_type.get("code"),
            pitch_type_desc=pitch_type.get("description"),
        ),
        count=EventCount(
            balls=count.get("balls"),
            strikes=count.get("strikes"),
            outs=count.get("outs"),
        ),
        pitch_data=_parse_pitch_data(raw.get("pitchData")),
        hit_data=_parse_hit_data(raw.get("hitData")),
        player_id=(raw.get("player") or {}).get("id"),
        position=Position.parse((raw.get("position") or {}).get("abbreviation")),
        base=_safe_int(raw.get("base")),
    )


def _parse_runner(raw: dict) -> RunnerMovement:
    movement = raw.get("movement", {})
    details = raw.get("details", {})
    play_index = details.get("playIndex")

    fielded_by_id = None
    fielded_by_position = None
    for credit in raw.get("credits", []):
        if credit.get("credit") == FIELDED_CREDIT:
            fielded_by_id = (credit.get("player") or {}).get("id")
            fielded_by_position = Position.parse((credit.get("position") or {}).get("abbreviation"))
            break

    return RunnerMovement(
        runner_id=(details.get("runner") or {}).get("id"),
        play_index=play_index if play_index is not None else UNASSIGNED_INDEX,
        start=movement.get("start"),
        end=movement.get("end"),
        is_out=bool(movement.get("isOut", False)),
        fielded_by_id=fielded_by_id,
        fielded_by_position=fielded_by_position,
    )


def parse_plate_appearance(play: dict) -> PlateAppearance:
    """Convert one ``allPlays`` entry into a ``PlateAppearance``.

    Raises:
        FeedError: If the play lacks required fields.
    """
    about = play.get("about", {})
    matchup = play.get("matchup", {})
    result = play.get("result", {})
    at_bat_index = about.get("atBatIndex", 0)

    try:
        events = [
            e for e in (_parse_event(raw, at_bat_index) for raw in play.get("playEvents", []))
            if e is not None
        ]
        return PlateAppearance(
            at_bat_index=at_bat_index,
            inning=about.get("inning", 0),
            half_inning=HalfInning(about.get("halfInning", "top")),
            matchup=Matchup(
                batter_id=(matchup.get("batter") or {}).get("id"),
                batter_name=(matchup.get("batter") or {}).get("fullName", ""),
                bat_side_code=(matchup.get("batSide") or {}).get("code"),
                bat_side_desc=(matchup.get("batSide") or {}).get("description"),
                pitcher_id=(matchup.get("pitcher") or {}).get("id"),
                pitcher_name=(matchup.get("pitcher") or {}).get("fullName", ""),
                pitch_hand_code=(matchup.get("pitchHand") or {}).get("code"),
                pitch_hand_desc=(matchup.get("pitchHand") or {}).get("description"),
            ),
            result=PlateAppearanceResult(
                event=result.get("event"),
                event_type=result.get("eventType"),
                description=result.get("description"),
            ),
            play_events=events,
            runners=[_parse_runner(r) for r in play.get("runners", [])],
        )
    except ValidationError as exc:
        raise FeedError(
            f"Invalid play at at-bat {at_bat_index}",
            field="liveData.plays.allPlays",
            details=_validation_details(exc),
        ) from exc
    except ValueError as exc:
        raise FeedError(
            f"Invalid play at at-bat {at_bat_index}: {exc}",
            field="liveData.plays.allPlays",
        ) from exc


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

def _parse_player(raw: dict) -> Player:
    bat_side = raw.get("batSide") or {}
    pitch_hand = raw.get("pitchHand") or {}
    return Player(
        player_id=raw.get("id", 0),
        name=raw.get("fullName", ""),
        birth_date=_safe_date(raw.get("birthDate")),
        mlb_debut_date=_safe_date(raw.get("mlbDebutDate")),
        birth_city=raw.get("birthCity"),
        birth_state_province=raw.get("birthStateProvince"),
        birth_country=raw.get("birthCountry"),
        height_str=raw.get("height"),
        height_in=parse_height(raw.get("height")),
        weight=_safe_int(raw.get("weight")),
        draft_year=_safe_int(raw.get("draftYear")),
        bat_side_code=bat_side.get("code"),
        bat_side_desc=bat_side.get("description"),
        throws_code=pitch_hand.get("code"),
        throws_desc=pitch_hand.get("description"),
    )


def _parse_venue(raw: dict) -> Venue:
    location = raw.get("location", {})
    coordinates = location.get("defaultCoordinates", {})
    time_zone = raw.get("timeZone", {})
    field_info = raw.get("fieldInfo", {})
    return Venue(
        venue_id=raw.get("id", 0),
        venue_name=raw.get("name", ""),
        venue_city=location.get("city", ""),
        venue_state=location.get("state", ""),
        venue_state_abbr=location.get("stateAbbrev", ""),
        venue_time_zone=time_zone.get("id", ""),
        venue_time_zone_offset=_safe_int(time_zone.get("offset")) or 0,
        venue_capacity=_safe_int(field_info.get("capacity")),
        venue_surface=field_info.get("turfType"),
        venue_roof=field_info.get("roofType"),
        venue_left_line=_safe_int(field_info.get("leftLine")),
        venue_left=_safe_int(field_info.get("left")),
        venue_left_center=_safe_int(field_info.get("leftCenter")),
        venue_center=_safe_int(field_info.get("center")),
        venue_right_center=_safe_int(field_info.get("rightCenter")),
        venue_right=_safe_int(field_info.get("right")),
        venue_right_line=_safe_int(field_info.get("rightLine")),
        venue_latitude=_safe_float(coordinates.get("latitude")),
        venue_longitude=_safe_float(coordinates.get("longitude")),
    )


def build_starting_defense(boxscore_team: dict) -> DefenseAssignment:
    """Starting alignment from a boxscore team.

    Starters are the players whose batting order ends in ``00``; the
    starting pitcher is the first entry in ``pitchers``.
    """
    slots: dict[str, int] = {}
    for entry in boxscore_team.get("players", {}).values():
        order = str(entry.get("battingOrder", ""))
        if not order.endswith("00"):
            continue
        position = Position.parse((entry.get("position") or {}).get("abbreviation"))
        slot = POSITION_SLOTS.get(position) if position is not None else None
        player_id = (entry.get("person") or {}).get("id")
        if slot is not None and player_id is not None:
            slots[slot] = player_id

    pitchers = boxscore_team.get("pitchers", [])
    if pitchers:
        slots["pitcher"] = pitchers[0]
    return DefenseAssignment(**slots)


def _lineup(boxscore_team: dict) -> list[LineupEntry]:
    entries = []
    for entry in boxscore_team.get("players", {}).values():
        player_id = (entry.get("person") or {}).get("id")
        if player_id is None:
            continue
        entries.append(LineupEntry(
            player_id=player_id,
            batting_order=_safe_int(entry.get("battingOrder")),
        ))
    return entries


def _home_plate_umpire(boxscore: dict) -> Optional[dict]:
    for official in boxscore.get("officials", []):
        if official.get("officialType") == "Home Plate":
            return official.get("official") or None
    return None


def _parse_boxscore(game_data: dict, boxscore: dict) -> Optional[BoxScore]:
    box_teams = boxscore.get("teams", {})
    home_box = box_teams.get("home")
    away_box = box_teams.get("away")
    if not home_box or not away_box:
        return None

    teams = game_data.get("teams", {})
    home = teams.get("home", {})
    away = teams.get("away", {})
    home_id = (home_box.get("team") or {}).get("id", home.get("id", 0))
    away_id = (away_box.get("team") or {}).get("id", away.get("id", 0))

    weather = game_data.get("weather", {})
    wind_speed, wind_direction = parse_wind(weather.get("wind"))
    game_info = game_data.get("gameInfo", {})
    umpire = _home_plate_umpire(boxscore)

    return BoxScore(
        home_team_id=home_id,
        away_team_id=away_id,
        home_parent_team_id=home.get("parentOrgId", home_id),
        away_parent_team_id=away.get("parentOrgId", away_id),
        home_league_name=(home.get("league") or {}).get("name"),
        home_players=_lineup(home_box),
        away_players=_lineup(away_box),
        home_defense=build_starting_defense(home_box),
        away_defense=build_starting_defense(away_box),
        hp_umpire_id=umpire.get("id") if umpire else None,
        attendance=_safe_int(game_info.get("attendance")),
        first_pitch=parse_first_pitch(game_info.get("firstPitch")),
        weather_condition=weather.get("condition"),
        weather_temp_f=_safe_float(weather.get("temp")),
        wind_speed_mph=wind_speed,
        wind_direction=wind_direction,
    )


def _parse_schedule(game_pk: int, game_data: dict) -> GameSchedule:
    game = game_data.get("game", {})
    dt = game_data.get("datetime", {})
    game_date = _safe_date(dt.get("officialDate") or dt.get("originalDate") or dt.get("dateTime"))
    if game_date is None:
        raise FeedError("Feed has no game date", field="gameData.datetime")
    game_type = game.get("type", "")
    home = game_data.get("teams", {}).get("home", {})
    return GameSchedule(
        game_pk=game_pk,
        game_date=game_date,
        game_type=game_type,
        game_type_desc=GAME_TYPE_DESCRIPTIONS.get(game_type, ""),
        game_status=game_data.get("status", {}).get("abstractGameState", ""),
        venue_id=game_data.get("venue", {}).get("id", 0),
        sport_id=(home.get("sport") or {}).get("id", 1),
    )


def build_directory(
    game_pk: int,
    game_data: dict,
    live_data: dict,
    run_expectancy: Optional[RunExpectancyTable] = None,
) -> MetadataDirectory:
    """Assemble the metadata directory for one game from its feed sections.

    Without an explicit ``run_expectancy`` the table comes from
    ``PITCH_RECON_RE288_PATH`` when set, else the default RE288 values.
    """
    schedule = _parse_schedule(game_pk, game_data)
    season = _safe_int(game_data.get("game", {}).get("season")) or schedule.game_date.year

    directory = MetadataDirectory(
        run_expectancy=(
            dict(run_expectancy) if run_expectancy is not None else load_run_expectancy()
        ),
    )
    directory.schedule[game_pk] = schedule

    boxscore_raw = live_data.get("boxscore", {})
    boxscore = _parse_boxscore(game_data, boxscore_raw)
    if boxscore is not None:
        directory.boxscore[game_pk] = boxscore
    else:
        logger.info("Game %d: feed has no boxscore teams", game_pk)

    venue_raw = game_data.get("venue")
    if venue_raw:
        directory.venues[(schedule.venue_id, season)] = _parse_venue(venue_raw)

    for side in ("home", "away"):
        team = game_data.get("teams", {}).get(side)
        if team and team.get("id") is not None:
            directory.teams[(team["id"], season)] = Team(
                team_id=team["id"], team_name=team.get("name", ""),
            )

    for raw in game_data.get("players", {}).values():
        player = _parse_player(raw)
        directory.players[player.player_id] = player

    umpire = _home_plate_umpire(boxscore_raw)
    if umpire and umpire.get("id") is not None and umpire["id"] not in directory.players:
        directory.players[umpire["id"]] = Player(
            player_id=umpire["id"], name=umpire.get("fullName", ""),
        )
    return directory


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def load_game(
    feed: dict[str, Any],
    run_expectancy: Optional[RunExpectancyTable] = None,
) -> LoadedGame:
    """Convert a live game feed into reconstruction inputs.

    Args:
        feed: Full MLB Stats API live game feed dict.
        run_expectancy: RE288 table to attach; the configured table when None.

    Returns:
        LoadedGame with the game id, ordered plate appearances and directory.

    Raises:
        FeedError: If the payload is not a game feed or a play is malformed.
    """
    if "gameData" not in feed or "liveData" not in feed:
        raise FeedError(
            "Feed missing required top-level keys: gameData, liveData",
            field="feed",
        )
    game_data = feed.get("gameData", {})
    live_data = feed.get("liveData", {})

    game_pk = _safe_int(feed.get("gamePk") or game_data.get("game", {}).get("pk"))
    if game_pk is None:
        raise FeedError("Feed has no game id", field="gamePk")

    directory = build_directory(game_pk, game_data, live_data, run_expectancy)
    plays = live_data.get("plays", {}).get("allPlays", [])
    plate_appearances = [parse_plate_appearance(play) for play in plays]
    logger.debug("Game %d: loaded %d plate appearances", game_pk, len(plate_appearances))
    return LoadedGame(game_pk=game_pk, plate_appearances=plate_appearances, directory=directory)


def reconstruct_feed(
    feed: dict[str, Any],
    run_expectancy: Optional[RunExpectancyTable] = None,
) -> list[PitchRecord]:
    """Load a live game feed and reconstruct its pitches."""
    game = load_game(feed, run_expectancy)
    return reconstruct_game(game.game_pk, game.plate_appearances, game.directory)
