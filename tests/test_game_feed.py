# /// script
# requires-python = ">=3.12"
# dependencies = ["pytest>=7.0", "pydantic>=2.0"]
# ///
"""Tests for game_feed.py, the live game feed adapter.

Validates:
  1. Feed string parsers (height, wind, first pitch)
  2. Schedule, boxscore, venue, team and player extraction
  3. Starting defense from batting-order codes and the pitchers list
  4. Play-by-play conversion, including runner credits and unknown events
  5. Error handling for malformed feeds
  6. End-to-end reconstruction of a small feed
  7. RE288 table taken from PITCH_RECON_RE288_PATH unless one is passed in
"""

import copy
import json
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from config import RE288_PATH_ENV
from game_feed import (
    FeedError,
    build_starting_defense,
    load_game,
    parse_first_pitch,
    parse_height,
    parse_plate_appearance,
    parse_wind,
    reconstruct_feed,
)
from models import HalfInning, PlayEventType, Position, Trajectory


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

GAME_PK = 746865

HOME_STARTERS = {901: "C", 902: "1B", 903: "2B", 904: "3B", 905: "SS",
                 906: "LF", 907: "CF", 908: "RF", 909: "DH"}
AWAY_STARTERS = {801: "C", 802: "1B", 803: "2B", 804: "3B", 805: "SS",
                 806: "LF", 807: "CF", 808: "RF", 809: "DH"}


def _box_team(team_id: int, starters: dict[int, str], pitcher: int, bench: int) -> dict:
    players = {
        f"ID{pid}": {
            "person": {"id": pid},
            "battingOrder": str((i + 1) * 100),
            "position": {"abbreviation": pos},
        }
        for i, (pid, pos) in enumerate(starters.items())
    }
    players[f"ID{bench}"] = {
        "person": {"id": bench},
        "battingOrder": "101",
        "position": {"abbreviation": "PH"},
    }
    players[f"ID{pitcher}"] = {"person": {"id": pitcher}, "position": {"abbreviation": "P"}}
    return {"team": {"id": team_id}, "players": players, "pitchers": [pitcher, pitcher + 20]}


def _player(pid: int) -> dict:
    return {
        "id": pid,
        "fullName": f"Player {pid}",
        "birthDate": "1994-06-15",
        "height": "6' 2\"",
        "weight": 210,
        "batSide": {"code": "R", "description": "Right"},
        "pitchHand": {"code": "L", "description": "Left"},
    }


def _pitch(index, code, balls, strikes, in_play=False, **extra) -> dict:
    event = {
        "index": index,
        "type": "pitch",
        "playId": f"pitch-{index}",
        "details": {
            "code": code,
            "description": "In play, no out" if in_play else "Ball",
            "isInPlay": in_play,
            "type": {"code": "FF", "description": "Four-Seam Fastball"},
        },
        "count": {"balls": balls, "strikes": strikes, "outs": 0},
    }
    event.update(extra)
    return event


@pytest.fixture
def feed() -> dict:
    single = {
        "about": {"atBatIndex": 0, "inning": 1, "halfInning": "top"},
        "matchup": {
            "batter": {"id": 801, "fullName": "Player 801"},
            "batSide": {"code": "R", "description": "Right"},
            "pitcher": {"id": 900, "fullName": "Player 900"},
            "pitchHand": {"code": "L", "description": "Left"},
        },
        "result": {
            "event": "Single",
            "eventType": "single",
            "description": "Player 801 singles on a line drive to left fielder Player 906.",
        },
        "playEvents": [
            _pitch(0, "B", 1, 0, pitchData={
                "startSpeed": 94.1,
                "extension": 6.3,
                "coordinates": {
                    "x0": -1.5, "y0": 50.0, "z0": 6.0,
                    "vX0": 5.0, "vY0": -130.0, "vZ0": -5.0,
                    "aX": -10.0, "aY": 28.0, "aZ": -15.0,
                    "pX": 0.1, "pZ": 2.5,
                },
                "breaks": {"spinRate": 2350, "breakVerticalInduced": 17.1},
            }),
            _pitch(1, "X", 1, 0, in_play=True, hitData={
                "coordinates": {"coordX": 100.0, "coordY": 120.0},
                "trajectory": "line_drive",
                "hardness": "hard",
                "launchSpeed": 101.2,
                "launchAngle": 12.0,
                "totalDistance": 250,
            }),
        ],
        "runners": [{
            "movement": {"start": None, "end": "1B", "isOut": False},
            "details": {"runner": {"id": 801}, "playIndex": 1},
            "credits": [{
                "player": {"id": 906},
                "position": {"abbreviation": "LF"},
                "credit": "f_fielded_ball",
            }],
        }],
    }
    strike = {
        "about": {"atBatIndex": 1, "inning": 1, "halfInning": "bottom"},
        "matchup": {
            "batter": {"id": 901, "fullName": "Player 901"},
            "pitcher": {"id": 800, "fullName": "Player 800"},
        },
        "result": {},
        "playEvents": [
            {"index": 0, "type": "mystery"},
            _pitch(1, "S", 0, 1),
        ],
        "runners": [],
    }
    player_ids = [*range(800, 811), *range(900, 911)]
    return {
        "gamePk": GAME_PK,
        "gameData": {
            "game": {"pk": GAME_PK, "type": "R", "season": "2024"},
            "datetime": {"officialDate": "2024-06-15"},
            "status": {"abstractGameState": "Final"},
            "teams": {
                "home": {
                    "id": 112,
                    "name": "Chicago Cubs",
                    "league": {"name": "National League"},
                    "sport": {"id": 1},
                },
                "away": {"id": 138, "name": "St. Louis Cardinals"},
            },
            "venue": {
                "id": 17,
                "name": "Wrigley Field",
                "location": {
                    "city": "Chicago",
                    "state": "Illinois",
                    "stateAbbrev": "IL",
                    "defaultCoordinates": {"latitude": 41.948, "longitude": -87.655},
                },
                "timeZone": {"id": "America/Chicago", "offset": -5},
                "fieldInfo": {
                    "capacity": 41649, "turfType": "Grass", "roofType": "Open",
                    "leftLine": 355, "left": 368, "leftCenter": 368, "center": 400,
                    "rightCenter": 368, "right": 368, "rightLine": 353,
                },
            },
            "weather": {"condition": "Sunny", "temp": "77", "wind": "7 mph, Out To CF"},
            "gameInfo": {"attendance": 38123, "firstPitch": "2024-06-15T18:20:00.000Z"},
            "players": {f"ID{pid}": _player(pid) for pid in player_ids},
        },
        "liveData": {
            "boxscore": {
                "teams": {
                    "home": _box_team(112, HOME_STARTERS, pitcher=900, bench=910),
                    "away": _box_team(138, AWAY_STARTERS, pitcher=800, bench=810),
                },
                "officials": [
                    {"official": {"id": 501, "fullName": "Ump Two"}, "officialType": "First Base"},
                    {"official": {"id": 500, "fullName": "Ump One"}, "officialType": "Home Plate"},
                ],
            },
            "plays": {"allPlays": [single, strike]},
        },
    }


# ---------------------------------------------------------------------------
# String parsers
# ---------------------------------------------------------------------------

class TestParsers:
    @pytest.mark.parametrize("height,expected", [
        ("6' 2\"", 74),
        ("5' 11\"", 71),
        ("6'0\"", 72),
        ("", 0),
        (None, 0),
        ("tall", 0),
    ])
    def test_parse_height(self, height, expected):
        assert parse_height(height) == expected

    @pytest.mark.parametrize("wind,expected", [
        ("7 mph, Out To CF", (7, "Out To CF")),
        ("0 mph, None", (0, "None")),
        ("12 MPH", (12, None)),
        ("calm", (None, None)),
        (None, (None, None)),
    ])
    def test_parse_wind(self, wind, expected):
        assert parse_wind(wind) == expected

    def test_parse_first_pitch(self):
        assert parse_first_pitch("2024-06-15T18:20:00.000Z") == pytest.approx(18 + 20 / 60)
        assert parse_first_pitch("not a time") is None
        assert parse_first_pitch(None) is None


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

class TestDirectory:
    def test_game_id(self, feed):
        assert load_game(feed).game_pk == GAME_PK

    def test_game_id_from_game_data(self, feed):
        del feed["gamePk"]
        assert load_game(feed).game_pk == GAME_PK

    def test_schedule(self, feed):
        schedule = load_game(feed).directory.schedule[GAME_PK]
        assert schedule.game_date == date(2024, 6, 15)
        assert schedule.game_type == "R"
        assert schedule.game_type_desc == "Regular Season"
        assert schedule.game_status == "Final"
        assert schedule.venue_id == 17
        assert schedule.sport_id == 1

    def test_boxscore(self, feed):
        box = load_game(feed).directory.boxscore[GAME_PK]
        assert (box.home_team_id, box.away_team_id) == (112, 138)
        assert (box.home_parent_team_id, box.away_parent_team_id) == (112, 138)
        assert box.home_league_name == "National League"
        assert box.hp_umpire_id == 500
        assert box.attendance == 38123
        assert box.weather_temp_f == 77.0
        assert box.weather_condition == "Sunny"
        assert (box.wind_speed_mph, box.wind_direction) == (7, "Out To CF")
        assert box.first_pitch == pytest.approx(18 + 20 / 60)

    def test_parent_organisation(self, feed):
        feed["gameData"]["teams"]["away"]["parentOrgId"] = 999
        box = load_game(feed).directory.boxscore[GAME_PK]
        assert box.away_parent_team_id == 999

    def test_lineup(self, feed):
        box = load_game(feed).directory.boxscore[GAME_PK]
        orders = {p.player_id: p.batting_order for p in box.home_players}
        assert orders[901] == 100
        assert orders[909] == 900
        assert orders[910] == 101
        assert orders[900] is None

    def test_players_and_umpire(self, feed):
        players = load_game(feed).directory.players
        assert players[801].height_in == 74
        assert players[801].weight == 210
        assert players[801].birth_date == date(1994, 6, 15)
        assert players[801].throws_code == "L"
        assert players[500].name == "Ump One"
        assert 501 not in players

    def test_venue_and_teams(self, feed):
        directory = load_game(feed).directory
        venue = directory.venues[(17, 2024)]
        assert venue.venue_name == "Wrigley Field"
        assert venue.venue_state_abbr == "IL"
        assert venue.venue_time_zone_offset == -5
        assert venue.venue_center == 400
        assert venue.venue_right == 368
        assert venue.venue_right_line == 353
        assert directory.teams[(112, 2024)].team_name == "Chicago Cubs"
        assert directory.teams[(138, 2024)].team_name == "St. Louis Cardinals"

    def test_run_expectancy_override(self, feed):
        table = {(0, 0, 0, 0): 1.0}
        assert load_game(feed, run_expectancy=table).directory.run_expectancy == table

    def test_run_expectancy_from_environment(self, feed, monkeypatch, tmp_path):
        path = tmp_path / "re288.json"
        path.write_text(json.dumps([
            {"balls": 0, "strikes": 0, "base_value": 0, "outs": 0, "run_expectancy": 9.9},
        ]))
        monkeypatch.setenv(RE288_PATH_ENV, str(path))
        assert load_game(feed).directory.run_expectancy == {(0, 0, 0, 0): 9.9}
        assert reconstruct_feed(feed)[0].re_288_start == pytest.approx(9.9)

    def test_explicit_table_beats_environment(self, feed, monkeypatch, tmp_path):
        monkeypatch.setenv(RE288_PATH_ENV, str(tmp_path / "missing.json"))
        table = {(0, 0, 0, 0): 1.0}
        assert load_game(feed, run_expectancy=table).directory.run_expectancy == table

    def test_missing_boxscore_teams(self, feed):
        feed["liveData"]["boxscore"] = {}
        game = load_game(feed)
        assert GAME_PK not in game.directory.boxscore
        assert reconstruct_feed(feed) == []


class TestStartingDefense:
    def test_starters_and_pitcher(self, feed):
        home_box = feed["liveData"]["boxscore"]["teams"]["home"]
        defense = build_starting_defense(home_box)
        assert defense.catcher == 901
        assert defense.short_stop == 905
        assert defense.center_field == 907
        assert defense.designated_hitter == 909
        assert defense.pitcher == 900

    def test_bench_players_excluded(self, feed):
        home_box = feed["liveData"]["boxscore"]["teams"]["home"]
        home_box["players"]["ID910"]["position"]["abbreviation"] = "C"
        assert build_starting_defense(home_box).catcher == 901

    def test_empty_team(self):
        defense = build_starting_defense({})
        assert defense.catcher is None
        assert defense.pitcher is None


# ---------------------------------------------------------------------------
# Play-by-play
# ---------------------------------------------------------------------------

class TestPlateAppearances:
    def test_plate_appearances(self, feed):
        pas = load_game(feed).plate_appearances
        assert [pa.at_bat_index for pa in pas] == [0, 1]
        assert [pa.half_inning for pa in pas] == [HalfInning.TOP, HalfInning.BOTTOM]
        assert pas[0].matchup.pitch_hand_code == "L"
        assert pas[0].result.event == "Single"

    def test_events(self, feed):
        pa = load_game(feed).plate_appearances[0]
        ball, hit = pa.play_events
        assert ball.type == PlayEventType.PITCH
        assert ball.details.pitch_type_code == "FF"
        assert ball.pitch_data.coordinates.v_y0 == -130.0
        assert ball.pitch_data.breaks.spin_rate == 2350
        assert hit.details.is_in_play is True
        assert hit.hit_data.trajectory == Trajectory.LINE_DRIVE
        assert hit.hit_data.coord_x == 100.0

    def test_unknown_event_type_dropped(self, feed, caplog):
        with caplog.at_level(logging.WARNING, logger="game_feed"):
            pa = load_game(feed).plate_appearances[1]
        assert [e.index for e in pa.play_events] == [1]
        assert "unknown type" in caplog.text

    def test_runner_credit(self, feed):
        movement = load_game(feed).plate_appearances[0].runners[0]
        assert movement.runner_id == 801
        assert movement.play_index == 1
        assert movement.end == "1B"
        assert movement.fielded_by_id == 906
        assert movement.fielded_by_position == Position.LEFT_FIELD

    def test_runner_without_play_index(self, feed):
        play = copy.deepcopy(feed["liveData"]["plays"]["allPlays"][0])
        del play["runners"][0]["details"]["playIndex"]
        assert parse_plate_appearance(play).runners[0].play_index == -1

    def test_action_event(self):
        play = {
            "about": {"atBatIndex": 4, "inning": 3, "halfInning": "top"},
            "matchup": {"batter": {"id": 1}, "pitcher": {"id": 2}},
            "playEvents": [{
                "index": 0,
                "type": "action",
                "details": {"eventType": "defensive_substitution"},
                "player": {"id": 77},
                "position": {"abbreviation": "SS"},
            }],
        }
        event = parse_plate_appearance(play).play_events[0]
        assert event.player_id == 77
        assert event.position == Position.SHORT_STOP
        assert event.details.event_type == "defensive_substitution"


class TestFeedErrors:
    def test_not_a_game_feed(self):
        with pytest.raises(FeedError) as exc_info:
            load_game({"gamePk": 1})
        assert exc_info.value.field == "feed"

    def test_no_game_id(self, feed):
        del feed["gamePk"]
        del feed["gameData"]["game"]["pk"]
        with pytest.raises(FeedError) as exc_info:
            load_game(feed)
        assert exc_info.value.field == "gamePk"

    def test_no_game_date(self, feed):
        feed["gameData"]["datetime"] = {}
        with pytest.raises(FeedError) as exc_info:
            load_game(feed)
        assert exc_info.value.field == "gameData.datetime"

    def test_play_without_batter(self, feed):
        play = feed["liveData"]["plays"]["allPlays"][0]
        del play["matchup"]["batter"]
        with pytest.raises(FeedError) as exc_info:
            load_game(feed)
        assert exc_info.value.details

    def test_bad_half_inning(self, feed):
        feed["liveData"]["plays"]["allPlays"][0]["about"]["halfInning"] = "middle"
        with pytest.raises(FeedError):
            load_game(feed)


# ---------------------------------------------------------------------------
# End to end
# ---------------------------------------------------------------------------

class TestReconstructFeed:
    def test_records(self, feed):
        records = reconstruct_feed(feed)
        assert len(records) == 3
        ball, hit, strike = records

        assert ball.play_id == "pitch-0"
        assert ball.catcher_id == 901
        assert ball.pitcher_name == "Player 900"
        assert ball.pitch_spin_rate == 2350
        assert ball.tf is not None
        assert ball.hp_umpire_name == "Ump One"
        assert ball.venue_name == "Wrigley Field"
        assert ball.game_weather_temp_c == pytest.approx(25.0)

        assert hit.in_play == 1
        assert hit.in_play_1b == 1
        assert hit.hit_data_trajectory == Trajectory.LINE_DRIVE
        assert hit.fielded_by_id == 906
        assert hit.fielded_by_pos == Position.LEFT_FIELD
        assert hit.base_value_end == 1
        assert hit.pitch_num_plate_appearance == 2

        assert strike.half_inning == HalfInning.BOTTOM
        assert strike.base_value_start == 0
        assert strike.batter_pos == Position.CATCHER
        assert strike.catcher_id == 801
        assert strike.swing_and_miss == 1
        assert strike.pitch_num_game == 3
