import json

from labyrinth.maze import Effect, Item, Room
from labyrinth.player import Player
from labyrinth.services.report_exporter import (
    MATCH_REPORT_NAME,
    build_mission_report,
    export_match_summary,
    export_mission_report,
    report_filename,
)


def test_filename_replaces_whitespace_runs():
    assert report_filename("Bot With Spaces") == "report_Bot_With_Spaces.json"
    assert report_filename("Ana\t  Rita") == "report_Ana_Rita.json"
    assert report_filename("Solo") == "report_Solo.json"


def test_victory_report_written(tmp_path):
    p = Player("WinnerBot")
    p.place(Room.entrance("E1"))
    p.move_to(Room.treasure("C1"))
    p.add_item(Item("Pocao", Effect.HEAL))
    p.record_applied_effect("HEAL")
    p.record_encountered_event("Pocao")
    path = export_mission_report(p, tmp_path)
    assert path == tmp_path / "report_WinnerBot.json"
    report = json.loads(path.read_text(encoding="utf-8"))
    assert report["player"] == "WinnerBot"
    assert report["result"] == "VICTORY"
    assert report["final_room"] == "C1"
    assert report["path_taken"] == ["E1", "C1"]
    assert report["moves"] == 1
    assert report["inventory"] == ["Pocao"]
    assert report["effects_applied"] == ["HEAL"]
    assert report["statistics"]["total_events_encountered"] == 1
    assert report["statistics"]["game_status"] == "COMPLETED_SUCCESSFULLY"


def test_defeat_report_for_spaced_name(tmp_path):
    p = Player("Bot With Spaces")
    p.place(Room.standard("S1", "A"))
    path = export_mission_report(p, tmp_path)
    assert path.name == "report_Bot_With_Spaces.json"
    assert json.loads(path.read_text(encoding="utf-8"))["result"] == "DEFEAT"


def test_explicit_victory_flag_wins():
    p = Player("Ana")
    p.place(Room.treasure("C1"))
    assert build_mission_report(p, victory=False)["result"] == "DEFEAT"


def test_write_failure_returns_none(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    assert export_mission_report(Player("Ana"), blocker) is None


def test_match_summary(tmp_path):
    a, b = Player("Ana"), Player("Rui")
    a.place(Room.treasure("C1"))
    path = export_match_summary([a, b], a, tmp_path)
    assert path.name == MATCH_REPORT_NAME
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["winner"] == "Ana"
    assert [p["name"] for p in data["players"]] == ["Ana", "Rui"]
    assert data["players"][1]["current_room"] == "UNKNOWN"
    no_winner = json.loads(export_match_summary([b], None, tmp_path).read_text(encoding="utf-8"))
    assert no_winner["winner"] == "NONE"
