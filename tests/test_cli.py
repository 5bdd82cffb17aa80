import importlib
import json
import sys

import pytest

# run.py is imported as a module; interactive entry points are patched so no
# test ever waits on the real stdin.


@pytest.fixture()
def run_module():
    # Ensure a clean import each time (run.py reads VERSION once)
    if "run" in sys.modules:
        del sys.modules["run"]
    return importlib.import_module("run")


def test_version_flag_outputs_version(run_module, capsys):
    ver = run_module.__version__
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    captured = capsys.readouterr().out
    assert ver in captured
    assert "Labyrinth of Glory" in captured


def test_default_command_is_menu(run_module):
    assert run_module.parse_args([]).command == "menu"
    assert run_module.parse_args(["--env-file", "x.env"]).command == "menu"


def test_play_arguments(run_module):
    ns = run_module.parse_args(["play", "maps/map_v1.json", "--power", "50", "--reports-dir", "out"])
    assert ns.command == "play"
    assert ns.map == "maps/map_v1.json"
    assert ns.starting_power == 50
    assert ns.reports_dir == "out"


def test_validate_ok(run_module, map_file, capsys):
    assert run_module.main(["validate", str(map_file)]) == 0
    out = capsys.readouterr().out
    assert "[OK] Path: E1 -> S1 -> C1" in out


def test_validate_failures(run_module, tmp_path, capsys):
    assert run_module.main(["validate", str(tmp_path / "missing.json")]) == 1
    broken = tmp_path / "broken.json"
    broken.write_text(json.dumps({"salas": [{"id": "C1", "tipo": "TESOURO"}]}), encoding="utf-8")
    assert run_module.main(["validate", str(broken)]) == 1
    assert "no entrance room" in capsys.readouterr().out


def test_menu_mode_invokes_main_menu(monkeypatch, run_module, tmp_path):
    calls = {}

    def fake_main_menu(input_fn, output_fn, config, game_log):
        calls["maps_dir"] = config.maps_dir
        calls["log"] = game_log

    import labyrinth.ui as ui

    monkeypatch.setattr(ui, "main_menu", fake_main_menu)
    log_file = tmp_path / "game_log.txt"
    assert run_module.main(["menu", "--maps-dir", str(tmp_path), "--log-file", str(log_file)]) == 0
    assert calls["maps_dir"] == str(tmp_path)
    # the CLI closes the game log on the way out
    assert not calls["log"].available


def test_play_mode_runs_game(monkeypatch, run_module, map_file, tmp_path):
    answers = iter(["1", "Ana", "S1", "C1"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    code = run_module.main(
        [
            "play",
            str(map_file),
            "--reports-dir",
            str(tmp_path / "reports"),
            "--log-file",
            str(tmp_path / "game_log.txt"),
        ]
    )
    assert code == 0
    assert (tmp_path / "reports" / "report_Ana.json").exists()


def test_play_missing_map(run_module, tmp_path):
    assert run_module.main(["play", str(tmp_path / "nope.json"), "--log-file", str(tmp_path / "l.txt")]) == 1


def test_env_file_argument(monkeypatch, tmp_path, run_module):
    env_file = tmp_path / ".env"
    env_file.write_text(f"LABYRINTH_MAPS_DIR={tmp_path}\n")
    monkeypatch.delenv("LABYRINTH_MAPS_DIR", raising=False)
    seen = {}

    def fake_main_menu(input_fn, output_fn, config, game_log):
        seen["maps_dir"] = config.maps_dir

    import labyrinth.ui as ui

    monkeypatch.setattr(ui, "main_menu", fake_main_menu)
    run_module.main(["--env-file", str(env_file), "menu", "--log-file", str(tmp_path / "l.txt")])
    assert seen["maps_dir"] == str(tmp_path)
