import pytest

from labyrinth.config import GameConfig, load_config


def test_defaults_from_empty_env():
    cfg = load_config(env={})
    assert cfg == GameConfig()
    assert cfg.starting_power == 100
    assert cfg.log_file == "game_log.txt"


def test_env_values():
    cfg = load_config(
        env={
            "LABYRINTH_MAPS_DIR": "/srv/maps",
            "LABYRINTH_RIDDLES_FILE": "/srv/maps/riddles.json",
            "LABYRINTH_REPORTS_DIR": "out",
            "LABYRINTH_LOG_FILE": "jogo.log",
            "LABYRINTH_STARTING_POWER": "150",
        }
    )
    assert cfg.maps_dir == "/srv/maps"
    assert cfg.riddles_file == "/srv/maps/riddles.json"
    assert cfg.reports_dir == "out"
    assert cfg.log_file == "jogo.log"
    assert cfg.starting_power == 150


@pytest.mark.parametrize("raw", ["abc", "-5", "0", ""])
def test_bad_power_falls_back(raw):
    assert load_config(env={"LABYRINTH_STARTING_POWER": raw}).starting_power == 100


def test_overrides_win_and_none_is_ignored():
    cfg = load_config(env={"LABYRINTH_MAPS_DIR": "env_maps"}, maps_dir="cli_maps", log_file=None)
    assert cfg.maps_dir == "cli_maps"
    assert cfg.log_file == "game_log.txt"


def test_unknown_override_rejected():
    with pytest.raises(TypeError):
        load_config(env={}, colour="blue")


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("LABYRINTH_REPORTS_DIR", "relatorios")
    assert load_config().reports_dir == "relatorios"
