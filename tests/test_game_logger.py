import logging
import re

from labyrinth.services.game_logger import SESSION_BANNER, GameLogger

LINE = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] ")


def test_lines_are_timestamped(tmp_path):
    path = tmp_path / "game_log.txt"
    game_log = GameLogger(path)
    game_log.start_session("Labirinto Simples")
    game_log.log("Ana moveu-se de E1 para S1")
    game_log.close()
    lines = path.read_text(encoding="utf-8").splitlines()
    assert all(LINE.match(line) for line in lines)
    assert lines[0].endswith(SESSION_BANNER)
    assert lines[1].endswith("Mapa: Labirinto Simples")
    assert lines[-1].endswith("Ana moveu-se de E1 para S1")


def test_log_is_append_only(tmp_path):
    path = tmp_path / "game_log.txt"
    with GameLogger(path) as first:
        first.log("primeira")
    with GameLogger(path) as second:
        second.log("segunda")
    text = path.read_text(encoding="utf-8")
    assert "primeira" in text and "segunda" in text
    assert text.index("primeira") < text.index("segunda")


def test_log_victory(tmp_path):
    path = tmp_path / "log.txt"
    game_log = GameLogger(path)
    game_log.log_victory("Ana", 7)
    game_log.close()
    text = path.read_text(encoding="utf-8")
    assert "VITÓRIA! Jogador 'Ana' encontrou o tesouro em 7 movimentos!" in text
    assert "VENCEDOR: Ana" in text


def test_close_stops_writing(tmp_path):
    path = tmp_path / "log.txt"
    game_log = GameLogger(path)
    game_log.log("antes")
    game_log.close()
    game_log.log("depois")
    game_log.close()
    assert "depois" not in path.read_text(encoding="utf-8")
    assert not game_log.available


def test_unwritable_path_is_not_fatal(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    game_log = GameLogger(blocker / "log.txt")
    assert not game_log.available
    game_log.log("nada")
    game_log.close()


def test_separate_loggers_write_separate_files(tmp_path):
    a = GameLogger(tmp_path / "a.txt")
    b = GameLogger(tmp_path / "b.txt")
    a.log("so-a")
    b.log("so-b")
    a.close()
    b.close()
    assert "so-b" not in (tmp_path / "a.txt").read_text(encoding="utf-8")
    assert "so-a" not in (tmp_path / "b.txt").read_text(encoding="utf-8")


def test_loggers_are_not_registered(tmp_path):
    before = set(logging.Logger.manager.loggerDict)
    for n in range(3):
        with GameLogger(tmp_path / f"log{n}.txt") as game_log:
            game_log.log(f"sessao {n}")
    assert set(logging.Logger.manager.loggerDict) == before
    assert "sessao 2" in (tmp_path / "log2.txt").read_text(encoding="utf-8")
