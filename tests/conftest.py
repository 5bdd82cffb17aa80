import json
import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from labyrinth.maze import Effect, Item, Maze, RandomEvent, Room  # noqa: E402

SAMPLE_MAP = {
    "nome": "Labirinto Simples",
    "salas": [
        {"id": "E1", "tipo": "ENTRADA", "descricao": "Entrada"},
        {"id": "S1", "tipo": "NORMAL", "descricao": "Sala"},
        {"id": "C1", "tipo": "TESOURO", "descricao": "Tesouro"},
    ],
    "ligacoes": [
        {
            "de": "E1",
            "para": "S1",
            "custo": 2.0,
            "evento": {"descricao": "Pocao", "efeito": "HEAL", "item": {"nome": "Pocao", "efeito": "HEAL"}},
        },
        {"de": "S1", "para": "C1", "custo": 1.0},
    ],
}


class ScriptedInput:
    """Stand-in for ``input``: hands out answers in order, then raises EOFError."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    @property
    def exhausted(self):
        return not self.answers


class Output:
    def __init__(self):
        self.lines = []

    def __call__(self, text=""):
        self.lines.append(str(text))

    @property
    def text(self):
        return "\n".join(self.lines)


@pytest.fixture(autouse=True)
def _quiet_diagnostics(monkeypatch):
    # keep key=value diagnostics out of captured stdout unless a test asks for them
    monkeypatch.setenv("LABYRINTH_LOG_LEVEL", "error")
    monkeypatch.delenv("LABYRINTH_LOG_JSON", raising=False)


@pytest.fixture()
def simple_maze():
    """E1 --2.0 [HEAL + Pocao]--> S1 --1.0--> C1"""
    maze = Maze("Labirinto Simples")
    maze.add_room(Room.entrance("E1", "Entrada"))
    maze.add_room(Room.standard("S1", "Sala"))
    maze.add_room(Room.treasure("C1", "Tesouro"))
    maze.add_corridor("E1", "S1", 2.0, RandomEvent("Pocao", Effect.HEAL, Item("Pocao", Effect.HEAL)))
    maze.add_corridor("S1", "C1", 1.0)
    return maze


@pytest.fixture()
def map_file(tmp_path):
    path = tmp_path / "map_v1.json"
    path.write_text(json.dumps(SAMPLE_MAP), encoding="utf-8")
    return path


@pytest.fixture()
def scripted():
    return ScriptedInput


@pytest.fixture()
def output():
    return Output()
