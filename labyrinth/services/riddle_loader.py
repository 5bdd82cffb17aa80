"""Riddle pool loading.

Two layouts are accepted:

    [{"pergunta": "...", "resposta": "..."}]
    {"enigmas": [{"pergunta": "...", "opcoes": ["a", "b"], "correta": 1}]}

The result is always an UnorderedList (possibly empty); entries without a
question or answer are skipped.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Union

from labyrinth.errors import MapFormatError
from labyrinth.logging_utils import get_logger
from labyrinth.maze import Riddle
from labyrinth.structures import UnorderedList

log = get_logger("riddle_loader")


def parse_riddle(entry: Any) -> Optional[Riddle]:
    if not isinstance(entry, dict):
        return None
    question = entry.get("pergunta")
    if not question:
        return None
    options = entry.get("opcoes")
    if options:
        answer = entry.get("correta")
        if isinstance(answer, str) and answer.strip().isdigit():
            answer = int(answer.strip())
    else:
        options = None
        answer = entry.get("resposta")
    try:
        return Riddle(str(question), answer, options)
    except ValueError:
        return None


def load_riddles(path: Union[str, Path]) -> UnorderedList[Riddle]:
    riddles: UnorderedList[Riddle] = UnorderedList()
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        if isinstance(data, dict):
            data = data.get("enigmas")
        if not isinstance(data, list):
            raise MapFormatError(f"{path}: expected a list of riddles")
    except FileNotFoundError:
        log.warn(event="riddles_missing", path=str(path))
        return riddles
    except (OSError, ValueError, MapFormatError) as e:
        log.error(event="riddles_unreadable", path=str(path), error=str(e))
        return riddles

    skipped = 0
    for entry in data:
        riddle = parse_riddle(entry)
        if riddle is None:
            skipped += 1
            continue
        riddles.add_to_rear(riddle)
    if skipped:
        log.warn(event="riddles_skipped", path=str(path), count=skipped)
    log.info(event="riddles_loaded", path=str(path), count=riddles.size())
    return riddles


__all__ = ["load_riddles", "parse_riddle"]
