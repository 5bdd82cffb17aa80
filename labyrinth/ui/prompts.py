"""Console input helpers shared by the menus.

All helpers take the input/output callables explicitly and return None when
the input stream ends, so a menu can unwind instead of crashing on EOF.
"""

from __future__ import annotations

from typing import Callable, Optional

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

INVALID_NUMBER = "Por favor, insere um número válido!"


def read_text(input_fn: InputFn, prompt: str) -> Optional[str]:
    try:
        return input_fn(prompt).strip()
    except EOFError:
        return None


def read_int(input_fn: InputFn, output_fn: OutputFn, prompt: str, minimum: Optional[int] = None) -> Optional[int]:
    """Ask until an integer (>= ``minimum`` when given) is typed."""
    while True:
        raw = read_text(input_fn, prompt)
        if raw is None:
            return None
        try:
            value = int(raw)
        except ValueError:
            output_fn(INVALID_NUMBER)
            continue
        if minimum is not None and value < minimum:
            output_fn(f"O valor mínimo é {minimum}.")
            continue
        return value


def read_float(input_fn: InputFn, output_fn: OutputFn, prompt: str, default: Optional[float] = None) -> Optional[float]:
    """Ask until a number is typed; ``,`` is accepted as decimal separator.

    An empty answer returns ``default`` when one is given.
    """
    while True:
        raw = read_text(input_fn, prompt)
        if raw is None:
            return None
        if not raw and default is not None:
            return default
        try:
            return float(raw.replace(",", "."))
        except ValueError:
            output_fn(INVALID_NUMBER)


def confirm(input_fn: InputFn, prompt: str) -> bool:
    answer = read_text(input_fn, prompt)
    return bool(answer) and answer.lower().startswith(("s", "y"))
