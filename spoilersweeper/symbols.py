from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

# Emote names for adjacent-mine counts 0..8
NUMBER_NAMES: Tuple[str, ...] = ('zero', 'one', 'two', 'three', 'four', 'five', 'six', 'seven', 'eight')

SPOILER = '||'


def spoilerize(name: str, spaces: bool = True) -> str:
    """Wrap an emote name in a spoiler tag, e.g. `|| :zero: ||`."""
    if spaces:
        return f'{SPOILER} :{name}: {SPOILER}'
    return f'{SPOILER}:{name}:{SPOILER}'


def unspoiler(symbol: str) -> str:
    # Strips the two-character tag on each side; the inner padding stays
    return symbol[len(SPOILER):-len(SPOILER)]


def is_spoiler(symbol: str) -> bool:
    return symbol.startswith(SPOILER) and symbol.endswith(SPOILER)


@dataclass(frozen=True)
class CellTypes:
    mine: str
    numbers: Tuple[str, ...]

    @classmethod
    def build(cls, emote: str, spaces: bool = True) -> 'CellTypes':
        return cls(
            mine=spoilerize(emote, spaces),
            numbers=tuple(spoilerize(n, spaces) for n in NUMBER_NAMES),
        )
