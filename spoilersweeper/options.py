from __future__ import annotations
import random
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Union

DEFAULT_ROWS = 9
DEFAULT_COLUMNS = 9
DEFAULT_MINES = 10
DEFAULT_EMOTE = 'boom'
DEFAULT_REVEAL_FIRST_CELL = False
DEFAULT_ZERO_FIRST_CELL = True
DEFAULT_SPACES = True

Rng = Callable[[], float]

# camelCase option names are accepted as aliases
_ALIASES = {
    'revealFirstCell': 'reveal_first_cell',
    'zeroFirstCell': 'zero_first_cell',
    'returnType': 'return_type',
}


class ReturnType(str, Enum):
    EMOJI = 'emoji'
    CODE = 'code'
    MATRIX = 'matrix'


@dataclass(frozen=True)
class Options:
    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    mines: int = DEFAULT_MINES
    emote: str = DEFAULT_EMOTE
    reveal_first_cell: bool = DEFAULT_REVEAL_FIRST_CELL
    zero_first_cell: bool = DEFAULT_ZERO_FIRST_CELL
    spaces: bool = DEFAULT_SPACES
    rng: Rng = field(default=random.random, compare=False)
    return_type: ReturnType = ReturnType.EMOJI


def seeded_rng(seed: Optional[int]) -> Rng:
    return random.Random(seed).random


def _or_default(value: Any, default: Any) -> Any:
    # 0, '' and None all fall back, matching `opts.rows || 9`
    return value if value else default


def normalize_options(opts: Union[Options, Mapping[str, Any], None] = None, **overrides: Any) -> Options:
    """Turn a partial configuration into a complete `Options`.

    `opts` may be an `Options`, a mapping using either the snake_case
    field names or the camelCase ones (`revealFirstCell`, `zeroFirstCell`,
    `returnType`), or None. Keyword overrides win over `opts`.
    """
    if isinstance(opts, Options):
        base = opts
        raw: dict = {}
    else:
        base = Options()
        raw = dict(opts or {})
    raw.update(overrides)

    known = {f.name for f in fields(Options)}
    given = {}
    for key, value in raw.items():
        name = _ALIASES.get(key, key)
        if name not in known:
            raise TypeError(f"unknown option: {key!r}")
        given[name] = value

    values = {}
    for name in ('rows', 'columns', 'mines'):
        if name in given:
            values[name] = int(_or_default(given[name], getattr(Options, name)))
    if 'emote' in given:
        values['emote'] = str(_or_default(given['emote'], DEFAULT_EMOTE))
    for name in ('reveal_first_cell', 'zero_first_cell', 'spaces'):
        if given.get(name) is not None:
            values[name] = bool(given[name])
    if given.get('rng') is not None:
        values['rng'] = given['rng']
    if 'return_type' in given:
        values['return_type'] = ReturnType(_or_default(given['return_type'], ReturnType.EMOJI))

    return replace(base, **values)
