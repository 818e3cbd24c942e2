from __future__ import annotations
import argparse
import json
import logging
import sys

from spoilersweeper.engine import Minesweeper
from spoilersweeper.options import ReturnType, normalize_options, seeded_rng


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Generate a spoiler-tagged minesweeper field')
    parser.add_argument('--rows', type=int, default=9)
    parser.add_argument('--columns', type=int, default=9)
    parser.add_argument('--mines', type=int, default=10)
    parser.add_argument('--emote', type=str, default='boom')
    parser.add_argument('--reveal-first', action='store_true', help='Reveal a safe starting cell')
    parser.add_argument('--no-zero-first', action='store_true',
                        help='Do not force the revealed starting cell to be a zero')
    parser.add_argument('--no-spaces', action='store_true')
    parser.add_argument('--return-type', type=str, default='emoji', choices=[t.value for t in ReturnType])
    parser.add_argument('--seed', type=int, default=-1, help='RNG seed; <0 uses OS entropy (random every run)')
    parser.add_argument('--ascii', action='store_true', help='Also print the solved board')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    opts = normalize_options(
        rows=args.rows,
        columns=args.columns,
        mines=args.mines,
        emote=args.emote,
        reveal_first_cell=args.reveal_first,
        zero_first_cell=not args.no_zero_first,
        spaces=not args.no_spaces,
        return_type=args.return_type,
        rng=seeded_rng(None if args.seed < 0 else args.seed),
    )
    field = Minesweeper(opts)
    result = field.start()
    if result is None:
        print(f"[generate] {opts.rows}x{opts.columns} is too small for {opts.mines} mines", file=sys.stderr)
        return 1

    if isinstance(result, list):
        print(json.dumps(result))
    else:
        print(result)
    if args.ascii:
        print()
        print(field.render_ascii())
    return 0


if __name__ == '__main__':
    sys.exit(main())
