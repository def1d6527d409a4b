#!/usr/bin/env python3
import argparse, csv, sys
from lightsout.engine.state import GameSession

def build_session(args):
    return GameSession(args.size, generation_strength=args.strength, seed=args.seed)

def write_tsv(mat, out):
    w = csv.writer(out, delimiter='\t', lineterminator='\n')
    for r in mat:
        w.writerow(r)

def cmd_emit(args):
    s = build_session(args)
    if args.out:
        with open(args.out, 'w', newline='') as f:
            write_tsv(s.board.as_matrix(), f)
        print(f"Wrote {args.out} (seed {s.seed}, {s.board.lit_count()} lit)")
    else:
        write_tsv(s.board.as_matrix(), sys.stdout)

def cmd_moves(args):
    # Generation centers, in order; clicking them solves the board.
    s = build_session(args)
    for x, y in s.generation_moves:
        print(f"{x}\t{y}")

def main():
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    for name, func in (('emit', cmd_emit), ('moves', cmd_moves)):
        sp = sub.add_parser(name)
        sp.add_argument('--seed', type=int, required=True)
        sp.add_argument('--size', type=int, default=9)
        sp.add_argument('--strength', type=int, default=5)
        sp.set_defaults(func=func)
        if name == 'emit':
            sp.add_argument('--out', type=str, default=None)
    args = p.parse_args()
    if args.size < 1:
        raise SystemExit("--size must be >= 1")
    args.func(args)

if __name__ == '__main__':
    main()
