#!/usr/bin/env python3
import argparse, csv, os
from labsnake.levels import default_catalog, get_level, tier_for
from labsnake.logging_config import configure_logging

def write_tsv(mat, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t', lineterminator='\n')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)

def cmd_emit(args):
    lvl = get_level(default_catalog(), args.level)
    write_tsv(lvl.grid.as_matrix(), args.out, include_header=args.header)
    print(f"Wrote {args.out}")

def cmd_golden(args):
    os.makedirs(args.outdir, exist_ok=True)
    for lvl in default_catalog():
        path = os.path.join(args.outdir, f"{lvl.id:02d}.tsv")
        write_tsv(lvl.grid.as_matrix(), path)
    print(f"Wrote golden pack to {args.outdir}")

def cmd_catalog(args):
    print(f"{'id':>3}  {'label':<16} {'tier':<12} {'size':>7} {'shortest':>8} {'budget':>6}")
    for lvl in default_catalog():
        size = f"{lvl.rows}x{lvl.cols}"
        print(f"{lvl.id:>3}  {lvl.label:<16} {tier_for(lvl.id):<12} {size:>7} {lvl.shortest:>8} {lvl.max_moves:>6}")
    if args.show:
        print()
        print(get_level(default_catalog(), args.show).grid.to_text())

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--log-level', default='WARNING')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--level', type=int, required=True)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_golden)
    p3 = sub.add_parser('catalog')
    p3.add_argument('--show', type=int, default=0, help="Also print this level as ASCII")
    p3.set_defaults(func=cmd_catalog)
    args = p.parse_args()
    configure_logging(args.log_level.upper())
    args.func(args)

if __name__ == '__main__':
    main()
