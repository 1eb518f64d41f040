from __future__ import annotations
import argparse, json, sys
from dataclasses import asdict
from .engine import Engine
from .config import TOP_K

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Prefix completion CLI")
    p.add_argument("--roots", nargs="+", required=True, help="Key files or folders to scan")
    p.add_argument("-k", type=int, default=TOP_K, help="Top-K results")
    p.add_argument("--q", default=None, help="Single prefix to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.k <= 0:
        p.error("-k must be positive")

    eng = Engine()
    try:
        eng.build(roots=args.roots, verbose=args.verbose)

        def run_query(q: str):
            rows = eng.complete(q, top_k=args.k)
            if args.json:
                print(json.dumps([asdict(r) for r in rows], ensure_ascii=False, indent=2))
                return
            if not rows:
                print("(no matches)"); return
            print("#  Line   Source                               Key")
            for i, r in enumerate(rows, 1):
                src = (r.path[:34] + "..") if len(r.path) > 36 else r.path
                print(f"{i:<2} {r.line_no:<6} {src:<36} {r.key}")

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print("Type a prefix (empty line to exit).")
            while True:
                try:
                    q = input("> ")
                except (EOFError, KeyboardInterrupt):
                    print(); break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    sys.exit(main())
