from __future__ import annotations
import argparse, json, logging
from markupsafe import Markup
from shakesearch import CorpusLoadError, Engine, SearchTimeout, format_duration
from shakesearch.config import DEFAULT_CORPUS

log = logging.getLogger("shakesearch_ui")

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="ShakeSearch CLI (Engine-backed)")
    p.add_argument("--corpus", default=DEFAULT_CORPUS, help="Text file to index")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--json", action="store_true", help="Emit the JSON wire shape")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    eng = Engine()
    try:
        try:
            eng.build(args.corpus, verbose=args.verbose)
        except CorpusLoadError as e:
            log.critical("%s", e)
            return 1

        def run_query(q: str):
            try:
                res = eng.search(q)
            except SearchTimeout as e:
                print(f"(timed out: {e})"); return
            if args.json:
                print(json.dumps(res.to_json(), ensure_ascii=False, indent=2))
                return
            for original, corrected in res.replaced:
                print(f"searching for {corrected!r} instead of {original!r}")
            if not res.snippets:
                print(f"(no matches in {format_duration(res.elapsed)})"); return
            print(f"{len(res.snippets)} results in {format_duration(res.elapsed)}")
            for i, s in enumerate(res.snippets, 1):
                # snippets are HTML; print them as plain text
                print(f"{i:<3} {Markup(s).striptags()}")

        if args.q:
            run_query(args.q)

        if args.repl:
            print("Type a query (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
