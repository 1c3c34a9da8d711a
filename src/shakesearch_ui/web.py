from __future__ import annotations
import argparse
import json
import logging

from flask import Flask, Response, request

from shakesearch import CorpusLoadError, Engine, SearchTimeout
from shakesearch.config import DEFAULT_CORPUS, DEFAULT_HOST, DEFAULT_PORT

log = logging.getLogger(__name__)


def _plain(body: str, status: int) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def create_app(engine: Engine) -> Flask:
    """Flask app bound to an already-built engine."""
    app = Flask(__name__)
    app.config["ENGINE"] = engine

    # ---------- API ----------
    @app.get("/search")
    def api_search():
        q = request.args.get("q", "", type=str)
        if not q:
            return _plain("missing search query in URL params", 400)
        try:
            result = engine.search(q)
        except SearchTimeout:
            return _plain("search timed out", 503)
        try:
            body = json.dumps(result.to_json(), ensure_ascii=False)
        except (TypeError, ValueError):
            log.exception("Failed to encode results for %r", q)
            return _plain("encoding failure", 500)
        return Response(body, mimetype="application/json")

    @app.get("/health")
    def health():
        idx = engine.index
        return {"ok": idx is not None, "words": len(idx) if idx is not None else 0}

    # ---------- UI ----------
    @app.get("/")
    def home():
        return Response(_HTML, mimetype="text/html")

    return app


# A tiny page: inline CSS + JS, no external deps.
_HTML = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>ShakeSearch</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px; }
form{ display:flex; gap:12px; }
input{
  flex:1; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
input:focus{ border-color:var(--accent) }
button{
  padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
.meta{ color:var(--muted); font-size:13px; margin-top:8px; }
#results li{ padding:10px 0; border-top:1px solid var(--border); }
b{ color:var(--accent) }
em{ color:var(--accent); font-style:normal }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>ShakeSearch</h1>
      <form id="form">
        <input id="query" name="query" type="text" placeholder="Search the complete works…" autocomplete="off" autofocus />
        <button type="submit">Search</button>
      </form>
      <div class="meta"><span id="search-correction"></span></div>
      <div class="meta"><span id="time-taken"></span></div>
      <ul id="results"></ul>
    </div>
  </div>

<script>
const Controller = {
  search: async (ev) => {
    ev.preventDefault();
    const query = document.getElementById("query").value;
    const resp = await fetch(`/search?q=${encodeURIComponent(query)}`);
    if(!resp.ok){
      document.getElementById("time-taken").textContent = `Error: ${await resp.text()}`;
      return;
    }
    const data = await resp.json();
    const results = data.results || [];
    Controller.updateTable(results);
    Controller.showTimeTaken(data.time, results.length);
    Controller.showSearchCorrection(data.replaced || []);
  },

  updateTable: (results) => {
    document.getElementById("results").innerHTML =
      results.map((r) => `<li>${r}</li>`).join("");
  },

  showTimeTaken: (timeTaken, numResults) => {
    document.getElementById("time-taken").textContent =
      `Found ${numResults} results in ${timeTaken}`;
  },

  showSearchCorrection: (replaced) => {
    const span = document.getElementById("search-correction");
    let query = document.getElementById("query").value
      .replace(/&/g, "&amp;").replace(/</g, "&lt;").replace(/>/g, "&gt;");
    if (replaced.length === 0) { span.innerHTML = ""; return; }
    for (let i = 0; i < replaced.length; i += 2) {
      query = query.replace(new RegExp(replaced[i].replace(/[.*+?^${}()|[\]\\]/g, "\\$&"), "gi"),
                            `<em>${replaced[i + 1]}</em>`);
    }
    span.innerHTML = "Searching for " + query;
  },
};

document.getElementById("form").addEventListener("submit", Controller.search);
</script>
</body>
</html>
"""


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Serve ShakeSearch over HTTP")
    ap.add_argument("--corpus", default=DEFAULT_CORPUS, help="Text file to index")
    ap.add_argument("--host", default=DEFAULT_HOST)
    ap.add_argument("--port", type=int, default=DEFAULT_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    engine = Engine()
    try:
        engine.build(args.corpus, verbose=args.verbose)
    except CorpusLoadError as e:
        log.critical("%s", e)
        return 1

    app = create_app(engine)
    print(f"Listening on port {args.port}...")
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose, threaded=True)
    finally:
        engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
