from __future__ import annotations
import argparse
import logging
from dataclasses import asdict
from flask import Flask, request, jsonify, Response
from prefixmatch.engine import Engine
from prefixmatch.config import TOP_K

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/complete")
def api_complete():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", TOP_K, type=int)
    if not q:
        return jsonify([])
    if _engine is None:
        return jsonify({"error": "engine not initialized"}), 503
    try:
        rows = _engine.complete(q, top_k=k)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify([asdict(r) for r in rows])

@app.get("/api/health")
def api_health():
    keys = _engine.size if _engine is not None else 0
    return jsonify({"ok": _engine is not None, "keys": keys})

# ---------- UI ----------
@app.get("/")
def home():
    # Search box + table, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Prefix Match</title>
<style>
body{margin:0;background:#0b0f14;color:#cfd8e3;font:15px/1.45 system-ui,sans-serif}
.container{max-width:820px;margin:24px auto;padding:0 16px}
input{width:100%;padding:10px 12px;border-radius:10px;border:1px solid #1c2530;
  background:#0b1117;color:inherit;font-size:16px;box-sizing:border-box}
table{width:100%;border-collapse:collapse;margin-top:14px}
td,th{padding:6px 8px;border-top:1px solid #1c2530;text-align:left}
th{color:#8a94a6}
.mono{font-family:ui-monospace,Menlo,Consolas,monospace}
#stats{color:#8a94a6;font-size:13px;margin-top:6px}
</style>
</head>
<body>
  <div class="container">
    <h1>Prefix Match</h1>
    <input id="q" type="text" placeholder="Type a prefix…" autocomplete="off" autofocus />
    <div id="stats">Ready.</div>
    <table>
      <thead><tr><th>#</th><th>Key</th><th>Source</th><th>Line</th></tr></thead>
      <tbody id="out"></tbody>
    </table>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out"), stats = document.querySelector("#stats");
const esc = (s) => String(s).replace(/[&<>"]/g, (c) => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c]));
let t;
async function search(){
  if(!q.value){ out.innerHTML = ""; stats.textContent = "Ready."; return; }
  const resp = await fetch(`/api/complete?q=${encodeURIComponent(q.value)}`);
  if(!resp.ok){ stats.textContent = `Error: HTTP ${resp.status}`; return; }
  const data = await resp.json();
  stats.textContent = `Results: ${data.length}`;
  out.innerHTML = data.map((r,i)=>
    `<tr><td>${i+1}</td><td class="mono">${esc(r.key)}</td><td>${esc(r.path)}</td><td>${r.line_no}</td></tr>`
  ).join("");
}
q.addEventListener("input", ()=>{ clearTimeout(t); t = setTimeout(search, 120); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--roots", nargs="+", required=True)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    _engine.build(roots=args.roots, verbose=args.verbose)
    log.info("Serving %d keys on %s:%d", _engine.size, args.host, args.port)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
