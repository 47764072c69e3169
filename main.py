"""
main.py — Algorithm Tracing Flask API
=====================================
JSON API over the four sessions (graph, tree, queue, code).  Rendering
is the client's job: every response carries plain-dict frames.

Routes:
  GET  /                                   – route index
  GET  /api/algorithms                     – registry cards per family
  GET  /api/<family>/state                 – structure, playback, current frame
  POST /api/<family>/edit/<op>             – structure edit (discards the trace)
  POST /api/<family>/run/<algorithm>       – record a trace and load it
  POST /api/<family>/playback/<op>         – play / pause / step / seek / speed / reset / tick
  POST /api/code/run                       – interpret a program

State management:
  Sessions live in a process-local dict keyed by a random token stored
  in the Flask session cookie.  Traces never leave the process except
  as JSON responses.

Errors:
  TraceInputError / StructureError → 400  {"error": message}
  UnknownAlgorithmError / unknown family → 404  {"error": message}
"""

import logging
import secrets
from typing import Dict

from flask import Flask, request, jsonify, session
from werkzeug.exceptions import NotFound

from config import FlaskConfig, configure_logging
from errors import TraceInputError, StructureError, UnknownAlgorithmError
from algorithms import list_algorithms
from tree_algorithms import TREE_REGISTRY
from queue_algorithms import QUEUE_REGISTRY
from engine import Session, GraphSession, TreeSession, QueueSession, CodeSession

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.from_object(FlaskConfig)
app.json.sort_keys = False

FAMILIES = {
    "graph": GraphSession,
    "tree":  TreeSession,
    "queue": QueueSession,
    "code":  CodeSession,
}

# sid -> {family: Session}
SESSIONS: Dict[str, Dict[str, Session]] = {}


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_sessions() -> Dict[str, Session]:
    sid = session.get("sid")
    if sid is None or sid not in SESSIONS:
        sid = secrets.token_hex(16)
        session["sid"] = sid
        SESSIONS[sid] = {name: cls() for name, cls in FAMILIES.items()}
        logger.info("New session %s", sid[:8])
    return SESSIONS[sid]


def get_session(family: str) -> Session:
    if family not in FAMILIES:
        raise NotFound(f"Unknown family: {family}")
    return get_sessions()[family]


def payload() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.errorhandler(TraceInputError)
@app.errorhandler(StructureError)
def handle_bad_request(exc):
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(UnknownAlgorithmError)
def handle_unknown_algorithm(exc):
    return jsonify({"error": str(exc)}), 404


@app.errorhandler(NotFound)
def handle_not_found(exc):
    return jsonify({"error": exc.description}), 404


# ---------------------------------------------------------------------------
# Index & registry
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    return jsonify({
        "name":     "Algorithm Tracer",
        "families": list(FAMILIES),
        "routes":   sorted(str(rule) for rule in app.url_map.iter_rules() if str(rule).startswith("/api")),
    })


@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({
        "graph": [info.to_dict() for info in list_algorithms()],
        "tree":  [info.to_dict() for info in TREE_REGISTRY.values()],
        "queue": [info.to_dict() for info in QUEUE_REGISTRY.values()],
    })


# ---------------------------------------------------------------------------
# API: State & Editing
# ---------------------------------------------------------------------------
@app.route("/api/<family>/state")
def api_state(family):
    return jsonify(get_session(family).state())


@app.route("/api/<family>/edit/<op>", methods=["POST"])
def api_edit(family, op):
    sess = get_session(family)
    sess.edit(op, payload())
    return jsonify(sess.state())


# ---------------------------------------------------------------------------
# API: Run
# ---------------------------------------------------------------------------
@app.route("/api/<family>/run/<algorithm>", methods=["POST"])
def api_run(family, algorithm):
    sess = get_session(family)
    if isinstance(sess, CodeSession):
        raise UnknownAlgorithmError(family, algorithm)
    trace = sess.run(algorithm, payload())
    return jsonify({"trace": trace.to_dict(), "state": sess.state()})


@app.route("/api/code/run", methods=["POST"])
def api_code_run():
    sess   = get_sessions()["code"]
    source = payload().get("source")
    trace  = sess.run(None if source is None else str(source))
    return jsonify({"trace": trace.to_dict(), "state": sess.state()})


# ---------------------------------------------------------------------------
# API: Playback
# ---------------------------------------------------------------------------
@app.route("/api/<family>/playback/<op>", methods=["POST"])
def api_playback(family, op):
    sess = get_session(family)
    pb   = sess.playback
    data = payload()

    if op == "play":
        pb.play()
    elif op == "pause":
        pb.pause()
    elif op == "reset":
        pb.reset()
    elif op == "tick":
        pb.tick()
    elif op == "step":
        try:
            delta = int(data.get("delta", 1))
        except (TypeError, ValueError):
            raise TraceInputError(f"Invalid delta: {data.get('delta')!r}") from None
        pb.step(delta)
    elif op == "seek":
        try:
            index = int(data.get("index"))
        except (TypeError, ValueError):
            raise TraceInputError(f"Invalid frame index: {data.get('index')!r}") from None
        if not pb.seek(index):
            raise TraceInputError(f"Frame index {index} is out of range.")
    elif op == "speed":
        pb.set_speed(data.get("speed"))
    else:
        raise NotFound(f"Unknown playback operation: {op}")

    return jsonify(sess.state())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    configure_logging()
    print("=" * 60)
    print("  Algorithm Tracer API")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000/api/algorithms")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)
