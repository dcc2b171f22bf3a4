"""
main.py — Algorithm Step Visualizer Flask App
==============================================
JSON API that powers the visualizer front end.

Routes:
  GET  /api/algorithms             – catalog (optionally ?topic=sorting)
  GET  /api/algorithms/<slug>      – one metadata card
  POST /api/dataset/generate       – build an input array
  POST /api/dataset/parse          – parse custom "5, 3, 8" input
  POST /api/run                    – run a driver, keep its frames
  GET  /api/frames                 – every frame of the current run
  POST /api/step/next              – advance one frame
  POST /api/step/prev              – rewind one frame
  POST /api/step/goto              – jump to frame N
  POST /api/step/play              – toggle play/pause
  POST /api/config/speed           – playback speed preset
  GET  /api/state                  – current session state

State management:
  Small per-user state (selected algorithm, current index, speed) lives
  in the Flask session.  Frame lists are too big for a cookie, so they
  are kept in an in-process run store, bounded by total frames kept,
  and the session only holds the run id.
"""

import threading
import uuid
from collections import OrderedDict
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request, session

from algorithms import (
    AlgoMeta,
    Frame,
    InvalidInputError,
    UnknownAlgorithmError,
    get_algorithm,
    list_algorithms,
)
from datasets import make_array, parse_custom_input
from engine import SPEED_PRESETS, Recorder
from shared.config import load_config
from shared.logger import get_logger, setup_logging

config = load_config()
setup_logging(config.log_level)
logger = get_logger(__name__)

app = Flask(__name__)
app.secret_key = config.secret_key
app.config["MAX_ARRAY"] = config.max_array
app.config["DEFAULT_SPEED"] = config.default_speed


# ---------------------------------------------------------------------------
# Run store
# ---------------------------------------------------------------------------
class RunStore:
    """
    In-memory map run_id → Recorder, bounded by the total number of
    frames kept.  Oldest runs are evicted first; the newest run is
    always kept, even alone over budget.
    """

    def __init__(self, max_frames: int):
        self.max_frames = max_frames
        self._runs: "OrderedDict[str, Recorder]" = OrderedDict()
        self._frames = 0
        self._lock = threading.Lock()

    def put(self, recorder: Recorder) -> str:
        run_id = uuid.uuid4().hex
        with self._lock:
            self._runs[run_id] = recorder
            self._frames += len(recorder.frames)
            while self._frames > self.max_frames and len(self._runs) > 1:
                old_id, old = self._runs.popitem(last=False)
                self._frames -= len(old.frames)
                logger.debug("Evicted run %s (%d frames)", old_id, len(old.frames))
        return run_id

    def get(self, run_id: Optional[str]) -> Optional[Recorder]:
        if run_id is None:
            return None
        with self._lock:
            return self._runs.get(run_id)

    @property
    def total_frames(self) -> int:
        return self._frames

    def __len__(self) -> int:
        return len(self._runs)

    def clear(self) -> None:
        with self._lock:
            self._runs.clear()
            self._frames = 0


RUNS = RunStore(max_frames=config.max_kept_frames)


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_state() -> Dict[str, Any]:
    """Return current app state as a dict."""
    return {
        "selected_algo": session.get("selected_algo"),
        "current_step":  session.get("current_step", 0),
        "total_steps":   session.get("total_steps", 0),
        "is_playing":    session.get("is_playing", False),
        "speed":         session.get("speed", app.config["DEFAULT_SPEED"]),
    }


def set_state(**kwargs):
    for k, v in kwargs.items():
        session[k] = v


def current_run() -> Optional[Recorder]:
    return RUNS.get(session.get("run_id"))


def body() -> Dict[str, Any]:
    return request.get_json(silent=True) or {}


def frame_payload(algo: AlgoMeta, frame: Frame) -> Dict[str, Any]:
    """Frame plus the pseudocode / source lines it points at."""
    payload = frame.to_dict()
    if 1 <= frame.pc_line <= len(algo.pseudocode):
        payload["pseudocodeText"] = algo.pseudocode[frame.pc_line - 1]
    else:
        payload["pseudocodeText"] = None
    payload["codeLines"] = {
        lang: algo.code_line_for(lang, frame.pc_line) for lang in algo.code
    }
    return payload


def error(message: str, status: int = 400):
    return jsonify({"error": message}), status


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.errorhandler(InvalidInputError)
def handle_invalid_input(exc: InvalidInputError):
    logger.warning("Rejected input: %s", exc)
    return error(f"Unable to visualize this input: {exc}")


@app.errorhandler(UnknownAlgorithmError)
def handle_unknown_algorithm(exc: UnknownAlgorithmError):
    return error(f"Unknown algorithm: {exc.args[0] if exc.args else ''}", 404)


# ---------------------------------------------------------------------------
# API: Catalog
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    topic = request.args.get("topic")
    algos = list_algorithms(topic)
    return jsonify({
        "algorithms": [
            {"slug": a.slug, "title": a.title, "topic": a.topic, "summary": a.summary}
            for a in algos
        ],
    })


@app.route("/api/algorithms/<slug>")
def api_algorithm(slug: str):
    algo = get_algorithm(slug)
    if algo is None:
        raise UnknownAlgorithmError(slug)
    return jsonify(algo.to_dict())


# ---------------------------------------------------------------------------
# API: Datasets
# ---------------------------------------------------------------------------
@app.route("/api/dataset/generate", methods=["POST"])
def api_dataset_generate():
    data = body()
    n = data.get("n", 16)
    if not isinstance(n, int) or not 0 <= n <= app.config["MAX_ARRAY"]:
        return error(f"n must be an integer between 0 and {app.config['MAX_ARRAY']}")

    try:
        arr = make_array(
            distribution=data.get("distribution", "random"),
            n=n,
            lo=data.get("lo", 5),
            hi=data.get("hi", 99),
            seed=data.get("seed"),
            uniques=data.get("uniques", 5),
            period=data.get("period", 5),
        )
    except (TypeError, ValueError) as e:
        return error(str(e))
    return jsonify({"array": arr})


@app.route("/api/dataset/parse", methods=["POST"])
def api_dataset_parse():
    arr = parse_custom_input(str(body().get("text", "")))
    if len(arr) > app.config["MAX_ARRAY"]:
        return error(f"At most {app.config['MAX_ARRAY']} numbers are supported")
    return jsonify({"array": arr})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data = body()
    slug = data.get("slug") or session.get("selected_algo")
    if not slug:
        return error("Pick an algorithm first")

    algo = get_algorithm(slug)
    if algo is None:
        raise UnknownAlgorithmError(slug)

    array = data.get("array", [])
    if isinstance(array, list) and len(array) > app.config["MAX_ARRAY"]:
        return error(f"At most {app.config['MAX_ARRAY']} elements are supported")

    if algo.input_kind == "search":
        if "target" not in data:
            return error("Unable to visualize this input: a search needs a 'target'")
        driver_input: Any = {"array": array, "target": data["target"]}
    else:
        driver_input = array

    rec = Recorder()
    rec.start(slug, driver_input, seed=data.get("seed"))
    metrics = rec.run_to_completion()

    set_state(
        run_id=RUNS.put(rec),
        selected_algo=slug,
        current_step=0,
        total_steps=len(rec.frames),
        is_playing=False,
    )

    return jsonify({
        "frame":        frame_payload(algo, rec.frames[0]),
        "current_step": 0,
        "total_steps":  len(rec.frames),
        "metrics":      asdict(metrics),
    })


@app.route("/api/frames")
def api_frames():
    rec = current_run()
    if rec is None:
        return error("No run yet")
    return jsonify({"frames": [f.to_dict() for f in rec.frames]})


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
def _show(idx: int):
    rec = current_run()
    if rec is None:
        return error("No run yet")
    frames: List[Frame] = rec.frames
    if not 0 <= idx < len(frames):
        return error("Invalid step index")

    set_state(current_step=idx)
    algo = get_algorithm(session["selected_algo"])
    return jsonify({
        "frame":        frame_payload(algo, frames[idx]),
        "current_step": idx,
        "total_steps":  len(frames),
    })


@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    state = get_state()
    if state["current_step"] >= state["total_steps"] - 1:
        return error("Already at last step")
    return _show(state["current_step"] + 1)


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    state = get_state()
    if state["current_step"] <= 0:
        return error("Already at first step")
    return _show(state["current_step"] - 1)


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    idx = body().get("index", 0)
    if not isinstance(idx, int):
        return error("Invalid step index")
    return _show(idx)


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    state = get_state()
    set_state(is_playing=not state["is_playing"])
    return jsonify({"is_playing": not state["is_playing"]})


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    speed = body().get("speed", "medium")
    if not isinstance(speed, str) or speed not in SPEED_PRESETS:
        return error(f"Unknown speed: {speed}")
    set_state(speed=speed)
    return jsonify({"speed": speed, "interval": SPEED_PRESETS[speed]})


@app.route("/api/state")
def api_state():
    return jsonify(get_state())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logger.info("Algorithm Step Visualizer on http://localhost:%d", config.port)
    app.run(debug=False, port=config.port)
