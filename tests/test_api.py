"""
Tests for the Flask JSON API.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

import main
from engine import Recorder


def recorded(data):
    rec = Recorder()
    rec.start("bubble-sort", data)
    rec.run_to_completion()
    return rec


# ============= Catalog =============


class TestCatalogEndpoints:

    def test_list_all(self, client):
        response = client.get("/api/algorithms")
        assert response.status_code == 200
        slugs = [a["slug"] for a in response.get_json()["algorithms"]]
        assert "quick-sort" in slugs and "binary-search" in slugs

    def test_list_by_topic(self, client):
        data = client.get("/api/algorithms?topic=arrays").get_json()
        assert [a["slug"] for a in data["algorithms"]] == ["find-maximum", "reverse-array"]

    def test_one_card(self, client):
        data = client.get("/api/algorithms/merge-sort").get_json()
        assert data["title"] == "Merge Sort"
        assert data["complexity"]["stable"] is True
        assert len(data["codeLineMap"]["python"]) == len(data["pseudocode"])

    def test_unknown_card(self, client):
        response = client.get("/api/algorithms/bogo-sort")
        assert response.status_code == 404
        assert "error" in response.get_json()


# ============= Datasets =============


class TestDatasetEndpoints:

    def test_generate(self, client):
        payload = {"distribution": "sorted_inc", "n": 12, "seed": 4}
        first = client.post("/api/dataset/generate", json=payload).get_json()["array"]
        second = client.post("/api/dataset/generate", json=payload).get_json()["array"]
        assert len(first) == 12
        assert first == sorted(first) == second

    def test_generate_unknown_distribution(self, client):
        response = client.post("/api/dataset/generate", json={"distribution": "zipf"})
        assert response.status_code == 400

    def test_generate_too_large(self, client):
        n = main.app.config["MAX_ARRAY"] + 1
        response = client.post("/api/dataset/generate", json={"n": n})
        assert response.status_code == 400

    @pytest.mark.parametrize("extra", [
        {"distribution": "few", "uniques": 30_000_000},
        {"distribution": "few", "uniques": 1},
        {"distribution": "few", "uniques": "many"},
        {"distribution": "sawtooth", "period": 65},
        {"distribution": "sawtooth", "period": [4]},
    ])
    def test_generate_rejects_out_of_range_knobs(self, client, extra):
        response = client.post("/api/dataset/generate", json={"n": 4, **extra})
        assert response.status_code == 400
        assert "between" in response.get_json()["error"]

    def test_generate_at_knob_limits(self, client):
        few = client.post(
            "/api/dataset/generate", json={"distribution": "few", "n": 8, "uniques": 20},
        )
        saw = client.post(
            "/api/dataset/generate", json={"distribution": "sawtooth", "n": 8, "period": 64},
        )
        assert few.status_code == 200 and saw.status_code == 200

    def test_parse(self, client):
        response = client.post("/api/dataset/parse", json={"text": "5, 3, x, 8"})
        assert response.get_json() == {"array": [5, 3, 8]}


# ============= Run & step =============


class TestRunEndpoints:

    def test_run_returns_first_frame(self, client):
        response = client.post("/api/run", json={"slug": "bubble-sort", "array": [2, 1]})
        assert response.status_code == 200
        data = response.get_json()
        assert data["current_step"] == 0
        assert data["total_steps"] == 4
        assert data["frame"]["explain"] == "Starting Bubble Sort"
        assert data["frame"]["pseudocodeText"] is None
        assert data["metrics"]["swaps"] == 1

    def test_step_through_run(self, client):
        client.post("/api/run", json={"slug": "bubble-sort", "array": [2, 1]})

        frame = client.post("/api/step/next").get_json()["frame"]
        assert frame["highlights"] == {"compared": [0, 1]}
        assert frame["pcLine"] == 3
        assert frame["pseudocodeText"].strip() == "if arr[j] > arr[j+1]"
        assert frame["codeLines"]["python"] == 5

        frame = client.post("/api/step/next").get_json()["frame"]
        assert frame["array"] == [1, 2]

        prev = client.post("/api/step/prev").get_json()
        assert prev["current_step"] == 1

        last = client.post("/api/step/goto", json={"index": 3}).get_json()
        assert last["frame"]["isFinal"] is True
        assert client.post("/api/step/next").status_code == 400

    def test_prev_at_start(self, client):
        client.post("/api/run", json={"slug": "merge-sort", "array": [3, 1]})
        assert client.post("/api/step/prev").status_code == 400

    def test_goto_out_of_range(self, client):
        client.post("/api/run", json={"slug": "merge-sort", "array": [3, 1]})
        assert client.post("/api/step/goto", json={"index": 99}).status_code == 400
        assert client.post("/api/step/goto", json={"index": "1"}).status_code == 400

    def test_step_without_run(self, client):
        assert client.post("/api/step/goto", json={"index": 0}).status_code == 400

    def test_all_frames(self, client):
        client.post("/api/run", json={"slug": "reverse-array", "array": [1, 2, 3]})
        frames = client.get("/api/frames").get_json()["frames"]
        assert frames[-1]["array"] == [3, 2, 1]
        assert frames[-1]["counters"]["swaps"] == 1

    def test_search_run(self, client):
        response = client.post(
            "/api/run", json={"slug": "binary-search", "array": [1, 3, 5], "target": 5},
        )
        assert response.status_code == 200
        frames = client.get("/api/frames").get_json()["frames"]
        assert "Found target 5 at index 2!" in [f["explain"] for f in frames]

    def test_search_without_target(self, client):
        response = client.post("/api/run", json={"slug": "linear-search", "array": [1, 3]})
        assert response.status_code == 400

    def test_invalid_array(self, client):
        response = client.post("/api/run", json={"slug": "quick-sort", "array": [1, "two"]})
        assert response.status_code == 400
        assert response.get_json()["error"].startswith("Unable to visualize this input")

    def test_unknown_slug(self, client):
        response = client.post("/api/run", json={"slug": "bogo-sort", "array": [1]})
        assert response.status_code == 404

    def test_missing_slug(self, client):
        assert client.post("/api/run", json={"array": [1]}).status_code == 400

    def test_array_too_large(self, client):
        n = main.app.config["MAX_ARRAY"] + 1
        response = client.post("/api/run", json={"slug": "bubble-sort", "array": [1] * n})
        assert response.status_code == 400


# ============= State & config =============


class TestStateEndpoints:

    def test_state_after_run(self, client):
        client.post("/api/run", json={"slug": "insertion-sort", "array": [2, 1]})
        client.post("/api/step/next")
        state = client.get("/api/state").get_json()
        assert state["selected_algo"] == "insertion-sort"
        assert state["current_step"] == 1
        assert state["is_playing"] is False

    def test_toggle_play(self, client):
        assert client.post("/api/step/play").get_json() == {"is_playing": True}
        assert client.post("/api/step/play").get_json() == {"is_playing": False}

    def test_speed(self, client):
        data = client.post("/api/config/speed", json={"speed": "fast"}).get_json()
        assert data == {"speed": "fast", "interval": 0.15}
        assert client.get("/api/state").get_json()["speed"] == "fast"

    def test_speed_must_be_a_string(self, client):
        for speed in (["fast"], {"fast": 1}, 3):
            response = client.post("/api/config/speed", json={"speed": speed})
            assert response.status_code == 400

    def test_unknown_speed(self, client):
        assert client.post("/api/config/speed", json={"speed": "warp"}).status_code == 400


# ============= Run store =============


class TestRunStore:
    """Frame-budgeted, thread-safe store behind /api/run."""

    def test_evicts_oldest_over_frame_budget(self):
        store = main.RunStore(max_frames=10)
        ids = [store.put(recorded([2, 1])) for _ in range(3)]   # 4 frames each

        assert store.get(ids[0]) is None
        assert store.get(ids[1]) is not None
        assert store.get(ids[2]) is not None
        assert store.total_frames == 8

    def test_newest_run_kept_even_over_budget(self):
        store = main.RunStore(max_frames=3)
        old = store.put(recorded([1]))
        new = store.put(recorded([3, 2, 1]))

        assert store.get(old) is None
        assert store.get(new) is not None
        assert len(store) == 1

    def test_clear_resets_budget(self):
        store = main.RunStore(max_frames=100)
        store.put(recorded([2, 1]))
        store.clear()
        assert store.total_frames == 0
        assert len(store) == 0

    def test_concurrent_puts(self):
        store = main.RunStore(max_frames=40)
        rec = recorded([2, 1])

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda _: store.put(rec), range(200)))

        assert len(store) == 10
        assert store.total_frames == 40

    def test_app_store_uses_configured_budget(self):
        assert main.RUNS.max_frames == main.config.max_kept_frames
