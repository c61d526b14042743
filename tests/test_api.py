import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest
import yaml
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from typeahead import AutocompleteEngine, EngineConfig
from typeahead.api import app as app_module


@pytest.fixture
def client(tmp_path, monkeypatch):
    engine = AutocompleteEngine(EngineConfig(dictionary_path=str(tmp_path / "dictionary.txt")))
    for word, freq in [("cat", 1), ("cats", 1), ("apple", 10), ("apply", 3)]:
        engine.insert(word, freq)
    monkeypatch.delenv("CACHE_ENABLED", raising=False)
    monkeypatch.setattr(app_module, "_engine", engine)
    monkeypatch.setattr(app_module, "_cache", None)
    return TestClient(app_module.app)


def test_health_and_ready(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/ready").json() == {"status": "ready", "words": 4}


def test_suggest_returns_filtered_fuzzy_matches(client):
    resp = client.get("/suggest", params={"q": "cat", "max_edits": 1})
    assert resp.status_code == 200
    body = resp.json()
    assert body["cached"] is False
    assert [s["word"] for s in body["suggestions"]] == ["cat", "cats"]
    assert body["suggestions"][1]["edit_distance"] == 1


def test_suggest_typo_outside_prefix_is_empty(client):
    body = client.get("/suggest", params={"q": "aplle", "max_edits": 1}).json()
    assert body["suggestions"] == []


def test_complete_and_best(client):
    assert client.get("/complete", params={"q": "ap"}).json()["completions"] == ["apple", "apply"]
    assert client.get("/best", params={"q": "app"}).json() == {
        "query": "app",
        "suggestion": "apple",
        "suffix": "le",
    }
    assert client.get("/best", params={"q": "zzz"}).json()["suggestion"] is None


def test_select_and_insert(client):
    assert client.post("/select", json={"word": "apply"}).json() == {"word": "apply", "boosted": True}
    assert client.post("/select", json={"word": "dog"}).json()["boosted"] is False
    assert client.post("/words", json={"word": "dog", "frequency": 4}).json() == {"word": "dog", "frequency": 4}
    assert client.get("/complete", params={"q": "d"}).json()["completions"] == ["dog"]


def test_validation_errors(client):
    assert client.get("/suggest").status_code == 422
    assert client.post("/words", json={"word": "dog", "frequency": -1}).status_code == 422


def test_save(client, tmp_path):
    assert client.post("/save").json()["status"] == "saved"
    assert (tmp_path / "dictionary.txt").read_text().startswith("apple 10\n")


def test_cached_suggestions_served_and_cleared(client, monkeypatch):
    cache = MagicMock()
    cache.get.return_value = [{"word": "cached"}]
    monkeypatch.setattr(app_module, "_cache", cache)
    body = client.get("/suggest", params={"q": "cat", "limit": 2, "max_edits": 1}).json()
    assert body == {"query": "cat", "suggestions": [{"word": "cached"}], "cached": True}
    cache.get.assert_called_once_with("suggest", "cat", limit=2, max_edits=1)

    client.post("/select", json={"word": "cat"})
    cache.clear.assert_called_once()


def test_metrics_exposed(client):
    client.get("/complete", params={"q": "ca"})
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "typeahead_requests_total" in resp.text


def test_engine_calls_are_serialized(client, monkeypatch):
    engine = app_module._engine
    state = {"active": 0, "peak": 0}
    guard = threading.Lock()
    original = engine.suggest

    def slow_suggest(text):
        with guard:
            state["active"] += 1
            state["peak"] = max(state["peak"], state["active"])
        time.sleep(0.05)
        try:
            return original(text)
        finally:
            with guard:
                state["active"] -= 1

    monkeypatch.setattr(engine, "suggest", slow_suggest)
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda q: app_module.best(q=q), ["app", "cat", "ca", "apple"]))

    assert state["peak"] == 1
    assert results[0]["suggestion"] == "apple"


def test_concurrent_selections_are_not_lost(client):
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda _: app_module.select(app_module.SelectionRequest(word="cat")), range(40)))
    assert app_module._engine.trie.frequency("cat") == 1 + 40 * 5


def test_lazy_engine_is_built_once(tmp_path, monkeypatch):
    config = tmp_path / "engine.yaml"
    config.write_text(yaml.dump({"engine": {"dictionary_path": str(tmp_path / "dictionary.txt")}}))
    monkeypatch.setenv("TYPEAHEAD_CONFIG", str(config))
    monkeypatch.setattr(app_module, "_engine", None)
    with ThreadPoolExecutor(max_workers=4) as pool:
        engines = list(pool.map(lambda _: app_module._get_engine(), range(8)))
    assert all(e is engines[0] for e in engines)


def test_complete_cache_hit_records_metrics(client, monkeypatch):
    cache = MagicMock()
    cache.get.return_value = ["cat"]
    monkeypatch.setattr(app_module, "_cache", cache)
    before = REGISTRY.get_sample_value("typeahead_request_duration_seconds_count", {"endpoint": "complete"}) or 0
    body = client.get("/complete", params={"q": "ca"}).json()
    assert body == {"query": "ca", "completions": ["cat"], "cached": True}
    after = REGISTRY.get_sample_value("typeahead_request_duration_seconds_count", {"endpoint": "complete"})
    assert after == before + 1
