"""FastAPI app: fuzzy and prefix suggestions from the in-memory trie, Prometheus metrics."""

import os
import threading
import time
from contextlib import asynccontextmanager

import redis
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import RedirectResponse
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from pydantic import BaseModel, Field
from starlette.responses import Response

from typeahead.cache import SuggestionCache
from typeahead.config import load_config
from typeahead.engine import AutocompleteEngine
from typeahead.ranking import suffix_difference

# --- Prometheus metrics ---
REQUEST_COUNT = Counter(
    "typeahead_requests_total",
    "Total suggestion requests",
    ["endpoint", "cache_hit"],
)
REQUEST_LATENCY = Histogram(
    "typeahead_request_duration_seconds",
    "Suggestion request latency",
    ["endpoint"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)
SUGGESTIONS_RETURNED = Histogram(
    "typeahead_suggestions_returned",
    "Number of suggestions returned",
    buckets=(0, 1, 5, 10, 20, 50),
)
SELECTIONS = Counter(
    "typeahead_selections_total",
    "Selections reported",
    ["boosted"],
)

_engine: AutocompleteEngine | None = None
_redis: redis.Redis | None = None
_cache: SuggestionCache | None = None
# FastAPI runs plain `def` endpoints in a threadpool; the engine is single-session.
_engine_lock = threading.RLock()


def _get_engine() -> AutocompleteEngine:
    global _engine
    with _engine_lock:
        if _engine is None:
            engine = AutocompleteEngine(load_config(os.getenv("TYPEAHEAD_CONFIG")))
            engine.start()
            _engine = engine
        return _engine


def _cache_enabled() -> bool:
    return os.getenv("CACHE_ENABLED", "false").lower() in ("1", "true", "yes")


def _get_redis() -> redis.Redis:
    global _redis
    if _redis is None:
        host = os.getenv("REDIS_HOST", "localhost")
        port = int(os.getenv("REDIS_PORT", "6379"))
        db = int(os.getenv("REDIS_DB", "0"))
        _redis = redis.Redis(host=host, port=port, db=db, decode_responses=True)
    return _redis


def _get_cache() -> SuggestionCache | None:
    global _cache
    if _cache is None and _cache_enabled():
        prefix = os.getenv("REDIS_CACHE_PREFIX", "typeahead:cache")
        ttl = int(os.getenv("CACHE_TTL_SECONDS", "3600"))
        _cache = SuggestionCache(_get_redis(), key_prefix=prefix, ttl_seconds=ttl)
    return _cache


def _invalidate() -> None:
    cache = _get_cache()
    if cache is not None:
        cache.clear()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    with _engine_lock:
        if _engine is not None:
            _engine.stop()


app = FastAPI(
    title="Typeahead API",
    description="Prefix and typo-tolerant suggestions from an in-memory trie",
    version="0.1.0",
    lifespan=lifespan,
)


class SelectionRequest(BaseModel):
    word: str = Field(..., min_length=1)


class WordRequest(BaseModel):
    word: str = Field(..., min_length=1)
    frequency: int = Field(1, ge=0)


@app.get("/", include_in_schema=False)
def root() -> RedirectResponse:
    return RedirectResponse(url="/docs")


@app.get("/health")
def health() -> dict:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.get("/ready")
def ready() -> dict:
    """Readiness: dictionary loaded and Redis reachable when caching is on."""
    if _cache_enabled():
        try:
            _get_redis().ping()
        except redis.RedisError as e:
            raise HTTPException(status_code=503, detail=f"Redis: {e}")
    with _engine_lock:
        words = len(_get_engine().trie)
    return {"status": "ready", "words": words}


@app.get("/metrics")
def metrics() -> Response:
    """Prometheus scrape endpoint."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.get("/suggest")
def suggest(
    q: str = Query(..., min_length=1, description="Typed word"),
    limit: int = Query(5, ge=1, le=50),
    max_edits: int | None = Query(None, ge=0, le=5),
) -> dict:
    """Fuzzy matches that are also top prefix matches, best first."""
    start = time.perf_counter()
    engine = _get_engine()
    edits = engine.config.max_edits if max_edits is None else max_edits
    cache = _get_cache()
    cached = cache.get("suggest", q, limit=limit, max_edits=edits) if cache else None
    if cached is not None:
        REQUEST_COUNT.labels(endpoint="suggest", cache_hit="true").inc()
        SUGGESTIONS_RETURNED.observe(len(cached))
        REQUEST_LATENCY.labels(endpoint="suggest").observe(time.perf_counter() - start)
        return {"query": q, "suggestions": cached, "cached": True}

    REQUEST_COUNT.labels(endpoint="suggest", cache_hit="false").inc()
    with _engine_lock:
        matches = [m.to_dict() for m in engine.top_k_fuzzy_matches(q, edits, limit)]
    if cache:
        cache.set("suggest", q, matches, limit=limit, max_edits=edits)
    SUGGESTIONS_RETURNED.observe(len(matches))
    REQUEST_LATENCY.labels(endpoint="suggest").observe(time.perf_counter() - start)
    return {"query": q, "suggestions": matches, "cached": False}


@app.get("/complete")
def complete(
    q: str = Query(..., min_length=1, description="Prefix"),
    limit: int = Query(10, ge=1, le=50),
) -> dict:
    """Most frequent words starting with the prefix."""
    start = time.perf_counter()
    cache = _get_cache()
    cached = cache.get("complete", q, limit=limit) if cache else None
    if cached is not None:
        REQUEST_COUNT.labels(endpoint="complete", cache_hit="true").inc()
        SUGGESTIONS_RETURNED.observe(len(cached))
        REQUEST_LATENCY.labels(endpoint="complete").observe(time.perf_counter() - start)
        return {"query": q, "completions": cached, "cached": True}

    REQUEST_COUNT.labels(endpoint="complete", cache_hit="false").inc()
    with _engine_lock:
        words = _get_engine().top_k_with_prefix(q, limit)
    if cache:
        cache.set("complete", q, words, limit=limit)
    SUGGESTIONS_RETURNED.observe(len(words))
    REQUEST_LATENCY.labels(endpoint="complete").observe(time.perf_counter() - start)
    return {"query": q, "completions": words, "cached": False}


@app.get("/best")
def best(q: str = Query(..., min_length=1, description="Typed word")) -> dict:
    """Single best suggestion and the suffix to append to the typed word."""
    start = time.perf_counter()
    REQUEST_COUNT.labels(endpoint="best", cache_hit="false").inc()
    with _engine_lock:
        word = _get_engine().suggest(q)
    REQUEST_LATENCY.labels(endpoint="best").observe(time.perf_counter() - start)
    return {
        "query": q,
        "suggestion": word,
        "suffix": suffix_difference(q, word) if word else "",
    }


@app.post("/select")
def select(req: SelectionRequest) -> dict:
    """Report that the user picked a word; known words gain frequency."""
    with _engine_lock:
        boosted = _get_engine().log_selection(req.word)
    SELECTIONS.labels(boosted=str(boosted).lower()).inc()
    if boosted:
        _invalidate()
    return {"word": req.word, "boosted": boosted}


@app.post("/words")
def add_word(req: WordRequest) -> dict:
    """Insert a word, overwriting its frequency if present."""
    with _engine_lock:
        engine = _get_engine()
        engine.insert(req.word, req.frequency)
        frequency = engine.trie.frequency(req.word)
    _invalidate()
    return {"word": req.word, "frequency": frequency}


@app.post("/save")
def save() -> dict:
    with _engine_lock:
        engine = _get_engine()
        saved = engine.stop()
    if not saved:
        raise HTTPException(status_code=500, detail="Failed to save dictionary")
    return {"status": "saved", "path": engine.config.dictionary_path}
