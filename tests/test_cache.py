import json
from unittest.mock import MagicMock

import redis

from typeahead.cache import SuggestionCache


def test_cache_get_set():
    client = MagicMock()
    client.get.return_value = None
    cache = SuggestionCache(client, key_prefix="test:cache", ttl_seconds=60)
    assert cache.get("suggest", "wea", limit=5) is None

    cache.set("suggest", "wea", [{"word": "weather"}], limit=5)
    client.setex.assert_called_once_with(
        "test:cache:suggest:limit=5:wea", 60, json.dumps([{"word": "weather"}])
    )

    client.get.return_value = json.dumps(["weather"])
    assert cache.get("suggest", "wea", limit=5) == ["weather"]
    client.get.assert_called_with("test:cache:suggest:limit=5:wea")


def test_key_params_are_sorted():
    cache = SuggestionCache(MagicMock(), key_prefix="c:")
    assert cache._key("suggest", "ca", max_edits=1, limit=3) == "c:suggest:limit=3,max_edits=1:ca"


def test_bad_json_is_a_miss():
    client = MagicMock()
    client.get.return_value = "{not json"
    assert SuggestionCache(client).get("complete", "ca") is None


def test_redis_errors_degrade_to_miss():
    client = MagicMock()
    client.get.side_effect = redis.ConnectionError("down")
    client.setex.side_effect = redis.ConnectionError("down")
    cache = SuggestionCache(client)
    assert cache.get("complete", "ca") is None
    cache.set("complete", "ca", ["cat"])


def test_clear_removes_namespace():
    client = MagicMock()
    client.scan_iter.return_value = iter(["t:a", "t:b"])
    client.delete.return_value = 1
    assert SuggestionCache(client, key_prefix="t").clear() == 2
    client.scan_iter.assert_called_once_with(match="t:*")
