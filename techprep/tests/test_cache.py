"""Tests for the Redis cache helpers that are not mocked out"""
import asyncio

from techprep.app.utils import cache


class FakeRedis:
    def __init__(self, keys):
        self.keys = set(keys)

    async def scan_iter(self, match=None):
        prefix = match.rstrip("*")
        for key in sorted(self.keys):
            if key.startswith(prefix):
                yield key

    async def delete(self, key):
        self.keys.discard(key)


def test_question_list_key():
    assert cache.question_list_key(None, None) == "techprep:questions:*:*"
    assert cache.question_list_key("React", "hard") == "techprep:questions:React:hard"
    assert cache.question_list_key("react", None) != cache.question_list_key("React", None)


def test_delete_prefix_without_client_is_noop(monkeypatch):
    monkeypatch.setattr(cache, "_client", None)
    assert asyncio.run(cache.delete_prefix(cache.QUESTION_LIST_PREFIX)) is None


def test_delete_prefix_removes_matching_keys(monkeypatch):
    fake = FakeRedis(["techprep:questions:*:*", "techprep:questions:react:*", "other:key"])
    monkeypatch.setattr(cache, "_client", fake)
    asyncio.run(cache.delete_prefix(cache.QUESTION_LIST_PREFIX))
    assert fake.keys == {"other:key"}
