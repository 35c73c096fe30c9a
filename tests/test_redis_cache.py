"""Tests for the Redis cache and the cached question catalog (fakeredis)."""
import asyncio
from unittest.mock import MagicMock

import redis

from pulse.models import Question, QuestionCatalog
from pulse.services import CacheKeys, CachedQuestionCatalog, RedisCache


class TestRedisCache:
    """Tests for RedisCache."""

    def test_health_check(self, redis_cache):
        healthy, error = asyncio.run(redis_cache.health_check())
        assert healthy is True
        assert error is None

    def test_set_get_delete(self, redis_cache):
        catalog = QuestionCatalog(questions=[Question(id="q1", weight=1.5)])

        assert redis_cache.set("k", catalog, ttl_seconds=60) is True
        assert redis_cache.get("k", QuestionCatalog) == catalog
        assert redis_cache.client.ttl("k") <= 60
        assert redis_cache.delete("k") is True
        assert redis_cache.get("k", QuestionCatalog) is None

    def test_errors_degrade_to_miss(self):
        client = MagicMock()
        client.get.side_effect = redis.ConnectionError("down")
        client.setex.side_effect = redis.ConnectionError("down")
        cache = RedisCache(host="localhost", port=6379, client=client)

        assert cache.get("k", QuestionCatalog) is None
        assert cache.set("k", QuestionCatalog(questions=[]), 60) is False


class TestCachedQuestionCatalog:
    """Tests for the read-through question cache."""

    def test_reads_through_once(self, redis_cache, two_questions):
        provider = MagicMock()
        provider.get_questions.return_value = two_questions
        catalog = CachedQuestionCatalog(provider, redis_cache, ttl_seconds=3600)

        assert catalog.get_questions() == two_questions
        assert catalog.get_questions() == two_questions
        provider.get_questions.assert_called_once()
        assert redis_cache.client.exists(CacheKeys.QUESTIONS)

    def test_invalidate(self, redis_cache, two_questions):
        provider = MagicMock()
        provider.get_questions.return_value = two_questions
        catalog = CachedQuestionCatalog(provider, redis_cache, ttl_seconds=3600)

        catalog.get_questions()
        assert catalog.invalidate() is True
        catalog.get_questions()
        assert provider.get_questions.call_count == 2
