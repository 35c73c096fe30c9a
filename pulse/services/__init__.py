"""Services package - collaborator interfaces, stores, cache and survey service."""
from .stores import (
    AlertStore,
    IdentityProvider,
    QuestionCatalogProvider,
    ScopeResolver,
    ScoreStore,
    SurveyStore,
)
from .locks import KeyedLock
from .memory_store import (
    InMemoryAlertStore,
    InMemoryQuestionCatalog,
    InMemoryScoreStore,
    InMemorySurveyStore,
    InMemoryUserDirectory,
)
from .snowflake import SnowflakeService, get_snowflake_service
from .snowflake_stores import (
    SnowflakeAlertStore,
    SnowflakeQuestionCatalog,
    SnowflakeScoreStore,
    SnowflakeSurveyStore,
    SnowflakeUserDirectory,
)
from .redis_cache import RedisCache, CacheKeys, CachedQuestionCatalog, get_redis_cache
from .survey_service import SurveyService

__all__ = [
    "AlertStore",
    "IdentityProvider",
    "QuestionCatalogProvider",
    "ScopeResolver",
    "ScoreStore",
    "SurveyStore",
    "KeyedLock",
    "InMemoryAlertStore",
    "InMemoryQuestionCatalog",
    "InMemoryScoreStore",
    "InMemorySurveyStore",
    "InMemoryUserDirectory",
    "SnowflakeService",
    "get_snowflake_service",
    "SnowflakeAlertStore",
    "SnowflakeQuestionCatalog",
    "SnowflakeScoreStore",
    "SnowflakeSurveyStore",
    "SnowflakeUserDirectory",
    "RedisCache",
    "CacheKeys",
    "CachedQuestionCatalog",
    "get_redis_cache",
    "SurveyService",
]
