# storefront/repos/redis_kv_repo.py
import redis

from storefront.utils.retry import redis_retry
from storefront.utils.settings import REDIS_URL
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class RedisKeyValueRepo:
    """Ten sam kontrakt co KeyValueRepo (get/put), tylko na Redisie."""

    def __init__(self, url: str | None = None, prefix: str = "storefront:", client=None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    @redis_retry()
    def get(self, key: str) -> str | None:
        return self.redis.get(self._key(key))

    @redis_retry()
    def put(self, key: str, raw: str) -> None:
        logger.debug(f"SET {self._key(key)} ({len(raw)} bytes)")
        self.redis.set(self._key(key), raw)
