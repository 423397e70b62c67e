from __future__ import annotations

from redis import ConnectionPool, Redis


class StreamsClient:
    def __init__(
        self,
        url: str,
        *,
        max_connections: int = 10,
        socket_timeout: float = 5.0,
        socket_connect_timeout: float = 5.0,
        retry_on_timeout: bool = True,
    ) -> None:
        pool = ConnectionPool.from_url(
            url,
            max_connections=max_connections,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_connect_timeout,
            retry_on_timeout=retry_on_timeout,
            decode_responses=True,
        )
        self._redis = Redis(connection_pool=pool)

    @property
    def redis(self) -> Redis:
        return self._redis

    def close(self) -> None:
        self._redis.close()
