import os

from ..base import DEBUG

# --------------------------------------------------------------------------------------
# Caché (Redis)
# --------------------------------------------------------------------------------------
REDIS_URL = os.getenv("REDIS_URL", "redis://127.0.0.1:6379/1")
if not DEBUG:
    if not REDIS_URL.startswith("rediss://"):
        raise RuntimeError(
            "REDIS_URL debe usar rediss:// (TLS) en producción. "
            f"URL actual: {REDIS_URL.split('@')[-1] if '@' in REDIS_URL else REDIS_URL}"
        )

CACHES = {
    "default": {
        "BACKEND": "django_redis.cache.RedisCache",
        "LOCATION": REDIS_URL,
        "OPTIONS": {
            "CLIENT_CLASS": "django_redis.client.DefaultClient",
            "SOCKET_CONNECT_TIMEOUT": 5,
            "SOCKET_TIMEOUT": 5,
            # La caché solo acelera lecturas de configuración; si Redis cae se lee de DB.
            "IGNORE_EXCEPTIONS": True,
        },
        "KEY_PREFIX": "stockwatch",
    }
}
