# rocketcart/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def redis_db_url(url: str, db: int) -> str:
    """Ten sam serwer redis, inna baza (redis://host:6379/0 -> redis://host:6379/<db>)."""
    base, _, last = url.rstrip("/").rpartition("/")
    if last.isdigit() and not base.endswith(":/"):
        return f"{base}/{db}"
    return f"{url.rstrip('/')}/{db}"


STOCK_SERVICE_URL = os.getenv("STOCK_SERVICE_URL", "http://localhost:3333")
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", 2))
HTTP_RETRY_ATTEMPTS = int(os.getenv("HTTP_RETRY_ATTEMPTS", 3))

CART_STORE_BACKEND = os.getenv("CART_STORE_BACKEND", "sql")
CART_STORAGE_KEY = os.getenv("CART_STORAGE_KEY", "@RocketShoes:cart")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./rocketcart.db")
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
REDIS_RETRY_ATTEMPTS = int(os.getenv("REDIS_RETRY_ATTEMPTS", 3))

CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", redis_db_url(REDIS_URL, 1))
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", redis_db_url(REDIS_URL, 2))
CELERY_TASK_ALWAYS_EAGER = _flag("CELERY_TASK_ALWAYS_EAGER")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
