# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./storefront.db")
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sql")  # sql | redis
REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")

TELEGRAM_API_URL = os.getenv("TELEGRAM_API_URL", "https://api.telegram.org")
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN", "")
TELEGRAM_CHAT_ID = os.getenv("TELEGRAM_CHAT_ID", "")
NOTIFY_TIMEOUT_SECONDS = float(os.getenv("NOTIFY_TIMEOUT_SECONDS", 10))
NOTIFY_RETRY_ATTEMPTS = int(os.getenv("NOTIFY_RETRY_ATTEMPTS", 1))

ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "1234")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
