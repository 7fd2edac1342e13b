import os
from dotenv import load_dotenv

load_dotenv()

APP_ENV: str = os.getenv("APP_ENV", "development")
CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Simulated latency before the sample transactions appear
SEED_ON_STARTUP: bool = os.getenv("SEED_ON_STARTUP", "true").lower() in ("1", "true", "yes")
SEED_DELAY_SECONDS: float = float(os.getenv("SEED_DELAY_SECONDS", "1.0"))


def is_production() -> bool:
    return APP_ENV == "production"


def get_cors_origins() -> list[str]:
    if not CORS_ORIGINS:
        return []
    return [origin.strip() for origin in CORS_ORIGINS.split(",") if origin.strip()]
