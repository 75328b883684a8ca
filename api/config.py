"""
Environment-aware configuration.
Secrets and token lifetimes live here and are handed to the security
helpers explicitly by the request handlers.
"""
import os
from dotenv import load_dotenv
from datetime import timedelta

load_dotenv()  # Read .env if present


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")  # Set a strong key in production
    DEBUG = False
    TESTING = False
    # CORS: in dev we usually allow '*', in prod supply a comma-separated list in env
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    APP_ENV = os.getenv("APP_ENV", "dev")
    # "dev" unlocks POST /admin/reset
    PLATFORM = os.getenv("PLATFORM", "prod")
    # jwt configurations
    JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me-to-a-long-random-value")
    ACCESS_TOKEN_EXPIRES = timedelta(seconds=int(os.getenv("ACCESS_TOKEN_EXPIRES_SECONDS", "3600")))
    REFRESH_TOKEN_EXPIRES = timedelta(days=int(os.getenv("REFRESH_TOKEN_EXPIRES_DAYS", "60")))
    # Partner webhook key (Authorization: ApiKey <key>)
    POLKA_KEY = os.getenv("POLKA_KEY", "")
    # Directory served under /app/
    STATIC_ROOT = os.getenv(
        "STATIC_ROOT", os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")
    )


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    PLATFORM = os.getenv("PLATFORM", "dev")


class ProductionConfig(BaseConfig):
    DEBUG = False


class TestingConfig(BaseConfig):
    TESTING = True
    PLATFORM = "dev"
    JWT_SECRET = "test-secret-key-with-enough-bytes-for-hs256"
    POLKA_KEY = "test-polka-key"


def get_config(name: str | None):
    """
    Select config class.
    - If name is provided, choose by name.
    - Else choose based on APP_ENV (dev/prod/testing).
    """
    env = (name or os.getenv("APP_ENV", "dev")).lower()
    if env in ["prod", "production"]:
        return ProductionConfig
    if env in ["test", "testing"]:
        return TestingConfig
    return DevelopmentConfig
