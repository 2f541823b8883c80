import os
from dotenv import load_dotenv

load_dotenv()

class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Tokens are minted by the identity provider; we only verify them.
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-jwt-secret")
    JWT_IDENTITY_CLAIM = "sub"
    JWT_DECODE_AUDIENCE = os.getenv("JWT_DECODE_AUDIENCE") or None
    JWT_TOKEN_LOCATION = ["headers"]

    STORAGE_URL = os.getenv("STORAGE_URL", "")
    STORAGE_SERVICE_KEY = os.getenv("STORAGE_SERVICE_KEY", "")
    STORAGE_BUCKET = os.getenv("STORAGE_BUCKET", "images")
    MAX_IMAGE_BYTES = 5 * 1024 * 1024

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///sitecms-dev.db")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    JWT_DECODE_AUDIENCE = None
    STORAGE_URL = "https://storage.test"
    STORAGE_SERVICE_KEY = "test-key"

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")
    JWT_DECODE_AUDIENCE = os.getenv("JWT_DECODE_AUDIENCE", "authenticated")

config_by_name = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig
}
