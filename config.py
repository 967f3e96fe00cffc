import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./household_access.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    INVITATION_TTL_HOURS = int(data.get("INVITATION_TTL_HOURS", 72))
    DEFAULT_MAX_MEMBERS = int(data.get("DEFAULT_MAX_MEMBERS", 10))
    DEFAULT_LOW_STOCK_THRESHOLD = int(data.get("DEFAULT_LOW_STOCK_THRESHOLD", 2))
    INVITE_CODE_TTL_DAYS = int(data.get("INVITE_CODE_TTL_DAYS", 30))
