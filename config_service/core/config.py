"""Application configuration and settings."""
import os
from dotenv import load_dotenv
from sqlalchemy.engine import URL

# Load environment variables from .env (if present)
load_dotenv()

# Database connection parts (defaults match the docker-compose service)
DB_HOST = os.getenv("DB_HOST", "database")
DB_NAME = os.getenv("DB_NAME", "config_db")
DB_USER = os.getenv("DB_USER", "config_user")
DB_PASSWORD = os.getenv("DB_PASSWORD", "secure_password")
DB_PORT = int(os.getenv("DB_PORT", "5432"))


def build_database_url() -> str:
    """DATABASE_URL wins; otherwise assemble a PostgreSQL URL from the DB_* parts."""
    explicit_url = os.getenv("DATABASE_URL")
    if explicit_url:
        return explicit_url
    return URL.create(
        "postgresql+psycopg2",
        username=DB_USER,
        password=DB_PASSWORD,
        host=DB_HOST,
        port=DB_PORT,
        database=DB_NAME,
    ).render_as_string(hide_password=False)


SQLALCHEMY_DATABASE_URL = build_database_url()

# HTTP server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

# Logging
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS allow-list, comma separated
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173",
    ).split(",")
    if origin.strip()
]

# Pagination defaults
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
# Largest accepted page/limit; keeps (page - 1) * limit inside a signed 64-bit OFFSET
MAX_PAGINATION_VALUE = 2 ** 31 - 1
