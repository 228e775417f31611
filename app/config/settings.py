import os
from dotenv import load_dotenv
from pathlib import Path

# Loads the .env manually when running outside Docker
if not os.getenv("RUNNING_IN_DOCKER"):
    dotenv_path = Path(__file__).resolve().parents[2] / ".env"
    load_dotenv(dotenv_path=dotenv_path)

# Connection settings (PostgreSQL)
DB_CONFIG = {
    'database': os.getenv('DB_NAME'),
    'user': os.getenv('DB_USER'),
    'password': os.getenv('DB_PASSWORD'),
    'host': os.getenv('DB_HOST'),
    'port': int(os.getenv('DB_PORT', 5432)),
}

# Optional database SSL
DB_SSL_MODE = os.getenv('DB_SSL_MODE')  # e.g.: require, verify-ca, verify-full

# Used when the DB_* variables are not all set
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./cornerstore.db")

# Seeds the baseline categories/products/cashiers/orders on an empty store
SEED_DATABASE = os.getenv("SEED_DATABASE", "true").lower() in ("1", "true", "yes")

# CORS
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
CORS_ALLOW_ALL = os.getenv("CORS_ALLOW_ALL", "false").lower() in ("1", "true", "yes")

# FastAPI / App
BASE_URL = os.getenv("BASE_URL", "")
ENABLE_DOCS = os.getenv("ENABLE_DOCS", "true").lower() in ("1", "true", "yes")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
